"""Allow ``python -m folio_legacy_worker``."""

import sys

from folio_legacy_worker.cli import main

sys.exit(main())
