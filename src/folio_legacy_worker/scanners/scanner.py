"""Directory scanner for legacy issue directories.

Finds the issue directories below a root directory and the page assets
inside each issue directory. Entries are returned sorted by name so the
positional (Ringier) page order never depends on the platform's directory
listing order.
"""

import logging
import re
from pathlib import Path

from schemas.asset import AssetFile, AssetType

from ..naming import asset_type_for

logger = logging.getLogger(__name__)

ISSUE_DIR_PATTERN = re.compile(r"si_\d{8}")


def is_issue_directory(path: Path) -> bool:
    """Check whether a path lies within a ``si_<YYYYMMDD>`` issue directory."""
    return any(ISSUE_DIR_PATTERN.match(part) for part in path.parts)


class DirectoryScanner:
    """Enumerate issue directories and their PDF/JPG assets."""

    def list_issue_directories(self, root_dir: Path) -> list[Path]:
        """List the immediate subdirectories of a root directory.

        Does not recurse. Pseudo-entries and anything that is not a
        directory are skipped.

        Args:
            root_dir: Directory containing issue directories

        Returns:
            Subdirectory paths sorted by name
        """
        issue_dirs = [
            entry
            for entry in sorted(root_dir.iterdir(), key=lambda p: p.name)
            if entry.name not in (".", "..") and entry.is_dir()
        ]
        logger.debug(f"Found {len(issue_dirs)} directories in {root_dir}")
        return issue_dirs

    def list_assets(self, issue_dir: Path, asset_type: AssetType) -> list[AssetFile]:
        """List the assets of one type inside an issue directory.

        A file qualifies when it is a regular file whose extension matches
        ``asset_type`` case-insensitively. Directories that are not
        ``si_<YYYYMMDD>`` issue directories yield no assets.

        Args:
            issue_dir: Issue directory to scan
            asset_type: PDF or JPG

        Returns:
            Assets sorted by filename
        """
        if not is_issue_directory(issue_dir):
            logger.warning(f"{issue_dir} is not an issue directory (si_YYYYMMDD)")
            return []

        assets = [
            AssetFile(path=entry.absolute(), asset_type=asset_type)
            for entry in sorted(issue_dir.iterdir(), key=lambda p: p.name)
            if entry.is_file() and asset_type_for(entry.name) is asset_type
        ]
        logger.debug(f"Found {len(assets)} {asset_type.value} assets in {issue_dir}")
        return assets
