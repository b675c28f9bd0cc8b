"""Asset domain objects."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class NamingConvention(str, Enum):
    """Page-numbering scheme of the source legacy files.

    RINGIER assigns page indices by position (sorted filename order).
    SMD reads the page number embedded in the filename.
    """

    RINGIER = "ringier"
    SMD = "smd"


class AssetType(str, Enum):
    """Asset classes found in an issue directory."""

    PDF = "pdf"
    JPG = "jpg"


@dataclass
class AssetFile:
    """A page asset inside an issue directory.

    Attributes:
        path: Absolute path to the file
        asset_type: PDF or JPG
        page_index: Zero-based page index, None until resolved
        convention: Convention the page index was resolved with
    """

    path: Path
    asset_type: AssetType
    page_index: int | None = None
    convention: NamingConvention | None = None

    @property
    def name(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class PlannedRename:
    """A resolved rename of one asset within its issue directory."""

    source: Path
    target: Path
    asset_type: AssetType
    page_index: int

    @property
    def is_noop(self) -> bool:
        return self.source == self.target
