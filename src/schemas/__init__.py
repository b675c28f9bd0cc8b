"""Schema definitions for the FutureFolio legacy worker."""

from .asset import AssetFile, AssetType, NamingConvention, PlannedRename
from .config import BACKGROUND_IMAGES, ManifestSettings, ThumbnailSettings, WorkerConfig
from .report import IssueReport, RenameRecord, RunSummary

__all__ = [
    "AssetFile",
    "AssetType",
    "BACKGROUND_IMAGES",
    "IssueReport",
    "ManifestSettings",
    "NamingConvention",
    "PlannedRename",
    "RenameRecord",
    "RunSummary",
    "ThumbnailSettings",
    "WorkerConfig",
]
