"""Naming policy for legacy page assets."""

from .policy import (
    SMD_PAGE_PATTERN,
    asset_type_for,
    plan_renames,
    resolve_page_index,
    target_filename,
)

__all__ = [
    "SMD_PAGE_PATTERN",
    "asset_type_for",
    "plan_renames",
    "resolve_page_index",
    "target_filename",
]
