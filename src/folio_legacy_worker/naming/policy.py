"""Page naming policy for FutureFolio issues.

Maps a legacy asset filename to its FutureFolio name, ``page-<n>.<ext>``,
where ``n`` is a zero-based page index. The index comes either from the
asset's position in sorted filename order (Ringier) or from the page number
embedded in the filename (SMD, one-based in the source).
"""

import logging
import re
from collections.abc import Sequence
from pathlib import Path

from schemas.asset import AssetFile, AssetType, NamingConvention, PlannedRename

from ..exceptions import PageSequenceError, PatternMismatchError, RenameCollisionError

logger = logging.getLogger(__name__)

SMD_PAGE_PATTERN = re.compile(
    r"si_\d{8}_\d_\d_(\d{1,3})\.(pdf|jpg)$", re.IGNORECASE
)

EXTENSIONS = {
    AssetType.PDF: "pdf",
    AssetType.JPG: "jpg",
}


def resolve_page_index(
    convention: NamingConvention, original_filename: str, encounter_index: int
) -> int:
    """Derive the zero-based page index of an asset.

    Args:
        convention: Naming convention of the source files
        original_filename: Name of the legacy file (no directory part)
        encounter_index: Zero-based position of the file in sorted order

    Returns:
        Zero-based page index

    Raises:
        PatternMismatchError: SMD filename without an embedded one-based
            page number
    """
    if convention is NamingConvention.RINGIER:
        return encounter_index
    if convention is NamingConvention.SMD:
        m = SMD_PAGE_PATTERN.search(original_filename)
        if m is None:
            raise PatternMismatchError(original_filename, SMD_PAGE_PATTERN.pattern)
        if int(m.group(1)) == 0:
            raise PatternMismatchError(
                original_filename,
                SMD_PAGE_PATTERN.pattern,
                reason=f"has page number {m.group(1)}, which is not one-based",
            )
        return int(m.group(1)) - 1
    raise ValueError(f"Unknown naming convention: {convention!r}")


def target_filename(page_index: int, asset_type: AssetType) -> str:
    """Build the FutureFolio filename for a page."""
    return f"page-{page_index}.{EXTENSIONS[asset_type]}"


def asset_type_for(filename: str) -> AssetType | None:
    """Classify a filename by its (case-insensitive) extension."""
    suffix = Path(filename).suffix.lower()
    for asset_type, ext in EXTENSIONS.items():
        if suffix == f".{ext}":
            return asset_type
    return None


def plan_renames(
    convention: NamingConvention, assets: Sequence[AssetFile]
) -> list[PlannedRename]:
    """Resolve every asset of one type to its target path.

    Nothing on disk is touched. Each asset's page_index and convention are
    filled in as a side effect.

    Args:
        convention: Naming convention of the source files
        assets: Assets of a single type, in sorted filename order

    Returns:
        Planned renames in the same order as ``assets``

    Raises:
        PatternMismatchError: An SMD filename carries no page number
        RenameCollisionError: Two assets resolve to the same target
        PageSequenceError: The resolved page indices are not 0..N-1
    """
    plans: list[PlannedRename] = []
    claimed: dict[Path, Path] = {}

    for encounter_index, asset in enumerate(assets):
        page_index = resolve_page_index(convention, asset.name, encounter_index)

        target = asset.path.with_name(target_filename(page_index, asset.asset_type))
        if target in claimed:
            raise RenameCollisionError(
                f"{asset.name} and {claimed[target].name} both resolve to {target.name}",
                target=target.name,
                filename=asset.name,
            )
        claimed[target] = asset.path

        asset.page_index = page_index
        asset.convention = convention
        plans.append(
            PlannedRename(
                source=asset.path,
                target=target,
                asset_type=asset.asset_type,
                page_index=page_index,
            )
        )
        logger.debug(f"Planned {asset.name} -> {target.name}")

    for expected, plan in enumerate(sorted(plans, key=lambda p: p.page_index)):
        if plan.page_index != expected:
            raise PageSequenceError(
                plan.source.name, SMD_PAGE_PATTERN.pattern, missing_page=expected
            )

    return plans
