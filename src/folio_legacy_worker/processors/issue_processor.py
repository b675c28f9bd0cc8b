"""Issue processor for a single legacy issue directory.

Runs the same sequence for both naming conventions:

1. Scan: list PDF assets, and JPG assets when they are a required class
2. Resolve: plan every rename before touching the disk
3. Rename: move each asset to ``page-<n>.<ext>`` in place
4. Thumbnail (optional): render ``page-<n>.jpg`` from each renamed PDF
5. Package (optional): write ``<issue>.zip`` next to the issue directory

Renames are not rolled back when a later step fails.
"""

import logging
from pathlib import Path

from schemas.asset import AssetFile, AssetType, PlannedRename
from schemas.config import WorkerConfig
from schemas.report import IssueReport, RenameRecord

from ..compilers import ManifestCompiler, PackageBuilder
from ..exceptions import (
    EmptyAssetSetError,
    IssueProcessingError,
    RenameCollisionError,
)
from ..naming import plan_renames
from ..scanners import DirectoryScanner
from ..transformers import PDFThumbnailGenerator, ThumbnailGenerator

logger = logging.getLogger(__name__)


class IssueProcessor:
    """Process one issue directory end to end.

    Per-issue errors are caught at ``process`` and recorded on the returned
    IssueReport; any other exception propagates.

    Attributes:
        config: Run configuration
        scanner: DirectoryScanner used to list assets
        thumbnail_generator: Renders thumbnails when ``config.thumbnails``
        package_builder: Writes archives when ``config.package``
    """

    def __init__(
        self,
        config: WorkerConfig,
        scanner: DirectoryScanner | None = None,
        thumbnail_generator: ThumbnailGenerator | None = None,
        package_builder: PackageBuilder | None = None,
    ):
        self.config = config
        self.scanner = scanner or DirectoryScanner()
        self.thumbnail_generator = thumbnail_generator or PDFThumbnailGenerator(
            config.thumbnail
        )
        self.package_builder = package_builder or PackageBuilder(
            config.background_images,
            manifest_compiler=ManifestCompiler(config.manifest),
        )

    def process(self, issue_dir: Path) -> IssueReport:
        """Process an issue directory.

        Args:
            issue_dir: Path to the ``si_<YYYYMMDD>`` directory

        Returns:
            IssueReport with status "completed" or "failed"
        """
        logger.info(f"Begin working on Folder {issue_dir}")
        report = IssueReport(
            issue=issue_dir.name,
            path=str(issue_dir),
            convention=self.config.convention,
            dry_run=self.config.dry_run,
        )

        try:
            self._process(issue_dir, report)
        except IssueProcessingError as e:
            if e.issue is None:
                e.issue = issue_dir.name
            report.status = "failed"
            report.error = e.message
            report.error_type = type(e).__name__
            report.offending_file = e.filename
            if e.filename:
                logger.error(f"Issue {e.issue} failed on {e.filename}: {e.message}")
            else:
                logger.error(f"Issue {e.issue} failed: {e.message}")
            return report

        logger.info(
            f"Completed {report.issue}: {report.pdf_count} PDFs, "
            f"{report.jpg_count} JPGs, {report.thumbnail_count} thumbnails"
            + (f", package {report.package_path}" if report.package_path else "")
            + (" (dry run)" if report.dry_run else "")
        )
        return report

    def _process(self, issue_dir: Path, report: IssueReport) -> None:
        pdfs = self._scan(issue_dir, AssetType.PDF)
        jpgs = self._scan(issue_dir, AssetType.JPG) if self.config.require_jpgs else []
        report.pdf_count = len(pdfs)
        report.jpg_count = len(jpgs)

        plans = self._resolve(pdfs) + self._resolve(jpgs)
        self._check_targets(issue_dir, plans)

        if self.config.dry_run:
            report.renames = [self._record(p) for p in plans]
            for plan in plans:
                logger.info(f"Would rename {plan.source.name} -> {plan.target.name}")
            return

        self._rename(issue_dir, plans, report)

        thumbnails: list[Path] = []
        if self.config.thumbnails:
            thumbnails = self._generate_thumbnails(issue_dir, plans)
            report.thumbnail_count = len(thumbnails)

        if self.config.package:
            archive = self.package_builder.build(issue_dir, plans, thumbnails)
            report.package_path = str(archive)

    def _scan(self, issue_dir: Path, asset_type: AssetType) -> list[AssetFile]:
        assets = self.scanner.list_assets(issue_dir, asset_type)
        if not assets:
            raise EmptyAssetSetError(
                asset_type.value.upper(), issue=issue_dir.name, directory=str(issue_dir)
            )
        return assets

    def _resolve(self, assets: list[AssetFile]) -> list[PlannedRename]:
        if not assets:
            return []
        return plan_renames(self.config.convention, assets)

    def _check_targets(self, issue_dir: Path, plans: list[PlannedRename]) -> None:
        """Fail before any rename if a target is occupied by another file."""
        for plan in plans:
            if not plan.is_noop and plan.target.exists():
                raise RenameCollisionError(
                    f"Cannot rename {plan.source.name}: {plan.target.name} already exists",
                    target=plan.target.name,
                    issue=issue_dir.name,
                    filename=plan.source.name,
                )

    def _rename(
        self, issue_dir: Path, plans: list[PlannedRename], report: IssueReport
    ) -> None:
        for plan in plans:
            if plan.is_noop:
                logger.debug(f"{plan.source.name} already named, skipping")
                continue
            if plan.target.exists():
                raise RenameCollisionError(
                    f"Cannot rename {plan.source.name}: {plan.target.name} already exists",
                    target=plan.target.name,
                    issue=issue_dir.name,
                    filename=plan.source.name,
                )
            plan.source.rename(plan.target)
            report.renames.append(self._record(plan))
            logger.debug(f"Renamed {plan.source.name} -> {plan.target.name}")

    def _generate_thumbnails(
        self, issue_dir: Path, plans: list[PlannedRename]
    ) -> list[Path]:
        thumbnails = []
        for plan in plans:
            if plan.asset_type is not AssetType.PDF:
                continue
            output = plan.target.with_suffix(".jpg")
            try:
                thumbnails.append(self.thumbnail_generator.generate(plan.target, output))
            except IssueProcessingError as e:
                e.issue = issue_dir.name
                e.filename = e.filename or plan.target.name
                raise
        return thumbnails

    @staticmethod
    def _record(plan: PlannedRename) -> RenameRecord:
        return RenameRecord(source=plan.source.name, target=plan.target.name)
