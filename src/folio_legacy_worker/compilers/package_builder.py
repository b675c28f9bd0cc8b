"""Package builder for FutureFolio issue archives.

Assembles ``<issue>.zip`` next to the issue directory from the renamed
pages, the four background images and a freshly compiled manifest.xml.
"""

import logging
from pathlib import Path

from schemas.asset import AssetType, PlannedRename

from ..exceptions import PackageWriteError
from .archive_writer import ArchiveWriter, ZipArchiveWriter
from .manifest_compiler import MANIFEST_NAME, ManifestCompiler

logger = logging.getLogger(__name__)


class PackageBuilder:
    """Build the zip archive for one issue directory.

    Attributes:
        background_images: Paths of the four static background PNGs
        manifest_compiler: Compiler for manifest.xml
        archive_writer: Writer for the archive container
    """

    def __init__(
        self,
        background_images: list[Path],
        manifest_compiler: ManifestCompiler | None = None,
        archive_writer: ArchiveWriter | None = None,
    ):
        self.background_images = background_images
        self.manifest_compiler = manifest_compiler or ManifestCompiler()
        self.archive_writer = archive_writer or ZipArchiveWriter()

    @staticmethod
    def archive_path_for(issue_dir: Path) -> Path:
        """Return ``<parent>/<issue name>.zip`` for an issue directory."""
        return issue_dir.parent / f"{issue_dir.name}.zip"

    def build(
        self,
        issue_dir: Path,
        pages: list[PlannedRename],
        thumbnails: list[Path] | None = None,
    ) -> Path:
        """Write the archive for an issue.

        Args:
            issue_dir: Issue directory whose assets were renamed
            pages: Completed renames (PDF and JPG)
            thumbnails: Thumbnails generated from the PDFs, if any

        Returns:
            Path of the written archive

        Raises:
            PackageWriteError: If a member is missing or the archive cannot
                be written
        """
        archive_path = self.archive_path_for(issue_dir)
        pdfs = sorted(
            (p for p in pages if p.asset_type is AssetType.PDF),
            key=lambda p: p.page_index,
        )
        jpgs = sorted(
            (p for p in pages if p.asset_type is AssetType.JPG),
            key=lambda p: p.page_index,
        )

        files: list[tuple[str, Path]] = [(p.target.name, p.target) for p in pdfs]
        files += [(p.target.name, p.target) for p in jpgs]
        member_names = {name for name, _ in files}
        for thumb in thumbnails or []:
            if thumb.name not in member_names:
                files.append((thumb.name, thumb))
        files += [(image.name, image) for image in self.background_images]

        for name, source in files:
            if not source.is_file():
                raise PackageWriteError(
                    f"Cannot package {issue_dir.name}: missing {source}",
                    issue=issue_dir.name,
                    filename=name,
                )

        manifest = self.manifest_compiler.compile(len(pdfs))

        try:
            self.archive_writer.write(archive_path, files, [(MANIFEST_NAME, manifest)])
        except OSError as e:
            raise PackageWriteError(
                f"Failed to write {archive_path}: {e}",
                issue=issue_dir.name,
                filename=archive_path.name,
            ) from e

        logger.info(f"Wrote package {archive_path} ({len(files) + 1} members)")
        return archive_path
