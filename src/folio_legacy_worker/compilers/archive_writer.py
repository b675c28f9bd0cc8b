"""Archive writers for issue packages."""

import logging
import zipfile
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)


class ArchiveWriter(ABC):
    """Abstract base class for package archive writers."""

    @abstractmethod
    def write(
        self,
        archive_path: Path,
        files: list[tuple[str, Path]],
        blobs: list[tuple[str, bytes]],
    ) -> Path:
        """Write an archive, replacing any existing file at archive_path.

        Args:
            archive_path: Path of the archive to create; an existing archive
                is only replaced once the new one is complete
            files: (member name, source path) pairs, written in order
            blobs: (member name, content) pairs, written after ``files``

        Returns:
            Path of the written archive
        """
        pass


class ZipArchiveWriter(ArchiveWriter):
    """Write flat, deflate-compressed zip archives."""

    def __init__(self, compression: int = zipfile.ZIP_DEFLATED):
        self.compression = compression

    def write(
        self,
        archive_path: Path,
        files: list[tuple[str, Path]],
        blobs: list[tuple[str, bytes]],
    ) -> Path:
        # Built beside the target and moved into place, so a failed write
        # leaves any previous archive intact.
        partial = archive_path.with_name(f"{archive_path.name}.part")
        try:
            with zipfile.ZipFile(partial, mode="w", compression=self.compression) as zf:
                for name, source in files:
                    zf.write(source, arcname=name)
                    logger.debug(f"Added {name} to {archive_path.name}")
                for name, content in blobs:
                    zf.writestr(name, content)
                    logger.debug(f"Added {name} to {archive_path.name}")
        except BaseException:
            partial.unlink(missing_ok=True)
            raise
        partial.replace(archive_path)
        return archive_path
