"""Base class for thumbnail generators."""

from abc import ABC, abstractmethod
from pathlib import Path


class ThumbnailGenerator(ABC):
    """Abstract base class for PDF page thumbnailers.

    The IssueProcessor only depends on this interface, so tests can inject a
    fake that never touches an imaging library.
    """

    @abstractmethod
    def generate(self, pdf_path: Path, output_path: Path) -> Path:
        """Render a JPG thumbnail of the first page of a PDF.

        Args:
            pdf_path: Path to the source PDF page
            output_path: Path of the JPG to write (overwritten if present)

        Returns:
            Path of the written thumbnail

        Raises:
            ThumbnailGenerationError: If the PDF cannot be rendered or the
                JPG cannot be written
        """
        pass
