"""PDF page thumbnailer built on PyMuPDF and Pillow.

PyMuPDF rasterizes the first page of the PDF; Pillow converts colour,
resizes, sharpens and writes the JPG.
"""

import logging
from pathlib import Path

import fitz  # PyMuPDF
from PIL import Image, ImageCms, ImageFilter

from schemas.config import ThumbnailSettings

from ..exceptions import ThumbnailGenerationError
from .thumbnail_generator import ThumbnailGenerator

logger = logging.getLogger(__name__)

# Pages are rasterized at this multiple of the thumbnail size, then downsampled.
OVERSAMPLE = 2


class PDFThumbnailGenerator(ThumbnailGenerator):
    """Generate JPG thumbnails from single-page PDFs.

    The PDFThumbnailGenerator:
    1. Rasterizes page 1 (CMYK when a source profile is configured, RGB otherwise)
    2. Converts through the source profile to sRGB, then to the target profile
    3. Resizes to fit ``size`` x ``size``
    4. Sharpens with the configured sigma
    5. Writes a JPG at the configured quality without metadata
    """

    def __init__(self, settings: ThumbnailSettings | None = None) -> None:
        """Initialize the thumbnail generator.

        Args:
            settings: Thumbnail parameters (default: ThumbnailSettings())
        """
        self.settings = settings or ThumbnailSettings()

    def generate(self, pdf_path: Path, output_path: Path) -> Path:
        try:
            img = self._rasterize(pdf_path)
            img = self._convert_color(img)
            img.thumbnail(
                (self.settings.size, self.settings.size), Image.Resampling.LANCZOS
            )
            img = self._sharpen(img)
            self._save(img, output_path)
        except ThumbnailGenerationError:
            raise
        except Exception as e:
            raise ThumbnailGenerationError(
                f"Failed to generate thumbnail for {pdf_path.name}: {e}",
                filename=pdf_path.name,
            ) from e

        logger.debug(f"Wrote thumbnail {output_path.name} for {pdf_path.name}")
        return output_path

    def _rasterize(self, pdf_path: Path) -> Image.Image:
        """Render the first page of a PDF into a Pillow image."""
        doc = fitz.open(str(pdf_path))
        try:
            if len(doc) == 0:
                raise ThumbnailGenerationError(
                    f"PDF has no pages: {pdf_path.name}", filename=pdf_path.name
                )
            page = doc[0]
            longest = max(page.rect.width, page.rect.height)
            scale = (self.settings.size * OVERSAMPLE) / longest
            colorspace = fitz.csCMYK if self.settings.source_profile else fitz.csRGB
            pix = page.get_pixmap(
                matrix=fitz.Matrix(scale, scale), colorspace=colorspace, alpha=False
            )
            mode = "CMYK" if pix.n == 4 else "RGB"
            return Image.frombytes(mode, (pix.width, pix.height), pix.samples)
        finally:
            doc.close()

    def _convert_color(self, img: Image.Image) -> Image.Image:
        """Apply the source profile, move to sRGB, then apply the target profile."""
        srgb = ImageCms.createProfile("sRGB")

        if img.mode == "CMYK" and self.settings.source_profile:
            source = ImageCms.getOpenProfile(str(self.settings.source_profile))
            img = ImageCms.profileToProfile(img, source, srgb, outputMode="RGB")
        elif img.mode != "RGB":
            img = img.convert("RGB")

        if self.settings.target_profile:
            target = ImageCms.getOpenProfile(str(self.settings.target_profile))
            img = ImageCms.profileToProfile(img, srgb, target, outputMode="RGB")
        return img

    def _sharpen(self, img: Image.Image) -> Image.Image:
        radius = self.settings.sharpen_radius or self.settings.sharpen_sigma
        if radius <= 0:
            return img
        return img.filter(ImageFilter.UnsharpMask(radius=radius, percent=100, threshold=0))

    def _save(self, img: Image.Image, output_path: Path) -> None:
        options: dict = {"format": "JPEG", "quality": self.settings.quality}
        if self.settings.target_profile:
            options["icc_profile"] = self.settings.target_profile.read_bytes()
        elif not self.settings.strip_metadata:
            options["icc_profile"] = ImageCms.ImageCmsProfile(
                ImageCms.createProfile("sRGB")
            ).tobytes()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        img.save(str(output_path), **options)
