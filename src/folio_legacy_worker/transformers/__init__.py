"""Transformers producing derivatives of renamed page assets."""

from .pdf_thumbnail_generator import PDFThumbnailGenerator
from .thumbnail_generator import ThumbnailGenerator

__all__ = ["ThumbnailGenerator", "PDFThumbnailGenerator"]
