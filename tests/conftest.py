"""Pytest fixtures for FutureFolio legacy worker tests."""

from pathlib import Path

import fitz  # PyMuPDF
import pytest
from PIL import Image

from folio_legacy_worker.transformers import ThumbnailGenerator
from schemas.asset import NamingConvention
from schemas.config import BACKGROUND_IMAGES, WorkerConfig


def make_pdf(path: Path, pages: int = 1) -> Path:
    """Write a minimal PDF with *pages* pages to *path*."""
    doc = fitz.open()
    for i in range(pages):
        page = doc.new_page(width=595, height=842)
        page.insert_text((50, 100), f"Page {i + 1} content")
    doc.save(str(path))
    doc.close()
    return path


def make_jpg(path: Path) -> Path:
    """Write a small JPG to *path*."""
    Image.new("RGB", (40, 60), (200, 10, 10)).save(str(path), format="JPEG")
    return path


class FakeThumbnailGenerator(ThumbnailGenerator):
    """Records calls and writes a placeholder file instead of rendering."""

    def __init__(self, fail_on: str | None = None, error: Exception | None = None):
        self.calls: list[tuple[Path, Path]] = []
        self.fail_on = fail_on
        self.error = error

    def generate(self, pdf_path: Path, output_path: Path) -> Path:
        self.calls.append((pdf_path, output_path))
        if self.fail_on == pdf_path.name:
            raise self.error
        output_path.write_bytes(b"thumbnail")
        return output_path


@pytest.fixture
def root_dir(tmp_path: Path) -> Path:
    """Empty root directory for issue directories."""
    root = tmp_path / "legacy"
    root.mkdir()
    return root


@pytest.fixture
def assets_dir(tmp_path: Path) -> Path:
    """Directory holding the four folio background images."""
    assets = tmp_path / "assets"
    assets.mkdir()
    for name in BACKGROUND_IMAGES:
        Image.new("RGB", (4, 4), (0, 0, 0)).save(str(assets / name), format="PNG")
    return assets


@pytest.fixture
def smd_issue(root_dir: Path) -> Path:
    """SMD issue with two PDFs and two JPGs carrying embedded page numbers."""
    issue = root_dir / "si_20100802"
    issue.mkdir()
    for n in ("01", "02"):
        make_pdf(issue / f"si_20100802_1_1_{n}.pdf")
        make_jpg(issue / f"si_20100802_1_1_{n}.jpg")
    return issue


@pytest.fixture
def ringier_issue(root_dir: Path) -> Path:
    """Ringier issue with three PDFs and three JPGs named in page order."""
    issue = root_dir / "si_20110315"
    issue.mkdir()
    for name in ("a_cover", "b_inside", "c_back"):
        make_pdf(issue / f"{name}.pdf")
        make_jpg(issue / f"{name}.jpg")
    return issue


@pytest.fixture
def smd_config(root_dir: Path, assets_dir: Path) -> WorkerConfig:
    return WorkerConfig(
        root_dir=root_dir, convention=NamingConvention.SMD, assets_dir=assets_dir
    )


@pytest.fixture
def ringier_config(root_dir: Path, assets_dir: Path) -> WorkerConfig:
    return WorkerConfig(
        root_dir=root_dir, convention=NamingConvention.RINGIER, assets_dir=assets_dir
    )


@pytest.fixture
def fake_thumbnailer() -> FakeThumbnailGenerator:
    return FakeThumbnailGenerator()
