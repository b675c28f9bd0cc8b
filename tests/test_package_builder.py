"""Tests for the package builder and zip archive writer."""

import zipfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from folio_legacy_worker.compilers import (
    ArchiveWriter,
    ManifestCompiler,
    PackageBuilder,
    ZipArchiveWriter,
)
from folio_legacy_worker.exceptions import PackageWriteError
from schemas.asset import AssetType, PlannedRename
from schemas.config import BACKGROUND_IMAGES


def _renamed(issue: Path, asset_type: AssetType, count: int) -> list[PlannedRename]:
    """Create page-<n> files on disk and matching completed renames."""
    ext = asset_type.value
    plans = []
    for n in range(count):
        target = issue / f"page-{n}.{ext}"
        target.write_bytes(f"{ext} {n}".encode())
        plans.append(
            PlannedRename(
                source=issue / f"legacy-{n}.{ext}",
                target=target,
                asset_type=asset_type,
                page_index=n,
            )
        )
    return plans


@pytest.fixture
def issue_dir(root_dir: Path) -> Path:
    issue = root_dir / "si_20100802"
    issue.mkdir()
    return issue


@pytest.fixture
def backgrounds(assets_dir: Path) -> list[Path]:
    return [assets_dir / name for name in BACKGROUND_IMAGES]


class TestArchivePath:
    def test_sibling_of_issue_directory(self, issue_dir):
        assert PackageBuilder.archive_path_for(issue_dir) == issue_dir.parent / "si_20100802.zip"


class TestPackageBuilderBuild:
    def test_writes_zip_next_to_issue(self, issue_dir, backgrounds):
        pages = _renamed(issue_dir, AssetType.PDF, 2) + _renamed(issue_dir, AssetType.JPG, 2)

        archive = PackageBuilder(backgrounds).build(issue_dir, pages)

        assert archive == issue_dir.parent / "si_20100802.zip"
        assert archive.exists()

    def test_archive_members(self, issue_dir, backgrounds):
        """Pages, backgrounds and manifest.xml are stored flat, in order."""
        pages = _renamed(issue_dir, AssetType.JPG, 2) + _renamed(issue_dir, AssetType.PDF, 2)

        archive = PackageBuilder(backgrounds).build(issue_dir, pages)

        with zipfile.ZipFile(archive) as zf:
            assert zf.namelist() == [
                "page-0.pdf",
                "page-1.pdf",
                "page-0.jpg",
                "page-1.jpg",
                *BACKGROUND_IMAGES,
                "manifest.xml",
            ]
            assert zf.read("page-1.pdf") == b"pdf 1"

    def test_manifest_counts_pdfs_only(self, issue_dir, backgrounds):
        pages = _renamed(issue_dir, AssetType.PDF, 3) + _renamed(issue_dir, AssetType.JPG, 2)

        archive = PackageBuilder(backgrounds).build(issue_dir, pages)

        with zipfile.ZipFile(archive) as zf:
            assert zf.read("manifest.xml") == ManifestCompiler().compile(3)

    def test_pages_sorted_by_index(self, issue_dir, backgrounds):
        pages = list(reversed(_renamed(issue_dir, AssetType.PDF, 11)))

        archive = PackageBuilder(backgrounds).build(issue_dir, pages)

        with zipfile.ZipFile(archive) as zf:
            pdfs = [n for n in zf.namelist() if n.endswith(".pdf")]
        assert pdfs == [f"page-{n}.pdf" for n in range(11)]

    def test_includes_thumbnails(self, issue_dir, backgrounds):
        pages = _renamed(issue_dir, AssetType.PDF, 1)
        thumb = issue_dir / "page-0.jpg"
        thumb.write_bytes(b"thumb")

        archive = PackageBuilder(backgrounds).build(issue_dir, pages, [thumb])

        with zipfile.ZipFile(archive) as zf:
            assert zf.read("page-0.jpg") == b"thumb"

    def test_overwrites_existing_archive(self, issue_dir, backgrounds):
        stale = issue_dir.parent / "si_20100802.zip"
        stale.write_bytes(b"not a zip")
        pages = _renamed(issue_dir, AssetType.PDF, 1)

        archive = PackageBuilder(backgrounds).build(issue_dir, pages)

        assert zipfile.is_zipfile(archive)

    def test_missing_background_raises(self, issue_dir, backgrounds):
        backgrounds[0].unlink()
        pages = _renamed(issue_dir, AssetType.PDF, 1)

        with pytest.raises(PackageWriteError) as exc_info:
            PackageBuilder(backgrounds).build(issue_dir, pages)

        assert exc_info.value.issue == "si_20100802"
        assert exc_info.value.filename == BACKGROUND_IMAGES[0]

    def test_writer_failure_raises_package_error(self, issue_dir, backgrounds):
        writer = MagicMock(spec=ArchiveWriter)
        writer.write.side_effect = OSError("disk full")
        pages = _renamed(issue_dir, AssetType.PDF, 1)

        with pytest.raises(PackageWriteError, match="disk full"):
            PackageBuilder(backgrounds, archive_writer=writer).build(issue_dir, pages)

    def test_uses_injected_writer(self, issue_dir, backgrounds):
        writer = MagicMock(spec=ArchiveWriter)
        pages = _renamed(issue_dir, AssetType.PDF, 2)

        PackageBuilder(backgrounds, archive_writer=writer).build(issue_dir, pages)

        archive_path, files, blobs = writer.write.call_args.args
        assert archive_path == issue_dir.parent / "si_20100802.zip"
        assert [name for name, _ in files][:2] == ["page-0.pdf", "page-1.pdf"]
        assert blobs == [("manifest.xml", ManifestCompiler().compile(2))]


class TestZipArchiveWriter:
    def test_writes_files_then_blobs(self, tmp_path):
        source = tmp_path / "a.txt"
        source.write_text("alpha")
        archive = tmp_path / "out.zip"

        ZipArchiveWriter().write(archive, [("a.txt", source)], [("b.xml", b"<b/>")])

        with zipfile.ZipFile(archive) as zf:
            assert zf.namelist() == ["a.txt", "b.xml"]
            assert zf.getinfo("a.txt").compress_type == zipfile.ZIP_DEFLATED
            assert zf.read("b.xml") == b"<b/>"

    def test_failed_write_keeps_previous_archive(self, tmp_path):
        """A write that fails part-way leaves the old archive and no partial file."""
        archive = tmp_path / "si_20100802.zip"
        source = tmp_path / "a.txt"
        source.write_text("alpha")
        ZipArchiveWriter().write(archive, [("a.txt", source)], [])
        previous = archive.read_bytes()

        with pytest.raises(FileNotFoundError):
            ZipArchiveWriter().write(
                archive,
                [("a.txt", source), ("gone.txt", tmp_path / "gone.txt")],
                [("manifest.xml", b"<manifest/>")],
            )

        assert archive.read_bytes() == previous
        assert sorted(p.name for p in tmp_path.iterdir()) == ["a.txt", "si_20100802.zip"]

    def test_replaces_existing_archive(self, tmp_path):
        archive = tmp_path / "out.zip"
        archive.write_bytes(b"stale")
        source = tmp_path / "a.txt"
        source.write_text("alpha")

        ZipArchiveWriter().write(archive, [("a.txt", source)], [])

        with zipfile.ZipFile(archive) as zf:
            assert zf.namelist() == ["a.txt"]
        assert not (tmp_path / "out.zip.part").exists()
