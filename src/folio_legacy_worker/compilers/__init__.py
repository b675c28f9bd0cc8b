"""Compilers for issue manifests and packages."""

from .archive_writer import ArchiveWriter, ZipArchiveWriter
from .manifest_compiler import MANIFEST_NAME, ManifestCompiler
from .package_builder import PackageBuilder

__all__ = [
    "ArchiveWriter",
    "MANIFEST_NAME",
    "ManifestCompiler",
    "PackageBuilder",
    "ZipArchiveWriter",
]
