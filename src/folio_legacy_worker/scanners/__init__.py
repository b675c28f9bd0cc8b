"""Scanners for issue directories and page assets."""

from .scanner import ISSUE_DIR_PATTERN, DirectoryScanner, is_issue_directory

__all__ = ["DirectoryScanner", "ISSUE_DIR_PATTERN", "is_issue_directory"]
