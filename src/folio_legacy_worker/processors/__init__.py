"""Processors for issue directories and whole runs."""

from .issue_processor import IssueProcessor
from .legacy_worker import LegacyWorker

__all__ = ["IssueProcessor", "LegacyWorker"]
