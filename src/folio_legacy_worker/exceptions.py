"""Custom exceptions for the legacy worker."""


class FolioWorkerError(Exception):
    """Base exception for all worker errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class OptionValidationError(FolioWorkerError):
    """Raised before any work starts when a command-line option is invalid."""

    def __init__(self, message: str, option: str | None = None):
        self.option = option
        super().__init__(message)


class IssueProcessingError(FolioWorkerError):
    """Base exception for errors confined to a single issue directory.

    Attributes:
        issue: Issue directory name, attached by the processor if not known
            where the error is raised
        filename: Name of the offending file, if any
    """

    def __init__(
        self,
        message: str,
        issue: str | None = None,
        filename: str | None = None,
    ):
        self.issue = issue
        self.filename = filename
        super().__init__(message)


class EmptyAssetSetError(IssueProcessingError):
    """Raised when an issue directory holds no assets of a required type."""

    def __init__(self, asset_type: str, issue: str, directory: str):
        self.asset_type = asset_type
        super().__init__(
            f"no assets of type {asset_type} found in directory {directory}",
            issue=issue,
        )


class PatternMismatchError(IssueProcessingError):
    """Raised when a filename does not carry the expected page number."""

    def __init__(
        self,
        filename: str,
        pattern: str,
        issue: str | None = None,
        reason: str | None = None,
    ):
        self.pattern = pattern
        reason = reason or f"does not match {pattern}"
        super().__init__(
            f"page-number pattern mismatch: {filename} {reason}",
            issue=issue,
            filename=filename,
        )


class PageSequenceError(PatternMismatchError):
    """Raised when embedded page numbers skip a page."""

    def __init__(
        self, filename: str, pattern: str, missing_page: int, issue: str | None = None
    ):
        self.missing_page = missing_page
        super().__init__(
            filename,
            pattern,
            issue=issue,
            reason=f"follows a gap: no source file for page-{missing_page}",
        )


class RenameCollisionError(IssueProcessingError):
    """Raised when a rename target already exists or is claimed twice."""

    def __init__(
        self,
        message: str,
        target: str,
        issue: str | None = None,
        filename: str | None = None,
    ):
        self.target = target
        super().__init__(message, issue=issue, filename=filename)


class ThumbnailGenerationError(IssueProcessingError):
    """Raised when a thumbnail cannot be rendered from a PDF page."""

    pass


class PackageWriteError(IssueProcessingError):
    """Raised when the issue archive or its manifest cannot be written."""

    pass
