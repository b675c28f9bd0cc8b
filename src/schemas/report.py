"""Per-issue and per-run result schemas."""

from typing import Literal

from pydantic import BaseModel

from .asset import NamingConvention


class RenameRecord(BaseModel):
    """One rename performed (or planned, on a dry run)."""

    source: str
    target: str


class IssueReport(BaseModel):
    """Outcome of processing one issue directory.

    Attributes:
        issue: Issue directory name (e.g., "si_20100802")
        path: Absolute path to the issue directory
        convention: Naming convention used
        status: "completed" or "failed"
        pdf_count: Number of PDF assets found
        jpg_count: Number of JPG assets found
        thumbnail_count: Number of thumbnails written
        renames: Renames performed, in order
        package_path: Path of the written archive, if any
        dry_run: True when nothing was written
        error: Diagnostic for a failed issue
        error_type: Exception class name for a failed issue
        offending_file: File that caused the failure, if known
    """

    issue: str
    path: str
    convention: NamingConvention
    status: Literal["completed", "failed"] = "completed"
    pdf_count: int = 0
    jpg_count: int = 0
    thumbnail_count: int = 0
    renames: list[RenameRecord] = []
    package_path: str | None = None
    dry_run: bool = False
    error: str | None = None
    error_type: str | None = None
    offending_file: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "completed"


class RunSummary(BaseModel):
    """Outcome of a whole run over a root directory."""

    root_dir: str
    issues: list[IssueReport] = []
    elapsed_seconds: float = 0.0
    aborted: bool = False

    @property
    def completed(self) -> int:
        return sum(1 for issue in self.issues if issue.ok)

    @property
    def failed(self) -> int:
        return sum(1 for issue in self.issues if not issue.ok)
