"""Run-level driver over every issue directory below a root directory."""

import logging
import time

from schemas.config import WorkerConfig
from schemas.report import RunSummary

from ..config import validate_config
from ..scanners import DirectoryScanner
from .issue_processor import IssueProcessor

logger = logging.getLogger(__name__)


class LegacyWorker:
    """Process all issue directories of a run, one at a time.

    A failed issue does not stop the run unless ``config.fail_fast`` is set.

    Attributes:
        config: Validated run configuration
        scanner: DirectoryScanner for the root directory
        processor: IssueProcessor applied to each issue directory
    """

    def __init__(
        self,
        config: WorkerConfig,
        scanner: DirectoryScanner | None = None,
        processor: IssueProcessor | None = None,
    ):
        self.config = validate_config(config)
        self.scanner = scanner or DirectoryScanner()
        self.processor = processor or IssueProcessor(config, scanner=self.scanner)

    def run(self) -> RunSummary:
        """Process every issue directory and time the run.

        Returns:
            RunSummary with one IssueReport per directory visited
        """
        start = time.monotonic()
        root_dir = self.config.root_dir
        summary = RunSummary(root_dir=str(root_dir))

        issue_dirs = self.scanner.list_issue_directories(root_dir)
        if not issue_dirs:
            logger.warning(f"No directories found in {root_dir}")

        for issue_dir in issue_dirs:
            report = self.processor.process(issue_dir)
            summary.issues.append(report)
            if not report.ok and self.config.fail_fast:
                logger.error(f"Stopping after failed issue {report.issue} (--fail-fast)")
                summary.aborted = True
                break

        summary.elapsed_seconds = time.monotonic() - start
        logger.info(f"Process took {summary.elapsed_seconds:.3f} seconds")
        logger.info(f"  Completed: {summary.completed}")
        if summary.failed:
            logger.warning(f"  Failed: {summary.failed}")
            for issue in summary.issues:
                if not issue.ok:
                    logger.warning(f"    - {issue.issue}: {issue.error}")
        return summary
