"""Command-line interface for folio-legacy-worker."""

import argparse
import logging
import sys
from pathlib import Path

from folio_legacy_worker.exceptions import OptionValidationError
from folio_legacy_worker.processors import LegacyWorker
from schemas.asset import NamingConvention
from schemas.config import ThumbnailSettings, WorkerConfig

VERSION = "2.1.0"
DEFAULT_ASSETS_DIR = Path("./assets")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stdout,
    )


def build_config(args: argparse.Namespace) -> WorkerConfig:
    """Assemble the immutable run configuration from parsed arguments."""
    if args.ringier:
        convention = NamingConvention.RINGIER
    elif args.smd:
        convention = NamingConvention.SMD
    else:
        convention = None

    return WorkerConfig(
        root_dir=Path(args.dir) if args.dir else None,
        convention=convention,
        thumbnails=args.thumbnails,
        package=args.package,
        assets_dir=args.assets_dir,
        dry_run=args.dry_run,
        fail_fast=args.fail_fast,
        thumbnail=ThumbnailSettings(
            source_profile=args.thumbnail_source_profile,
            target_profile=args.thumbnail_target_profile,
        ),
    )


def run_worker(args: argparse.Namespace) -> int:
    """Rename (and optionally thumbnail and package) every issue directory.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 when every issue completed, 1 otherwise)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        worker = LegacyWorker(build_config(args))
    except OptionValidationError as e:
        logger.error(e.message)
        return 1

    summary = worker.run()
    if summary.aborted:
        logger.error("Run aborted before all issue directories were processed")
    return 0 if summary.failed == 0 else 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="folio-legacy-worker",
        description=(
            "Renames PDFs and JPGs in directories to FutureFolio naming convention. "
            "Expects directories with issues to be named si_<YearMonthDay> "
            "(e.g. si_20100802)."
        ),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"FutureFolio Legacy Worker {VERSION}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--dir",
        type=str,
        default=None,
        help="Working directory containing directories with legacy files",
    )

    convention = parser.add_mutually_exclusive_group()
    convention.add_argument(
        "--ringier",
        action="store_true",
        help="Work on Ringier legacy files (pages numbered by filename order)",
    )
    convention.add_argument(
        "--smd",
        action="store_true",
        help="Work on SMD legacy files (page number embedded in the filename)",
    )

    parser.add_argument(
        "--thumbnails",
        action="store_true",
        help="Generate a 256x256 JPG thumbnail for every renamed PDF",
    )
    parser.add_argument(
        "--package",
        action="store_true",
        help="Write <issue>.zip with pages, backgrounds and manifest.xml next to each issue",
    )
    parser.add_argument(
        "--assets-dir",
        type=Path,
        default=DEFAULT_ASSETS_DIR,
        help=f"Directory holding the folio background images (default: {DEFAULT_ASSETS_DIR})",
    )
    parser.add_argument(
        "--thumbnail-source-profile",
        type=Path,
        default=None,
        help="ICC profile of the CMYK source pages (default: render in RGB)",
    )
    parser.add_argument(
        "--thumbnail-target-profile",
        type=Path,
        default=None,
        help="ICC profile applied to the RGB thumbnails (default: sRGB)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report planned renames without changing any file",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop after the first issue directory that fails",
    )

    args = parser.parse_args(argv)
    return run_worker(args)


if __name__ == "__main__":
    sys.exit(main())
