"""Command line interface: prefix photos with their chronological ordinal."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .core.config import (
    DEFAULT_DELIMITER,
    DEFAULT_PAD_WIDTH,
    MissingPolicy,
    RunMode,
    SorterConfig,
)
from .core.errors import DirectoryError, PhotoSorterError
from .core.protocols import MetadataExtractor, ProgressReporter
from .logging.rich_logger import RichProgressReporter, QuietProgressReporter


EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_BAD_DIRECTORY = 2
EXIT_INTERRUPTED = 130


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="photo-sorter",
        description="Rename photos with an ordinal prefix in order of capture time.",
    )
    parser.add_argument(
        "directory",
        type=Path,
        help="Path to directory includes photos",
    )
    parser.add_argument(
        "--desc",
        action="store_true",
        help="Sorts latest to oldest order",
    )
    parser.add_argument(
        "-t", "--test",
        action="store_true",
        help="Test mode that only shows order",
    )
    parser.add_argument(
        "-r", "--revert",
        action="store_true",
        help="Revert renamed files (overrides --test)",
    )
    parser.add_argument(
        "-d", "--delim",
        type=str,
        default=DEFAULT_DELIMITER,
        help=f"Prefix delimiter (default: {DEFAULT_DELIMITER})",
    )
    parser.add_argument(
        "--pad-width",
        type=int,
        default=DEFAULT_PAD_WIDTH,
        help=f"Minimum number of ordinal digits (default: {DEFAULT_PAD_WIDTH})",
    )
    parser.add_argument(
        "--on-missing",
        type=str,
        choices=[p.value for p in MissingPolicy],
        default=MissingPolicy.LAST.value,
        help="Files without capture time: sort last, or fail the run (default: last)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress non-essential output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def run(
    config: SorterConfig,
    reporter: ProgressReporter,
    extractor: Optional[MetadataExtractor] = None,
) -> int:
    """Run the sorter for a config and return the exit code.

    Args:
        config: Validated run configuration.
        reporter: Progress reporter.
        extractor: Metadata extractor (default: Pillow).
    """
    from .engines.metadata import PillowMetadataExtractor
    from .services.sorter import PhotoSorter, SorterDependencies

    if extractor is None:
        extractor = PillowMetadataExtractor()

    reporter.print_header(f"photo-sorter {config.mode.value}")
    reporter.print_config({
        "Directory": str(config.directory),
        "Mode": config.mode.value,
        "Order": "descending" if config.descending else "ascending",
        "Delimiter": config.delimiter,
        "On Missing": config.missing_policy.value,
    })

    deps = SorterDependencies(metadata_extractor=extractor, progress=reporter)
    try:
        report = PhotoSorter(config=config, deps=deps).run()
    finally:
        extractor.close()

    reporter.print_stats(report.stats)
    reporter.print_failures(report.failures)

    if report.mode is RunMode.TEST and not report.failures:
        reporter.success("Test mode: no files were renamed")
    return report.exit_code


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.quiet:
        reporter = QuietProgressReporter()
    else:
        reporter = RichProgressReporter(verbose=args.verbose)

    try:
        config = SorterConfig.from_args(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        return run(config, reporter)
    except KeyboardInterrupt:
        # Clean exit on Ctrl+C - no stack trace
        return EXIT_INTERRUPTED
    except DirectoryError as e:
        reporter.error(str(e))
        return EXIT_BAD_DIRECTORY
    except PhotoSorterError as e:
        reporter.error(str(e))
        return EXIT_FAILURE
    except Exception as e:
        reporter.error(f"Error: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
