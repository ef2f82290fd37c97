"""Main sorter - runs reader, resolver and renamer in sequence."""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional, TextIO

from ..core.config import RunMode, SorterConfig
from ..core.models import DirectoryListing, PhotoEntry, RunReport
from ..core.protocols import MetadataExtractor, ProgressReporter
from .reader import MetadataReader
from .renamer import Renamer
from .resolver import OrderResolver


@dataclass
class SorterDependencies:
    """All dependencies needed by the sorter.

    This is explicitly passed in - no globals or singletons.
    """
    metadata_extractor: MetadataExtractor
    progress: ProgressReporter


class PhotoSorter:
    """Orchestrates one run.

    The mode is fixed at construction:
    - REVERT: strip prefixes from the current listing (no metadata read)
    - TEST: read, resolve, print the order
    - NORMAL: read, resolve, rename

    Directory errors and MissingMetadata (FAIL policy) propagate before
    any file is touched. Per-file rename failures end up in the report.
    """

    def __init__(self, config: SorterConfig, deps: SorterDependencies):
        """Initialize sorter with config and dependencies.

        Args:
            config: Run configuration.
            deps: All required dependencies.
        """
        self._config = config
        self._deps = deps
        self._reader = MetadataReader(
            extractor=deps.metadata_extractor,
            progress=deps.progress,
            extensions=config.extensions,
        )
        self._resolver = OrderResolver(
            descending=config.descending,
            missing_policy=config.missing_policy,
        )
        self._renamer = Renamer(
            progress=deps.progress,
            delimiter=config.delimiter,
            pad_width=config.pad_width,
        )

    @property
    def mode(self) -> RunMode:
        return self._config.mode

    def run(self, out: Optional[TextIO] = None) -> RunReport:
        """Run the pipeline.

        Args:
            out: Stream for the test-mode listing (default: stdout).

        Returns:
            RunReport with resolved entries, per-file results and stats.
        """
        start = time.monotonic()
        report = RunReport(mode=self.mode)
        progress = self._deps.progress

        listing = self._reader.list_directory(self._config.directory)
        report.stats.total_files = len(listing)
        progress.info(f"Found {len(listing)} photo(s) in {self._config.directory}")

        match self.mode:
            case RunMode.REVERT:
                report.results = self._renamer.revert(listing)
            case RunMode.TEST:
                report.entries = self._resolve(listing, report)
                report.results = self._renamer.preview(report.entries, out=out)
            case RunMode.NORMAL:
                report.entries = self._resolve(listing, report)
                report.results = self._renamer.apply(report.entries)

        for result in report.results:
            report.stats.record(result)
        report.stats.elapsed_seconds = time.monotonic() - start
        return report

    def _resolve(self, listing: DirectoryListing, report: RunReport) -> list[PhotoEntry]:
        entries = self._reader.read_listing(listing)

        missing = [e for e in entries if not e.has_timestamp]
        report.stats.missing_metadata = len(missing)
        for entry in missing:
            self._deps.progress.warning(f"No capture timestamp: {entry.name} ({entry.error})")

        return self._resolver.resolve(entries)
