"""Applying, previewing and reverting ordinal prefixes."""
from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO

from ..core.config import DEFAULT_DELIMITER, DEFAULT_PAD_WIDTH
from ..core.errors import RenameFailed
from ..core.models import PhotoEntry, RenameAction, RenameResult
from ..core.protocols import ProgressReporter
from .resolver import prefix_width


def create_prefix(ordinal: int, width: int) -> str:
    """Zero-pad an ordinal. Never truncates."""
    return str(ordinal).zfill(width)


def prefixed_name(name: str, ordinal: int, width: int, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Build ``<ordinal><delimiter><name>``, e.g. ``001__IMG_0001.jpg``."""
    return f"{create_prefix(ordinal, width)}{delimiter}{name}"


def prefix_pattern(delimiter: str = DEFAULT_DELIMITER) -> re.Pattern[str]:
    return re.compile(rf"^(?P<ordinal>[0-9]+){re.escape(delimiter)}(?P<name>.+)$")


def reverted_name(name: str, delimiter: str = DEFAULT_DELIMITER) -> Optional[str]:
    """Strip an ordinal prefix. Returns None if the name carries none."""
    match = prefix_pattern(delimiter).match(name)
    if not match:
        return None
    return match.group("name")


class Renamer:
    """Previews, applies or reverts ordinal prefixes.

    Each file is handled independently: a failed rename is recorded and
    the remaining files are still processed. Nothing is rolled back.
    """

    def __init__(
        self,
        progress: ProgressReporter,
        delimiter: str = DEFAULT_DELIMITER,
        pad_width: int = DEFAULT_PAD_WIDTH,
    ):
        """Initialize the renamer.

        Args:
            progress: Reporter for per-file messages.
            delimiter: String between ordinal and original name.
            pad_width: Minimum number of ordinal digits.
        """
        self._progress = progress
        self._delimiter = delimiter
        self._pad_width = pad_width

    def target_name(self, entry: PhotoEntry, count: int) -> str:
        if entry.ordinal is None:
            raise ValueError(f"Entry has no ordinal: {entry.name}")
        width = prefix_width(count, self._pad_width)
        return prefixed_name(entry.name, entry.ordinal, width, self._delimiter)

    # --- Test mode ---

    def preview(
        self,
        entries: list[PhotoEntry],
        out: Optional[TextIO] = None,
    ) -> list[RenameResult]:
        """Print the resolved order, one line per file. Touches nothing.

        Args:
            entries: Resolved entries, in order.
            out: Stream to write to (default: stdout).
        """
        out = out or sys.stdout
        width = prefix_width(len(entries), self._pad_width)
        results = []

        for entry in entries:
            new_name = self.target_name(entry, len(entries))
            ordinal = create_prefix(entry.ordinal, width)
            print(f"{ordinal}  {entry.name} -> {new_name}", file=out)
            results.append(RenameResult(
                source=entry.path,
                target=entry.path.with_name(new_name),
                action=RenameAction.PLANNED,
                ordinal=entry.ordinal,
            ))

        return results

    # --- Normal mode ---

    def apply(self, entries: list[PhotoEntry]) -> list[RenameResult]:
        """Rename every entry to its prefixed name."""
        results = []

        for entry in entries:
            target = entry.path.with_name(self.target_name(entry, len(entries)))
            try:
                self._rename(entry.path, target)
            except RenameFailed as e:
                self._progress.error(str(e))
                results.append(RenameResult(
                    source=entry.path,
                    target=target,
                    action=RenameAction.FAILED,
                    ordinal=entry.ordinal,
                    error=str(e),
                ))
                continue

            self._progress.info(f"Renamed: {entry.name} -> {target.name}")
            results.append(RenameResult(
                source=entry.path,
                target=target,
                action=RenameAction.RENAMED,
                ordinal=entry.ordinal,
            ))

        return results

    # --- Revert mode ---

    def revert(self, paths: Iterable[Path]) -> list[RenameResult]:
        """Strip ordinal prefixes. Files without one are skipped."""
        results = []

        for path in paths:
            original = reverted_name(path.name, self._delimiter)
            if original is None:
                self._progress.debug(f"Not processed: {path.name}")
                results.append(RenameResult(source=path, action=RenameAction.SKIPPED))
                continue

            target = path.with_name(original)
            try:
                self._rename(path, target)
            except RenameFailed as e:
                self._progress.error(str(e))
                results.append(RenameResult(
                    source=path,
                    target=target,
                    action=RenameAction.FAILED,
                    error=str(e),
                ))
                continue

            self._progress.info(f"Reverted: {path.name} -> {target.name}")
            results.append(RenameResult(
                source=path,
                target=target,
                action=RenameAction.REVERTED,
            ))

        return results

    @staticmethod
    def _rename(source: Path, target: Path) -> None:
        """Rename without ever overwriting.

        Raises:
            RenameFailed: Target exists or the filesystem rejected the rename.
        """
        if target.exists():
            raise RenameFailed(source, target, "target already exists")
        try:
            source.rename(target)
        except OSError as e:
            raise RenameFailed(source, target, e.strerror or str(e)) from e
