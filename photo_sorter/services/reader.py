"""Directory listing and metadata reading."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable

from ..core.config import IMAGE_EXTENSIONS
from ..core.errors import DirectoryNotFound, ExtractionError, PermissionDenied
from ..core.models import DirectoryListing, PhotoEntry
from ..core.protocols import MetadataExtractor, ProgressReporter


def is_supported_file(path: Path, extensions: Iterable[str] = IMAGE_EXTENSIONS) -> bool:
    """Check if path is a regular file with a supported extension."""
    if path.is_dir():
        return False
    return path.suffix.lower() in extensions


def list_photos(
    directory: Path,
    extensions: Iterable[str] = IMAGE_EXTENSIONS,
) -> DirectoryListing:
    """List supported photos directly inside a directory.

    Sub-directories are not descended into. Paths are sorted by name.

    Raises:
        DirectoryNotFound: Path is missing or not a directory.
        PermissionDenied: Directory cannot be listed.
    """
    if not directory.exists():
        raise DirectoryNotFound(directory)
    if not directory.is_dir():
        raise DirectoryNotFound(directory, "is not a folder")

    extensions = frozenset(extensions)
    try:
        entries = list(directory.iterdir())
    except PermissionError as e:
        raise PermissionDenied(directory) from e

    photos = sorted(
        (entry for entry in entries if is_supported_file(entry, extensions)),
        key=lambda p: p.name,
    )
    return DirectoryListing(directory=directory, paths=tuple(photos))


class MetadataReader:
    """Reads capture timestamps for every photo in a directory.

    A file whose timestamp cannot be extracted is kept with
    ``timestamp=None``; the batch is never aborted for a single file.
    """

    def __init__(
        self,
        extractor: MetadataExtractor,
        progress: ProgressReporter,
        extensions: Iterable[str] = IMAGE_EXTENSIONS,
    ):
        """Initialize the reader.

        Args:
            extractor: Source of capture timestamps.
            progress: Reporter for progress and per-file warnings.
            extensions: File extensions to consider.
        """
        self._extractor = extractor
        self._progress = progress
        self._extensions = frozenset(extensions)

    def list_directory(self, directory: Path) -> DirectoryListing:
        return list_photos(directory, self._extensions)

    def read(self, directory: Path) -> list[PhotoEntry]:
        """List the directory and extract a timestamp for each photo."""
        return self.read_listing(self.list_directory(directory))

    def read_listing(self, listing: DirectoryListing) -> list[PhotoEntry]:
        entries: list[PhotoEntry] = []

        self._progress.start_phase("Reading metadata", len(listing))
        try:
            for path in listing:
                entries.append(self._read_one(path))
                self._progress.advance_phase()
        finally:
            self._progress.end_phase()

        return entries

    def _read_one(self, path: Path) -> PhotoEntry:
        try:
            timestamp = self._extractor.extract_datetime(path)
        except ExtractionError as e:
            self._progress.debug(f"No timestamp for {path.name}: {e.reason}")
            return PhotoEntry(path=path, error=e.reason)

        self._progress.debug(f"{path.name}: {timestamp:%Y-%m-%d %H:%M:%S}")
        return PhotoEntry(path=path, timestamp=timestamp)
