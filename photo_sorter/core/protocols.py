"""Protocol definitions (interfaces) for dependency injection."""
from __future__ import annotations

from abc import abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Protocol

from .models import RenameResult, RunStats


class MetadataExtractor(Protocol):
    """Interface for reading a capture timestamp from a file.

    Implementations:
    - PillowMetadataExtractor: EXIF via Pillow (JPEG, HEIC/HEIF)
    - test doubles returning canned timestamps
    """

    @abstractmethod
    def extract_datetime(self, path: Path) -> datetime:
        """Return the capture timestamp.

        Raises:
            ExtractionError: No usable timestamp in the file.
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Clean up resources."""
        ...


class ProgressReporter(Protocol):
    """Interface for progress reporting."""

    @abstractmethod
    def start_phase(self, name: str, total: int) -> None:
        """Start a new processing phase."""
        ...

    @abstractmethod
    def advance_phase(self, amount: int = 1) -> None:
        """Advance the current phase by an amount."""
        ...

    @abstractmethod
    def end_phase(self) -> None:
        """Complete current phase."""
        ...

    @abstractmethod
    def info(self, message: str) -> None:
        """Log an info message."""
        ...

    @abstractmethod
    def warning(self, message: str) -> None:
        """Log a warning message."""
        ...

    @abstractmethod
    def error(self, message: str) -> None:
        """Log an error message."""
        ...

    @abstractmethod
    def debug(self, message: str) -> None:
        """Log a debug message."""
        ...

    @abstractmethod
    def success(self, message: str) -> None:
        """Log a success message."""
        ...

    @abstractmethod
    def print_header(self, title: str) -> None:
        """Print a styled header."""
        ...

    @abstractmethod
    def print_config(self, config_items: dict) -> None:
        """Print run configuration."""
        ...

    @abstractmethod
    def print_stats(self, stats: RunStats) -> None:
        """Print run statistics."""
        ...

    @abstractmethod
    def print_failures(self, failures: list[RenameResult]) -> None:
        """Print every failed file."""
        ...
