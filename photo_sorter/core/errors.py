"""Exception hierarchy for the sorter."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional


class PhotoSorterError(Exception):
    """Base class for all sorter errors."""


class DirectoryError(PhotoSorterError):
    """The target directory cannot be used. Always fatal."""

    def __init__(self, path: Path, message: str):
        super().__init__(message)
        self.path = path


class DirectoryNotFound(DirectoryError):
    """Target path does not exist or is not a directory."""

    def __init__(self, path: Path, reason: str = "is not found"):
        super().__init__(path, f"Path {path} {reason}.")


class PermissionDenied(DirectoryError):
    """Target directory cannot be listed."""

    def __init__(self, path: Path):
        super().__init__(path, f"Permission denied: {path}")


class ExtractionError(PhotoSorterError):
    """No capture timestamp could be read from a file."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"{path.name}: {reason}")
        self.path = path
        self.reason = reason


class MissingMetadata(PhotoSorterError):
    """One or more files have no capture timestamp."""

    def __init__(self, paths: Iterable[Path]):
        self.paths = tuple(paths)
        names = ", ".join(p.name for p in self.paths)
        super().__init__(f"No capture timestamp for {len(self.paths)} file(s): {names}")


class RenameFailed(PhotoSorterError):
    """A single rename was rejected."""

    def __init__(self, source: Path, target: Path, reason: Optional[str] = None):
        message = f"Failed to rename {source.name} -> {target.name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.source = source
        self.target = target
