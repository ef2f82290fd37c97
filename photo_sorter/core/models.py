"""Domain models - immutable data classes."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional

from .config import RunMode


class RenameAction(Enum):
    """What happened to a file."""
    PLANNED = "planned"
    RENAMED = "renamed"
    REVERTED = "reverted"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class PhotoEntry:
    """A photo in the target directory and its place in the order."""
    path: Path
    timestamp: Optional[datetime] = None
    ordinal: Optional[int] = None
    error: Optional[str] = None

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def has_timestamp(self) -> bool:
        return self.timestamp is not None

    def with_ordinal(self, ordinal: int) -> "PhotoEntry":
        return replace(self, ordinal=ordinal)


@dataclass(frozen=True, slots=True)
class DirectoryListing:
    """Files found in the target directory at invocation time."""
    directory: Path
    paths: tuple[Path, ...] = field(default_factory=tuple)

    @property
    def names(self) -> list[str]:
        return [p.name for p in self.paths]

    def __len__(self) -> int:
        return len(self.paths)

    def __iter__(self):
        return iter(self.paths)


@dataclass(frozen=True, slots=True)
class RenameResult:
    """Result of handling a single file."""
    source: Path
    action: RenameAction
    target: Optional[Path] = None
    ordinal: Optional[int] = None
    error: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.action != RenameAction.FAILED


@dataclass(slots=True)
class RunStats:
    """Mutable statistics for a run."""
    total_files: int = 0
    missing_metadata: int = 0
    planned: int = 0
    renamed: int = 0
    reverted: int = 0
    skipped: int = 0
    errors: int = 0
    elapsed_seconds: float = 0.0

    def record(self, result: RenameResult) -> None:
        """Record a rename result."""
        match result.action:
            case RenameAction.PLANNED:
                self.planned += 1
            case RenameAction.RENAMED:
                self.renamed += 1
            case RenameAction.REVERTED:
                self.reverted += 1
            case RenameAction.SKIPPED:
                self.skipped += 1
            case RenameAction.FAILED:
                self.errors += 1

    def summary(self) -> dict[str, int]:
        return {
            "total": self.total_files,
            "missing_metadata": self.missing_metadata,
            "planned": self.planned,
            "renamed": self.renamed,
            "reverted": self.reverted,
            "skipped": self.skipped,
            "errors": self.errors,
        }


@dataclass(slots=True)
class RunReport:
    """Everything a run produced."""
    mode: RunMode
    entries: list[PhotoEntry] = field(default_factory=list)
    results: list[RenameResult] = field(default_factory=list)
    stats: RunStats = field(default_factory=RunStats)

    @property
    def failures(self) -> list[RenameResult]:
        return [r for r in self.results if not r.is_success]

    @property
    def exit_code(self) -> int:
        return 0 if not self.failures else 1
