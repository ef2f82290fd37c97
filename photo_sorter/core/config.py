"""Configuration dataclasses with validation."""
from __future__ import annotations

import argparse
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


DEFAULT_DELIMITER = "__"
DEFAULT_PAD_WIDTH = 3
IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".heic", ".heif"})


class RunMode(Enum):
    """What a run does with the resolved order."""
    NORMAL = "normal"  # Apply ordinal prefixes
    TEST = "test"      # Print the order only
    REVERT = "revert"  # Strip ordinal prefixes

    @classmethod
    def from_flags(cls, revert: bool = False, test: bool = False) -> "RunMode":
        """Select the mode for a run. Revert wins over test."""
        if revert:
            return cls.REVERT
        if test:
            return cls.TEST
        return cls.NORMAL


class MissingPolicy(Enum):
    """How to order files without a capture timestamp."""
    LAST = "last"  # After dated files (before them when descending)
    FAIL = "fail"  # Abort before renaming anything


@dataclass(frozen=True, slots=True)
class SorterConfig:
    """Main configuration for a run.

    All fields are validated on construction.
    """
    directory: Path
    mode: RunMode = RunMode.NORMAL
    descending: bool = False
    delimiter: str = DEFAULT_DELIMITER
    pad_width: int = DEFAULT_PAD_WIDTH
    missing_policy: MissingPolicy = MissingPolicy.LAST
    extensions: frozenset[str] = field(default_factory=lambda: IMAGE_EXTENSIONS)

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not self.delimiter:
            raise ValueError("Delimiter is too short.")

        if "/" in self.delimiter or os.sep in self.delimiter:
            raise ValueError(f"Delimiter must not contain a path separator: {self.delimiter!r}")

        # Digits would make the ordinal prefix ambiguous on revert
        if any(ch.isdigit() for ch in self.delimiter):
            raise ValueError(f"Delimiter must not contain digits: {self.delimiter!r}")

        if self.pad_width < 1:
            raise ValueError("Pad width must be at least 1")

        if not self.extensions:
            raise ValueError("At least one file extension is required")

        normalized = frozenset(
            ext.lower() if ext.startswith(".") else f".{ext.lower()}"
            for ext in self.extensions
        )
        object.__setattr__(self, "extensions", normalized)

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "SorterConfig":
        """Build a config from parsed command line arguments."""
        return cls(
            directory=Path(args.directory).expanduser(),
            mode=RunMode.from_flags(revert=args.revert, test=args.test),
            descending=args.desc,
            delimiter=args.delim,
            pad_width=args.pad_width,
            missing_policy=MissingPolicy(args.on_missing),
        )
