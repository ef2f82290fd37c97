"""Core domain models and protocols."""
from .protocols import (
    MetadataExtractor,
    ProgressReporter,
)
from .models import (
    PhotoEntry,
    DirectoryListing,
    RenameAction,
    RenameResult,
    RunStats,
    RunReport,
)
from .config import SorterConfig, RunMode, MissingPolicy
from .errors import (
    PhotoSorterError,
    DirectoryError,
    DirectoryNotFound,
    PermissionDenied,
    ExtractionError,
    MissingMetadata,
    RenameFailed,
)

__all__ = [
    # Protocols
    "MetadataExtractor",
    "ProgressReporter",
    # Models
    "PhotoEntry",
    "DirectoryListing",
    "RenameAction",
    "RenameResult",
    "RunStats",
    "RunReport",
    # Config
    "SorterConfig",
    "RunMode",
    "MissingPolicy",
    # Errors
    "PhotoSorterError",
    "DirectoryError",
    "DirectoryNotFound",
    "PermissionDenied",
    "ExtractionError",
    "MissingMetadata",
    "RenameFailed",
]
