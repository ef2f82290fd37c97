"""Rename photos with a chronological ordinal prefix.

Reader -> resolver -> renamer, with injected metadata extraction and
progress reporting.
"""

__version__ = "1.0.0"

# Core exports
from .core.config import SorterConfig, RunMode, MissingPolicy
from .core.models import PhotoEntry, DirectoryListing, RenameAction, RenameResult, RunStats, RunReport
from .core.protocols import MetadataExtractor, ProgressReporter
from .core.errors import (
    PhotoSorterError,
    DirectoryNotFound,
    PermissionDenied,
    ExtractionError,
    MissingMetadata,
    RenameFailed,
)

# Engine exports
from .engines.metadata import PillowMetadataExtractor

# Service exports
from .services.reader import MetadataReader, list_photos
from .services.resolver import OrderResolver
from .services.renamer import Renamer
from .services.sorter import PhotoSorter, SorterDependencies

# Logging exports
from .logging.rich_logger import RichProgressReporter, QuietProgressReporter

__all__ = [
    # Core
    "SorterConfig",
    "RunMode",
    "MissingPolicy",
    "PhotoEntry",
    "DirectoryListing",
    "RenameAction",
    "RenameResult",
    "RunStats",
    "RunReport",
    "MetadataExtractor",
    "ProgressReporter",
    "PhotoSorterError",
    "DirectoryNotFound",
    "PermissionDenied",
    "ExtractionError",
    "MissingMetadata",
    "RenameFailed",
    # Engines
    "PillowMetadataExtractor",
    # Services
    "MetadataReader",
    "list_photos",
    "OrderResolver",
    "Renamer",
    "PhotoSorter",
    "SorterDependencies",
    # Logging
    "RichProgressReporter",
    "QuietProgressReporter",
]
