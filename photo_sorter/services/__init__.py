"""Service layer."""
from .reader import MetadataReader, list_photos, is_supported_file
from .resolver import OrderResolver, prefix_width
from .renamer import Renamer, create_prefix, prefixed_name, reverted_name
from .sorter import PhotoSorter, SorterDependencies

__all__ = [
    "MetadataReader",
    "list_photos",
    "is_supported_file",
    "OrderResolver",
    "prefix_width",
    "Renamer",
    "create_prefix",
    "prefixed_name",
    "reverted_name",
    "PhotoSorter",
    "SorterDependencies",
]
