"""Metadata engines."""
from .metadata import PillowMetadataExtractor, parse_exif_datetime

__all__ = [
    "PillowMetadataExtractor",
    "parse_exif_datetime",
]
