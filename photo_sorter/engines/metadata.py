"""Capture timestamp extraction using Pillow."""
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from PIL import Image
from pillow_heif import register_heif_opener

from ..core.errors import ExtractionError


register_heif_opener()

EXIF_IFD = 0x8769
DATETIME_ORIGINAL = 36867
DATETIME_DIGITIZED = 36868
IMAGE_DATETIME = 306

EXIF_DATETIME_FORMATS = (
    "%Y:%m:%d %H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
    "%Y/%m/%d %H:%M:%S",
)


def parse_exif_datetime(value: Any) -> Optional[datetime]:
    """Parse an EXIF datetime value.

    Accepts str or bytes; trailing NULs and whitespace are ignored.
    Returns None for blank or unparsable values (e.g. "0000:00:00 00:00:00").
    """
    if isinstance(value, bytes):
        value = value.decode("ascii", errors="ignore")
    if not isinstance(value, str):
        return None

    value = value.strip("\x00 \t\r\n")
    if not value:
        return None

    for fmt in EXIF_DATETIME_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


class PillowMetadataExtractor:
    """Metadata extractor reading EXIF through Pillow.

    Priority:
    1. EXIF DateTimeOriginal
    2. EXIF DateTimeDigitized
    3. Image DateTime (base IFD)

    HEIC/HEIF containers are readable through pillow-heif.
    """

    def extract_datetime(self, path: Path) -> datetime:
        """Extract the capture timestamp of a photo.

        Args:
            path: Image file.

        Returns:
            The capture timestamp (naive, camera local time).

        Raises:
            ExtractionError: File unreadable or no usable timestamp.
        """
        try:
            with Image.open(path) as img:
                exif = img.getexif()
                exif_ifd = exif.get_ifd(EXIF_IFD)
                candidates = (
                    exif_ifd.get(DATETIME_ORIGINAL),
                    exif_ifd.get(DATETIME_DIGITIZED),
                    exif.get(IMAGE_DATETIME),
                )
        except Exception as e:
            raise ExtractionError(path, f"cannot read image: {e}") from e

        if not any(candidates):
            raise ExtractionError(path, "no EXIF timestamp")

        for value in candidates:
            dt = parse_exif_datetime(value)
            if dt:
                return dt

        raise ExtractionError(path, "unparsable EXIF timestamp")

    def close(self) -> None:
        """Nothing to release; Pillow handles are closed per file."""

    def __enter__(self) -> "PillowMetadataExtractor":
        return self

    def __exit__(self, *args) -> None:
        self.close()
