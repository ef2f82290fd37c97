"""Test fixtures shared across test modules.

Real JPEGs with EXIF timestamps are generated with Pillow; pipeline tests
use FakeExtractor so they do not depend on image decoding.
"""
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

from PIL import Image

from photo_sorter.core.errors import ExtractionError
from photo_sorter.core.models import PhotoEntry
from photo_sorter.engines.metadata import (
    DATETIME_DIGITIZED,
    DATETIME_ORIGINAL,
    EXIF_IFD,
    IMAGE_DATETIME,
)


EXIF_FORMAT = "%Y:%m:%d %H:%M:%S"


def write_photo(
    path: Path,
    date_taken: Optional[datetime] = None,
    tag: int = DATETIME_ORIGINAL,
    color: str = "red",
) -> Path:
    """Write a small JPEG, optionally with an EXIF timestamp.

    DateTimeOriginal/DateTimeDigitized go into the Exif IFD, DateTime into
    the base IFD.
    """
    img = Image.new("RGB", (16, 16), color=color)
    if date_taken is None:
        img.save(path, "JPEG")
        return path

    exif = Image.Exif()
    value = date_taken.strftime(EXIF_FORMAT)
    if tag in (DATETIME_ORIGINAL, DATETIME_DIGITIZED):
        exif[EXIF_IFD] = {tag: value}
    else:
        exif[tag] = value
    img.save(path, "JPEG", exif=exif)
    return path


def write_photo_base_datetime(path: Path, date_taken: datetime) -> Path:
    return write_photo(path, date_taken, tag=IMAGE_DATETIME)


class FakeExtractor:
    """Extractor returning canned timestamps keyed by file name.

    Names not in the mapping raise ExtractionError.
    """

    def __init__(self, timestamps: dict[str, datetime]):
        self.timestamps = dict(timestamps)
        self.calls: list[str] = []
        self.closed = False

    def extract_datetime(self, path: Path) -> datetime:
        self.calls.append(path.name)
        try:
            return self.timestamps[path.name]
        except KeyError:
            raise ExtractionError(path, "no EXIF timestamp") from None

    def close(self) -> None:
        self.closed = True


def touch_files(directory: Path, *names: str) -> list[Path]:
    """Create empty files and return their paths."""
    paths = []
    for name in names:
        path = directory / name
        path.write_bytes(b"")
        paths.append(path)
    return paths


def make_entry(name: str, timestamp: Optional[datetime] = None) -> PhotoEntry:
    return PhotoEntry(path=Path("/photos") / name, timestamp=timestamp)


T1 = datetime(2020, 1, 1, 9, 0, 0)
T2 = datetime(2020, 1, 2, 9, 0, 0)
T3 = datetime(2021, 6, 15, 10, 30, 45)
