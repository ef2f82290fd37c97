"""Chronological ordering and ordinal assignment."""
from __future__ import annotations

from datetime import datetime
from typing import Iterable

from ..core.config import DEFAULT_PAD_WIDTH, MissingPolicy
from ..core.errors import MissingMetadata
from ..core.models import PhotoEntry


def prefix_width(count: int, min_width: int = DEFAULT_PAD_WIDTH) -> int:
    """Digits needed to zero-pad ordinals 1..count."""
    return max(min_width, len(str(count)))


def _sort_key(entry: PhotoEntry) -> tuple[bool, datetime, str]:
    # Undated entries sort after dated ones; name breaks ties
    return (
        entry.timestamp is None,
        entry.timestamp or datetime.min,
        entry.name,
    )


class OrderResolver:
    """Sorts photo entries and assigns ordinals starting at 1.

    Descending order is the exact reverse of ascending order, so undated
    files come first when descending.
    """

    def __init__(
        self,
        descending: bool = False,
        missing_policy: MissingPolicy = MissingPolicy.LAST,
    ):
        self._descending = descending
        self._missing_policy = missing_policy

    def resolve(self, entries: Iterable[PhotoEntry]) -> list[PhotoEntry]:
        """Return the entries in final order with ordinals assigned.

        Raises:
            MissingMetadata: Some entries lack a timestamp and the policy is FAIL.
        """
        entries = list(entries)

        missing = [e.path for e in entries if not e.has_timestamp]
        if missing and self._missing_policy is MissingPolicy.FAIL:
            raise MissingMetadata(missing)

        ordered = sorted(entries, key=_sort_key, reverse=self._descending)
        return [entry.with_ordinal(i) for i, entry in enumerate(ordered, start=1)]
