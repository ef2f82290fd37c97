"""Tests for ordering and ordinal assignment."""
import pytest
from datetime import datetime, timedelta

from photo_sorter.core.config import MissingPolicy
from photo_sorter.core.errors import MissingMetadata
from photo_sorter.services.resolver import OrderResolver, prefix_width

from .fixtures import T1, T2, make_entry


def _order(entries):
    return [(e.ordinal, e.name) for e in entries]


class TestPrefixWidth:
    """Tests for prefix width calculation."""

    @pytest.mark.parametrize("count,expected", [
        (0, 3),
        (1, 3),
        (999, 3),
        (1000, 4),
        (12345, 5),
    ])
    def test_default_minimum(self, count, expected):
        assert prefix_width(count) == expected

    def test_custom_minimum(self):
        assert prefix_width(5, min_width=1) == 1
        assert prefix_width(50, min_width=1) == 2


class TestOrderResolver:
    """Tests for OrderResolver."""

    @pytest.fixture
    def scenario(self):
        """b.jpg at T2, a.jpg at T1 < T2, c.jpg without metadata."""
        return [
            make_entry("b.jpg", T2),
            make_entry("a.jpg", T1),
            make_entry("c.jpg"),
        ]

    def test_ascending(self, scenario):
        """Oldest first, undated last."""
        resolved = OrderResolver().resolve(scenario)
        assert _order(resolved) == [(1, "a.jpg"), (2, "b.jpg"), (3, "c.jpg")]

    def test_descending(self, scenario):
        """Newest first, undated before dated files."""
        resolved = OrderResolver(descending=True).resolve(scenario)
        assert _order(resolved) == [(1, "c.jpg"), (2, "b.jpg"), (3, "a.jpg")]

    def test_tie_broken_by_name(self):
        """Equal timestamps are ordered by file name."""
        entries = [make_entry("z.jpg", T1), make_entry("m.jpg", T1), make_entry("a.jpg", T1)]

        resolved = OrderResolver().resolve(entries)

        assert [e.name for e in resolved] == ["a.jpg", "m.jpg", "z.jpg"]

    def test_undated_ordered_by_name(self):
        entries = [make_entry("y.jpg"), make_entry("x.jpg"), make_entry("w.jpg", T1)]

        resolved = OrderResolver().resolve(entries)

        assert [e.name for e in resolved] == ["w.jpg", "x.jpg", "y.jpg"]

    def test_ordinals_contiguous(self):
        """Ordinals are 1..N with no gaps or duplicates."""
        base = datetime(2022, 3, 1)
        entries = [make_entry(f"IMG_{i:04d}.jpg", base + timedelta(minutes=(i * 37) % 101)) for i in range(50)]
        entries += [make_entry("undated_1.jpg"), make_entry("undated_2.jpg")]

        for descending in (False, True):
            resolved = OrderResolver(descending=descending).resolve(entries)
            assert [e.ordinal for e in resolved] == list(range(1, len(entries) + 1))

    def test_descending_is_exact_reverse(self):
        """Without ties, descending mirrors ascending."""
        entries = [make_entry(f"{c}.jpg", datetime(2020, 1, 1) + timedelta(hours=h))
                   for c, h in zip("qwertyuiop", [5, 3, 9, 1, 7, 2, 8, 0, 6, 4])]

        asc = OrderResolver().resolve(entries)
        desc = OrderResolver(descending=True).resolve(entries)

        assert [e.name for e in desc] == [e.name for e in reversed(asc)]
        n = len(entries)
        asc_map = {e.name: e.ordinal for e in asc}
        for e in desc:
            assert e.ordinal == n + 1 - asc_map[e.name]

    def test_input_order_irrelevant(self, scenario):
        resolved = OrderResolver().resolve(list(reversed(scenario)))
        assert _order(resolved) == [(1, "a.jpg"), (2, "b.jpg"), (3, "c.jpg")]

    def test_does_not_mutate_input(self, scenario):
        OrderResolver().resolve(scenario)
        assert all(e.ordinal is None for e in scenario)

    def test_empty(self):
        assert OrderResolver().resolve([]) == []

    def test_fail_policy_raises(self, scenario):
        """FAIL policy names every undated file."""
        resolver = OrderResolver(missing_policy=MissingPolicy.FAIL)

        with pytest.raises(MissingMetadata) as exc_info:
            resolver.resolve(scenario)

        assert [p.name for p in exc_info.value.paths] == ["c.jpg"]
        assert "c.jpg" in str(exc_info.value)

    def test_fail_policy_all_dated(self):
        """FAIL policy is silent when every file has a timestamp."""
        resolver = OrderResolver(missing_policy=MissingPolicy.FAIL)
        resolved = resolver.resolve([make_entry("b.jpg", T2), make_entry("a.jpg", T1)])
        assert _order(resolved) == [(1, "a.jpg"), (2, "b.jpg")]
