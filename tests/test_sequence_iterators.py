"""Tests for sequence.iterators: cursors and their constructors."""

from collections import defaultdict
from typing import Any

from hypothesis import given

from structrender.sequence import (
    PairCursor,
    RangeCursor,
    ValueCursor,
    elems,
    ielems,
    ipairs,
    length,
    maxn,
    npairs,
    pairs,
    ripairs,
    rnpairs,
)
from tests.strategies import gapped_tables

GAPPY = {1: "foo", 2: "bar", 4: "baz", "d": 5}


class Length5(dict):
    """Mapping reporting length 5 regardless of its entries."""

    def __length__(self) -> int:
        return 5


class Length1(dict):
    """Mapping reporting length 1 regardless of its entries."""

    def __length__(self) -> int:
        return 1


class Reversed(dict):
    """Mapping enumerating keys in reverse insertion order."""

    def __iterkeys__(self) -> Any:
        return reversed(list(self))


# ============================================================================
# POSITIONAL CURSORS
# ============================================================================


class TestIpairs:
    """Tests for ipairs() and ripairs()."""

    def test_stops_at_gap(self) -> None:
        """ipairs() ends at the first absent position."""
        assert list(ipairs(GAPPY)) == [(1, "foo"), (2, "bar")]

    def test_empty(self) -> None:
        """Empty table yields nothing."""
        assert list(ipairs({})) == []

    def test_reverse(self) -> None:
        """ripairs() visits the same run backwards."""
        assert list(ripairs(GAPPY)) == [(2, "bar"), (1, "foo")]

    def test_override_shortens(self) -> None:
        """A shorter __length__() ends iteration early."""
        assert list(ipairs(Length1({1: "a", 2: "b"}))) == [(1, "a")]
        assert list(ripairs(Length1({1: "a", 2: "b"}))) == [(1, "a")]

    def test_override_never_crosses_gap(self) -> None:
        """A longer __length__() does not extend past a gap."""
        table = Length5({1: "a", 2: "b", 4: "d"})
        assert list(ipairs(table)) == [(1, "a"), (2, "b")]
        assert list(ripairs(table)) == [(2, "b"), (1, "a")]

    def test_exhausted_cursor_stays_exhausted(self) -> None:
        """next_pair() keeps returning None after a gap was hit."""
        cursor = ipairs(Length5({1: "a", 3: "c"}))
        assert cursor.next_pair() == (1, "a")
        assert cursor.next_pair() is None
        assert cursor.next_pair() is None

    @given(gapped_tables())
    def test_ipairs_covers_length(self, table: dict[Any, Any]) -> None:
        """Property: ipairs() yields exactly positions 1..length(t)."""
        keys = [key for key, _ in ipairs(table)]
        assert keys == list(range(1, length(table) + 1))

    @given(gapped_tables())
    def test_ripairs_mirrors_ipairs(self, table: dict[Any, Any]) -> None:
        """Property: ripairs() is ipairs() reversed."""
        assert list(ripairs(table)) == list(reversed(list(ipairs(table))))


class TestNpairs:
    """Tests for npairs() and rnpairs()."""

    def test_yields_none_in_gaps(self) -> None:
        """npairs() runs to maxn() and reports holes as None."""
        assert list(npairs(GAPPY)) == [(1, "foo"), (2, "bar"), (3, None), (4, "baz")]

    def test_reverse(self) -> None:
        """rnpairs() runs from maxn() down to 1."""
        assert list(rnpairs(GAPPY)) == [(4, "baz"), (3, None), (2, "bar"), (1, "foo")]

    def test_override_sets_bound(self) -> None:
        """__length__() replaces maxn() as the bound."""
        table = Length5({1: "a", 3: "c"})
        assert [key for key, _ in npairs(table)] == [1, 2, 3, 4, 5]
        assert [key for key, _ in rnpairs(table)] == [5, 4, 3, 2, 1]

    def test_empty(self) -> None:
        """Empty table yields nothing either way."""
        assert list(npairs({})) == []
        assert list(rnpairs({})) == []

    @given(gapped_tables())
    def test_npairs_covers_maxn(self, table: dict[Any, Any]) -> None:
        """Property: npairs() visits 1..maxn(t) in order."""
        keys = [key for key, _ in npairs(table)]
        assert keys == list(range(1, maxn(table) + 1))


# ============================================================================
# KEY CURSOR
# ============================================================================


class TestPairs:
    """Tests for pairs()."""

    def test_visits_every_key(self) -> None:
        """pairs() enumerates all keys, positional or not."""
        assert dict(pairs(GAPPY)) == GAPPY

    def test_honours_iterkeys(self) -> None:
        """__iterkeys__() controls order and membership."""
        table = Reversed({"a": 1, "b": 2, "c": 3})
        assert [key for key, _ in pairs(table)] == ["c", "b", "a"]

    def test_survives_mutation(self) -> None:
        """Keys are snapshotted, so assigning during iteration is safe."""
        table = {"a": 1, "b": 2}
        for key, value in pairs(table):
            table[key] = value * 10
        assert table == {"a": 10, "b": 20}

    def test_restartable(self) -> None:
        """Each constructor call returns a fresh cursor."""
        first = list(pairs(GAPPY))
        assert list(pairs(GAPPY)) == first


# ============================================================================
# VALUE ADAPTOR
# ============================================================================


class TestValueCursor:
    """Tests for ValueCursor, elems() and ielems()."""

    def test_wraps_any_cursor(self) -> None:
        """ValueCursor drops keys from whatever it wraps."""
        assert list(ValueCursor(rnpairs(GAPPY))) == ["baz", None, "bar", "foo"]

    def test_next_pair_still_reports_pairs(self) -> None:
        """Stepping explicitly exposes the full pair."""
        cursor = ValueCursor(ipairs({1: "a"}))
        assert cursor.next_pair() == (1, "a")
        assert cursor.next_pair() is None

    def test_is_a_pair_cursor(self) -> None:
        """ValueCursor can stand in for any cursor."""
        assert isinstance(ValueCursor(pairs({})), PairCursor)

    def test_elems(self) -> None:
        """elems() yields every value."""
        assert sorted(map(str, elems(GAPPY))) == ["5", "bar", "baz", "foo"]

    def test_ielems(self) -> None:
        """ielems() yields the contiguous run only."""
        assert list(ielems(GAPPY)) == ["foo", "bar"]


class TestRangeCursor:
    """Direct tests for RangeCursor."""

    def test_custom_bounds(self) -> None:
        """Arbitrary start/stop and step are honoured."""
        table = {index: index * index for index in range(1, 6)}
        assert list(RangeCursor(table, 2, 4)) == [(2, 4), (3, 9), (4, 16)]
        assert list(RangeCursor(table, 5, 3, step=-1)) == [(5, 25), (4, 16), (3, 9)]

    def test_empty_range(self) -> None:
        """start past stop yields nothing."""
        assert list(RangeCursor({1: "a"}, 2, 1)) == []


class TestDefaultdictInput:
    """Iterating gaps never inserts into a defaultdict."""

    def test_npairs_does_not_fill_gaps(self) -> None:
        """npairs() and rnpairs() report gaps as None without creating them."""
        table = defaultdict(int, {1: "a", 3: "c"})
        assert list(npairs(table)) == [(1, "a"), (2, None), (3, "c")]
        assert list(rnpairs(table)) == [(3, "c"), (2, None), (1, "a")]
        assert dict(table) == {1: "a", 3: "c"}
        assert length(table) == 1
