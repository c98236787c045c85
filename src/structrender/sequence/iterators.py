"""Resumable cursors over container entries.

Every constructor returns a fresh cursor object holding its own position, so
iteration is restartable by calling the constructor again. Cursors are plain
Python iterators and also expose next_pair(), which returns the next
(key, value) pair or None once exhausted.

    ipairs(t)   forward, stops at the first absent position
    npairs(t)   forward, runs to __length__() or maxn(t), yielding None in gaps
    ripairs(t)  reverse of ipairs, same boundary
    rnpairs(t)  reverse of npairs, same boundary
    pairs(t)    every key, honouring __iterkeys__()

ValueCursor wraps any of them and yields values only:

    >>> t = {1: "foo", 2: "bar", 4: "baz", "d": 5}
    >>> list(ipairs(t))
    [(1, 'foo'), (2, 'bar')]
    >>> list(npairs(t))
    [(1, 'foo'), (2, 'bar'), (3, None), (4, 'baz')]
    >>> list(ValueCursor(rnpairs(t)))
    ['baz', None, 'bar', 'foo']

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterator
from typing import Any

from .access import iter_keys, lookup
from .length import length, maxn, override_length

__all__ = [
    "KeyCursor",
    "PairCursor",
    "RangeCursor",
    "ValueCursor",
    "elems",
    "ielems",
    "ipairs",
    "npairs",
    "pairs",
    "ripairs",
    "rnpairs",
]

Pair = tuple[Hashable, Any]


class PairCursor(ABC):
    """Base cursor: an iterator of (key, value) pairs with explicit stepping.

    Subclasses implement next_pair(). Iteration calls next_pair() until it
    returns None and passes each pair through _project(), which is the only
    hook ValueCursor needs to drop keys.
    """

    __slots__ = ()

    @abstractmethod
    def next_pair(self) -> Pair | None:
        """Advance and return the next (key, value) pair, or None when done."""

    def _project(self, pair: Pair) -> Any:
        return pair

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        pair = self.next_pair()
        if pair is None:
            raise StopIteration
        return self._project(pair)


class RangeCursor(PairCursor):
    """Cursor over positional slots between two bounds.

    Attributes:
        container: Container being iterated
        position: Last index returned (start - step before the first step)
        stop: Last index to visit, inclusive
        step: +1 for forward iteration, -1 for reverse
        stop_at_gap: End at the first absent slot instead of yielding None
    """

    __slots__ = ("container", "position", "step", "stop", "stop_at_gap")

    def __init__(
        self,
        container: Any,
        start: int,
        stop: int,
        *,
        step: int = 1,
        stop_at_gap: bool = False,
    ) -> None:
        self.container = container
        self.position = start - step
        self.stop = stop
        self.step = step
        self.stop_at_gap = stop_at_gap

    def next_pair(self) -> Pair | None:
        index = self.position + self.step
        past_end = index > self.stop if self.step > 0 else index < self.stop
        if past_end:
            return None
        value = lookup(self.container, index)
        if value is None and self.stop_at_gap:
            # Park past the bound so later calls stay exhausted.
            self.position = self.stop
            return None
        self.position = index
        return index, value


class KeyCursor(PairCursor):
    """Cursor over every key of a container, in enumeration order."""

    __slots__ = ("_keys", "container")

    def __init__(self, container: Any) -> None:
        self.container = container
        self._keys = iter_keys(container)

    def next_pair(self) -> Pair | None:
        try:
            key = next(self._keys)
        except StopIteration:
            return None
        return key, lookup(self.container, key)


class ValueCursor(PairCursor):
    """Value-only adaptor around another cursor.

    The wrapped cursor keeps its own key state; next_pair() still reports
    full pairs, so a ValueCursor can stand in anywhere a PairCursor is
    expected. Only iteration discards the keys.
    """

    __slots__ = ("inner",)

    def __init__(self, inner: PairCursor) -> None:
        self.inner = inner

    def next_pair(self) -> Pair | None:
        return self.inner.next_pair()

    def _project(self, pair: Pair) -> Any:
        return pair[1]


def ipairs(x: Any) -> RangeCursor:
    """Iterate (1, x[1]), (2, x[2]), ... up to the first absent position.

    The bound is length(x), so a __length__() override can end iteration
    early but never extends it past a gap.
    """
    return RangeCursor(x, 1, length(x), stop_at_gap=True)


def ripairs(x: Any) -> RangeCursor:
    """Like ipairs(), in descending order down to 1.

    The starting index is the boundary ipairs() would stop at.
    """
    bound = length(x)
    start = 0
    while start < bound and lookup(x, start + 1) is not None:
        start += 1
    return RangeCursor(x, start, 1, step=-1)


def _boundary(x: Any) -> int:
    override = override_length(x)
    return override if override is not None else maxn(x)


def npairs(x: Any) -> RangeCursor:
    """Iterate positions 1..n, where n is __length__() or maxn(x).

    Absent positions yield None instead of ending iteration.
    """
    return RangeCursor(x, 1, _boundary(x))


def rnpairs(x: Any) -> RangeCursor:
    """Like npairs(), in descending order down to 1."""
    return RangeCursor(x, _boundary(x), 1, step=-1)


def pairs(x: Any) -> KeyCursor:
    """Iterate every (key, value) pair, honouring __iterkeys__()."""
    return KeyCursor(x)


def elems(x: Any) -> ValueCursor:
    """Iterate every value of x."""
    return ValueCursor(pairs(x))


def ielems(x: Any) -> ValueCursor:
    """Iterate the values of the contiguous positional run of x."""
    return ValueCursor(ipairs(x))
