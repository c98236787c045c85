"""Primitive container access shared by the length, iteration and render layers.

A container is any Mapping. Positional entries are keyed by non-negative
ints (bool excluded, although it subclasses int). A slot is absent when the
key is missing or maps to None.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Mapping
from typing import Any

from structrender.capabilities import SupportsKeyOrder

__all__ = [
    "is_container",
    "is_index",
    "is_number",
    "iter_keys",
    "lookup",
]


def is_container(x: object) -> bool:
    """Return True if x is traversed as a container."""
    return isinstance(x, Mapping)


def is_number(x: object) -> bool:
    """Return True for int and float values, excluding bool."""
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def is_index(key: object) -> bool:
    """Return True if key addresses a positional entry."""
    return isinstance(key, int) and not isinstance(key, bool) and key >= 0


def lookup(x: Any, key: Hashable) -> Any:
    """Return x[key], or None when the key is missing.

    Membership is tested first so that reading never inserts: a
    defaultdict's __missing__ would otherwise fill every gap it is asked
    about and change the length of its container.
    """
    if key not in x:
        return None
    return x[key]


def iter_keys(x: object) -> Iterator[Hashable]:
    """Enumerate the keys of x.

    Delegates to __iterkeys__() when x provides it. Otherwise the mapping's
    own key order is used, snapshotted so the iterator survives mutation of
    the container between steps.

    Raises:
        TypeError: If x is neither a container nor provides __iterkeys__()
    """
    if isinstance(x, SupportsKeyOrder):
        return iter(x.__iterkeys__())
    if isinstance(x, Mapping):
        return iter(list(x))
    msg = f"'{type(x).__name__}' object is not a container"
    raise TypeError(msg)
