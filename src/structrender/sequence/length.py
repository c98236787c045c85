"""Authoritative length resolution.

Two computations that are NOT interchangeable:

    length(x): longest contiguous run of positional entries starting at 1
    maxn(x):   greatest positional key present, looking past gaps

They differ whenever a container has gaps:

    >>> t = {1: "a", 2: "b", 3: "c", 5: "e"}
    >>> length(t), maxn(t)
    (3, 5)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Sized

from structrender.capabilities import SupportsLength

from .access import is_container, is_index, iter_keys, lookup

__all__ = ["length", "maxn", "override_length"]


def override_length(x: object) -> int | None:
    """Return the result of x.__length__(), or None when x has no override."""
    if isinstance(x, SupportsLength):
        return x.__length__()
    return None


def length(x: object) -> int:
    """Compute the length of x.

    Resolution order:
        1. __length__() result, if x provides one
        2. len(x) for sized non-containers (character count of text)
        3. For containers, the first-gap scan over positions 1..len(x)

    The native entry count of a mapping is an upper bound on its contiguous
    run, so scanning up to it always finds the exact boundary.

    Args:
        x: Container or sized scalar

    Returns:
        Non-negative length

    Raises:
        TypeError: If x is a scalar with no intrinsic size. Numbers, None
            and the like are refused rather than given an invented size,
            the same way the length operator of a table runtime fails on
            a number.
    """
    override = override_length(x)
    if override is not None:
        return override

    if not is_container(x):
        if isinstance(x, Sized):
            return len(x)
        msg = f"object of type '{type(x).__name__}' has no length"
        raise TypeError(msg)

    count = len(x)  # type: ignore[arg-type]  # is_container() guarantees Mapping
    for index in range(1, count + 1):
        if lookup(x, index) is None:
            return index - 1
    return count


def maxn(x: object) -> int:
    """Return the greatest positional key of x with a value, or 0.

    Scans every key (honouring __iterkeys__()) and ignores gaps.
    """
    highest = 0
    for key in iter_keys(x):
        if is_index(key) and key > highest and lookup(x, key) is not None:
            highest = key  # type: ignore[assignment]  # is_index() guarantees int
    return highest
