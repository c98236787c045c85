"""Table helpers built on the iteration layer.

Every helper enumerates through pairs()/ipairs() and measures through
length()/maxn(), so __iterkeys__() and __length__() overrides are honoured.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator, MutableMapping
from typing import Any

from structrender.sequence import (
    PairCursor,
    is_container,
    is_number,
    length,
    lookup,
    maxn,
    override_length,
    pairs,
)
from structrender.text import quote

__all__ = [
    "copy",
    "invert",
    "key_order",
    "last",
    "leaves",
    "merge",
    "pack",
    "sort_keys",
    "unpack",
]


def key_order(key: Hashable) -> tuple[int, Any, str, str]:
    """Sort key placing numbers first, ascending, then other keys by str().

    Keys whose text coincides (None and "None", True and "True") are ordered
    by type name and then quoted text, so the result never depends on the
    order the keys arrived in.

    Example:
        >>> sorted(["b", 10, "a", 2], key=key_order)
        [2, 10, 'a', 'b']
        >>> sorted(["None", None], key=key_order)
        [None, 'None']
    """
    if is_number(key):
        return (0, key, "", "")
    return (1, str(key), type(key).__qualname__, quote(key))


def sort_keys(keys: list[Hashable]) -> list[Hashable]:
    """Sort keys in place with key_order() and return the same list."""
    keys.sort(key=key_order)
    return keys


def copy(dest: Any, src: Any = None) -> Any:
    """Shallow-copy the entries of src into dest.

    With one argument, copy dest into a new dict.

    Returns:
        The destination mapping
    """
    if src is None:
        dest, src = {}, dest
    for key, value in pairs(src):
        dest[key] = value
    return dest


def merge(dest: MutableMapping[Hashable, Any], src: Any) -> MutableMapping[Hashable, Any]:
    """Copy entries of src into dest where dest has no value (None or False)."""
    for key, value in pairs(src):
        current = lookup(dest, key)
        if current is None or current is False:
            dest[key] = value
    return dest


def invert(x: Any) -> dict[Any, Hashable]:
    """Swap keys and values; later duplicates of a value win."""
    return {value: key for key, value in pairs(x)}


def last(x: Any) -> Any:
    """Return the final element of the contiguous positional run of x."""
    return lookup(x, length(x))


def pack(*args: Any) -> dict[Hashable, Any]:
    """Collect arguments into a positional table with an "n" count.

    Example:
        >>> pack("a", None, "c")
        {1: 'a', 2: None, 3: 'c', 'n': 3}
    """
    packed: dict[Hashable, Any] = {index: arg for index, arg in enumerate(args, start=1)}
    packed["n"] = len(args)
    return packed


def unpack(x: Any, i: int = 1, j: int | None = None) -> tuple[Any, ...]:
    """Return the values at positions i..j of x as a tuple.

    Args:
        x: Container
        i: First position (default: 1)
        j: Last position (default: __length__() if present, else maxn(x))

    Returns:
        Tuple of values, None for absent positions
    """
    if j is None:
        override = override_length(x)
        j = override if override is not None else maxn(x)
    return tuple(lookup(x, index) for index in range(i, j + 1))


def leaves(cursor_factory: Callable[[Any], PairCursor], tree: Any) -> Iterator[Any]:
    """Yield the non-container values of tree, depth first.

    Args:
        cursor_factory: Cursor constructor used at every level, e.g. pairs
            or ipairs
        tree: Root container

    Example:
        >>> list(leaves(ipairs, {1: "a", 2: {1: "b", 2: "c"}, 3: "d"}))
        ['a', 'b', 'c', 'd']
    """
    for _, value in cursor_factory(tree):
        if is_container(value):
            yield from leaves(cursor_factory, value)
        else:
            yield value
