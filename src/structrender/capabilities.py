"""Optional container capabilities.

A value may customise how structrender measures, enumerates, serializes or
prints it by defining any subset of four methods. Each is described by a
runtime-checkable Protocol so that detection is a plain isinstance() check
against the value's type:

    __length__()    length-override: replaces length()/maxn() boundaries
    __iterkeys__()  enumeration-override: complete key set and order
    __pickle__()    literal-override: ready-made literal text
    __tostring__()  string-override: direct text; the renderer treats the
                    value as terminal instead of recursing into it

Example:
    >>> from structrender import pairs
    >>> class Row(dict):
    ...     def __iterkeys__(self):
    ...         return iter(sorted(self))
    >>> list(pairs(Row(b=2, a=1)))
    [('a', 1), ('b', 2)]

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Protocol, runtime_checkable

__all__ = [
    "SupportsKeyOrder",
    "SupportsLength",
    "SupportsLiteral",
    "SupportsText",
]


@runtime_checkable
class SupportsLength(Protocol):
    """Value that reports its own positional length."""

    def __length__(self) -> int: ...


@runtime_checkable
class SupportsKeyOrder(Protocol):
    """Value that supplies its own key enumeration."""

    def __iterkeys__(self) -> Iterable[Hashable]: ...


@runtime_checkable
class SupportsLiteral(Protocol):
    """Value that supplies its own literal text."""

    def __pickle__(self) -> str: ...


@runtime_checkable
class SupportsText(Protocol):
    """Value that supplies its own display text."""

    def __tostring__(self) -> str: ...
