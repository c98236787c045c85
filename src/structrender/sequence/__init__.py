"""Length resolution, sequence cursors and token comparison.

Everything here operates on Mapping containers and honours the optional
__length__() and __iterkeys__() capabilities.

Python 3.13+. Zero external dependencies.
"""

from .access import is_container, is_index, is_number, iter_keys, lookup
from .length import length, maxn, override_length
from .iterators import (
    KeyCursor,
    PairCursor,
    RangeCursor,
    ValueCursor,
    elems,
    ielems,
    ipairs,
    npairs,
    pairs,
    ripairs,
    rnpairs,
)
from .compare import compare, to_number, vcompare

__all__ = [
    "KeyCursor",
    "PairCursor",
    "RangeCursor",
    "ValueCursor",
    "compare",
    "elems",
    "ielems",
    "ipairs",
    "is_container",
    "is_index",
    "is_number",
    "iter_keys",
    "length",
    "lookup",
    "maxn",
    "npairs",
    "override_length",
    "pairs",
    "ripairs",
    "rnpairs",
    "to_number",
    "vcompare",
]
