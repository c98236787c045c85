"""Lexicographic comparison of token sequences.

Tokens that both parse as finite numbers compare numerically, anything else
compares by text, so "10" sorts after "2" but "b" sorts after "a":

    >>> compare(["1", "2"], ["1", "10"])
    -1
    >>> vcompare("1.2.10", "1.2.9")
    1

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from structrender.constants import VERSION_SEPARATOR_PATTERN
from structrender.text import split

from .access import is_container, is_number
from .iterators import ielems

__all__ = ["compare", "to_number", "vcompare"]


def to_number(token: object) -> int | float | None:
    """Parse token as a finite number, or return None.

    Numbers pass through unchanged; text is tried as an int first so that
    large integers keep full precision.
    """
    if is_number(token):
        return token  # type: ignore[return-value]  # is_number() narrows
    if not isinstance(token, str):
        return None
    try:
        return int(token)
    except ValueError:
        pass
    try:
        value = float(token)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _tokens(seq: Any) -> Sequence[Any]:
    if is_container(seq):
        return list(ielems(seq))
    return seq  # type: ignore[no-any-return]


def _order(left: Any, right: Any) -> int:
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def compare(a: Any, b: Any) -> int:
    """Compare two token sequences.

    Args:
        a: Sequence or container (its contiguous positional run) of tokens
        b: Sequence or container of tokens

    Returns:
        -1 if a sorts first, 1 if b sorts first, 0 if equal
    """
    left, right = _tokens(a), _tokens(b)
    for lhs, rhs in zip(left, right):
        lnum, rnum = to_number(lhs), to_number(rhs)
        if lnum is not None and rnum is not None:
            result = _order(lnum, rnum)
        else:
            result = _order(str(lhs), str(rhs))
        if result:
            return result
    return _order(len(left), len(right))


def vcompare(a: str, b: str) -> int:
    """Compare two dotted version strings field by field.

    Example:
        >>> vcompare("5.1", "5.1.0")
        -1
    """
    return compare(split(a, VERSION_SEPARATOR_PATTERN), split(b, VERSION_SEPARATOR_PATTERN))
