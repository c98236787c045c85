"""Text helpers shared by the renderers and the comparator.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from structrender.capabilities import SupportsText
from structrender.constants import DEFAULT_SPLIT_PATTERN

__all__ = ["quote", "scalar_text", "split"]


def scalar_text(x: object) -> str:
    """Return the default display text of a single value.

    __tostring__() wins when present. Containers are shown by type and
    identity, never by content, since this text doubles as the placeholder
    for a container already being rendered. Everything else uses str().
    """
    if isinstance(x, SupportsText):
        return x.__tostring__()
    if isinstance(x, Mapping):
        return f"{type(x).__name__}: {id(x):#x}"
    return str(x)


def quote(x: object) -> str:
    """Quote text with Python escaping; show other values as scalar_text().

    Keeps 1 and "1" apart in output:

        >>> quote(1), quote("1")
        ('1', "'1'")
    """
    if isinstance(x, str):
        return repr(x)
    return scalar_text(x)


def split(s: str, sep: str | None = None) -> list[str]:
    """Split s on a regular expression.

    Args:
        s: Text to split
        sep: Separator pattern (default: runs of whitespace). An empty
            pattern splits into single characters, bracketed by empty
            strings.

    Returns:
        List of fields; always at least one element

    Example:
        >>> split("1.2.10", r"\\.")
        ['1', '2', '10']
    """
    return re.split(DEFAULT_SPLIT_PATTERN if sep is None else sep, s)
