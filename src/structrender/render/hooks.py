"""Formatting hooks for the structural renderer.

FormatHooks is the vtable the traversal calls at each step. Every method has
a working default, so an instantiation overrides only what differs:

    open(x)                               text before a container's entries
    close(x)                              text after them
    elem(x)                               text of a terminal value; also the
                                          placeholder for a container that is
                                          reached again through a cycle
    pair(x, kp, vp, k, v, ktext, vtext)   text of one entry
    sep(x, kp, vp, kn, vn)                text between entries; called once
                                          more after the last entry with
                                          kn = vn = MISSING
    sort(keys)                            order of entries
    term(x)                               whether x is rendered by elem()

kp/vp are MISSING before the first entry. None is a legal key and value, so
it cannot mark "no entry".

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Hashable
from enum import Enum
from typing import Any, Final

from structrender.capabilities import SupportsText
from structrender.sequence import is_container
from structrender.text import scalar_text

__all__ = ["MISSING", "FormatHooks"]


class _Missing(Enum):
    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing.MISSING


class FormatHooks:
    """Default hooks: ``{k1=v1,k2=v2}`` in enumeration order.

    Hooks hold no per-call state; one instance may serve any number of
    concurrent renders.
    """

    __slots__ = ()

    def open(self, x: Any) -> str:
        return "{"

    def close(self, x: Any) -> str:
        return "}"

    def elem(self, x: Any) -> str:
        return scalar_text(x)

    def pair(
        self,
        x: Any,
        prev_key: Any,
        prev_value: Any,
        key: Hashable,
        value: Any,
        key_text: str,
        value_text: str,
    ) -> str:
        return f"{key_text}={value_text}"

    def sep(
        self,
        x: Any,
        prev_key: Any,
        prev_value: Any,
        next_key: Any,
        next_value: Any,
    ) -> str:
        if prev_key is not MISSING and next_key is not MISSING:
            return ","
        return ""

    def sort(self, keys: list[Hashable]) -> list[Hashable]:
        return keys

    def term(self, x: Any) -> bool:
        return not is_container(x) or isinstance(x, SupportsText)
