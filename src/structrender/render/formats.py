"""Compact stringify and ordering-fingerprint instantiations.

stringify() is the debug view: numeric keys sort first and a run of
consecutive positional keys prints as bare values.

    >>> stringify({"foo": "bar", 1: "baz", 2: "qux", 5: "x"})
    '{baz,qux,5=x,foo=bar}'

mnemonic() derives a deterministic key from heterogeneous arguments.
Strings are quoted so that 1 and "1" produce different fingerprints, and
keys are sorted so that insertion order does not matter.

    >>> mnemonic({"b": 2, "a": "1"}, 1, "1")
    "{'a'='1','b'=2},1,'1'"

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

from structrender.sequence import is_number
from structrender.tables import sort_keys
from structrender.text import quote

from .engine import Renderer
from .hooks import MISSING, FormatHooks

__all__ = [
    "MnemonicHooks",
    "StringifyHooks",
    "mnemonic",
    "stringify",
]


class StringifyHooks(FormatHooks):
    """Hooks for compact display text."""

    __slots__ = ()

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
        if is_number(key):
            if key == 1:
                return value_text
            if prev_key is not MISSING and is_number(prev_key) and key - 1 == prev_key:  # type: ignore[operator]
                return value_text
        return f"{key_text}={value_text}"

    def sort(self, keys: list[Hashable]) -> list[Hashable]:
        return sort_keys(keys)


class MnemonicHooks(FormatHooks):
    """Hooks for order-independent fingerprints."""

    __slots__ = ()

    def elem(self, x: Any) -> str:
        return quote(x)

    def sort(self, keys: list[Hashable]) -> list[Hashable]:
        return sort_keys(keys)


_STRINGIFY = Renderer(StringifyHooks())
_MNEMONIC = Renderer(MnemonicHooks())


def stringify(x: Any) -> str:
    """Render x as compact display text."""
    return _STRINGIFY.render(x)


def mnemonic(*args: Any) -> str:
    """Render each argument as a fingerprint and join them with ",".

    Structurally equal arguments give identical output regardless of object
    identity or key insertion order, so the result is usable as a cache key.
    """
    return ",".join(_MNEMONIC.render(arg) for arg in args)
