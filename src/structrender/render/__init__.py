"""Cycle-safe structural rendering.

Exports:
    Renderer: Traversal engine bound to one FormatHooks instance
    render: One-shot rendering with arbitrary hooks
    RenderConfig: Traversal limits
    FormatHooks: Default hooks, base class for instantiations
    MISSING: Marker for "no previous/next entry" in hook calls
    StringifyHooks, stringify: Compact display text
    MnemonicHooks, mnemonic: Order-independent fingerprints
    PickleHooks, to_literal, evaluate: Literal serialization and reading

Python 3.13+.
"""

from .config import RenderConfig
from .hooks import MISSING, FormatHooks
from .engine import Renderer, render
from .formats import MnemonicHooks, StringifyHooks, mnemonic, stringify
from .literal import PickleHooks, evaluate, to_literal

__all__ = [
    "MISSING",
    "FormatHooks",
    "MnemonicHooks",
    "PickleHooks",
    "RenderConfig",
    "Renderer",
    "StringifyHooks",
    "evaluate",
    "mnemonic",
    "render",
    "stringify",
    "to_literal",
]
