"""structrender - structural rendering of nested tables.

Measures, walks and renders nested Mapping containers that use 1-based
integer keys as positional entries, with cycle-safe output in three styles.

Public API:
    length, maxn - Contiguous run length and greatest positional key
    ipairs, npairs, ripairs, rnpairs, pairs - Resumable (key, value) cursors
    elems, ielems, ValueCursor - Value-only iteration
    Renderer, render, FormatHooks, RenderConfig - Pluggable render engine
    stringify - Compact display text
    mnemonic - Order-independent fingerprint for cache keys
    to_literal, evaluate - Literal serialization and restricted reading
    compare, vcompare - Token sequence and version comparison

Exceptions:
    StructRenderError - Base exception class
    UnpicklableValueError - Value has no literal form
    DepthLimitExceededError - RenderConfig.max_depth exceeded
    LiteralEvaluationError - Literal text rejected by evaluate()

Submodules:
    structrender.sequence - Length resolution, cursors and comparison
    structrender.render - Engine, hooks and instantiations
    structrender.tables - Table helpers (copy, merge, pack, leaves, ...)
    structrender.text - split() and quote()
    structrender.capabilities - Protocols for the optional override methods
    structrender.diagnostics - Error types and diagnostic codes
"""

from .capabilities import SupportsKeyOrder, SupportsLength, SupportsLiteral, SupportsText
from .diagnostics import (
    DepthLimitExceededError,
    LiteralEvaluationError,
    StructRenderError,
    UnpicklableValueError,
)
from .render import (
    MISSING,
    FormatHooks,
    MnemonicHooks,
    PickleHooks,
    RenderConfig,
    Renderer,
    StringifyHooks,
    evaluate,
    mnemonic,
    render,
    stringify,
    to_literal,
)
from .sequence import (
    PairCursor,
    ValueCursor,
    compare,
    elems,
    ielems,
    ipairs,
    length,
    maxn,
    npairs,
    pairs,
    ripairs,
    rnpairs,
    vcompare,
)
from .tables import sort_keys
from .text import quote, split

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("structrender")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "MISSING",
    "DepthLimitExceededError",
    "FormatHooks",
    "LiteralEvaluationError",
    "MnemonicHooks",
    "PairCursor",
    "PickleHooks",
    "RenderConfig",
    "Renderer",
    "StringifyHooks",
    "StructRenderError",
    "SupportsKeyOrder",
    "SupportsLength",
    "SupportsLiteral",
    "SupportsText",
    "UnpicklableValueError",
    "ValueCursor",
    "__version__",
    "compare",
    "elems",
    "evaluate",
    "ielems",
    "ipairs",
    "length",
    "maxn",
    "mnemonic",
    "npairs",
    "pairs",
    "quote",
    "render",
    "ripairs",
    "rnpairs",
    "sort_keys",
    "split",
    "stringify",
    "to_literal",
    "vcompare",
]
