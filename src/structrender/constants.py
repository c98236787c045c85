"""Shared constants for structrender.

Placing constants here avoids circular imports between the sequence and
render packages and gives one source of truth for defaults.

Constants are grouped by domain:
- Depth limits: Clamping of the optional render depth limit
- Text patterns: Default separators for splitting and version comparison
- Literal tokens: Names the literal serializer emits for special floats

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "RECURSION_RESERVE_FRAMES",
    "FRAMES_PER_LEVEL",
    # Text patterns
    "DEFAULT_SPLIT_PATTERN",
    "VERSION_SEPARATOR_PATTERN",
    # Literal tokens
    "LITERAL_NAN",
    "LITERAL_INFINITY",
    "LITERAL_SEPARATOR",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# Rendering is bounded by the depth of the input graph. A depth guard is only
# installed when RenderConfig.max_depth is set.

# Stack frames kept free below sys.getrecursionlimit() when clamping a
# requested depth.
RECURSION_RESERVE_FRAMES: int = 50

# Interpreter frames one nested container level costs the renderer.
FRAMES_PER_LEVEL: int = 3

# ============================================================================
# TEXT PATTERNS
# ============================================================================

# Regular expression used by text.split() when no separator is given.
DEFAULT_SPLIT_PATTERN: str = r"\s+"

# Regular expression separating the fields of a dotted version string.
VERSION_SEPARATOR_PATTERN: str = r"\."

# ============================================================================
# LITERAL TOKENS
# ============================================================================

# Bare names evaluate() binds to the special float values.
LITERAL_NAN: str = "nan"
LITERAL_INFINITY: str = "inf"

# Separator between dict display entries in literal output.
LITERAL_SEPARATOR: str = ", "
