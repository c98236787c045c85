"""Diagnostic system for structrender errors.

Provides structured error diagnostics with codes, hints and value reprs.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    DepthLimitExceededError,
    LiteralEvaluationError,
    StructRenderError,
    UnpicklableValueError,
)
from .templates import ErrorTemplate

__all__ = [
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "LiteralEvaluationError",
    "StructRenderError",
    "UnpicklableValueError",
]
