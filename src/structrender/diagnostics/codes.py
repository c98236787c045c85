"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by every
structrender exception.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Rendering errors (traversal and literal serialization)
        2000-2999: Literal evaluation errors
    """

    # Rendering errors (1000-1999)
    UNPICKLABLE_VALUE = 1001
    MAX_DEPTH_EXCEEDED = 1002

    # Literal evaluation errors (2000-2999)
    LITERAL_SYNTAX_INVALID = 2001
    LITERAL_NAME_UNKNOWN = 2002
    LITERAL_NODE_UNSUPPORTED = 2003
    LITERAL_CALL_REJECTED = 2004


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        value_repr: repr() of the offending value, when there is one
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    value_repr: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[UNPICKLABLE_VALUE]: Cannot pickle value of type 'function'
              = value: <function <lambda> at 0x7f...>
              = help: Give the type a __pickle__() method returning literal text

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.value_repr is not None:
            lines.append(f"  = value: {self.value_repr}")
        if self.hint is not None:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
