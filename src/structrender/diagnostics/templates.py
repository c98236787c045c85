"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]

# Longest value repr kept in a diagnostic before truncation.
_MAX_REPR_LENGTH: int = 200


def _short_repr(value: object) -> str:
    """Return repr(value), truncated for inclusion in error output."""
    text = repr(value)
    if len(text) > _MAX_REPR_LENGTH:
        return text[: _MAX_REPR_LENGTH - 3] + "..."
    return text


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable, consistent and documented in one place.
    """

    @staticmethod
    def unpicklable_value(value: object) -> Diagnostic:
        """Value cannot be written as a literal.

        Args:
            value: The terminal value that has no literal form

        Returns:
            Diagnostic for UNPICKLABLE_VALUE
        """
        msg = f"Cannot pickle value of type '{type(value).__name__}'"
        return Diagnostic(
            code=DiagnosticCode.UNPICKLABLE_VALUE,
            message=msg,
            hint="Give the type a __pickle__() method returning literal text",
            value_repr=_short_repr(value),
        )

    @staticmethod
    def depth_exceeded(max_depth: int) -> Diagnostic:
        """Rendering nested deeper than the configured limit.

        Args:
            max_depth: Maximum allowed depth

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum render depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Raise RenderConfig.max_depth or flatten the input",
        )

    @staticmethod
    def literal_syntax_invalid(text: str, detail: str) -> Diagnostic:
        """Literal text is not a valid expression.

        Args:
            text: The text passed to evaluate()
            detail: Parser error message

        Returns:
            Diagnostic for LITERAL_SYNTAX_INVALID
        """
        msg = f"Invalid literal syntax: {detail}"
        return Diagnostic(
            code=DiagnosticCode.LITERAL_SYNTAX_INVALID,
            message=msg,
            value_repr=_short_repr(text),
        )

    @staticmethod
    def literal_name_unknown(name: str) -> Diagnostic:
        """Literal text references a name with no binding.

        Args:
            name: The unbound name

        Returns:
            Diagnostic for LITERAL_NAME_UNKNOWN
        """
        msg = f"Unknown name '{name}' in literal"
        return Diagnostic(
            code=DiagnosticCode.LITERAL_NAME_UNKNOWN,
            message=msg,
            hint=f"Pass a namespace that binds '{name}' to evaluate()",
        )

    @staticmethod
    def literal_node_unsupported(node_type: str) -> Diagnostic:
        """Literal text contains an expression outside the literal subset.

        Args:
            node_type: Name of the rejected expression node type

        Returns:
            Diagnostic for LITERAL_NODE_UNSUPPORTED
        """
        msg = f"Unsupported expression in literal: {node_type}"
        return Diagnostic(
            code=DiagnosticCode.LITERAL_NODE_UNSUPPORTED,
            message=msg,
            hint="Only constants, displays, unary signs, names and namespace calls are allowed",
        )

    @staticmethod
    def literal_call_rejected(name: str) -> Diagnostic:
        """Literal text calls something other than a namespace callable.

        Args:
            name: Name (or description) of the rejected callee

        Returns:
            Diagnostic for LITERAL_CALL_REJECTED
        """
        msg = f"Call to '{name}' is not allowed in literal"
        return Diagnostic(
            code=DiagnosticCode.LITERAL_CALL_REJECTED,
            message=msg,
            hint="Only callables supplied through the namespace may be called",
        )
