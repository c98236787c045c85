"""structrender exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "DepthLimitExceededError",
    "LiteralEvaluationError",
    "StructRenderError",
    "UnpicklableValueError",
]


class StructRenderError(Exception):
    """Base exception for all structrender errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize StructRenderError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class UnpicklableValueError(StructRenderError):
    """Terminal value has no literal form.

    Raised by the literal serializer for a value that is not a bool, None,
    number or str and has no __pickle__() method. Never recovered
    internally.

    Attributes:
        value: The offending value
    """

    def __init__(self, message: str | Diagnostic, *, value: object = None) -> None:
        """Initialize UnpicklableValueError.

        Args:
            message: Error message string OR Diagnostic object
            value: The value that could not be serialized
        """
        super().__init__(message)
        self.value = value


class DepthLimitExceededError(StructRenderError):
    """Rendering exceeded RenderConfig.max_depth."""


class LiteralEvaluationError(StructRenderError):
    """Literal text could not be evaluated.

    Attributes:
        text: The text passed to evaluate()
    """

    def __init__(self, message: str | Diagnostic, *, text: str = "") -> None:
        """Initialize LiteralEvaluationError.

        Args:
            message: Error message string OR Diagnostic object
            text: The literal text that failed to evaluate
        """
        super().__init__(message)
        self.text = text
