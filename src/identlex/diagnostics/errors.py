"""identlex exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Recognizers return these in their error tuple instead of raising them;
callers that prefer exceptions may raise them directly.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory


class IdentError(Exception):
    """Base exception for all identlex errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        input_value: The string that failed to parse
        format_name: Recognizer that produced the error ("ipv4", "isbn", ...)
    """

    category: ErrorCategory = ErrorCategory.SYNTAX

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        format_name: str = "",
    ) -> None:
        """Initialize IdentError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to parse
            format_name: Recognizer that produced the error
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)
        self.input_value = input_value
        self.format_name = format_name

    def format_error(self) -> str:
        """Format the error with the offending input and a caret pointer."""
        if self.diagnostic is None:
            return str(self)
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self.diagnostic, self.input_value)


class IdentSyntaxError(IdentError):
    """Input does not match the recognizer's grammar (malformed)."""

    category = ErrorCategory.SYNTAX


class IdentSemanticError(IdentError):
    """Input matches the grammar but fails a post-parse check.

    Example:
        An ISBN whose check digit does not satisfy the checksum.
    """

    category = ErrorCategory.SEMANTIC
