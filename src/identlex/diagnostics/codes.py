"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "SourceSpan",
]


class ErrorCategory(StrEnum):
    """Error categorization for IdentError.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        SYNTAX: Input does not match the grammar (malformed)
        SEMANTIC: Input matches the grammar but fails a post-parse check
            (well-formed but invalid)
    """

    SYNTAX = "syntax"
    SEMANTIC = "semantic"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        3000-3999: Syntax errors (grammar failures)
        4000-4999: Semantic errors (post-parse invariants)
    """

    # Syntax errors (3000-3999)
    UNEXPECTED_EOF = 3001
    SYNTAX_EXPECTED = 3002
    INPUT_TOO_LONG = 3003

    # Semantic errors (4000-4999)
    ISBN_CHECKSUM_INVALID = 4001

    @property
    def category(self) -> ErrorCategory:
        """Category implied by the code range."""
        if self.value >= 4000:  # noqa: PLR2004 - code range boundary
            return ErrorCategory.SEMANTIC
        return ErrorCategory.SYNTAX


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source location for error reporting.

    Identifiers are single-line, so only character offsets are tracked.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    @property
    def column(self) -> int:
        """1-based column of the span start, as shown to users."""
        return self.start + 1


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when not tied to a position)
        hint: Suggestion for fixing the error
        expected: What the grammar required at ``span`` (syntax errors)
        found: What was actually there (syntax errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    expected: str | None = None
    found: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[SYNTAX_EXPECTED]: Expected "." at position 4 but found "2"
              --> position 4
              = help: Separate the four octets with "."

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
