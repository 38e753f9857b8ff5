"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Cursor read past the end of input.

        Args:
            position: Position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            span=SourceSpan(start=position, end=position),
        )

    @staticmethod
    def expected_token(
        expected: str,
        position: int,
        found: str,
        *,
        is_literal: bool = False,
        hint: str | None = None,
    ) -> Diagnostic:
        """Grammar mismatch at a position.

        Literal tokens are double-quoted; character-class descriptions
        such as ``a hex digit`` are shown as-is. The reported position is
        1-based.

        Args:
            expected: Token text or description required at position
            position: 0-based cursor of the mismatch
            found: Offending character or "end of string"
            is_literal: Whether ``expected`` is verbatim text
            hint: Optional format-specific suggestion

        Returns:
            Diagnostic for SYNTAX_EXPECTED

        Example:
            >>> ErrorTemplate.expected_token(".", 3, "2", is_literal=True).message
            'Expected "." at position 4 but found "2"'
        """
        shown = f'"{expected}"' if is_literal else expected
        msg = f'Expected {shown} at position {position + 1} but found "{found}"'
        return Diagnostic(
            code=DiagnosticCode.SYNTAX_EXPECTED,
            message=msg,
            span=SourceSpan(start=position, end=position + 1),
            hint=hint,
            expected=expected,
            found=found,
        )

    @staticmethod
    def input_too_long(format_name: str, length: int, limit: int) -> Diagnostic:
        """Input exceeds the configured maximum length.

        Args:
            format_name: Recognizer that rejected the input
            length: Actual input length
            limit: Configured maximum

        Returns:
            Diagnostic for INPUT_TOO_LONG
        """
        msg = f"Input for {format_name} is {length} characters long (maximum {limit})"
        return Diagnostic(
            code=DiagnosticCode.INPUT_TOO_LONG,
            message=msg,
            span=SourceSpan(start=limit, end=length),
            hint="Identifiers are short; check that the right field was passed",
        )

    @staticmethod
    def isbn_checksum_invalid(value: str, edition: str, remainder: int) -> Diagnostic:
        """ISBN is well-formed but its check symbol does not match.

        Args:
            value: The ISBN as given
            edition: "ISBN-10" or "ISBN-13"
            remainder: Weighted sum modulo 11 (ISBN-10) or 10 (ISBN-13)

        Returns:
            Diagnostic for ISBN_CHECKSUM_INVALID
        """
        msg = f"Invalid {edition} checksum for '{value}' (remainder {remainder})"
        return Diagnostic(
            code=DiagnosticCode.ISBN_CHECKSUM_INVALID,
            message=msg,
            span=SourceSpan(start=len(value) - 1, end=len(value)),
            hint="Check for a mistyped or transposed digit",
        )
