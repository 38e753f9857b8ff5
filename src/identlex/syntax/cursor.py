"""Immutable cursor and parse result types for the combinator core.

Implements the immutable cursor pattern for zero-`None` parsing.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor
    - Failures are values, never exceptions

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass

from identlex.constants import END_OF_STRING
from identlex.diagnostics import ErrorTemplate

__all__ = ["Cursor", "ParseFailure", "ParseResult", "ParseSuccess"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    The source buffer is fixed for the lifetime of one parse; only ``pos``
    moves. Two cursors over the same source are compared by ``pos`` when
    measuring progress.

    Example:
        >>> cursor = Cursor("abc", 0)
        >>> cursor.current
        'a'
        >>> cursor.advance().current
        'b'
        >>> cursor.current  # Original unchanged
        'a'
        >>> Cursor("ab", 2).is_eof
        True
    """

    source: str
    pos: int = 0

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    @property
    def found(self) -> str:
        """Describe the character under the cursor for error reports.

        Returns:
            The current character, or ``"end of string"`` at EOF
        """
        if self.is_eof:
            return END_OF_STRING
        return self.source[self.pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos.

        Example:
            >>> start = Cursor("hello world", 0)
            >>> start.slice_to(5)
            'hello'
        """
        return self.source[self.pos : end_pos]

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor.

        May return fewer characters near EOF.
        """
        return self.source[self.pos : self.pos + n]


@dataclass(frozen=True, slots=True)
class ParseSuccess[T]:
    """Successful parser result.

    Attributes:
        value: Parsed value
        start: Cursor before the parser ran
        next: Cursor after the consumed input

    Example:
        >>> start = Cursor("42", 0)
        >>> result = ParseSuccess("4", start, start.advance())
        >>> result.consumed
        '4'
    """

    value: T
    start: Cursor
    next: Cursor

    @property
    def consumed(self) -> str:
        """Source text consumed by this parser."""
        return self.start.slice_to(self.next.pos)

    @property
    def remaining(self) -> str:
        """Source text left unconsumed after this parser."""
        return self.next.source[self.next.pos :]


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """Failed parser result.

    Attributes:
        expected: Human-readable description of what was required
        position: Absolute 0-based cursor where the mismatch occurred
        found: Offending character, or ``"end of string"``
        is_literal: True when ``expected`` is verbatim text rather than a
            character-class description (quoted in messages)

    Example:
        >>> failure = ParseFailure(expected=".", position=3, found="2", is_literal=True)
        >>> failure.describe()
        'Expected "." at position 4 but found "2"'
    """

    expected: str
    position: int
    found: str
    is_literal: bool = False

    @classmethod
    def at(cls, cursor: Cursor, expected: str, *, is_literal: bool = False) -> "ParseFailure":
        """Build a failure at the cursor's current position."""
        return cls(
            expected=expected, position=cursor.pos, found=cursor.found, is_literal=is_literal
        )

    def describe(self) -> str:
        """Format the failure as a user-facing message (1-based position)."""
        diagnostic = ErrorTemplate.expected_token(
            self.expected, self.position, self.found, is_literal=self.is_literal
        )
        return diagnostic.message


type ParseResult[T] = ParseSuccess[T] | ParseFailure
