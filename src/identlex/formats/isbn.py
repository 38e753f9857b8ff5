"""ISBN-10 / ISBN-13 recognizer with checksum validation.

Grammar:
    isbn   = isbn10 / isbn13
    isbn13 = DIGIT 12(["-"] DIGIT) END
    isbn10 = DIGIT 8(["-"] DIGIT) ["-"] (DIGIT / "X") END

A hyphen may separate any two symbols, at most one at a time; leading and
trailing hyphens are rejected. Registration group boundaries vary by
publisher range, so hyphen placement is not checked against them.

Checksums:
    ISBN-10: sum of symbol * weight for weights 10..1 ("X" = 10), valid when
             the sum is divisible by 11.
    ISBN-13: sum of digit * weight for weights 1,3,1,3,..., valid when the
             sum is divisible by 10.

A well-formed ISBN with a bad checksum is a semantic error
(IdentSemanticError, ISBN_CHECKSUM_INVALID), distinct from syntax errors.

Python 3.13+.
"""

from identlex.core.char_classes import is_ascii_digit
from identlex.diagnostics import Diagnostic, ErrorTemplate
from identlex.formats._runner import ParseOutcome, run_format
from identlex.formats.types import Isbn, IsbnEdition
from identlex.syntax.combinators import (
    Parser,
    alt,
    char,
    digit,
    end,
    literal,
    map_value,
    optional,
    recognize,
    repeat,
    run,
    sequence,
)
from identlex.syntax.cursor import ParseResult

__all__ = ["checksum_remainder", "parse", "run_parser"]

FORMAT_NAME = "isbn"

_ISBN10_MODULUS = 11
_ISBN13_MODULUS = 10
_CHECK_X = "X"

_HINT = "Write 10 symbols (last may be X) or 13 digits, optionally separated by single hyphens"

_hyphen = optional(literal("-"))
_next_digit = sequence(_hyphen, digit())
_check_symbol = char(lambda ch: is_ascii_digit(ch) or ch == _CHECK_X, 'a digit or "X"')


def _edition(edition: IsbnEdition, grammar: Parser[object]) -> Parser[Isbn]:
    return map_value(
        recognize(grammar),
        lambda text: Isbn(edition, text.replace("-", ""), text),
    )


_ISBN: Parser[Isbn] = alt(
    _edition(
        IsbnEdition.ISBN10,
        sequence(digit(), repeat(8, 8, _next_digit), _hyphen, _check_symbol, end()),
    ),
    _edition(IsbnEdition.ISBN13, sequence(digit(), repeat(12, 12, _next_digit), end())),
)


def checksum_remainder(edition: IsbnEdition, symbols: str) -> int:
    """Compute the weighted checksum remainder; zero means valid.

    Args:
        edition: Which weighting scheme to apply
        symbols: The 10 or 13 symbols with hyphens removed

    Example:
        >>> checksum_remainder(IsbnEdition.ISBN10, "9992158107")
        0
        >>> checksum_remainder(IsbnEdition.ISBN13, "9780306406158")
        1
    """
    if edition is IsbnEdition.ISBN10:
        total = sum(
            (10 - index) * (10 if symbol == _CHECK_X else int(symbol))
            for index, symbol in enumerate(symbols)
        )
        return total % _ISBN10_MODULUS
    total = sum((3 if index % 2 else 1) * int(symbol) for index, symbol in enumerate(symbols))
    return total % _ISBN13_MODULUS


def _verify_checksum(isbn: Isbn, value: str) -> str | Diagnostic:
    remainder = checksum_remainder(isbn.edition, isbn.symbols)
    if remainder:
        label = "ISBN-10" if isbn.edition is IsbnEdition.ISBN10 else "ISBN-13"
        return ErrorTemplate.isbn_checksum_invalid(value, label, remainder)
    return isbn.value


def run_parser(value: str) -> ParseResult[Isbn]:
    """Run the ISBN grammar (no checksum) and return the raw parse result."""
    return run(_ISBN, value)


def parse(value: str) -> ParseOutcome[str]:
    """Parse and checksum-validate an ISBN-10 or ISBN-13.

    Args:
        value: Candidate ISBN, hyphens optional

    Returns:
        Tuple of (result, errors):
        - result: The input string unchanged (hyphens preserved), or None
        - errors: Tuple of IdentError (empty tuple on success). Checksum
          failures are IdentSemanticError; grammar failures are
          IdentSyntaxError.

    Examples:
        >>> parse("978-0-306-40615-7")
        ('978-0-306-40615-7', ())

        >>> _, errors = parse("978-0-306-40615-8")
        >>> errors[0].category
        <ErrorCategory.SEMANTIC: 'semantic'>
    """
    return run_format(FORMAT_NAME, _ISBN, value, finish=_verify_checksum, hint=_HINT)
