"""Parser combinators over the immutable cursor.

A parser is a pure function ``Cursor -> ParseResult[T]``. Parsers never
raise on bad input and never hold state between calls: running the same
parser twice on the same input yields equal results, and concurrent use
from several threads needs no synchronization.

Primitives:
    char       - one character satisfying a predicate
    literal    - verbatim text
    end        - end of input

Combinators:
    repeat     - greedy bounded repetition
    sequence   - run parsers in order, collect values as a tuple
    map_value  - transform a successful value
    alt        - ordered choice with backtracking and furthest-failure reporting
    optional   - zero or one occurrence
    recognize  - replace a value with the source text it consumed

Error positions:
    Every failure carries the absolute cursor where input stopped matching.
    ``literal`` reports the first differing character, not the start of the
    literal. ``repeat`` is greedy and never reports inside the run it
    consumed; a too-long run surfaces at whatever the grammar expects next.
    ``alt`` returns the failure that got furthest into the input.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable

from identlex.constants import END_OF_STRING, EXPECTED_DIGIT, EXPECTED_HEX_DIGIT
from identlex.core.char_classes import is_ascii_digit, is_hex_digit
from identlex.syntax.cursor import Cursor, ParseFailure, ParseResult, ParseSuccess

__all__ = [
    "Parser",
    "alt",
    "char",
    "digit",
    "end",
    "hex_digit",
    "literal",
    "map_value",
    "optional",
    "recognize",
    "repeat",
    "run",
    "sequence",
]

type Parser[T] = Callable[[Cursor], ParseResult[T]]


def run[T](parser: Parser[T], source: str) -> ParseResult[T]:
    """Run a parser from the start of ``source``."""
    return parser(Cursor(source, 0))


# ============================================================================
# PRIMITIVES
# ============================================================================


def char(predicate: Callable[[str], bool], description: str) -> Parser[str]:
    """Match one character for which ``predicate`` holds.

    Args:
        predicate: Character test
        description: What to report as expected on failure

    Example:
        >>> parser = char(str.isupper, "an uppercase letter")
        >>> run(parser, "Ab").value
        'A'
        >>> run(parser, "ab").expected
        'an uppercase letter'
    """

    def parse_char(cursor: Cursor) -> ParseResult[str]:
        if not cursor.is_eof:
            ch = cursor.current
            if predicate(ch):
                return ParseSuccess(ch, cursor, cursor.advance())
        return ParseFailure.at(cursor, description)

    return parse_char


def literal(text: str) -> Parser[str]:
    """Match ``text`` verbatim.

    On mismatch the failure is positioned at the first character that
    differs, so a partial match reports how far it got.

    Example:
        >>> run(literal("true"), "trie").position
        2
    """

    def parse_literal(cursor: Cursor) -> ParseResult[str]:
        current = cursor
        for expected_ch in text:
            if current.is_eof or current.current != expected_ch:
                return ParseFailure.at(current, text, is_literal=True)
            current = current.advance()
        return ParseSuccess(text, cursor, current)

    return parse_literal


def end() -> Parser[None]:
    """Succeed only when the whole input has been consumed."""

    def parse_end(cursor: Cursor) -> ParseResult[None]:
        if cursor.is_eof:
            return ParseSuccess(None, cursor, cursor)
        return ParseFailure.at(cursor, END_OF_STRING)

    return parse_end


def digit() -> Parser[str]:
    """Match one ASCII decimal digit."""
    return char(is_ascii_digit, EXPECTED_DIGIT)


def hex_digit() -> Parser[str]:
    """Match one ASCII hexadecimal digit (either case)."""
    return char(is_hex_digit, EXPECTED_HEX_DIGIT)


# ============================================================================
# COMBINATORS
# ============================================================================


def repeat[T](
    min_count: int,
    max_count: int,
    element: Parser[T],
    description: str | None = None,
) -> Parser[tuple[T, ...]]:
    """Match ``element`` greedily between ``min_count`` and ``max_count`` times.

    Consumption stops at ``max_count`` even if more elements would match;
    the caller's next parser then reports the overrun. When fewer than
    ``min_count`` elements match, the element's own failure is returned,
    relabelled with ``description`` if one is given.

    Args:
        min_count: Minimum number of elements required
        max_count: Maximum number of elements consumed
        element: Parser for one element
        description: Optional expected-text override for the too-few case

    Raises:
        ValueError: If the bounds are inconsistent (programming error)

    Example:
        >>> result = run(repeat(1, 3, digit()), "19216")
        >>> result.value, result.next.pos
        (('1', '9', '2'), 3)
    """
    if min_count < 0 or max_count < min_count:
        msg = f"repeat bounds must satisfy 0 <= min <= max, got {min_count}..{max_count}"
        raise ValueError(msg)

    def parse_repeat(cursor: Cursor) -> ParseResult[tuple[T, ...]]:
        values: list[T] = []
        current = cursor
        while len(values) < max_count:
            result = element(current)
            if isinstance(result, ParseFailure):
                if len(values) < min_count:
                    if description is None:
                        return result
                    return ParseFailure(
                        expected=description, position=result.position, found=result.found
                    )
                break
            values.append(result.value)
            current = result.next
        return ParseSuccess(tuple(values), cursor, current)

    return parse_repeat


def sequence(*parsers: Parser[object]) -> Parser[tuple[object, ...]]:
    """Run parsers in order, collecting their values into a tuple.

    The first failure is returned unchanged.

    Example:
        >>> run(sequence(digit(), literal("."), digit()), "1.2").value
        ('1', '.', '2')
    """

    def parse_sequence(cursor: Cursor) -> ParseResult[tuple[object, ...]]:
        values: list[object] = []
        current = cursor
        for parser in parsers:
            result = parser(current)
            if isinstance(result, ParseFailure):
                return result
            values.append(result.value)
            current = result.next
        return ParseSuccess(tuple(values), cursor, current)

    return parse_sequence


def map_value[T, U](parser: Parser[T], fn: Callable[[T], U]) -> Parser[U]:
    """Transform the value of a successful parse.

    Positions and failures pass through untouched.
    """

    def parse_mapped(cursor: Cursor) -> ParseResult[U]:
        result = parser(cursor)
        if isinstance(result, ParseFailure):
            return result
        return ParseSuccess(fn(result.value), result.start, result.next)

    return parse_mapped


def alt[T](*parsers: Parser[T]) -> Parser[T]:
    """Try alternatives in order from the same cursor; first success wins.

    Failed alternatives consume nothing. If every alternative fails, the
    failure with the greatest position is returned; on a tie the earliest
    alternative's failure is kept.

    Raises:
        ValueError: If called with no alternatives (programming error)

    Example:
        >>> parser = alt(literal("on"), literal("off"))
        >>> run(parser, "off").value
        'off'
        >>> failure = run(parser, "ox")
        >>> failure.expected, failure.position
        ('on', 1)
    """
    if not parsers:
        msg = "alt requires at least one alternative"
        raise ValueError(msg)

    def parse_alt(cursor: Cursor) -> ParseResult[T]:
        furthest: ParseFailure | None = None
        for parser in parsers:
            result = parser(cursor)
            if isinstance(result, ParseSuccess):
                return result
            if furthest is None or result.position > furthest.position:
                furthest = result
        assert furthest is not None  # noqa: S101 - parsers is non-empty
        return furthest

    return parse_alt


def optional[T](parser: Parser[T]) -> Parser[T | None]:
    """Match ``parser`` zero or one time; the value is ``None`` when absent."""
    return map_value(repeat(0, 1, parser), lambda values: values[0] if values else None)


def recognize(parser: Parser[object]) -> Parser[str]:
    """Replace a successful value with the source text it consumed.

    Example:
        >>> run(recognize(sequence(digit(), digit())), "42x").value
        '42'
    """

    def parse_recognized(cursor: Cursor) -> ParseResult[str]:
        result = parser(cursor)
        if isinstance(result, ParseFailure):
            return result
        return ParseSuccess(result.consumed, result.start, result.next)

    return parse_recognized
