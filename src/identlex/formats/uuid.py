"""UUID recognizer and canonicalizer.

Grammar:
    uuid = 8HEXDIG "-" 4HEXDIG "-" 4HEXDIG "-" 4HEXDIG "-" 12HEXDIG END

Hex digits are case-insensitive. ``parse`` returns the input unchanged as a
``Uuid``; use ``format`` for the lowercase canonical form. Version and
variant bits are not inspected.

Python 3.13+.
"""

from identlex.diagnostics import Diagnostic
from identlex.formats._runner import ParseOutcome, run_format
from identlex.formats.types import Uuid
from identlex.syntax.combinators import (
    Parser,
    end,
    hex_digit,
    literal,
    map_value,
    recognize,
    repeat,
    run,
    sequence,
)
from identlex.syntax.cursor import ParseResult

__all__ = ["GROUP_LENGTHS", "MAX", "NIL", "format", "is_max", "is_nil", "parse", "run_parser"]

FORMAT_NAME = "uuid"
GROUP_LENGTHS: tuple[int, ...] = (8, 4, 4, 4, 12)

NIL = Uuid("00000000-0000-0000-0000-000000000000")
MAX = Uuid("ffffffff-ffff-ffff-ffff-ffffffffffff")

_HINT = "Write 32 hex digits grouped 8-4-4-4-12 and separated by hyphens"


def _groups() -> Parser[object]:
    parsers: list[Parser[object]] = []
    for index, length in enumerate(GROUP_LENGTHS):
        if index:
            parsers.append(literal("-"))
        parsers.append(repeat(length, length, hex_digit()))
    parsers.append(end())
    return sequence(*parsers)


_UUID: Parser[Uuid] = map_value(recognize(_groups()), Uuid)


def run_parser(value: str) -> ParseResult[Uuid]:
    """Run the UUID grammar and return the raw parse result."""
    return run(_UUID, value)


def parse(value: str) -> ParseOutcome[Uuid]:
    """Parse a hyphenated UUID.

    Examples:
        >>> uuid, errors = parse("02357C30-AFE7-11E4-AB7D-12E3F512A338")
        >>> uuid
        '02357C30-AFE7-11E4-AB7D-12E3F512A338'

        >>> _, errors = parse("2357C30-AFE7-11E4-AB7D-12E3F512A338")
        >>> str(errors[0])
        'Expected a hex digit at position 8 but found "-"'
    """
    return run_format(FORMAT_NAME, _UUID, value, finish=_keep, hint=_HINT)


def _keep(uuid: Uuid, _: str) -> Uuid | Diagnostic:
    return uuid


def format(uuid: Uuid) -> Uuid:  # noqa: A001 - public name mirrors the operation
    """Return the lowercase canonical form of a parsed UUID.

    Example:
        >>> format(Uuid("02357C30-AFE7-11E4-AB7D-12E3F512A338"))
        '02357c30-afe7-11e4-ab7d-12e3f512a338'
    """
    return Uuid(uuid.lower())


def _hex_digits(uuid: Uuid) -> str:
    return uuid.replace("-", "")


def is_nil(uuid: Uuid) -> bool:
    """True iff every hex digit is 0."""
    return all(ch == "0" for ch in _hex_digits(uuid))


def is_max(uuid: Uuid) -> bool:
    """True iff every hex digit is f or F."""
    return all(ch in "fF" for ch in _hex_digits(uuid))
