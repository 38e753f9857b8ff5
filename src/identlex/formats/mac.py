"""MAC (hardware) address recognizer.

Six notations are tried in this order, each required to consume the whole
input:

    notation                family  example
    six_groups_by_colon     mac48   ff:ff:ff:ff:ff:ff
    six_groups_by_hyphen    mac48   ff-ff-ff-ff-ff-ff
    three_groups_by_dot     mac48   ffff.ffff.ffff
    eight_groups_by_colon   mac64   ff:ff:ff:ff:ff:ff:ff:ff
    eight_groups_by_hyphen  mac64   ff-ff-ff-ff-ff-ff-ff-ff
    four_groups_by_dot      mac64   ffff.ffff.ffff.ffff

Colon and hyphen notations use 2-digit groups; dot notations use 4-digit
groups. Hex digits may be of either case and are not normalized.

When no notation matches, the reported error is the one from the notation
that matched the most input before failing. For example, a seven-group
colon address is reported as missing the eighth group rather than as
having trailing content after six groups.

Python 3.13+.
"""

from identlex.formats._runner import ParseOutcome, run_format
from identlex.formats.types import MacAddress, MacFamily, MacNotation
from identlex.syntax.combinators import (
    Parser,
    alt,
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

__all__ = ["NOTATION_FAMILIES", "parse", "run_parser"]

FORMAT_NAME = "mac"

_HINT = (
    'Use 6 or 8 two-digit hex groups separated by ":" or "-", '
    'or 3 or 4 four-digit hex groups separated by "."'
)

NOTATION_FAMILIES: dict[MacNotation, MacFamily] = {
    MacNotation.SIX_GROUPS_BY_COLON: MacFamily.MAC48,
    MacNotation.SIX_GROUPS_BY_HYPHEN: MacFamily.MAC48,
    MacNotation.THREE_GROUPS_BY_DOT: MacFamily.MAC48,
    MacNotation.EIGHT_GROUPS_BY_COLON: MacFamily.MAC64,
    MacNotation.EIGHT_GROUPS_BY_HYPHEN: MacFamily.MAC64,
    MacNotation.FOUR_GROUPS_BY_DOT: MacFamily.MAC64,
}

_pair = repeat(2, 2, hex_digit())
_quad = repeat(4, 4, hex_digit())


def _notation(
    notation: MacNotation, group: Parser[tuple[str, ...]], separator: str, count: int
) -> Parser[MacAddress]:
    """Build one notation: ``count`` groups joined by ``separator``, then END."""
    rest = repeat(count - 1, count - 1, sequence(literal(separator), group))
    family = NOTATION_FAMILIES[notation]
    return map_value(
        recognize(sequence(group, rest, end())),
        lambda text: MacAddress(family, notation, text),
    )


_MAC: Parser[MacAddress] = alt(
    _notation(MacNotation.SIX_GROUPS_BY_COLON, _pair, ":", 6),
    _notation(MacNotation.SIX_GROUPS_BY_HYPHEN, _pair, "-", 6),
    _notation(MacNotation.THREE_GROUPS_BY_DOT, _quad, ".", 3),
    _notation(MacNotation.EIGHT_GROUPS_BY_COLON, _pair, ":", 8),
    _notation(MacNotation.EIGHT_GROUPS_BY_HYPHEN, _pair, "-", 8),
    _notation(MacNotation.FOUR_GROUPS_BY_DOT, _quad, ".", 4),
)


def run_parser(value: str) -> ParseResult[MacAddress]:
    """Run the MAC grammar and return the raw parse result."""
    return run(_MAC, value)


def parse(value: str) -> ParseOutcome[MacAddress]:
    """Parse a MAC address in any of the six supported notations.

    Args:
        value: Candidate address, e.g. "00:1a:2b:3c:4d:5e"

    Returns:
        Tuple of (result, errors):
        - result: MacAddress with family, notation and the input value
        - errors: Tuple of IdentError (empty tuple on success)

    Example:
        >>> address, _ = parse("ffff.ffff.ffff")
        >>> address.family, address.notation
        (<MacFamily.MAC48: 'mac48'>, <MacNotation.THREE_GROUPS_BY_DOT: 'three_groups_by_dot'>)
    """
    return run_format(
        FORMAT_NAME, _MAC, value, finish=lambda address, _: address, hint=_HINT
    )
