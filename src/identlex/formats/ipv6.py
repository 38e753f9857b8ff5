"""IPv6 recognizer (fully expanded form).

Grammar:
    ipv6  = group 7(":" group) END
    group = 1*4HEXDIG

Only the fully expanded eight-group form is recognized. Zero-run
compression (``::``) and embedded IPv4 tails are not: an empty group fails
with "a hex digit" expected at the delimiter.

Python 3.13+.
"""

from identlex.formats._runner import ParseOutcome, run_format
from identlex.formats.types import IpAddress, IpKind
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

__all__ = ["GROUP_COUNT", "parse", "run_parser"]

FORMAT_NAME = "ipv6"
GROUP_COUNT = 8

_HINT = 'Write eight groups of 1-4 hex digits separated by ":" ("::" is not supported)'

_group = repeat(1, 4, hex_digit())
_tail = repeat(GROUP_COUNT - 1, GROUP_COUNT - 1, sequence(literal(":"), _group))

_IPV6: Parser[IpAddress] = map_value(
    recognize(sequence(_group, _tail, end())),
    lambda text: IpAddress(IpKind.V6, text),
)


def run_parser(value: str) -> ParseResult[IpAddress]:
    """Run the IPv6 grammar and return the raw parse result."""
    return run(_IPV6, value)


def parse(value: str) -> ParseOutcome[IpAddress]:
    """Parse a fully expanded IPv6 address.

    Examples:
        >>> address, _ = parse("2001:0db8:85a3:0000:0000:8a2e:0370:7334")
        >>> address.kind
        <IpKind.V6: 'ip_v6'>

        >>> _, errors = parse("2001::0000:0000:0000:8a2e:0370:7334")
        >>> str(errors[0])
        'Expected a hex digit at position 6 but found ":"'
    """
    return run_format(
        FORMAT_NAME, _IPV6, value, finish=lambda address, _: address, hint=_HINT
    )
