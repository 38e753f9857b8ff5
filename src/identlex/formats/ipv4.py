"""IPv4 dotted-quad recognizer.

Grammar:
    ipv4  = octet "." octet "." octet "." octet END
    octet = 1*3DIGIT

Octets are limited by digit count only; ``999.999.999.999`` is accepted.
The octet parser is greedy, so ``1922.168.1.1`` fails at the fourth
character where "." was expected, not inside the digits.

Python 3.13+.
"""

from identlex.formats._runner import ParseOutcome, run_format
from identlex.formats.types import IpAddress, IpKind
from identlex.syntax.combinators import (
    Parser,
    digit,
    end,
    literal,
    map_value,
    recognize,
    repeat,
    run,
    sequence,
)
from identlex.syntax.cursor import ParseResult

__all__ = ["parse", "run_parser"]

FORMAT_NAME = "ipv4"

_OCTET_DESCRIPTION = "octet to be 1-3 digit(s)"
_HINT = 'Write four groups of 1-3 digits separated by "."'

_octet = repeat(1, 3, digit(), _OCTET_DESCRIPTION)
_dot = literal(".")

_IPV4: Parser[IpAddress] = map_value(
    recognize(sequence(_octet, _dot, _octet, _dot, _octet, _dot, _octet, end())),
    lambda text: IpAddress(IpKind.V4, text),
)


def run_parser(value: str) -> ParseResult[IpAddress]:
    """Run the IPv4 grammar and return the raw parse result."""
    return run(_IPV4, value)


def parse(value: str) -> ParseOutcome[IpAddress]:
    """Parse an IPv4 address in dotted-quad notation.

    Args:
        value: Candidate address, e.g. "192.168.1.1"

    Returns:
        Tuple of (result, errors):
        - result: IpAddress(kind="ip_v4", value=<input>), or None on failure
        - errors: Tuple of IdentError (empty tuple on success)

    Examples:
        >>> address, errors = parse("192.168.1.1")
        >>> address.kind, address.value
        (<IpKind.V4: 'ip_v4'>, '192.168.1.1')

        >>> _, errors = parse("1922.168.1.1")
        >>> str(errors[0])
        'Expected "." at position 4 but found "2"'
    """
    return run_format(
        FORMAT_NAME, _IPV4, value, finish=lambda address, _: address, hint=_HINT
    )
