"""Format recognizers built on the combinator core.

Each submodule exposes:
    parse(value) - Returns tuple[T | None, tuple[IdentError, ...]], never raises
    run_parser(value) - Returns the raw ParseResult for diagnostics and tests

Submodules:
    ipv4 - Dotted-quad IPv4 addresses
    ipv6 - Fully expanded IPv6 addresses
    mac - MAC addresses in six notations (mac48 / mac64)
    uuid - Hyphenated UUIDs, plus format / is_nil / is_max
    isbn - ISBN-10 and ISBN-13 with checksum validation
    boolean - Fixed boolean token vocabulary

Example:
    >>> from identlex.formats import mac
    >>> address, errors = mac.parse("00-1A-2B-3C-4D-5E")
    >>> address.family
    <MacFamily.MAC48: 'mac48'>

Python 3.13+.
"""

from . import boolean, ipv4, ipv6, isbn, mac, uuid
from .types import (
    IpAddress,
    IpKind,
    Isbn,
    IsbnEdition,
    MacAddress,
    MacFamily,
    MacNotation,
    Uuid,
)

__all__ = [
    "IpAddress",
    "IpKind",
    "Isbn",
    "IsbnEdition",
    "MacAddress",
    "MacFamily",
    "MacNotation",
    "Uuid",
    "boolean",
    "ipv4",
    "ipv6",
    "isbn",
    "mac",
    "uuid",
]
