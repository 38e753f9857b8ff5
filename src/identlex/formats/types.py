"""Value types produced by the format recognizers.

All values are immutable. Each one re-parses to an equal value through the
recognizer that produced it.

Python 3.13+.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import NewType

__all__ = [
    "IpAddress",
    "IpKind",
    "Isbn",
    "IsbnEdition",
    "MacAddress",
    "MacFamily",
    "MacNotation",
    "Uuid",
]


class IpKind(StrEnum):
    """IP address version tag."""

    V4 = "ip_v4"
    V6 = "ip_v6"


@dataclass(frozen=True, slots=True)
class IpAddress:
    """Validated IP address literal.

    Attributes:
        kind: Address version
        value: The input string, unchanged
    """

    kind: IpKind
    value: str

    def __str__(self) -> str:
        return self.value


class MacFamily(StrEnum):
    """Hardware address width: 48-bit (EUI-48) or 64-bit (EUI-64)."""

    MAC48 = "mac48"
    MAC64 = "mac64"


class MacNotation(StrEnum):
    """Concrete textual notation a MAC address was written in."""

    SIX_GROUPS_BY_COLON = "six_groups_by_colon"
    SIX_GROUPS_BY_HYPHEN = "six_groups_by_hyphen"
    THREE_GROUPS_BY_DOT = "three_groups_by_dot"
    EIGHT_GROUPS_BY_COLON = "eight_groups_by_colon"
    EIGHT_GROUPS_BY_HYPHEN = "eight_groups_by_hyphen"
    FOUR_GROUPS_BY_DOT = "four_groups_by_dot"


@dataclass(frozen=True, slots=True)
class MacAddress:
    """Validated MAC address.

    Attributes:
        family: mac48 or mac64
        notation: Which of the six notations matched
        value: The input string, unchanged
    """

    family: MacFamily
    notation: MacNotation
    value: str

    def __str__(self) -> str:
        return self.value


# Branded string: only produced by identlex.formats.uuid.parse().
Uuid = NewType("Uuid", str)


class IsbnEdition(StrEnum):
    """ISBN numbering edition."""

    ISBN10 = "isbn10"
    ISBN13 = "isbn13"


@dataclass(frozen=True, slots=True)
class Isbn:
    """Grammar-level ISBN match, before checksum validation.

    Returned by ``identlex.formats.isbn.run_parser``; the public ``parse``
    exposes only the accepted string.

    Attributes:
        edition: ISBN-10 or ISBN-13
        symbols: Check-relevant symbols with hyphens removed
        value: The input string, hyphens preserved
    """

    edition: IsbnEdition
    symbols: str
    value: str
