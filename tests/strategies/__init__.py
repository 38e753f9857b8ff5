"""Hypothesis strategies for identlex property-based testing.

Usage:
    from tests.strategies import ipv4_addresses, uuids
    from tests.strategies.identifiers import MAC_LAYOUTS
"""

from .identifiers import (
    FALSE_TOKENS,
    MAC_LAYOUTS,
    TRUE_TOKENS,
    boolean_tokens,
    hex_groups,
    ipv4_addresses,
    ipv6_addresses,
    isbn10s,
    isbn13s,
    mac_addresses,
    uuids,
)

__all__ = [
    "FALSE_TOKENS",
    "MAC_LAYOUTS",
    "TRUE_TOKENS",
    "boolean_tokens",
    "hex_groups",
    "ipv4_addresses",
    "ipv6_addresses",
    "isbn10s",
    "isbn13s",
    "mac_addresses",
    "uuids",
]
