"""Character class predicates shared by the recognizers.

Single source of truth for which characters count as digits and hex digits.
Python's ``str.isdigit()`` accepts Unicode digits such as '²' or '٣', which
none of the identifier grammars allow, so every check here is ASCII-only.

Thread Safety:
    All functions in this module are pure functions with no shared state.

Python 3.13+.
"""

from __future__ import annotations

__all__ = [
    "ASCII_DIGITS",
    "HEX_DIGITS",
    "is_ascii_digit",
    "is_hex_digit",
    "is_hex_string",
]

ASCII_DIGITS: frozenset[str] = frozenset("0123456789")
HEX_DIGITS: frozenset[str] = frozenset("0123456789abcdefABCDEF")


def is_ascii_digit(ch: str) -> bool:
    """Check if character is an ASCII decimal digit.

    Example:
        >>> is_ascii_digit('7')
        True
        >>> is_ascii_digit('²')
        False
    """
    return ch in ASCII_DIGITS


def is_hex_digit(ch: str) -> bool:
    """Check if character is an ASCII hexadecimal digit (either case).

    Example:
        >>> is_hex_digit('F')
        True
        >>> is_hex_digit('g')
        False
    """
    return ch in HEX_DIGITS


def is_hex_string(text: str) -> bool:
    """Check that a non-empty string consists only of hex digits."""
    return bool(text) and all(ch in HEX_DIGITS for ch in text)
