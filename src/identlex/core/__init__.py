"""Core utilities shared by the combinator layer and the recognizers.

Exports:
    is_ascii_digit: ASCII-only decimal digit predicate
    is_hex_digit: ASCII-only hexadecimal digit predicate

Python 3.13+.
"""

from .char_classes import is_ascii_digit, is_hex_digit, is_hex_string

__all__ = ["is_ascii_digit", "is_hex_digit", "is_hex_string"]
