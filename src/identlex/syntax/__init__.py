"""Combinator core: immutable cursor, parse results and combinators.

Public API:
    Cursor - Immutable (source, pos) parse state
    ParseSuccess / ParseFailure / ParseResult - Parser outcomes
    Parser - Type alias for ``Cursor -> ParseResult[T]``
    char, literal, end, digit, hex_digit - Primitive parsers
    repeat, sequence, map_value, alt, optional, recognize - Combinators
    run - Run a parser from the start of a string

Python 3.13+. Zero external dependencies.
"""

from .combinators import (
    Parser,
    alt,
    char,
    digit,
    end,
    hex_digit,
    literal,
    map_value,
    optional,
    recognize,
    repeat,
    run,
    sequence,
)
from .cursor import Cursor, ParseFailure, ParseResult, ParseSuccess

__all__ = [
    "Cursor",
    "ParseFailure",
    "ParseResult",
    "ParseSuccess",
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
