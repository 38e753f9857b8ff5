"""Boolean token recognizer.

Accepts exactly this case-sensitive vocabulary:

    true:  t  y  1  on   yes  true
    false: f  n  0  off  no   false

``run_parser`` matches a token prefix and leaves any remainder unconsumed,
which is useful for inspecting partial matches. ``parse`` requires the
token to be the whole input, so "tr", "yess", "noo", "10" and "01" are
rejected.

Python 3.13+.
"""

from identlex.constants import FALSE_TOKENS, TRUE_TOKENS
from identlex.formats._runner import ParseOutcome, run_format
from identlex.syntax.combinators import (
    Parser,
    alt,
    end,
    literal,
    map_value,
    run,
    sequence,
)
from identlex.syntax.cursor import ParseResult

__all__ = ["parse", "run_parser"]

FORMAT_NAME = "boolean"

_HINT = "Use one of: " + ", ".join(TRUE_TOKENS + FALSE_TOKENS)

_TRUTH: dict[str, bool] = {token: True for token in TRUE_TOKENS} | {
    token: False for token in FALSE_TOKENS
}

# Longer tokens first so "true" is tried before its prefix "t".
_ORDERED_TOKENS = sorted(_TRUTH, key=len, reverse=True)


def _token(text: str, *, whole_input: bool) -> Parser[bool]:
    truth = _TRUTH[text]
    if whole_input:
        return map_value(sequence(literal(text), end()), lambda _: truth)
    return map_value(literal(text), lambda _: truth)


_PREFIX: Parser[bool] = alt(*(_token(t, whole_input=False) for t in _ORDERED_TOKENS))
_WHOLE: Parser[bool] = alt(*(_token(t, whole_input=True) for t in _ORDERED_TOKENS))


def run_parser(value: str) -> ParseResult[bool]:
    """Match a boolean token at the start of ``value`` without requiring END.

    Example:
        >>> result = run_parser("yess")
        >>> result.value, result.remaining
        (True, 's')
    """
    return run(_PREFIX, value)


def parse(value: str) -> ParseOutcome[bool]:
    """Parse a boolean token that makes up the entire input.

    Examples:
        >>> parse("on")
        (True, ())
        >>> parse("false")
        (False, ())
        >>> _, errors = parse("10")
        >>> str(errors[0])
        'Expected end of string at position 2 but found "0"'
    """
    return run_format(FORMAT_NAME, _WHOLE, value, finish=lambda truth, _: truth, hint=_HINT)
