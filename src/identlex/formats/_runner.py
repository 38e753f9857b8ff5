"""Shared driver for format recognizer entry points.

Turns a low-level ``ParseResult`` into the public ``(value, errors)`` shape
used by every ``parse()`` function:

- Functions NEVER raise on bad input - errors are returned in the tuple
- The errors tuple is empty on success and holds exactly one error otherwise
- Passing a non-string is a programming error and raises TypeError

Thread-safe. Pure functions over immutable parse state.

Python 3.13+.
"""

import logging
from collections.abc import Callable

from identlex.constants import MAX_INPUT_LENGTH, MAX_LOG_VALUE_LENGTH
from identlex.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    IdentError,
    IdentSemanticError,
    IdentSyntaxError,
)
from identlex.syntax.combinators import Parser
from identlex.syntax.cursor import Cursor, ParseFailure

__all__ = ["ParseOutcome", "require_str", "run_format", "syntax_error"]

logger = logging.getLogger(__name__)

type ParseOutcome[T] = tuple[T | None, tuple[IdentError, ...]]


def _shorten(value: str) -> str:
    if len(value) > MAX_LOG_VALUE_LENGTH:
        return value[:MAX_LOG_VALUE_LENGTH] + "..."
    return value


def require_str(value: object, format_name: str) -> str:
    """Reject non-string input.

    Raises:
        TypeError: If value is not a str
    """
    if not isinstance(value, str):
        msg = f"{format_name} input must be str, not {type(value).__name__}"
        raise TypeError(msg)
    return value


def syntax_error(
    failure: ParseFailure, value: str, format_name: str, hint: str | None = None
) -> IdentSyntaxError:
    """Wrap a grammar failure as an IdentSyntaxError."""
    diagnostic = ErrorTemplate.expected_token(
        failure.expected,
        failure.position,
        failure.found,
        is_literal=failure.is_literal,
        hint=hint,
    )
    return IdentSyntaxError(diagnostic, input_value=value, format_name=format_name)


def run_format[T, U](
    format_name: str,
    grammar: Parser[T],
    value: str,
    *,
    finish: Callable[[T, str], U | Diagnostic],
    hint: str | None = None,
) -> ParseOutcome[U]:
    """Run a full-input grammar and its post-parse check over ``value``.

    Args:
        format_name: Recognizer name used in errors and logs
        grammar: Parser that must consume the entire input
        value: Raw input string
        finish: Maps the grammar value and the input to the public value,
            or returns a Diagnostic for a semantic failure
        hint: Suggestion attached to syntax errors

    Returns:
        Tuple of (result, errors):
        - result: Public value, or None if the input was rejected
        - errors: Tuple of IdentError (empty tuple on success)

    Raises:
        TypeError: If value is not a str
    """
    require_str(value, format_name)

    if len(value) > MAX_INPUT_LENGTH:
        logger.warning(
            "Rejected %s input of %d characters (limit %d)",
            format_name,
            len(value),
            MAX_INPUT_LENGTH,
        )
        diagnostic = ErrorTemplate.input_too_long(format_name, len(value), MAX_INPUT_LENGTH)
        error: IdentError = IdentSyntaxError(
            diagnostic, input_value=value, format_name=format_name
        )
        return (None, (error,))

    result = grammar(Cursor(value, 0))
    if isinstance(result, ParseFailure):
        error = syntax_error(result, value, format_name, hint)
        logger.debug("Rejected %s '%s': %s", format_name, _shorten(value), error)
        return (None, (error,))

    finished = finish(result.value, value)
    if isinstance(finished, Diagnostic):
        error = IdentSemanticError(finished, input_value=value, format_name=format_name)
        logger.debug("Rejected %s '%s': %s", format_name, _shorten(value), error)
        return (None, (error,))

    logger.debug("Accepted %s '%s'", format_name, _shorten(value))
    return (finished, ())
