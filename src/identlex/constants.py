"""Shared constants for identlex.

Centralized configuration constants used across the combinator core and the
format recognizers. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Input limits: DoS prevention via size constraints
- Diagnostic strings: Fixed descriptions used in failure reports
- Vocabularies: Closed token sets accepted by recognizers

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_INPUT_LENGTH",
    "MAX_LOG_VALUE_LENGTH",
    # Diagnostic strings
    "END_OF_STRING",
    "EXPECTED_DIGIT",
    "EXPECTED_HEX_DIGIT",
    # Vocabularies
    "TRUE_TOKENS",
    "FALSE_TOKENS",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum input length accepted by any format parse() entry point.
# The longest well-formed identifier handled here is a 23-character MAC-64
# or a 36-character UUID; anything beyond this bound is rejected before the
# grammar runs so pathological inputs cannot force long backtracking scans.
MAX_INPUT_LENGTH: int = 1024

# Inputs echoed into log records are truncated to this many characters.
MAX_LOG_VALUE_LENGTH: int = 50

# ============================================================================
# DIAGNOSTIC STRINGS
# ============================================================================

# Reported as `found` when a parser fails at end of input.
END_OF_STRING: str = "end of string"

EXPECTED_DIGIT: str = "a digit"
EXPECTED_HEX_DIGIT: str = "a hex digit"

# ============================================================================
# BOOLEAN VOCABULARY
# ============================================================================

# Case-sensitive. Order within each tuple is irrelevant to matching; the
# boolean grammar sorts tokens longest-first before building its alternation.
TRUE_TOKENS: tuple[str, ...] = ("t", "y", "1", "on", "yes", "true")
FALSE_TOKENS: tuple[str, ...] = ("f", "n", "0", "off", "no", "false")
