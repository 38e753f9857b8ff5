"""Tests for the parser combinator core.

Covers primitive parsers, combinators, exact failure positions and the
furthest-progress rule of ordered alternation.
"""

from __future__ import annotations

import pytest

from identlex.syntax import (
    Cursor,
    ParseFailure,
    ParseSuccess,
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

# ============================================================================
# PRIMITIVES
# ============================================================================


class TestChar:
    """Test char(predicate, description)."""

    def test_consumes_matching_character(self) -> None:
        """Matching character is consumed and returned."""
        result = run(char(str.isupper, "an uppercase letter"), "Ab")

        assert isinstance(result, ParseSuccess)
        assert result.value == "A"
        assert result.start.pos == 0
        assert result.next.pos == 1

    def test_failure_reports_description_at_cursor(self) -> None:
        """Mismatch reports the description at the current cursor."""
        parser = char(str.isupper, "an uppercase letter")
        result = parser(Cursor("aBc", 1).advance())

        assert result == ParseFailure(expected="an uppercase letter", position=2, found="c")

    def test_failure_at_end_of_string(self) -> None:
        """At EOF the found value is 'end of string'."""
        result = run(digit(), "")

        assert result == ParseFailure(expected="a digit", position=0, found="end of string")

    def test_digit_rejects_unicode_digits(self) -> None:
        """Only ASCII digits are digits."""
        assert isinstance(run(digit(), "²"), ParseFailure)

    def test_hex_digit_accepts_both_cases(self) -> None:
        """Hex digits match in either case."""
        assert run(hex_digit(), "F").value == "F"  # type: ignore[union-attr]
        assert run(hex_digit(), "f").value == "f"  # type: ignore[union-attr]


class TestLiteral:
    """Test literal(text)."""

    def test_matches_verbatim(self) -> None:
        """Whole literal is consumed."""
        result = run(literal("true"), "true!")

        assert isinstance(result, ParseSuccess)
        assert result.next.pos == 4
        assert result.remaining == "!"

    def test_failure_position_is_first_differing_character(self) -> None:
        """Mismatch is reported where the text diverges, not at its start."""
        result = run(literal("true"), "trie")

        assert result == ParseFailure(expected="true", position=2, found="i", is_literal=True)

    def test_failure_when_input_runs_out(self) -> None:
        """Truncated input reports end of string at the truncation point."""
        result = run(literal("false"), "fal")

        assert isinstance(result, ParseFailure)
        assert result.position == 3
        assert result.found == "end of string"

    def test_is_case_sensitive(self) -> None:
        """Literals match case-sensitively."""
        assert isinstance(run(literal("yes"), "YES"), ParseFailure)


class TestEnd:
    """Test end()."""

    def test_succeeds_at_eof_without_consuming(self) -> None:
        """end() succeeds at EOF and leaves the cursor in place."""
        result = end()(Cursor("ab", 2))

        assert isinstance(result, ParseSuccess)
        assert result.start == result.next

    def test_fails_with_remaining_input(self) -> None:
        """end() reports the first unconsumed character."""
        result = end()(Cursor("ab", 1))

        assert result == ParseFailure(expected="end of string", position=1, found="b")


# ============================================================================
# REPETITION
# ============================================================================


class TestRepeat:
    """Test repeat(min, max, element)."""

    def test_greedy_up_to_max(self) -> None:
        """Consumes at most max elements even if more would match."""
        result = run(repeat(1, 3, digit()), "19216")

        assert isinstance(result, ParseSuccess)
        assert result.value == ("1", "9", "2")
        assert result.next.pos == 3

    def test_stops_at_first_non_matching_element(self) -> None:
        """Stops early without failing once min is satisfied."""
        result = run(repeat(1, 3, digit()), "1.2")

        assert isinstance(result, ParseSuccess)
        assert result.value == ("1",)

    def test_too_few_returns_element_failure(self) -> None:
        """Fewer than min elements returns the element's failure unchanged."""
        result = run(repeat(4, 4, hex_digit()), "abg1")

        assert result == ParseFailure(expected="a hex digit", position=2, found="g")

    def test_too_few_with_description(self) -> None:
        """A description relabels the too-few failure at the same position."""
        result = run(repeat(1, 3, digit(), "octet to be 1-3 digit(s)"), ".1")

        assert result == ParseFailure(
            expected="octet to be 1-3 digit(s)", position=0, found="."
        )

    def test_zero_min_matches_empty(self) -> None:
        """min=0 succeeds without consuming."""
        result = run(repeat(0, 2, digit()), "x")

        assert isinstance(result, ParseSuccess)
        assert result.value == ()
        assert result.next.pos == 0

    @pytest.mark.parametrize(("lo", "hi"), [(-1, 2), (3, 2)])
    def test_invalid_bounds_rejected(self, lo: int, hi: int) -> None:
        """Inconsistent bounds are a programming error."""
        with pytest.raises(ValueError, match="repeat bounds"):
            repeat(lo, hi, digit())


# ============================================================================
# SEQUENCING AND MAPPING
# ============================================================================


class TestSequence:
    """Test sequence(*parsers)."""

    def test_collects_values_in_order(self) -> None:
        """Values are returned as a tuple in parser order."""
        result = run(sequence(digit(), literal("."), digit()), "1.2")

        assert isinstance(result, ParseSuccess)
        assert result.value == ("1", ".", "2")
        assert result.next.pos == 3

    def test_propagates_first_failure_unchanged(self) -> None:
        """The first failing parser's failure is returned as-is."""
        result = run(sequence(digit(), literal("."), digit()), "1x2")

        assert result == ParseFailure(expected=".", position=1, found="x", is_literal=True)


class TestMapValue:
    """Test map_value(parser, fn)."""

    def test_transforms_value_keeps_positions(self) -> None:
        """Mapped success keeps start and next."""
        result = run(map_value(repeat(1, 3, digit()), len), "12a")

        assert isinstance(result, ParseSuccess)
        assert result.value == 2
        assert result.next.pos == 2

    def test_failure_passes_through(self) -> None:
        """Failures are not touched by the mapping function."""
        result = run(map_value(digit(), int), "x")

        assert result == ParseFailure(expected="a digit", position=0, found="x")


class TestRecognizeAndOptional:
    """Test recognize() and optional()."""

    def test_recognize_returns_consumed_text(self) -> None:
        """recognize() yields the exact consumed slice."""
        result = run(recognize(sequence(digit(), literal("-"), digit())), "1-2-3")

        assert isinstance(result, ParseSuccess)
        assert result.value == "1-2"

    def test_optional_present(self) -> None:
        """optional() returns the value when present."""
        assert run(optional(literal("-")), "-1").value == "-"  # type: ignore[union-attr]

    def test_optional_absent(self) -> None:
        """optional() returns None and consumes nothing when absent."""
        result = run(optional(literal("-")), "1")

        assert isinstance(result, ParseSuccess)
        assert result.value is None
        assert result.next.pos == 0


# ============================================================================
# ALTERNATION
# ============================================================================


class TestAlt:
    """Test alt(*parsers) ordering, backtracking and failure selection."""

    def test_first_success_wins(self) -> None:
        """Alternatives are tried in order; the first success is returned."""
        parser = alt(map_value(literal("t"), lambda _: 1), map_value(literal("true"), lambda _: 2))

        assert run(parser, "true").value == 1  # type: ignore[union-attr]

    def test_failed_alternatives_do_not_consume(self) -> None:
        """Every alternative starts at the same cursor."""
        parser = alt(sequence(literal("ab"), literal("x")), literal("abc"))
        result = run(parser, "abc")

        assert isinstance(result, ParseSuccess)
        assert result.value == "abc"
        assert result.start.pos == 0

    def test_furthest_failure_wins(self) -> None:
        """When all fail, the failure with the greatest position is returned."""
        parser = alt(literal("yes"), literal("false"))
        result = run(parser, "fals")

        assert result == ParseFailure(
            expected="false", position=4, found="end of string", is_literal=True
        )

    def test_furthest_failure_independent_of_order(self) -> None:
        """The furthest failure is chosen regardless of alternative order."""
        first = run(alt(literal("false"), literal("yes")), "fals")
        second = run(alt(literal("yes"), literal("false")), "fals")

        assert first == second

    def test_tie_keeps_earliest_alternative(self) -> None:
        """On equal positions the earlier alternative's failure is kept."""
        result = run(alt(literal("on"), literal("off")), "ox")

        assert isinstance(result, ParseFailure)
        assert result.expected == "on"
        assert result.position == 1

    def test_requires_alternatives(self) -> None:
        """alt() with no alternatives is a programming error."""
        with pytest.raises(ValueError, match="at least one"):
            alt()


class TestReferentialTransparency:
    """Parsers hold no state between runs."""

    def test_same_input_same_result(self) -> None:
        """Running a parser twice yields equal results."""
        parser = alt(sequence(repeat(1, 3, digit()), literal(".")), literal("x"))

        assert run(parser, "1922") == run(parser, "1922")
        assert run(parser, "12.") == run(parser, "12.")
