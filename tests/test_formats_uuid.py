"""Tests for the UUID recognizer and its helpers."""

from __future__ import annotations

import pytest
from hypothesis import given

from identlex.formats import uuid
from identlex.formats.types import Uuid
from identlex.syntax import ParseFailure, ParseSuccess
from tests.strategies import uuids

# ============================================================================
# PARSING
# ============================================================================


class TestUuidParse:
    """Grammar acceptance and rejection."""

    @pytest.mark.parametrize(
        "value",
        [
            "02357c30-afe7-11e4-ab7d-12e3f512a338",
            "02357C30-AFE7-11E4-AB7D-12E3F512A338",
            "02357c30-AFE7-11e4-AB7D-12e3f512A338",
            "00000000-0000-0000-0000-000000000000",
            "ffffffff-ffff-ffff-ffff-ffffffffffff",
        ],
    )
    def test_accepts_and_preserves_case(self, value: str) -> None:
        """Valid UUIDs are returned unchanged."""
        result, errors = uuid.parse(value)

        assert errors == ()
        assert result == value

    def test_short_first_group(self) -> None:
        """A 7-digit first group fails at the hyphen where a hex digit is expected."""
        value = "2357C30-AFE7-11E4-AB7D-12E3F512A338"
        result = uuid.run_parser(value)

        assert result == ParseFailure(expected="a hex digit", position=7, found="-")
        _, errors = uuid.parse(value)
        assert str(errors[0]) == 'Expected a hex digit at position 8 but found "-"'

    def test_long_group(self) -> None:
        """A 5-digit second group fails where the hyphen is expected."""
        _, errors = uuid.parse("02357c30-afe71-11e4-ab7d-12e3f512a338")

        assert str(errors[0]) == 'Expected "-" at position 14 but found "1"'

    def test_missing_last_group_digits(self) -> None:
        """A short final group fails at end of string."""
        _, errors = uuid.parse("02357c30-afe7-11e4-ab7d-12e3f512a33")

        assert str(errors[0]) == 'Expected a hex digit at position 36 but found "end of string"'

    def test_braced_form_rejected(self) -> None:
        """Braces are not part of the grammar."""
        result, errors = uuid.parse("{02357c30-afe7-11e4-ab7d-12e3f512a338}")

        assert result is None
        assert str(errors[0]) == 'Expected a hex digit at position 1 but found "{"'

    def test_trailing_content(self) -> None:
        """Input must end after the last group."""
        _, errors = uuid.parse("02357c30-afe7-11e4-ab7d-12e3f512a3380")

        assert str(errors[0]) == 'Expected end of string at position 37 but found "0"'

    def test_run_parser_success(self) -> None:
        """run_parser consumes all 36 characters."""
        result = uuid.run_parser("02357c30-afe7-11e4-ab7d-12e3f512a338")

        assert isinstance(result, ParseSuccess)
        assert result.next.pos == 36


# ============================================================================
# HELPERS
# ============================================================================


class TestUuidHelpers:
    """format, is_nil and is_max."""

    def test_format_lowercases(self) -> None:
        """format() returns the lowercase canonical form."""
        parsed, _ = uuid.parse("02357C30-AFE7-11E4-AB7D-12E3F512A338")

        assert parsed is not None
        assert uuid.format(parsed) == "02357c30-afe7-11e4-ab7d-12e3f512a338"

    def test_format_of_canonical_is_identity(self) -> None:
        """Canonical input is unchanged by format()."""
        value = Uuid("02357c30-afe7-11e4-ab7d-12e3f512a338")

        assert uuid.format(value) == value

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("00000000-0000-0000-0000-000000000000", True),
            ("00000000-0000-0000-0000-000000000001", False),
            ("ffffffff-ffff-ffff-ffff-ffffffffffff", False),
        ],
    )
    def test_is_nil(self, value: str, expected: bool) -> None:
        """is_nil() is true only for all-zero UUIDs."""
        assert uuid.is_nil(Uuid(value)) is expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("ffffffff-ffff-ffff-ffff-ffffffffffff", True),
            ("FFFFFFFF-FFFF-FFFF-FFFF-FFFFFFFFFFFF", True),
            ("FFFFffff-FFFF-ffff-FFFF-ffffFFFFffff", True),
            ("ffffffff-ffff-ffff-ffff-fffffffffffe", False),
            ("00000000-0000-0000-0000-000000000000", False),
        ],
    )
    def test_is_max(self, value: str, expected: bool) -> None:
        """is_max() is true only for all-F UUIDs, either case."""
        assert uuid.is_max(Uuid(value)) is expected

    def test_constants(self) -> None:
        """NIL and MAX satisfy their predicates and parse."""
        assert uuid.is_nil(uuid.NIL)
        assert uuid.is_max(uuid.MAX)
        assert uuid.parse(uuid.NIL) == (uuid.NIL, ())
        assert uuid.parse(uuid.MAX) == (uuid.MAX, ())

    @given(value=uuids())
    def test_format_output_reparses(self, value: str) -> None:
        """PROPERTY: format() output parses to itself."""
        parsed, errors = uuid.parse(value)
        assert not errors
        assert parsed is not None

        canonical = uuid.format(parsed)
        reparsed, errors = uuid.parse(canonical)

        assert not errors
        assert reparsed == canonical
        assert canonical == value.lower()
