"""Tests for parser error kinds and positions."""

from __future__ import annotations

import pytest

from semverlex.errors import (
    EmptyIdentifier,
    LeadingZero,
    NumberOutOfRange,
    ParseError,
    TrailingInput,
    UnexpectedCharacter,
    UnexpectedEnd,
    UnexpectedToken,
)
from semverlex.parser import parse, parse_fields


def _fails(source: str, kind: type[Exception]) -> Exception:
    with pytest.raises(kind) as exc_info:
        parse(source)
    return exc_info.value


class TestLeadingZero:
    @pytest.mark.parametrize(
        "source, position",
        [("01.0.0", 0), ("1.02.0", 2), ("1.0.00", 4), ("1.0.0123", 4)],
    )
    def test_core_leading_zero(self, source, position):
        assert _fails(source, LeadingZero).position == position

    def test_is_parse_error(self):
        _fails("1.02.0", ParseError)


class TestUnexpectedEnd:
    @pytest.mark.parametrize("source", ["", "1", "1.", "1.0", "1.0."])
    def test_incomplete_core(self, source):
        err = _fails(source, UnexpectedEnd)
        assert err.position == len(source)


class TestEmptyIdentifier:
    @pytest.mark.parametrize(
        "source, position",
        [
            ("1..0", 2),
            ("1.0..0", 4),
            ("1.0.0-", 6),
            ("1.0.0+", 6),
            ("1.0.0-alpha.", 12),
            ("1.0.0-alpha..1", 12),
            ("1.0.0-+build", 6),
            ("1.0.0-a+", 8),
            ("1.0.0+a..b", 8),
        ],
    )
    def test_empty_field(self, source, position):
        assert _fails(source, EmptyIdentifier).position == position


class TestTrailingInput:
    @pytest.mark.parametrize(
        "source, position",
        [("1.0.0.0", 5), ("1.0.0+a+b", 7), ("1.0.0-a+b+c", 9)],
    )
    def test_leftover_tokens(self, source, position):
        assert _fails(source, TrailingInput).position == position


class TestUnexpectedToken:
    @pytest.mark.parametrize(
        "source, position",
        [("v1.0.0", 0), ("1.a.0", 2), ("1.0-0", 3), ("-1.0.0", 0), ("1.0.0a", 4), (".1.0.0", 0)],
    )
    def test_wrong_token(self, source, position):
        assert _fails(source, UnexpectedToken).position == position


class TestNumberOutOfRange:
    def test_major_over_u32(self):
        assert _fails("4294967296.0.0", NumberOutOfRange).position == 0

    def test_very_long_patch(self):
        assert _fails("1.0." + "9" * 5000, NumberOutOfRange).position == 4

    def test_pre_release_over_u64(self):
        assert _fails("1.0.0-18446744073709551616", NumberOutOfRange).position == 6


class TestLexErrorsFirst:
    def test_whitespace_after_version(self):
        assert _fails("1.0.0 ", UnexpectedCharacter).position == 5

    def test_lex_error_shadows_parse_error(self):
        # "01" would be a LeadingZero, but the bad character is found first
        _fails("01.0.0!", UnexpectedCharacter)


class TestParseFields:
    def test_empty(self):
        with pytest.raises(EmptyIdentifier):
            parse_fields("", build=False)

    def test_double_dot(self):
        with pytest.raises(EmptyIdentifier) as exc_info:
            parse_fields("alpha..1", build=False)
        assert exc_info.value.position == 6

    def test_plus_is_trailing(self):
        with pytest.raises(TrailingInput):
            parse_fields("a+b", build=True)

    def test_bad_character(self):
        with pytest.raises(UnexpectedCharacter):
            parse_fields("a b", build=True)


class TestTypeChecks:
    def test_non_string(self):
        with pytest.raises(TypeError):
            parse(100)  # type: ignore[arg-type]
