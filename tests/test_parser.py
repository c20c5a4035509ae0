"""Tests for parsing well-formed versions."""

from __future__ import annotations

from semverlex.parser import Parser, parse, parse_fields, parse_tokens
from semverlex.scanner import scan
from semverlex.version import AlphaNumeric, Numeric, Version


class TestCore:
    def test_basic_version(self):
        v = parse("1.2.3")
        assert (v.major, v.minor, v.patch) == (1, 2, 3)
        assert v.pre_release is None
        assert v.build is None

    def test_zeros(self):
        v = parse("0.0.0")
        assert (v.major, v.minor, v.patch) == (0, 0, 0)

    def test_large_numbers(self):
        v = parse("4294967295.888.777")
        assert v.major == 4294967295


class TestPreRelease:
    def test_single_identifier(self):
        assert parse("1.0.0-alpha").pre_release == (AlphaNumeric("alpha"),)

    def test_mixed_fields(self):
        v = parse("1.0.0-alpha.1.beta.22")
        assert v.pre_release == (
            AlphaNumeric("alpha"),
            Numeric(1),
            AlphaNumeric("beta"),
            Numeric(22),
        )

    def test_numeric_only(self):
        assert parse("1.0.0-0.3.7").pre_release == (Numeric(0), Numeric(3), Numeric(7))

    def test_leading_zero_becomes_alphanumeric(self):
        assert parse("1.0.0-01").pre_release == (AlphaNumeric("01"),)

    def test_single_zero_stays_numeric(self):
        assert parse("1.0.0-0").pre_release == (Numeric(0),)

    def test_hyphenated_identifiers(self):
        v = parse("1.0.0-x-y-z.--")
        assert v.pre_release == (AlphaNumeric("x-y-z"), AlphaNumeric("--"))

    def test_digits_then_letters(self):
        assert parse("1.0.0-0a").pre_release == (AlphaNumeric("0a"),)

    def test_max_u64(self):
        assert parse("1.0.0-18446744073709551615").pre_release == (Numeric(2**64 - 1),)


class TestBuild:
    def test_build_only(self):
        v = parse("1.0.0+20130313144700")
        assert v.pre_release is None
        assert v.build == (Numeric(20130313144700),)

    def test_build_leading_zero_kept_verbatim(self):
        v = parse("1.0.0+001.exp-sha")
        assert v.build == (AlphaNumeric("001"), AlphaNumeric("exp-sha"))
        assert str(v) == "1.0.0+001.exp-sha"

    def test_pre_release_and_build(self):
        v = parse("1.0.0-beta+exp.sha.5114f85")
        assert v.pre_release == (AlphaNumeric("beta"),)
        assert [str(f) for f in v.build] == ["exp", "sha", "5114f85"]

    def test_huge_build_number_is_text(self):
        digits = "9" * 30
        v = parse(f"1.0.0+{digits}")
        assert v.build == (AlphaNumeric(digits),)


class TestEntryPoints:
    def test_parse_tokens(self):
        source = "2.0.0-rc.1"
        v = parse_tokens(scan(source), source)
        assert str(v) == source

    def test_parser_class(self):
        source = "3.1.4"
        assert Parser(scan(source), source).parse() == Version(3, 1, 4)

    def test_parse_fields_pre_release(self):
        assert parse_fields("rc-1.2", build=False) == (AlphaNumeric("rc-1"), Numeric(2))

    def test_parse_fields_build(self):
        assert parse_fields("007", build=True) == (AlphaNumeric("007"),)


class TestRoundTrip:
    def test_canonical_strings(self):
        for text in [
            "0.0.0",
            "1.2.3",
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-0.3.7",
            "1.0.0-x.7.z.92",
            "1.0.0-x-y-z.--",
            "1.0.0-alpha+001",
            "1.0.0+20130313144700",
            "1.0.0-beta+exp.sha.5114f85",
            "1.0.0+21AF26D3----117B344092BD",
        ]:
            assert str(parse(text)) == text


class TestIsValid:
    def test_valid(self):
        from semverlex import is_valid

        assert is_valid("1.0.0-rc.1+build.5")

    def test_invalid(self):
        from semverlex import is_valid

        assert not is_valid("1.0")
        assert not is_valid("1.0.0 ")
        assert not is_valid(None)  # type: ignore[arg-type]
