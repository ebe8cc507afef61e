# SPDX-License-Identifier: MIT
"""Unit tests for version range parsing, membership and rendering."""

from dataclasses import dataclass

import pytest

from semspec import (
    SemanticVersion,
    VersionRange,
    parse_loose,
    parse_range,
    try_parse_range,
    satisfies,
    FormatError,
    InvalidArgumentError,
    InvalidVersionRangeError,
    NullOrEmptyInputError,
)


class TestParseRange:
    """Tests for parse_range function."""

    @pytest.mark.parametrize(
        "text,min_version,min_inclusive,max_version,max_inclusive",
        [
            ("(1.2.3.4, 3.2)", "1.2.3.4", False, "3.2", False),
            ("(1.2.3.4, 3.2]", "1.2.3.4", False, "3.2", True),
            ("[1.2, 3.2.5)", "1.2", True, "3.2.5", False),
            ("[2.3.7, 3.2.4.5]", "2.3.7", True, "3.2.4.5", True),
            ("(, 3.2.4.5]", None, False, "3.2.4.5", True),
            ("(1.6, ]", "1.6", False, None, True),
            ("(1.6)", "1.6", False, "1.6", False),
            ("[2.7]", "2.7", True, "2.7", True),
        ],
    )
    def test_parses_bounds(self, text, min_version, min_inclusive, max_version, max_inclusive):
        """Test that bounds and inclusivity flags are parsed."""
        r = parse_range(text)
        assert r.min_version == (parse_loose(min_version) if min_version else None)
        assert r.min_inclusive is min_inclusive
        assert r.max_version == (parse_loose(max_version) if max_version else None)
        assert r.max_inclusive is max_inclusive

    def test_bare_version_is_lower_bound(self):
        """Test that a bare version means 'at least this version'."""
        r = parse_range("1.0.0")
        assert r == VersionRange(parse_loose("1.0.0"), True, None, False)
        assert r.is_at_least

    def test_bare_version_trimmed(self):
        """Test that surrounding whitespace is ignored."""
        assert parse_range("  2.1-beta ") == VersionRange.at_least(parse_loose("2.1-beta"))

    def test_exact(self):
        """Test that a single bracketed version is an exact match."""
        r = parse_range("[2.7]")
        assert r == VersionRange.exact(parse_loose("2.7"))
        assert r.is_exact

    def test_bounds_keep_display_text(self):
        """Test that whitespace inside bounds is dropped from display text."""
        r = parse_range("[ 1.2 , 3.2.5 )")
        assert str(r.min_version) == "1.2"
        assert str(r.max_version) == "3.2.5"

    @pytest.mark.parametrize(
        "text",
        ["(,)", "[,]", "[,)", "(,]", "( , ]", "(,1.3..2]", "(1.2.3.4.5,1.2]"],
    )
    def test_rejects_invalid(self, text):
        """Test that ranges with no bound or a malformed bound are rejected."""
        assert try_parse_range(text) is None
        with pytest.raises(InvalidVersionRangeError) as exc_info:
            parse_range(text)
        assert exc_info.value.text == text

    @pytest.mark.parametrize(
        "text",
        ["[]", "1.0]", "[1.0", "{1.0}", "[1.0, 2.0, 3.0]", "1.0, 2.0", "  (  "],
    )
    def test_rejects_malformed_brackets(self, text):
        """Test that bracket and comma structure is enforced."""
        assert try_parse_range(text) is None

    def test_range_error_is_format_error(self):
        """Test that InvalidVersionRangeError is a FormatError."""
        with pytest.raises(FormatError):
            parse_range("bogus")

    @pytest.mark.parametrize("text", [None, ""])
    def test_parse_null_or_empty(self, text):
        """Test that parse_range rejects None and empty strings."""
        with pytest.raises(NullOrEmptyInputError):
            parse_range(text)

    @pytest.mark.parametrize("text", [None, "", 1.0])
    def test_try_parse_never_raises(self, text):
        """Test that try_parse_range returns None for unusable input."""
        assert try_parse_range(text) is None

    def test_classmethods(self):
        """Test the parse and try_parse alternate constructors."""
        assert VersionRange.parse("[1.0]") == parse_range("[1.0]")
        assert VersionRange.try_parse("[,]") is None


class TestSatisfies:
    """Tests for range membership."""

    def test_at_least(self):
        """Test the bare-version shorthand."""
        r = parse_range("1.0.0")
        assert r.satisfies(parse_loose("1.0.0"))
        assert r.satisfies(parse_loose("1.0.0.1"))
        assert r.satisfies(parse_loose("99.0"))
        assert not r.satisfies(parse_loose("0.9.9"))
        assert not r.satisfies(parse_loose("1.0.0-rc"))

    def test_half_open(self):
        """Test an inclusive lower and exclusive upper bound."""
        r = parse_range("[1.2, 3.2.5)")
        assert r.satisfies(parse_loose("2.0.0"))
        assert r.satisfies(parse_loose("1.2"))
        assert not r.satisfies(parse_loose("3.2.5"))
        assert not r.satisfies(parse_loose("1.1.9"))
        assert r.satisfies(parse_loose("3.2.5-beta"))

    def test_exclusive_lower(self):
        """Test an exclusive lower bound."""
        r = parse_range("(1.2.3.4, 3.2]")
        assert not r.satisfies(parse_loose("1.2.3.4"))
        assert r.satisfies(parse_loose("1.2.3.5"))
        assert r.satisfies(parse_loose("3.2"))
        assert not r.satisfies(parse_loose("3.2.0.1"))

    def test_upper_only(self):
        """Test a range bounded only above."""
        r = parse_range("(, 3.2.4.5]")
        assert r.satisfies(parse_loose("0.0"))
        assert r.satisfies(parse_loose("3.2.4.5"))
        assert not r.satisfies(parse_loose("3.2.4.6"))

    def test_inert_inclusive_flag(self):
        """Test that the inclusive flag of a missing bound has no effect."""
        r = parse_range("(1.6, ]")
        assert r.satisfies(parse_loose("1000.0"))
        assert not r.satisfies(parse_loose("1.6"))

    def test_exact(self):
        """Test an exact range."""
        r = parse_range("[2.7]")
        assert r.satisfies(parse_loose("2.7.0.0"))
        assert not r.satisfies(parse_loose("2.7.0.1"))

    def test_open_single_version_matches_nothing(self):
        """Test that (v) is valid but empty."""
        r = parse_range("(1.6)")
        assert not r.satisfies(parse_loose("1.6"))
        assert not r.satisfies(parse_loose("1.5"))

    def test_unbounded(self):
        """Test that a range without bounds accepts everything."""
        assert VersionRange().satisfies(parse_loose("0.0"))

    def test_string_version(self):
        """Test that satisfies accepts version strings."""
        assert parse_range("[1.0, 2.0)").satisfies("1.5")

    def test_contains(self):
        """Test the in operator."""
        r = parse_range("[1.0, 2.0)")
        assert parse_loose("1.5") in r
        assert "2.0" not in r

    def test_none_version_raises(self):
        """Test that None cannot be tested against a bound."""
        with pytest.raises(InvalidArgumentError):
            parse_range("1.0").satisfies(None)  # type: ignore[arg-type]

    def test_module_function(self):
        """Test the satisfies convenience function."""
        assert satisfies("[1.2, 3.2.5)", "2.0.0") is True
        assert satisfies("[1.2, 3.2.5)", "3.2.5") is False
        assert satisfies(parse_range("1.0"), parse_loose("1.0")) is True


@dataclass
class Package:
    name: str
    version: SemanticVersion


class TestPredicate:
    """Tests for to_predicate and filter_versions."""

    def test_predicate_on_versions(self):
        """Test a predicate over plain versions."""
        predicate = parse_range("[1.0, 2.0]").to_predicate()
        assert predicate(parse_loose("1.0"))
        assert not predicate(parse_loose("2.1"))

    def test_predicate_with_key(self):
        """Test a predicate that extracts the version from an item."""
        predicate = parse_range("(1.0, )").to_predicate(lambda p: p.version)
        assert predicate(Package("a", parse_loose("1.1")))
        assert not predicate(Package("a", parse_loose("1.0")))

    def test_filter_versions(self):
        """Test filtering keeps matching items in input order."""
        packages = [Package(str(i), parse_loose(v)) for i, v in enumerate(["2.0", "1.0", "1.5", "0.5"])]
        result = parse_range("[1.0, 2.0)").filter_versions(packages, key=lambda p: p.version)
        assert [p.name for p in result] == ["1", "2"]


class TestBracketString:
    """Tests for to_bracket_string."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1.0", "1.0"),
            ("[2.7]", "[2.7]"),
            ("(1.2.3.4, 3.2)", "(1.2.3.4, 3.2)"),
            ("[1.2,3.2.5)", "[1.2, 3.2.5)"),
            ("(, 3.2.4.5]", "(, 3.2.4.5]"),
            ("(1.6, ]", "(1.6, ]"),
            ("(1.6)", "(1.6, 1.6)"),
        ],
    )
    def test_render(self, text, expected):
        """Test rendering of parsed ranges."""
        assert parse_range(text).to_bracket_string() == expected

    def test_str(self):
        """Test that str() uses the bracket notation."""
        assert str(parse_range("[1.0, 2.0)")) == "[1.0, 2.0)"

    @pytest.mark.parametrize("text", ["1.0-beta", "[2.7]", "(1.2, 3.0]", "(, 2.0)", "[1.0, )"])
    def test_round_trip(self, text):
        """Test that rendered ranges parse back to the same range."""
        r = parse_range(text)
        assert parse_range(r.to_bracket_string()) == r

    def test_exact_constructed(self):
        """Test rendering an exact range built from a version."""
        assert VersionRange.exact(SemanticVersion.from_parts(1, 2, 3)).to_bracket_string() == "[1.2.3]"


class TestMathString:
    """Tests for to_math_string."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1.0", "(≥ 1.0)"),
            ("[2.7]", "(= 2.7)"),
            ("(1.2.3.4, 3.2)", "(> 1.2.3.4 && < 3.2)"),
            ("[1.2, 3.2.5]", "(≥ 1.2 && ≤ 3.2.5)"),
            ("(, 3.2.4.5]", "(≤ 3.2.4.5)"),
            ("(, 3.2.4.5)", "(< 3.2.4.5)"),
            ("(1.6, ]", "(> 1.6)"),
            ("[1.6, )", "(≥ 1.6)"),
        ],
    )
    def test_render(self, text, expected):
        """Test human readable rendering."""
        assert parse_range(text).to_math_string() == expected

    def test_unbounded(self):
        """Test that a range without bounds renders as an empty string."""
        assert VersionRange().to_math_string() == ""


class TestVersionRange:
    """Tests for the VersionRange value type."""

    def test_frozen(self):
        """Test that VersionRange is immutable."""
        r = parse_range("[1.0]")
        with pytest.raises(AttributeError):
            r.min_inclusive = False  # type: ignore

    def test_hashable(self):
        """Test that equal ranges hash equally."""
        assert hash(parse_range("[1.0, 2.0)")) == hash(parse_range("[1.0.0.0, 2.0.0)"))
        assert len({parse_range("1.0"), parse_range("1.0.0")}) == 1
