"""Unit tests for the value grammars."""

import re

import pytest

from cuedoc.exceptions import CueSyntaxError
from cuedoc.grammar import (
    parse_int,
    parse_msf,
    parse_optionally_quoted,
    parse_optionally_quoted_lenient,
    quote_if_needed,
    split_quoted,
)
from cuedoc.models import MSF


class TestParseInt:
    @pytest.mark.parametrize(("text", "expected"), [("0", 0), ("01", 1), ("99", 99), ("-5", -5), ("+7", 7)])
    def test_valid(self, text, expected):
        assert parse_int(text) == expected

    @pytest.mark.parametrize("text", ["", "x", "1.5", "1_000", " 1", "1a", "-"])
    def test_invalid(self, text):
        with pytest.raises(CueSyntaxError, match="as an int"):
            parse_int(text)

    @pytest.mark.parametrize(("text", "expected"), [("2147483647", 2**31 - 1), ("-2147483648", -(2**31))])
    def test_int32_limits(self, text, expected):
        assert parse_int(text) == expected

    @pytest.mark.parametrize("text", ["2147483648", "-2147483649", "99999999999", "+0002147483648"])
    def test_overflow(self, text):
        with pytest.raises(CueSyntaxError, match=re.escape(f"Could not parse '{text}' as an int")):
            parse_int(text)


class TestParseMsf:
    def test_valid(self):
        assert parse_msf("03:45:12") == MSF(3, 45, 12)

    def test_no_range_validation(self):
        assert parse_msf("100:75:99") == MSF(100, 75, 99)

    def test_single_digits(self):
        assert parse_msf("1:2:3") == MSF(1, 2, 3)

    @pytest.mark.parametrize("text", ["00:00", "00:00:00:00", "", "::"])
    def test_invalid(self, text):
        with pytest.raises(CueSyntaxError, match="Could not parse"):
            parse_msf(text)

    def test_wrong_arity_names_text(self):
        with pytest.raises(CueSyntaxError, match="Could not parse '12:34' as an MSF"):
            parse_msf("12:34")


class TestQuotedStrings:
    def test_split_quoted(self):
        assert split_quoted('"foo bar" WAVE') == ("foo bar", " WAVE")

    def test_split_quoted_empty(self):
        assert split_quoted('""') == ("", "")

    def test_escaped_quote_does_not_close(self):
        """Test a backslash before a quote keeps the string open and is kept."""
        assert split_quoted(r'"a\"b" rest') == (r"a\"b", " rest")

    def test_split_quoted_unterminated(self):
        with pytest.raises(CueSyntaxError, match="Couldn't find a closing quote"):
            split_quoted('"open')

    def test_split_quoted_requires_quote(self):
        with pytest.raises(CueSyntaxError, match="Expected a quoted string"):
            split_quoted("plain")

    def test_optionally_quoted_plain_is_verbatim(self):
        assert parse_optionally_quoted('The "Best" Of') == 'The "Best" Of'

    def test_optionally_quoted_strips_quotes(self):
        assert parse_optionally_quoted('"The Specials"') == "The Specials"

    def test_optionally_quoted_empty(self):
        assert parse_optionally_quoted("") == ""
        assert parse_optionally_quoted('""') == ""

    def test_optionally_quoted_trailing_garbage(self):
        with pytest.raises(CueSyntaxError, match="Trailing garbage after quoted string: ' x'"):
            parse_optionally_quoted('"a" x')

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ('"Bar', '"Bar'),
            ('"a" b', '"a" b'),
            ('"Foo Bar"', "Foo Bar"),
            ("plain text", "plain text"),
        ],
    )
    def test_lenient_never_raises(self, text, expected):
        assert parse_optionally_quoted_lenient(text) == expected


class TestQuoteIfNeeded:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("", '""'),
            ("Singles", "Singles"),
            ("The Specials", '"The Specials"'),
            ('Say "Hi"', '"Say "Hi""'),
            ("tab\tseparated", "tab\tseparated"),
        ],
    )
    def test_quote_if_needed(self, value, expected):
        assert quote_if_needed(value) == expected
