"""Tests for BS date string parsing."""

import pytest

from bikram_sambat.calendar_data import CalendarTable, DEFAULT_MONTH_LENGTHS
from bikram_sambat.exceptions import OutOfRangeError, ParseError
from bikram_sambat.parser import parse


class TestSeparators:
    @pytest.mark.parametrize("text", ["2075-12-25", "2075.12.25", "2075/12/25"])
    def test_all_separators_agree(self, text):
        assert parse(text) == (2075, 11, 25)

    def test_mixed_separators(self):
        assert parse("2075-12/25") == (2075, 11, 25)

    def test_unpadded_components(self):
        assert parse("2075-1-5") == (2075, 0, 5)

    def test_surrounding_whitespace(self):
        assert parse(" 2075-12-25\n") == (2075, 11, 25)


class TestParseErrors:
    def test_non_numeric_year(self):
        with pytest.raises(ParseError):
            parse("abcd-12-25")

    def test_non_numeric_day(self):
        with pytest.raises(ParseError):
            parse("2075-12-xx")

    @pytest.mark.parametrize("text", [
        "2075-1_2-25",
        "2075-+12-25",
        "2075- 12-25",
        "2075-12 -25",
        "२०७५-12-25",
    ])
    def test_non_digit_characters(self, text):
        with pytest.raises(ParseError):
            parse(text)

    def test_too_few_components(self):
        with pytest.raises(ParseError):
            parse("2075-12")

    def test_too_many_components(self):
        with pytest.raises(ParseError):
            parse("2075-12-25-1")

    def test_empty(self):
        with pytest.raises(ParseError):
            parse("")

    def test_not_a_string(self):
        with pytest.raises(ParseError):
            parse(20751225)


class TestRangeErrors:
    def test_year_below_table(self):
        with pytest.raises(OutOfRangeError):
            parse("1999-01-01")

    def test_year_above_table(self):
        with pytest.raises(OutOfRangeError):
            parse("2091-01-01")

    @pytest.mark.parametrize("text", ["2075-00-01", "2075-13-01"])
    def test_month_out_of_range(self, text):
        with pytest.raises(OutOfRangeError):
            parse(text)

    def test_day_zero(self):
        with pytest.raises(OutOfRangeError):
            parse("2075-01-00")

    def test_day_past_month_end(self):
        # Chaitra 2075 has 30 days
        assert parse("2075-12-30") == (2075, 11, 30)
        with pytest.raises(OutOfRangeError):
            parse("2075-12-31")

    def test_parse_error_is_not_range_error(self):
        assert not issubclass(ParseError, OutOfRangeError)


def test_custom_table():
    table = CalendarTable({5: list(DEFAULT_MONTH_LENGTHS)})
    assert parse("5-2-29", table) == (5, 1, 29)
    with pytest.raises(OutOfRangeError):
        parse("5-2-30", table)
