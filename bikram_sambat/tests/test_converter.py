"""Tests for Gregorian <-> BS day-count conversion."""

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from bikram_sambat.calendar_data import DEFAULT_TABLE, EPOCH
from bikram_sambat.converter import Converter, get_default_converter
from bikram_sambat.exceptions import DateOutOfRangeError, InvalidArgumentError, OutOfRangeError


class TestKnownDates:
    def test_chaitra_25_2075(self, converter, ktm):
        assert converter.bs_to_gregorian(2075, 11, 25) == ktm(2019, 4, 8)
        assert converter.gregorian_to_bs(ktm(2019, 4, 8)) == (2075, 11, 25)

    def test_new_year_2076(self, converter):
        assert converter.gregorian_to_bs(date(2019, 4, 14)) == (2076, 0, 1)
        assert converter.gregorian_to_bs(date(2019, 4, 13)) == (2075, 11, 30)

    def test_time_of_day_ignored(self, converter, ktm):
        assert converter.gregorian_to_bs(ktm(2019, 4, 8, 23, 59, 59)) == (2075, 11, 25)

    def test_result_is_midnight_in_zone(self, converter):
        result = converter.bs_to_gregorian(2075, 11, 25)
        assert (result.hour, result.minute, result.second) == (0, 0, 0)
        assert result.tzinfo == ZoneInfo('Asia/Kathmandu')


class TestBoundaries:
    def test_epoch_is_first_day(self, converter, ktm):
        assert converter.bs_to_gregorian(2000, 0, 1) == ktm(1943, 4, 14)
        assert converter.minimum() == ktm(1943, 4, 14)
        assert converter.gregorian_to_bs(EPOCH) == (2000, 0, 1)

    def test_day_before_epoch(self, converter):
        with pytest.raises(OutOfRangeError):
            converter.gregorian_to_bs(EPOCH - timedelta(days=1))

    def test_last_day(self, converter, ktm):
        assert converter.maximum() == ktm(2034, 4, 13)
        assert converter.bs_to_gregorian(2090, 11, 30) == converter.maximum()
        assert converter.gregorian_to_bs(converter.maximum()) == (2090, 11, 30)

    def test_day_after_last(self, converter):
        with pytest.raises(DateOutOfRangeError):
            converter.gregorian_to_bs(converter.maximum() + timedelta(days=1))

    def test_year_outside_table(self, converter):
        with pytest.raises(OutOfRangeError):
            converter.bs_to_gregorian(1999, 11, 1)
        with pytest.raises(OutOfRangeError):
            converter.bs_to_gregorian(2091, 0, 1)

    def test_date_out_of_range_is_out_of_range(self):
        assert issubclass(DateOutOfRangeError, OutOfRangeError)


class TestMonthNormalization:
    def test_month_twelve_is_next_year(self, converter):
        assert converter.bs_to_days(2075, 12, 10) == converter.bs_to_days(2076, 0, 10)

    def test_month_minus_one_is_previous_year(self, converter):
        assert converter.bs_to_days(2075, -1, 10) == converter.bs_to_days(2074, 11, 10)

    def test_large_overflow(self, converter):
        assert converter.bs_to_days(2075, 25, 1) == converter.bs_to_days(2077, 1, 1)
        assert converter.bs_to_days(2075, -13, 1) == converter.bs_to_days(2073, 11, 1)

    def test_overflow_past_table_end(self, converter):
        with pytest.raises(OutOfRangeError):
            converter.bs_to_gregorian(2090, 12, 1)


class TestRoundTrips:
    def test_every_bs_date(self, converter):
        for year in range(DEFAULT_TABLE.start_year, DEFAULT_TABLE.end_year + 1):
            for month, length in enumerate(DEFAULT_TABLE.month_lengths(year)):
                for day in range(1, length + 1):
                    days = converter.bs_to_days(year, month, day)
                    assert converter.days_to_bs(days) == (year, month, day)

    def test_every_day_in_range(self, converter):
        for days in range(DEFAULT_TABLE.total_days):
            assert converter.bs_to_days(*converter.days_to_bs(days)) == days

    def test_consecutive_days_advance_by_one(self, converter):
        previous = converter.days_to_bs(0)
        for days in range(1, DEFAULT_TABLE.total_days):
            current = converter.days_to_bs(days)
            year, month, day = previous
            if day < DEFAULT_TABLE.month_lengths(year)[month]:
                expected = (year, month, day + 1)
            elif month < 11:
                expected = (year, month + 1, 1)
            else:
                expected = (year + 1, 0, 1)
            assert current == expected
            previous = current

    def test_instant_round_trip(self, converter, ktm):
        instant = ktm(2001, 9, 11)
        assert converter.bs_to_gregorian(*converter.gregorian_to_bs(instant)) == instant


class TestDayBoundary:
    def test_aware_instant_converted_into_zone(self):
        utc_instant = datetime(2019, 4, 7, 18, 30, tzinfo=timezone.utc)
        assert Converter(tz='Asia/Kathmandu').gregorian_to_bs(utc_instant) == (2075, 11, 25)
        assert Converter(tz='UTC').gregorian_to_bs(utc_instant) == (2075, 11, 24)

    def test_naive_instant_is_wall_clock(self):
        naive = datetime(2019, 4, 8, 0, 5)
        assert Converter(tz='UTC').gregorian_to_bs(naive) == (2075, 11, 25)
        assert Converter(tz='Asia/Kathmandu').gregorian_to_bs(naive) == (2075, 11, 25)

    def test_host_local_converter_returns_naive(self):
        result = Converter().bs_to_gregorian(2075, 11, 25)
        assert result == datetime(2019, 4, 8)
        assert result.tzinfo is None

    def test_string_zone_is_resolved(self):
        assert Converter(tz='Asia/Kathmandu').tz == ZoneInfo('Asia/Kathmandu')

    def test_rejects_non_dates(self, converter):
        with pytest.raises(InvalidArgumentError):
            converter.gregorian_to_bs("2019-04-08")


def test_default_converter_uses_settings():
    assert get_default_converter().tz == ZoneInfo('Asia/Kathmandu')
    assert get_default_converter() is get_default_converter()
