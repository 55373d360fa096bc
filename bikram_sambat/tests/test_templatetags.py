"""Tests for the nepali_date template filters."""

import logging
from datetime import date, datetime
from zoneinfo import ZoneInfo

from django.template import Context, Template

from bikram_sambat.templatetags.nepali_date import bs_display, bs_display_time, bs_format


def render(source, **context):
    return Template("{% load nepali_date %}" + source).render(Context(context))


class TestBsFormat:
    def test_default_pattern(self):
        assert bs_format(date(2019, 4, 8)) == "2075-12-25"

    def test_custom_pattern(self):
        assert bs_format("2075-12-25", "DD/MM/YYYY") == "25/12/2075"

    def test_empty_value(self):
        assert bs_format(None) == ""
        assert bs_format("") == ""

    def test_in_template(self):
        assert render('{{ d|bs_format:"YYYY.MM.DD" }}', d=date(2019, 4, 8)) == "2075.12.25"


class TestBsDisplay:
    def test_month_name(self):
        assert bs_display(date(2019, 4, 8)) == "Chaitra 25, 2075"

    def test_with_time(self):
        instant = datetime(2019, 4, 8, 14, 30, tzinfo=ZoneInfo('Asia/Kathmandu'))
        assert bs_display_time(instant) == "Chaitra 25, 2075 14:30"

    def test_in_template(self):
        assert render("{{ d|bs_display }}", d=date(2019, 4, 14)) == "Baisakh 1, 2076"


class TestFallback:
    def test_invalid_value_renders_placeholder(self, caplog):
        with caplog.at_level(logging.WARNING, logger="bikram_sambat"):
            assert bs_display("abcd-12-25") == "Invalid Date"
        assert "Error converting" in caplog.text

    def test_out_of_range_date(self):
        assert bs_format(date(1900, 1, 1)) == "Invalid Date"
        assert bs_display_time(date(1900, 1, 1)) == "Invalid Date"

    def test_unsupported_type(self):
        assert bs_display([2075, 12, 25]) == "Invalid Date"
