"""Tests for the NepaliCalendar model and its admin."""

import pytest
from django.contrib.admin.sites import AdminSite
from django.core.exceptions import ValidationError

from bikram_sambat.admin import NepaliCalendarAdmin
from bikram_sambat.models import NepaliCalendar


class TestNepaliCalendar:
    def test_str(self):
        entry = NepaliCalendar(bs_year=2075, month=12, days_in_month=30)
        assert str(entry) == "Chaitra 2075 (30 days)"
        assert entry.month_name == "Chaitra"

    def test_clean_rejects_bad_month(self):
        with pytest.raises(ValidationError):
            NepaliCalendar(bs_year=2075, month=13, days_in_month=30).clean()

    @pytest.mark.parametrize("days", [28, 33])
    def test_clean_rejects_bad_length(self, days):
        with pytest.raises(ValidationError):
            NepaliCalendar(bs_year=2075, month=1, days_in_month=days).clean()

    def test_clean_accepts_valid(self):
        NepaliCalendar(bs_year=2075, month=3, days_in_month=32).clean()

    @pytest.mark.django_db
    def test_unique_year_month(self):
        from django.db import IntegrityError

        NepaliCalendar.objects.create(bs_year=2075, month=1, days_in_month=31)
        with pytest.raises(IntegrityError):
            NepaliCalendar.objects.create(bs_year=2075, month=1, days_in_month=31)


class TestNepaliCalendarAdmin:
    @pytest.fixture
    def model_admin(self):
        return NepaliCalendarAdmin(NepaliCalendar, AdminSite())

    def test_labels(self, model_admin):
        entry = NepaliCalendar(bs_year=2075, month=3, days_in_month=32)
        assert model_admin.bs_month_label(entry) == "2075/03"
        assert model_admin.month_display(entry) == "Ashadh"

    def test_ad_end_date(self, model_admin):
        from datetime import date

        entry = NepaliCalendar(bs_year=2075, month=12, days_in_month=30, ad_start_date=date(2019, 3, 15))
        assert model_admin.ad_end_date(entry) == date(2019, 4, 13)
        assert model_admin.ad_end_date(NepaliCalendar(bs_year=2075, month=12, days_in_month=30)) is None

    def test_table_status(self, model_admin):
        assert "OK" in model_admin.table_status(NepaliCalendar(bs_year=2075, month=12, days_in_month=30))
        assert "MISMATCH" in model_admin.table_status(NepaliCalendar(bs_year=2075, month=12, days_in_month=31))
        assert "Not in table" in model_admin.table_status(NepaliCalendar(bs_year=1990, month=1, days_in_month=30))

    def test_table_status_renders_without_warnings(self, model_admin):
        import warnings

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            status = model_admin.table_status(NepaliCalendar(bs_year=2075, month=12, days_in_month=31))
        assert "#dc3545" in status
        assert status.endswith("MISMATCH</span>")
