"""Tests for date handling utilities."""

import pytest
from datetime import date, datetime, timezone

from pumpout_engine.utils.time import (
    format_iso_date,
    format_month_day,
    ordinal_suffix,
    to_date,
)


class TestToDate:
    """Test to_date function."""

    def test_date_unchanged(self):
        value = date(2024, 6, 10)
        assert to_date(value) is value

    def test_naive_datetime(self):
        assert to_date(datetime(2024, 6, 10, 23, 59)) == date(2024, 6, 10)

    def test_aware_datetime_keeps_its_own_calendar_date(self):
        stamp = datetime(2024, 6, 10, 23, 30, tzinfo=timezone.utc)
        result = to_date(stamp)

        assert result == date(2024, 6, 10)
        assert not isinstance(result, datetime)


class TestFormatting:
    """Test display formatting helpers."""

    @pytest.mark.parametrize("day,suffix", [
        (1, "st"), (2, "nd"), (3, "rd"), (4, "th"),
        (11, "th"), (12, "th"), (13, "th"),
        (21, "st"), (22, "nd"), (23, "rd"), (31, "st"),
    ])
    def test_ordinal_suffix(self, day, suffix):
        assert ordinal_suffix(day) == suffix

    def test_format_month_day(self):
        assert format_month_day(date(2024, 10, 31)) == "October 31st"
        assert format_month_day(datetime(2024, 6, 12, 9, 0)) == "June 12th"

    def test_format_iso_date(self):
        assert format_iso_date(datetime(2024, 6, 12, 9, 0)) == "2024-06-12"
