"""Tests for date coercion and display formatting."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from docklogger.core.exceptions import InvalidDateError
from docklogger.stat_holidays.dates import coerce_date, format_qualification_date


class TestCoerceDate:
    def test_passes_dates_through(self):
        assert coerce_date(date(2026, 1, 1)) == date(2026, 1, 1)

    def test_truncates_datetimes(self):
        assert coerce_date(datetime(2026, 1, 1, 13, 30)) == date(2026, 1, 1)

    def test_parses_iso_strings(self):
        assert coerce_date("2026-02-16") == date(2026, 2, 16)

    @pytest.mark.parametrize("value", [
        "2026-13-01", "2026-02-30", "next tuesday", "", 20260101, None,
        "20260315", "2026-W11-7", " 2026-03-15 ", "2026-03-15T00:00", "2026-3-15",
    ])
    def test_rejects_malformed(self, value):
        with pytest.raises(InvalidDateError):
            coerce_date(value)

    def test_invalid_date_is_a_value_error(self):
        with pytest.raises(ValueError):
            coerce_date("nope")


class TestFormatQualificationDate:
    def test_without_year(self):
        assert format_qualification_date(date(2025, 11, 30)) == "Nov 30"

    def test_with_year(self):
        assert format_qualification_date("2026-01-03", include_year=True) == "Jan 3, 2026"
