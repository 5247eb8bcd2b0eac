"""Tests for procedural stat holiday dates and default windows."""

from __future__ import annotations

import calendar
from datetime import date, timedelta

import pytest

from docklogger.stat_holidays.feasts import (
    compute_holidays,
    default_qualifying_window,
    easter_sunday,
    holiday_dates,
    monday_before,
    nth_weekday_of_month,
)


def _by_name(year: int) -> dict[str, date]:
    return dict(holiday_dates(year))


class TestEasterSunday:
    @pytest.mark.parametrize("year, expected", [
        (1900, date(1900, 4, 15)),
        (2000, date(2000, 4, 23)),
        (2024, date(2024, 3, 31)),
        (2025, date(2025, 4, 20)),
        (2026, date(2026, 4, 5)),
        (2038, date(2038, 4, 25)),
    ])
    def test_known_dates(self, year, expected):
        assert easter_sunday(year) == expected

    def test_always_a_sunday(self):
        for year in range(1900, 2100):
            assert easter_sunday(year).weekday() == calendar.SUNDAY


class TestNthWeekday:
    def test_third_monday_of_february(self):
        assert nth_weekday_of_month(2026, 2, calendar.MONDAY, 3) == date(2026, 2, 16)

    def test_month_starting_on_target_weekday(self):
        # June 1 2026 is a Monday
        assert nth_weekday_of_month(2026, 6, calendar.MONDAY, 1) == date(2026, 6, 1)
        # March 1 2026 is a Sunday
        assert nth_weekday_of_month(2026, 3, calendar.SUNDAY, 1) == date(2026, 3, 1)

    @pytest.mark.parametrize("month", [
        date(2024, 1, 1), date(2024, 10, 1), date(2024, 5, 1), date(2024, 8, 1),
        date(2024, 3, 1), date(2024, 6, 1), date(2024, 9, 1),
    ], ids=lambda d: calendar.day_name[d.weekday()])
    def test_every_start_and_target_weekday(self, month):
        for weekday in range(7):
            for n in range(1, 5):
                day = nth_weekday_of_month(month.year, month.month, weekday, n)
                assert day.weekday() == weekday
                assert day.month == month.month
                assert (day.day - 1) // 7 == n - 1

    def test_starting_weekdays_cover_the_week(self):
        starts = [date(2024, m, 1).weekday() for m in (1, 10, 5, 8, 3, 6, 9)]
        assert sorted(starts) == list(range(7))

    def test_raises_past_month_end(self):
        with pytest.raises(ValueError):
            nth_weekday_of_month(2026, 2, calendar.MONDAY, 5)

    def test_raises_for_non_positive_n(self):
        with pytest.raises(ValueError):
            nth_weekday_of_month(2026, 2, calendar.MONDAY, 0)

    def test_monday_before_is_strict(self):
        assert monday_before(date(2026, 5, 25)) == date(2026, 5, 18)
        assert monday_before(date(2024, 5, 25)) == date(2024, 5, 20)


class TestHolidayDates:
    def test_2024_moveable_feasts(self):
        days = _by_name(2024)
        assert days["Family Day"] == date(2024, 2, 19)
        assert days["Good Friday"] == date(2024, 3, 29)
        assert days["Easter Monday"] == date(2024, 4, 1)
        assert days["Victoria Day"] == date(2024, 5, 20)
        assert days["BC Day"] == date(2024, 8, 5)
        assert days["Labour Day"] == date(2024, 9, 2)
        assert days["Thanksgiving"] == date(2024, 10, 14)

    def test_victoria_day_when_may_25_is_sunday(self):
        assert _by_name(2025)["Victoria Day"] == date(2025, 5, 19)

    def test_victoria_day_is_a_monday_before_may_25(self):
        for year in range(2000, 2060):
            victoria = _by_name(year)["Victoria Day"]
            assert victoria.weekday() == calendar.MONDAY
            assert date(year, 5, 18) <= victoria < date(year, 5, 25)

    def test_canada_day_on_sunday_moves_to_monday(self):
        assert _by_name(2018)["Canada Day"] == date(2018, 7, 2)
        assert _by_name(2024)["Canada Day"] == date(2024, 7, 1)

    def test_fixed_dates(self):
        days = _by_name(2031)
        assert days["New Year's Day"] == date(2031, 1, 1)
        assert days["Truth & Reconciliation"] == date(2031, 9, 30)
        assert days["Remembrance Day"] == date(2031, 11, 11)
        assert days["Christmas"] == date(2031, 12, 25)
        assert days["Boxing Day"] == date(2031, 12, 26)


class TestComputeHolidays:
    def test_thirteen_sorted_unique(self):
        holidays = compute_holidays(2025)
        dates = [h.date for h in holidays]
        assert len(holidays) == 13
        assert dates == sorted(dates)
        assert len(set(dates)) == 13

    def test_every_holiday_in_its_year(self):
        for year in (2024, 2028, 2035):
            assert all(h.date.year == year for h in compute_holidays(year))

    def test_default_windows(self):
        for holiday in compute_holidays(2025):
            assert holiday.qualification_end == holiday.date - timedelta(days=4)
            assert holiday.window.length_days == 28
            assert holiday.pay_date is None

    def test_christmas_2025_window(self):
        christmas = [h for h in compute_holidays(2025) if h.name == "Christmas"][0]
        assert christmas.qualification_start == date(2025, 11, 24)
        assert christmas.qualification_end == date(2025, 12, 21)

    def test_custom_window_shape(self):
        window = default_qualifying_window(date(2030, 1, 1), window_days=7, end_offset_days=1)
        assert window.end == date(2029, 12, 31)
        assert window.start == date(2029, 12, 25)
