"""Stat holiday calendar: dates, qualifying windows and source precedence."""

from __future__ import annotations

from docklogger.stat_holidays.cache import HolidayYearCache
from docklogger.stat_holidays.dates import coerce_date, format_qualification_date
from docklogger.stat_holidays.engine import CalendarEngine
from docklogger.stat_holidays.feasts import (
    compute_holidays,
    default_qualifying_window,
    easter_sunday,
    nth_weekday_of_month,
)

__all__ = [
    "CalendarEngine",
    "HolidayYearCache",
    "coerce_date",
    "compute_holidays",
    "default_qualifying_window",
    "easter_sunday",
    "format_qualification_date",
    "nth_weekday_of_month",
]
