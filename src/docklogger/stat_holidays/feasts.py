"""Procedural stat holiday dates for BC (ILWU Local 502 schedule).

Used for any year without a persisted override or a curated table. Windows
produced here are the default estimate: 28 days ending 4 days before the stat.
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta

from docklogger.models.holiday import HolidayRecord, QualifyingWindow

QUALIFYING_WINDOW_DAYS = 28
WINDOW_END_OFFSET_DAYS = 4


def easter_sunday(year: int) -> date:
    """Gregorian Easter Sunday (anonymous century/epact algorithm)."""
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day + 1)


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> date:
    """The nth ``weekday`` (Monday=0, as ``date.weekday()``) of a 1-based month.

    Raises:
        ValueError: the month has fewer than ``n`` such weekdays.
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    first = date(year, month, 1)
    day = 1 + (weekday - first.weekday()) % 7 + (n - 1) * 7
    if day > calendar.monthrange(year, month)[1]:
        raise ValueError(f"{year}-{month:02d} has no occurrence #{n} of weekday {weekday}")
    return date(year, month, day)


def monday_before(day: date) -> date:
    """The Monday strictly before ``day`` (a week earlier if ``day`` is a Monday)."""
    return day - timedelta(days=day.weekday() or 7)


def default_qualifying_window(
    holiday_date: date,
    window_days: int = QUALIFYING_WINDOW_DAYS,
    end_offset_days: int = WINDOW_END_OFFSET_DAYS,
) -> QualifyingWindow:
    """Estimated window: ends ``end_offset_days`` before the stat, spans ``window_days``."""
    end = holiday_date - timedelta(days=end_offset_days)
    start = end - timedelta(days=window_days - 1)
    return QualifyingWindow(start=start, end=end)


def holiday_dates(year: int) -> list[tuple[str, date]]:
    """Names and observed dates of every stat in ``year``, in calendar order."""
    easter = easter_sunday(year)
    canada_day = date(year, 7, 1)
    if canada_day.weekday() == calendar.SUNDAY:
        canada_day = date(year, 7, 2)

    return [
        ("New Year's Day", date(year, 1, 1)),
        ("Family Day", nth_weekday_of_month(year, 2, calendar.MONDAY, 3)),
        ("Good Friday", easter - timedelta(days=2)),
        ("Easter Monday", easter + timedelta(days=1)),
        ("Victoria Day", monday_before(date(year, 5, 25))),
        ("Canada Day", canada_day),
        ("BC Day", nth_weekday_of_month(year, 8, calendar.MONDAY, 1)),
        ("Labour Day", nth_weekday_of_month(year, 9, calendar.MONDAY, 1)),
        ("Truth & Reconciliation", date(year, 9, 30)),
        ("Thanksgiving", nth_weekday_of_month(year, 10, calendar.MONDAY, 2)),
        ("Remembrance Day", date(year, 11, 11)),
        ("Christmas", date(year, 12, 25)),
        ("Boxing Day", date(year, 12, 26)),
    ]


def compute_holidays(
    year: int,
    window_days: int = QUALIFYING_WINDOW_DAYS,
    end_offset_days: int = WINDOW_END_OFFSET_DAYS,
) -> tuple[HolidayRecord, ...]:
    """Every stat for ``year`` with default windows, sorted by date."""
    records = []
    for name, day in holiday_dates(year):
        window = default_qualifying_window(day, window_days, end_offset_days)
        records.append(HolidayRecord(
            name=name,
            date=day,
            qualification_start=window.start,
            qualification_end=window.end,
        ))
    return tuple(sorted(records, key=lambda r: r.date))
