"""Researched stat schedules with the exact qualification periods.

Taken from the ILWU Local 502 dispatch schedule. Windows here are legally
exact and do not follow the default 28-day/4-day estimate. Add a year once
the union publishes its schedule.
"""

from __future__ import annotations

from datetime import date

from docklogger.models.holiday import HolidayRecord


def _stat(name: str, day: str, start: str, end: str, pay: str | None = None) -> HolidayRecord:
    return HolidayRecord(
        name=name,
        date=date.fromisoformat(day),
        qualification_start=date.fromisoformat(start),
        qualification_end=date.fromisoformat(end),
        pay_date=date.fromisoformat(pay) if pay else None,
    )


STAT_HOLIDAYS_2026: tuple[HolidayRecord, ...] = (
    _stat("New Year's Day", "2026-01-01", "2025-11-30", "2025-12-27", "2026-01-08"),
    _stat("Family Day", "2026-02-16", "2026-01-18", "2026-02-14", "2026-02-26"),
    _stat("Good Friday", "2026-04-03", "2026-03-01", "2026-03-28", "2026-04-09"),
    _stat("Easter Monday", "2026-04-06", "2026-03-08", "2026-04-04", "2026-04-16"),
    _stat("Victoria Day", "2026-05-18", "2026-04-19", "2026-05-16", "2026-05-28"),
    _stat("Canada Day", "2026-07-01", "2026-05-31", "2026-06-27", "2026-07-09"),
    _stat("BC Day", "2026-08-03", "2026-07-05", "2026-08-01", "2026-08-13"),
    _stat("Labour Day", "2026-09-07", "2026-08-09", "2026-09-05", "2026-09-17"),
    _stat("Truth & Reconciliation", "2026-09-30", "2026-08-30", "2026-09-26", "2026-10-08"),
    _stat("Thanksgiving", "2026-10-12", "2026-09-13", "2026-10-10", "2026-10-22"),
    _stat("Remembrance Day", "2026-11-11", "2026-10-13", "2026-11-07", "2026-11-19"),
    _stat("Christmas", "2026-12-25", "2026-11-22", "2026-12-19", "2026-12-31"),
    _stat("Boxing Day", "2026-12-26", "2026-11-22", "2026-12-19", "2026-12-31"),
)

# Partial: only New Year's Day has been published so far.
STAT_HOLIDAYS_2027: tuple[HolidayRecord, ...] = (
    _stat("New Year's Day", "2027-01-01", "2026-11-29", "2026-12-26", "2027-01-07"),
)

CURATED_HOLIDAYS: dict[int, tuple[HolidayRecord, ...]] = {
    2026: STAT_HOLIDAYS_2026,
    2027: STAT_HOLIDAYS_2027,
}
