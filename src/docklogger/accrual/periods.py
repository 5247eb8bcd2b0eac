"""Half-year board-move periods (Jan-Jun, Jul-Dec)."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from docklogger.core.types import DateLike
from docklogger.models.accrual import AccrualPeriod
from docklogger.stat_holidays.dates import coerce_date

DEFAULT_TARGET_HOURS = Decimal("600")


def _first_half(year: int, target_hours: Decimal) -> AccrualPeriod:
    return AccrualPeriod(
        start=date(year, 1, 1), end=date(year, 6, 30),
        label=f"Jan - Jun {year}", target_hours=target_hours,
    )


def _second_half(year: int, target_hours: Decimal) -> AccrualPeriod:
    return AccrualPeriod(
        start=date(year, 7, 1), end=date(year, 12, 31),
        label=f"Jul - Dec {year}", target_hours=target_hours,
    )


def current_half_year_period(
    reference_date: DateLike, target_hours: Decimal = DEFAULT_TARGET_HOURS,
) -> AccrualPeriod:
    ref = coerce_date(reference_date)
    if ref.month <= 6:
        return _first_half(ref.year, target_hours)
    return _second_half(ref.year, target_hours)


def previous_half_year_period(
    reference_date: DateLike, target_hours: Decimal = DEFAULT_TARGET_HOURS,
) -> AccrualPeriod:
    ref = coerce_date(reference_date)
    if ref.month <= 6:
        return _second_half(ref.year - 1, target_hours)
    return _first_half(ref.year, target_hours)


def is_new_period(last_summary_date: DateLike | None, reference_date: DateLike) -> bool:
    """True when the last summary was written before the current period began."""
    if last_summary_date is None:
        return False
    return coerce_date(last_summary_date) < current_half_year_period(reference_date).start
