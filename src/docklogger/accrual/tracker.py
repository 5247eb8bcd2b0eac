"""AccrualTracker: stat qualification strength and board-move accrual pace."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from docklogger.accrual.periods import current_half_year_period
from docklogger.core.config import AccrualConfig
from docklogger.core.decimals import ZERO, capped_percent, safe_div, to_decimal
from docklogger.core.protocols import IEntryStore
from docklogger.core.types import DateLike
from docklogger.models.accrual import (
    AccrualStatus,
    NextHoliday,
    PeriodEarnings,
    QualificationStatus,
)
from docklogger.models.holiday import HolidayRecord, QualifyingWindow
from docklogger.models.profile import WorkerProfile
from docklogger.stat_holidays.dates import coerce_date
from docklogger.stat_holidays.engine import CalendarEngine

DAYS_PER_WEEK = 7


def period_earnings(
    total_hours: Decimal, total_earnings: Decimal, entry_count: int,
) -> PeriodEarnings:
    """Averages over a range; both quotients are 0 when their divisor is."""
    hours = to_decimal(total_hours)
    earnings = to_decimal(total_earnings)
    return PeriodEarnings(
        total_hours=hours,
        total_earnings=earnings,
        entry_count=entry_count,
        average_per_entry=safe_div(earnings, entry_count),
        average_per_hour=safe_div(earnings, hours),
    )


class AccrualTracker:
    """Turns worked-shift aggregates into qualification and accrual status.

    The pure methods (``qualification``, ``accrual_status``) take their
    aggregates as arguments. The ``*_status`` conveniences read them from the
    entry store first.
    """

    def __init__(
        self,
        calendar: CalendarEngine,
        entries: IEntryStore,
        config: AccrualConfig | None = None,
    ) -> None:
        self._calendar = calendar
        self._entries = entries
        self._config = config or AccrualConfig()

    # ---- stat holiday qualification ----

    def qualification(
        self,
        reference_date: DateLike,
        worked_days_in_window: int,
        day_rate: Decimal = ZERO,
    ) -> QualificationStatus:
        ref = coerce_date(reference_date)
        holiday = self._calendar.next_holiday(ref)
        if holiday is None:
            return QualificationStatus(days_required=self._config.qualification_days_required)
        window = self._calendar.qualifying_window(holiday.date, ref)
        return self._qualification(ref, holiday, window, worked_days_in_window, day_rate)

    def _qualification(
        self,
        ref: date,
        holiday: HolidayRecord,
        window: QualifyingWindow,
        worked_days_in_window: int,
        day_rate: Decimal,
    ) -> QualificationStatus:
        required = self._config.qualification_days_required
        percent = capped_percent(Decimal(worked_days_in_window), required)
        full_pay = self._config.stat_pay_hours * to_decimal(day_rate)
        return QualificationStatus(
            next_holiday=NextHoliday(
                name=holiday.name,
                date=holiday.date,
                days_until=(holiday.date - ref).days,
            ),
            qualifying_window=window,
            days_worked=worked_days_in_window,
            days_required=required,
            qualification_percent=percent,
            estimated_pay=percent / Decimal(100) * full_pay,
            full_pay=full_pay,
        )

    def qualification_status(
        self, reference_date: DateLike, profile: WorkerProfile | None = None,
    ) -> QualificationStatus:
        """Qualification for the next stat, counting worked days from the store."""
        ref = coerce_date(reference_date)
        day_rate = profile.day_rate if profile is not None else ZERO
        holiday = self._calendar.next_holiday(ref)
        if holiday is None:
            return QualificationStatus(days_required=self._config.qualification_days_required)
        window = self._calendar.qualifying_window(holiday.date, ref)
        worked = self._entries.get_work_days_count(window.start, window.end)
        return self._qualification(ref, holiday, window, worked, day_rate)

    # ---- half-year accrual ----

    def accrual_status(
        self,
        current_hours: Decimal,
        target_hours: Decimal,
        reference_date: DateLike,
        period_end: DateLike,
    ) -> AccrualStatus:
        hours = to_decimal(current_hours)
        target = to_decimal(target_hours)
        days_remaining = max((coerce_date(period_end) - coerce_date(reference_date)).days, 0)
        hours_needed = max(target - hours, ZERO)

        # Rough work-day estimate; on track while the needed pace fits in a standard shift.
        work_days_remaining = days_remaining * self._config.workdays_per_week // DAYS_PER_WEEK
        pace_per_work_day = safe_div(hours_needed, work_days_remaining)

        return AccrualStatus(
            current_hours=hours,
            target_hours=target,
            progress_percent=capped_percent(hours, target),
            days_remaining=days_remaining,
            hours_needed=hours_needed,
            pace_per_day=safe_div(hours_needed, days_remaining),
            on_track=pace_per_work_day <= self._config.standard_shift_hours,
        )

    def average_hours_status(
        self, reference_date: DateLike, profile: WorkerProfile | None = None,
    ) -> AccrualStatus:
        """Accrual for the half-year containing ``reference_date``, hours from the store."""
        ref = coerce_date(reference_date)
        target = profile.average_hours_target if profile is not None else self._config.target_hours
        period = current_half_year_period(ref, target)
        hours = self._entries.get_total_hours(period.start, ref)
        return self.accrual_status(hours, target, ref, period.end)

    # ---- earnings ----

    def earnings_for_range(self, start: DateLike, end: DateLike) -> PeriodEarnings:
        totals = self._entries.get_range_totals(coerce_date(start), coerce_date(end))
        return period_earnings(totals.total_hours, totals.total_earnings, totals.work_days)
