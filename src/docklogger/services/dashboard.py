"""DashboardService: composes the three engines for one reference date.

Plain function composition; callers recompute by calling again with a new
date or profile.
"""

from __future__ import annotations

from datetime import date

from docklogger.accrual.periods import current_half_year_period
from docklogger.accrual.tracker import AccrualTracker
from docklogger.core.config import AppSettings
from docklogger.core.protocols import IEntryStore, IHolidayStore
from docklogger.core.types import DateLike
from docklogger.models.accrual import DashboardSnapshot
from docklogger.models.profile import WorkerProfile
from docklogger.stat_holidays.cache import HolidayYearCache
from docklogger.stat_holidays.dates import coerce_date
from docklogger.stat_holidays.engine import CalendarEngine
from docklogger.tax.engine import TaxEngine


class DashboardService:
    """Stat qualification, board-move accrual and year-end tax in one snapshot."""

    def __init__(
        self,
        *,
        calendar: CalendarEngine,
        tracker: AccrualTracker,
        tax: TaxEngine,
        entries: IEntryStore,
    ) -> None:
        self._calendar = calendar
        self._tracker = tracker
        self._tax = tax
        self._entries = entries

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings,
        entries: IEntryStore,
        holidays: IHolidayStore | None = None,
        cache: HolidayYearCache | None = None,
    ) -> DashboardService:
        calendar = CalendarEngine(store=holidays, cache=cache, config=settings.calendar)
        return cls(
            calendar=calendar,
            tracker=AccrualTracker(calendar, entries, settings.accrual),
            tax=TaxEngine(config=settings.tax),
            entries=entries,
        )

    @property
    def calendar(self) -> CalendarEngine:
        return self._calendar

    @property
    def tracker(self) -> AccrualTracker:
        return self._tracker

    @property
    def tax(self) -> TaxEngine:
        return self._tax

    def snapshot(self, reference_date: DateLike, profile: WorkerProfile | None = None) -> DashboardSnapshot:
        ref = coerce_date(reference_date)
        profile = profile or WorkerProfile()
        period = current_half_year_period(ref, profile.average_hours_target)
        ytd = self._entries.get_range_totals(date(ref.year, 1, 1), ref)

        return DashboardSnapshot(
            reference_date=ref,
            qualification=self._tracker.qualification_status(ref, profile),
            period=period,
            accrual=self._tracker.average_hours_status(ref, profile),
            period_earnings=self._tracker.earnings_for_range(period.start, ref),
            ytd_earnings=ytd.total_earnings,
            ytd_work_days=ytd.work_days,
            year_end_estimate=self._tax.project_annual(ytd.total_earnings, ytd.work_days, ref),
        )
