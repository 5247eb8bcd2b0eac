"""CalendarEngine: stat holidays and qualifying windows for any year."""

from __future__ import annotations

from datetime import date
from typing import Sequence

from docklogger.core.config import CalendarConfig
from docklogger.core.logging_config import get_logger
from docklogger.core.protocols import IHolidayStore
from docklogger.core.types import DateLike
from docklogger.models.holiday import HolidayRecord, QualifyingWindow, ResolvedHolidays
from docklogger.stat_holidays.cache import HolidayYearCache
from docklogger.stat_holidays.dates import coerce_date
from docklogger.stat_holidays.feasts import default_qualifying_window
from docklogger.stat_holidays.resolution import (
    ComputedStrategy,
    CuratedStrategy,
    HolidayStrategy,
    OverrideStrategy,
)

logger = get_logger(__name__)


class CalendarEngine:
    """Resolves stat holidays through override -> curated -> computed.

    The computed strategy always answers, so every query is total over
    well-formed dates. The override cache is injected so its lifetime is
    owned by whoever wires the engine (typically one per process).
    """

    def __init__(
        self,
        *,
        store: IHolidayStore | None = None,
        cache: HolidayYearCache | None = None,
        config: CalendarConfig | None = None,
        strategies: Sequence[HolidayStrategy] | None = None,
    ) -> None:
        self._config = config or CalendarConfig()
        self._cache = cache if cache is not None else HolidayYearCache()
        if strategies is None:
            strategies = (
                OverrideStrategy(self._cache, store),
                CuratedStrategy(),
                ComputedStrategy(
                    self._config.qualifying_window_days,
                    self._config.window_end_offset_days,
                ),
            )
        self._strategies = tuple(strategies)

    @property
    def cache(self) -> HolidayYearCache:
        return self._cache

    def resolve(self, year: int) -> ResolvedHolidays:
        """First strategy that has an answer for ``year``, with its source."""
        for strategy in self._strategies:
            resolved = strategy.resolve(year)
            if resolved is not None:
                logger.debug("holidays_resolved", year=year, source=str(resolved.source))
                return resolved
        # Only reachable with a custom chain that lacks the computed fallback.
        fallback = ComputedStrategy(
            self._config.qualifying_window_days, self._config.window_end_offset_days,
        )
        return fallback.resolve(year)

    def holidays_for_year(self, year: int) -> tuple[HolidayRecord, ...]:
        return self.resolve(year).holidays

    def _two_years(self, year: int) -> list[HolidayRecord]:
        return [*self.holidays_for_year(year), *self.holidays_for_year(year + 1)]

    def next_holiday(self, reference_date: DateLike) -> HolidayRecord | None:
        """Earliest stat dated on or after ``reference_date`` (this year or next)."""
        ref = coerce_date(reference_date)
        upcoming = [h for h in self._two_years(ref.year) if h.date >= ref]
        return min(upcoming, key=lambda h: h.date, default=None)

    def qualifying_window(
        self, holiday_date: DateLike, reference_date: DateLike | None = None,
    ) -> QualifyingWindow:
        """Stored window of the stat on ``holiday_date``, else the default estimate.

        The lookup covers the reference year (the holiday's own year unless
        given) and the year after.
        """
        day = coerce_date(holiday_date)
        ref = coerce_date(reference_date) if reference_date is not None else day
        for holiday in self._two_years(ref.year):
            if holiday.date == day:
                return holiday.window
        return self.default_window(day)

    def default_window(self, holiday_date: DateLike) -> QualifyingWindow:
        return default_qualifying_window(
            coerce_date(holiday_date),
            self._config.qualifying_window_days,
            self._config.window_end_offset_days,
        )
