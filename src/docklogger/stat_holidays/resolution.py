"""Ordered holiday resolution strategies: override, then curated, then computed.

Each strategy answers ``resolve(year)`` with a ``ResolvedHolidays`` or None;
the engine walks the chain and takes the first answer.
"""

from __future__ import annotations

from typing import Mapping, Protocol

from pydantic import ValidationError

from docklogger.core.exceptions import DockLoggerError
from docklogger.core.logging_config import get_logger
from docklogger.core.protocols import IHolidayStore
from docklogger.models.holiday import HolidayRecord, HolidaySource, ResolvedHolidays
from docklogger.stat_holidays.cache import HolidayYearCache
from docklogger.stat_holidays.curated import CURATED_HOLIDAYS
from docklogger.stat_holidays.feasts import (
    QUALIFYING_WINDOW_DAYS,
    WINDOW_END_OFFSET_DAYS,
    compute_holidays,
)

logger = get_logger(__name__)


class HolidayStrategy(Protocol):
    source: HolidaySource

    def resolve(self, year: int) -> ResolvedHolidays | None: ...


class OverrideStrategy:
    """Persisted per-year overrides, loaded lazily through the year cache."""

    source = HolidaySource.OVERRIDE

    def __init__(self, cache: HolidayYearCache, store: IHolidayStore | None = None) -> None:
        self._cache = cache
        self._store = store

    def _load(self, year: int) -> tuple[HolidayRecord, ...] | None:
        """Cached override table for ``year``; None when the store could not be read.

        A failed read is not cached, so the next call tries the store again.
        """
        cached = self._cache.get(year)
        if cached is not None:
            return cached
        if self._store is None:
            return ()
        try:
            items = self._store.get_stat_holidays(year)
            records = {}
            for item in items:
                holiday = HolidayRecord.from_item(item)
                records[holiday.date] = holiday  # later rows win on a repeated date
        except (DockLoggerError, ValidationError, KeyError) as exc:
            logger.warning("holiday_overrides_unavailable", year=year, error=str(exc))
            return None
        logger.debug("holiday_overrides_loaded", year=year, count=len(records))
        return self._cache.publish(year, tuple(sorted(records.values(), key=lambda h: h.date)))

    def resolve(self, year: int) -> ResolvedHolidays | None:
        records = self._load(year)
        if not records:
            return None
        return ResolvedHolidays(year=year, source=self.source, holidays=records)


class CuratedStrategy:
    """Researched literal tables shipped with the package."""

    source = HolidaySource.CURATED

    def __init__(self, tables: Mapping[int, tuple[HolidayRecord, ...]] = CURATED_HOLIDAYS) -> None:
        self._tables = tables

    def resolve(self, year: int) -> ResolvedHolidays | None:
        records = self._tables.get(year)
        if not records:
            return None
        return ResolvedHolidays(year=year, source=self.source, holidays=tuple(records))


class ComputedStrategy:
    """Procedural fallback; answers for every year."""

    source = HolidaySource.COMPUTED

    def __init__(
        self,
        window_days: int = QUALIFYING_WINDOW_DAYS,
        end_offset_days: int = WINDOW_END_OFFSET_DAYS,
    ) -> None:
        self._window_days = window_days
        self._end_offset_days = end_offset_days

    def resolve(self, year: int) -> ResolvedHolidays:
        return ResolvedHolidays(
            year=year,
            source=self.source,
            holidays=compute_holidays(year, self._window_days, self._end_offset_days),
        )
