"""In-memory backends for unit tests and local runs: dict-backed fakes."""

from __future__ import annotations

import threading
from datetime import date
from decimal import Decimal
from typing import Any

from docklogger.core.exceptions import DuplicatePeriodSummaryError
from docklogger.models.accrual import PeriodSummary
from docklogger.models.shift import RangeTotals, ShiftEntry


class MemoryHolidayStore:
    """Dict-backed IHolidayStore for unit tests."""

    def __init__(self) -> None:
        self._years: dict[int, list[dict[str, Any]]] = {}
        self.calls = 0

    def put_stat_holidays(self, year: int, items: list[dict[str, Any]]) -> None:
        self._years[year] = list(items)

    def get_stat_holidays(self, year: int) -> list[dict[str, Any]]:
        self.calls += 1
        return list(self._years.get(year, []))


class MemoryEntryStore:
    """List-backed IEntryStore; ranges are inclusive on both ends."""

    def __init__(self, entries: list[ShiftEntry] | None = None) -> None:
        self._entries: list[ShiftEntry] = list(entries or [])

    def add(self, entry: ShiftEntry) -> None:
        self._entries.append(entry)

    def _in_range(self, start: date, end: date) -> list[ShiftEntry]:
        return [e for e in self._entries if start <= e.date <= end]

    def get_work_days_count(self, start: date, end: date) -> int:
        return len({e.date for e in self._in_range(start, end)})

    def get_total_hours(self, start: date, end: date) -> Decimal:
        return sum((e.hours for e in self._in_range(start, end)), Decimal("0"))

    def get_total_earnings(self, start: date, end: date) -> Decimal:
        return sum((e.earnings or Decimal("0") for e in self._in_range(start, end)), Decimal("0"))

    def get_range_totals(self, start: date, end: date) -> RangeTotals:
        rows = self._in_range(start, end)
        return RangeTotals(
            entry_count=len(rows),
            work_days=len({e.date for e in rows}),
            total_hours=sum((e.hours for e in rows), Decimal("0")),
            total_earnings=sum((e.earnings or Decimal("0") for e in rows), Decimal("0")),
        )


class MemorySummaryStore:
    """Dict-backed ISummaryStore with a locked check-and-insert."""

    def __init__(self) -> None:
        self._summaries: dict[tuple[date, date], PeriodSummary] = {}
        self._lock = threading.Lock()

    def get_period_summary(self, start: date, end: date) -> PeriodSummary | None:
        return self._summaries.get((start, end))

    def insert_period_summary(self, summary: PeriodSummary) -> None:
        key = (summary.period_start, summary.period_end)
        with self._lock:
            if key in self._summaries:
                raise DuplicatePeriodSummaryError(
                    summary.period_start.isoformat(), summary.period_end.isoformat(),
                )
            self._summaries[key] = summary

    def list_period_summaries(self) -> list[PeriodSummary]:
        return sorted(self._summaries.values(), key=lambda s: s.period_start, reverse=True)

    def get_latest_summary(self) -> PeriodSummary | None:
        summaries = self.list_period_summaries()
        return summaries[0] if summaries else None


class MemoryCacheBackend:
    """Dict-backed ICacheBackend for unit tests."""

    def __init__(self) -> None:
        self._store: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._store.get(key)

    def setex(self, key: str, ttl: int, value: str) -> None:
        self._store[key] = value

    def delete(self, key: str) -> None:
        self._store.pop(key, None)
