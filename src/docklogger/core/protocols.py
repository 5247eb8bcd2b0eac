"""Protocol interfaces for DockLogger collaborators.

The calculation core only talks to persistence through these Protocols:
structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable

from docklogger.models.accrual import PeriodSummary
from docklogger.models.shift import RangeTotals


# ---------------------------------------------------------------------------
# Persistence: Stat holiday overrides
# ---------------------------------------------------------------------------

@runtime_checkable
class IHolidayStore(Protocol):
    """Per-year stat holiday overrides curated by the user."""

    def get_stat_holidays(self, year: int) -> list[dict[str, Any]]: ...


# ---------------------------------------------------------------------------
# Persistence: Shift entries (read-only aggregates)
# ---------------------------------------------------------------------------

@runtime_checkable
class IEntryStore(Protocol):
    """Date-ranged aggregates over logged shifts. Bounds are inclusive."""

    def get_work_days_count(self, start: date, end: date) -> int: ...

    def get_total_hours(self, start: date, end: date) -> Decimal: ...

    def get_total_earnings(self, start: date, end: date) -> Decimal: ...

    def get_range_totals(self, start: date, end: date) -> RangeTotals: ...


# ---------------------------------------------------------------------------
# Persistence: Period summaries
# ---------------------------------------------------------------------------

@runtime_checkable
class ISummaryStore(Protocol):
    """Synthesized half-year summaries. Inserts are atomic check-and-insert."""

    def get_period_summary(self, start: date, end: date) -> PeriodSummary | None: ...

    def insert_period_summary(self, summary: PeriodSummary) -> None: ...

    def list_period_summaries(self) -> list[PeriodSummary]: ...

    def get_latest_summary(self) -> PeriodSummary | None: ...


# ---------------------------------------------------------------------------
# Persistence: Cache Backend
# ---------------------------------------------------------------------------

@runtime_checkable
class ICacheBackend(Protocol):
    """Redis-compatible cache interface."""

    def get(self, key: str) -> str | None: ...

    def setex(self, key: str, ttl: int, value: str) -> None: ...

    def delete(self, key: str) -> None: ...
