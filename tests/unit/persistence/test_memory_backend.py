"""Tests for the in-memory backends used by unit tests and local runs."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from docklogger.core.exceptions import DuplicatePeriodSummaryError
from docklogger.core.protocols import ICacheBackend, IEntryStore, IHolidayStore, ISummaryStore
from docklogger.models.accrual import PeriodSummary
from docklogger.models.shift import ShiftEntry
from tests.fakes import MemoryCacheBackend, MemoryEntryStore, MemoryHolidayStore, MemorySummaryStore


def test_backends_satisfy_protocols():
    assert isinstance(MemoryHolidayStore(), IHolidayStore)
    assert isinstance(MemoryEntryStore(), IEntryStore)
    assert isinstance(MemorySummaryStore(), ISummaryStore)
    assert isinstance(MemoryCacheBackend(), ICacheBackend)


class TestMemoryEntryStore:
    def test_range_is_inclusive(self):
        store = MemoryEntryStore([
            ShiftEntry(date=date(2026, 1, 1), shift_type="day", hours=Decimal("8")),
            ShiftEntry(date=date(2026, 1, 31), shift_type="afternoon", hours=Decimal("8")),
            ShiftEntry(date=date(2026, 2, 1), shift_type="day", hours=Decimal("8")),
        ])
        assert store.get_total_hours(date(2026, 1, 1), date(2026, 1, 31)) == Decimal("16")
        assert store.get_total_earnings(date(2026, 1, 1), date(2026, 1, 31)) == Decimal("0")


class TestMemorySummaryStore:
    def test_duplicate_rejected(self):
        store = MemorySummaryStore()
        summary = PeriodSummary(
            period_start=date(2026, 1, 1), period_end=date(2026, 6, 30),
            total_hours=Decimal("1"), total_earnings=Decimal("1"), days_worked=1,
        )
        store.insert_period_summary(summary)
        with pytest.raises(DuplicatePeriodSummaryError):
            store.insert_period_summary(summary)


class TestMemoryCacheBackend:
    def test_set_get_delete(self):
        cache = MemoryCacheBackend()
        cache.setex("k", 10, "v")
        assert cache.get("k") == "v"
        cache.delete("k")
        assert cache.get("k") is None
