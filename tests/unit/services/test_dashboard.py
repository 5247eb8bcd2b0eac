"""Tests for the composed dashboard snapshot."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from docklogger.core.config import AppSettings
from docklogger.models.profile import WorkerProfile
from docklogger.models.shift import ShiftEntry
from docklogger.services.dashboard import DashboardService
from tests.fakes import MemoryEntryStore, MemoryHolidayStore


@pytest.fixture
def entries():
    store = MemoryEntryStore()
    for day in (5, 6, 7, 8, 9):
        store.add(ShiftEntry(
            date=date(2026, 3, day), shift_type="day",
            hours=Decimal("8"), earnings=Decimal("400"),
        ))
    store.add(ShiftEntry(
        date=date(2025, 12, 1), shift_type="graveyard",
        hours=Decimal("6.5"), earnings=Decimal("450"),
    ))
    return store


@pytest.fixture
def dashboard(entries):
    return DashboardService.from_settings(AppSettings(), entries, holidays=MemoryHolidayStore())


class TestSnapshot:
    def test_composes_all_three_engines(self, dashboard):
        snap = dashboard.snapshot(date(2026, 3, 15), WorkerProfile(day_rate=Decimal("50")))
        assert snap.reference_date == date(2026, 3, 15)

        assert snap.qualification.next_holiday.name == "Good Friday"
        assert snap.qualification.next_holiday.days_until == 19
        assert snap.qualification.days_worked == 5
        assert snap.qualification.full_pay == Decimal("400")

        assert snap.period.label == "Jan - Jun 2026"
        assert snap.accrual.current_hours == Decimal("40")
        assert snap.period_earnings.total_earnings == Decimal("2000")

        assert snap.ytd_earnings == Decimal("2000")
        assert snap.ytd_work_days == 5
        assert snap.year_end_estimate is not None
        assert snap.year_end_estimate.gross_income > Decimal("0")

    def test_no_estimate_without_work(self, dashboard):
        snap = dashboard.snapshot("2026-01-02")
        assert snap.year_end_estimate is None
        assert snap.ytd_work_days == 0
        assert snap.accrual.current_hours == Decimal("0")

    def test_profile_target_used_for_period(self, dashboard):
        snap = dashboard.snapshot(date(2026, 3, 15), WorkerProfile(average_hours_target=Decimal("500")))
        assert snap.period.target_hours == Decimal("500")
        assert snap.accrual.target_hours == Decimal("500")

    def test_exposes_engines(self, dashboard):
        assert dashboard.calendar.resolve(2026).source == "curated"
        assert dashboard.tax.rules.year == 2024
