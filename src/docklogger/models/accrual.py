"""Accrual periods and the derived status values computed over them.

Status models are frozen value types: built by the calculation core, handed
to the display layer, never mutated.
"""

from __future__ import annotations

import datetime
from decimal import Decimal
from enum import StrEnum
from typing import Any, Optional

from pydantic import BaseModel, Field

from docklogger.models.holiday import QualifyingWindow
from docklogger.models.tax import TaxBreakdown


class PeriodType(StrEnum):
    HALF_YEAR = "half_year"
    YEAR = "year"


class AccrualPeriod(BaseModel):
    """A fixed six-month board-move span (Jan-Jun or Jul-Dec)."""

    model_config = {"frozen": True}

    start: datetime.date
    end: datetime.date
    label: str
    target_hours: Decimal = Decimal("600")

    def contains(self, day: datetime.date) -> bool:
        return self.start <= day <= self.end


class NextHoliday(BaseModel):
    model_config = {"frozen": True}

    name: str
    date: datetime.date
    days_until: int


class QualificationStatus(BaseModel):
    """How strongly the worker qualifies for the next stat's pay."""

    model_config = {"frozen": True}

    next_holiday: Optional[NextHoliday] = None
    qualifying_window: Optional[QualifyingWindow] = None
    days_worked: int = 0
    days_required: int = 15
    qualification_percent: Decimal = Decimal("0")
    estimated_pay: Decimal = Decimal("0")
    full_pay: Decimal = Decimal("0")


class AccrualStatus(BaseModel):
    """Progress toward the half-year average-hours target."""

    model_config = {"frozen": True}

    current_hours: Decimal
    target_hours: Decimal
    progress_percent: Decimal
    days_remaining: int
    hours_needed: Decimal
    pace_per_day: Decimal
    on_track: bool


class PeriodEarnings(BaseModel):
    model_config = {"frozen": True}

    total_hours: Decimal = Decimal("0")
    total_earnings: Decimal = Decimal("0")
    entry_count: int = 0
    average_per_entry: Decimal = Decimal("0")
    average_per_hour: Decimal = Decimal("0")


class PeriodSummary(BaseModel):
    """Synthesized record of a closed half-year, written once per period."""

    model_config = {"frozen": True}

    period_type: PeriodType = PeriodType.HALF_YEAR
    period_start: datetime.date
    period_end: datetime.date
    total_hours: Decimal
    total_earnings: Decimal
    days_worked: int
    summary_data: dict[str, Any] = Field(default_factory=dict)
    created_at: Optional[datetime.datetime] = None


class DashboardSnapshot(BaseModel):
    """Everything the home screen shows for one reference date."""

    model_config = {"frozen": True}

    reference_date: datetime.date
    qualification: QualificationStatus
    period: AccrualPeriod
    accrual: AccrualStatus
    period_earnings: PeriodEarnings
    ytd_earnings: Decimal = Decimal("0")
    ytd_work_days: int = 0
    year_end_estimate: Optional[TaxBreakdown] = None
