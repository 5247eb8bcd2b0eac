"""Stat qualification, half-year accrual and period summaries."""

from __future__ import annotations

from docklogger.accrual.periods import (
    current_half_year_period,
    is_new_period,
    previous_half_year_period,
)
from docklogger.accrual.summaries import PeriodSummaryService, render_period_report
from docklogger.accrual.tracker import AccrualTracker, period_earnings

__all__ = [
    "AccrualTracker",
    "PeriodSummaryService",
    "current_half_year_period",
    "is_new_period",
    "period_earnings",
    "previous_half_year_period",
    "render_period_report",
]
