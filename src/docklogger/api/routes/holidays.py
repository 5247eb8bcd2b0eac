"""Stat holiday endpoints."""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from fastapi import APIRouter, Request

from docklogger.models.holiday import QualifyingWindow
from docklogger.services.dashboard import DashboardService
from docklogger.stat_holidays.dates import format_qualification_date

router = APIRouter(tags=["holidays"])


def _dashboard(request: Request) -> DashboardService:
    return request.app.state.dashboard


@router.get("/next")
async def next_holiday(request: Request, on: Optional[date] = None) -> dict[str, Any]:
    """Next stat on or after ``on`` (defaults to today)."""
    ref = on or date.today()
    holiday = _dashboard(request).calendar.next_holiday(ref)
    if holiday is None:
        return {"holiday": None}
    return {
        "holiday": holiday.model_dump(mode="json"),
        "days_until": (holiday.date - ref).days,
        "window_label": (
            f"{format_qualification_date(holiday.qualification_start)} - "
            f"{format_qualification_date(holiday.qualification_end, include_year=True)}"
        ),
    }


@router.get("/window")
async def qualifying_window(request: Request, holiday_date: date) -> QualifyingWindow:
    return _dashboard(request).calendar.qualifying_window(holiday_date)


@router.get("/{year}")
async def holidays_for_year(request: Request, year: int) -> dict[str, Any]:
    resolved = _dashboard(request).calendar.resolve(year)
    return resolved.model_dump(mode="json")
