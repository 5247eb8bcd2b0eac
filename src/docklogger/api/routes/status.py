"""Qualification, accrual and dashboard status endpoints."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Query, Request

from docklogger.models.accrual import AccrualStatus, DashboardSnapshot, QualificationStatus
from docklogger.models.profile import WorkerProfile

router = APIRouter(tags=["status"])


def _profile(day_rate: Decimal, target_hours: Decimal) -> WorkerProfile:
    return WorkerProfile(day_rate=day_rate, average_hours_target=target_hours)


@router.get("/qualification")
async def qualification(
    request: Request,
    on: Optional[date] = None,
    day_rate: Decimal = Query(default=Decimal("0"), ge=0),
) -> QualificationStatus:
    tracker = request.app.state.dashboard.tracker
    return tracker.qualification_status(on or date.today(), _profile(day_rate, Decimal("600")))


@router.get("/accrual")
async def accrual(
    request: Request,
    on: Optional[date] = None,
    target_hours: Decimal = Query(default=Decimal("600"), gt=0),
) -> AccrualStatus:
    tracker = request.app.state.dashboard.tracker
    return tracker.average_hours_status(on or date.today(), _profile(Decimal("0"), target_hours))


@router.get("/dashboard")
async def dashboard(
    request: Request,
    on: Optional[date] = None,
    day_rate: Decimal = Query(default=Decimal("0"), ge=0),
    target_hours: Decimal = Query(default=Decimal("600"), gt=0),
) -> DashboardSnapshot:
    return request.app.state.dashboard.snapshot(on or date.today(), _profile(day_rate, target_hours))
