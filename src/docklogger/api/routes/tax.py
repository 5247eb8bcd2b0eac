"""Tax estimate endpoints."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request

from docklogger.models.tax import TaxBreakdown

router = APIRouter(tags=["tax"])


@router.get("/breakdown")
async def breakdown(request: Request, income: Decimal = Query(ge=0)) -> TaxBreakdown:
    return request.app.state.dashboard.tax.tax_breakdown(income)


@router.get("/projection")
async def projection(
    request: Request,
    ytd_earnings: Decimal = Query(ge=0),
    days_worked: int = Query(ge=0),
    on: Optional[date] = None,
) -> TaxBreakdown:
    result = request.app.state.dashboard.tax.project_annual(
        ytd_earnings, days_worked, on or date.today(),
    )
    if result is None:
        raise HTTPException(status_code=404, detail="No days worked yet; nothing to project")
    return result
