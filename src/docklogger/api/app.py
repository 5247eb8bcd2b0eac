"""FastAPI application with lifespan and router mounting.

A thin display adapter: it reads the engines' value types and serves them as
JSON. No calculation happens here.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from docklogger.api.routes import health, holidays, status, tax
from docklogger.core.config import AppSettings
from docklogger.core.exceptions import InvalidDateError, TaxYearNotFoundError
from docklogger.core.logging_config import get_logger, setup_logging
from docklogger.core.protocols import IEntryStore, IHolidayStore
from docklogger.persistence import create_persistence
from docklogger.services.dashboard import DashboardService

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize and tear down application resources."""
    settings: AppSettings = app.state.settings
    setup_logging(settings.log_level, settings.json_logs)
    if getattr(app.state, "dashboard", None) is None:
        record_store, _cache = create_persistence(settings)
        app.state.dashboard = DashboardService.from_settings(
            settings, entries=record_store, holidays=record_store,
        )
    logger.info("app_started", environment=settings.environment)
    yield


def create_app(
    settings: AppSettings | None = None,
    *,
    entries: IEntryStore | None = None,
    holidays_store: IHolidayStore | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Passing ``entries`` skips DynamoDB wiring (used by tests and local runs).
    """
    settings = settings or AppSettings()
    app = FastAPI(
        title="DockLogger",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.dashboard = None
    if entries is not None:
        app.state.dashboard = DashboardService.from_settings(
            settings, entries=entries, holidays=holidays_store,
        )

    @app.exception_handler(InvalidDateError)
    async def _invalid_date(request: Request, exc: InvalidDateError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(TaxYearNotFoundError)
    async def _unknown_tax_year(request: Request, exc: TaxYearNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    app.include_router(health.router)
    app.include_router(holidays.router, prefix="/holidays")
    app.include_router(tax.router, prefix="/tax")
    app.include_router(status.router, prefix="/status")
    return app
