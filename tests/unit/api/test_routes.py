"""Tests for the HTTP display adapter."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from docklogger.api.app import create_app
from docklogger.models.shift import ShiftEntry
from tests.fakes import MemoryEntryStore


@pytest.fixture
def client():
    entries = MemoryEntryStore([
        ShiftEntry(date=date(2026, 10, 14), shift_type="day", hours=Decimal("8"), earnings=Decimal("400")),
        ShiftEntry(date=date(2026, 10, 15), shift_type="day", hours=Decimal("8"), earnings=Decimal("400")),
    ])
    with TestClient(create_app(entries=entries)) as c:
        yield c


class TestHealth:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_ready(self, client):
        assert client.get("/ready").json() == {"status": "ready"}


class TestHolidays:
    def test_year(self, client):
        body = client.get("/holidays/2026").json()
        assert body["source"] == "curated"
        assert len(body["holidays"]) == 13
        assert body["holidays"][0]["date"] == "2026-01-01"

    def test_computed_year(self, client):
        assert client.get("/holidays/2031").json()["source"] == "computed"

    def test_next(self, client):
        body = client.get("/holidays/next", params={"on": "2026-10-18"}).json()
        assert body["holiday"]["name"] == "Remembrance Day"
        assert body["days_until"] == 24
        assert body["window_label"] == "Oct 13 - Nov 7, 2026"

    def test_window(self, client):
        body = client.get("/holidays/window", params={"holiday_date": "2026-01-01"}).json()
        assert body == {"start": "2025-11-30", "end": "2025-12-27"}

    def test_bad_date_is_422(self, client):
        resp = client.get("/holidays/window", params={"holiday_date": "2026-02-30"})
        assert resp.status_code == 422


class TestTax:
    def test_breakdown(self, client):
        body = client.get("/tax/breakdown", params={"income": "60000"}).json()
        assert Decimal(str(body["federal_tax"])) == Decimal("6644.25")
        assert Decimal(str(body["cpp"])) == Decimal("3361.75")

    def test_negative_income_rejected(self, client):
        assert client.get("/tax/breakdown", params={"income": "-1"}).status_code == 422

    def test_projection(self, client):
        resp = client.get("/tax/projection", params={
            "ytd_earnings": "5000", "days_worked": 10, "on": "2024-01-10",
        })
        assert resp.status_code == 200
        assert Decimal(str(resp.json()["gross_income"])) == Decimal("130000")

    def test_projection_without_work_is_404(self, client):
        resp = client.get("/tax/projection", params={
            "ytd_earnings": "0", "days_worked": 0, "on": "2024-01-10",
        })
        assert resp.status_code == 404


class TestStatus:
    def test_qualification(self, client):
        body = client.get("/status/qualification", params={"on": "2026-10-18", "day_rate": "50"}).json()
        assert body["days_worked"] == 2
        assert body["next_holiday"]["name"] == "Remembrance Day"

    def test_accrual(self, client):
        body = client.get("/status/accrual", params={"on": "2026-10-18"}).json()
        assert Decimal(str(body["current_hours"])) == Decimal("16")
        assert body["days_remaining"] == 74

    def test_dashboard(self, client):
        body = client.get("/status/dashboard", params={"on": "2026-10-18"}).json()
        assert body["ytd_work_days"] == 2
        assert body["period"]["label"] == "Jul - Dec 2026"
