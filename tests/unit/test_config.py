"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from decimal import Decimal

from docklogger.core.config import AccrualConfig, AppSettings, CalendarConfig, TaxConfig


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.redis.enabled is False
    assert settings.dynamodb.region == "ca-central-1"


def test_calendar_config_defaults():
    config = CalendarConfig()
    assert config.qualifying_window_days == 28
    assert config.window_end_offset_days == 4


def test_accrual_config_defaults():
    config = AccrualConfig()
    assert config.target_hours == Decimal("600")
    assert config.qualification_days_required == 15
    assert config.stat_pay_hours == Decimal("8")
    assert config.workdays_per_week == 5


def test_tax_config_defaults():
    config = TaxConfig()
    assert config.tax_year == 2024
    assert config.max_projected_work_days == Decimal("260")


def test_env_override(monkeypatch):
    monkeypatch.setenv("DOCKLOGGER_ACCRUAL_TARGET_HOURS", "650")
    monkeypatch.setenv("DOCKLOGGER_CALENDAR_QUALIFYING_WINDOW_DAYS", "30")
    assert AccrualConfig().target_hours == Decimal("650")
    assert CalendarConfig().qualifying_window_days == 30
