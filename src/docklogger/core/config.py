"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic_settings import BaseSettings


class CalendarConfig(BaseSettings):
    """Stat holiday qualifying window shape."""

    model_config = {"env_prefix": "DOCKLOGGER_CALENDAR_"}

    qualifying_window_days: int = 28
    window_end_offset_days: int = 4  # window closes this many days before the stat


class AccrualConfig(BaseSettings):
    """Stat qualification and board-move accrual constants."""

    model_config = {"env_prefix": "DOCKLOGGER_ACCRUAL_"}

    target_hours: Decimal = Decimal("600")
    qualification_days_required: int = 15
    stat_pay_hours: Decimal = Decimal("8")
    standard_shift_hours: Decimal = Decimal("8")
    # On-track heuristic: remaining work days ~= remaining days * workdays_per_week / 7
    workdays_per_week: int = 5


class TaxConfig(BaseSettings):
    """Tax estimation settings."""

    model_config = {"env_prefix": "DOCKLOGGER_TAX_"}

    tax_year: int = 2024
    max_projected_work_days: Decimal = Decimal("260")
    days_in_year: Decimal = Decimal("365")


class DynamoDBConfig(BaseSettings):
    """DynamoDB record store configuration."""

    model_config = {"env_prefix": "DOCKLOGGER_DYNAMO_"}

    table_suffix: str = ""  # "-dev", "-uat", or "" for prod
    region: str = "ca-central-1"
    endpoint_url: str | None = None  # LocalStack override


class RedisConfig(BaseSettings):
    """Redis cache configuration."""

    model_config = {"env_prefix": "DOCKLOGGER_REDIS_"}

    enabled: bool = False
    host: str = "localhost"
    port: int = 6379
    db: int = 0
    holiday_cache_ttl: int = 3600


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "DOCKLOGGER_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    json_logs: bool = False

    calendar: CalendarConfig = CalendarConfig()
    accrual: AccrualConfig = AccrualConfig()
    tax: TaxConfig = TaxConfig()
    dynamodb: DynamoDBConfig = DynamoDBConfig()
    redis: RedisConfig = RedisConfig()
