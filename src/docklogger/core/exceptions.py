"""DockLogger exception hierarchy."""

from __future__ import annotations


class DockLoggerError(Exception):
    """Base exception for all DockLogger errors."""


class InvalidDateError(DockLoggerError, ValueError):
    """A date argument is not a valid ISO calendar date."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid date {value!r}: expected YYYY-MM-DD")


class TaxYearNotFoundError(DockLoggerError):
    """No compiled-in tax rules for the requested year."""

    def __init__(self, year: int) -> None:
        self.year = year
        super().__init__(f"No tax rules for tax year {year}")


class DuplicatePeriodSummaryError(DockLoggerError):
    """A summary for this period already exists."""

    def __init__(self, period_start: str, period_end: str) -> None:
        self.period_start = period_start
        self.period_end = period_end
        super().__init__(f"Period summary already exists for {period_start}..{period_end}")


class CacheError(DockLoggerError):
    """Redis cache operation failed."""


class RecordStoreError(DockLoggerError):
    """Persisted record store (DynamoDB) call failed."""
