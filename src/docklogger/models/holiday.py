"""Stat holiday records and their qualifying windows."""

from __future__ import annotations

import datetime
from enum import StrEnum
from typing import Any, Optional

from pydantic import BaseModel, model_validator


class HolidaySource(StrEnum):
    OVERRIDE = "override"  # persisted per-year table
    CURATED = "curated"  # researched literal table shipped with the package
    COMPUTED = "computed"  # procedural fallback with default windows


class QualifyingWindow(BaseModel):
    """Inclusive date span in which worked days count toward a stat."""

    model_config = {"frozen": True}

    start: datetime.date
    end: datetime.date

    @model_validator(mode="after")
    def _ordered(self) -> QualifyingWindow:
        if self.end < self.start:
            raise ValueError(f"window end {self.end} precedes start {self.start}")
        return self

    @property
    def length_days(self) -> int:
        return (self.end - self.start).days + 1

    def contains(self, day: datetime.date) -> bool:
        return self.start <= day <= self.end


class HolidayRecord(BaseModel):
    """A statutory holiday with the legally relevant qualification period."""

    model_config = {"frozen": True}

    name: str
    date: datetime.date
    qualification_start: datetime.date
    qualification_end: datetime.date
    pay_date: Optional[datetime.date] = None  # When stat pay lands, if known

    @property
    def window(self) -> QualifyingWindow:
        return QualifyingWindow(start=self.qualification_start, end=self.qualification_end)

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> HolidayRecord:
        """Build from a persisted row (snake_case keys, ISO date strings)."""
        return cls(
            name=item["name"],
            date=item["date"],
            qualification_start=item["qualification_start"],
            qualification_end=item["qualification_end"],
            pay_date=item.get("pay_date") or None,
        )

    def to_item(self) -> dict[str, Any]:
        item: dict[str, Any] = {
            "name": self.name,
            "date": self.date.isoformat(),
            "qualification_start": self.qualification_start.isoformat(),
            "qualification_end": self.qualification_end.isoformat(),
        }
        if self.pay_date is not None:
            item["pay_date"] = self.pay_date.isoformat()
        return item


class ResolvedHolidays(BaseModel):
    """Holidays for one year together with the source that produced them."""

    model_config = {"frozen": True}

    year: int
    source: HolidaySource
    holidays: tuple[HolidayRecord, ...]
