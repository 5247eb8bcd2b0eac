"""Logged shifts and date-range aggregates over them."""

from __future__ import annotations

import datetime
from decimal import Decimal
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, Field


class ShiftCategory(StrEnum):
    DAY = "day"
    AFTERNOON = "afternoon"
    GRAVEYARD = "graveyard"


class JobType(StrEnum):
    RATED = "rated"
    HALL = "hall"


class ShiftDefinition(BaseModel):
    """Hall shift times and the hours a standard shift pays."""

    model_config = {"frozen": True}

    name: str
    start: str
    end: str
    default_hours: Decimal


SHIFTS: dict[ShiftCategory, ShiftDefinition] = {
    ShiftCategory.DAY: ShiftDefinition(
        name="Day", start="8:00am", end="4:30pm", default_hours=Decimal("8"),
    ),
    ShiftCategory.AFTERNOON: ShiftDefinition(
        name="Afternoon", start="4:30pm", end="1:00am", default_hours=Decimal("8"),
    ),
    ShiftCategory.GRAVEYARD: ShiftDefinition(
        name="Graveyard", start="1:00am", end="8:00am", default_hours=Decimal("6.5"),
    ),
}


class ShiftEntry(BaseModel):
    """One logged shift, as owned by the entry store."""

    date: datetime.date
    shift_type: ShiftCategory
    job_type: JobType = JobType.HALL
    hours: Decimal = Field(ge=0)
    earnings: Optional[Decimal] = None
    rated_job_id: Optional[int] = None
    hall_job_name: str = ""
    location: str = ""
    ship: str = ""
    notes: str = ""

    model_config = {"str_strip_whitespace": True}


class RangeTotals(BaseModel):
    """Aggregates over entries dated within an inclusive range."""

    model_config = {"frozen": True}

    entry_count: int = 0
    work_days: int = 0  # distinct dates with at least one entry
    total_hours: Decimal = Decimal("0")
    total_earnings: Decimal = Decimal("0")
