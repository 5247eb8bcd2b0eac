"""Date parsing and display helpers shared by the calculation core."""

from __future__ import annotations

import re
from datetime import date, datetime

from docklogger.core.exceptions import InvalidDateError
from docklogger.core.types import DateLike

_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def coerce_date(value: DateLike) -> date:
    """Accept a ``date`` or an ISO ``YYYY-MM-DD`` string; reject anything else."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        if not _ISO_DATE.fullmatch(value):
            raise InvalidDateError(value)
        try:
            return date.fromisoformat(value)
        except ValueError as exc:
            raise InvalidDateError(value) from exc
    raise InvalidDateError(value)


def format_qualification_date(value: DateLike, include_year: bool = False) -> str:
    """Short display form: ``"Nov 30"`` or ``"Nov 30, 2025"``."""
    day = coerce_date(value)
    text = f"{day:%b} {day.day}"
    if include_year:
        text += f", {day.year}"
    return text
