"""Worker profile fields the calculations read."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel

from docklogger.models.shift import ShiftCategory


class WorkerProfile(BaseModel):
    """Pay rates and board-move target for the logged-in longshore worker."""

    last_name: str = ""
    first_name: str = ""
    man_number: str = ""
    current_board: str = ""
    day_rate: Decimal = Decimal("0")
    afternoon_rate: Decimal = Decimal("0")
    graveyard_rate: Decimal = Decimal("0")
    average_hours_target: Decimal = Decimal("600")
    career_hours: Decimal = Decimal("0")

    def rate_for(self, shift: ShiftCategory) -> Decimal:
        """Hourly rate for a shift category."""
        return {
            ShiftCategory.DAY: self.day_rate,
            ShiftCategory.AFTERNOON: self.afternoon_rate,
            ShiftCategory.GRAVEYARD: self.graveyard_rate,
        }[shift]
