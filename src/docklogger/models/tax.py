"""Tax year rules (brackets, contribution schemes) and breakdown results."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, model_validator


class TaxBracket(BaseModel):
    """One marginal bracket. ``upper`` is exclusive; None means no cap."""

    model_config = {"frozen": True}

    lower: Decimal
    upper: Optional[Decimal] = None
    rate: Decimal

    @property
    def width(self) -> Optional[Decimal]:
        return None if self.upper is None else self.upper - self.lower


class ContributionRule(BaseModel):
    """Flat-rate social insurance scheme capped at a yearly maximum (CPP, EI)."""

    model_config = {"frozen": True}

    rate: Decimal
    basic_exemption: Decimal = Decimal("0")  # EI has none
    earnings_ceiling: Decimal
    contribution_ceiling: Decimal


def _check_brackets(label: str, brackets: tuple[TaxBracket, ...]) -> None:
    if not brackets:
        raise ValueError(f"{label}: at least one bracket is required")
    if brackets[0].lower != 0:
        raise ValueError(f"{label}: first bracket must start at 0")
    for prev, nxt in zip(brackets, brackets[1:]):
        if prev.upper is None:
            raise ValueError(f"{label}: only the last bracket may be unbounded")
        if prev.upper != nxt.lower:
            raise ValueError(f"{label}: gap or overlap at {prev.upper}")
        if nxt.rate < prev.rate:
            raise ValueError(f"{label}: rates must not decrease ({prev.rate} -> {nxt.rate})")
    if brackets[-1].upper is not None:
        raise ValueError(f"{label}: last bracket must be unbounded")


class TaxYearRules(BaseModel):
    """Everything needed to estimate one tax year's deductions."""

    model_config = {"frozen": True}

    year: int
    federal_brackets: tuple[TaxBracket, ...]
    provincial_brackets: tuple[TaxBracket, ...]
    federal_basic_personal_amount: Decimal
    provincial_basic_personal_amount: Decimal
    cpp: ContributionRule
    ei: ContributionRule

    @model_validator(mode="after")
    def _brackets_cover_income(self) -> TaxYearRules:
        _check_brackets("federal", self.federal_brackets)
        _check_brackets("provincial", self.provincial_brackets)
        return self


class TaxBreakdown(BaseModel):
    model_config = {"frozen": True}

    gross_income: Decimal
    federal_tax: Decimal
    provincial_tax: Decimal
    cpp: Decimal
    ei: Decimal
    total_deductions: Decimal
    net_income: Decimal
    effective_tax_rate: Decimal  # percent of gross
