"""TaxEngine: bracket tax, capped CPP/EI, and year-end projection."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Sequence

from docklogger.core.config import TaxConfig
from docklogger.core.decimals import ZERO, safe_div, to_decimal
from docklogger.core.types import DateLike
from docklogger.models.tax import ContributionRule, TaxBracket, TaxBreakdown, TaxYearRules
from docklogger.stat_holidays.dates import coerce_date
from docklogger.tax.tables import get_tax_rules


def progressive_tax(income: Decimal, brackets: Sequence[TaxBracket]) -> Decimal:
    """Walk the brackets in order, taxing each slice at its marginal rate."""
    tax = ZERO
    remaining = to_decimal(income)
    for bracket in brackets:
        if remaining <= 0:
            break
        width = bracket.width
        taxable = remaining if width is None else min(remaining, width)
        tax += taxable * bracket.rate
        remaining -= taxable
    return tax


def capped_contribution(income: Decimal, rule: ContributionRule) -> Decimal:
    """Flat-rate contribution on earnings above the exemption, up to the ceilings."""
    earnings = min(to_decimal(income), rule.earnings_ceiling) - rule.basic_exemption
    if earnings <= 0:
        return ZERO
    return min(earnings * rule.rate, rule.contribution_ceiling)


class TaxEngine:
    """Federal + BC income tax and CPP/EI for one tax year's rules."""

    def __init__(self, rules: TaxYearRules | None = None, config: TaxConfig | None = None) -> None:
        self._config = config or TaxConfig()
        self._rules = rules or get_tax_rules(self._config.tax_year)

    @property
    def rules(self) -> TaxYearRules:
        return self._rules

    def federal_tax(self, annual_income: Decimal) -> Decimal:
        taxable = max(ZERO, to_decimal(annual_income) - self._rules.federal_basic_personal_amount)
        return progressive_tax(taxable, self._rules.federal_brackets)

    def provincial_tax(self, annual_income: Decimal) -> Decimal:
        taxable = max(ZERO, to_decimal(annual_income) - self._rules.provincial_basic_personal_amount)
        return progressive_tax(taxable, self._rules.provincial_brackets)

    def cpp(self, annual_income: Decimal) -> Decimal:
        return capped_contribution(annual_income, self._rules.cpp)

    def ei(self, annual_income: Decimal) -> Decimal:
        return capped_contribution(annual_income, self._rules.ei)

    def tax_breakdown(self, annual_income: Decimal) -> TaxBreakdown:
        gross = to_decimal(annual_income)
        federal = self.federal_tax(gross)
        provincial = self.provincial_tax(gross)
        cpp = self.cpp(gross)
        ei = self.ei(gross)
        total = federal + provincial + cpp + ei
        return TaxBreakdown(
            gross_income=gross,
            federal_tax=federal,
            provincial_tax=provincial,
            cpp=cpp,
            ei=ei,
            total_deductions=total,
            net_income=gross - total,
            effective_tax_rate=safe_div(total, gross) * Decimal(100),
        )

    def project_annual_income(
        self, ytd_earnings: Decimal, days_worked_ytd: int, reference_date: DateLike,
    ) -> Decimal | None:
        """Annualize year-to-date earnings; None when no days were worked.

        Projected work days scale the days worked so far to a full year and
        are capped at a plausible maximum (260).
        """
        if days_worked_ytd <= 0:
            return None
        ref = coerce_date(reference_date)
        days_elapsed = (ref - date(ref.year, 1, 1)).days + 1
        average_daily = to_decimal(ytd_earnings) / Decimal(days_worked_ytd)
        projected_days = min(
            Decimal(days_worked_ytd) * self._config.days_in_year / Decimal(days_elapsed),
            self._config.max_projected_work_days,
        )
        return average_daily * projected_days

    def project_annual(
        self, ytd_earnings: Decimal, days_worked_ytd: int, reference_date: DateLike,
    ) -> TaxBreakdown | None:
        projected = self.project_annual_income(ytd_earnings, days_worked_ytd, reference_date)
        if projected is None:
            return None
        return self.tax_breakdown(projected)
