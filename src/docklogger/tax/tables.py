"""Compiled-in federal and BC tax rules, one entry per tax year.

Hardcoded constants rather than store-driven: brackets change once a year
and must not move within a year.
"""

from __future__ import annotations

from decimal import Decimal

from docklogger.core.exceptions import TaxYearNotFoundError
from docklogger.models.tax import ContributionRule, TaxBracket, TaxYearRules

_FEDERAL_BRACKETS_2024 = (
    TaxBracket(lower=Decimal("0"), upper=Decimal("55867"), rate=Decimal("0.15")),
    TaxBracket(lower=Decimal("55867"), upper=Decimal("111733"), rate=Decimal("0.205")),
    TaxBracket(lower=Decimal("111733"), upper=Decimal("173205"), rate=Decimal("0.26")),
    TaxBracket(lower=Decimal("173205"), upper=Decimal("246752"), rate=Decimal("0.29")),
    TaxBracket(lower=Decimal("246752"), upper=None, rate=Decimal("0.33")),
)

_BC_BRACKETS_2024 = (
    TaxBracket(lower=Decimal("0"), upper=Decimal("47937"), rate=Decimal("0.0506")),
    TaxBracket(lower=Decimal("47937"), upper=Decimal("95875"), rate=Decimal("0.077")),
    TaxBracket(lower=Decimal("95875"), upper=Decimal("110076"), rate=Decimal("0.105")),
    TaxBracket(lower=Decimal("110076"), upper=Decimal("133664"), rate=Decimal("0.1229")),
    TaxBracket(lower=Decimal("133664"), upper=Decimal("181232"), rate=Decimal("0.147")),
    TaxBracket(lower=Decimal("181232"), upper=None, rate=Decimal("0.205")),
)

TAX_RULES_2024 = TaxYearRules(
    year=2024,
    federal_brackets=_FEDERAL_BRACKETS_2024,
    provincial_brackets=_BC_BRACKETS_2024,
    federal_basic_personal_amount=Decimal("15705"),
    provincial_basic_personal_amount=Decimal("12580"),
    cpp=ContributionRule(
        rate=Decimal("0.0595"),
        basic_exemption=Decimal("3500"),
        earnings_ceiling=Decimal("68500"),  # YMPE
        contribution_ceiling=Decimal("3867.50"),
    ),
    ei=ContributionRule(
        rate=Decimal("0.0163"),
        earnings_ceiling=Decimal("63200"),  # max insurable earnings
        contribution_ceiling=Decimal("1030.16"),
    ),
)

TAX_YEARS: dict[int, TaxYearRules] = {
    2024: TAX_RULES_2024,
}


def get_tax_rules(year: int) -> TaxYearRules:
    try:
        return TAX_YEARS[year]
    except KeyError:
        raise TaxYearNotFoundError(year) from None
