"""Federal + BC tax and CPP/EI estimation."""

from __future__ import annotations

from docklogger.tax.engine import TaxEngine, capped_contribution, progressive_tax
from docklogger.tax.tables import TAX_YEARS, get_tax_rules

__all__ = ["TAX_YEARS", "TaxEngine", "capped_contribution", "get_tax_rules", "progressive_tax"]
