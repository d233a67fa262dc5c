from __future__ import annotations

from config.jurisdiction import JurisdictionConfig, default_jurisdiction

from .brackets import marginal_rate


def compute_marginal_tax_rate(income: float, config: JurisdictionConfig | None = None) -> float:
    """
    Top marginal income tax rate for income, plus the flat levy.

    Not consumed by the projection; exposed for callers that model deductions.
    """
    cfg = config or default_jurisdiction()
    return marginal_rate(cfg.income_tax_brackets, income) + cfg.flat_levy_rate
