"""Loan repayment, amortization and purchase costs."""

from .calculations import amortization_schedule, amortize_year, monthly_repayment, open_loan
from .costs import compute_mortgage_insurance, compute_transfer_duty, compute_upfront_costs
from .models import LoanState, LoanSummary, ScenarioInputs, UpfrontCosts

__all__ = [
    "LoanState",
    "LoanSummary",
    "ScenarioInputs",
    "UpfrontCosts",
    "amortization_schedule",
    "amortize_year",
    "compute_mortgage_insurance",
    "compute_transfer_duty",
    "compute_upfront_costs",
    "monthly_repayment",
    "open_loan",
]
