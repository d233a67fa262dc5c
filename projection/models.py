from __future__ import annotations

from dataclasses import asdict, dataclass

import pandas as pd

from mortgage.models import LoanSummary, UpfrontCosts

BUYING = "buying"
RENTING = "renting"


@dataclass(frozen=True)
class YearlyRecord:
    year: int

    # Buying
    property_value: float
    loan_balance: float
    equity: float
    interest_paid: float
    yearly_ownership_cost: float
    cumulative_ownership_cost: float

    # Renting
    yearly_rent_paid: float
    cumulative_rent_paid: float
    investment_balance: float  # deposit invested instead, may be negative

    # Comparison
    net_position_buying: float
    net_position_renting: float
    advantage: str
    advantage_amount: float


@dataclass(frozen=True)
class Milestone:
    year: int
    advantage: str
    advantage_amount: float


@dataclass(frozen=True)
class ComparisonSummary:
    break_even_year: int | None
    milestones: tuple[Milestone, ...]
    final: Milestone

    def at(self, year: int) -> Milestone:
        for milestone in self.milestones:
            if milestone.year == year:
                return milestone
        raise KeyError(f"No milestone recorded for year {year}")


@dataclass(frozen=True)
class ComparisonResult:
    upfront_costs: UpfrontCosts
    loan_summary: LoanSummary
    yearly_timeline: tuple[YearlyRecord, ...]
    summary: ComparisonSummary

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame([asdict(record) for record in self.yearly_timeline])
