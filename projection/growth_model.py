"""Per-year ownership cost, rent and alternative-investment evolution."""

from __future__ import annotations

from dataclasses import dataclass

from config.jurisdiction import JurisdictionConfig
from mortgage.calculations import amortize_year
from mortgage.models import LoanState, ScenarioInputs

WEEKS_PER_YEAR = 52


@dataclass(frozen=True)
class CostAssumptions:
    council_rates: float
    water_rates: float
    insurance: float
    maintenance_rate: float
    property_growth_rate: float
    rent_growth_rate: float
    alternative_return: float

    @property
    def fixed_costs(self) -> float:
        return self.council_rates + self.water_rates + self.insurance


def _pick(override: float | None, default: float) -> float:
    return default if override is None else override


def resolve_assumptions(inputs: ScenarioInputs, config: JurisdictionConfig) -> CostAssumptions:
    costs = config.property_costs
    investment = config.investment
    return CostAssumptions(
        council_rates=_pick(inputs.council_rates, costs.council_rates),
        water_rates=_pick(inputs.water_rates, costs.water_rates),
        insurance=_pick(inputs.insurance, costs.insurance),
        maintenance_rate=_pick(inputs.maintenance_rate, costs.maintenance_rate),
        property_growth_rate=_pick(inputs.property_growth_rate, investment.property_growth_rate),
        rent_growth_rate=_pick(inputs.rent_growth_rate, investment.rent_growth_rate),
        alternative_return=_pick(inputs.alternative_return, investment.alternative_investment_return),
    )


@dataclass(frozen=True)
class YearState:
    property_value: float
    loan: LoanState
    weekly_rent: float
    investment_balance: float


@dataclass(frozen=True)
class YearOutcome:
    state: YearState
    equity: float
    interest_paid: float
    ownership_cost: float
    rent_paid: float
    savings: float


def advance_year(
    state: YearState,
    assumptions: CostAssumptions,
    repayment_charge: float,
) -> YearOutcome:
    """
    Step one year forward.

    Order matters: the property grows first, the loan amortizes from its
    pre-growth balance, maintenance is charged on the grown value, and rent
    is charged at this year's rate before the rate itself grows. The
    investment balance has no floor and may go negative.
    """
    property_value = state.property_value * (1 + assumptions.property_growth_rate)

    loan, interest_paid = amortize_year(state.loan)
    equity = property_value - loan.balance

    maintenance = property_value * assumptions.maintenance_rate
    ownership_cost = assumptions.fixed_costs + maintenance

    rent_paid = state.weekly_rent * WEEKS_PER_YEAR
    next_weekly_rent = state.weekly_rent * (1 + assumptions.rent_growth_rate)

    savings = repayment_charge + ownership_cost - rent_paid
    investment_balance = state.investment_balance * (1 + assumptions.alternative_return) + savings

    return YearOutcome(
        state=YearState(
            property_value=property_value,
            loan=loan,
            weekly_rent=next_weekly_rent,
            investment_balance=investment_balance,
        ),
        equity=equity,
        interest_paid=interest_paid,
        ownership_cost=ownership_cost,
        rent_paid=rent_paid,
        savings=savings,
    )
