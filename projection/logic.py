from __future__ import annotations

from dataclasses import astuple
import logging
import math
from typing import Sequence

from config.jurisdiction import JurisdictionConfig, default_jurisdiction
from errors import ConfigurationError, DomainError, InvalidInput
from mortgage.calculations import open_loan
from mortgage.costs import compute_upfront_costs
from mortgage.models import LoanSummary, ScenarioInputs

from .growth_model import YearState, advance_year, resolve_assumptions
from .models import (
    BUYING,
    RENTING,
    ComparisonResult,
    ComparisonSummary,
    Milestone,
    YearlyRecord,
)

logger = logging.getLogger(__name__)

DEFAULT_HORIZON_YEARS = 30
DEFAULT_SUMMARY_YEARS = (10, 20)


def _check_horizon(horizon_years: int, summary_years: Sequence[int]) -> None:
    if horizon_years < 1:
        raise ConfigurationError(f"horizon_years must be at least 1, got {horizon_years}")
    for year in summary_years:
        if year < 1:
            raise ConfigurationError(f"summary years are 1-based, got {year}")
    if summary_years and horizon_years < max(summary_years):
        raise ConfigurationError(
            f"horizon of {horizon_years} years is too short for summary year {max(summary_years)}"
        )


def _check_finite(record: YearlyRecord) -> None:
    for value in astuple(record):
        if isinstance(value, float) and not math.isfinite(value):
            raise DomainError(f"Projection produced a non-finite value in year {record.year}")


def _milestone(record: YearlyRecord) -> Milestone:
    return Milestone(
        year=record.year,
        advantage=record.advantage,
        advantage_amount=record.advantage_amount,
    )


def break_even_year(timeline: Sequence[YearlyRecord]) -> int | None:
    """First year in which buying comes out ahead, if any."""
    for record in timeline:
        if record.advantage == BUYING:
            return record.year
    return None


def compute_comparison(
    inputs: ScenarioInputs,
    horizon_years: int = DEFAULT_HORIZON_YEARS,
    *,
    config: JurisdictionConfig | None = None,
    summary_years: Sequence[int] = DEFAULT_SUMMARY_YEARS,
    charge_repayments_after_payoff: bool = True,
) -> ComparisonResult:
    """
    Project buying against renting-and-investing, one year at a time.

    With charge_repayments_after_payoff (the default) the full annual
    repayment keeps counting as an ownership cost after the loan is repaid.
    Pass False to stop charging it from the year after payoff.
    """
    inputs.validate()
    _check_horizon(horizon_years, summary_years)
    cfg = config or default_jurisdiction()
    if inputs.lvr > cfg.loan.lvr_max:
        raise InvalidInput(
            f"LVR {inputs.lvr:.1%} exceeds the {cfg.loan.lvr_max:.0%} maximum lenders will finance"
        )

    assumptions = resolve_assumptions(inputs, cfg)
    upfront = compute_upfront_costs(inputs, cfg)
    loan = open_loan(inputs.loan_amount, inputs.annual_interest_rate, inputs.loan_term_years)

    annual_repayment = loan.monthly_repayment * 12
    total_repaid = loan.monthly_repayment * loan.term_months
    loan_summary = LoanSummary(
        loan_amount=inputs.loan_amount,
        lvr=inputs.lvr,
        monthly_repayment=loan.monthly_repayment,
        total_interest=total_repaid - inputs.loan_amount,
    )

    logger.debug(
        "Projecting %s years: price=%.0f deposit=%.0f growth=%.4f alt_return=%.4f",
        horizon_years,
        inputs.property_price,
        inputs.deposit,
        assumptions.property_growth_rate,
        assumptions.alternative_return,
    )

    state = YearState(
        property_value=inputs.property_price,
        loan=loan,
        weekly_rent=inputs.weekly_rent,
        investment_balance=inputs.deposit,
    )
    cumulative_ownership_cost = upfront.total
    cumulative_rent_paid = 0.0
    timeline: list[YearlyRecord] = []

    for year in range(1, horizon_years + 1):
        if charge_repayments_after_payoff or not state.loan.is_repaid:
            repayment_charge = annual_repayment
        else:
            repayment_charge = 0.0

        outcome = advance_year(state, assumptions, repayment_charge)
        state = outcome.state

        cumulative_ownership_cost += outcome.ownership_cost + repayment_charge
        cumulative_rent_paid += outcome.rent_paid

        net_buying = outcome.equity
        net_renting = state.investment_balance
        advantage = BUYING if net_buying > net_renting else RENTING

        record = YearlyRecord(
            year=year,
            property_value=state.property_value,
            loan_balance=state.loan.balance,
            equity=outcome.equity,
            interest_paid=outcome.interest_paid,
            yearly_ownership_cost=outcome.ownership_cost,
            cumulative_ownership_cost=cumulative_ownership_cost,
            yearly_rent_paid=outcome.rent_paid,
            cumulative_rent_paid=cumulative_rent_paid,
            investment_balance=state.investment_balance,
            net_position_buying=net_buying,
            net_position_renting=net_renting,
            advantage=advantage,
            advantage_amount=abs(net_buying - net_renting),
        )
        _check_finite(record)
        timeline.append(record)

    summary = ComparisonSummary(
        break_even_year=break_even_year(timeline),
        milestones=tuple(_milestone(timeline[year - 1]) for year in summary_years),
        final=_milestone(timeline[-1]),
    )

    logger.debug("Projection complete: break-even year %s", summary.break_even_year)

    return ComparisonResult(
        upfront_costs=upfront,
        loan_summary=loan_summary,
        yearly_timeline=tuple(timeline),
        summary=summary,
    )
