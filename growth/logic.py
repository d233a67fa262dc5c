"""Compound annual growth rates from quarterly median price series."""

from __future__ import annotations

from datetime import datetime, timezone
import math

from errors import DomainError, InsufficientData

from .models import GrowthScenarios, GrowthSeries, RegionalGrowth

QUARTERS_PER_YEAR = 4
MIN_SCENARIO_POINTS = 20  # five years of quarters
SCENARIO_WINDOWS = (5, 10, 15)
DEFAULT_DWELLING_WEIGHTS = (0.6, 0.4)  # houses, units


def cagr(series: GrowthSeries, years: int) -> float:
    """
    Trailing CAGR over the last `years` years, or over the whole series when
    it is shorter than that. The exponent uses the span actually covered.
    """
    if years < 1:
        raise DomainError(f"CAGR window must be at least one year, got {years}")
    if len(series) < 2:
        raise InsufficientData("At least two observations are needed to compute a growth rate")

    values = series.values
    latest = values[-1]
    quarters_back = min(years * QUARTERS_PER_YEAR, len(values) - 1)
    base = values[len(values) - 1 - quarters_back]
    if not math.isfinite(latest) or latest < 0:
        raise DomainError(f"Latest value {latest} at {series.latest_period} must be finite and non-negative")
    if not math.isfinite(base) or base <= 0:
        raise DomainError(
            f"Base value {base} at {series.observations[len(values) - 1 - quarters_back].period} "
            "must be positive"
        )

    elapsed_years = quarters_back / QUARTERS_PER_YEAR
    return (latest / base) ** (1 / elapsed_years) - 1


def compute_growth_scenarios(series: GrowthSeries) -> GrowthScenarios:
    if len(series) < MIN_SCENARIO_POINTS:
        raise InsufficientData(
            f"Insufficient history: {len(series)} quarters, "
            f"at least {MIN_SCENARIO_POINTS} (5 years) required"
        )
    five, ten, fifteen = (cagr(series, years) for years in SCENARIO_WINDOWS)
    return GrowthScenarios(five_year=five, ten_year=ten, fifteen_year=fifteen)


def blend_scenarios(
    houses: GrowthScenarios,
    units: GrowthScenarios,
    weights: tuple[float, float] = DEFAULT_DWELLING_WEIGHTS,
) -> GrowthScenarios:
    """Fixed-weight mix of house and unit scenarios."""
    house_weight, unit_weight = weights
    if house_weight < 0 or unit_weight < 0 or abs(house_weight + unit_weight - 1.0) > 1e-9:
        raise DomainError(f"Dwelling weights must be non-negative and sum to 1, got {weights}")
    return GrowthScenarios(
        five_year=houses.five_year * house_weight + units.five_year * unit_weight,
        ten_year=houses.ten_year * house_weight + units.ten_year * unit_weight,
        fifteen_year=houses.fifteen_year * house_weight + units.fifteen_year * unit_weight,
    )


def summarize_region(
    region: str,
    houses: GrowthSeries,
    units: GrowthSeries,
    weights: tuple[float, float] = DEFAULT_DWELLING_WEIGHTS,
) -> RegionalGrowth:
    house_scenarios = compute_growth_scenarios(houses)
    unit_scenarios = compute_growth_scenarios(units)
    return RegionalGrowth(
        region=region,
        houses=house_scenarios,
        units=unit_scenarios,
        all_residential=blend_scenarios(house_scenarios, unit_scenarios, weights),
        house_series=houses,
        unit_series=units,
        last_updated=datetime.now(timezone.utc).isoformat(),
        weights=weights,
    )
