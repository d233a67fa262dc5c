"""Historical price growth: CAGR scenarios, ABS data and suburb lookups."""

from .logic import blend_scenarios, cagr, compute_growth_scenarios, summarize_region
from .models import GrowthObservation, GrowthScenarios, GrowthSeries, RegionalGrowth

__all__ = [
    "GrowthObservation",
    "GrowthScenarios",
    "GrowthSeries",
    "RegionalGrowth",
    "blend_scenarios",
    "cagr",
    "compute_growth_scenarios",
    "summarize_region",
]
