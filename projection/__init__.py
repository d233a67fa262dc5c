"""Year-by-year rent vs buy projection."""

from .logic import break_even_year, compute_comparison
from .models import BUYING, RENTING, ComparisonResult, ComparisonSummary, Milestone, YearlyRecord

__all__ = [
    "BUYING",
    "RENTING",
    "ComparisonResult",
    "ComparisonSummary",
    "Milestone",
    "YearlyRecord",
    "break_even_year",
    "compute_comparison",
]
