import pytest

from growth.models import GrowthSeries
from mortgage.models import ScenarioInputs


def quarter_label(index: int, start_year: int = 2000) -> str:
    return f"{start_year + index // 4}-Q{index % 4 + 1}"


def constant_growth_series(points: int, quarterly_rate: float, start_value: float = 400.0) -> GrowthSeries:
    return GrowthSeries.from_points(
        (quarter_label(i), start_value * (1 + quarterly_rate) ** i) for i in range(points)
    )


@pytest.fixture
def base_inputs() -> ScenarioInputs:
    # $600k purchase, 20% deposit, 6.5% over 30 years, $500/week rent
    return ScenarioInputs(
        property_price=600_000,
        deposit=120_000,
        is_first_home_buyer=False,
        use_government_scheme=False,
        annual_income=120_000,
        annual_interest_rate=0.065,
        loan_term_years=30,
        weekly_rent=500,
    )


@pytest.fixture
def make_series():
    return constant_growth_series
