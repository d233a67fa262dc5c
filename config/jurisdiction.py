"""Jurisdiction tables (duty and tax brackets, cost defaults, scheme rules)."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any
import json

from errors import ConfigurationError, DomainError
from tax.brackets import Bracket, validate_brackets


DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_JURISDICTION_PATH = DATA_DIR / "qld_2024_25.json"


@dataclass(frozen=True)
class PropertyCostDefaults:
    council_rates: float
    water_rates: float
    insurance: float
    maintenance_rate: float  # fraction of property value per year


@dataclass(frozen=True)
class LoanDefaults:
    lvr_max: float
    lvr_no_lmi: float
    lmi_rate: float
    interest_rate: float
    loan_term_years: int


@dataclass(frozen=True)
class DepositScheme:
    enabled: bool
    minimum_deposit: float  # share of price
    property_cap: float


@dataclass(frozen=True)
class InvestmentAssumptions:
    property_growth_rate: float
    rent_growth_rate: float
    alternative_investment_return: float


@dataclass(frozen=True)
class TransactionCosts:
    buyer_legal_fees: float
    building_inspection: float
    pest_inspection: float

    @property
    def inspections(self) -> float:
        return self.building_inspection + self.pest_inspection


@dataclass(frozen=True)
class JurisdictionConfig:
    name: str
    transfer_duty_brackets: tuple[Bracket, ...]
    first_home_concession_cap: float
    income_tax_brackets: tuple[Bracket, ...]
    flat_levy_rate: float
    property_costs: PropertyCostDefaults
    loan: LoanDefaults
    deposit_scheme: DepositScheme
    investment: InvestmentAssumptions
    transaction_costs: TransactionCosts
    dwelling_mix: tuple[float, float] = (0.6, 0.4)  # houses, units

    def __post_init__(self) -> None:
        validate_brackets(self.transfer_duty_brackets, "transfer duty brackets")
        validate_brackets(self.income_tax_brackets, "income tax brackets")
        houses, units = self.dwelling_mix
        if houses < 0 or units < 0 or abs(houses + units - 1.0) > 1e-9:
            raise DomainError(f"dwelling mix weights must be non-negative and sum to 1, got {self.dwelling_mix}")


def _brackets(entries: list[dict]) -> tuple[Bracket, ...]:
    return tuple(
        Bracket(
            threshold=float(entry["threshold"]),
            rate=float(entry["rate"]),
            base=float(entry.get("base", 0.0)),
        )
        for entry in entries
    )


def jurisdiction_from_dict(data: dict[str, Any]) -> JurisdictionConfig:
    try:
        duty = data["transfer_duty"]
        income_tax = data["income_tax"]
        costs = data["property_costs"]
        loan = data["loan"]
        scheme = data["deposit_scheme"]
        investment = data["investment"]
        transaction = data["transaction_costs"]
        mix = data.get("dwelling_mix", {"houses": 0.6, "units": 0.4})
        return JurisdictionConfig(
            name=data.get("metadata", {}).get("name", "unnamed"),
            transfer_duty_brackets=_brackets(duty["brackets"]),
            first_home_concession_cap=float(duty["first_home_concession_cap"]),
            income_tax_brackets=_brackets(income_tax["brackets"]),
            flat_levy_rate=float(income_tax.get("flat_levy_rate", 0.0)),
            property_costs=PropertyCostDefaults(
                council_rates=float(costs["council_rates"]),
                water_rates=float(costs["water_rates"]),
                insurance=float(costs["insurance"]),
                maintenance_rate=float(costs["maintenance_rate"]),
            ),
            loan=LoanDefaults(
                lvr_max=float(loan["lvr_max"]),
                lvr_no_lmi=float(loan["lvr_no_lmi"]),
                lmi_rate=float(loan["lmi_rate"]),
                interest_rate=float(loan["interest_rate"]),
                loan_term_years=int(loan["loan_term_years"]),
            ),
            deposit_scheme=DepositScheme(
                enabled=bool(scheme["enabled"]),
                minimum_deposit=float(scheme["minimum_deposit"]),
                property_cap=float(scheme["property_cap"]),
            ),
            investment=InvestmentAssumptions(
                property_growth_rate=float(investment["property_growth_rate"]),
                rent_growth_rate=float(investment["rent_growth_rate"]),
                alternative_investment_return=float(investment["alternative_investment_return"]),
            ),
            transaction_costs=TransactionCosts(
                buyer_legal_fees=float(transaction["buyer_legal_fees"]),
                building_inspection=float(transaction["building_inspection"]),
                pest_inspection=float(transaction["pest_inspection"]),
            ),
            dwelling_mix=(float(mix["houses"]), float(mix["units"])),
        )
    except (KeyError, TypeError, ValueError) as exc:
        if isinstance(exc, DomainError):
            raise
        raise ConfigurationError(f"Malformed jurisdiction data: {exc!r}") from exc


def load_jurisdiction(path: Path | str) -> JurisdictionConfig:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Jurisdiction table not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Invalid JSON in {path}: {exc}") from exc
    return jurisdiction_from_dict(data)


@lru_cache(maxsize=1)
def default_jurisdiction() -> JurisdictionConfig:
    """Bundled QLD 2024-25 tables."""
    return load_jurisdiction(DEFAULT_JURISDICTION_PATH)
