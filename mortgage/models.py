from __future__ import annotations

from dataclasses import dataclass, fields
import math

from errors import InvalidInput


@dataclass(frozen=True)
class ScenarioInputs:
    property_price: float
    deposit: float
    is_first_home_buyer: bool
    use_government_scheme: bool
    annual_income: float
    annual_interest_rate: float  # decimal, 0.065 == 6.5%
    loan_term_years: int
    weekly_rent: float

    # Optional overrides; None falls back to the jurisdiction defaults
    council_rates: float | None = None
    water_rates: float | None = None
    insurance: float | None = None
    maintenance_rate: float | None = None
    property_growth_rate: float | None = None
    rent_growth_rate: float | None = None
    alternative_return: float | None = None

    @property
    def loan_amount(self) -> float:
        return self.property_price - self.deposit

    @property
    def lvr(self) -> float:
        return self.loan_amount / self.property_price

    def validate(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if value is None or isinstance(value, bool):
                continue
            if not math.isfinite(value):
                raise InvalidInput(f"{field.name} must be a finite number, got {value!r}")

        if self.property_price <= 0:
            raise InvalidInput("property_price must be positive")
        if not 0 < self.deposit <= self.property_price:
            raise InvalidInput(
                f"deposit must be positive and no more than the price "
                f"(deposit={self.deposit:,.0f}, price={self.property_price:,.0f})"
            )
        if self.loan_term_years < 1:
            raise InvalidInput("loan_term_years must be at least 1")
        if self.annual_interest_rate < 0:
            raise InvalidInput("annual_interest_rate must not be negative")
        if self.weekly_rent < 0:
            raise InvalidInput("weekly_rent must not be negative")
        if self.annual_income < 0:
            raise InvalidInput("annual_income must not be negative")

        for name in ("council_rates", "water_rates", "insurance", "maintenance_rate"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise InvalidInput(f"{name} must not be negative")
        for name in ("property_growth_rate", "rent_growth_rate", "alternative_return"):
            value = getattr(self, name)
            if value is not None and value <= -1:
                raise InvalidInput(f"{name} must be greater than -100%")


@dataclass(frozen=True)
class LoanState:
    principal: float
    balance: float
    monthly_rate: float
    monthly_repayment: float
    term_months: int
    months_paid: int = 0

    @property
    def is_repaid(self) -> bool:
        return self.balance <= 0


@dataclass(frozen=True)
class UpfrontCosts:
    transfer_duty: float
    mortgage_insurance: float
    legal_fees: float
    inspections: float

    @property
    def total(self) -> float:
        return self.transfer_duty + self.mortgage_insurance + self.legal_fees + self.inspections


@dataclass(frozen=True)
class LoanSummary:
    loan_amount: float
    lvr: float
    monthly_repayment: float
    total_interest: float
