import pandas as pd

from .models import LoanState


def monthly_repayment(principal: float, annual_rate: float, term_years: int) -> float:
    """
    Standard fixed-rate amortization payment:
      M = P * [ r(1+r)^n / ((1+r)^n - 1) ]
    where r = annual_rate/12, n = years*12.

    At a zero rate the formula is 0/0, so the loan is repaid in equal parts.
    """
    if principal <= 0:
        return 0.0
    n = term_years * 12
    r = annual_rate / 12.0
    if r == 0:
        return principal / n
    num = r * (1 + r) ** n
    den = (1 + r) ** n - 1
    return principal * (num / den)


def open_loan(principal: float, annual_rate: float, term_years: int) -> LoanState:
    return LoanState(
        principal=principal,
        balance=max(0.0, principal),
        monthly_rate=annual_rate / 12.0,
        monthly_repayment=monthly_repayment(principal, annual_rate, term_years),
        term_months=term_years * 12,
    )


def amortize_year(loan: LoanState) -> tuple[LoanState, float]:
    """
    Run twelve monthly repayments against the loan.

    Returns the loan after the year and the interest paid during it. Stops as
    soon as the balance hits zero; the last contractual payment clears any
    floating-point residue so the term always ends at exactly zero.
    """
    bal = loan.balance
    months_paid = loan.months_paid
    interest_ytd = 0.0

    for _ in range(12):
        if bal <= 0:
            break

        interest = bal * loan.monthly_rate
        principal_paid = loan.monthly_repayment - interest
        interest_ytd += interest
        months_paid += 1

        if months_paid >= loan.term_months:
            bal = 0.0
        else:
            bal = max(0.0, bal - principal_paid)

    return (
        LoanState(
            principal=loan.principal,
            balance=bal,
            monthly_rate=loan.monthly_rate,
            monthly_repayment=loan.monthly_repayment,
            term_months=loan.term_months,
            months_paid=months_paid,
        ),
        interest_ytd,
    )


def amortization_schedule(principal: float, annual_rate: float, term_years: int) -> pd.DataFrame:
    """
    Month-by-month amortization schedule aggregated by year.
    """
    loan = open_loan(principal, annual_rate, term_years)
    rows = []
    year = 1

    while not loan.is_repaid:
        start_balance = loan.balance
        loan, interest = amortize_year(loan)
        rows.append({
            "Year": year,
            "Interest": interest,
            "Principal": start_balance - loan.balance,
            "Ending Balance": loan.balance,
        })
        year += 1

    return pd.DataFrame(rows, columns=["Year", "Interest", "Principal", "Ending Balance"])


def amortization_totals(principal: float, annual_rate: float, term_years: int) -> tuple[float, float]:
    """
    Total interest and total paid (P+I) over the simulated schedule.
    """
    schedule = amortization_schedule(principal, annual_rate, term_years)
    if schedule.empty:
        return 0.0, 0.0
    total_interest = float(schedule["Interest"].sum())
    return total_interest, float(schedule["Principal"].sum()) + total_interest
