"""Tests for repayment and amortization."""

import math

import pytest

from mortgage.calculations import (
    amortization_schedule,
    amortization_totals,
    amortize_year,
    monthly_repayment,
    open_loan,
)


class TestMonthlyRepayment:
    def test_matches_formula(self):
        r = 0.065 / 12
        n = 360
        expected = 480_000 * r * (1 + r) ** n / ((1 + r) ** n - 1)
        assert monthly_repayment(480_000, 0.065, 30) == pytest.approx(expected)
        assert 3_000 < monthly_repayment(480_000, 0.065, 30) < 3_070

    def test_zero_rate_is_guarded(self):
        pmt = monthly_repayment(360_000, 0.0, 30)
        assert not math.isnan(pmt)
        assert pmt == 1_000

    def test_zero_principal(self):
        assert monthly_repayment(0, 0.065, 30) == 0

    def test_higher_rate_means_higher_payment(self):
        assert monthly_repayment(500_000, 0.08, 30) > monthly_repayment(500_000, 0.04, 30)

    def test_shorter_term_means_higher_payment(self):
        assert monthly_repayment(500_000, 0.06, 15) > monthly_repayment(500_000, 0.06, 30)


class TestAmortizeYear:
    def test_interest_plus_principal_equals_payments(self):
        loan = open_loan(480_000, 0.065, 30)
        after, interest = amortize_year(loan)
        principal = loan.balance - after.balance
        assert principal + interest == pytest.approx(loan.monthly_repayment * 12)
        assert after.months_paid == 12

    def test_input_state_is_not_mutated(self):
        loan = open_loan(480_000, 0.065, 30)
        amortize_year(loan)
        assert loan.balance == 480_000
        assert loan.months_paid == 0

    @pytest.mark.parametrize("rate", [0.0, 0.03, 0.065, 0.12])
    def test_balance_reaches_exactly_zero_at_term(self, rate):
        loan = open_loan(480_000, rate, 25)
        previous = loan.balance
        for _ in range(25):
            loan, _ = amortize_year(loan)
            assert loan.balance <= previous
            assert loan.balance >= 0
            previous = loan.balance
        assert loan.balance == 0

    def test_stops_once_repaid(self):
        loan = open_loan(100_000, 0.05, 1)
        loan, interest = amortize_year(loan)
        assert loan.balance == 0
        loan, interest = amortize_year(loan)
        assert interest == 0
        assert loan.months_paid == 12

    def test_zero_rate_has_no_interest(self):
        loan = open_loan(120_000, 0.0, 10)
        after, interest = amortize_year(loan)
        assert interest == 0
        assert after.balance == pytest.approx(108_000)


class TestSchedule:
    def test_schedule_covers_term(self):
        schedule = amortization_schedule(480_000, 0.065, 30)
        assert list(schedule.columns) == ["Year", "Interest", "Principal", "Ending Balance"]
        assert len(schedule) == 30
        assert schedule["Ending Balance"].iloc[-1] == 0
        assert schedule["Principal"].sum() == pytest.approx(480_000)
        assert schedule["Ending Balance"].is_monotonic_decreasing

    def test_empty_for_no_loan(self):
        assert amortization_schedule(0, 0.065, 30).empty
        assert amortization_totals(0, 0.065, 30) == (0.0, 0.0)

    def test_totals(self):
        total_interest, total_paid = amortization_totals(480_000, 0.065, 30)
        assert total_paid == pytest.approx(480_000 + total_interest)
        pmt = monthly_repayment(480_000, 0.065, 30)
        assert total_paid == pytest.approx(pmt * 360, rel=1e-6)
