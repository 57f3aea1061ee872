# This project was developed with assistance from AI tools.
"""Tests for the shared amortization primitives."""

import pytest

from model_mortgage.services.amortization import (
    max_principal,
    monthly_payment,
    monthly_rate,
    remaining_balance,
    total_interest,
)


def test_monthly_rate():
    assert monthly_rate(6.0) == pytest.approx(0.005)


def test_standard_payment():
    """$240k at 6.5% over 30 years is the textbook $1,516.96."""
    assert monthly_payment(240000, 6.5, 360) == pytest.approx(1516.96, abs=0.01)


def test_zero_principal_pays_nothing_at_any_rate():
    assert monthly_payment(0, 0, 360) == 0
    assert monthly_payment(0, 7.5, 360) == 0


def test_zero_rate_is_straight_line():
    assert monthly_payment(240000, 0, 360) == pytest.approx(240000 / 360)


def test_epsilon_widens_zero_rate():
    """A 0.001% annual rate is interest-free only when the epsilon says so."""
    exact = monthly_payment(360000, 0.001, 360)
    widened = monthly_payment(360000, 0.001, 360, zero_rate_epsilon=1e-6)
    assert widened == 1000.0
    assert exact > widened


@pytest.mark.parametrize("principal", [1000, 250000, 10_000_000])
@pytest.mark.parametrize("rate", [0.5, 6.5, 20])
def test_max_principal_inverts_payment(principal, rate):
    payment = monthly_payment(principal, rate, 360)
    assert max_principal(payment, rate, 360) == pytest.approx(principal, abs=0.01)


def test_max_principal_zero_rate():
    assert max_principal(1000, 0, 360) == 360000


def test_large_loan_is_finite():
    payment = monthly_payment(10_000_000, 20, 360)
    assert payment == pytest.approx(10_000_000 * (20 / 1200), rel=0.01)


class TestRemainingBalance:
    def test_fresh_loan_owes_full_principal(self):
        payment = monthly_payment(200000, 6, 360)
        assert remaining_balance(200000, payment, 6, 360, 0) == pytest.approx(200000, abs=0.01)

    def test_paid_off_loan_owes_nothing(self):
        payment = monthly_payment(200000, 6, 360)
        assert remaining_balance(200000, payment, 6, 360, 360) == 0
        assert remaining_balance(200000, payment, 6, 360, 400) == 0

    def test_balance_declines(self):
        payment = monthly_payment(200000, 6, 360)
        after_5 = remaining_balance(200000, payment, 6, 360, 60)
        after_10 = remaining_balance(200000, payment, 6, 360, 120)
        assert 0 < after_10 < after_5 < 200000

    def test_zero_rate_straight_line(self):
        assert remaining_balance(36000, 100, 0, 360, 60) == pytest.approx(30000)

    def test_no_loan(self):
        assert remaining_balance(0, 0, 6, 360, 12) == 0


def test_total_interest():
    assert total_interest(1000, 360, 300000) == 60000
