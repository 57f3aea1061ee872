# This project was developed with assistance from AI tools.
"""Tests for the DSCR investment property calculator."""

import pytest

from model_mortgage.schemas import ResultFormat, VerdictResult
from model_mortgage.services.amortization import monthly_payment
from model_mortgage.services.dscr import calculate_dscr
from model_mortgage.services.formatting import result_map
from model_mortgage.services.validation import CalculatorValidationError, DomainError

LABELS = [
    "DSCR Ratio",
    "Qualification Status",
    "Monthly Cash Flow",
    "Annual Cash Flow",
    "Annual ROI (Cash-on-Cash)",
    "Monthly Rent Income",
    "Monthly Expenses",
    "Net Operating Income",
    "Monthly Debt Service (P&I)",
    "Loan Amount",
    "Down Payment",
    "Total Cash Invested",
    "Cap Rate",
    "Total Interest Paid",
]


def _results(inputs):
    return result_map(calculate_dscr(inputs))


def test_reference_scenario(dscr_inputs):
    r = _results(dscr_inputs)
    pi = monthly_payment(240000, 7.5, 360)

    assert r["Monthly Debt Service (P&I)"].value == pytest.approx(1678.11, abs=0.01)
    assert r["Net Operating Income"].value == 1700
    assert r["DSCR Ratio"].value == pytest.approx(1700 / pi)
    assert r["Monthly Cash Flow"].value == pytest.approx(1700 - pi)
    assert r["Annual Cash Flow"].value == pytest.approx((1700 - pi) * 12)
    assert r["Total Cash Invested"].value == pytest.approx(69000)
    assert r["Annual ROI (Cash-on-Cash)"].value == pytest.approx((1700 - pi) * 12 / 69000)
    assert r["Cap Rate"].value == pytest.approx(1700 * 12 / 300000)
    assert r["Total Interest Paid"].value == pytest.approx(pi * 360 - 240000)


def test_result_order_and_contract(dscr_inputs):
    results = calculate_dscr(dscr_inputs)
    assert [r.label for r in results] == LABELS
    status = results[1]
    assert isinstance(status, VerdictResult)
    assert results[0].format is ResultFormat.NUMBER
    assert results[4].format is ResultFormat.PERCENTAGE


def test_descriptions(dscr_inputs):
    r = _results(dscr_inputs)
    assert r["Loan Amount"].description == "Mortgage loan amount (80.0% LTV)"
    assert r["Down Payment"].description == "Your down payment (20.0% of property price)"
    assert r["Monthly Cash Flow"].description == "Positive monthly cash flow"
    assert r["DSCR Ratio"].description.startswith("Debt Service Coverage Ratio (1.01")


class TestQualification:
    @pytest.mark.parametrize(
        "rent,expenses,verdict",
        [
            (2500, 0, "excellent"),
            (2500, 800, "good"),
            (1500, 200, "marginal"),
            (1000, 800, "poor"),
        ],
    )
    def test_tiers(self, dscr_inputs, rent, expenses, verdict):
        """should grade the ratio against the 1.25 / 1.0 / 0.75 thresholds"""
        r = _results({**dscr_inputs, "monthlyRent": rent, "monthlyExpenses": expenses})
        assert r["Qualification Status"].verdict == verdict
        assert r["Qualification Status"].description.startswith(verdict.capitalize())

    def test_cash_purchase(self, dscr_inputs):
        """should report a cash purchase with the no-debt sentinel ratio"""
        r = _results({**dscr_inputs, "downPayment": 300000})
        assert r["Loan Amount"].value == 0
        assert r["Monthly Debt Service (P&I)"].value == 0
        assert r["DSCR Ratio"].value == 999
        assert r["DSCR Ratio"].description == "No debt service (cash purchase)"
        assert r["Qualification Status"].verdict == "cash_purchase"
        assert r["Total Interest Paid"].value == 0

    def test_cash_purchase_losing_money(self, dscr_inputs):
        """should report a zero ratio when a cash purchase nets nothing"""
        r = _results({
            **dscr_inputs,
            "downPayment": 300000,
            "monthlyRent": 500,
            "monthlyExpenses": 800,
        })
        assert r["DSCR Ratio"].value == 0
        assert r["Qualification Status"].verdict == "cash_purchase"
        assert r["Monthly Cash Flow"].value == -300


def test_negative_cash_flow(dscr_inputs):
    r = _results({**dscr_inputs, "monthlyRent": 1000})
    assert r["Monthly Cash Flow"].value < 0
    assert r["Monthly Cash Flow"].description == "Negative monthly cash flow (cash drain)"
    assert r["Annual ROI (Cash-on-Cash)"].value < 0


def test_zero_rate(dscr_inputs):
    r = _results({**dscr_inputs, "interestRate": 0})
    assert r["Monthly Debt Service (P&I)"].value == pytest.approx(240000 / 360)
    assert r["Total Interest Paid"].value == pytest.approx(0, abs=1e-6)


def test_down_payment_over_price_raises(dscr_inputs):
    with pytest.raises(DomainError, match="property price"):
        calculate_dscr({**dscr_inputs, "downPayment": 300001})


def test_invalid_input_raises(dscr_inputs):
    with pytest.raises(CalculatorValidationError) as exc_info:
        calculate_dscr({**dscr_inputs, "propertyPrice": 10})
    assert set(exc_info.value.errors) == {"propertyPrice"}


def test_deterministic(dscr_inputs):
    assert calculate_dscr(dscr_inputs) == calculate_dscr(dscr_inputs)
