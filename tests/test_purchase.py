# This project was developed with assistance from AI tools.
"""Tests for the purchase calculator."""

import math

import pytest

from model_mortgage.services.amortization import monthly_payment
from model_mortgage.services.formatting import result_map
from model_mortgage.services.purchase import calculate_purchase
from model_mortgage.services.validation import CalculatorValidationError, DomainError

LABELS = [
    "Total Monthly Payment",
    "Principal & Interest",
    "Property Taxes",
    "Homeowners Insurance",
    "HOA Fees",
    "Loan Amount",
    "Down Payment",
    "Total Interest Paid",
    "Total Cost",
    "Loan-to-Value Ratio",
]


def _values(inputs):
    return {label: r.value for label, r in result_map(calculate_purchase(inputs)).items()}


def test_reference_scenario(purchase_inputs):
    v = _values(purchase_inputs)
    assert v["Loan Amount"] == 240000
    assert v["Principal & Interest"] == pytest.approx(1516.96, abs=0.01)
    assert v["Property Taxes"] == pytest.approx(300, abs=0.01)
    assert v["Homeowners Insurance"] == pytest.approx(100, abs=0.01)
    assert v["HOA Fees"] == 100
    assert v["Total Monthly Payment"] == pytest.approx(2016.96, abs=0.01)
    assert v["Loan-to-Value Ratio"] == pytest.approx(0.8)


def test_result_order_and_contract(purchase_inputs):
    results = calculate_purchase(purchase_inputs)
    assert [r.label for r in results] == LABELS
    assert [r.label for r in results if r.highlight] == ["Total Monthly Payment"]
    assert results[-1].format == "percentage"
    assert all(math.isfinite(r.value) for r in results)


def test_down_payment_description(purchase_inputs):
    down = result_map(calculate_purchase(purchase_inputs))["Down Payment"]
    assert down.description == "Your down payment (20.0% of home price)"


def test_totals_cover_life_of_loan(purchase_inputs):
    v = _values(purchase_inputs)
    n = 360
    assert v["Total Interest Paid"] == pytest.approx(
        v["Principal & Interest"] * n - v["Loan Amount"], abs=0.01
    )
    expected_cost = (
        purchase_inputs["downPayment"]
        + v["Total Interest Paid"]
        + v["Loan Amount"]
        + (v["Property Taxes"] + v["Homeowners Insurance"] + v["HOA Fees"]) * n
    )
    assert v["Total Cost"] == pytest.approx(expected_cost, abs=0.01)


@pytest.mark.parametrize("home_price", [1000, 150000, 725000, 5_000_000])
@pytest.mark.parametrize("down_pct", [0, 0.035, 0.2, 0.5])
@pytest.mark.parametrize("rate", [0, 3.25, 7.125, 20])
@pytest.mark.parametrize("term", [1, 15, 30])
def test_invariants(home_price, down_pct, rate, term):
    inputs = {
        "homePrice": home_price,
        "downPayment": home_price * down_pct,
        "interestRate": rate,
        "loanTerm": term,
        "propertyTaxRate": 2.1,
        "insurance": 1800,
        "hoa": 45,
    }
    v = _values(inputs)
    assert v["Loan Amount"] == pytest.approx(home_price - inputs["downPayment"], abs=0.01)
    assert v["Total Monthly Payment"] == pytest.approx(
        v["Principal & Interest"] + v["Property Taxes"] + v["Homeowners Insurance"] + v["HOA Fees"],
        abs=0.01,
    )
    assert v["Principal & Interest"] == pytest.approx(
        monthly_payment(v["Loan Amount"], rate, term * 12), abs=0.01
    )


def test_zero_rate_is_straight_line(purchase_inputs):
    v = _values({**purchase_inputs, "interestRate": 0})
    assert v["Principal & Interest"] == pytest.approx(240000 / 360)
    assert v["Total Interest Paid"] == pytest.approx(0, abs=0.01)


def test_full_down_payment(purchase_inputs):
    v = _values({**purchase_inputs, "downPayment": 300000})
    assert v["Loan Amount"] == 0
    assert v["Principal & Interest"] == 0
    assert v["Total Interest Paid"] == 0
    assert v["Loan-to-Value Ratio"] == 0


def test_down_payment_over_price_raises_domain_error(purchase_inputs):
    with pytest.raises(DomainError, match="cannot exceed home price"):
        calculate_purchase({**purchase_inputs, "downPayment": 300001})


def test_invalid_field_raises_before_calculating(purchase_inputs):
    with pytest.raises(CalculatorValidationError) as exc_info:
        calculate_purchase({**purchase_inputs, "interestRate": 25, "hoa": -5})
    assert set(exc_info.value.errors) == {"interestRate", "hoa"}


def test_deterministic(purchase_inputs):
    assert calculate_purchase(purchase_inputs) == calculate_purchase(purchase_inputs)
