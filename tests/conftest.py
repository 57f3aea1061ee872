# This project was developed with assistance from AI tools.
"""Shared fixtures for the calculator test suite."""

import pytest
from fastapi.testclient import TestClient

from model_mortgage.main import app


@pytest.fixture
def client():
    """TestClient bound to the real app with all routers mounted."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def purchase_inputs():
    """Reference purchase scenario: $300k home, 20% down, 6.5% over 30 years."""
    return {
        "homePrice": 300000,
        "downPayment": 60000,
        "interestRate": 6.5,
        "loanTerm": 30,
        "propertyTaxRate": 1.2,
        "insurance": 1200,
        "hoa": 100,
    }


@pytest.fixture
def affordability_inputs():
    return {
        "annualIncome": 80000,
        "monthlyDebts": 500,
        "downPayment": 20000,
        "interestRate": 7.0,
    }


@pytest.fixture
def refinance_inputs():
    return {
        "currentBalance": 250000,
        "currentRate": 7.5,
        "newRate": 6.0,
        "remainingTerm": 25,
        "newTerm": 30,
        "closingCosts": 5000,
    }


@pytest.fixture
def rent_vs_buy_inputs():
    return {
        "homePrice": 350000,
        "downPayment": 70000,
        "interestRate": 7.0,
        "rentAmount": 2000,
        "yearsToStay": 7,
        "appreciationRate": 3.0,
    }


@pytest.fixture
def dscr_inputs():
    return {
        "propertyPrice": 300000,
        "downPayment": 60000,
        "interestRate": 7.5,
        "monthlyRent": 2500,
        "monthlyExpenses": 800,
    }


@pytest.fixture
def va_purchase_inputs():
    """First-time VA buyer: $350k home, nothing down, 2.15% funding fee."""
    return {
        "homePrice": 350000,
        "downPayment": 0,
        "interestRate": 6.5,
        "vaFundingFee": 2.15,
        "propertyTaxRate": 1.2,
        "insurance": 1200,
    }


@pytest.fixture
def va_refinance_inputs():
    return {
        "currentBalance": 300000,
        "currentRate": 7.0,
        "newRate": 6.0,
        "cashOutAmount": 0,
        "vaFundingFee": 2.15,
    }
