# This project was developed with assistance from AI tools.
"""Affordability calculation logic.

Pure math, no I/O. Shared by the public API route and any other caller.

Max housing payment = gross monthly income * 0.43 - monthly debts, then the max
loan is derived from that payment over a 30-year term. When debts already
exceed the 43% cap the payment capacity is negative and so is the loan; the
values are propagated as-is for the UI layer to present.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ..schemas import CalculatorResult, ResultFormat, ValidationResult
from ..schemas.calculator import AffordabilityInputs
from .amortization import max_principal, monthly_payment
from .validation import parse_inputs, validate_inputs

logger = logging.getLogger(__name__)

DTI_RATIO = 0.43
NUMBER_OF_PAYMENTS = 360


def calculate_affordability(
    inputs: Mapping[str, Any] | AffordabilityInputs,
) -> list[CalculatorResult]:
    """Estimate maximum home price, loan amount and monthly payment."""
    req = parse_inputs(AffordabilityInputs, inputs)

    monthly_income = req.annual_income / 12
    max_monthly_payment = monthly_income * DTI_RATIO - req.monthly_debts

    max_loan_amount = max_principal(max_monthly_payment, req.interest_rate, NUMBER_OF_PAYMENTS)
    max_home_price = max_loan_amount + req.down_payment
    estimated_monthly_payment = monthly_payment(
        max_loan_amount, req.interest_rate, NUMBER_OF_PAYMENTS
    )

    loan_to_value = max_loan_amount / max_home_price if max_home_price > 0 else 0.0
    dti_ratio = (
        (estimated_monthly_payment + req.monthly_debts) / monthly_income
        if monthly_income > 0
        else 0.0
    )

    logger.debug(
        "Affordability: max_loan=%.2f max_price=%.2f dti=%.4f",
        max_loan_amount,
        max_home_price,
        dti_ratio,
    )

    return [
        CalculatorResult(
            label="Maximum Home Price",
            value=max_home_price,
            format=ResultFormat.CURRENCY,
            highlight=True,
            description="The maximum home price you can afford based on your income and debts",
        ),
        CalculatorResult(
            label="Maximum Loan Amount",
            value=max_loan_amount,
            format=ResultFormat.CURRENCY,
            description="The maximum mortgage loan amount you qualify for",
        ),
        CalculatorResult(
            label="Down Payment",
            value=req.down_payment,
            format=ResultFormat.CURRENCY,
            description="Your planned down payment amount",
        ),
        CalculatorResult(
            label="Estimated Monthly Payment",
            value=estimated_monthly_payment,
            format=ResultFormat.CURRENCY,
            description="Estimated principal and interest payment (excludes taxes and insurance)",
        ),
        CalculatorResult(
            label="Loan-to-Value Ratio",
            value=loan_to_value,
            format=ResultFormat.PERCENTAGE,
            description="The ratio of your loan amount to the home price",
        ),
        CalculatorResult(
            label="Debt-to-Income Ratio",
            value=dti_ratio,
            format=ResultFormat.PERCENTAGE,
            description="Your total monthly debt payments as a percentage of gross income",
        ),
    ]


def validate_affordability_inputs(raw: Mapping[str, Any]) -> ValidationResult:
    """Validate a raw affordability input record."""
    return validate_inputs(AffordabilityInputs, raw)
