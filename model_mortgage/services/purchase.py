# This project was developed with assistance from AI tools.
"""Purchase calculator: full monthly payment breakdown for a home purchase.

Pure math, no I/O. Principal and interest use the standard amortization
formula; property tax is an annual percentage of the home price, insurance an
annual premium and HOA a monthly fee.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ..schemas import CalculatorResult, ResultFormat, ValidationResult
from ..schemas.calculator import PurchaseInputs
from .amortization import monthly_payment, total_interest
from .validation import DomainError, parse_inputs, validate_inputs

logger = logging.getLogger(__name__)


def calculate_purchase(inputs: Mapping[str, Any] | PurchaseInputs) -> list[CalculatorResult]:
    """Monthly payment, lifetime interest and total cost for a purchase.

    Raises:
        CalculatorValidationError: a field is missing, non-finite or out of range.
        DomainError: the down payment exceeds the home price.
    """
    req = parse_inputs(PurchaseInputs, inputs)

    loan_amount = req.home_price - req.down_payment
    if loan_amount < 0:
        raise DomainError("Down payment cannot exceed home price")

    number_of_payments = req.loan_term * 12
    monthly_pi = monthly_payment(loan_amount, req.interest_rate, number_of_payments)

    monthly_tax = req.home_price * req.property_tax_rate / 100 / 12
    monthly_insurance = req.insurance / 12
    monthly_hoa = req.hoa
    monthly_escrow = monthly_tax + monthly_insurance + monthly_hoa

    total_monthly = monthly_pi + monthly_escrow
    interest = total_interest(monthly_pi, number_of_payments, loan_amount)
    # Down payment plus every dollar paid over the life of the loan
    total_cost = req.down_payment + (monthly_pi + monthly_escrow) * number_of_payments

    loan_to_value = loan_amount / req.home_price
    down_payment_pct = req.down_payment / req.home_price * 100
    term = f"{req.loan_term:g}"

    logger.debug(
        "Purchase: loan=%.2f pi=%.2f total_monthly=%.2f",
        loan_amount,
        monthly_pi,
        total_monthly,
    )

    return [
        CalculatorResult(
            label="Total Monthly Payment",
            value=total_monthly,
            format=ResultFormat.CURRENCY,
            highlight=True,
            description="Your total monthly payment including P&I, taxes, insurance, and HOA",
        ),
        CalculatorResult(
            label="Principal & Interest",
            value=monthly_pi,
            format=ResultFormat.CURRENCY,
            description="Monthly principal and interest payment on the loan",
        ),
        CalculatorResult(
            label="Property Taxes",
            value=monthly_tax,
            format=ResultFormat.CURRENCY,
            description="Estimated monthly property tax payment",
        ),
        CalculatorResult(
            label="Homeowners Insurance",
            value=monthly_insurance,
            format=ResultFormat.CURRENCY,
            description="Monthly homeowners insurance payment",
        ),
        CalculatorResult(
            label="HOA Fees",
            value=monthly_hoa,
            format=ResultFormat.CURRENCY,
            description="Monthly homeowners association fees",
        ),
        CalculatorResult(
            label="Loan Amount",
            value=loan_amount,
            format=ResultFormat.CURRENCY,
            description="The mortgage loan amount (home price minus down payment)",
        ),
        CalculatorResult(
            label="Down Payment",
            value=req.down_payment,
            format=ResultFormat.CURRENCY,
            description=f"Your down payment ({down_payment_pct:.1f}% of home price)",
        ),
        CalculatorResult(
            label="Total Interest Paid",
            value=interest,
            format=ResultFormat.CURRENCY,
            description=f"Total interest paid over {term} years",
        ),
        CalculatorResult(
            label="Total Cost",
            value=total_cost,
            format=ResultFormat.CURRENCY,
            description=(
                "Total cost including down payment, all payments, taxes, insurance, "
                f"and HOA over {term} years"
            ),
        ),
        CalculatorResult(
            label="Loan-to-Value Ratio",
            value=loan_to_value,
            format=ResultFormat.PERCENTAGE,
            description="The ratio of your loan amount to the home price",
        ),
    ]


def validate_purchase_inputs(raw: Mapping[str, Any]) -> ValidationResult:
    """Validate a raw purchase input record, including the down payment check."""
    return validate_inputs(PurchaseInputs, raw)
