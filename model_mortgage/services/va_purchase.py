# This project was developed with assistance from AI tools.
"""VA purchase calculator: monthly payment for a VA-backed home purchase.

VA loans carry no PMI and allow 0% down. The VA funding fee is a percentage of
the base loan (price minus down payment) and is financed into the loan, so
principal and interest are computed on the base loan plus the fee. The term is
always 30 years.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ..schemas import CalculatorResult, ResultFormat, ValidationResult
from ..schemas.calculator import VAPurchaseInputs
from .amortization import monthly_payment, total_interest
from .validation import DomainError, parse_inputs, validate_inputs

logger = logging.getLogger(__name__)

LOAN_TERM_YEARS = 30


def calculate_va_purchase(
    inputs: Mapping[str, Any] | VAPurchaseInputs,
) -> list[CalculatorResult]:
    """Monthly payment, funding fee and lifetime cost for a VA purchase.

    Raises:
        CalculatorValidationError: a field is missing, non-finite or out of range.
        DomainError: the down payment exceeds the home price.
    """
    req = parse_inputs(VAPurchaseInputs, inputs)

    base_loan = req.home_price - req.down_payment
    if base_loan < 0:
        raise DomainError("Down payment cannot exceed home price")

    funding_fee = base_loan * req.va_funding_fee / 100
    total_loan = base_loan + funding_fee

    number_of_payments = LOAN_TERM_YEARS * 12
    monthly_pi = monthly_payment(total_loan, req.interest_rate, number_of_payments)

    monthly_tax = req.home_price * req.property_tax_rate / 100 / 12
    monthly_insurance = req.insurance / 12
    total_monthly = monthly_pi + monthly_tax + monthly_insurance

    interest = total_interest(monthly_pi, number_of_payments, total_loan)
    total_cost = req.down_payment + total_monthly * number_of_payments

    # LTV uses the base loan; the financed fee is not counted against value
    loan_to_value = base_loan / req.home_price
    down_payment_pct = req.down_payment / req.home_price * 100

    logger.debug(
        "VA purchase: base=%.2f fee=%.2f pi=%.2f total_monthly=%.2f",
        base_loan,
        funding_fee,
        monthly_pi,
        total_monthly,
    )

    return [
        CalculatorResult(
            label="Total Monthly Payment",
            value=total_monthly,
            format=ResultFormat.CURRENCY,
            highlight=True,
            description=(
                "Your total monthly payment including P&I, taxes, and insurance "
                "(no PMI required)"
            ),
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
            label="Base Loan Amount",
            value=base_loan,
            format=ResultFormat.CURRENCY,
            description=(
                "The mortgage loan amount before funding fee (home price minus down payment)"
            ),
        ),
        CalculatorResult(
            label="VA Funding Fee",
            value=funding_fee,
            format=ResultFormat.CURRENCY,
            description=(
                f"VA funding fee ({req.va_funding_fee:.2f}% of loan amount, "
                "typically financed into loan)"
            ),
        ),
        CalculatorResult(
            label="Total Loan Amount",
            value=total_loan,
            format=ResultFormat.CURRENCY,
            description="Total loan amount including VA funding fee",
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
            description=f"Total interest paid over {LOAN_TERM_YEARS} years",
        ),
        CalculatorResult(
            label="Total Cost",
            value=total_cost,
            format=ResultFormat.CURRENCY,
            description=(
                "Total cost including down payment, all payments, taxes, and insurance "
                f"over {LOAN_TERM_YEARS} years"
            ),
        ),
        CalculatorResult(
            label="Loan-to-Value Ratio",
            value=loan_to_value,
            format=ResultFormat.PERCENTAGE,
            description="The ratio of your base loan amount to the home price",
        ),
    ]


def validate_va_purchase_inputs(raw: Mapping[str, Any]) -> ValidationResult:
    """Validate a raw VA purchase input record, including the down payment check."""
    return validate_inputs(VAPurchaseInputs, raw)
