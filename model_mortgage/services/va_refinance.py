# This project was developed with assistance from AI tools.
"""VA refinance calculator: IRRRL (rate-and-term) or cash-out.

Both loans are compared over a 30-year term. The new loan is the current
balance plus any cash out, plus the VA funding fee on that amount, which is
financed into the loan.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ..schemas import CalculatorResult, ResultFormat, ValidationResult
from ..schemas.calculator import VARefinanceInputs
from .amortization import monthly_payment, total_interest
from .validation import parse_inputs, validate_inputs

logger = logging.getLogger(__name__)

LOAN_TERM_YEARS = 30


def calculate_va_refinance(
    inputs: Mapping[str, Any] | VARefinanceInputs,
) -> list[CalculatorResult]:
    """Monthly and lifetime savings, cash out and funding fee for a VA refinance."""
    req = parse_inputs(VARefinanceInputs, inputs)

    number_of_payments = LOAN_TERM_YEARS * 12
    current_monthly = monthly_payment(req.current_balance, req.current_rate, number_of_payments)

    base_new_loan = req.current_balance + req.cash_out_amount
    funding_fee = base_new_loan * req.va_funding_fee / 100
    new_loan_amount = base_new_loan + funding_fee
    new_monthly = monthly_payment(new_loan_amount, req.new_rate, number_of_payments)

    monthly_savings = current_monthly - new_monthly
    lifetime_savings = monthly_savings * number_of_payments
    current_interest = total_interest(current_monthly, number_of_payments, req.current_balance)
    new_interest = total_interest(new_monthly, number_of_payments, new_loan_amount)
    rate_reduction = req.current_rate - req.new_rate
    loan_increase = new_loan_amount - req.current_balance

    logger.debug(
        "VA refinance: current=%.2f new=%.2f fee=%.2f cash_out=%.2f",
        current_monthly,
        new_monthly,
        funding_fee,
        req.cash_out_amount,
    )

    return [
        CalculatorResult(
            label="New Monthly Payment",
            value=new_monthly,
            format=ResultFormat.CURRENCY,
            highlight=True,
            description="Your new monthly principal and interest payment",
        ),
        CalculatorResult(
            label="Current Monthly Payment",
            value=current_monthly,
            format=ResultFormat.CURRENCY,
            description="Your current monthly principal and interest payment",
        ),
        CalculatorResult(
            label="Monthly Savings",
            value=monthly_savings,
            format=ResultFormat.CURRENCY,
            highlight=True,
            description=(
                "Amount you save each month"
                if monthly_savings >= 0
                else "Additional monthly cost (negative savings)"
            ),
        ),
        CalculatorResult(
            label="Cash Out Amount",
            value=req.cash_out_amount,
            format=ResultFormat.CURRENCY,
            highlight=req.cash_out_amount > 0,
            description="Cash you receive from the refinance",
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
            label="New Loan Amount",
            value=new_loan_amount,
            format=ResultFormat.CURRENCY,
            description="Total new loan amount including cash out and funding fee",
        ),
        CalculatorResult(
            label="Current Loan Balance",
            value=req.current_balance,
            format=ResultFormat.CURRENCY,
            description="Your current mortgage balance",
        ),
        CalculatorResult(
            label="Loan Increase",
            value=loan_increase,
            format=ResultFormat.CURRENCY,
            description="Amount your loan balance will increase (cash out + funding fee)",
        ),
        CalculatorResult(
            label="Interest Rate Reduction",
            value=rate_reduction / 100,
            format=ResultFormat.PERCENTAGE,
            description=(
                "Reduction in interest rate" if rate_reduction >= 0 else "Increase in interest rate"
            ),
        ),
        CalculatorResult(
            label="Lifetime Savings",
            value=lifetime_savings,
            format=ResultFormat.CURRENCY,
            description=(
                f"Total savings over {LOAN_TERM_YEARS} years"
                if lifetime_savings >= 0
                else f"Additional cost over {LOAN_TERM_YEARS} years"
            ),
        ),
        CalculatorResult(
            label="Total Interest (Current Loan)",
            value=current_interest,
            format=ResultFormat.CURRENCY,
            description=f"Total interest over {LOAN_TERM_YEARS} years at current rate",
        ),
        CalculatorResult(
            label="Total Interest (New Loan)",
            value=new_interest,
            format=ResultFormat.CURRENCY,
            description=f"Total interest over {LOAN_TERM_YEARS} years at new rate",
        ),
    ]


def validate_va_refinance_inputs(raw: Mapping[str, Any]) -> ValidationResult:
    """Validate a raw VA refinance input record."""
    return validate_inputs(VARefinanceInputs, raw)
