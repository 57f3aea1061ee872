# This project was developed with assistance from AI tools.
"""Refinance calculator: compare the current loan with a proposed new one.

Closing costs are always rolled into the new loan balance. When the new
payment does not undercut the current one the break-even point is ``inf``
(never breaks even); that is a valid result, not an error.
"""

import logging
import math
from collections.abc import Mapping
from typing import Any

from ..schemas import CalculatorResult, ResultFormat, ValidationResult
from ..schemas.calculator import RefinanceInputs
from .amortization import monthly_payment, total_interest
from .validation import parse_inputs, validate_inputs

logger = logging.getLogger(__name__)


def calculate_refinance(inputs: Mapping[str, Any] | RefinanceInputs) -> list[CalculatorResult]:
    """Monthly and lifetime savings plus break-even months for a refinance."""
    req = parse_inputs(RefinanceInputs, inputs)

    current_payments = req.remaining_term * 12
    new_payments = req.new_term * 12

    current_monthly = monthly_payment(req.current_balance, req.current_rate, current_payments)
    new_loan_amount = req.current_balance + req.closing_costs
    new_monthly = monthly_payment(new_loan_amount, req.new_rate, new_payments)

    monthly_savings = current_monthly - new_monthly
    if monthly_savings > 0:
        break_even_months = req.closing_costs / monthly_savings
    else:
        break_even_months = math.inf

    total_current = current_monthly * current_payments
    total_new = new_monthly * new_payments
    lifetime_savings = total_current - total_new

    current_interest = total_interest(current_monthly, current_payments, req.current_balance)
    new_interest = total_interest(new_monthly, new_payments, new_loan_amount)
    rate_reduction = req.current_rate - req.new_rate

    remaining = f"{req.remaining_term:g}"
    new_term = f"{req.new_term:g}"

    logger.debug(
        "Refinance: current=%.2f new=%.2f savings=%.2f break_even=%s",
        current_monthly,
        new_monthly,
        monthly_savings,
        break_even_months,
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
            label="Break-Even Point",
            value=break_even_months,
            format=ResultFormat.NUMBER,
            highlight=True,
            description=(
                "Months to recover closing costs through savings"
                if math.isfinite(break_even_months)
                else "Never breaks even with current parameters"
            ),
        ),
        CalculatorResult(
            label="Lifetime Savings",
            value=lifetime_savings,
            format=ResultFormat.CURRENCY,
            description=(
                f"Total savings over {new_term} years"
                if lifetime_savings >= 0
                else f"Additional cost over {new_term} years"
            ),
        ),
        CalculatorResult(
            label="Closing Costs",
            value=req.closing_costs,
            format=ResultFormat.CURRENCY,
            description="Upfront costs to refinance (rolled into new loan)",
        ),
        CalculatorResult(
            label="New Loan Amount",
            value=new_loan_amount,
            format=ResultFormat.CURRENCY,
            description="Current balance plus closing costs",
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
            label="Total Interest (Current Loan)",
            value=current_interest,
            format=ResultFormat.CURRENCY,
            description=f"Total interest over remaining {remaining} years",
        ),
        CalculatorResult(
            label="Total Interest (New Loan)",
            value=new_interest,
            format=ResultFormat.CURRENCY,
            description=f"Total interest over {new_term} years",
        ),
    ]


def validate_refinance_inputs(raw: Mapping[str, Any]) -> ValidationResult:
    """Validate a raw refinance input record."""
    return validate_inputs(RefinanceInputs, raw)
