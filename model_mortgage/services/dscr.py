# This project was developed with assistance from AI tools.
"""DSCR (debt service coverage ratio) calculator for investment property loans.

DSCR = monthly net operating income / monthly P&I on a 30-year loan. Lenders
typically want 1.0 or better, 1.25 for favorable terms. A cash purchase has no
debt service; its ratio is reported as 999 when the property nets income.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ..schemas import CalculatorResult, ResultFormat, ValidationResult, VerdictResult
from ..schemas.calculator import DSCRInputs
from .amortization import monthly_payment, total_interest
from .validation import DomainError, parse_inputs, validate_inputs

logger = logging.getLogger(__name__)

LOAN_TERM_YEARS = 30
CLOSING_COST_RATE = 0.03
NO_DEBT_SERVICE_RATIO = 999.0

# (minimum ratio, verdict code, status, explanation), checked top-down
_QUALIFICATION_TIERS: list[tuple[float, str, str, str]] = [
    (1.25, "excellent", "Excellent", "Strong DSCR - likely to qualify with favorable terms"),
    (1.0, "good", "Good", "Meets minimum DSCR requirements - should qualify"),
    (
        0.75,
        "marginal",
        "Marginal",
        "Below minimum DSCR - may need larger down payment or higher rent",
    ),
]


def _qualification(loan_amount: float, ratio: float) -> tuple[str, str]:
    if loan_amount == 0:
        return "cash_purchase", "Cash Purchase: No loan required - purchasing with cash"
    for minimum, code, status, detail in _QUALIFICATION_TIERS:
        if ratio >= minimum:
            return code, f"{status}: {detail}"
    return "poor", "Poor: DSCR too low - property does not generate sufficient income"


def calculate_dscr(
    inputs: Mapping[str, Any] | DSCRInputs,
) -> list[CalculatorResult | VerdictResult]:
    """Coverage ratio, cash flow and return figures for a rental purchase.

    Raises:
        CalculatorValidationError: a field is missing, non-finite or out of range.
        DomainError: the down payment exceeds the property price.
    """
    req = parse_inputs(DSCRInputs, inputs)

    loan_amount = req.property_price - req.down_payment
    if loan_amount < 0:
        raise DomainError("Down payment cannot exceed property price")

    number_of_payments = LOAN_TERM_YEARS * 12
    monthly_pi = monthly_payment(loan_amount, req.interest_rate, number_of_payments)

    noi = req.monthly_rent - req.monthly_expenses
    if monthly_pi == 0:
        ratio = NO_DEBT_SERVICE_RATIO if noi > 0 else 0.0
    else:
        ratio = min(noi / monthly_pi, NO_DEBT_SERVICE_RATIO)

    monthly_cash_flow = noi - monthly_pi
    annual_cash_flow = monthly_cash_flow * 12
    cash_invested = req.down_payment + req.property_price * CLOSING_COST_RATE
    annual_roi = annual_cash_flow / cash_invested if cash_invested > 0 else 0.0

    verdict, qualification = _qualification(loan_amount, ratio)
    down_payment_pct = req.down_payment / req.property_price * 100
    loan_to_value = loan_amount / req.property_price * 100
    cap_rate = noi * 12 / req.property_price
    interest = total_interest(monthly_pi, number_of_payments, loan_amount)

    logger.debug("DSCR: ratio=%.3f noi=%.2f pi=%.2f", ratio, noi, monthly_pi)

    return [
        CalculatorResult(
            label="DSCR Ratio",
            value=ratio,
            format=ResultFormat.NUMBER,
            highlight=True,
            description=(
                "No debt service (cash purchase)"
                if ratio >= NO_DEBT_SERVICE_RATIO
                else f"Debt Service Coverage Ratio ({ratio:.2f})"
            ),
        ),
        VerdictResult(
            label="Qualification Status",
            verdict=verdict,
            description=qualification,
            highlight=True,
        ),
        CalculatorResult(
            label="Monthly Cash Flow",
            value=monthly_cash_flow,
            format=ResultFormat.CURRENCY,
            highlight=True,
            description=(
                "Positive monthly cash flow"
                if monthly_cash_flow >= 0
                else "Negative monthly cash flow (cash drain)"
            ),
        ),
        CalculatorResult(
            label="Annual Cash Flow",
            value=annual_cash_flow,
            format=ResultFormat.CURRENCY,
            description="Total cash flow over 12 months",
        ),
        CalculatorResult(
            label="Annual ROI (Cash-on-Cash)",
            value=annual_roi,
            format=ResultFormat.PERCENTAGE,
            highlight=True,
            description="Return on investment based on cash invested",
        ),
        CalculatorResult(
            label="Monthly Rent Income",
            value=req.monthly_rent,
            format=ResultFormat.CURRENCY,
            description="Gross monthly rental income",
        ),
        CalculatorResult(
            label="Monthly Expenses",
            value=req.monthly_expenses,
            format=ResultFormat.CURRENCY,
            description="Operating expenses (taxes, insurance, maintenance, etc.)",
        ),
        CalculatorResult(
            label="Net Operating Income",
            value=noi,
            format=ResultFormat.CURRENCY,
            description="Monthly rent minus monthly expenses",
        ),
        CalculatorResult(
            label="Monthly Debt Service (P&I)",
            value=monthly_pi,
            format=ResultFormat.CURRENCY,
            description="Monthly principal and interest payment",
        ),
        CalculatorResult(
            label="Loan Amount",
            value=loan_amount,
            format=ResultFormat.CURRENCY,
            description=f"Mortgage loan amount ({loan_to_value:.1f}% LTV)",
        ),
        CalculatorResult(
            label="Down Payment",
            value=req.down_payment,
            format=ResultFormat.CURRENCY,
            description=f"Your down payment ({down_payment_pct:.1f}% of property price)",
        ),
        CalculatorResult(
            label="Total Cash Invested",
            value=cash_invested,
            format=ResultFormat.CURRENCY,
            description="Down payment plus estimated closing costs (3%)",
        ),
        CalculatorResult(
            label="Cap Rate",
            value=cap_rate,
            format=ResultFormat.PERCENTAGE,
            description="Capitalization rate (annual NOI / property price)",
        ),
        CalculatorResult(
            label="Total Interest Paid",
            value=interest,
            format=ResultFormat.CURRENCY,
            description=f"Total interest paid over {LOAN_TERM_YEARS} years",
        ),
    ]


def validate_dscr_inputs(raw: Mapping[str, Any]) -> ValidationResult:
    """Validate a raw DSCR input record, including the down payment check."""
    return validate_inputs(DSCRInputs, raw)
