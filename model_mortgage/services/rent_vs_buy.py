# This project was developed with assistance from AI tools.
"""Rent-vs-buy comparison over a chosen holding period.

Buying assumes a 30-year mortgage regardless of how long the owner stays, plus
fixed-ratio ownership costs (tax 1.2%, insurance 0.5%, maintenance 1% of price
per year) and 3% closing costs. Equity built (down payment, principal repaid
and appreciation) is credited back against the cost of buying. Rent grows 3%
per year.

When renting comes out cheaper, the break-even search walks forward one year
at a time up to year 30 looking for the first year buying catches up.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..schemas import CalculatorResult, ResultFormat, ValidationResult, VerdictResult
from ..schemas.calculator import RentVsBuyInputs
from .amortization import monthly_payment, remaining_balance
from .validation import DomainError, parse_inputs, validate_inputs

logger = logging.getLogger(__name__)

NUMBER_OF_PAYMENTS = 360
MAX_HORIZON_YEARS = 30
# Monthly rates below this are amortized as interest-free
ZERO_RATE_EPSILON = 1e-6

PROPERTY_TAX_RATE = 0.012
INSURANCE_RATE = 0.005
MAINTENANCE_RATE = 0.01
CLOSING_COST_RATE = 0.03
RENT_INFLATION = 0.03


@dataclass(frozen=True)
class _Horizon:
    """Buy and rent totals for one holding period."""

    gross_buying_cost: float
    future_home_value: float
    appreciation: float
    equity_built: float
    net_buying_cost: float
    renting_cost: float


def _renting_cost(rent_amount: float, years: int) -> float:
    total = 0.0
    rent = rent_amount
    for _ in range(years):
        total += rent * 12
        rent *= 1 + RENT_INFLATION
    return total


def _horizon(
    req: RentVsBuyInputs,
    years: int,
    loan_amount: float,
    monthly_pi: float,
    monthly_owning: float,
    closing_costs: float,
) -> _Horizon:
    months = years * 12
    gross = req.down_payment + closing_costs + monthly_owning * months

    future_value = req.home_price * (1 + req.appreciation_rate / 100) ** years
    appreciation = future_value - req.home_price

    balance = remaining_balance(
        loan_amount,
        monthly_pi,
        req.interest_rate,
        NUMBER_OF_PAYMENTS,
        months,
        zero_rate_epsilon=ZERO_RATE_EPSILON,
    )
    equity = req.down_payment + (loan_amount - balance) + appreciation

    return _Horizon(
        gross_buying_cost=gross,
        future_home_value=future_value,
        appreciation=appreciation,
        equity_built=equity,
        net_buying_cost=gross - equity,
        renting_cost=_renting_cost(req.rent_amount, years),
    )


def calculate_rent_vs_buy(
    inputs: Mapping[str, Any] | RentVsBuyInputs,
) -> list[CalculatorResult | VerdictResult]:
    """Compare the net cost of buying against renting over ``years_to_stay``.

    Raises:
        CalculatorValidationError: a field is missing, non-finite or out of range.
        DomainError: the down payment exceeds the home price.
    """
    req = parse_inputs(RentVsBuyInputs, inputs)

    loan_amount = req.home_price - req.down_payment
    if loan_amount < 0:
        raise DomainError("Down payment cannot exceed home price")

    monthly_pi = monthly_payment(
        loan_amount,
        req.interest_rate,
        NUMBER_OF_PAYMENTS,
        zero_rate_epsilon=ZERO_RATE_EPSILON,
    )
    monthly_tax = req.home_price * PROPERTY_TAX_RATE / 12
    monthly_insurance = req.home_price * INSURANCE_RATE / 12
    monthly_maintenance = req.home_price * MAINTENANCE_RATE / 12
    monthly_owning = monthly_pi + monthly_tax + monthly_insurance + monthly_maintenance
    closing_costs = req.home_price * CLOSING_COST_RATE

    stay = _horizon(req, req.years_to_stay, loan_amount, monthly_pi, monthly_owning, closing_costs)
    net_difference = stay.renting_cost - stay.net_buying_cost

    if net_difference > 0:
        verdict, recommendation = "buy", "Buying is more cost-effective"
        difference_text = "Buying saves you this amount"
    elif net_difference < 0:
        verdict, recommendation = "rent", "Renting is more cost-effective"
        difference_text = "Renting saves you this amount"
    else:
        verdict, recommendation = "equal", "Costs are equal"
        difference_text = "Costs are equal"

    break_even_years = 0
    if net_difference < 0:
        for years in range(req.years_to_stay + 1, MAX_HORIZON_YEARS + 1):
            later = _horizon(req, years, loan_amount, monthly_pi, monthly_owning, closing_costs)
            if later.renting_cost >= later.net_buying_cost:
                break_even_years = years
                break

    if break_even_years > 0:
        break_even_text = "Years until buying becomes more cost-effective"
    elif net_difference < 0:
        break_even_text = f"Renting stays cheaper through year {MAX_HORIZON_YEARS}"
    else:
        break_even_text = "Buying is already more cost-effective"

    logger.debug(
        "Rent vs buy: net_buying=%.2f renting=%.2f verdict=%s break_even=%d",
        stay.net_buying_cost,
        stay.renting_cost,
        verdict,
        break_even_years,
    )

    years = req.years_to_stay
    return [
        CalculatorResult(
            label="Total Cost of Buying",
            value=stay.net_buying_cost,
            format=ResultFormat.CURRENCY,
            highlight=True,
            description=f"Net cost of buying over {years} years (after equity and appreciation)",
        ),
        CalculatorResult(
            label="Total Cost of Renting",
            value=stay.renting_cost,
            format=ResultFormat.CURRENCY,
            highlight=True,
            description=f"Total rent paid over {years} years (with 3% annual inflation)",
        ),
        CalculatorResult(
            label="Net Difference",
            value=abs(net_difference),
            format=ResultFormat.CURRENCY,
            highlight=True,
            description=difference_text,
        ),
        VerdictResult(
            label="Recommendation",
            verdict=verdict,
            description=recommendation,
        ),
        CalculatorResult(
            label="Monthly Mortgage Payment",
            value=monthly_pi,
            format=ResultFormat.CURRENCY,
            description="Principal and interest payment",
        ),
        CalculatorResult(
            label="Total Monthly Homeownership Cost",
            value=monthly_owning,
            format=ResultFormat.CURRENCY,
            description="Includes P&I, taxes, insurance, and maintenance",
        ),
        CalculatorResult(
            label="Current Monthly Rent",
            value=req.rent_amount,
            format=ResultFormat.CURRENCY,
            description="Your current monthly rent payment",
        ),
        CalculatorResult(
            label="Equity Built",
            value=stay.equity_built,
            format=ResultFormat.CURRENCY,
            description="Down payment + principal paid + home appreciation",
        ),
        CalculatorResult(
            label="Home Value After Period",
            value=stay.future_home_value,
            format=ResultFormat.CURRENCY,
            description=f"Estimated home value after {years} years",
        ),
        CalculatorResult(
            label="Total Appreciation",
            value=stay.appreciation,
            format=ResultFormat.CURRENCY,
            description=f"Home value increase over {years} years",
        ),
        CalculatorResult(
            label="Closing Costs",
            value=closing_costs,
            format=ResultFormat.CURRENCY,
            description="Estimated closing costs (3% of home price)",
        ),
        CalculatorResult(
            label="Break-Even Point",
            value=break_even_years,
            format=ResultFormat.NUMBER,
            description=break_even_text,
        ),
    ]


def validate_rent_vs_buy_inputs(raw: Mapping[str, Any]) -> ValidationResult:
    """Validate a raw rent-vs-buy input record, including the down payment check."""
    return validate_inputs(RentVsBuyInputs, raw)
