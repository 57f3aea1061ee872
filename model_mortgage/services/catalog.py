# This project was developed with assistance from AI tools.
"""Calculator catalog and registry.

Centralizes the calculator list so the public routes look calculators up by
id instead of importing each module. Form field bounds are read from the
input schemas, so the catalog cannot drift from what validation enforces.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from ..schemas import ResultFormat, ValidationResult
from ..schemas.calculator import (
    AffordabilityInputs,
    CalculatorInputs,
    DSCRInputs,
    PurchaseInputs,
    RefinanceInputs,
    RentVsBuyInputs,
    VAPurchaseInputs,
    VARefinanceInputs,
)
from ..schemas.catalog import CalculatorInfo, CalculatorInputField
from .affordability import calculate_affordability, validate_affordability_inputs
from .dscr import calculate_dscr, validate_dscr_inputs
from .purchase import calculate_purchase, validate_purchase_inputs
from .refinance import calculate_refinance, validate_refinance_inputs
from .rent_vs_buy import calculate_rent_vs_buy, validate_rent_vs_buy_inputs
from .va_purchase import calculate_va_purchase, validate_va_purchase_inputs
from .va_refinance import calculate_va_refinance, validate_va_refinance_inputs

CURRENCY = ResultFormat.CURRENCY
PERCENTAGE = ResultFormat.PERCENTAGE
NUMBER = ResultFormat.NUMBER


@dataclass(frozen=True)
class Calculator:
    """A registered calculator: public description plus entry points."""

    info: CalculatorInfo
    inputs_model: type[CalculatorInputs]
    calculate: Callable[[Mapping[str, Any]], list]
    validate: Callable[[Mapping[str, Any]], ValidationResult]


def _bounds(model: type[CalculatorInputs], name: str) -> tuple[float | None, float | None]:
    low = high = None
    for constraint in model.model_fields[name].metadata:
        low = getattr(constraint, "ge", low)
        high = getattr(constraint, "le", high)
    return low, high


def _fields(
    model: type[CalculatorInputs],
    specs: list[tuple[str, str, ResultFormat, str, float | None, float, str]],
) -> list[CalculatorInputField]:
    """Build form fields from (name, label, type, placeholder, default, step, help)."""
    fields = []
    for name, label, kind, placeholder, default, step, help_text in specs:
        low, high = _bounds(model, name)
        fields.append(
            CalculatorInputField(
                name=model.model_fields[name].alias or name,
                label=label,
                type=kind,
                placeholder=placeholder,
                default_value=default,
                min=low,
                max=high,
                step=step,
                help_text=help_text,
            )
        )
    return fields


AFFORDABILITY = CalculatorInfo(
    id="affordability",
    title="How Much Can I Afford?",
    description="Calculate your maximum home purchase price based on your income, debts, "
    "and down payment.",
    inputs=_fields(
        AffordabilityInputs,
        [
            ("annual_income", "Annual Gross Income", CURRENCY, "80000", None, 1000,
             "Your total annual income before taxes"),
            ("monthly_debts", "Monthly Debts", CURRENCY, "500", None, 50,
             "Car payments, credit cards, student loans, etc."),
            ("down_payment", "Down Payment", CURRENCY, "20000", None, 1000,
             "Amount you plan to put down on the home"),
            ("interest_rate", "Interest Rate (%)", PERCENTAGE, "7.0", 7.0, 0.1,
             "Current mortgage interest rate"),
        ],
    ),
)

PURCHASE = CalculatorInfo(
    id="purchase",
    title="Purchase Calculator",
    description="Estimate your monthly mortgage payment including principal, interest, "
    "taxes, insurance, and HOA fees.",
    inputs=_fields(
        PurchaseInputs,
        [
            ("home_price", "Home Price", CURRENCY, "350000", None, 1000,
             "The purchase price of the home"),
            ("down_payment", "Down Payment", CURRENCY, "70000", None, 1000,
             "Amount you plan to put down on the home"),
            ("interest_rate", "Interest Rate (%)", PERCENTAGE, "7.0", 7.0, 0.1,
             "Current mortgage interest rate"),
            ("loan_term", "Loan Term (years)", NUMBER, "30", 30, 1,
             "Length of the mortgage in years"),
            ("property_tax_rate", "Property Tax Rate (%)", PERCENTAGE, "1.2", 1.2, 0.1,
             "Annual property tax as percentage of home price"),
            ("insurance", "Annual Insurance", CURRENCY, "1200", 1200, 100,
             "Annual homeowners insurance premium"),
            ("hoa", "Monthly HOA Fees", CURRENCY, "0", 0, 50,
             "Monthly homeowners association fees"),
        ],
    ),
)

REFINANCE = CalculatorInfo(
    id="refinance",
    title="Refinance Calculator",
    description="Calculate your potential savings from refinancing your mortgage. Compare "
    "your current loan to a new loan and see your break-even point.",
    inputs=_fields(
        RefinanceInputs,
        [
            ("current_balance", "Current Loan Balance", CURRENCY, "250000", None, 1000,
             "Your current outstanding mortgage balance"),
            ("current_rate", "Current Interest Rate (%)", PERCENTAGE, "7.5", None, 0.1,
             "Your current mortgage interest rate"),
            ("new_rate", "New Interest Rate (%)", PERCENTAGE, "6.5", None, 0.1,
             "The new interest rate you qualify for"),
            ("remaining_term", "Remaining Term (years)", NUMBER, "25", None, 1,
             "Years remaining on your current mortgage"),
            ("new_term", "New Loan Term (years)", NUMBER, "30", 30, 1,
             "Length of the new mortgage in years"),
            ("closing_costs", "Closing Costs", CURRENCY, "5000", 5000, 500,
             "Upfront costs to refinance (rolled into new loan)"),
        ],
    ),
)

RENT_VS_BUY = CalculatorInfo(
    id="rent-vs-buy",
    title="Rent vs Buy Calculator",
    description="Compare the total costs of renting versus buying a home over time. See "
    "which option makes more financial sense for your situation.",
    inputs=_fields(
        RentVsBuyInputs,
        [
            ("home_price", "Home Price", CURRENCY, "350000", None, 1000,
             "The purchase price of the home"),
            ("down_payment", "Down Payment", CURRENCY, "70000", None, 1000,
             "Amount you plan to put down on the home"),
            ("interest_rate", "Interest Rate (%)", PERCENTAGE, "7.0", None, 0.1,
             "Mortgage interest rate"),
            ("rent_amount", "Monthly Rent", CURRENCY, "2000", None, 50,
             "Your current monthly rent payment"),
            ("years_to_stay", "Years to Stay", NUMBER, "7", None, 1,
             "How long you plan to stay in the home"),
            ("appreciation_rate", "Home Appreciation Rate (%)", PERCENTAGE, "3.0", None, 0.1,
             "Expected annual home value appreciation"),
        ],
    ),
)

VA_PURCHASE = CalculatorInfo(
    id="va-purchase",
    title="VA Purchase Calculator",
    description="Calculate your monthly VA loan payment with no PMI required. Includes VA "
    "funding fee, property taxes, and insurance. Perfect for eligible veterans and service "
    "members.",
    inputs=_fields(
        VAPurchaseInputs,
        [
            ("home_price", "Home Price", CURRENCY, "350000", None, 1000,
             "The purchase price of the home"),
            ("down_payment", "Down Payment", CURRENCY, "0", 0, 1000,
             "VA loans allow 0% down payment (optional down payment reduces loan amount)"),
            ("interest_rate", "Interest Rate (%)", PERCENTAGE, "6.5", 6.5, 0.1,
             "Current VA loan interest rate"),
            ("va_funding_fee", "VA Funding Fee (%)", PERCENTAGE, "2.15", 2.15, 0.05,
             "VA funding fee (typically 2.15% for first-time use with 0% down, can be financed)"),
            ("property_tax_rate", "Property Tax Rate (%)", PERCENTAGE, "1.2", 1.2, 0.1,
             "Annual property tax as percentage of home price"),
            ("insurance", "Annual Insurance", CURRENCY, "1200", 1200, 100,
             "Annual homeowners insurance premium"),
        ],
    ),
)

VA_REFINANCE = CalculatorInfo(
    id="va-refinance",
    title="VA Refinance Calculator",
    description="Calculate your VA refinance savings with IRRRL or cash-out refinance "
    "options. Compare your current loan to a new VA loan with lower rates. Includes VA "
    "funding fee and cash-out analysis.",
    inputs=_fields(
        VARefinanceInputs,
        [
            ("current_balance", "Current Loan Balance", CURRENCY, "300000", None, 1000,
             "Your current mortgage balance"),
            ("current_rate", "Current Interest Rate (%)", PERCENTAGE, "7.0", None, 0.1,
             "Your current mortgage interest rate"),
            ("new_rate", "New Interest Rate (%)", PERCENTAGE, "6.0", None, 0.1,
             "The new VA loan interest rate"),
            ("cash_out_amount", "Cash Out Amount", CURRENCY, "0", 0, 1000,
             "Amount of cash you want to take out (0 for rate-and-term refinance)"),
            ("va_funding_fee", "VA Funding Fee (%)", PERCENTAGE, "2.15", 2.15, 0.05,
             "VA funding fee (typically 2.15% for IRRRL, 2.3% for cash-out, can be financed)"),
        ],
    ),
)

DSCR = CalculatorInfo(
    id="dscr",
    title="DSCR Investment Calculator",
    description="Calculate Debt Service Coverage Ratio (DSCR) for investment property loans. "
    "Determine if your rental income covers mortgage payments and analyze cash flow and ROI.",
    inputs=_fields(
        DSCRInputs,
        [
            ("property_price", "Property Price", CURRENCY, "300000", None, 1000,
             "The purchase price of the investment property"),
            ("down_payment", "Down Payment", CURRENCY, "60000", None, 1000,
             "Amount you plan to put down (typically 20-25% for investment properties)"),
            ("interest_rate", "Interest Rate (%)", PERCENTAGE, "7.5", 7.5, 0.1,
             "Current interest rate for investment property loans"),
            ("monthly_rent", "Monthly Rent", CURRENCY, "2500", None, 50,
             "Expected monthly rental income from the property"),
            ("monthly_expenses", "Monthly Expenses", CURRENCY, "800", None, 50,
             "Property taxes, insurance, maintenance, HOA, property management, etc."),
        ],
    ),
)

CALCULATORS: dict[str, Calculator] = {
    calc.info.id: calc
    for calc in (
        Calculator(
            AFFORDABILITY,
            AffordabilityInputs,
            calculate_affordability,
            validate_affordability_inputs,
        ),
        Calculator(PURCHASE, PurchaseInputs, calculate_purchase, validate_purchase_inputs),
        Calculator(REFINANCE, RefinanceInputs, calculate_refinance, validate_refinance_inputs),
        Calculator(
            RENT_VS_BUY,
            RentVsBuyInputs,
            calculate_rent_vs_buy,
            validate_rent_vs_buy_inputs,
        ),
        Calculator(
            VA_PURCHASE,
            VAPurchaseInputs,
            calculate_va_purchase,
            validate_va_purchase_inputs,
        ),
        Calculator(
            VA_REFINANCE,
            VARefinanceInputs,
            calculate_va_refinance,
            validate_va_refinance_inputs,
        ),
        Calculator(DSCR, DSCRInputs, calculate_dscr, validate_dscr_inputs),
    )
}


def get_calculator(calculator_id: str) -> Calculator | None:
    """Look up a registered calculator by id."""
    return CALCULATORS.get(calculator_id)


def list_calculators() -> list[CalculatorInfo]:
    """Public descriptions of every registered calculator, in display order."""
    return [calc.info for calc in CALCULATORS.values()]
