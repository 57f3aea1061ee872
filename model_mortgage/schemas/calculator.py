# This project was developed with assistance from AI tools.
"""Calculator input and response schemas.

Raw input records arrive with camelCase keys (``annualIncome``) from the web
front-end; snake_case names are accepted as well. Every numeric field rejects
NaN and infinity and carries the inclusive bounds the calculators rely on.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from . import ResultEntry


class CalculatorInputs(BaseModel):
    """Base for validated calculator input records."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    # Field alias -> (below-minimum message, above-maximum message)
    BOUND_MESSAGES: ClassVar[dict[str, tuple[str, str]]] = {}
    # Name of the price field the down payment may not exceed, if any
    PRICE_FIELD: ClassVar[str | None] = None
    PRICE_MESSAGE: ClassVar[str] = "Down payment cannot exceed home price"

    @field_validator("*", mode="before")
    @classmethod
    def _reject_booleans(cls, value: Any) -> Any:
        # Lax mode would read true/false as 1/0
        if isinstance(value, bool):
            raise PydanticCustomError("bool_not_number", "Input should be a number")
        return value


class AffordabilityInputs(CalculatorInputs):
    """Input for the affordability calculator."""

    annual_income: float = Field(title="Annual income", ge=0, le=10_000_000, allow_inf_nan=False)
    monthly_debts: float = Field(title="Monthly debts", ge=0, le=100_000, allow_inf_nan=False)
    down_payment: float = Field(title="Down payment", ge=0, le=10_000_000, allow_inf_nan=False)
    interest_rate: float = Field(title="Interest rate", ge=0, le=20, allow_inf_nan=False)

    BOUND_MESSAGES: ClassVar[dict[str, tuple[str, str]]] = {
        "annualIncome": ("Income must be positive", "Income exceeds maximum"),
        "monthlyDebts": ("Debts cannot be negative", "Debts exceed maximum"),
        "downPayment": ("Down payment cannot be negative", "Down payment exceeds maximum"),
        "interestRate": (
            "Interest rate must be positive",
            "Interest rate must be between 0% and 20%",
        ),
    }


class PurchaseInputs(CalculatorInputs):
    """Input for the purchase (monthly payment) calculator."""

    home_price: float = Field(title="Home price", ge=1_000, le=100_000_000, allow_inf_nan=False)
    down_payment: float = Field(title="Down payment", ge=0, le=100_000_000, allow_inf_nan=False)
    interest_rate: float = Field(title="Interest rate", ge=0, le=20, allow_inf_nan=False)
    loan_term: float = Field(title="Loan term", ge=1, le=30, allow_inf_nan=False)
    property_tax_rate: float = Field(
        title="Property tax rate", ge=0, le=10, allow_inf_nan=False
    )
    insurance: float = Field(title="Insurance", ge=0, le=100_000, allow_inf_nan=False)
    hoa: float = Field(title="HOA fees", ge=0, le=10_000, allow_inf_nan=False)

    PRICE_FIELD: ClassVar[str | None] = "home_price"
    BOUND_MESSAGES: ClassVar[dict[str, tuple[str, str]]] = {
        "homePrice": ("Home price must be at least $1,000", "Home price exceeds maximum"),
        "downPayment": ("Down payment cannot be negative", "Down payment exceeds maximum"),
        "interestRate": (
            "Interest rate must be positive",
            "Interest rate must be between 0% and 20%",
        ),
        "loanTerm": ("Loan term must be at least 1 year", "Loan term cannot exceed 30 years"),
        "propertyTaxRate": (
            "Property tax rate cannot be negative",
            "Property tax rate exceeds maximum",
        ),
        "insurance": ("Insurance cannot be negative", "Insurance exceeds maximum"),
        "hoa": ("HOA fees cannot be negative", "HOA fees exceed maximum"),
    }


class RefinanceInputs(CalculatorInputs):
    """Input for the refinance comparison calculator."""

    current_balance: float = Field(
        title="Current balance", ge=1_000, le=100_000_000, allow_inf_nan=False
    )
    current_rate: float = Field(title="Current rate", ge=0, le=20, allow_inf_nan=False)
    new_rate: float = Field(title="New rate", ge=0, le=20, allow_inf_nan=False)
    remaining_term: float = Field(title="Remaining term", ge=1, le=30, allow_inf_nan=False)
    new_term: float = Field(title="New term", ge=1, le=30, allow_inf_nan=False)
    closing_costs: float = Field(title="Closing costs", ge=0, le=100_000, allow_inf_nan=False)

    BOUND_MESSAGES: ClassVar[dict[str, tuple[str, str]]] = {
        "currentBalance": (
            "Current balance must be at least $1,000",
            "Balance exceeds maximum",
        ),
        "currentRate": (
            "Current rate must be positive",
            "Current rate must be between 0% and 20%",
        ),
        "newRate": ("New rate must be positive", "New rate must be between 0% and 20%"),
        "remainingTerm": (
            "Remaining term must be at least 1 year",
            "Remaining term cannot exceed 30 years",
        ),
        "newTerm": ("New term must be at least 1 year", "New term cannot exceed 30 years"),
        "closingCosts": ("Closing costs cannot be negative", "Closing costs exceed maximum"),
    }


class RentVsBuyInputs(CalculatorInputs):
    """Input for the rent-vs-buy comparison."""

    home_price: float = Field(title="Home price", ge=1_000, le=100_000_000, allow_inf_nan=False)
    down_payment: float = Field(title="Down payment", ge=0, le=100_000_000, allow_inf_nan=False)
    interest_rate: float = Field(title="Interest rate", ge=0, le=20, allow_inf_nan=False)
    rent_amount: float = Field(title="Rent amount", ge=0, le=50_000, allow_inf_nan=False)
    years_to_stay: int = Field(title="Years to stay", ge=1, le=30)
    appreciation_rate: float = Field(
        title="Appreciation rate", ge=-10, le=20, allow_inf_nan=False
    )

    PRICE_FIELD: ClassVar[str | None] = "home_price"
    BOUND_MESSAGES: ClassVar[dict[str, tuple[str, str]]] = {
        "homePrice": ("Home price must be at least $1,000", "Home price exceeds maximum"),
        "downPayment": ("Down payment cannot be negative", "Down payment exceeds maximum"),
        "interestRate": (
            "Interest rate must be positive",
            "Interest rate must be between 0% and 20%",
        ),
        "rentAmount": ("Rent amount cannot be negative", "Rent amount exceeds maximum"),
        "yearsToStay": ("Years to stay must be at least 1", "Years to stay cannot exceed 30"),
        "appreciationRate": ("Appreciation rate too low", "Appreciation rate too high"),
    }


class VAPurchaseInputs(CalculatorInputs):
    """Input for the VA purchase calculator (30-year term, no PMI)."""

    home_price: float = Field(title="Home price", ge=1_000, le=100_000_000, allow_inf_nan=False)
    down_payment: float = Field(title="Down payment", ge=0, le=100_000_000, allow_inf_nan=False)
    interest_rate: float = Field(title="Interest rate", ge=0, le=20, allow_inf_nan=False)
    va_funding_fee: float = Field(title="VA funding fee", ge=0, le=10, allow_inf_nan=False)
    property_tax_rate: float = Field(
        title="Property tax rate", ge=0, le=10, allow_inf_nan=False
    )
    insurance: float = Field(title="Insurance", ge=0, le=100_000, allow_inf_nan=False)

    PRICE_FIELD: ClassVar[str | None] = "home_price"
    BOUND_MESSAGES: ClassVar[dict[str, tuple[str, str]]] = {
        "homePrice": ("Home price must be at least $1,000", "Home price exceeds maximum"),
        "downPayment": ("Down payment cannot be negative", "Down payment exceeds maximum"),
        "interestRate": (
            "Interest rate must be positive",
            "Interest rate must be between 0% and 20%",
        ),
        "vaFundingFee": ("VA funding fee cannot be negative", "VA funding fee exceeds maximum"),
        "propertyTaxRate": (
            "Property tax rate cannot be negative",
            "Property tax rate exceeds maximum",
        ),
        "insurance": ("Insurance cannot be negative", "Insurance exceeds maximum"),
    }


class VARefinanceInputs(CalculatorInputs):
    """Input for the VA refinance calculator (IRRRL or cash-out)."""

    current_balance: float = Field(
        title="Current balance", ge=1_000, le=100_000_000, allow_inf_nan=False
    )
    current_rate: float = Field(title="Current rate", ge=0, le=20, allow_inf_nan=False)
    new_rate: float = Field(title="New rate", ge=0, le=20, allow_inf_nan=False)
    cash_out_amount: float = Field(
        title="Cash out amount", ge=0, le=10_000_000, allow_inf_nan=False
    )
    va_funding_fee: float = Field(title="VA funding fee", ge=0, le=10, allow_inf_nan=False)

    BOUND_MESSAGES: ClassVar[dict[str, tuple[str, str]]] = {
        "currentBalance": (
            "Current balance must be at least $1,000",
            "Balance exceeds maximum",
        ),
        "currentRate": (
            "Current rate must be positive",
            "Current rate must be between 0% and 20%",
        ),
        "newRate": ("New rate must be positive", "New rate must be between 0% and 20%"),
        "cashOutAmount": (
            "Cash out amount cannot be negative",
            "Cash out amount exceeds maximum",
        ),
        "vaFundingFee": ("VA funding fee cannot be negative", "VA funding fee exceeds maximum"),
    }


class DSCRInputs(CalculatorInputs):
    """Input for the DSCR investment property calculator."""

    property_price: float = Field(
        title="Property price", ge=1_000, le=100_000_000, allow_inf_nan=False
    )
    down_payment: float = Field(title="Down payment", ge=0, le=100_000_000, allow_inf_nan=False)
    interest_rate: float = Field(title="Interest rate", ge=0, le=20, allow_inf_nan=False)
    monthly_rent: float = Field(title="Monthly rent", ge=0, le=100_000, allow_inf_nan=False)
    monthly_expenses: float = Field(
        title="Monthly expenses", ge=0, le=100_000, allow_inf_nan=False
    )

    PRICE_FIELD: ClassVar[str | None] = "property_price"
    PRICE_MESSAGE: ClassVar[str] = "Down payment cannot exceed property price"
    BOUND_MESSAGES: ClassVar[dict[str, tuple[str, str]]] = {
        "propertyPrice": (
            "Property price must be at least $1,000",
            "Property price exceeds maximum",
        ),
        "downPayment": ("Down payment cannot be negative", "Down payment exceeds maximum"),
        "interestRate": (
            "Interest rate must be positive",
            "Interest rate must be between 0% and 20%",
        ),
        "monthlyRent": ("Monthly rent cannot be negative", "Monthly rent exceeds maximum"),
        "monthlyExpenses": (
            "Monthly expenses cannot be negative",
            "Monthly expenses exceeds maximum",
        ),
    }


class CalculationResponse(BaseModel):
    """Ordered results of one calculator run."""

    calculator_id: str
    results: list[ResultEntry]


class ValidationResponse(BaseModel):
    """Outcome of validating a raw input record without calculating."""

    success: bool
    data: dict[str, float] | None = None
    errors: dict[str, str] = Field(default_factory=dict)
