# This project was developed with assistance from AI tools.
"""Shared schema components: the calculator result contract."""

import enum
import math
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class ResultFormat(str, enum.Enum):
    """How a renderer should display a numeric result value."""

    CURRENCY = "currency"
    PERCENTAGE = "percentage"
    NUMBER = "number"


class CalculatorResult(BaseModel):
    """One labeled numeric result.

    ``label`` is a stable identifier within a calculator's output. Percentage
    values are stored as fractions (0.43 for 43%); the renderer scales them.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["metric"] = "metric"
    label: str
    value: float
    format: ResultFormat
    description: str = ""
    highlight: bool = False

    @field_serializer("value", when_used="json")
    def _finite_or_null(self, value: float) -> float | None:
        # JSON has no infinity; a break-even that is never reached goes out as null
        return value if math.isfinite(value) else None


class VerdictResult(BaseModel):
    """A textual verdict (e.g. rent-vs-buy recommendation) in the result list.

    Carries a short machine-readable ``verdict`` code and the human-readable
    text in ``description``; it has no numeric value.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["verdict"] = "verdict"
    label: str
    verdict: str
    description: str
    highlight: bool = False


ResultEntry = Annotated[CalculatorResult | VerdictResult, Field(discriminator="kind")]


class ValidationResult(BaseModel):
    """Outcome of validating one raw calculator input record."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    success: bool
    data: Any = None
    errors: dict[str, str] = Field(default_factory=dict)
