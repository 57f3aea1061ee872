# This project was developed with assistance from AI tools.
"""Calculator catalog schemas."""

from pydantic import BaseModel, ConfigDict

from . import ResultFormat


class CalculatorInputField(BaseModel):
    """One form field a front-end renders for a calculator."""

    model_config = ConfigDict(frozen=True)

    name: str
    label: str
    type: ResultFormat
    placeholder: str
    default_value: float | None = None
    min: float | None = None
    max: float | None = None
    step: float
    required: bool = True
    help_text: str = ""


class CalculatorInfo(BaseModel):
    """Public description of a calculator and its inputs."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    inputs: list[CalculatorInputField]
