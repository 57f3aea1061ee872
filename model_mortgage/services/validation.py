# This project was developed with assistance from AI tools.
"""Input validation for the mortgage calculators.

Validation collects every failing field in one pass and reports it as a
field-keyed message map. Field errors are returned (``validate_inputs``) or
raised as ``CalculatorValidationError`` (``parse_inputs``); a down payment
larger than the price is a ``DomainError`` raised by the calculators.
"""

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..schemas import ValidationResult
from ..schemas.calculator import CalculatorInputs

logger = logging.getLogger(__name__)

InputsT = TypeVar("InputsT", bound=CalculatorInputs)

_FLOAT = TypeAdapter(float)


class CalculatorError(Exception):
    """Base class for calculator failures."""


class CalculatorValidationError(CalculatorError):
    """Raised when one or more input fields fail range, type or finiteness checks."""

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"Invalid calculator input: {fields}")


class DomainError(CalculatorError):
    """Raised when valid fields violate a computation invariant together."""


def _field_titles(model: type[CalculatorInputs]) -> dict[str, str]:
    """Map each field's alias to its human-readable title."""
    return {
        (info.alias or name): (info.title or name)
        for name, info in model.model_fields.items()
    }


def _message(model: type[CalculatorInputs], alias: str, err: dict[str, Any]) -> str:
    title = _field_titles(model).get(alias, alias)
    below, above = model.BOUND_MESSAGES.get(alias, (None, None))
    kind = err["type"]
    if kind in ("greater_than_equal", "greater_than") and below:
        return below
    if kind in ("less_than_equal", "less_than") and above:
        return above
    if kind == "missing":
        return f"{title} is required"
    if kind == "finite_number":
        return f"{title} must be a finite number"
    if kind in ("int_from_float", "int_parsing", "int_type"):
        return f"{title} must be a whole number"
    if kind in ("float_parsing", "float_type", "bool_not_number"):
        return f"{title} must be a number"
    return err["msg"]


def _raw_value(raw: Mapping[str, Any], model: type[CalculatorInputs], name: str) -> Any:
    alias = model.model_fields[name].alias or name
    if alias in raw:
        return raw[alias]
    return raw.get(name)


def _price_errors(
    model: type[CalculatorInputs],
    raw: Mapping[str, Any],
    errors: dict[str, str],
) -> dict[str, str]:
    """Cross-field check: down payment must not exceed the price field.

    Only runs when both fields passed their own checks.
    """
    if model.PRICE_FIELD is None:
        return {}
    price_alias = model.model_fields[model.PRICE_FIELD].alias
    down_alias = model.model_fields["down_payment"].alias
    if price_alias in errors or down_alias in errors:
        return {}
    price = _FLOAT.validate_python(_raw_value(raw, model, model.PRICE_FIELD))
    down_payment = _FLOAT.validate_python(_raw_value(raw, model, "down_payment"))
    if down_payment > price:
        return {down_alias: model.PRICE_MESSAGE}
    return {}


def _collect_errors(model: type[CalculatorInputs], exc: PydanticValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for err in exc.errors():
        loc = err.get("loc") or ("__root__",)
        alias = str(loc[0])
        # First failure per field wins
        errors.setdefault(alias, _message(model, alias, err))
    return errors


def validate_inputs(model: type[InputsT], raw: Mapping[str, Any]) -> ValidationResult:
    """Validate a raw input record against ``model``.

    Returns a ``ValidationResult`` with the frozen typed record on success, or
    every field error (including the cross-field down payment check) on
    failure. Never raises for bad input.
    """
    if not isinstance(raw, Mapping):
        return ValidationResult(success=False, errors={"__root__": "Input must be an object"})

    data: InputsT | None = None
    errors: dict[str, str] = {}
    try:
        data = model.model_validate(dict(raw))
    except PydanticValidationError as exc:
        errors = _collect_errors(model, exc)

    errors.update(_price_errors(model, raw, errors))
    if errors:
        logger.debug("%s rejected: %s", model.__name__, errors)
        return ValidationResult(success=False, errors=errors)
    return ValidationResult(success=True, data=data)


def parse_inputs(model: type[InputsT], raw: Mapping[str, Any] | InputsT) -> InputsT:
    """Return typed inputs for a calculation, raising on any field error.

    Already-validated records pass through untouched. The cross-field down
    payment rule is left to the calculator, which raises ``DomainError``.
    """
    if isinstance(raw, model):
        return raw
    if not isinstance(raw, Mapping):
        raise CalculatorValidationError({"__root__": "Input must be an object"})
    try:
        return model.model_validate(dict(raw))
    except PydanticValidationError as exc:
        raise CalculatorValidationError(_collect_errors(model, exc)) from exc
