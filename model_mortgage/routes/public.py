# This project was developed with assistance from AI tools.
"""Public calculator routes -- no authentication required."""

import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException, status

from ..schemas.calculator import CalculationResponse, ValidationResponse
from ..schemas.catalog import CalculatorInfo
from ..services.catalog import Calculator, get_calculator, list_calculators

logger = logging.getLogger(__name__)

router = APIRouter()


def _require(calculator_id: str) -> Calculator:
    calc = get_calculator(calculator_id)
    if calc is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown calculator: {calculator_id}",
        )
    return calc


@router.get("/calculators", response_model=list[CalculatorInfo])
async def calculators() -> list[CalculatorInfo]:
    """Return every available calculator with its input fields."""
    return list_calculators()


@router.get("/calculators/{calculator_id}", response_model=CalculatorInfo)
async def calculator_detail(calculator_id: str) -> CalculatorInfo:
    """Return one calculator's description and input fields."""
    return _require(calculator_id).info


@router.post("/calculators/{calculator_id}/validate", response_model=ValidationResponse)
async def validate_inputs(
    calculator_id: str,
    raw: dict[str, Any] = Body(...),
) -> ValidationResponse:
    """Check a raw input record and report every field problem at once.

    Always 200: an invalid record is a normal outcome here, reported in ``errors``.
    """
    calc = _require(calculator_id)
    result = calc.validate(raw)
    if not result.success:
        return ValidationResponse(success=False, errors=result.errors)
    return ValidationResponse(success=True, data=result.data.model_dump(by_alias=True))


@router.post("/calculators/{calculator_id}/calculate", response_model=CalculationResponse)
async def calculate(
    calculator_id: str,
    raw: dict[str, Any] = Body(...),
) -> CalculationResponse:
    """Run a calculator and return its ordered, labeled results.

    Field errors and domain errors propagate to the app-level handlers,
    which render them as 422 Problem Details.
    """
    calc = _require(calculator_id)
    results = calc.calculate(raw)
    logger.info("Calculated %s (%d results)", calculator_id, len(results))
    return CalculationResponse(calculator_id=calculator_id, results=results)
