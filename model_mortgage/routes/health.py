# This project was developed with assistance from AI tools.
"""Health check routes."""

from fastapi import APIRouter

from ..schemas.health import ServiceHealth
from ..services.catalog import CALCULATORS

router = APIRouter()


@router.get("/", response_model=list[ServiceHealth])
async def health() -> list[ServiceHealth]:
    """Report API health and the number of registered calculators."""
    return [
        ServiceHealth(name="API", status="healthy"),
        ServiceHealth(
            name="Calculators",
            status="healthy" if CALCULATORS else "unavailable",
            detail=f"{len(CALCULATORS)} registered",
        ),
    ]
