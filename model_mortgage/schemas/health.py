# This project was developed with assistance from AI tools.
"""Health check schemas."""

from pydantic import BaseModel


class ServiceHealth(BaseModel):
    """Health of one component."""

    name: str
    status: str
    detail: str = ""
