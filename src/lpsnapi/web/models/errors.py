"""Error response models."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body returned when an upstream LPSN lookup fails."""

    detail: str = Field(..., description="Description of the failure")
