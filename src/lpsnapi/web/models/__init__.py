"""Web API contract models using Pydantic for validation."""

from lpsnapi.web.models.errors import ErrorResponse

__all__ = [
    "ErrorResponse",
]
