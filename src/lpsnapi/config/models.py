"""Configuration models for lpsnapi.

This module contains all configuration-related Pydantic models used throughout the application.
"""

from pydantic import BaseModel, Field, field_validator


class LoggingConfig(BaseModel):
    """Structlog-based logging configuration."""

    level: str = "INFO"
    json_logs: bool | None = None  # None = auto-detect based on environment
    include_caller: bool = False  # Include file:line info (useful for debugging)
    extra_fields: dict[str, str] = Field(default_factory=lambda: {"service": "lpsnapi"})

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate and normalize the log level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level '{v}'.")
        return level


class LPSNConfig(BaseModel):
    """Configuration settings for the lpsnapi application."""

    # Upstream LPSN site
    base_url: str = "https://lpsn.dsmz.de"
    user_agent: str = "lpsnapi/1.0"
    http_timeout_seconds: float = Field(default=20.0, gt=0)  # Per-request timeout
    max_concurrency: int = Field(default=10, ge=1)  # Concurrent detail page fetches

    # Logging settings
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate the upstream base URL and drop any trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid base URL '{v}'. Must start with http:// or https://.")
        return v.rstrip("/")
