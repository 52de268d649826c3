"""Application lifespan management for startup and shutdown events."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from lpsnapi.web.core.container import Container

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Context manager for application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None: Control back to the application for normal operation.
    """
    # Get the container from the app (ignore type error - runtime dynamic attribute)
    container: Container = app.container  # type: ignore[attr-defined]
    config = container.config()

    logger.info(
        "Serving LPSN lookups from %s (timeout=%ss, max_concurrency=%d)",
        config.base_url,
        config.http_timeout_seconds,
        config.max_concurrency,
    )
    try:
        yield
    finally:
        logger.info("Shutting down lpsnapi")
