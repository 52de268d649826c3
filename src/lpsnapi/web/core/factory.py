"""Application factory for creating FastAPI application with dependency injection."""

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from lpsnapi.web.core.container import Container
from lpsnapi.web.core.lifespan import lifespan
from lpsnapi.web.middleware.request_logging import StructuredRequestLoggingMiddleware
from lpsnapi.web.routers import bacteria_api_routes


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Answer unknown paths with a plain-text 404, defer everything else to FastAPI."""
    if exc.status_code == 404:
        return PlainTextResponse("not found", status_code=404)
    return await http_exception_handler(request, exc)


def create_app() -> FastAPI:
    """Create FastAPI application with dependency injection.

    This factory function creates a fully configured FastAPI application with:
    - Dependency injection container setup
    - The bacteria lookup router
    - Structured request logging
    - Plain-text 404 responses for unknown paths

    Returns:
        FastAPI: The configured application instance.
    """
    container = Container()

    app = FastAPI(
        lifespan=lifespan,
        title="lpsnapi",
        description="Bacterial species lookups scraped from LPSN",
        version="1.0.0",
        redirect_slashes=False,
    )
    app.container = container  # type: ignore[attr-defined]

    # Add structured request logging middleware
    app.add_middleware(StructuredRequestLoggingMiddleware)

    app.add_exception_handler(StarletteHTTPException, not_found_handler)  # type: ignore[arg-type]

    # Wire dependencies for all router modules
    container.wire(
        modules=[
            "lpsnapi.web.routers.bacteria_api_routes",
        ]
    )

    app.include_router(bacteria_api_routes.router, tags=["Bacteria API"])

    return app
