"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures middleware, exception handlers, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.adapters.completion.openai_chat import build_openai_client
from src.api.middleware import ApiCorsMiddleware
from src.api.routes import router as api_router
from src.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent.parent / "web" / "static"

# Router-generated errors carry Starlette's wording; normalize to the API's
_ERROR_MESSAGES = {
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method not allowed",
}

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "enhance",
        "description": "Prompt Enhancement API - Rewrite a prompt in a chosen style and creativity",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates the shared completion API client on startup
    - Closes the client on shutdown
    """
    settings: Settings = app.state.settings

    logger.info("Starting application...")
    client = build_openai_client(settings)
    app.state.openai_client = client
    if client is not None:
        logger.info("Completion client ready (model=%s)", settings.openai_model)

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    if client is not None:
        client.close()
        logger.info("Completion client closed")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render every HTTP error as {"error": <message>}."""
    message = _ERROR_MESSAGES.get(exc.status_code, exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Report malformed bodies as 400 instead of FastAPI's default 422.

    Field details are logged, not returned.
    """
    logger.warning("Invalid request body: %s", exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body"},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return a generic 500 so no internal detail reaches the client."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Explicit configuration; defaults to environment-loaded settings

    Returns:
        Configured FastAPI instance serving the API and the client page
    """
    settings = settings or get_settings()
    logging.getLogger("src").setLevel(settings.log_level.upper())

    app = FastAPI(
        title="prompt-enhancer",
        description="Prompt Enhancement API - Forwards prompts to a chat-completion model for rewriting",
        version="0.1.0",
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.openai_client = None

    app.add_middleware(ApiCorsMiddleware)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(api_router, prefix="/api")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint; the service has no backing store to probe."""
        return {"status": "healthy"}

    # Mounted last so API routes take precedence over the static page
    app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="web")

    return app


app = create_app()
