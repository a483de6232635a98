"""Main FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from api.config import get_settings
from api.middleware import get_cors_headers, setup_middleware
from api.routes import api_router
from api.services import get_user_registry
from fastapi import FastAPI, Request, status
from fastapi.exceptions import HTTPException
from fastapi.responses import JSONResponse

settings = get_settings()

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Handle application lifespan events."""
    logger.info("%s v%s started", settings.app_name, settings.app_version)
    logger.info("Environment: %s", settings.environment)
    get_user_registry()

    yield

    logger.info("%s shutting down with %d user(s) registered", settings.app_name, len(get_user_registry()))


app = FastAPI(
    title=settings.app_name,
    description="In-memory user registry service",
    version=settings.app_version,
    lifespan=lifespan,
    redirect_slashes=False,
)

setup_middleware(app, ui_url=settings.ui_url, environment=settings.environment)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Turn unhandled exceptions into a 500 response that still carries CORS headers."""
    if isinstance(exc, HTTPException):
        raise exc

    logger.error("Unhandled exception: %s", exc, exc_info=True)

    cors_headers = get_cors_headers(
        request.headers.get("origin"), ui_url=settings.ui_url, environment=settings.environment
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
        headers=cors_headers,
    )


app.include_router(api_router)
