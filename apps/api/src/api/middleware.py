"""Middleware setup for the FastAPI application."""

import logging
import time
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)

_DEV_ENVIRONMENTS = {"development", "dev", "local"}
_DEV_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


def get_allowed_origins(ui_url: str | None = None, environment: str = "development") -> list[str]:
    """Get list of allowed CORS origins.

    Args:
        ui_url: URL of the UI application, allowed over both http and https
        environment: Environment name; development adds the local dev servers

    Returns:
        Deduplicated list of allowed origin URLs
    """
    origins: list[str] = []

    if ui_url:
        base = ui_url.rstrip("/")
        origins.append(base)
        for scheme, other in (("http://", "https://"), ("https://", "http://")):
            if base.startswith(scheme):
                origins.append(other + base[len(scheme) :])

    if environment.lower() in _DEV_ENVIRONMENTS:
        origins.extend(_DEV_ORIGINS)

    return list(dict.fromkeys(origins))


def get_cors_headers(origin: str | None, ui_url: str | None = None, environment: str = "development") -> dict[str, str]:
    """Get CORS headers for a request origin, empty if the origin is not allowed."""
    if not origin or origin not in get_allowed_origins(ui_url, environment):
        return {}
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Methods": "*",
        "Access-Control-Allow-Headers": "*",
    }


async def log_requests(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    """Log method, path, status and duration of every request."""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s -> %d (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms
    )
    return response


def setup_middleware(app: FastAPI, ui_url: str | None = None, environment: str = "development") -> None:
    """Setup middleware for the FastAPI application.

    Args:
        app: FastAPI application instance
        ui_url: URL of the UI application for CORS
        environment: Environment name (development, production, etc.)
    """
    allowed_origins = get_allowed_origins(ui_url, environment)

    app.middleware("http")(log_requests)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    logger.info("CORS enabled for origins: %s (environment=%s)", allowed_origins, environment)
