"""Health check routes."""

from api.config import Settings, get_settings
from api.models.health import HealthCheckResponse
from api.services import get_user_registry
from common.services.user_registry import UserRegistry
from fastapi import APIRouter, Depends

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(
    settings: Settings = Depends(get_settings),
    registry: UserRegistry = Depends(get_user_registry),
) -> HealthCheckResponse:
    """Health check endpoint.

    Returns:
        HealthCheckResponse with status, version and registry size
    """
    return HealthCheckResponse(
        status="ok",
        version=settings.app_version,
        environment=settings.environment,
        users=len(registry),
    )
