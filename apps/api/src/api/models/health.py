"""Health check response models."""

from pydantic import BaseModel, ConfigDict


class HealthCheckResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    environment: str | None = None
    users: int = 0
    message: str = "API is healthy"

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "ok",
                "version": "0.1.0",
                "environment": "development",
                "users": 2,
                "message": "API is healthy",
            }
        }
    )
