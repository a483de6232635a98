"""API response models."""

from api.models.health import HealthCheckResponse

__all__ = ["HealthCheckResponse"]
