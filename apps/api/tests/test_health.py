"""Tests for the health check endpoint."""

import pytest
from api.models.health import HealthCheckResponse
from common.models.user import UserRecord
from common.services.user_registry import InMemoryUserRegistry
from fastapi.testclient import TestClient


@pytest.mark.unit
def test_health_check(client: TestClient) -> None:
    """Test the health check endpoint returns 200."""
    response = client.get("/api/health")
    assert response.status_code == 200


@pytest.mark.unit
def test_health_check_response_schema(client: TestClient) -> None:
    """Test the health check endpoint response has correct schema."""
    data = client.get("/api/health").json()

    assert data["status"] == "ok"
    assert isinstance(data["version"], str)
    assert data["message"] == "API is healthy"
    assert data["users"] == 0


@pytest.mark.unit
def test_health_check_reports_registry_size(client: TestClient, registry: InMemoryUserRegistry) -> None:
    registry.add(UserRecord(name="Alice", age=30, email="alice@example.com"))
    registry.add(UserRecord(name="Bob", age=25, email="bob@x.com"))

    assert client.get("/api/health").json()["users"] == 2


@pytest.mark.unit
def test_health_check_response_defaults() -> None:
    response = HealthCheckResponse(status="ok", version="0.1.0")

    response_dict = response.model_dump()
    assert response_dict["environment"] is None
    assert response_dict["users"] == 0
