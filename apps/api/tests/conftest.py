"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
from api.main import app
from api.services import get_user_registry
from common.services.user_registry import InMemoryUserRegistry
from fastapi.testclient import TestClient


@pytest.fixture
def registry() -> InMemoryUserRegistry:
    """Create an empty registry for a single test."""
    return InMemoryUserRegistry()


@pytest.fixture
def client(registry: InMemoryUserRegistry) -> Iterator[TestClient]:
    """Create a FastAPI test client bound to the test's registry."""
    app.dependency_overrides[get_user_registry] = lambda: registry
    yield TestClient(app)
    app.dependency_overrides.clear()
