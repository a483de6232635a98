"""Pytest configuration for common-py tests."""

import pytest

from common.models.user import UserRecord
from common.services.user_registry import InMemoryUserRegistry


@pytest.fixture
def registry() -> InMemoryUserRegistry:
    """Create an empty in-memory registry."""
    return InMemoryUserRegistry()


@pytest.fixture
def alice() -> UserRecord:
    return UserRecord(name="Alice", age=30, email="alice@example.com")
