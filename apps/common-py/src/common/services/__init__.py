"""Common services package."""

from common.services.user_registry import InMemoryUserRegistry, UserRegistry

__all__ = [
    "InMemoryUserRegistry",
    "UserRegistry",
]
