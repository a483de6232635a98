"""Service initialization and dependency injection."""

import logging

from common.services.user_registry import InMemoryUserRegistry, UserRegistry

logger = logging.getLogger(__name__)

# Service instances cache
_services_cache: dict[str, UserRegistry] = {}


def get_user_registry() -> UserRegistry:
    """Get the process-wide user registry instance.

    The registry is created on first use and lives until the process exits.

    Returns:
        UserRegistry instance
    """
    if "user_registry" not in _services_cache:
        _services_cache["user_registry"] = InMemoryUserRegistry()
        logger.info("Initialized InMemoryUserRegistry")

    return _services_cache["user_registry"]
