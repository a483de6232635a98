"""User registry with an in-memory implementation."""

import logging
from abc import ABC, abstractmethod

from common.models.user import UserRecord

logger = logging.getLogger(__name__)


def names_match(left: str, right: str) -> bool:
    """Compare two names character by character, ignoring case.

    A pair of characters matches when equal after upper-casing or after
    lower-casing, so "ΣΑΣ" matches both "σας" and "σασ".
    """
    if len(left) != len(right):
        return False
    return all(
        a == b or a.upper() == b.upper() or a.lower() == b.lower() for a, b in zip(left, right)
    )


class UserRegistry(ABC):
    """Abstract interface for the user registry."""

    @abstractmethod
    def add(self, record: UserRecord) -> bool:
        """Add a user record.

        Args:
            record: Fully parsed user record

        Returns:
            True once the record has been stored
        """
        pass

    @abstractmethod
    def list_all(self) -> list[UserRecord]:
        """List all user records in insertion order."""
        pass

    @abstractmethod
    def search_by_name(self, query: str) -> list[UserRecord]:
        """Search for users by name (exact match, case-insensitive).

        Args:
            query: Name to look for

        Returns:
            List of matching records in insertion order, empty if none match
        """
        pass

    def is_empty(self) -> bool:
        """Whether no user has been added yet."""
        return len(self) == 0

    @abstractmethod
    def __len__(self) -> int:
        pass


class InMemoryUserRegistry(UserRegistry):
    """Append-only, in-memory implementation of UserRegistry."""

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._records: list[UserRecord] = []

    def add(self, record: UserRecord) -> bool:
        self._records.append(record)
        logger.debug("Added user %r (total=%d)", record.name, len(self._records))
        return True

    def list_all(self) -> list[UserRecord]:
        return list(self._records)

    def search_by_name(self, query: str) -> list[UserRecord]:
        matches = [record for record in self._records if names_match(record.name, query)]
        logger.debug("Search for %r matched %d user(s)", query, len(matches))
        return matches

    def __len__(self) -> int:
        return len(self._records)
