"""Common models package."""

from common.models.user import UserRecord

__all__ = ["UserRecord"]
