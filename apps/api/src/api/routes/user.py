"""User API routes."""

from api.services import get_user_registry
from common.models.user import UserRecord
from common.services.user_registry import UserRegistry
from fastapi import APIRouter, Depends, Query, status

router = APIRouter(prefix="/users", tags=["users"], redirect_slashes=False)


@router.post("", response_model=UserRecord, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=UserRecord, status_code=status.HTTP_201_CREATED)
async def add_user(user: UserRecord, registry: UserRegistry = Depends(get_user_registry)) -> UserRecord:
    registry.add(user)
    return user


@router.get("", response_model=list[UserRecord])
@router.get("/", response_model=list[UserRecord])
async def list_users(registry: UserRegistry = Depends(get_user_registry)) -> list[UserRecord]:
    return registry.list_all()


@router.get("/search", response_model=list[UserRecord])
async def search_users(
    name: str = Query(..., description="Name to match, ignoring case"),
    registry: UserRegistry = Depends(get_user_registry),
) -> list[UserRecord]:
    """Search users by exact name, ignoring case.

    Returns an empty list when nobody matches.
    """
    return registry.search_by_name(name)
