"""
User endpoints.

Users can be fetched, created and replaced.  There is no list route
and no delete route for users.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from sports_backend.app.api.deps import get_user_service
from sports_backend.app.schemas.user import User
from sports_backend.app.services.user_service import UserService

router = APIRouter()


@router.get("/{user_id}", response_model=Dict[str, Any])
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> Dict[str, Any]:
    """Retrieve a single user by ID.  Responds 404 if the user is unknown."""
    return await service.get(user_id)


@router.post("", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
async def create_user(
    user: User,
    service: UserService = Depends(get_user_service),
) -> Dict[str, Any]:
    """Store a user under its own ``id``, overwriting any previous user with that id."""
    return await service.create(user)


@router.put("/{user_id}", response_model=Dict[str, Any])
async def replace_user(
    user_id: str,
    user: User,
    service: UserService = Depends(get_user_service),
) -> Dict[str, Any]:
    """Store the body under ``user_id``, creating the user if it does not exist."""
    return await service.replace(user_id, user)
