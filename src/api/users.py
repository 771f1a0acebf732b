"""User API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Response

from src.api.auth import clear_session_cookie
from src.api.dependencies import get_current_user, get_user_directory, require_owner
from src.exceptions import ConflictError, NotFoundError, RequestValidationFailed
from src.models.user import User
from src.schemas.auth import UserResponse
from src.schemas.user import UserUpdate
from src.services.user_directory import UserDirectory

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def get_users(
    current_user: Annotated[User, Depends(get_current_user)],
    directory: Annotated[UserDirectory, Depends(get_user_directory)],
):
    """Get all users."""
    return directory.list_all()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    directory: Annotated[UserDirectory, Depends(get_user_directory)],
):
    """Get a specific user."""
    user = directory.find_by_id(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    user_data: UserUpdate,
    current_user: Annotated[User, Depends(require_owner)],
    directory: Annotated[UserDirectory, Depends(get_user_directory)],
):
    """Update the username or email of the current user."""
    update_data = user_data.model_dump(exclude_unset=True, exclude_none=True)
    if not update_data:
        raise RequestValidationFailed("Nothing to update")

    if "email" in update_data:
        existing = directory.find_by_email(update_data["email"])
        if existing is not None and existing.id != user_id:
            raise ConflictError("Email already registered")

    user = directory.update(user_id, **update_data)
    if user is None:
        raise NotFoundError("User not found")
    return user


@router.delete("/{user_id}", response_model=UserResponse)
async def delete_user(
    user_id: int,
    response: Response,
    current_user: Annotated[User, Depends(require_owner)],
    directory: Annotated[UserDirectory, Depends(get_user_directory)],
):
    """Delete the current user's account and end its session."""
    user = directory.delete_by_id(user_id)
    if user is None:
        raise NotFoundError("User not found")
    logger.info(f"Deleted user {user_id}")
    clear_session_cookie(response)
    return user
