"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from bookmarks_api.api.dependencies import get_current_user, get_user_service
from bookmarks_api.models.user import User
from bookmarks_api.schemas.user import UserResponse, UserUpdate
from bookmarks_api.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserResponse)
def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return current_user


@router.patch("", response_model=UserResponse)
def edit_user(
    user_data: UserUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Update the current user's profile."""
    return user_service.edit_user(current_user.id, user_data.model_dump(exclude_unset=True))
