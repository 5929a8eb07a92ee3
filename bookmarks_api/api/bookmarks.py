"""Bookmark API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

from bookmarks_api.api.dependencies import get_bookmark_service, get_current_user
from bookmarks_api.models.user import User
from bookmarks_api.schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from bookmarks_api.services.bookmark_service import BookmarkService

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])

# Ids outside the Integer column range fail validation instead of reaching the store
MAX_ID = 2**31 - 1
BookmarkId = Annotated[int, Path(ge=1, le=MAX_ID)]


@router.get("", response_model=list[BookmarkResponse])
def get_bookmarks(
    current_user: Annotated[User, Depends(get_current_user)],
    bookmark_service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Get all bookmarks of the current user."""
    return bookmark_service.list_bookmarks(current_user.id)


@router.get("/{bookmark_id}", response_model=BookmarkResponse)
def get_bookmark(
    bookmark_id: BookmarkId,
    current_user: Annotated[User, Depends(get_current_user)],
    bookmark_service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Get a specific bookmark."""
    return bookmark_service.get_bookmark(current_user.id, bookmark_id)


@router.post("", response_model=BookmarkResponse, status_code=status.HTTP_201_CREATED)
def create_bookmark(
    bookmark_data: BookmarkCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    bookmark_service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Create a new bookmark."""
    return bookmark_service.create_bookmark(current_user.id, bookmark_data.model_dump())


@router.patch("/{bookmark_id}", response_model=BookmarkResponse)
def edit_bookmark(
    bookmark_id: BookmarkId,
    bookmark_data: BookmarkUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    bookmark_service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Update a bookmark. Fields not sent are left unchanged."""
    return bookmark_service.edit_bookmark(
        current_user.id, bookmark_id, bookmark_data.model_dump(exclude_unset=True)
    )


@router.delete("/{bookmark_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_bookmark(
    bookmark_id: BookmarkId,
    current_user: Annotated[User, Depends(get_current_user)],
    bookmark_service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Delete a bookmark."""
    bookmark_service.delete_bookmark(current_user.id, bookmark_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
