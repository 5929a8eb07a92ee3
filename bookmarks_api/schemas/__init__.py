"""Pydantic schemas for API requests and responses."""

from bookmarks_api.schemas.auth import AuthCredentials, Token
from bookmarks_api.schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from bookmarks_api.schemas.errors import ErrorResponse
from bookmarks_api.schemas.user import UserResponse, UserUpdate

__all__ = [
    "AuthCredentials",
    "Token",
    "UserResponse",
    "UserUpdate",
    "BookmarkCreate",
    "BookmarkUpdate",
    "BookmarkResponse",
    "ErrorResponse",
]
