"""FastAPI dependencies for authentication, database and services."""

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from bookmarks_api.config import Settings, get_settings
from bookmarks_api.database import get_db
from bookmarks_api.models.user import User
from bookmarks_api.services.auth import AuthService, decode_access_token
from bookmarks_api.services.bookmark_service import BookmarkService
from bookmarks_api.services.exceptions import UnauthenticatedError
from bookmarks_api.services.user_service import UserService

logger = logging.getLogger(__name__)

# Missing or non-bearer headers are reported by get_current_user, not by HTTPBearer
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> User:
    """Get the current authenticated user from the bearer token."""
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError("Not authenticated")

    payload = decode_access_token(credentials.credentials, settings)
    if payload is None:
        raise UnauthenticatedError()

    try:
        user_id = int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise UnauthenticatedError() from None

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        logger.warning(f"Token presented for missing user {user_id}")
        raise UnauthenticatedError("User not found")

    return user


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(db, settings)


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
) -> UserService:
    """Get user service with dependencies."""
    return UserService(db)


def get_bookmark_service(
    db: Annotated[Session, Depends(get_db)],
) -> BookmarkService:
    """Get bookmark service with dependencies."""
    return BookmarkService(db)
