"""Bookmark service with per-owner access control."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from bookmarks_api.models.bookmark import Bookmark
from bookmarks_api.services.exceptions import AccessDeniedError

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("title", "description", "link")


class BookmarkService:
    """CRUD over bookmarks, always scoped to the calling user.

    The user id passed to every method must come from the authenticated
    request, never from the request body.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_bookmarks(self, user_id: int) -> list[Bookmark]:
        """All bookmarks owned by the user, oldest first."""
        return (
            self.db.query(Bookmark)
            .filter(Bookmark.user_id == user_id)
            .order_by(Bookmark.id)
            .all()
        )

    def get_bookmark(self, user_id: int, bookmark_id: int) -> Bookmark:
        """Get a bookmark the user owns.

        Raises:
            AccessDeniedError: The bookmark does not exist or belongs to
                another user. The two cases are not distinguished.
        """
        bookmark = (
            self.db.query(Bookmark)
            .filter(Bookmark.id == bookmark_id, Bookmark.user_id == user_id)
            .first()
        )
        if bookmark is None:
            logger.warning(f"User {user_id} denied access to bookmark {bookmark_id}")
            raise AccessDeniedError()
        return bookmark

    def create_bookmark(self, user_id: int, data: dict[str, Any]) -> Bookmark:
        bookmark = Bookmark(
            title=data["title"],
            description=data.get("description"),
            link=data["link"],
            user_id=user_id,
        )
        self.db.add(bookmark)
        self.db.commit()
        self.db.refresh(bookmark)

        logger.info(f"User {user_id} created bookmark {bookmark.id}")
        return bookmark

    def edit_bookmark(self, user_id: int, bookmark_id: int, patch: dict[str, Any]) -> Bookmark:
        """Apply the provided fields to an owned bookmark. Omitted fields are unchanged."""
        bookmark = self.get_bookmark(user_id, bookmark_id)

        for field, value in patch.items():
            if field in EDITABLE_FIELDS:
                setattr(bookmark, field, value)

        self.db.commit()
        self.db.refresh(bookmark)
        return bookmark

    def delete_bookmark(self, user_id: int, bookmark_id: int) -> None:
        bookmark = self.get_bookmark(user_id, bookmark_id)

        self.db.delete(bookmark)
        self.db.commit()
        logger.info(f"User {user_id} deleted bookmark {bookmark_id}")
