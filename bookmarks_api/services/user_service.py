"""User profile service."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from bookmarks_api.models.user import User
from bookmarks_api.services.exceptions import NotFoundError

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("first_name", "last_name")


class UserService:
    """Reads and updates the authenticated user's profile."""

    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int) -> User:
        user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise NotFoundError("User not found")
        return user

    def edit_user(self, user_id: int, patch: dict[str, Any]) -> User:
        """Apply the provided profile fields and return the updated user.

        Keys outside of ``EDITABLE_FIELDS`` are ignored.
        """
        user = self.get_user(user_id)

        for field, value in patch.items():
            if field in EDITABLE_FIELDS:
                setattr(user, field, value)

        self.db.commit()
        self.db.refresh(user)
        logger.info(f"User {user_id} updated fields {sorted(patch)}")
        return user
