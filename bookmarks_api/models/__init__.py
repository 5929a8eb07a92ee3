"""SQLAlchemy models."""

from bookmarks_api.models.bookmark import Bookmark
from bookmarks_api.models.user import User

__all__ = [
    "User",
    "Bookmark",
]
