"""Bookmark schemas."""

from datetime import datetime

from pydantic import ConfigDict, Field, field_validator

from bookmarks_api.schemas.base import CamelModel


class BookmarkCreate(CamelModel):
    """Create a new bookmark."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=10000)
    link: str = Field(..., min_length=1, max_length=2048)


class BookmarkUpdate(CamelModel):
    """Partial bookmark update. Only fields present in the request are applied."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=10000)
    link: str | None = Field(None, min_length=1, max_length=2048)

    @field_validator("title", "link")
    @classmethod
    def reject_null(cls, value: str | None) -> str:
        """title and link are required columns; they can be changed but not cleared."""
        if value is None:
            raise ValueError("Field cannot be null")
        return value


class BookmarkResponse(CamelModel):
    """Bookmark response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None
    link: str
    user_id: int
    created_at: datetime
    updated_at: datetime
