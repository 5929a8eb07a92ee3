"""User schemas."""

from datetime import datetime

from pydantic import ConfigDict, Field

from bookmarks_api.schemas.base import CamelModel


class UserUpdate(CamelModel):
    """Profile fields a user may change. Omitted fields are left untouched."""

    first_name: str | None = Field(None, max_length=255)
    last_name: str | None = Field(None, max_length=255)


class UserResponse(CamelModel):
    """User information response. Never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    first_name: str | None
    last_name: str | None
    created_at: datetime
    updated_at: datetime
