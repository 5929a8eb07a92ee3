"""Error response schemas."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    detail: str
    errors: list[dict[str, Any]] | None = None
