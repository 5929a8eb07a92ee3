"""Authentication schemas."""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field

from bookmarks_api.schemas.validators import validate_email_address, validate_password_length

EmailAddress = Annotated[str, Field(max_length=255), AfterValidator(validate_email_address)]
Password = Annotated[str, Field(min_length=1), AfterValidator(validate_password_length)]


class AuthCredentials(BaseModel):
    """Email and password, used for both signup and signin."""

    email: EmailAddress
    password: Password


class Token(BaseModel):
    """JWT token response."""

    access_token: str
    token_type: str = "bearer"  # noqa: S105
