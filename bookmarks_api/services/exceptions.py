"""Service-layer exceptions.

Each exception maps to one HTTP status in ``bookmarks_api.main``; services
raise them without knowing about HTTP.
"""


class ServiceError(Exception):
    """Base class for errors reported back to the caller."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ServiceError):
    """Raised when request data is malformed or missing required fields."""

    def __init__(self, message: str = "Invalid request", errors: list | None = None) -> None:
        self.errors = errors or []
        super().__init__(message)


class CredentialsError(ServiceError):
    """
    Raised when signin fails.

    Unknown email and wrong password produce the same error so callers cannot
    probe which addresses are registered.
    """

    def __init__(self) -> None:
        super().__init__("Credentials incorrect")


class ConflictError(ServiceError):
    """Raised when creating a record that collides with an existing one."""


class UnauthenticatedError(ServiceError):
    """Raised when a request carries no usable bearer token."""

    def __init__(self, message: str = "Invalid authentication credentials") -> None:
        super().__init__(message)


class AccessDeniedError(ServiceError):
    """
    Raised when a bookmark is missing or owned by someone else.

    Both cases share this error so a caller cannot tell whether a bookmark id
    exists.
    """

    def __init__(self) -> None:
        super().__init__("Access denied")


class NotFoundError(ServiceError):
    """Raised when a record that should exist is gone."""
