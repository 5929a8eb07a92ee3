"""
Shared validation functions for Pydantic schemas.
"""
from email_validator import EmailNotValidError, validate_email


def validate_email_address(value: str) -> str:
    """
    Check email syntax and return the normalized address.

    Deliverability is not checked, and reserved test domains such as
    ``mail.test`` are accepted.

    Raises:
        ValueError: If the address is not syntactically valid.
    """
    try:
        result = validate_email(value, check_deliverability=False, test_environment=True)
    except EmailNotValidError as e:
        raise ValueError(str(e)) from None
    return result.normalized


# bcrypt only hashes the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def validate_password_length(value: str) -> str:
    """
    Reject passwords longer than bcrypt can hash.

    Raises:
        ValueError: If the UTF-8 encoded password exceeds 72 bytes.
    """
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return value
