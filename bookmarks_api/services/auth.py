"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bookmarks_api.config import Settings
from bookmarks_api.models.user import User
from bookmarks_api.services.exceptions import ConflictError, CredentialsError

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: int, email: str, settings: Settings) -> str:
    """Create a JWT access token."""
    now = datetime.now(UTC)
    to_encode = {
        "sub": str(user_id),
        "email": email,
        "iat": now,
        "exp": now + timedelta(minutes=settings.jwt_expiration_minutes),
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> dict | None:
    """Decode and validate a JWT token. Expired or forged tokens yield None."""
    try:
        return jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError:
        return None


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


class AuthService:
    """Signup and signin against the users table."""

    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.settings = settings

    def signup(self, email: str, password: str) -> str:
        """Create a user and return an access token for it."""
        if get_user_by_email(self.db, email):
            raise ConflictError("Email already registered")

        user = User(email=email, password_hash=get_password_hash(password))
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent signup for the same email
            self.db.rollback()
            raise ConflictError("Email already registered") from None
        self.db.refresh(user)

        logger.info(f"User {user.id} signed up")
        return create_access_token(user.id, user.email, self.settings)

    def signin(self, email: str, password: str) -> str:
        """Check credentials and return an access token."""
        user = get_user_by_email(self.db, email)
        if not user or not verify_password(password, user.password_hash):
            logger.warning("Failed signin attempt")
            raise CredentialsError()

        return create_access_token(user.id, user.email, self.settings)
