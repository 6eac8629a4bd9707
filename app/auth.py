"""Authentication helpers: password hashing, session tokens and the
dependency resolving the calling user."""

import uuid

from fastapi import Depends, Header, HTTPException, status
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from . import crud
from .core import get_settings
from .database import get_db
from .logging import get_logger
from .models import User

pwd_context = CryptContext(schemes=get_settings().PASSWORD_HASH_SCHEMES, deprecated="auto")
logger = get_logger(__name__)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Compare a plain password with its hashed value."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Generate a password hash using the configured context."""
    return pwd_context.hash(password)


def create_token() -> str:
    """Create an opaque session token."""
    return str(uuid.uuid4())


def extract_token(authorization: str | None) -> str | None:
    """
    Pull the token out of an ``Authorization`` header value.

    Both the raw token and the ``Bearer <token>`` form are accepted.

    Args:
        authorization (str | None): Header value.

    Returns:
        str | None: Token, or ``None`` when the header is empty.
    """
    if not authorization:
        return None
    scheme, _, credentials = authorization.strip().partition(" ")
    if credentials and scheme.lower() == "bearer":
        return credentials.strip() or None
    return authorization.strip() or None


def get_current_user(
    authorization: str | None = Header(default=None),
    db: Session = Depends(get_db),
) -> User:
    """Dependency that returns the user owning the request's session token."""

    unauthorized = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
    )
    token = extract_token(authorization)
    if token is None:
        raise unauthorized
    user = crud.get_user_by_token(db, token)
    if user is None:
        logger.info("Rejected request with unknown token")
        raise unauthorized
    return user
