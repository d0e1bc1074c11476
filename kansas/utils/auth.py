"""Password hashing and session token utilities."""
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import JWTError, jwt

from kansas.config import settings


def hash_password(password: str) -> str:
    """Salt and hash a plain password with bcrypt, for the userPasswordHash column."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    """Check a login attempt against a stored bcrypt hash."""
    return bcrypt.checkpw(plain_password.encode("utf-8"), password_hash.encode("utf-8"))


def create_auth_token(
    user_id: int,
    issued_at: Optional[datetime] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Create a signed session token for a user.

    The token is what gets stored as the user's auth hash.

    Args:
        user_id: User ID to encode in token
        issued_at: Session creation time, defaults to now
        expires_delta: Optional custom lifetime, defaults to auth_session_hours

    Returns:
        Encoded JWT token string

    Example:
        >>> token = create_auth_token(user_id=42)
        >>> isinstance(token, str)
        True
    """
    issued_at = issued_at or datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(hours=settings.auth_session_hours)

    to_encode = {
        "sub": str(user_id),
        "iat": issued_at,
        "exp": issued_at + expires_delta,
    }

    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_auth_token(token: str) -> int:
    """
    Verify and decode a session token.

    Args:
        token: JWT token string to verify

    Returns:
        User ID from token

    Raises:
        JWTError: If token is invalid, expired or has no usable subject
    """
    payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    subject = payload.get("sub")

    if subject is None or not subject.isdigit():
        raise JWTError("Token payload missing a numeric 'sub' claim")

    return int(subject)
