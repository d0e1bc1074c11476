"""Authentication service - registration, login and sessions."""
import logging
from datetime import datetime, timezone
from typing import Optional

from jose import JWTError

from kansas.config import settings
from kansas.models.user import User, UserCreate, UserInDB, UserStatus
from kansas.stores.user_store import UserStore
from kansas.utils.auth import (
    create_auth_token,
    hash_password,
    verify_auth_token,
    verify_password,
)

logger = logging.getLogger(__name__)


class EmailAlreadyRegisteredError(ValueError):
    """A visible user already holds this email address."""


class InvalidCredentialsError(ValueError):
    """Email unknown or password wrong."""


class AccountLockedError(ValueError):
    """The account is locked after too many failed logons."""


class AuthService:
    """Service for handling user authentication."""

    def __init__(self, db):
        """Initialize service with database connection."""
        self.db = db
        self.users = UserStore(db)

    async def register_user(self, user_create: UserCreate) -> User:
        """
        Register a new user.

        Args:
            user_create: Registration data including the plain password

        Returns:
            Created user (without credentials)

        Raises:
            EmailAlreadyRegisteredError: If email is already registered
        """
        existing = await self.users.find_by_email(user_create.email)
        if existing:
            raise EmailAlreadyRegisteredError("Email already registered")

        user_id = await self.users.create_user(
            first_name=user_create.first_name,
            last_name=user_create.last_name,
            email=user_create.email,
            user_status=UserStatus.ACTIVE,
            password_hash=hash_password(user_create.password),
            auth_hash=None,
            auth_timestamp=None,
        )

        return User(
            user_id=user_id,
            first_name=user_create.first_name,
            last_name=user_create.last_name,
            email=user_create.email,
            user_status=UserStatus.ACTIVE,
        )

    async def login(self, email: str, password: str, ip_address: Optional[str]) -> str:
        """
        Check credentials and open a session.

        A wrong password counts as a failed logon; reaching
        max_failed_logons locks the account.

        Returns:
            Session token, also stored as the user's auth hash

        Raises:
            InvalidCredentialsError: If credentials are invalid
            AccountLockedError: If the account is locked
        """
        user = await self.users.find_by_email(email)
        if not user:
            raise InvalidCredentialsError("Invalid email or password")

        if user.user_status == UserStatus.LOCKED:
            raise AccountLockedError("Account locked")

        if not verify_password(password, user.password_hash):
            failed_logons = await self.users.increment_failed_logons(user.user_id)
            if failed_logons is not None and failed_logons >= settings.max_failed_logons:
                await self.users.lock_account(user.user_id)
                logger.warning("Locked user %s after %s failed logons",
                               user.user_id, failed_logons)
            raise InvalidCredentialsError("Invalid email or password")

        now = datetime.now(timezone.utc)
        token = create_auth_token(user.user_id, issued_at=now)
        await self.users.set_auth_session(user.user_id, token, now, ip_address)
        return token

    async def logout(self, user_id: int, ip_address: Optional[str]) -> None:
        """Clear the user's session."""
        await self.users.set_auth_session(user_id, None, None, ip_address)

    async def resolve_session(self, token: str) -> Optional[UserInDB]:
        """
        Find the user owning a session token.

        Returns:
            The user, or None if the token is invalid, expired or no longer
            the user's current session
        """
        try:
            user_id = verify_auth_token(token)
        except JWTError:
            return None

        user = await self.users.find_by_auth_hash(token)
        if user is None or user.user_id != user_id:
            return None
        return user
