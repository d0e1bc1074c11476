"""User store - parameterized SQL for the user table."""
from datetime import datetime, timezone
from typing import Optional

from kansas.database import Database
from kansas.models.user import UserInDB, UserStatus
from kansas.stores.mappers import row_to_user

VISIBLE = "isActive=1 and isDeleted=0"


def _timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class UserStore:
    """
    Data access for user records.

    Writes against an unknown id affect zero rows and return normally.
    Lookups return None when nothing visible matches. Database errors are
    left to propagate to the caller.
    """

    def __init__(self, db: Database):
        """Initialize store with database connection."""
        self.db = db

    async def set_auth_session(
        self,
        user_id: int,
        auth_hash: Optional[str],
        timestamp: Optional[datetime],
        last_ip: Optional[str],
    ) -> None:
        """
        Record an authentication session (user is logged in).

        Args:
            user_id: User that logged in
            auth_hash: Session token, None to clear the session
            timestamp: Session creation time
            last_ip: IP address of the login
        """
        await self.db.execute(
            'update "user" set userAuthHash=:authHash, userAuthTimestamp=:now, '
            "userLastIP=:lastIP where userId=:userId",
            {
                "userId": user_id,
                "authHash": auth_hash,
                "now": _timestamp(timestamp),
                "lastIP": last_ip,
            },
        )

    async def create_user(
        self,
        first_name: str,
        last_name: str,
        email: str,
        user_status: UserStatus,
        password_hash: str,
        auth_hash: Optional[str],
        auth_timestamp: Optional[datetime],
    ) -> int:
        """
        Create a user (registration).

        The failed logon counter starts at 0 and the last IP is empty.

        Returns:
            Generated userId of the new user
        """
        return await self.db.insert(
            'insert into "user" (firstName, lastName, email, userStatus, '
            "userPasswordHash, userAuthHash, userAuthTimestamp, userFailedLogons, "
            "userLastIP) values (:firstName, :lastName, :email, :userStatus, "
            ":userPasswordHash, :userAuthHash, :userAuthTimestamp, 0, null)",
            {
                "firstName": first_name,
                "lastName": last_name,
                "email": email,
                "userStatus": UserStatus(user_status).value,
                "userPasswordHash": password_hash,
                "userAuthHash": auth_hash,
                "userAuthTimestamp": _timestamp(auth_timestamp),
            },
        )

    async def update_profile(
        self, user_id: int, first_name: str, last_name: str, email: str
    ) -> None:
        """Update name and email, stamping the update time."""
        await self.db.execute(
            'update "user" set firstName=:firstName, lastName=:lastName, '
            "email=:email, datetimeUpdated=:now where userId=:userId",
            {
                "userId": user_id,
                "firstName": first_name,
                "lastName": last_name,
                "email": email,
                "now": _now(),
            },
        )

    async def soft_delete(self, user_id: int) -> None:
        """Mark a user inactive and deleted. The row is kept."""
        await self.db.execute(
            'update "user" set isActive=0, isDeleted=1, datetimeUpdated=:now '
            "where userId=:userId",
            {"userId": user_id, "now": _now()},
        )

    async def increment_failed_logons(self, user_id: int) -> Optional[int]:
        """
        Add one to the failed logon counter in a single statement.

        The new value is read inside the same transaction, so concurrent
        callers each see a distinct count.

        Returns:
            Counter value after the increment, or None if the id is unknown
        """
        params = {"userId": user_id}
        async with self.db.acquire() as conn:
            await conn.execute(
                'update "user" set userFailedLogons=userFailedLogons+1 where userId=:userId',
                params,
            )
            cursor = await conn.execute(
                'select userFailedLogons from "user" where userId=:userId', params
            )
            row = await cursor.fetchone()
        return row["userFailedLogons"] if row else None

    async def lock_account(self, user_id: int) -> None:
        """Set the account status to locked."""
        await self.db.execute(
            'update "user" set userStatus=:locked where userId=:userId',
            {"userId": user_id, "locked": UserStatus.LOCKED.value},
        )

    async def find_by_auth_hash(self, auth_hash: str) -> Optional[UserInDB]:
        """Get the visible user holding a session token."""
        row = await self.db.fetch_one(
            f'select * from "user" where userAuthHash=:hash and {VISIBLE}',
            {"hash": auth_hash},
        )
        return row_to_user(row) if row else None

    async def find_by_id(self, user_id: int) -> Optional[UserInDB]:
        """Get a visible user by ID."""
        row = await self.db.fetch_one(
            f'select * from "user" where userId=:userId and {VISIBLE}',
            {"userId": user_id},
        )
        return row_to_user(row) if row else None

    async def find_by_email(self, email: str) -> Optional[UserInDB]:
        """Get a visible user by email address."""
        row = await self.db.fetch_one(
            f'select * from "user" where email=:email and {VISIBLE}',
            {"email": email},
        )
        return row_to_user(row) if row else None

    async def list_all(self) -> list[UserInDB]:
        """List all visible users."""
        rows = await self.db.fetch_all(
            f'select * from "user" where {VISIBLE} order by userId'
        )
        return [row_to_user(row) for row in rows]
