"""User service - profile lookups and changes as result variants."""
from kansas.models.user import User, UserUpdate
from kansas.results import Conflict, Failed, Found, NotFound, Result, capture, from_lookup
from kansas.stores.user_store import UserStore


class UserService:
    """Service for reading and changing user profiles."""

    def __init__(self, db):
        """Initialize service with database connection."""
        self.db = db
        self.users = UserStore(db)

    async def list_users(self) -> Result[list[User]]:
        """List visible users without their credentials."""
        result = await capture(self.users.list_all())
        if isinstance(result, Found):
            return Found([user.to_public() for user in result.value])
        return result

    async def get_user(self, user_id: int) -> Result[User]:
        """Get a visible user by id."""
        result = await capture(self.users.find_by_id(user_id))
        if isinstance(result, Found):
            return Found(result.value.to_public())
        return result

    async def update_profile(self, user_id: int, user_update: UserUpdate) -> Result[User]:
        """
        Update name and email, returning the stored profile.

        An email held by another visible user is a Conflict, as at registration.
        """
        try:
            if await self.users.find_by_id(user_id) is None:
                return NotFound()
            holder = await self.users.find_by_email(user_update.email)
            if holder is not None and holder.user_id != user_id:
                return Conflict("Email already registered")
            await self.users.update_profile(
                user_id=user_id,
                first_name=user_update.first_name,
                last_name=user_update.last_name,
                email=user_update.email,
            )
            user = await self.users.find_by_id(user_id)
        except Exception as e:
            return Failed(e)

        return from_lookup(user.to_public() if user else None)

    async def delete_user(self, user_id: int) -> Result[None]:
        """Soft delete a visible user."""
        try:
            if await self.users.find_by_id(user_id) is None:
                return NotFound()
            await self.users.soft_delete(user_id)
        except Exception as e:
            return Failed(e)

        return Found(None)
