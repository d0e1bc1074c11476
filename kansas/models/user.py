"""User model definitions."""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr
from pydantic.alias_generators import to_camel


class UserStatus(str, Enum):
    """Account status codes as stored in the userStatus column."""

    PASSWORD_RESET = "N"
    ACTIVE = "A"
    LOCKED = "L"


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys, accepting either case on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserBase(CamelModel):
    """Base user fields."""

    first_name: str
    last_name: str
    email: str


class UserCreate(UserBase):
    """User registration model with password."""

    email: EmailStr
    password: str


class UserUpdate(UserBase):
    """Profile update model."""

    email: EmailStr


class User(UserBase):
    """User model without credentials (for API responses)."""

    user_id: int
    user_status: UserStatus
    datetime_updated: Optional[datetime] = None


class UserInDB(User):
    """Full user record as read from the user table."""

    password_hash: str
    auth_hash: Optional[str] = None
    auth_timestamp: Optional[datetime] = None
    last_ip: Optional[str] = None
    failed_logons: int = 0
    is_active: bool = True
    is_deleted: bool = False

    def to_public(self) -> User:
        """Drop credential and session fields."""
        return User.model_validate(self.model_dump(include=set(User.model_fields)))
