"""Row-to-record mapping for the user and goal tables."""
from kansas.models.goal import Goal
from kansas.models.user import UserInDB, UserStatus


def row_to_user(row: dict) -> UserInDB:
    """
    Convert a user table row to a UserInDB record.

    Args:
        row: Column name to value mapping from ``select *``

    Returns:
        Full user record, flags converted to booleans
    """
    return UserInDB(
        user_id=row["userId"],
        first_name=row["firstName"],
        last_name=row["lastName"],
        email=row["email"],
        user_status=UserStatus(row["userStatus"]),
        password_hash=row["userPasswordHash"],
        auth_hash=row.get("userAuthHash"),
        auth_timestamp=row.get("userAuthTimestamp"),
        last_ip=row.get("userLastIP"),
        failed_logons=row.get("userFailedLogons", 0),
        is_active=bool(row.get("isActive", 1)),
        is_deleted=bool(row.get("isDeleted", 0)),
        datetime_updated=row.get("datetimeUpdated"),
    )


def row_to_goal(row: dict) -> Goal:
    """Convert a goal table row to a Goal record."""
    return Goal(
        goal_id=row["goalId"],
        user_id=row["userId"],
        timespan=row["timespan"],
        goal_content=row["goalContent"],
    )
