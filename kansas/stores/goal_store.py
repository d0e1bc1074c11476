"""Goal store - parameterized SQL for the goal table."""
from typing import Optional

from kansas.database import Database
from kansas.models.goal import Goal
from kansas.stores.mappers import row_to_goal


class GoalStore:
    """Data access for goal records."""

    def __init__(self, db: Database):
        """Initialize store with database connection."""
        self.db = db

    async def list_all(self) -> list[Goal]:
        """List every goal."""
        rows = await self.db.fetch_all("select * from goal order by goalId")
        return [row_to_goal(row) for row in rows]

    async def find_by_id(self, goal_id: int) -> Optional[Goal]:
        """Get a goal by ID, or None."""
        row = await self.db.fetch_one(
            "select * from goal where goalId=:goalId", {"goalId": goal_id}
        )
        return row_to_goal(row) if row else None

    async def create_goal(self, user_id: int, timespan: str, goal_content: str) -> int:
        """
        Create a goal.

        Raises:
            sqlite3.IntegrityError: If userId does not reference a user
        """
        return await self.db.insert(
            "insert into goal (userId, timespan, goalContent) "
            "values (:userId, :timespan, :goalContent)",
            {"userId": user_id, "timespan": timespan, "goalContent": goal_content},
        )

    async def update_goal(
        self, goal_id: int, user_id: int, timespan: str, goal_content: str
    ) -> None:
        """Replace a goal's fields. Unknown ids affect nothing."""
        await self.db.execute(
            "update goal set userId=:userId, timespan=:timespan, "
            "goalContent=:goalContent where goalId=:goalId",
            {
                "goalId": goal_id,
                "userId": user_id,
                "timespan": timespan,
                "goalContent": goal_content,
            },
        )

    async def delete_goal(self, goal_id: int) -> None:
        """Remove a goal row."""
        await self.db.execute(
            "delete from goal where goalId=:goalId", {"goalId": goal_id}
        )
