"""Goal service - wraps goal store calls in result variants."""
from kansas.models.goal import Goal, GoalCreate, GoalUpdate
from kansas.results import Failed, Found, NotFound, Result, capture, from_lookup
from kansas.stores.goal_store import GoalStore


class GoalService:
    """Service for handling goal operations."""

    def __init__(self, db):
        """Initialize service with database connection."""
        self.db = db
        self.goals = GoalStore(db)

    async def list_goals(self) -> Result[list[Goal]]:
        """List all goals. An empty table is Found([])."""
        return await capture(self.goals.list_all())

    async def get_goal(self, goal_id: int) -> Result[Goal]:
        """Get a single goal by id."""
        return await capture(self.goals.find_by_id(goal_id))

    async def create_goal(self, goal_create: GoalCreate) -> Result[Goal]:
        """
        Create a goal and return it with its generated id.

        A userId that references no user fails at the database.
        """
        try:
            goal_id = await self.goals.create_goal(
                user_id=goal_create.user_id,
                timespan=goal_create.timespan,
                goal_content=goal_create.goal_content,
            )
        except Exception as e:
            return Failed(e)

        return Found(Goal(goal_id=goal_id, **goal_create.model_dump()))

    async def update_goal(self, goal_id: int, goal_update: GoalUpdate) -> Result[Goal]:
        """Update a goal and return its stored state."""
        try:
            await self.goals.update_goal(
                goal_id=goal_id,
                user_id=goal_update.user_id,
                timespan=goal_update.timespan,
                goal_content=goal_update.goal_content,
            )
            goal = await self.goals.find_by_id(goal_id)
        except Exception as e:
            return Failed(e)

        return from_lookup(goal)

    async def delete_goal(self, goal_id: int) -> Result[Goal]:
        """Delete a goal, returning the removed record."""
        try:
            goal = await self.goals.find_by_id(goal_id)
            if goal is None:
                return NotFound()
            await self.goals.delete_goal(goal_id)
        except Exception as e:
            return Failed(e)

        return Found(goal)
