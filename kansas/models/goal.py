"""Goal model definitions."""
from kansas.models.user import CamelModel


class GoalBase(CamelModel):
    """Base goal fields."""

    user_id: int
    timespan: str
    goal_content: str


class GoalCreate(GoalBase):
    """Goal creation model."""

    pass


class GoalUpdate(GoalBase):
    """Goal update model - replaces every field."""

    pass


class Goal(GoalBase):
    """Full goal model with database fields."""

    goal_id: int
