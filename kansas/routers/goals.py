"""Goal router - API endpoints for goal retrieval and management."""
from fastapi import APIRouter, Depends, status

from kansas.database import get_database
from kansas.models.goal import Goal, GoalCreate, GoalUpdate
from kansas.routers.responses import to_response
from kansas.services.goal_service import GoalService


router = APIRouter(prefix="/goal", tags=["goal"])


@router.get("", response_model=list[Goal])
async def list_goals(db=Depends(get_database)):
    """
    List all goals.

    - Returns an empty list when there are none
    """
    service = GoalService(db)
    return to_response(await service.list_goals(), "listing goals")


@router.get("/{goal_id}", response_model=Goal)
async def get_goal(goal_id: int, db=Depends(get_database)):
    """
    Get a single goal by id.

    - Returns 404 with no body if the goal does not exist
    - Returns 500 with no body if the database fails
    """
    service = GoalService(db)
    return to_response(await service.get_goal(goal_id), "getting goal")


@router.post("", response_model=Goal, status_code=status.HTTP_201_CREATED)
async def create_goal(goal: GoalCreate, db=Depends(get_database)):
    """
    Create a goal.

    - userId must reference an existing user
    """
    service = GoalService(db)
    return to_response(await service.create_goal(goal), "creating goal")


@router.put("/{goal_id}", response_model=Goal)
async def update_goal(goal_id: int, goal_update: GoalUpdate, db=Depends(get_database)):
    """Replace a goal's owner, timespan and content."""
    service = GoalService(db)
    return to_response(await service.update_goal(goal_id, goal_update), "updating goal")


@router.delete("/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_goal(goal_id: int, db=Depends(get_database)):
    """Delete a goal."""
    service = GoalService(db)
    return to_response(
        await service.delete_goal(goal_id),
        "deleting goal",
        success_status=status.HTTP_204_NO_CONTENT,
    )
