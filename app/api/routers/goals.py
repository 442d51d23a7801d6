# app/api/routers/goals.py
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_acting_user_id
from app.core.config import get_db
from app.schemas.common import SuccessResponse
from app.schemas.goal import GoalCreate, GoalOut, GoalUpdate
from app.services.goal import goal_service

router = APIRouter(prefix="/users/{user_id}/goals", tags=["Goals"])


@router.post("", response_model=GoalOut, status_code=status.HTTP_201_CREATED, summary="Create goal")
def create_goal(
    goal_data: GoalCreate,
    acting_user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db),
):
    return goal_service.create_goal(db, acting_user_id, goal_data)


@router.get("", response_model=List[GoalOut], summary="List goals")
def list_goals(
    acting_user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db),
):
    return goal_service.list_goals(db, acting_user_id)


@router.get("/{goal_id}", response_model=GoalOut, summary="Get goal")
def get_goal(
    goal_id: int,
    acting_user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db),
):
    return goal_service.get_goal(db, acting_user_id, goal_id)


@router.put("/{goal_id}", response_model=GoalOut, summary="Update goal")
def update_goal(
    goal_id: int,
    update_data: GoalUpdate,
    acting_user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db),
):
    """Only non-null fields are applied."""
    return goal_service.update_goal(db, acting_user_id, goal_id, update_data)


@router.delete("/{goal_id}", response_model=SuccessResponse, summary="Delete goal")
def delete_goal(
    goal_id: int,
    acting_user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db),
):
    """Deletes the goal with all of its tasks and activities."""
    goal_service.delete_goal(db, acting_user_id, goal_id)
    return SuccessResponse(message="Goal deleted successfully")
