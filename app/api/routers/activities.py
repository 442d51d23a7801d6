# app/api/routers/activities.py
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_acting_user_id
from app.core.config import get_db
from app.schemas.activity import ActivityCreate, ActivityOut, ActivityUpdate
from app.schemas.common import SuccessResponse
from app.services.activity import activity_service

router = APIRouter(prefix="/users/{user_id}/goals/{goal_id}/activities", tags=["Activities"])


@router.post("", response_model=ActivityOut, status_code=status.HTTP_201_CREATED, summary="Create activity")
def create_activity(
    goal_id: int,
    activity_data: ActivityCreate,
    acting_user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db),
):
    return activity_service.create_activity(db, acting_user_id, goal_id, activity_data)


@router.get("", response_model=List[ActivityOut], summary="List activities of a goal")
def list_activities(
    goal_id: int,
    acting_user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db),
):
    return activity_service.list_activities(db, acting_user_id, goal_id)


@router.get("/{activity_id}", response_model=ActivityOut, summary="Get activity")
def get_activity(
    goal_id: int,
    activity_id: int,
    acting_user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db),
):
    return activity_service.get_activity(db, acting_user_id, goal_id, activity_id)


@router.put("/{activity_id}", response_model=ActivityOut, summary="Update activity")
def update_activity(
    goal_id: int,
    activity_id: int,
    update_data: ActivityUpdate,
    acting_user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db),
):
    """Updatable: **title**, **description**, **type**, **is_complete**. Null keeps the current value."""
    return activity_service.update_activity(db, acting_user_id, goal_id, activity_id, update_data)


@router.delete("/{activity_id}", response_model=SuccessResponse, summary="Delete activity")
def delete_activity(
    goal_id: int,
    activity_id: int,
    acting_user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db),
):
    activity_service.delete_activity(db, acting_user_id, goal_id, activity_id)
    return SuccessResponse(message="Activity deleted successfully")


# =====================================================================
# LIFECYCLE
# =====================================================================

@router.put("/{activity_id}/start", response_model=ActivityOut, summary="Start activity timer")
def start_activity(
    goal_id: int,
    activity_id: int,
    acting_user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db),
):
    """Starts the timer; an already started activity is restarted."""
    return activity_service.start_activity(db, acting_user_id, goal_id, activity_id)


@router.put("/{activity_id}/stop", response_model=ActivityOut, summary="Stop activity timer")
def stop_activity(
    goal_id: int,
    activity_id: int,
    acting_user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db),
):
    """Stops a running activity and records its duration in seconds."""
    return activity_service.stop_activity(db, acting_user_id, goal_id, activity_id)
