# app/api/routers/users.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_acting_user_id, get_user_service
from app.core.config import get_db
from app.core.security import ensure_acting_user, get_authenticated_user
from app.models.user import User
from app.schemas.activity import ActivityOut
from app.schemas.user import UserOut, UserUpdate
from app.services.activity import activity_service
from app.services.user import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/{user_id}", response_model=UserOut, summary="Get user profile")
def get_user(
    user_id: int,
    acting_user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db),
    service: UserService = Depends(get_user_service),
):
    return service.get_user(db, acting_user_id, user_id)


@router.put("/{user_id}", response_model=UserOut, summary="Update user profile")
def update_user(
    user_id: int,
    update_data: UserUpdate,
    acting_user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db),
    service: UserService = Depends(get_user_service),
):
    """
    Partial update. Fields that are omitted or null keep their current value;
    send an empty string to clear a text field.
    """
    return service.update_user(db, acting_user_id, user_id, update_data)


@router.put("/{user_id}/deactivate", response_model=UserOut, summary="Deactivate account")
def deactivate_user(
    user_id: int,
    current_user: User = Depends(get_authenticated_user),
    db: Session = Depends(get_db),
    service: UserService = Depends(get_user_service),
):
    """
    Deactivate the account. There is no reactivation; calling this again on
    a deactivated account returns it unchanged.
    """
    acting_user_id = ensure_acting_user(user_id, current_user)
    return service.deactivate_user(db, acting_user_id, user_id)


@router.get("/{user_id}/activities", response_model=List[ActivityOut], summary="List all my activities")
def list_user_activities(
    acting_user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db),
):
    return activity_service.list_user_activities(db, acting_user_id)
