# app/api/routers/tasks.py
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_acting_user_id
from app.core.config import get_db
from app.schemas.common import SuccessResponse
from app.schemas.task import (
    TaskCompletionRequest,
    TaskCreate,
    TaskOut,
    TaskUpdate,
    TimeSpentRequest,
)
from app.services.task import task_service

router = APIRouter(prefix="/users/{user_id}/goals/{goal_id}/tasks", tags=["Tasks"])


@router.post("", response_model=TaskOut, status_code=status.HTTP_201_CREATED, summary="Create task")
def create_task(
    goal_id: int,
    task_data: TaskCreate,
    acting_user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db),
):
    return task_service.create_task(db, acting_user_id, goal_id, task_data)


@router.get("", response_model=List[TaskOut], summary="List tasks of a goal")
def list_tasks(
    goal_id: int,
    acting_user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db),
):
    return task_service.list_tasks(db, acting_user_id, goal_id)


@router.get("/{task_id}", response_model=TaskOut, summary="Get task")
def get_task(
    goal_id: int,
    task_id: int,
    acting_user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db),
):
    return task_service.get_task(db, acting_user_id, goal_id, task_id)


@router.put("/{task_id}", response_model=TaskOut, summary="Update task")
def update_task(
    goal_id: int,
    task_id: int,
    update_data: TaskUpdate,
    acting_user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db),
):
    return task_service.update_task(db, acting_user_id, goal_id, task_id, update_data)


@router.delete("/{task_id}", response_model=SuccessResponse, summary="Delete task")
def delete_task(
    goal_id: int,
    task_id: int,
    acting_user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db),
):
    task_service.delete_task(db, acting_user_id, goal_id, task_id)
    return SuccessResponse(message="Task deleted successfully")


@router.post("/{task_id}/time", response_model=TaskOut, summary="Record time spent")
def record_time_spent(
    goal_id: int,
    task_id: int,
    time_data: TimeSpentRequest,
    acting_user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db),
):
    """Adds **seconds** to the task's accumulated time."""
    return task_service.record_time_spent(
        db, acting_user_id, goal_id, task_id, time_data.seconds
    )


@router.put("/{task_id}/complete", response_model=TaskOut, summary="Mark task complete")
def mark_task_complete(
    goal_id: int,
    task_id: int,
    completion: TaskCompletionRequest,
    acting_user_id: int = Depends(get_acting_user_id),
    db: Session = Depends(get_db),
):
    return task_service.mark_complete(
        db, acting_user_id, goal_id, task_id, completion.is_complete
    )
