# schemas/task.py
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime


class TaskBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


class TaskCreate(TaskBase):
    is_complete: bool = False
    progress: int = Field(default=0, ge=0, le=100)


class TaskUpdate(BaseModel):
    """All optional; omitted or null fields keep their stored value."""
    title: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    is_complete: Optional[bool] = None
    progress: Optional[int] = Field(default=None, ge=0, le=100)


class TimeSpentRequest(BaseModel):
    seconds: int


class TaskCompletionRequest(BaseModel):
    is_complete: bool = True


class TaskOut(TaskBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    goal_id: int
    user_id: int
    is_complete: bool
    progress: int
    time_spent: int
    updated_at: Optional[datetime] = None
