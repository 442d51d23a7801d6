# schemas/goal.py
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime


class GoalBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    due_date: Optional[datetime] = None


class GoalCreate(GoalBase):
    is_complete: bool = False
    progress: int = Field(default=0, ge=0, le=100)


class GoalUpdate(BaseModel):
    """All optional; omitted or null fields keep their stored value."""
    title: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    due_date: Optional[datetime] = None
    is_complete: Optional[bool] = None
    progress: Optional[int] = Field(default=None, ge=0, le=100)


class GoalOut(GoalBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    is_complete: bool
    progress: int
    updated_at: Optional[datetime] = None
