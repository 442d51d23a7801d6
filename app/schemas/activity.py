# schemas/activity.py
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime


class ActivityBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    type: Optional[str] = Field(default=None, max_length=50)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


class ActivityCreate(ActivityBase):
    pass


class ActivityUpdate(BaseModel):
    """
    Partial update. Only these fields are updatable; timing fields change
    through start/stop only.
    """
    title: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None
    type: Optional[str] = Field(default=None, max_length=50)
    is_complete: Optional[bool] = None


class ActivityOut(ActivityBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    goal_id: int
    user_id: int
    start_time: Optional[datetime] = None
    stop_time: Optional[datetime] = None
    duration: Optional[int] = None
    is_complete: bool
    updated_at: Optional[datetime] = None
