# app/models/__init__.py

from app.core.config import Base

# Import all models here so metadata.create_all sees every table
from .user import User
from .goal import Goal
from .task import Task
from .activity import Activity

__all__ = [
    "Base",
    "User",
    "Goal",
    "Task",
    "Activity",
]
