# app/schemas/__init__.py

from .common import SuccessResponse
from .user import (
    UserBase,
    UserCreate,
    UserUpdate,
    UserOut,
    LoginRequest,
    RefreshTokenRequest,
    TokenResponse,
)
from .goal import GoalBase, GoalCreate, GoalUpdate, GoalOut
from .task import (
    TaskBase,
    TaskCreate,
    TaskUpdate,
    TaskOut,
    TimeSpentRequest,
    TaskCompletionRequest,
)
from .activity import ActivityBase, ActivityCreate, ActivityUpdate, ActivityOut

__all__ = [
    "SuccessResponse",

    # Users & auth
    "UserBase", "UserCreate", "UserUpdate", "UserOut",
    "LoginRequest", "RefreshTokenRequest", "TokenResponse",

    # Goals
    "GoalBase", "GoalCreate", "GoalUpdate", "GoalOut",

    # Tasks
    "TaskBase", "TaskCreate", "TaskUpdate", "TaskOut",
    "TimeSpentRequest", "TaskCompletionRequest",

    # Activities
    "ActivityBase", "ActivityCreate", "ActivityUpdate", "ActivityOut",
]
