# services/ownership.py
import logging
from typing import Optional

from app.core.exceptions import not_found, unauthorized, ownership_mismatch
from app.models.user import User
from app.models.goal import Goal
from app.models.task import Task
from app.models.activity import Activity

logger = logging.getLogger(__name__)


class OwnershipGuard:
    """
    Checks the user -> goal -> task|activity chain over already-fetched rows.

    Each check returns the verified entity or raises a ``ServiceError``:
    NOT_FOUND when the row is missing, UNAUTHORIZED when it belongs to
    another user, OWNERSHIP_MISMATCH when it belongs to the acting user but
    sits under a different goal than the one addressed. Existence is always
    checked before ownership. Nothing here writes.
    """

    def verify_user(self, acting_user_id: int, user: Optional[User], user_id: int) -> User:
        if user is None:
            raise not_found("User", user_id)
        if user.id != acting_user_id:
            logger.info(f"User {acting_user_id} denied access to user {user_id}")
            raise unauthorized("You don't have permission to access this user")
        return user

    def verify_goal(self, user_id: int, goal: Optional[Goal], goal_id: int) -> Goal:
        if goal is None:
            raise not_found("Goal", goal_id)
        if goal.user_id != user_id:
            logger.info(f"User {user_id} denied access to goal {goal_id}")
            raise unauthorized("Goal does not belong to the user")
        return goal

    def verify_task(self, goal: Goal, task: Optional[Task], task_id: int) -> Task:
        """``goal`` must already have passed ``verify_goal``."""
        if task is None:
            raise not_found("Task", task_id)
        if task.user_id != goal.user_id:
            raise unauthorized("Task does not belong to the user")
        if task.goal_id != goal.id:
            raise ownership_mismatch("Task", goal.id, task.goal_id)
        return task

    def verify_activity(
        self, user_id: int, goal: Goal, activity: Optional[Activity], activity_id: int
    ) -> Activity:
        """``goal`` must already have passed ``verify_goal``."""
        if activity is None:
            raise not_found("Activity", activity_id)
        if activity.user_id != user_id:
            logger.info(f"User {user_id} denied access to activity {activity_id}")
            raise unauthorized("Activity does not belong to the user")
        if activity.goal_id != goal.id:
            raise ownership_mismatch("Activity", goal.id, activity.goal_id)
        return activity


ownership_guard = OwnershipGuard()
