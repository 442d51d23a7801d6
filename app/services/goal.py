# services/goal.py
import logging
from typing import List

from sqlalchemy.orm import Session

from app.crud.goal import crud_goal
from app.models.goal import Goal
from app.schemas.goal import GoalCreate, GoalUpdate
from app.services.merge import merge_update
from app.services.ownership import OwnershipGuard, ownership_guard

logger = logging.getLogger(__name__)


class GoalService:
    """Goals scoped under their owning user."""

    def __init__(self, guard: OwnershipGuard = ownership_guard):
        self.crud = crud_goal
        self.guard = guard

    def load_goal(self, db: Session, user_id: int, goal_id: int) -> Goal:
        """Fetch a goal and verify it belongs to ``user_id``."""
        return self.guard.verify_goal(user_id, self.crud.get(db, id=goal_id), goal_id)

    # =====================================================================
    # CRUD
    # =====================================================================

    def create_goal(self, db: Session, user_id: int, goal_data: GoalCreate) -> Goal:
        goal = Goal(user_id=user_id, **goal_data.model_dump())
        goal = self.crud.save(db, db_obj=goal)
        logger.info(f"Created goal {goal.id} for user {user_id}")
        return goal

    def list_goals(self, db: Session, user_id: int) -> List[Goal]:
        return self.crud.get_multi_by_user(db, user_id=user_id)

    def get_goal(self, db: Session, user_id: int, goal_id: int) -> Goal:
        return self.load_goal(db, user_id, goal_id)

    def update_goal(
        self, db: Session, user_id: int, goal_id: int, update_data: GoalUpdate
    ) -> Goal:
        goal = self.load_goal(db, user_id, goal_id)
        merge_update(goal, update_data)
        return self.crud.save(db, db_obj=goal)

    def delete_goal(self, db: Session, user_id: int, goal_id: int) -> None:
        """Removes the goal together with its tasks and activities."""
        self.load_goal(db, user_id, goal_id)
        self.crud.delete(db, id=goal_id)
        logger.info(f"Deleted goal {goal_id} of user {user_id}")


goal_service = GoalService()
