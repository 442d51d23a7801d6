# services/task.py
import logging
from typing import List

from sqlalchemy.orm import Session

from app.core.exceptions import validation_failure
from app.crud.task import crud_task
from app.models.task import Task
from app.schemas.task import TaskCreate, TaskUpdate
from app.services.goal import GoalService, goal_service
from app.services.merge import merge_update
from app.services.ownership import OwnershipGuard, ownership_guard

logger = logging.getLogger(__name__)


class TaskService:
    """Tasks under a goal; every call first verifies user -> goal -> task."""

    def __init__(
        self,
        goals: GoalService = goal_service,
        guard: OwnershipGuard = ownership_guard,
    ):
        self.crud = crud_task
        self.goals = goals
        self.guard = guard

    def load_task(self, db: Session, user_id: int, goal_id: int, task_id: int) -> Task:
        goal = self.goals.load_goal(db, user_id, goal_id)
        return self.guard.verify_task(goal, self.crud.get(db, id=task_id), task_id)

    # =====================================================================
    # CRUD
    # =====================================================================

    def create_task(
        self, db: Session, user_id: int, goal_id: int, task_data: TaskCreate
    ) -> Task:
        goal = self.goals.load_goal(db, user_id, goal_id)
        task = Task(goal_id=goal.id, user_id=goal.user_id, **task_data.model_dump())
        task = self.crud.save(db, db_obj=task)
        logger.info(f"Created task {task.id} under goal {goal.id}")
        return task

    def list_tasks(self, db: Session, user_id: int, goal_id: int) -> List[Task]:
        goal = self.goals.load_goal(db, user_id, goal_id)
        return self.crud.get_multi_by_goal(db, goal_id=goal.id)

    def get_task(self, db: Session, user_id: int, goal_id: int, task_id: int) -> Task:
        return self.load_task(db, user_id, goal_id, task_id)

    def update_task(
        self, db: Session, user_id: int, goal_id: int, task_id: int, update_data: TaskUpdate
    ) -> Task:
        task = self.load_task(db, user_id, goal_id, task_id)
        merge_update(task, update_data)
        return self.crud.save(db, db_obj=task)

    def delete_task(self, db: Session, user_id: int, goal_id: int, task_id: int) -> None:
        self.load_task(db, user_id, goal_id, task_id)
        self.crud.delete(db, id=task_id)
        logger.info(f"Deleted task {task_id} from goal {goal_id}")

    # =====================================================================
    # PROGRESS
    # =====================================================================

    def record_time_spent(
        self, db: Session, user_id: int, goal_id: int, task_id: int, seconds: int
    ) -> Task:
        """Add ``seconds`` to the task's accumulated time."""
        task = self.load_task(db, user_id, goal_id, task_id)
        if seconds <= 0:
            raise validation_failure("seconds", "must be positive")
        task.time_spent = (task.time_spent or 0) + seconds
        return self.crud.save(db, db_obj=task)

    def mark_complete(
        self, db: Session, user_id: int, goal_id: int, task_id: int, is_complete: bool = True
    ) -> Task:
        task = self.load_task(db, user_id, goal_id, task_id)
        task.is_complete = is_complete
        return self.crud.save(db, db_obj=task)


task_service = TaskService()
