# services/activity.py
import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy.orm import Session

from app.core.exceptions import validation_failure
from app.crud.activity import crud_activity
from app.models.activity import Activity
from app.schemas.activity import ActivityCreate, ActivityUpdate
from app.services.goal import GoalService, goal_service
from app.services.merge import merge_update
from app.services.ownership import OwnershipGuard, ownership_guard

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "type", "is_complete")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """SQLite hands timestamps back naive; they were stored as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def elapsed_seconds(start_time: datetime, stop_time: datetime) -> int:
    return int((as_utc(stop_time) - as_utc(start_time)).total_seconds())


class ActivityService:
    """
    Activities under a goal, including the timing lifecycle.

    Lifecycle states follow from the timing columns:

    - idle: ``start_time`` unset
    - running: ``start_time`` set, ``stop_time`` unset
    - stopped: both set, ``duration == stop_time - start_time``

    ``start`` is allowed from any state and re-arms the timer. ``stop`` is
    only allowed while running and at most one concurrent stop wins.
    """

    def __init__(
        self,
        goals: GoalService = goal_service,
        guard: OwnershipGuard = ownership_guard,
        clock=utcnow,
    ):
        self.crud = crud_activity
        self.goals = goals
        self.guard = guard
        self.clock = clock

    def load_activity(
        self, db: Session, user_id: int, goal_id: int, activity_id: int
    ) -> Activity:
        goal = self.goals.load_goal(db, user_id, goal_id)
        activity = self.crud.get(db, id=activity_id)
        return self.guard.verify_activity(user_id, goal, activity, activity_id)

    # =====================================================================
    # CRUD
    # =====================================================================

    def create_activity(
        self, db: Session, user_id: int, goal_id: int, activity_data: ActivityCreate
    ) -> Activity:
        """New activities start idle and take their owner from the goal."""
        goal = self.goals.load_goal(db, user_id, goal_id)
        activity = Activity(
            goal_id=goal.id,
            user_id=goal.user_id,
            is_complete=False,
            **activity_data.model_dump(),
        )
        activity = self.crud.save(db, db_obj=activity)
        logger.info(f"Created activity {activity.id} under goal {goal.id}")
        return activity

    def list_activities(self, db: Session, user_id: int, goal_id: int) -> List[Activity]:
        goal = self.goals.load_goal(db, user_id, goal_id)
        return self.crud.get_multi_by_goal(db, goal_id=goal.id)

    def list_user_activities(self, db: Session, user_id: int) -> List[Activity]:
        return self.crud.get_multi_by_user(db, user_id=user_id)

    def get_activity(
        self, db: Session, user_id: int, goal_id: int, activity_id: int
    ) -> Activity:
        return self.load_activity(db, user_id, goal_id, activity_id)

    def update_activity(
        self,
        db: Session,
        user_id: int,
        goal_id: int,
        activity_id: int,
        update_data: ActivityUpdate,
    ) -> Activity:
        activity = self.load_activity(db, user_id, goal_id, activity_id)
        merge_update(activity, update_data, fields=UPDATABLE_FIELDS)
        activity = self.crud.save(db, db_obj=activity)
        logger.info(f"Updated activity {activity.id}")
        return activity

    def delete_activity(
        self, db: Session, user_id: int, goal_id: int, activity_id: int
    ) -> None:
        self.load_activity(db, user_id, goal_id, activity_id)
        self.crud.delete(db, id=activity_id)
        logger.info(f"Deleted activity {activity_id}")

    # =====================================================================
    # LIFECYCLE
    # =====================================================================

    def start_activity(
        self, db: Session, user_id: int, goal_id: int, activity_id: int
    ) -> Activity:
        """
        Start (or restart) the timer.

        A running or stopped activity is re-armed: ``start_time`` is
        overwritten and the previous stop and duration are cleared.
        """
        activity = self.load_activity(db, user_id, goal_id, activity_id)

        if activity.start_time is not None:
            logger.info(f"Restarting activity {activity.id}")

        activity.start_time = self.clock()
        activity.stop_time = None
        activity.duration = None
        activity.is_complete = False

        activity = self.crud.save(db, db_obj=activity)
        logger.info(f"Started activity {activity.id}")
        return activity

    def stop_activity(
        self, db: Session, user_id: int, goal_id: int, activity_id: int
    ) -> Activity:
        """
        Stop a running activity, recording ``duration`` in whole seconds and
        marking it complete.

        Raises:
            ServiceError: VALIDATION_FAILURE if the activity was never
                started, is already stopped, or another caller stopped or
                restarted it first
        """
        activity = self.load_activity(db, user_id, goal_id, activity_id)

        if activity.start_time is None:
            raise validation_failure("start_time", "activity must be started before it is stopped")
        if activity.stop_time is not None:
            raise validation_failure("stop_time", "activity is already stopped")

        # a clock that stepped backwards must not yield a negative duration
        stop_time = max(self.clock(), as_utc(activity.start_time))
        duration = elapsed_seconds(activity.start_time, stop_time)

        stopped = self.crud.mark_stopped(
            db,
            id=activity.id,
            started_at=activity.start_time,
            stop_time=stop_time,
            duration=duration,
        )
        if not stopped:
            raise validation_failure("stop_time", "activity was stopped or restarted concurrently")

        db.refresh(activity)
        logger.info(f"Stopped activity {activity.id} after {duration}s")
        return activity


activity_service = ActivityService()
