# crud/activity.py
from datetime import datetime
from typing import Optional, List
from sqlalchemy.orm import Session

from app.models.activity import Activity


class ActivityCRUD:
    """Record store operations for Activity."""

    # =====================================================================
    # WRITE OPERATIONS
    # =====================================================================

    def save(self, db: Session, *, db_obj: Activity) -> Activity:
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def mark_stopped(
        self,
        db: Session,
        *,
        id: int,
        started_at: datetime,
        stop_time: datetime,
        duration: int,
    ) -> bool:
        """
        Stop a running activity with a single conditional UPDATE.

        Matches only while ``stop_time`` is still unset and ``start_time`` is
        still the ``started_at`` the duration was computed from. Of several
        concurrent callers exactly one sees ``True``, and a restart in between
        makes the stop miss.

        Returns:
            Whether this call performed the transition
        """
        matched = (
            db.query(Activity)
            .filter(
                Activity.id == id,
                Activity.start_time == started_at,
                Activity.stop_time.is_(None),
            )
            .update(
                {
                    Activity.stop_time: stop_time,
                    Activity.duration: duration,
                    Activity.is_complete: True,
                    Activity.updated_at: stop_time,
                },
                synchronize_session=False,
            )
        )
        db.commit()
        return matched == 1

    def delete(self, db: Session, *, id: int) -> Optional[Activity]:
        obj = db.query(Activity).filter(Activity.id == id).first()
        if obj:
            db.delete(obj)
            db.commit()
        return obj

    # =====================================================================
    # READ OPERATIONS
    # =====================================================================

    def get(self, db: Session, id: int) -> Optional[Activity]:
        return db.query(Activity).filter(Activity.id == id).first()

    def get_multi_by_goal(self, db: Session, *, goal_id: int) -> List[Activity]:
        return (
            db.query(Activity)
            .filter(Activity.goal_id == goal_id)
            .order_by(Activity.id)
            .all()
        )

    def get_multi_by_user(self, db: Session, *, user_id: int) -> List[Activity]:
        return (
            db.query(Activity)
            .filter(Activity.user_id == user_id)
            .order_by(Activity.id)
            .all()
        )

    def exists(self, db: Session, *, id: int) -> bool:
        return db.query(Activity.id).filter(Activity.id == id).first() is not None


crud_activity = ActivityCRUD()
