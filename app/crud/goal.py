# crud/goal.py
from typing import Optional, List
from sqlalchemy.orm import Session

from app.models.goal import Goal


class GoalCRUD:
    """Record store operations for Goal."""

    def save(self, db: Session, *, db_obj: Goal) -> Goal:
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def get(self, db: Session, id: int) -> Optional[Goal]:
        return db.query(Goal).filter(Goal.id == id).first()

    def get_multi_by_user(self, db: Session, *, user_id: int) -> List[Goal]:
        return db.query(Goal).filter(Goal.user_id == user_id).order_by(Goal.id).all()

    def delete(self, db: Session, *, id: int) -> Optional[Goal]:
        """Delete a goal; its tasks and activities go with it."""
        obj = db.query(Goal).filter(Goal.id == id).first()
        if obj:
            db.delete(obj)
            db.commit()
        return obj

    def exists(self, db: Session, *, id: int) -> bool:
        return db.query(Goal.id).filter(Goal.id == id).first() is not None


crud_goal = GoalCRUD()
