# crud/task.py
from typing import Optional, List
from sqlalchemy.orm import Session

from app.models.task import Task


class TaskCRUD:
    """Record store operations for Task."""

    def save(self, db: Session, *, db_obj: Task) -> Task:
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def get(self, db: Session, id: int) -> Optional[Task]:
        return db.query(Task).filter(Task.id == id).first()

    def get_multi_by_goal(self, db: Session, *, goal_id: int) -> List[Task]:
        return db.query(Task).filter(Task.goal_id == goal_id).order_by(Task.id).all()

    def delete(self, db: Session, *, id: int) -> Optional[Task]:
        obj = db.query(Task).filter(Task.id == id).first()
        if obj:
            db.delete(obj)
            db.commit()
        return obj

    def exists(self, db: Session, *, id: int) -> bool:
        return db.query(Task.id).filter(Task.id == id).first() is not None


crud_task = TaskCRUD()
