# crud/user.py
from typing import Optional
from sqlalchemy.orm import Session

from app.models.user import User


class UserCRUD:
    """Record store operations for User."""

    # =====================================================================
    # WRITE OPERATIONS
    # =====================================================================

    def save(self, db: Session, *, db_obj: User) -> User:
        """Insert or update a user and return the refreshed row."""
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    # =====================================================================
    # READ OPERATIONS
    # =====================================================================

    def get(self, db: Session, id: int) -> Optional[User]:
        return db.query(User).filter(User.id == id).first()

    def get_by_email(self, db: Session, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == email).first()

    def exists(self, db: Session, *, id: int) -> bool:
        return db.query(User.id).filter(User.id == id).first() is not None


crud_user = UserCRUD()
