# models/goal.py

from datetime import datetime, timezone
from sqlalchemy import (
    Column, Integer, String, Text, Boolean, DateTime, BigInteger, ForeignKey
)
from sqlalchemy.orm import relationship
from app.core.config import Base


class Goal(Base):
    __tablename__ = "goals"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    start_date = Column(DateTime(timezone=True), nullable=True)
    end_date = Column(DateTime(timezone=True), nullable=True)
    due_date = Column(DateTime(timezone=True), nullable=True)
    is_complete = Column(Boolean, default=False, nullable=False)
    progress = Column(Integer, default=0, nullable=False)

    updated_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc),
                        onupdate=lambda: datetime.now(timezone.utc))

    # ---- Cascades only; children are read through the CRUD layer ----
    tasks = relationship("Task", cascade="all, delete-orphan")
    activities = relationship("Activity", cascade="all, delete-orphan")
