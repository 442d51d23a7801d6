# models/activity.py

from datetime import datetime, timezone
from sqlalchemy import (
    Column, Integer, String, Text, Boolean, DateTime, BigInteger, ForeignKey
)
from app.core.config import Base


class Activity(Base):
    """
    A timed effort session against a goal.

    ``start_date``/``end_date`` is the planned window, ``start_time``/``stop_time``
    the actual one. ``duration`` is whole seconds and only set once stopped.
    """

    __tablename__ = "activities"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    goal_id = Column(Integer, ForeignKey("goals.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    type = Column(String(50), nullable=True)  # e.g. FITNESS, LEARNING, OTHER

    # ---- Planned window ----
    start_date = Column(DateTime(timezone=True), nullable=True)
    end_date = Column(DateTime(timezone=True), nullable=True)

    # ---- Actual timing ----
    start_time = Column(DateTime(timezone=True), nullable=True)
    stop_time = Column(DateTime(timezone=True), nullable=True)
    duration = Column(BigInteger, nullable=True)

    is_complete = Column(Boolean, default=False, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc),
                        onupdate=lambda: datetime.now(timezone.utc))
