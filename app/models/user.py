# models/user.py

from datetime import datetime, timezone
from sqlalchemy import Column, String, Boolean, DateTime, BigInteger
from app.core.config import Base


class User(Base):
    __tablename__ = "users"

    # Assigned by IdentifierGenerator (or supplied by the caller), never by the database
    id = Column(BigInteger, primary_key=True, autoincrement=False, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    # ---- Account status ----
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc),
                        onupdate=lambda: datetime.now(timezone.utc))
