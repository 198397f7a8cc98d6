# app/user/models.py
import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String
from app.core.database import Base


class Role(str, enum.Enum):
    ADMIN = "admin"
    USER = "user"


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    role = Column(String(10), nullable=False, default=Role.USER.value)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
