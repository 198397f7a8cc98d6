# app/ticket/models.py
import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship
from app.core.database import Base


def _utcnow():
    return datetime.now(timezone.utc)


class TicketStatus(str, enum.Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String, index=True, nullable=False)
    description = Column(Text, nullable=True)
    deadline = Column(DateTime(timezone=True), nullable=False)
    status = Column(String(20), default=TicketStatus.PENDING.value, nullable=False, index=True)
    created_by = Column(String(36), ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    assignments = relationship(
        "TicketAssignee",
        back_populates="ticket",
        cascade="all, delete-orphan",
        order_by="TicketAssignee.user_id",
    )

    @property
    def assignees(self) -> list[str]:
        return [a.user_id for a in self.assignments]


class TicketAssignee(Base):
    __tablename__ = "ticket_assignees"

    ticket_id = Column(String(36), ForeignKey("tickets.id", ondelete="CASCADE"), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.id"), primary_key=True, index=True)

    ticket = relationship("Ticket", back_populates="assignments")
