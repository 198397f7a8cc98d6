# app/ticket/schemas.py
from datetime import datetime, timezone
from uuid import UUID

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from app.ticket.models import TicketStatus


def _to_utc(value: datetime | None) -> datetime | None:
    """Normalize to UTC; naive values (SQLite drops the offset) are read as UTC."""
    if value is None:
        return value
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _require_timestamp(value):
    # ISO-8601 date and time only: no unix numbers, no bare dates
    if value is None or isinstance(value, datetime):
        return value
    if not isinstance(value, str) or len(value.strip()) <= 10:
        raise PydanticCustomError(
            "iso_timestamp", "Deadline must be an ISO-8601 timestamp with a timezone"
        )
    return value


def _distinct(ids: list[UUID] | None) -> list[str] | None:
    if ids is None:
        return None
    return list(dict.fromkeys(str(i) for i in ids))


class TicketCreate(BaseModel):
    title: str = Field(..., min_length=1)
    description: str | None = None
    deadline: AwareDatetime
    assigned_user_ids: list[UUID] = Field(..., min_length=1, alias="assignedUserIds")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("deadline", mode="before")
    @classmethod
    def deadline_is_timestamp(cls, value):
        return _require_timestamp(value)

    @field_validator("deadline")
    @classmethod
    def deadline_in_utc(cls, value):
        return _to_utc(value)

    @property
    def assignee_ids(self) -> list[str]:
        return _distinct(self.assigned_user_ids)


class TicketUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    deadline: AwareDatetime | None = None
    assigned_user_ids: list[UUID] | None = Field(default=None, min_length=1, alias="assignedUserIds")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("deadline", mode="before")
    @classmethod
    def deadline_is_timestamp(cls, value):
        return _require_timestamp(value)

    @field_validator("deadline")
    @classmethod
    def deadline_in_utc(cls, value):
        return _to_utc(value)

    @property
    def assignee_ids(self) -> list[str] | None:
        return _distinct(self.assigned_user_ids)

    def scalar_changes(self) -> dict:
        """Provided, non-null scalar fields; nulls never clear a stored value."""
        return {
            field: value
            for field, value in self.model_dump(
                include={"title", "description", "deadline"}, exclude_unset=True
            ).items()
            if value is not None
        }


class TicketStatusUpdate(BaseModel):
    status: TicketStatus


class TicketCreated(BaseModel):
    ticketId: str


class TicketOut(BaseModel):
    id: str
    title: str
    description: str | None = None
    deadline: datetime
    status: TicketStatus
    created_by: str
    created_at: datetime
    updated_at: datetime
    assignees: list[str]

    model_config = {"from_attributes": True}

    @field_validator("deadline", "created_at", "updated_at")
    @classmethod
    def timestamps_in_utc(cls, value):
        return _to_utc(value)


class Message(BaseModel):
    message: str
