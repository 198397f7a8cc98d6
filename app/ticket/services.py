# app/ticket/services.py
import logging
from datetime import datetime, timezone

from sqlalchemy import delete
from sqlalchemy.orm import Session, selectinload

from app.auth.schemas import CurrentUser
from app.core.config import Settings
from app.core.database import transaction
from app.core.errors import Forbidden, NotFound, ValidationError
from app.ticket.models import Ticket, TicketAssignee, TicketStatus
from app.ticket.schemas import TicketCreate, TicketUpdate
from app.user.services import find_missing_user_ids

logger = logging.getLogger(__name__)

COMPLETED_LOCK_MESSAGE = "Completed tickets can only be updated by admin"


def _with_assignees(db: Session):
    return db.query(Ticket).options(selectinload(Ticket.assignments))


def _check_assignees(db: Session, user_ids: list[str], settings: Settings) -> None:
    if not settings.VALIDATE_ASSIGNEES:
        return
    missing = find_missing_user_ids(db, user_ids)
    if missing:
        raise ValidationError(f"Unknown assignee ids: {', '.join(missing)}")


def is_user_assigned(db: Session, ticket_id: str, user_id: str) -> bool:
    return (
        db.query(TicketAssignee)
        .filter(TicketAssignee.ticket_id == ticket_id, TicketAssignee.user_id == user_id)
        .first()
        is not None
    )


def get_all_tickets(db: Session) -> list[Ticket]:
    return _with_assignees(db).order_by(Ticket.created_at).all()


def get_my_tickets(db: Session, user: CurrentUser) -> list[Ticket]:
    return (
        _with_assignees(db)
        .join(TicketAssignee, TicketAssignee.ticket_id == Ticket.id)
        .filter(TicketAssignee.user_id == user.id)
        .order_by(Ticket.created_at)
        .all()
    )


def get_ticket(db: Session, ticket_id: str) -> Ticket | None:
    return _with_assignees(db).filter(Ticket.id == ticket_id).first()


def get_ticket_for(db: Session, ticket_id: str, user: CurrentUser) -> Ticket:
    """Load a ticket the caller is allowed to see.

    Admins see every ticket; anyone else only tickets assigned to them.
    """
    ticket = get_ticket(db, ticket_id)
    if ticket is None:
        raise NotFound("Ticket not found")
    if not user.is_admin and not is_user_assigned(db, ticket_id, user.id):
        raise Forbidden()
    return ticket


def create_ticket(db: Session, payload: TicketCreate, creator: CurrentUser, settings: Settings) -> Ticket:
    assignee_ids = payload.assignee_ids
    _check_assignees(db, assignee_ids, settings)

    # status is always PENDING at creation
    db_ticket = Ticket(
        title=payload.title,
        description=payload.description,
        deadline=payload.deadline,
        status=TicketStatus.PENDING.value,
        created_by=creator.id,
        assignments=[TicketAssignee(user_id=uid) for uid in assignee_ids],
    )
    with transaction(db):
        db.add(db_ticket)
    logger.info("Ticket %s created by %s for %d assignee(s)", db_ticket.id, creator.id, len(assignee_ids))
    return db_ticket


def update_ticket(db: Session, ticket_id: str, payload: TicketUpdate, settings: Settings) -> None:
    changes = payload.scalar_changes()
    assignee_ids = payload.assignee_ids

    db_ticket = db.get(Ticket, ticket_id)
    if db_ticket is None:
        if settings.UPDATE_REQUIRES_EXISTING_TICKET:
            raise NotFound("Ticket not found")
        logger.info("Update for missing ticket %s ignored", ticket_id)
        return

    if assignee_ids is not None:
        _check_assignees(db, assignee_ids, settings)

    with transaction(db):
        for field, value in changes.items():
            setattr(db_ticket, field, value)
        if assignee_ids is not None:
            db.execute(delete(TicketAssignee).where(TicketAssignee.ticket_id == ticket_id))
            db.add_all(TicketAssignee(ticket_id=ticket_id, user_id=uid) for uid in assignee_ids)
        if changes or assignee_ids is not None:
            db_ticket.updated_at = datetime.now(timezone.utc)

    logger.info(
        "Ticket %s updated (fields=%s, assignees replaced=%s)",
        ticket_id,
        sorted(changes),
        assignee_ids is not None,
    )


def update_status(db: Session, ticket_id: str, status: TicketStatus, user: CurrentUser) -> None:
    """Move a ticket to ``status``.

    Checks run in a fixed order: existence, the COMPLETED lock, then
    assignment. Any status may follow any other; only admins may touch a
    completed ticket.
    """
    db_ticket = db.get(Ticket, ticket_id)
    if db_ticket is None:
        raise NotFound("Ticket not found")

    if db_ticket.status == TicketStatus.COMPLETED.value and not user.is_admin:
        raise Forbidden(COMPLETED_LOCK_MESSAGE)

    if not user.is_admin and not is_user_assigned(db, ticket_id, user.id):
        raise Forbidden()

    previous = db_ticket.status
    with transaction(db):
        db_ticket.status = status.value
        db_ticket.updated_at = datetime.now(timezone.utc)
    logger.info("Ticket %s status %s -> %s by %s", ticket_id, previous, status.value, user.id)
