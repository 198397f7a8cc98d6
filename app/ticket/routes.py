# app/ticket/routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.core.config import get_settings, Settings
from app.auth.dependencies import get_current_user, require_role
from app.auth.schemas import CurrentUser
from app.ticket.schemas import (
    Message,
    TicketCreate,
    TicketCreated,
    TicketOut,
    TicketStatusUpdate,
    TicketUpdate,
)
from app.ticket import services as ticket_service
from app.user.models import Role

router = APIRouter(prefix="/tickets", tags=["Tickets"])

require_admin = require_role(Role.ADMIN)


@router.post("", response_model=TicketCreated, status_code=201)
def create(
    ticket: TicketCreate,
    admin: CurrentUser = Depends(require_admin),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    created = ticket_service.create_ticket(db, ticket, admin, settings)
    return {"ticketId": created.id}


@router.get("", response_model=list[TicketOut], dependencies=[Depends(require_admin)])
def list_all(db: Session = Depends(get_db)):
    return ticket_service.get_all_tickets(db)


@router.get("/my", response_model=list[TicketOut])
def list_mine(
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return ticket_service.get_my_tickets(db, user)


@router.get("/{ticket_id}", response_model=TicketOut)
def get(
    ticket_id: str,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return ticket_service.get_ticket_for(db, ticket_id, user)


@router.patch("/{ticket_id}", response_model=Message, dependencies=[Depends(require_admin)])
def update(
    ticket_id: str,
    ticket: TicketUpdate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    ticket_service.update_ticket(db, ticket_id, ticket, settings)
    return {"message": "Ticket updated"}


@router.patch("/{ticket_id}/status", response_model=Message)
def update_status(
    ticket_id: str,
    body: TicketStatusUpdate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    ticket_service.update_status(db, ticket_id, body.status, user)
    return {"message": "Status updated"}
