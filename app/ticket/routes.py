# app/ticket/routes.py
from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Request
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.core.pagination import resolve_page
from app.ticket.schemas import MessageOut, TicketOut, TicketPage
from app.ticket import services as ticket_service

router = APIRouter(prefix="/ticket", tags=["Tickets"])


@router.get("", response_model=TicketPage)
def list_tickets(
    request: Request,
    page: str | None = Query(default=None, description="Page number, 15 tickets per page"),
    db: Session = Depends(get_db),
):
    path = str(request.url_for("list_tickets"))
    return ticket_service.list_tickets(db, resolve_page(page), path)


@router.post("", response_model=TicketOut, status_code=201)
def create(payload: dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    return ticket_service.create_ticket(db, payload)


@router.get("/{ticket_id}", response_model=TicketOut)
def get(ticket_id: str, db: Session = Depends(get_db)):
    return ticket_service.get_ticket(db, ticket_id)


@router.put("/{ticket_id}", response_model=TicketOut)
def update(
    ticket_id: str,
    payload: Any = Body(default=None),
    db: Session = Depends(get_db),
):
    # the id is looked up before the body shape is checked
    return ticket_service.update_ticket(db, ticket_id, {} if payload is None else payload)


@router.put("/{ticket_id}/close", response_model=MessageOut)
def close(ticket_id: str, db: Session = Depends(get_db)):
    ticket_service.close_ticket(db, ticket_id)
    return {"message": ticket_service.CLOSED_MESSAGE}
