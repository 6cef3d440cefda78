# app/ticket/services.py
import logging
from typing import Any, Mapping

from sqlalchemy.orm import Session

from app.core.exceptions import TicketNotFoundError, TicketValidationError
from app.core.pagination import build_page_meta, page_offset
from app.ticket.models import Ticket
from app.ticket.repository import TicketRepository
from app.ticket.schemas import TicketCreate, TicketOut, TicketUpdate
from app.ticket.validation import validate_ticket_payload

logger = logging.getLogger(__name__)

PER_PAGE = 15
CLOSED_MESSAGE = "Ticket closed successfully!"
BODY_NOT_OBJECT_MESSAGE = "The request body must be a JSON object"


def list_tickets(db: Session, page: int, path: str) -> dict[str, Any]:
    repo = TicketRepository(db)
    items, total = repo.list_page(page_offset(page, PER_PAGE), PER_PAGE)
    envelope = build_page_meta(total, page, PER_PAGE, path)
    envelope["data"] = [TicketOut.model_validate(t) for t in items]
    return envelope


def get_ticket(db: Session, ticket_id: int | str) -> Ticket:
    ticket = TicketRepository(db).find_by_id(ticket_id)
    if ticket is None:
        raise TicketNotFoundError(ticket_id)
    return ticket


def create_ticket(db: Session, payload: Mapping[str, Any]) -> Ticket:
    errors = validate_ticket_payload(payload)
    if errors:
        raise TicketValidationError(errors)
    ticket = TicketRepository(db).create(
        TicketCreate(title=payload["title"], description=payload["description"])
    )
    logger.info("Created ticket %s", ticket.id)
    return ticket


def update_ticket(db: Session, ticket_id: int | str, payload: Any) -> Ticket:
    repo = TicketRepository(db)
    ticket = repo.find_by_id(ticket_id)
    if ticket is None:
        raise TicketNotFoundError(ticket_id)

    if not isinstance(payload, Mapping):
        raise TicketValidationError({"body": [BODY_NOT_OBJECT_MESSAGE]})

    errors = validate_ticket_payload(payload, partial=True)
    if errors:
        raise TicketValidationError(errors)

    changes = {field: payload[field] for field in ("title", "description") if field in payload}
    ticket = repo.update(ticket, TicketUpdate(**changes))
    logger.info("Updated ticket %s (%s)", ticket.id, ", ".join(sorted(changes)))
    return ticket


def close_ticket(db: Session, ticket_id: int | str) -> Ticket:
    repo = TicketRepository(db)
    ticket = repo.find_by_id(ticket_id)
    if ticket is None:
        raise TicketNotFoundError(ticket_id)

    # closing again just moves closed_at forward
    ticket.close()
    ticket = repo.save(ticket)
    logger.info("Closed ticket %s at %s", ticket.id, ticket.closed_at)
    return ticket
