# app/ticket/repository.py
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.ticket.models import Ticket
from app.ticket.schemas import TicketCreate, TicketUpdate

# signed 64-bit INTEGER range of the primary key column
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


class TicketRepository:
    """Data access for ticket rows."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_id(self, ticket_id: int | str) -> Ticket | None:
        # ids come straight from the URL; anything that is not an int can't exist
        try:
            key = int(ticket_id)
        except (TypeError, ValueError):
            return None
        if not MIN_ID <= key <= MAX_ID:
            return None
        return self.db.get(Ticket, key)

    def create(self, payload: TicketCreate) -> Ticket:
        db_ticket = Ticket(**payload.model_dump())
        self.db.add(db_ticket)
        self.db.commit()
        self.db.refresh(db_ticket)
        return db_ticket

    def update(self, db_ticket: Ticket, payload: TicketUpdate) -> Ticket:
        for field, value in payload.model_dump(exclude_unset=True).items():
            setattr(db_ticket, field, value)
        return self.save(db_ticket)

    def save(self, db_ticket: Ticket) -> Ticket:
        self.db.add(db_ticket)
        self.db.commit()
        self.db.refresh(db_ticket)
        return db_ticket

    def count(self) -> int:
        return self.db.scalar(select(func.count()).select_from(Ticket)) or 0

    def list_page(self, offset: int, limit: int) -> tuple[list[Ticket], int]:
        """Return one slice of tickets in insertion order plus the total count.

        An offset at or past the end returns no items without querying them.
        """
        total = self.count()
        if offset >= total:
            return [], total
        items = self.db.scalars(
            select(Ticket).order_by(Ticket.id).offset(offset).limit(limit)
        ).all()
        return list(items), total
