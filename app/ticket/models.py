# app/ticket/models.py
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String
from app.core.database import Base

TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 500


def utcnow() -> datetime:
    # timestamps are stored with second precision
    return datetime.now(timezone.utc).replace(microsecond=0)


class Ticket(Base):
    __tablename__ = "ticket"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(TITLE_MAX_LENGTH), nullable=False)
    description = Column(String(DESCRIPTION_MAX_LENGTH), nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
    closed_at = Column(DateTime, nullable=True)

    @property
    def is_closed(self) -> bool:
        return self.closed_at is not None

    def close(self) -> None:
        self.closed_at = utcnow()
