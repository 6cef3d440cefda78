# app/ticket/schemas.py
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TicketCreate(BaseModel):
    title: str
    description: str


class TicketUpdate(BaseModel):
    title: str | None = None
    description: str | None = None


class TicketOut(BaseModel):
    id: int
    title: str
    description: str
    created_at: datetime
    updated_at: datetime
    closed_at: datetime | None = None

    model_config = {"from_attributes": True}


class TicketPage(BaseModel):
    current_page: int
    data: list[TicketOut]
    first_page_url: str
    from_: int | None = Field(default=None, alias="from")
    next_page_url: str | None = None
    path: str
    per_page: int
    prev_page_url: str | None = None
    to: int | None = None

    model_config = ConfigDict(populate_by_name=True)


class MessageOut(BaseModel):
    message: str
