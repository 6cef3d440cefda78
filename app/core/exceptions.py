# app/core/exceptions.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INVALID_DATA_MESSAGE = "The given data was invalid."


class TicketValidationError(Exception):
    """Raised when a ticket payload breaks one or more field rules."""

    def __init__(self, errors: dict[str, list[str]]):
        super().__init__(INVALID_DATA_MESSAGE)
        self.errors = errors


class TicketNotFoundError(Exception):
    """Raised when no ticket exists for the requested id."""

    def __init__(self, ticket_id):
        super().__init__(f"Ticket {ticket_id!r} not found")
        self.ticket_id = ticket_id


def _invalid_response(errors: dict[str, list[str]]) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"message": INVALID_DATA_MESSAGE, "errors": errors},
    )


async def ticket_validation_handler(request: Request, exc: TicketValidationError):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors)
    return _invalid_response(exc.errors)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = loc[-1] if loc else "body"
        errors.setdefault(field, []).append(error.get("msg", "Invalid value"))
    logger.info("Rejected %s %s: %s", request.method, request.url.path, errors)
    return _invalid_response(errors)


async def ticket_not_found_handler(request: Request, exc: TicketNotFoundError):
    logger.warning("Ticket %r not found (%s %s)", exc.ticket_id, request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": "Ticket not found"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TicketValidationError, ticket_validation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(TicketNotFoundError, ticket_not_found_handler)
