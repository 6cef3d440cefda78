# app/ticket/validation.py
"""Field rules for ticket payloads.

``validate_ticket_payload`` never raises; it returns a map of field name to
messages, empty when the payload is acceptable. Callers decide what to do with
a non-empty map (the services raise ``TicketValidationError``).
"""
from typing import Any, Mapping

from app.ticket.models import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH

FIELD_LIMITS = {
    "title": TITLE_MAX_LENGTH,
    "description": DESCRIPTION_MAX_LENGTH,
}

MISSING_FIELDS_MESSAGE = "You need to provide at least one of the fields"


def _field_errors(field: str, value: Any) -> list[str]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return [f"The {field} field is required for the ticket"]
    if not isinstance(value, str):
        return [f"The {field} field must be a string"]
    limit = FIELD_LIMITS[field]
    if len(value) > limit:
        return [f"The {field} field can only have up to {limit} characters"]
    return []


def validate_ticket_payload(payload: Mapping[str, Any], *, partial: bool = False) -> dict[str, list[str]]:
    """Check a create (``partial=False``) or update (``partial=True``) payload.

    On update only the supplied fields are checked, but at least one of them
    has to be there; that failure is reported under ``description``.
    """
    errors: dict[str, list[str]] = {}

    if partial and not any(field in payload for field in FIELD_LIMITS):
        errors["description"] = [MISSING_FIELDS_MESSAGE]
        return errors

    for field in FIELD_LIMITS:
        if partial and field not in payload:
            continue
        messages = _field_errors(field, payload.get(field))
        if messages:
            errors[field] = messages
    return errors
