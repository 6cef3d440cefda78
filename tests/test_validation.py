# tests/test_validation.py
from app.ticket.validation import validate_ticket_payload


def test_valid_create_payload():
    assert validate_ticket_payload({"title": "T", "description": "D"}) == {}


def test_bounds_are_inclusive():
    payload = {"title": "a" * 255, "description": "b" * 500}
    assert validate_ticket_payload(payload) == {}


def test_create_reports_every_failing_field():
    errors = validate_ticket_payload({})
    assert errors == {
        "title": ["The title field is required for the ticket"],
        "description": ["The description field is required for the ticket"],
    }


def test_blank_and_null_values_count_as_missing():
    errors = validate_ticket_payload({"title": "   ", "description": None})
    assert errors["title"] == ["The title field is required for the ticket"]
    assert errors["description"] == ["The description field is required for the ticket"]


def test_non_string_value():
    errors = validate_ticket_payload({"title": 42, "description": "D"})
    assert errors == {"title": ["The title field must be a string"]}


def test_partial_requires_at_least_one_field():
    errors = validate_ticket_payload({"status": "closed"}, partial=True)
    assert errors == {"description": ["You need to provide at least one of the fields"]}


def test_partial_only_checks_supplied_fields():
    assert validate_ticket_payload({"title": "New"}, partial=True) == {}
    errors = validate_ticket_payload({"description": "x" * 501}, partial=True)
    assert errors == {"description": ["The description field can only have up to 500 characters"]}
