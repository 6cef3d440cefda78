# tests/test_ticket_repository.py
from app.ticket.repository import TicketRepository
from app.ticket.schemas import TicketCreate, TicketUpdate


def test_create_and_find_by_id(db):
    repo = TicketRepository(db)
    ticket = repo.create(TicketCreate(title="T", description="D"))

    found = repo.find_by_id(ticket.id)
    assert found is not None
    assert found.title == "T"
    assert found.closed_at is None
    assert not found.is_closed


def test_find_by_id_with_unknown_or_malformed_id(db):
    repo = TicketRepository(db)
    assert repo.find_by_id(12345) is None
    assert repo.find_by_id("unkown-id") is None
    assert repo.find_by_id(None) is None


def test_update_only_touches_supplied_fields(db):
    repo = TicketRepository(db)
    ticket = repo.create(TicketCreate(title="T", description="D"))

    updated = repo.update(ticket, TicketUpdate(title="New"))
    assert updated.id == ticket.id
    assert updated.title == "New"
    assert updated.description == "D"


def test_list_page_in_insertion_order(db):
    repo = TicketRepository(db)
    ids = [repo.create(TicketCreate(title=f"T{i}", description="D")).id for i in range(5)]

    items, total = repo.list_page(offset=2, limit=2)
    assert total == 5
    assert [t.id for t in items] == ids[2:4]


def test_close_sets_closed_at(db):
    repo = TicketRepository(db)
    ticket = repo.create(TicketCreate(title="T", description="D"))
    ticket.close()
    repo.save(ticket)

    assert repo.find_by_id(ticket.id).closed_at is not None


def test_find_by_id_outside_integer_range(db):
    repo = TicketRepository(db)
    assert repo.find_by_id("99999999999999999999") is None
    assert repo.find_by_id(-(2**64)) is None


def test_list_page_past_the_end_skips_the_query(db):
    repo = TicketRepository(db)
    repo.create(TicketCreate(title="T", description="D"))

    items, total = repo.list_page(offset=15 * (10**20), limit=15)
    assert items == []
    assert total == 1
