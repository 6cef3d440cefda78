# tests/conftest.py
import os

# must be set before anything imports app.core.config
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from app.core.database import Base, SessionLocal, engine
from app.main import app


@pytest.fixture(autouse=True)
def fresh_schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_tickets(client):
    def _make(count: int) -> list[dict]:
        created = []
        for i in range(1, count + 1):
            r = client.post("/ticket", json={"title": f"Ticket {i}", "description": f"Body {i}"})
            assert r.status_code == 201
            created.append(r.json())
        return created

    return _make
