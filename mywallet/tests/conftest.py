"""
Shared pytest fixtures for the MyWallet test suite.

Uses FastAPI TestClient with an isolated temporary database per test so
tests never touch the real database.
"""

import os

# Must be set before mywallet modules are imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from mywallet.database import Base, get_db, create_tables
from mywallet.main import app

ANN = {
    "name": "Ann",
    "email": "ann@x.com",
    "password": "abc123",
    "password_confirm": "abc123",
}


@pytest.fixture
def test_engine(tmp_path):
    """Create a temporary SQLite database for a single test."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'wallet_test.db'}",
        connect_args={"check_same_thread": False},
    )
    create_tables(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return sessionmaker(bind=test_engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    """Direct SQLAlchemy session for tests that exercise the services."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    """TestClient bound to the temporary database."""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def ann_token(client):
    """Register Ann and return a bearer token for her."""
    r = client.post("/signup", json=ANN)
    assert r.status_code == 201, r.text
    r = client.post("/signin", json={"email": ANN["email"], "password": ANN["password"]})
    assert r.status_code == 200, r.text
    return r.json()["token"]
