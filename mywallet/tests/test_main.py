"""
mywallet/tests/test_main.py

Application-level behaviour: the health route and the catch-all 500 handler.
"""

from fastapi.testclient import TestClient

from mywallet.main import app
from mywallet.services import ledger as ledger_service

from conftest import ANN


def test_read_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "MyWallet API is running"}


def test_unexpected_error_is_500_without_detail(client, ann_token, monkeypatch):
    def broken_store(*args, **kwargs):
        raise RuntimeError("database is unavailable")

    monkeypatch.setattr(ledger_service, "list_entries", broken_store)
    quiet_client = TestClient(app, raise_server_exceptions=False)

    r = quiet_client.get("/balance", headers={"Authorization": f"Bearer {ann_token}"})

    assert r.status_code == 500
    assert "unavailable" not in r.text
    assert r.json() == {"detail": "Internal server error"}


def test_signup_then_signin_via_separate_clients(client):
    """Sessions live in the database, not in the client."""
    client.post("/signup", json=ANN)
    token = client.post(
        "/signin", json={"email": ANN["email"], "password": ANN["password"]}
    ).json()["token"]

    other_client = TestClient(app)
    r = other_client.get("/balance", headers={"Authorization": f"Bearer {token}"})

    assert r.status_code == 200
