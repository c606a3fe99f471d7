"""
mywallet/tests/test_sessions.py

Session issuer/validator tests against the service layer.
"""

import pytest

from mywallet.models.session import LoginSession
from mywallet.schemas.user import UserCreate
from mywallet.services.errors import InvalidSession
from mywallet.services.session import issue_token, resolve_token
from mywallet.services.user import register_user


@pytest.fixture
def user_id(db):
    return register_user(
        UserCreate(name="Ann", email="ann@x.com", password="abc123", password_confirm="abc123"),
        db,
    )


def test_issued_token_resolves_to_same_user(db, user_id):
    token = issue_token(user_id, db)

    assert resolve_token(token, db) == user_id


def test_tokens_are_unique_and_opaque(db, user_id):
    first = issue_token(user_id, db)
    second = issue_token(user_id, db)

    assert first != second
    assert user_id not in first


def test_multiple_sessions_per_user_all_resolve(db, user_id):
    tokens = [issue_token(user_id, db) for _ in range(3)]

    assert [resolve_token(t, db) for t in tokens] == [user_id] * 3
    assert db.query(LoginSession).filter_by(user_id=user_id).count() == 3


@pytest.mark.parametrize("token", ["", "not-a-token", "00000000-0000-0000-0000-000000000000"])
def test_unissued_token_never_resolves(db, user_id, token):
    issue_token(user_id, db)

    with pytest.raises(InvalidSession):
        resolve_token(token, db)
