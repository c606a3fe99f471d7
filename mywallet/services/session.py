"""
mywallet/services/session.py

Session issuer and validator. A session is an opaque uuid4 token bound to a
user id in the login_sessions table; no expiry is set and any number of
sessions may exist per user.
"""

import logging
import uuid
from sqlalchemy.orm import Session

from mywallet.models.session import LoginSession
from mywallet.services.errors import InvalidSession

logger = logging.getLogger(__name__)


def issue_token(user_id: str, db: Session) -> str:
    """
    Mint a new random token for user_id, persist the binding, return it.
    """
    token = str(uuid.uuid4())
    db.add(LoginSession(token=token, user_id=user_id))
    db.commit()
    logger.debug(f"Issued session for user id={user_id}")
    return token


def resolve_token(token: str, db: Session) -> str:
    """
    Return the user id bound to token. Raises InvalidSession for any token
    that was never issued, including empty or malformed strings.
    """
    if not token:
        raise InvalidSession("empty token")

    record = db.get(LoginSession, token)
    if record is None:
        raise InvalidSession("unknown token")
    return record.user_id
