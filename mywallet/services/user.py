"""
mywallet/services/user.py

Credential store: registration and password authentication.
The stored hash is never returned to callers; only user identities leave
this module.
"""

import logging
from functools import lru_cache
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mywallet.models.user import User
from mywallet.schemas.user import UserCreate
from mywallet.services.errors import DuplicateUser, UserNotFound, InvalidCredentials

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _dummy_user() -> User:
    """
    A throwaway User with a real bcrypt hash, verified against on unknown
    e-mails so both sign-in failures cost one bcrypt comparison.
    """
    dummy = User(email="")
    dummy.set_password("dummypassword")
    return dummy


def get_user_by_email(email: str, db: Session) -> User | None:
    """
    Return a User by e-mail (case-insensitive), or None if not found.
    """
    return db.query(User).filter(User.email == email.lower()).first()


def get_user_by_id(user_id: str, db: Session) -> User | None:
    return db.get(User, user_id)


def register_user(user_data: UserCreate, db: Session) -> str:
    """
    Create a new User with an empty ledger and return its id.

    Raises DuplicateUser if the e-mail is taken. The up-front lookup covers
    the sequential case; the unique index on users.email covers two
    concurrent sign-ups racing past the lookup.
    """
    email = user_data.email.lower()
    if get_user_by_email(email, db):
        raise DuplicateUser(email)

    new_user = User(name=user_data.name, email=email)
    new_user.set_password(user_data.password)
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateUser(email) from e

    logger.info(f"Registered user id={new_user.id}")
    return new_user.id


def authenticate_user(email: str, password: str, db: Session) -> User:
    """
    Return the User whose e-mail and password match.

    Existence is checked before the stored hash is used, so an unknown
    e-mail fails cleanly with UserNotFound; a wrong password raises
    InvalidCredentials. Both paths run one bcrypt comparison.
    """
    user = get_user_by_email(email, db)
    if user is None:
        _dummy_user().verify_password(password)
        logger.info("Sign-in rejected: unknown e-mail")
        raise UserNotFound(email)

    if not user.verify_password(password):
        logger.info(f"Sign-in rejected: wrong password for user id={user.id}")
        raise InvalidCredentials(email)

    return user
