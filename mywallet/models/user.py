"""
mywallet/models/user.py

Represents a registered wallet user. Each user has a unique e-mail (the sign-in
key), a bcrypt password hash, and an append-only ledger of deposit/withdraw
entries that is owned by, and deleted with, the user row.
"""

from __future__ import annotations
import os
import uuid
from typing import List, TYPE_CHECKING

import bcrypt
from sqlalchemy import Integer, String
from sqlalchemy.orm import relationship, Mapped, mapped_column

from mywallet.database import Base

if TYPE_CHECKING:
    from mywallet.models.ledger import LedgerEntry
    from mywallet.models.session import LoginSession

# bcrypt work factor; tests lower it through the environment
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


def _new_user_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    """
    The main user table. Each user has:
      - An opaque ID (PK)
      - A display name
      - A unique, lower-cased e-mail used for sign-in
      - A hashed password
      - A ledger of entries and a counter of the last sequence id handed out
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_user_id)

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Unique index: the store rejects a second user with the same e-mail
    email: Mapped[str] = mapped_column(String(320), unique=True, index=True, nullable=False)

    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    # Highest sequence id ever assigned in this user's ledger
    last_sequence_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    entries: Mapped[List[LedgerEntry]] = relationship(
        "LedgerEntry",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="LedgerEntry.sequence_id",
        doc="The user's ledger, in sequence order.",
    )

    sessions: Mapped[List[LoginSession]] = relationship(
        "LoginSession",
        back_populates="user",
        cascade="all, delete-orphan",
        doc="Bearer tokens issued to this user.",
    )

    def set_password(self, password: str) -> None:
        """
        Hash and store the user's password with bcrypt.
        Raises ValueError when the password exceeds bcrypt's 72-byte input.
        """
        password_bytes = password.encode("utf-8")
        if len(password_bytes) > BCRYPT_MAX_BYTES:
            raise ValueError(f"Password cannot exceed {BCRYPT_MAX_BYTES} bytes.")
        salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
        self.password_hash = bcrypt.hashpw(password_bytes, salt).decode("utf-8")

    def verify_password(self, password: str) -> bool:
        """
        Verify a plain-text password against the stored hash.
        """
        if not self.password_hash:
            return False
        password_bytes = password.encode("utf-8")
        if len(password_bytes) > BCRYPT_MAX_BYTES:
            return False
        return bcrypt.checkpw(password_bytes, self.password_hash.encode("utf-8"))

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
