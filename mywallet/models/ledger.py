"""
ledger.py

The LedgerEntry model: one deposit or withdrawal line in a user's wallet.

Entries are append-only. Each carries a sequence id that is scoped to its
owner and assigned from User.last_sequence_id, so (user_id, sequence_id)
is unique and ids are never reused. The amount is a non-negative magnitude
with two decimals; its meaning (money in or out) is carried by 'kind'.
"""

import enum
from datetime import date
from sqlalchemy import (
    Column,
    Integer,
    String,
    Date,
    Numeric,
    Enum,
    ForeignKey,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from mywallet.database import Base


class EntryKind(str, enum.Enum):
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"


class LedgerEntry(Base):
    """
    A single balance-affecting line in a user's ledger.
    """

    __tablename__ = "ledger_entries"
    __table_args__ = (
        UniqueConstraint("user_id", "sequence_id", name="uq_ledger_entries_user_sequence"),
    )

    # Surrogate primary key; clients only ever see sequence_id
    id = Column(Integer, primary_key=True, index=True)

    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)

    # 1, 2, 3, ... within a single user's ledger
    sequence_id = Column(Integer, nullable=False)

    # Calendar date the entry was recorded (rendered as DD/MM)
    date = Column(Date, nullable=False, default=date.today)

    # Always two fractional digits, never negative
    amount = Column(Numeric(14, 2), nullable=False)

    title = Column(String(255), nullable=False)

    kind = Column(
        Enum(EntryKind, values_callable=lambda kinds: [k.value for k in kinds], name="entry_kind"),
        nullable=False,
    )

    user = relationship("User", back_populates="entries")

    def __repr__(self):
        return (
            f"<LedgerEntry(user_id={self.user_id}, sequence_id={self.sequence_id}, "
            f"kind={self.kind}, amount={self.amount})>"
        )
