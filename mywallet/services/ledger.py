"""
mywallet/services/ledger.py

The wallet ledger: append-only, per-user, ordered list of deposits and
withdrawals.

Sequence ids come from User.last_sequence_id, bumped by a single UPDATE in
the same transaction as the entry insert. Two concurrent appends for one
user therefore serialize on the user row instead of both reading the same
ledger length; the (user_id, sequence_id) unique constraint backs this up.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import List

from sqlalchemy import update, select
from sqlalchemy.orm import Session

from mywallet.models.user import User
from mywallet.models.ledger import LedgerEntry, EntryKind
from mywallet.schemas.ledger import to_cents

logger = logging.getLogger(__name__)


def _next_sequence_id(user_id: str, db: Session) -> int:
    """
    Atomically increment and return the user's sequence counter.
    """
    db.execute(
        update(User)
        .where(User.id == user_id)
        .values(last_sequence_id=User.last_sequence_id + 1)
        .execution_options(synchronize_session=False)
    )
    return db.execute(
        select(User.last_sequence_id).where(User.id == user_id)
    ).scalar_one()


def append_entry(
    user_id: str,
    amount: Decimal,
    title: str,
    kind: EntryKind,
    db: Session,
    today: date | None = None,
) -> LedgerEntry:
    """
    Record a new entry at the end of the user's ledger and return it.

    The amount is stored rounded half-up to two decimals; the date is
    today's calendar date unless given.
    """
    try:
        sequence_id = _next_sequence_id(user_id, db)
        entry = LedgerEntry(
            user_id=user_id,
            sequence_id=sequence_id,
            date=today or date.today(),
            amount=to_cents(amount),
            title=title,
            kind=EntryKind(kind),
        )
        db.add(entry)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(entry)
    logger.info(
        f"Appended ledger entry user id={user_id} sequence_id={sequence_id} "
        f"kind={entry.kind.value} amount={entry.amount}"
    )
    return entry


def list_entries(user_id: str, db: Session) -> List[LedgerEntry]:
    """
    Return the user's full ledger in insertion (sequence) order.
    """
    return (
        db.query(LedgerEntry)
        .filter(LedgerEntry.user_id == user_id)
        .order_by(LedgerEntry.sequence_id)
        .all()
    )
