"""
mywallet/routers/ledger.py

Router for the wallet ledger. Both endpoints require a bearer token; the
get_current_user dependency rejects the request with 401 before the ledger
is read or written.
"""

from fastapi import APIRouter, Depends, Response, status
from typing import List
from sqlalchemy.orm import Session

from mywallet.schemas.ledger import EntryCreate, EntryRead
from mywallet.services import ledger as ledger_service
from mywallet.models.user import User
from mywallet.utils.auth import get_current_user
from mywallet.database import get_db

router = APIRouter(tags=["balance"])


@router.get("/balance", response_model=List[EntryRead])
def list_balance(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """
    Return every entry in the caller's ledger, oldest first.
    """
    return ledger_service.list_entries(user.id, db)


@router.post("/balance", status_code=status.HTTP_201_CREATED, response_class=Response)
def add_balance_entry(
    entry: EntryCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Append a deposit or withdrawal to the caller's ledger.

    - 'value' is rounded to two decimals before it is stored.
    - The entry gets the next sequence id and today's date.
    """
    ledger_service.append_entry(user.id, entry.value, entry.title, entry.type, db)
    return Response(status_code=status.HTTP_201_CREATED)
