# mywallet/models/__init__.py

"""
Centralizes model imports so that every table is registered on Base.metadata
before create_tables() runs.
"""

from mywallet.database import Base

from .user import User
from .session import LoginSession
from .ledger import LedgerEntry, EntryKind
