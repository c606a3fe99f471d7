#!/usr/bin/env python
"""
create_db.py

Initializes the MyWallet database by calling 'create_tables()' from
'mywallet/database.py'. This ensures the users, login_sessions and
ledger_entries tables exist in the database named by DATABASE_URL.

Usage:
    python -m mywallet.create_db
"""

import sys
import logging

from mywallet.database import create_tables

logger = logging.getLogger(__name__)


def main() -> int:
    try:
        create_tables()
    except Exception:
        logger.exception("Error creating database tables")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
