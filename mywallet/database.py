#!/usr/bin/env python
"""
mywallet/database.py

Sets up the SQLAlchemy database connection, session management, and the helper
that creates tables. All models (User, LoginSession, LedgerEntry) register
themselves on ``Base`` and are created in the database by ``create_tables()``.

Key Features:
- Loads environment variables from .env at project root
- Handles default SQLite or custom DB URLs (DATABASE_URL)
- Provides get_db() for FastAPI dependency injection
- Configures logging once for the whole application (LOG_LEVEL)
"""

import os
import logging
from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

# ------------------------------------------------------------------
# 1) Environment Setup
# ------------------------------------------------------------------
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(BASE_DIR)

dotenv_path = os.path.join(PROJECT_ROOT, ".env")
load_dotenv(dotenv_path=dotenv_path)

# ------------------------------------------------------------------
# 2) Logging Setup
# ------------------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)
logger.debug(f"Loaded .env from: {dotenv_path}")

DEFAULT_DATABASE_FILE = os.path.join(PROJECT_ROOT, "mywallet.db")
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DEFAULT_DATABASE_FILE}")
logger.debug(f"DATABASE_URL: {DATABASE_URL}")

# ------------------------------------------------------------------
# 3) SQLAlchemy Engine and Session Setup
# ------------------------------------------------------------------
connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    connect_args["check_same_thread"] = False  # SQLite concurrency

engine = create_engine(DATABASE_URL, connect_args=connect_args)
logger.debug("SQLAlchemy engine created")

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

# ------------------------------------------------------------------
# 4) FastAPI Dependency Injection
# ------------------------------------------------------------------
def get_db():
    """
    Provides a DB session for FastAPI routes. Yields a SessionLocal instance
    and closes it after use to prevent leaks.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

# ------------------------------------------------------------------
# 5) Table Initialization
# ------------------------------------------------------------------
def create_tables(bind=None):
    """
    Creates the users, login_sessions and ledger_entries tables if they do not
    exist yet. Idempotent: existing tables and their rows are left untouched.
    """
    # Import models to register with Base.metadata
    from mywallet import models  # noqa: F401

    target = bind if bind is not None else engine
    Base.metadata.create_all(bind=target)
    logger.info("Database tables created or verified.")
