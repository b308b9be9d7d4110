"""Persistence layer for NexLink.

This module provides:
- Async PostgreSQL engine and session factory
- SQLAlchemy ORM models for the legacy platform tables
- Repositories returning frozen records keyed by raw integer IDs
"""

from nexlink.persistence.db import get_engine, get_session, init_db
from nexlink.persistence.repositories import (
    InvestorRecord,
    InvestorRepository,
    UnlockRecord,
    UnlockRepository,
    UserRecord,
    UserRepository,
)
from nexlink.persistence.tables import InvestorTable, InvestorUnlockTable, UserTable

__all__ = [
    # DB
    "get_engine",
    "get_session",
    "init_db",
    # Tables
    "UserTable",
    "InvestorTable",
    "InvestorUnlockTable",
    # Records
    "UserRecord",
    "InvestorRecord",
    "UnlockRecord",
    # Repositories
    "UserRepository",
    "InvestorRepository",
    "UnlockRepository",
]
