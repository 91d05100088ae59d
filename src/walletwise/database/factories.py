"""Store factory functions for creating ledger store instances."""

import os
from pathlib import Path
from typing import Optional

from walletwise.database.sqlalchemy_db import SQLAlchemyLedgerStore

DB_PATH_ENV = "WALLETWISE_DB_PATH"


def create_sqlite_store(database_path: Optional[str] = None) -> SQLAlchemyLedgerStore:
    """Create a SQLite ledger store instance.

    Args:
        database_path: Path to SQLite database file. If None, checks
            WALLETWISE_DB_PATH environment variable, then defaults to
            ~/.walletwise/walletwise.db

    Returns:
        SQLAlchemyLedgerStore instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get(DB_PATH_ENV)

    if database_path is None:
        db_dir = Path.home() / ".walletwise"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "walletwise.db")

    return SQLAlchemyLedgerStore(f"sqlite:///{database_path}")
