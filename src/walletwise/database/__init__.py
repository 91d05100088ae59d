"""Storage layer for walletwise application."""

from walletwise.database.base import LedgerStore
from walletwise.database.factories import create_sqlite_store

__all__ = ["LedgerStore", "create_sqlite_store"]
