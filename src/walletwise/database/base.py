"""Abstract ledger store interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

# Entities are only needed for annotations. Importing them at runtime would
# load domain/__init__.py, whose services import this module.
if TYPE_CHECKING:
    from walletwise.domain.entities import (
        Category,
        SpendingLimit,
        ThresholdState,
        Transaction,
        TransactionFilter,
        TransactionType,
        Wallet,
    )


class LedgerStore(ABC):
    """Abstract persistence interface for walletwise.

    Implementations raise StoreUnavailableError when the backing storage
    fails.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the store."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the store."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize storage schema (create tables)."""
        pass

    # Wallet operations
    @abstractmethod
    def create_wallet(self, name: str, currency: str, initial_balance: Decimal) -> int:
        """Create the wallet. Returns wallet ID."""
        pass

    @abstractmethod
    def get_wallet(self) -> Optional[Wallet]:
        """Get the wallet, or None if none exists."""
        pass

    @abstractmethod
    def clear_all(self) -> None:
        """Delete wallet, transactions, spending limit and custom categories."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        amount: Decimal,
        category: str,
        txn_type: TransactionType,
        date: Optional[datetime],
        description: Optional[str] = None,
    ) -> int:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def list_transactions(
        self, filter: Optional[TransactionFilter] = None
    ) -> list[Transaction]:
        """List transactions with optional filters.

        No ordering is guaranteed; callers sort explicitly. Date bounds
        exclude transactions with malformed dates.
        """
        pass

    # Category operations
    @abstractmethod
    def list_custom_categories(self, txn_type: TransactionType) -> list[Category]:
        """List custom categories of a type in creation order."""
        pass

    @abstractmethod
    def add_custom_category(self, txn_type: TransactionType, name: str) -> Category:
        """Add a custom category."""
        pass

    @abstractmethod
    def clear_custom_categories(self, txn_type: TransactionType) -> int:
        """Delete custom categories of a type. Returns number deleted."""
        pass

    # Spending limit operations
    @abstractmethod
    def get_spending_limit(self) -> Optional[SpendingLimit]:
        """Get the active spending limit."""
        pass

    @abstractmethod
    def save_spending_limit(self, limit: SpendingLimit) -> None:
        """Replace the active spending limit and reset its threshold state."""
        pass

    @abstractmethod
    def get_threshold_state(self) -> Optional[ThresholdState]:
        """Get threshold state of the active limit, or None without a limit."""
        pass

    @abstractmethod
    def save_threshold_state(
        self, state: ThresholdState, expected: Optional[ThresholdState]
    ) -> bool:
        """Persist threshold state for the active limit if nobody else has.

        The write is a compare-and-set: it only applies while the stored
        flags still equal ``expected``, the state read before deciding.
        None stands for the fresh state of the limit. State belonging to a
        limit other than the active one is ignored.

        Returns:
            True if the state was written
        """
        pass
