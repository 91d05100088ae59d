"""Domain layer for walletwise application."""

from walletwise.domain.transaction import TransactionService
from walletwise.domain.category import CategoryService
from walletwise.domain.wallet import WalletService
from walletwise.domain.spending_limit import SpendingLimitService
from walletwise.domain.engine import LedgerEngine, recompute

__all__ = [
    "TransactionService",
    "CategoryService",
    "WalletService",
    "SpendingLimitService",
    "LedgerEngine",
    "recompute",
]
