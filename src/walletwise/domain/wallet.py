"""Wallet domain service."""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from walletwise.database.base import LedgerStore
from walletwise.domain import errors
from walletwise.domain.entities import Wallet
from walletwise.domain.transaction import CENTS
from walletwise.utils.amount_parser import parse_amount

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "EUR"


class WalletService:
    """Service for managing the single wallet."""

    def __init__(self, store: LedgerStore):
        """Initialize wallet service.

        Args:
            store: Ledger store instance
        """
        self.store = store

    def create_wallet(
        self, name: str, initial_balance: Any, currency: str = DEFAULT_CURRENCY
    ) -> int:
        """Create the wallet.

        Args:
            name: Wallet name
            initial_balance: Starting balance; may be zero or negative
            currency: Display currency code

        Returns:
            Wallet ID

        Raises:
            ValidationError: If name is blank or balance is not a finite number
            ConflictError: If a wallet already exists
        """
        name = (name or "").strip()
        if not name:
            raise errors.ValidationError("Please enter a wallet name")

        try:
            balance = (
                initial_balance
                if isinstance(initial_balance, Decimal)
                else parse_amount(str(initial_balance))
            )
        except ValueError:
            raise errors.ValidationError(
                f"Invalid initial balance '{initial_balance}': please enter a number"
            )
        if not balance.is_finite():
            raise errors.ValidationError(
                f"Invalid initial balance '{initial_balance}': please enter a number"
            )

        existing = self.store.get_wallet()
        if existing is not None:
            raise errors.ConflictError(errors.wallet_exists(existing.name))

        try:
            balance = balance.quantize(CENTS)
        except InvalidOperation:
            raise errors.ValidationError(
                f"Invalid initial balance '{initial_balance}': number is too large"
            )

        wallet_id = self.store.create_wallet(
            name=name,
            currency=(currency or DEFAULT_CURRENCY).strip().upper(),
            initial_balance=balance,
        )
        logger.info("Created wallet '%s' with initial balance %s", name, balance)
        return wallet_id

    def get_wallet(self) -> Optional[Wallet]:
        """Return the wallet, or None if it has not been created."""
        return self.store.get_wallet()

    def require_wallet(self) -> Wallet:
        """Return the wallet.

        Raises:
            NotFoundError: If no wallet exists
        """
        wallet = self.store.get_wallet()
        if wallet is None:
            raise errors.NotFoundError(errors.no_wallet())
        return wallet

    def delete_wallet(self) -> None:
        """Delete the wallet and all ledger data.

        Raises:
            NotFoundError: If no wallet exists
        """
        wallet = self.require_wallet()
        self.store.clear_all()
        logger.info("Deleted wallet '%s' and all ledger data", wallet.name)
