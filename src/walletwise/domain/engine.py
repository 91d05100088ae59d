"""Recompute derived ledger state from a store snapshot.

``recompute`` is a pure function of a snapshot. ``LedgerEngine`` wraps it for
callers that refresh from a store: it serializes refreshes, keeps the latest
result, advances the threshold state of the active limit and hands fired
notifications to a notifier.
"""

import logging
import threading
from datetime import datetime
from decimal import Decimal
from typing import Optional

from walletwise.database.base import LedgerStore
from walletwise.domain import aggregation
from walletwise.domain.balance import compute_balance, total_expense, total_income
from walletwise.domain.entities import (
    CategoryBreakdown,
    DerivedState,
    LedgerSnapshot,
    Notification,
    TransactionType,
)
from walletwise.domain.errors import StoreUnavailableError
from walletwise.domain.notifier import Notifier
from walletwise.domain.spending_limit import compute_limit_spend, limit_status
from walletwise.domain.threshold import ThresholdMonitor

logger = logging.getLogger(__name__)

ZERO = Decimal("0.00")


def empty_state(now: Optional[datetime] = None) -> DerivedState:
    """Derived state reported when there is no wallet."""
    return DerivedState(
        has_wallet=False,
        balance=ZERO,
        total_income=ZERO,
        total_expense=ZERO,
        expenses_by_category=CategoryBreakdown(TransactionType.EXPENSE, (), ZERO),
        income_by_category=CategoryBreakdown(TransactionType.INCOME, (), ZERO),
        computed_at=now,
    )


def recompute(snapshot: LedgerSnapshot, now: Optional[datetime] = None) -> DerivedState:
    """Compute balance, aggregations and limit status for a snapshot.

    Args:
        snapshot: Wallet, transactions and active limit
        now: Reference moment for sliding limit windows

    Returns:
        DerivedState; has_wallet is False and all values are empty when the
        snapshot has no wallet

    Raises:
        InvalidAmountError: If the snapshot holds a limit with a non-positive
            amount
    """
    now = now or datetime.now()
    if snapshot.wallet is None:
        return empty_state(now)

    transactions = snapshot.transactions
    status = None
    if snapshot.limit is not None:
        spent = compute_limit_spend(snapshot.limit, transactions, now)
        status = limit_status(snapshot.limit, spent)

    return DerivedState(
        has_wallet=True,
        balance=compute_balance(snapshot.wallet, transactions),
        total_income=total_income(transactions),
        total_expense=total_expense(transactions),
        expenses_by_category=aggregation.group_by_category(
            transactions, TransactionType.EXPENSE
        ),
        income_by_category=aggregation.group_by_category(
            transactions, TransactionType.INCOME
        ),
        transactions_by_date=tuple(
            aggregation.group_by_date(transactions, newest_first=True)
        ),
        balance_series=tuple(
            aggregation.running_balance(snapshot.wallet.initial_balance, transactions)
        ),
        limit_status=status,
        computed_at=now,
    )


class LedgerEngine:
    """Refreshes derived state from a ledger store."""

    def __init__(self, store: LedgerStore, notifier: Optional[Notifier] = None):
        """Initialize engine.

        Args:
            store: Ledger store to read from
            notifier: Optional receiver of threshold notifications
        """
        self.store = store
        self.notifier = notifier
        self.monitor = ThresholdMonitor()
        self._lock = threading.Lock()
        self._state: Optional[DerivedState] = None

    @property
    def state(self) -> Optional[DerivedState]:
        """Result of the latest successful refresh."""
        return self._state

    def load_snapshot(self) -> LedgerSnapshot:
        """Read everything recompute needs from the store.

        Raises:
            StoreUnavailableError: If the store cannot be read
        """
        return LedgerSnapshot(
            wallet=self.store.get_wallet(),
            transactions=tuple(self.store.list_transactions()),
            limit=self.store.get_spending_limit(),
        )

    def refresh(self, now: Optional[datetime] = None) -> DerivedState:
        """Recompute from the store and notify on newly crossed thresholds.

        When the store fails, the previous state is kept and the error is
        raised to the caller.

        Raises:
            StoreUnavailableError: If the store cannot be read or written
            InvalidAmountError: If the stored limit has a non-positive amount
        """
        with self._lock:
            try:
                snapshot = self.load_snapshot()
            except StoreUnavailableError:
                logger.warning("Ledger store unavailable; keeping previous results")
                raise

            derived = recompute(snapshot, now)
            notification = self._advance_thresholds(derived)
            self._state = derived

        logger.debug(
            "Recomputed ledger: balance=%s, %d transactions",
            derived.balance,
            len(snapshot.transactions),
        )
        if notification is not None:
            self._deliver(notification)
        return derived

    def _advance_thresholds(self, derived: DerivedState) -> Optional[Notification]:
        status = derived.limit_status
        if status is None:
            return None

        persisted = self.store.get_threshold_state()
        self.monitor.restore(persisted)
        notification = self.monitor.check(status.limit, status.spent)
        if self.monitor.state == persisted:
            return notification

        if not self.store.save_threshold_state(self.monitor.state, persisted):
            # Another refresh recorded these flags first and owns the notification
            logger.debug("Threshold state changed by another refresh; dropping notification")
            self.monitor.restore(self.store.get_threshold_state())
            return None
        return notification

    def _deliver(self, notification: Notification) -> None:
        if self.notifier is None:
            return
        try:
            self.notifier.notify(notification)
        except Exception:
            logger.warning("Notifier failed to deliver '%s'", notification.title, exc_info=True)
