"""Shared pytest fixtures for walletwise tests."""

import tempfile
import os
from datetime import datetime
from decimal import Decimal

import pytest

from walletwise.database.factories import create_sqlite_store
from walletwise.domain.category import CategoryService
from walletwise.domain.entities import (
    LimitCategory,
    LimitPeriod,
    SpendingLimit,
    Transaction,
    TransactionType,
    Wallet,
)
from walletwise.domain.notifier import Notifier
from walletwise.domain.spending_limit import SpendingLimitService
from walletwise.domain.transaction import TransactionService
from walletwise.domain.wallet import WalletService


class RecordingNotifier(Notifier):
    """Notifier that keeps every notification it receives."""

    def __init__(self):
        self.notifications = []

    def notify(self, notification):
        self.notifications.append(notification)

    @property
    def levels(self):
        return [n.level for n in self.notifications]


def make_txn(
    amount,
    txn_type=TransactionType.EXPENSE,
    category="Food",
    date=datetime(2024, 1, 10, 12, 0),
    id=None,
    description=None,
):
    """Build a Transaction entity for tests."""
    return Transaction(
        id=id,
        amount=Decimal(str(amount)),
        category=category,
        type=TransactionType(txn_type),
        date=date,
        description=description,
    )


def make_limit(
    amount="200",
    category="Food",
    period=LimitPeriod.MONTHLY,
    start_date=datetime(2024, 1, 1),
    set_at=datetime(2024, 1, 5),
):
    """Build a SpendingLimit entity for tests."""
    return SpendingLimit(
        amount=Decimal(amount),
        category=LimitCategory(id="1", name=category),
        period=period,
        start_date=start_date,
        set_at=set_at,
    )


@pytest.fixture
def wallet():
    """A wallet entity with an initial balance of 100."""
    return Wallet(
        id=1,
        name="Main",
        currency="EUR",
        initial_balance=Decimal("100.00"),
        created_at=datetime(2024, 1, 1),
    )


@pytest.fixture
def temp_store():
    """Create a temporary SQLite store for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    store = create_sqlite_store(database_path=db_path)
    # Store the path for tests that need it
    store.database_path = db_path
    store.connect()
    store.initialize_schema()

    yield store

    store.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def wallet_service(temp_store):
    """Create a WalletService with a temporary store."""
    return WalletService(temp_store)


@pytest.fixture
def transaction_service(temp_store):
    """Create a TransactionService with a temporary store."""
    return TransactionService(temp_store)


@pytest.fixture
def category_service(temp_store):
    """Create a CategoryService with a temporary store."""
    return CategoryService(temp_store)


@pytest.fixture
def limit_service(temp_store):
    """Create a SpendingLimitService with a temporary store."""
    return SpendingLimitService(temp_store)


@pytest.fixture
def sample_wallet(wallet_service):
    """Create a wallet with initial balance 100."""
    wallet_service.create_wallet(name="Main", initial_balance="100")
    return wallet_service.get_wallet()


@pytest.fixture
def recording_notifier():
    """Notifier test double."""
    return RecordingNotifier()


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
