"""Mapper functions to convert SQLAlchemy models to domain entities.

This layer isolates the conversion logic, making it easy to change when
the database schema changes.
"""

from decimal import Decimal

from walletwise.domain import entities as domain
from walletwise.database.models import (
    CustomCategory as ORMCustomCategory,
    SpendingLimit as ORMSpendingLimit,
    Transaction as ORMTransaction,
    Wallet as ORMWallet,
)

CENTS = Decimal("0.01")


def _money(value) -> Decimal:
    return Decimal(value).quantize(CENTS)


def wallet_to_domain(orm_wallet: ORMWallet) -> domain.Wallet:
    """Convert SQLAlchemy Wallet model to domain Wallet entity."""
    return domain.Wallet(
        id=orm_wallet.id,
        name=orm_wallet.name,
        currency=orm_wallet.currency,
        initial_balance=_money(orm_wallet.initial_balance),
        created_at=orm_wallet.created_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        amount=_money(orm_transaction.amount),
        category=orm_transaction.category,
        type=domain.TransactionType(orm_transaction.type),
        date=orm_transaction.date,
        description=orm_transaction.description,
    )


def category_to_domain(orm_category: ORMCustomCategory) -> domain.Category:
    """Convert SQLAlchemy CustomCategory model to domain Category entity."""
    return domain.Category(
        id=f"custom-{orm_category.id}",
        name=orm_category.name,
        type=domain.TransactionType(orm_category.type),
        provenance=domain.CategoryProvenance.CUSTOM,
    )


def spending_limit_to_domain(orm_limit: ORMSpendingLimit) -> domain.SpendingLimit:
    """Convert SQLAlchemy SpendingLimit model to domain SpendingLimit entity."""
    return domain.SpendingLimit(
        amount=_money(orm_limit.amount),
        category=domain.LimitCategory(
            id=orm_limit.category_id, name=orm_limit.category_name
        ),
        period=domain.LimitPeriod(orm_limit.period),
        start_date=orm_limit.start_date,
        set_at=orm_limit.set_at,
    )


def threshold_state_to_domain(orm_limit: ORMSpendingLimit) -> domain.ThresholdState:
    """Extract the threshold state stored with a spending limit row."""
    return domain.ThresholdState(
        limit_key=spending_limit_to_domain(orm_limit).key,
        notified_half=orm_limit.notified_half,
        notified_80=orm_limit.notified_80,
        notified_exceeded=orm_limit.notified_exceeded,
    )
