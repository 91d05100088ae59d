"""Balance calculation over a wallet's transactions."""

from decimal import Decimal
from typing import Iterable

from walletwise.domain.entities import Transaction, TransactionType, Wallet
from walletwise.domain.transaction import CENTS

ZERO = Decimal("0.00")


def total_for_type(
    transactions: Iterable[Transaction], txn_type: TransactionType
) -> Decimal:
    """Sum amounts of transactions of one type."""
    total = sum((txn.amount for txn in transactions if txn.type == txn_type), ZERO)
    return total.quantize(CENTS)


def total_income(transactions: Iterable[Transaction]) -> Decimal:
    return total_for_type(transactions, TransactionType.INCOME)


def total_expense(transactions: Iterable[Transaction]) -> Decimal:
    return total_for_type(transactions, TransactionType.EXPENSE)


def compute_balance(wallet: Wallet, transactions: Iterable[Transaction]) -> Decimal:
    """Derive the current balance of a wallet.

    balance = initial balance + total income - total expense. Decimal
    addition is exact at cent precision, so the result does not depend on
    the order of transactions.

    Args:
        wallet: Wallet providing the initial balance
        transactions: All transactions of the wallet, in any order

    Returns:
        Balance quantized to cents
    """
    transactions = list(transactions)
    balance = (
        Decimal(wallet.initial_balance)
        + total_income(transactions)
        - total_expense(transactions)
    )
    return balance.quantize(CENTS)
