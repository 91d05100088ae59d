"""Aggregations of transactions for reporting and charts.

All functions are pure and accept transactions in any order.
"""

from collections import defaultdict
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Sequence

from walletwise.domain.entities import (
    BalancePoint,
    CategoryBreakdown,
    CategoryTotal,
    DateBucket,
    Transaction,
    TransactionType,
)
from walletwise.utils.date_parser import (
    INVALID_DATE_LABEL,
    format_display_date,
    format_short_date,
)

ZERO = Decimal("0.00")
HUNDRED = Decimal("100")
INITIAL_LABEL = "Initial"


def chronological_key(txn: Transaction) -> tuple[bool, datetime]:
    """Sort key placing malformed dates after every valid date."""
    return (txn.date is None, txn.date or datetime.min)


def sort_chronologically(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Stable ascending sort by date, malformed dates last."""
    return sorted(transactions, key=chronological_key)


def group_by_category(
    transactions: Iterable[Transaction], txn_type: TransactionType
) -> CategoryBreakdown:
    """Total amounts per category for one transaction type.

    Categories keep the order in which they are first seen so chart legends
    stay stable between refreshes. Percentages are 0 when the grand total
    is 0.
    """
    totals: dict[str, Decimal] = {}
    for txn in transactions:
        if txn.type != txn_type:
            continue
        totals[txn.category] = totals.get(txn.category, ZERO) + txn.amount

    grand_total = sum(totals.values(), ZERO)
    entries = tuple(
        CategoryTotal(
            category=category,
            total=total,
            percentage=(total / grand_total * HUNDRED) if grand_total else Decimal(0),
        )
        for category, total in totals.items()
    )
    return CategoryBreakdown(type=txn_type, entries=entries, grand_total=grand_total)


def group_by_date(
    transactions: Iterable[Transaction], newest_first: bool = False
) -> list[DateBucket]:
    """Group transactions into one bucket per displayed calendar day.

    Malformed dates share a single "Invalid Date" bucket which is always
    last, whichever direction the valid days are sorted in.
    """
    transactions = list(transactions)
    valid = [txn for txn in transactions if txn.date is not None]
    invalid = [txn for txn in transactions if txn.date is None]
    valid.sort(key=lambda txn: txn.date, reverse=newest_first)

    groups: dict[str, list[Transaction]] = defaultdict(list)
    for txn in valid:
        groups[format_display_date(txn.date)].append(txn)

    buckets = [_make_bucket(label, group) for label, group in groups.items()]
    if invalid:
        buckets.append(_make_bucket(INVALID_DATE_LABEL, invalid))
    return buckets


def _make_bucket(label: str, transactions: Sequence[Transaction]) -> DateBucket:
    first = transactions[0]
    return DateBucket(
        label=label,
        day=first.date.date() if first.date is not None else None,
        transactions=tuple(transactions),
        income=sum((t.amount for t in transactions if t.is_income), ZERO),
        expense=sum((t.amount for t in transactions if t.is_expense), ZERO),
    )


def group_by_type(
    transactions: Iterable[Transaction],
) -> dict[TransactionType, list[Transaction]]:
    """Split transactions into income and expense lists, keeping input order."""
    grouped: dict[TransactionType, list[Transaction]] = {
        TransactionType.INCOME: [],
        TransactionType.EXPENSE: [],
    }
    for txn in transactions:
        grouped[txn.type].append(txn)
    return grouped


def search_by_category(
    transactions: Iterable[Transaction], query: str
) -> list[Transaction]:
    """Case-insensitive substring match on category. Blank query matches all."""
    needle = query.strip().lower()
    if not needle:
        return list(transactions)
    return [txn for txn in transactions if needle in txn.category.lower()]


def running_balance(
    initial_balance: Decimal, transactions: Iterable[Transaction]
) -> list[BalancePoint]:
    """Cumulative balance after each transaction in chronological order.

    Point 0 is the initial balance. Transactions are sorted first and folded
    second, so the input order does not matter.
    """
    balance = Decimal(initial_balance)
    points = [BalancePoint(label=INITIAL_LABEL, balance=balance)]
    for txn in sort_chronologically(transactions):
        balance += txn.signed_amount
        points.append(
            BalancePoint(
                label=format_short_date(txn.date),
                balance=balance,
                transaction_id=txn.id,
            )
        )
    return points


def expense_series(transactions: Iterable[Transaction]) -> list[tuple[str, Decimal]]:
    """Expense amounts in chronological order with short date labels."""
    expenses = [txn for txn in transactions if txn.is_expense]
    return [
        (format_short_date(txn.date), txn.amount)
        for txn in sort_chronologically(expenses)
    ]
