"""Domain model entities for walletwise.

These are pure data classes representing business concepts, independent of
database schema. Everything the engine computes is derived from these values;
nothing here is mutated after construction.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional


class TransactionType(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class LimitPeriod(str, Enum):
    """Window a spending limit is measured over."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    CUSTOM = "custom"


class CategoryProvenance(str, Enum):
    """Where a category came from."""

    BUILTIN = "builtin"
    CUSTOM = "custom"


class ThresholdLevel(str, Enum):
    """Severity band of spending against a limit."""

    BELOW_50 = "below_50"
    AT_50 = "at_50"
    AT_80 = "at_80"
    EXCEEDED = "exceeded"


class NotificationKind(str, Enum):
    """Presentation kind understood by notifiers."""

    INFO = "info"
    WARN = "warn"
    ERROR = "error"


@dataclass(frozen=True)
class Transaction:
    """Income or expense record.

    ``date`` is None when the stored date could not be parsed; such
    transactions still count towards balances but render as "Invalid Date".
    """

    id: Optional[int]
    amount: Decimal
    category: str
    type: TransactionType
    date: Optional[datetime]
    description: Optional[str] = None

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE

    @property
    def signed_amount(self) -> Decimal:
        """Amount with the sign it contributes to the balance."""
        return self.amount if self.is_income else -self.amount


@dataclass(frozen=True)
class Wallet:
    """Wallet domain entity.

    ``initial_balance`` is captured once at creation. The live balance is
    always derived from transactions and is not part of this entity.
    """

    id: int
    name: str
    currency: str
    initial_balance: Decimal
    created_at: datetime


@dataclass(frozen=True)
class Category:
    """Transaction category with provenance tag."""

    id: str
    name: str
    type: TransactionType
    provenance: CategoryProvenance


@dataclass(frozen=True)
class LimitCategory:
    """Category reference stored with a spending limit."""

    id: str
    name: str


@dataclass(frozen=True)
class SpendingLimit:
    """Active spending limit. Edits replace the whole value."""

    amount: Decimal
    category: LimitCategory
    period: LimitPeriod
    start_date: datetime
    set_at: datetime

    @property
    def key(self) -> tuple:
        """Identity of this limit; threshold state is scoped to it."""
        return (
            self.amount,
            self.category.id,
            self.category.name,
            self.period.value,
            self.start_date.isoformat(),
            self.set_at.isoformat(),
        )

    def to_record(self) -> dict[str, Any]:
        """Return the persisted limit shape."""
        return {
            "amount": str(self.amount),
            "category": {"id": self.category.id, "name": self.category.name},
            "period": self.period.value,
            "start_date": self.start_date.isoformat(),
            "set_at": self.set_at.isoformat(),
        }


@dataclass(frozen=True)
class ThresholdState:
    """Which threshold notifications have fired for one limit."""

    limit_key: tuple
    notified_half: bool = False
    notified_80: bool = False
    notified_exceeded: bool = False

    @classmethod
    def fresh(cls, limit: SpendingLimit) -> "ThresholdState":
        return cls(limit_key=limit.key)


@dataclass(frozen=True)
class Notification:
    """Message handed to a Notifier."""

    kind: NotificationKind
    title: str
    detail: str
    level: ThresholdLevel


@dataclass(frozen=True)
class TransactionFilter:
    """Optional store-side filter for listing transactions."""

    type: Optional[TransactionType] = None
    category: Optional[str] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None


@dataclass(frozen=True)
class CategoryTotal:
    """Total and share of one category."""

    category: str
    total: Decimal
    percentage: Decimal


@dataclass(frozen=True)
class CategoryBreakdown:
    """Per-category totals for one transaction type, in first-seen order."""

    type: TransactionType
    entries: tuple[CategoryTotal, ...]
    grand_total: Decimal

    def totals(self) -> dict[str, Decimal]:
        return {entry.category: entry.total for entry in self.entries}

    def percentages(self) -> dict[str, Decimal]:
        return {entry.category: entry.percentage for entry in self.entries}


@dataclass(frozen=True)
class DateBucket:
    """Transactions that share one displayed calendar day."""

    label: str
    day: Optional[date]
    transactions: tuple[Transaction, ...]
    income: Decimal
    expense: Decimal

    @property
    def count(self) -> int:
        return len(self.transactions)

    @property
    def total(self) -> Decimal:
        return self.income + self.expense

    @property
    def net(self) -> Decimal:
        return self.income - self.expense


@dataclass(frozen=True)
class BalancePoint:
    """One point of the running-balance series."""

    label: str
    balance: Decimal
    transaction_id: Optional[int] = None


@dataclass(frozen=True)
class LimitStatus:
    """Spend measured against the active limit."""

    limit: SpendingLimit
    spent: Decimal
    ratio: Decimal
    remaining: Decimal
    progress_percent: Decimal
    level: ThresholdLevel
    severity: str


@dataclass(frozen=True)
class LedgerSnapshot:
    """Everything the engine reads for one recompute."""

    wallet: Optional[Wallet]
    transactions: tuple[Transaction, ...] = ()
    limit: Optional[SpendingLimit] = None


@dataclass(frozen=True)
class DerivedState:
    """Result of one recompute."""

    has_wallet: bool
    balance: Decimal
    total_income: Decimal
    total_expense: Decimal
    expenses_by_category: CategoryBreakdown
    income_by_category: CategoryBreakdown
    transactions_by_date: tuple[DateBucket, ...] = ()
    balance_series: tuple[BalancePoint, ...] = ()
    limit_status: Optional[LimitStatus] = None
    computed_at: Optional[datetime] = field(default=None, compare=False)
