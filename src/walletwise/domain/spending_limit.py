"""Spending limit creation and tracking."""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, Iterable, Optional, Union

from walletwise.database.base import LedgerStore
from walletwise.domain import errors
from walletwise.domain.entities import (
    Category,
    LimitCategory,
    LimitPeriod,
    LimitStatus,
    SpendingLimit,
    Transaction,
    TransactionType,
)
from walletwise.domain.threshold import level_for_ratio, severity_for_ratio
from walletwise.domain.transaction import CENTS, validate_amount, validate_category
from walletwise.utils.date_parser import (
    parse_timestamp,
    start_of_day,
    start_of_month,
    start_of_week,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0.00")
HUNDRED = Decimal("100")


def parse_period(value: Any) -> LimitPeriod:
    """Return the LimitPeriod for value.

    Raises:
        ValidationError: If value is not a known period
    """
    if isinstance(value, LimitPeriod):
        return value
    try:
        return LimitPeriod(str(value).strip().lower())
    except ValueError:
        raise errors.ValidationError(errors.invalid_period(value))


def period_window_start(period: LimitPeriod, now: datetime) -> datetime:
    """Start of the sliding window containing now.

    Only defined for daily, weekly and monthly periods; custom windows start
    at the date the user chose.
    """
    if period == LimitPeriod.DAILY:
        return start_of_day(now)
    if period == LimitPeriod.WEEKLY:
        return start_of_week(now)
    if period == LimitPeriod.MONTHLY:
        return start_of_month(now)
    raise ValueError(f"Period '{period.value}' has no computed window")


def window_start(limit: SpendingLimit, now: datetime) -> datetime:
    """Start of the limit's window, recomputed from now for calendar periods."""
    if limit.period == LimitPeriod.CUSTOM:
        return limit.start_date
    return period_window_start(limit.period, now)


def effective_threshold(limit: SpendingLimit, now: datetime) -> datetime:
    """Earliest moment an expense counts against the limit.

    Expenses recorded before the limit was set never count, even when the
    period window started earlier.
    """
    return max(window_start(limit, now), limit.set_at)


def compute_limit_spend(
    limit: Optional[SpendingLimit],
    transactions: Iterable[Transaction],
    now: Optional[datetime] = None,
) -> Decimal:
    """Sum expenses in the limit's category inside its effective window.

    Args:
        limit: Active limit, or None
        transactions: Transactions in any order
        now: Reference moment for the sliding window

    Returns:
        Total spend, 0 when there is no limit or nothing qualifies
    """
    if limit is None:
        return ZERO

    threshold = effective_threshold(limit, now or datetime.now())
    return sum(
        (
            txn.amount
            for txn in transactions
            if txn.type == TransactionType.EXPENSE
            and txn.category == limit.category.name
            and txn.date is not None
            and txn.date >= threshold
        ),
        ZERO,
    )


def to_limit_category(category: Union[Category, LimitCategory, None]) -> LimitCategory:
    """Reduce a category to the {id, name} pair stored with a limit."""
    if category is None:
        raise errors.MissingCategoryError(errors.missing_category())
    name = validate_category(category.name)
    return LimitCategory(id=str(category.id), name=name)


def create_spending_limit(
    amount: Any,
    category: Union[Category, LimitCategory, None],
    period: Any,
    start_date: Any = None,
    now: Optional[datetime] = None,
) -> SpendingLimit:
    """Validate input and build a new spending limit.

    For custom periods start_date is the user's chosen date (defaulting to
    now). For calendar periods start_date records the window start at
    creation; tracking always recomputes it.

    Raises:
        InvalidAmountError: If amount is not a positive number
        MissingCategoryError: If no category is given
        ValidationError: If period or custom start date is invalid
    """
    now = now or datetime.now()
    limit_amount = validate_amount(amount)
    limit_category = to_limit_category(category)
    limit_period = parse_period(period)

    if limit_period == LimitPeriod.CUSTOM:
        start = now if start_date is None else parse_timestamp(start_date)
        if start is None:
            raise errors.ValidationError(f"Invalid start date '{start_date}'")
    else:
        start = period_window_start(limit_period, now)

    return SpendingLimit(
        amount=limit_amount,
        category=limit_category,
        period=limit_period,
        start_date=start,
        set_at=now,
    )


def limit_status(limit: SpendingLimit, spent: Decimal) -> LimitStatus:
    """Measure spend against a limit for display and notification.

    Raises:
        InvalidAmountError: If the limit amount is not positive
    """
    if limit.amount <= 0:
        raise errors.InvalidAmountError(errors.invalid_amount(limit.amount))
    ratio = spent / limit.amount
    return LimitStatus(
        limit=limit,
        spent=spent,
        ratio=ratio,
        remaining=(limit.amount - spent).quantize(CENTS),
        progress_percent=min(ratio * HUNDRED, HUNDRED),
        level=level_for_ratio(ratio),
        severity=severity_for_ratio(ratio),
    )


class SpendingLimitService:
    """Service for setting and reading the active spending limit."""

    def __init__(self, store: LedgerStore):
        """Initialize spending limit service.

        Args:
            store: Ledger store instance
        """
        self.store = store

    def set_limit(
        self,
        amount: Any,
        category_name: Optional[str],
        period: Any,
        start_date: Any = None,
        now: Optional[datetime] = None,
    ) -> SpendingLimit:
        """Replace the active limit with a new one.

        The category is looked up among expense categories. Saving a new
        limit discards the previous one together with its threshold state.

        Raises:
            InvalidAmountError: If amount is not a positive number
            MissingCategoryError: If no category name is given
            NotFoundError: If the category is not an expense category
            ValidationError: If period or start date is invalid
        """
        from walletwise.domain.category import CategoryService

        name = validate_category(category_name)
        category = CategoryService(self.store).find_category(TransactionType.EXPENSE, name)
        if category is None:
            raise errors.NotFoundError(f"Category '{name}' not found")

        limit = create_spending_limit(amount, category, period, start_date, now)
        self.store.save_spending_limit(limit)
        logger.info(
            "Spending limit set: %s for '%s' (%s)",
            limit.amount,
            limit.category.name,
            limit.period.value,
        )
        return limit

    def get_limit(self) -> Optional[SpendingLimit]:
        """Return the active limit, or None if none is set."""
        return self.store.get_spending_limit()
