"""Transaction validation and transaction domain service."""

import logging
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Mapping, Optional

from walletwise.database.base import LedgerStore
from walletwise.domain import errors
from walletwise.domain.entities import (
    Transaction,
    TransactionFilter,
    TransactionType,
)
from walletwise.utils.amount_parser import parse_amount
from walletwise.utils.date_parser import parse_timestamp

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")
# Largest value a Numeric(14, 2) column holds.
MAX_AMOUNT = Decimal("999999999999.99")


def validate_amount(value: Any) -> Decimal:
    """Coerce value to a positive amount in cents.

    Raises:
        InvalidAmountError: If value is not a finite number greater than zero
            or is larger than MAX_AMOUNT
    """
    if isinstance(value, bool) or value is None:
        raise errors.InvalidAmountError(errors.invalid_amount(value))

    try:
        if isinstance(value, Decimal):
            amount = value
        elif isinstance(value, (int, float)):
            amount = Decimal(str(value))
        else:
            amount = parse_amount(str(value))
    except (ValueError, InvalidOperation):
        raise errors.InvalidAmountError(errors.invalid_amount(value))

    if not amount.is_finite() or amount <= 0:
        raise errors.InvalidAmountError(errors.invalid_amount(value))
    if amount > MAX_AMOUNT:
        raise errors.InvalidAmountError(errors.amount_too_large(amount, MAX_AMOUNT))

    amount = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    if amount <= 0:
        raise errors.InvalidAmountError(errors.invalid_amount(value))
    return amount


def validate_category(value: Any) -> str:
    """Return the trimmed category name.

    Raises:
        MissingCategoryError: If the name is missing or blank
    """
    if value is None:
        raise errors.MissingCategoryError(errors.missing_category())
    name = str(value).strip()
    if not name:
        raise errors.MissingCategoryError(errors.missing_category())
    return name


def validate_type(value: Any) -> TransactionType:
    """Return the transaction type for value.

    Raises:
        ValidationError: If value is not exactly "income" or "expense"
    """
    if isinstance(value, TransactionType):
        return value
    try:
        return TransactionType(value)
    except ValueError:
        raise errors.ValidationError(errors.invalid_transaction_type(value))


def validate_transaction(
    raw: Mapping[str, Any], now: Optional[datetime] = None
) -> Transaction:
    """Build a Transaction from raw input.

    Malformed dates are tolerated and stored as None. A missing date
    defaults to now.

    Args:
        raw: Mapping with amount, category, type and optional id, description, date
        now: Moment used when no date is given

    Returns:
        Validated Transaction

    Raises:
        InvalidAmountError: If amount is not a positive finite number
        MissingCategoryError: If category is blank
        ValidationError: If type is not income or expense
    """
    amount = validate_amount(raw.get("amount"))
    category = validate_category(raw.get("category"))
    txn_type = validate_type(raw.get("type"))

    raw_date = raw.get("date")
    if raw_date is None or (isinstance(raw_date, str) and not raw_date.strip()):
        txn_date: Optional[datetime] = now or datetime.now()
    else:
        txn_date = parse_timestamp(raw_date)
        if txn_date is None:
            logger.debug("Keeping transaction with malformed date %r", raw_date)

    description = raw.get("description")
    if description is not None:
        description = str(description).strip() or None

    return Transaction(
        id=raw.get("id"),
        amount=amount,
        category=category,
        type=txn_type,
        date=txn_date,
        description=description,
    )


class TransactionService:
    """Service for recording and listing transactions."""

    def __init__(self, store: LedgerStore):
        """Initialize transaction service.

        Args:
            store: Ledger store instance
        """
        self.store = store

    def create_transaction(
        self,
        amount: Any,
        category: Any,
        txn_type: Any,
        description: Optional[str] = None,
        date: Any = None,
        now: Optional[datetime] = None,
    ) -> int:
        """Validate and record a transaction.

        A category that is not yet known for the transaction type is
        registered as a custom category.

        Args:
            amount: Positive amount (string, number or Decimal)
            category: Category name
            txn_type: "income" or "expense"
            description: Optional description
            date: Transaction date; malformed values are kept as invalid dates
            now: Moment used when no date is given

        Returns:
            Transaction ID

        Raises:
            ValidationError: If the transaction does not validate
        """
        # Imported here because CategoryService imports this module
        from walletwise.domain.category import CategoryService

        txn = validate_transaction(
            {
                "amount": amount,
                "category": category,
                "type": txn_type,
                "description": description,
                "date": date,
            },
            now=now,
        )
        transaction_id = self.store.create_transaction(
            amount=txn.amount,
            category=txn.category,
            txn_type=txn.type,
            date=txn.date,
            description=txn.description,
        )
        CategoryService(self.store).ensure_category(txn.type, txn.category)
        logger.info(
            "Recorded %s %s in '%s' (id %s)",
            txn.type.value,
            txn.amount,
            txn.category,
            transaction_id,
        )
        return transaction_id

    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.store.get_transaction(transaction_id)

    def list_transactions(
        self,
        txn_type: Optional[TransactionType] = None,
        category: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[Transaction]:
        """List transactions with filters. Order is not guaranteed.

        Args:
            txn_type: Optional type filter
            category: Optional exact category name filter
            start: Optional inclusive lower date bound
            end: Optional inclusive upper date bound

        Returns:
            List of transaction entities
        """
        return self.store.list_transactions(
            TransactionFilter(type=txn_type, category=category, start=start, end=end)
        )
