"""Tests for transaction validation and the transaction service."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from walletwise.domain.entities import TransactionType
from walletwise.domain.errors import (
    InvalidAmountError,
    MissingCategoryError,
    ValidationError,
)
from walletwise.domain.transaction import (
    MAX_AMOUNT,
    validate_amount,
    validate_transaction,
)


def _raw(**overrides):
    raw = {
        "amount": "12.50",
        "category": "Food",
        "type": "expense",
        "date": "2024-01-15T10:30:00",
    }
    raw.update(overrides)
    return raw


class TestValidateAmount:
    """Tests for amount validation."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("12.50", Decimal("12.50")),
            ("$1,234.56", Decimal("1234.56")),
            (42, Decimal("42.00")),
            (0.1, Decimal("0.10")),
            (Decimal("3.005"), Decimal("3.01")),
        ],
    )
    def test_valid_amounts(self, value, expected):
        assert validate_amount(value) == expected

    @pytest.mark.parametrize(
        "value",
        ["", "abc", "0", "-5", 0, -1.5, "NaN", "Infinity", float("inf"), None, True, "0.001"],
    )
    def test_invalid_amounts(self, value):
        with pytest.raises(InvalidAmountError):
            validate_amount(value)

    def test_amount_above_maximum_rejected(self):
        with pytest.raises(InvalidAmountError):
            validate_amount(MAX_AMOUNT + 1)

    def test_huge_negative_amount_rejected(self):
        with pytest.raises(InvalidAmountError):
            validate_amount("-300000000000000000000")

    def test_invalid_amount_is_validation_error(self):
        with pytest.raises(ValidationError):
            validate_amount("-1")


class TestValidateTransaction:
    """Tests for validate_transaction."""

    def test_valid_transaction(self):
        txn = validate_transaction(_raw(description="  lunch  "))
        assert txn.amount == Decimal("12.50")
        assert txn.category == "Food"
        assert txn.type == TransactionType.EXPENSE
        assert txn.date == datetime(2024, 1, 15, 10, 30)
        assert txn.description == "lunch"
        assert txn.id is None

    def test_category_is_trimmed(self):
        assert validate_transaction(_raw(category="  Bills ")).category == "Bills"

    @pytest.mark.parametrize("category", ["", "   ", None])
    def test_missing_category(self, category):
        with pytest.raises(MissingCategoryError):
            validate_transaction(_raw(category=category))

    @pytest.mark.parametrize("txn_type", ["", "Income", "transfer", None])
    def test_invalid_type(self, txn_type):
        with pytest.raises(ValidationError):
            validate_transaction(_raw(type=txn_type))

    def test_malformed_date_is_tolerated(self):
        txn = validate_transaction(_raw(date="not a date"))
        assert txn.date is None

    def test_missing_date_defaults_to_now(self):
        now = datetime(2024, 3, 1, 9, 0)
        txn = validate_transaction(_raw(date=None), now=now)
        assert txn.date == now

    def test_date_object_becomes_midnight(self):
        txn = validate_transaction(_raw(date=date(2024, 2, 29)))
        assert txn.date == datetime(2024, 2, 29)

    def test_blank_description_becomes_none(self):
        assert validate_transaction(_raw(description="   ")).description is None

    def test_amount_checked_before_category(self):
        with pytest.raises(InvalidAmountError):
            validate_transaction(_raw(amount="-1", category=""))


class TestTransactionService:
    """Tests for TransactionService."""

    def test_create_and_get(self, transaction_service, sample_wallet):
        txn_id = transaction_service.create_transaction(
            amount="50", category="Salary", txn_type="income", date=datetime(2024, 1, 2)
        )
        txn = transaction_service.get_transaction(txn_id)
        assert txn.id == txn_id
        assert txn.amount == Decimal("50.00")
        assert txn.type == TransactionType.INCOME
        assert txn.date == datetime(2024, 1, 2)

    def test_invalid_transaction_not_persisted(self, transaction_service, sample_wallet):
        with pytest.raises(InvalidAmountError):
            transaction_service.create_transaction(
                amount="-300000000000000000000", category="Food", txn_type="expense"
            )
        assert transaction_service.list_transactions() == []

    def test_malformed_date_persisted_as_invalid(self, transaction_service, sample_wallet):
        txn_id = transaction_service.create_transaction(
            amount="5", category="Food", txn_type="expense", date="32/13/2024"
        )
        assert transaction_service.get_transaction(txn_id).date is None

    def test_new_category_registered_as_custom(
        self, transaction_service, category_service, sample_wallet
    ):
        transaction_service.create_transaction(
            amount="5", category="Pets", txn_type="expense"
        )
        names = [c.name for c in category_service.list_categories(TransactionType.EXPENSE)]
        assert names[-1] == "Pets"

    def test_known_category_not_duplicated(
        self, transaction_service, category_service, sample_wallet
    ):
        transaction_service.create_transaction(amount="5", category="food", txn_type="expense")
        names = [c.name for c in category_service.list_categories(TransactionType.EXPENSE)]
        assert names == ["Food", "Transport", "Shopping", "Bills", "Entertainment"]

    def test_list_transactions_with_filters(self, transaction_service, sample_wallet):
        transaction_service.create_transaction(
            amount="10", category="Food", txn_type="expense", date=datetime(2024, 1, 1)
        )
        transaction_service.create_transaction(
            amount="20", category="Bills", txn_type="expense", date=datetime(2024, 1, 5)
        )
        transaction_service.create_transaction(
            amount="30", category="Salary", txn_type="income", date=datetime(2024, 1, 9)
        )

        expenses = transaction_service.list_transactions(txn_type=TransactionType.EXPENSE)
        assert sorted(t.amount for t in expenses) == [Decimal("10.00"), Decimal("20.00")]

        food = transaction_service.list_transactions(category="Food")
        assert [t.amount for t in food] == [Decimal("10.00")]

        recent = transaction_service.list_transactions(start=datetime(2024, 1, 3))
        assert sorted(t.amount for t in recent) == [Decimal("20.00"), Decimal("30.00")]

        early = transaction_service.list_transactions(end=datetime(2024, 1, 5))
        assert sorted(t.amount for t in early) == [Decimal("10.00"), Decimal("20.00")]
