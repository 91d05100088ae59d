"""Tests for domain entities."""

from dataclasses import FrozenInstanceError
from datetime import datetime
from decimal import Decimal

import pytest

from walletwise.domain.entities import (
    CategoryBreakdown,
    CategoryTotal,
    DateBucket,
    ThresholdState,
    TransactionType,
)
from walletwise.utils.amount_parser import parse_amount

from conftest import make_limit, make_txn


class TestTransaction:
    """Tests for Transaction entity."""

    def test_signed_amount(self):
        """Test that expenses reduce and income increases the balance."""
        assert make_txn("12.50", TransactionType.INCOME).signed_amount == Decimal("12.50")
        assert make_txn("12.50", TransactionType.EXPENSE).signed_amount == Decimal("-12.50")

    def test_type_flags(self):
        txn = make_txn("1", TransactionType.INCOME)
        assert txn.is_income
        assert not txn.is_expense

    def test_transaction_immutability(self):
        """Test that Transaction entities are immutable."""
        txn = make_txn("1")
        with pytest.raises(FrozenInstanceError):
            txn.amount = Decimal("2")


class TestSpendingLimit:
    """Tests for SpendingLimit entity."""

    def test_key_changes_with_any_field(self):
        """Test that replacing a limit yields a new identity."""
        base = make_limit()
        assert base.key == make_limit().key
        assert base.key != make_limit(amount="201").key
        assert base.key != make_limit(category="Bills").key
        assert base.key != make_limit(set_at=datetime(2024, 1, 6)).key

    def test_fresh_threshold_state(self):
        limit = make_limit()
        state = ThresholdState.fresh(limit)
        assert state.limit_key == limit.key
        assert not (state.notified_half or state.notified_80 or state.notified_exceeded)


def test_category_breakdown_maps():
    breakdown = CategoryBreakdown(
        type=TransactionType.EXPENSE,
        entries=(
            CategoryTotal("Food", Decimal("30"), Decimal("75")),
            CategoryTotal("Bills", Decimal("10"), Decimal("25")),
        ),
        grand_total=Decimal("40"),
    )
    assert list(breakdown.totals()) == ["Food", "Bills"]
    assert breakdown.percentages()["Bills"] == Decimal("25")


def test_date_bucket_totals():
    bucket = DateBucket(
        label="1/10/2024",
        day=datetime(2024, 1, 10).date(),
        transactions=(make_txn("5"), make_txn("20", TransactionType.INCOME)),
        income=Decimal("20"),
        expense=Decimal("5"),
    )
    assert bucket.count == 2
    assert bucket.total == Decimal("25")
    assert bucket.net == Decimal("15")


class TestParseAmount:
    """Tests for amount string parsing."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("123.45", Decimal("123.45")),
            ("$123.45", Decimal("123.45")),
            ("€ 123.45", Decimal("123.45")),
            ("EUR 1,234.56", Decimal("1234.56")),
            ("-123.45", Decimal("-123.45")),
            ("(123.45)", Decimal("-123.45")),
        ],
    )
    def test_formats(self, text, expected):
        assert parse_amount(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "abc", "12..3"])
    def test_unparseable(self, text):
        with pytest.raises(ValueError):
            parse_amount(text)
