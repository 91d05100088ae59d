"""Tests for the wallet service."""

from decimal import Decimal

import pytest

from walletwise.domain.entities import TransactionType
from walletwise.domain.errors import ConflictError, NotFoundError, ValidationError


class TestCreateWallet:
    """Tests for wallet creation."""

    def test_create_wallet(self, wallet_service):
        """Test creating a wallet with an initial balance."""
        wallet_id = wallet_service.create_wallet(name="Main", initial_balance="1,250.5")

        wallet = wallet_service.get_wallet()
        assert wallet.id == wallet_id
        assert wallet.name == "Main"
        assert wallet.initial_balance == Decimal("1250.50")
        assert wallet.currency == "EUR"

    def test_currency_is_uppercased(self, wallet_service):
        wallet_service.create_wallet(name="Trip", initial_balance="0", currency="usd")
        assert wallet_service.get_wallet().currency == "USD"

    @pytest.mark.parametrize("balance", ["0", "-20", Decimal("-0.5")])
    def test_zero_and_negative_balances_allowed(self, wallet_service, balance):
        wallet_service.create_wallet(name="Main", initial_balance=balance)
        assert wallet_service.get_wallet().initial_balance == Decimal(balance).quantize(
            Decimal("0.01")
        )

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_name_rejected(self, wallet_service, name):
        with pytest.raises(ValidationError):
            wallet_service.create_wallet(name=name, initial_balance="10")

    @pytest.mark.parametrize("balance", ["abc", "", "NaN", "Infinity"])
    def test_invalid_balance_rejected(self, wallet_service, balance):
        with pytest.raises(ValidationError):
            wallet_service.create_wallet(name="Main", initial_balance=balance)
        assert wallet_service.get_wallet() is None

    def test_second_wallet_rejected(self, wallet_service, sample_wallet):
        """Test that only one wallet can exist."""
        with pytest.raises(ConflictError):
            wallet_service.create_wallet(name="Other", initial_balance="5")
        assert wallet_service.get_wallet().name == "Main"


class TestRequireWallet:
    """Tests for require_wallet and delete_wallet."""

    def test_require_without_wallet(self, wallet_service):
        with pytest.raises(NotFoundError) as exc_info:
            wallet_service.require_wallet()
        assert str(exc_info.value) == "No wallet found. Please set up your wallet."

    def test_require_with_wallet(self, wallet_service, sample_wallet):
        assert wallet_service.require_wallet() == sample_wallet

    def test_delete_wallet_clears_ledger(
        self, wallet_service, transaction_service, category_service, sample_wallet
    ):
        """Test that deleting the wallet removes its transactions and categories."""
        transaction_service.create_transaction(
            amount="5", category="Pets", txn_type="expense"
        )

        wallet_service.delete_wallet()

        assert wallet_service.get_wallet() is None
        assert transaction_service.list_transactions() == []
        assert category_service.find_category(TransactionType.EXPENSE, "Pets") is None

    def test_delete_without_wallet(self, wallet_service):
        with pytest.raises(NotFoundError):
            wallet_service.delete_wallet()

    def test_wallet_can_be_recreated_after_delete(self, wallet_service, sample_wallet):
        wallet_service.delete_wallet()
        wallet_service.create_wallet(name="Fresh", initial_balance="1")
        assert wallet_service.get_wallet().name == "Fresh"
