"""Tests for the category registry."""

import pytest

from walletwise.domain.category import builtin_categories
from walletwise.domain.entities import CategoryProvenance, TransactionType
from walletwise.domain.errors import ConflictError, MissingCategoryError

EXPENSE = TransactionType.EXPENSE
INCOME = TransactionType.INCOME


def test_builtin_categories():
    """Test the built-in categories of each type."""
    assert [c.name for c in builtin_categories(EXPENSE)] == [
        "Food",
        "Transport",
        "Shopping",
        "Bills",
        "Entertainment",
    ]
    assert [c.name for c in builtin_categories(INCOME)] == ["Salary", "Bonus", "Gift", "Other"]
    assert all(c.provenance == CategoryProvenance.BUILTIN for c in builtin_categories(INCOME))


def test_custom_categories_follow_builtins(category_service):
    """Test that custom categories are listed after built-ins in creation order."""
    category_service.add_category(EXPENSE, "Pets")
    category_service.add_category(EXPENSE, "Garden")

    categories = category_service.list_categories(EXPENSE)

    assert [c.name for c in categories][-2:] == ["Pets", "Garden"]
    assert categories[-1].provenance == CategoryProvenance.CUSTOM


def test_categories_are_per_type(category_service):
    category_service.add_category(INCOME, "Freelance")
    assert "Freelance" not in [c.name for c in category_service.list_categories(EXPENSE)]
    assert category_service.find_category(INCOME, "freelance").name == "Freelance"


@pytest.mark.parametrize("name", ["Food", "food", "  FOOD "])
def test_duplicate_builtin_rejected(category_service, name):
    with pytest.raises(ConflictError):
        category_service.add_category(EXPENSE, name)


def test_duplicate_custom_rejected_case_insensitively(category_service):
    category_service.add_category(EXPENSE, "Pets")
    with pytest.raises(ConflictError):
        category_service.add_category(EXPENSE, "PETS")


def test_same_name_allowed_in_other_type(category_service):
    """Test that an expense category name can be reused for income."""
    category = category_service.add_category(INCOME, "Food")
    assert category.type == INCOME


@pytest.mark.parametrize("name", ["", "   ", None])
def test_blank_name_rejected(category_service, name):
    with pytest.raises(MissingCategoryError):
        category_service.add_category(EXPENSE, name)


def test_ensure_category_is_idempotent(category_service):
    first = category_service.ensure_category(EXPENSE, "Pets")
    second = category_service.ensure_category(EXPENSE, "pets")
    assert first == second
    assert [c.name for c in category_service.list_categories(EXPENSE)].count("Pets") == 1


def test_ensure_existing_builtin_returns_builtin(category_service):
    category = category_service.ensure_category(INCOME, "salary")
    assert category.provenance == CategoryProvenance.BUILTIN
    assert category.name == "Salary"


def test_clear_custom_categories(category_service):
    """Test that clearing removes only custom categories of one type."""
    category_service.add_category(EXPENSE, "Pets")
    category_service.add_category(INCOME, "Freelance")

    assert category_service.clear_custom_categories(EXPENSE) == 1

    assert [c.name for c in category_service.list_categories(EXPENSE)] == [
        c.name for c in builtin_categories(EXPENSE)
    ]
    assert category_service.find_category(INCOME, "Freelance") is not None


def test_find_missing_category(category_service):
    assert category_service.find_category(EXPENSE, "Holidays") is None
