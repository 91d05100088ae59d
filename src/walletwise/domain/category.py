"""Category registry domain service."""

import logging
from typing import Optional

from walletwise.database.base import LedgerStore
from walletwise.domain import errors
from walletwise.domain.entities import Category, CategoryProvenance, TransactionType
from walletwise.domain.transaction import validate_category

logger = logging.getLogger(__name__)

BUILTIN_CATEGORIES: dict[TransactionType, list[tuple[str, str]]] = {
    TransactionType.EXPENSE: [
        ("1", "Food"),
        ("2", "Transport"),
        ("3", "Shopping"),
        ("4", "Bills"),
        ("5", "Entertainment"),
    ],
    TransactionType.INCOME: [
        ("1", "Salary"),
        ("2", "Bonus"),
        ("3", "Gift"),
        ("4", "Other"),
    ],
}


def builtin_categories(txn_type: TransactionType) -> list[Category]:
    """Return the built-in categories for a transaction type."""
    return [
        Category(
            id=category_id,
            name=name,
            type=txn_type,
            provenance=CategoryProvenance.BUILTIN,
        )
        for category_id, name in BUILTIN_CATEGORIES[txn_type]
    ]


class CategoryService:
    """Service for the ordered set of built-in and custom categories."""

    def __init__(self, store: LedgerStore):
        """Initialize category service.

        Args:
            store: Ledger store instance
        """
        self.store = store

    def list_categories(self, txn_type: TransactionType) -> list[Category]:
        """List categories for a type, built-in first then custom.

        Names are unique per type, compared case-insensitively; the first
        occurrence wins.

        Args:
            txn_type: Transaction type

        Returns:
            Ordered list of categories
        """
        seen: set[str] = set()
        categories: list[Category] = []
        for category in builtin_categories(txn_type) + self.store.list_custom_categories(
            txn_type
        ):
            key = category.name.lower()
            if key in seen:
                continue
            seen.add(key)
            categories.append(category)
        return categories

    def find_category(self, txn_type: TransactionType, name: str) -> Optional[Category]:
        """Find a category by name, case-insensitively.

        Returns:
            Category or None if not found
        """
        key = name.strip().lower()
        for category in self.list_categories(txn_type):
            if category.name.lower() == key:
                return category
        return None

    def add_category(self, txn_type: TransactionType, name: str) -> Category:
        """Add a custom category.

        Raises:
            MissingCategoryError: If name is blank
            ConflictError: If a category with the same name exists
        """
        name = validate_category(name)
        if self.find_category(txn_type, name) is not None:
            raise errors.ConflictError(f"Category '{name}' already exists")
        category = self.store.add_custom_category(txn_type, name)
        logger.info("Added custom %s category '%s'", txn_type.value, name)
        return category

    def ensure_category(self, txn_type: TransactionType, name: str) -> Category:
        """Return the category with this name, adding it as custom if missing."""
        existing = self.find_category(txn_type, name)
        if existing is not None:
            return existing
        return self.add_category(txn_type, name)

    def clear_custom_categories(self, txn_type: TransactionType) -> int:
        """Remove all custom categories of a type.

        Returns:
            Number of categories removed
        """
        removed = self.store.clear_custom_categories(txn_type)
        logger.info("Cleared %d custom %s categories", removed, txn_type.value)
        return removed
