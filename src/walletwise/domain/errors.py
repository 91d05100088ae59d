"""Shared domain error messages and error types."""

from decimal import Decimal


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class InvalidAmountError(ValidationError):
    """Amount is non-numeric, non-finite, non-positive or out of range."""


class MissingCategoryError(ValidationError):
    """No category given for a transaction or spending limit."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as creating a second wallet."""


class StoreUnavailableError(DomainError):
    """The ledger store failed to read or write data."""


def invalid_amount(value: object) -> str:
    """Return message for an amount that cannot be used."""
    return f"Invalid amount '{value}': please enter a positive number"


def amount_too_large(value: Decimal, maximum: Decimal) -> str:
    """Return message for an amount over the storable maximum."""
    return f"Invalid amount '{value}': must not exceed {maximum:,.2f}"


def missing_category() -> str:
    """Return message for a missing category."""
    return "Please select or enter a category"


def invalid_transaction_type(value: object) -> str:
    """Return message for an unknown transaction type."""
    return f"Invalid transaction type '{value}': expected 'income' or 'expense'"


def invalid_period(value: object) -> str:
    """Return message for an unknown limit period."""
    return (
        f"Invalid period '{value}': expected one of daily, weekly, monthly, custom"
    )


def no_wallet() -> str:
    """Return message when no wallet has been created."""
    return "No wallet found. Please set up your wallet."


def wallet_exists(name: str) -> str:
    """Return message when a wallet already exists."""
    return f"Wallet '{name}' already exists. Delete it before creating a new one."


def store_unavailable(action: str) -> str:
    """Return message for a failed store operation."""
    return f"Failed to {action}. Please try again later."
