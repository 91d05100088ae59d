"""CLI formatting helpers."""

from decimal import Decimal

import click

from walletwise.domain.entities import LimitStatus, Transaction

SEVERITY_COLORS = {"ok": "green", "warning": "yellow", "danger": "red"}


def format_money(amount: Decimal, currency: str) -> str:
    """Format an amount with its currency code, e.g. "EUR 1,234.50"."""
    return f"{currency} {amount:,.2f}"


def echo_transaction(txn: Transaction, currency: str) -> None:
    """Print one transaction line, green for income and red for expense."""
    sign = "+" if txn.is_income else "-"
    color = "green" if txn.is_income else "red"
    amount = click.style(f"{sign}{format_money(txn.amount, currency)}", fg=color)
    description = f"  {txn.description}" if txn.description else ""
    click.echo(f"  {txn.category:<20} {amount}{description}")


def echo_limit_status(status: LimitStatus, currency: str) -> None:
    """Print the spending limit card."""
    limit = status.limit
    color = SEVERITY_COLORS[status.severity]
    click.echo(f"Spending Limit: {click.style(format_money(limit.amount, currency), fg=color)}")
    click.echo(f"  Category: {limit.category.name}")
    click.echo(f"  Period:   {limit.period.value}")
    filled = int(status.progress_percent // 5)
    bar = click.style("#" * filled, fg=color) + "." * (20 - filled)
    click.echo(f"  [{bar}] {status.progress_percent:.0f}%")
    click.echo(f"  {format_money(status.spent, currency)} spent")
    click.echo(f"  {format_money(status.remaining, currency)} left")
