"""Spending limit commands."""

import click

from walletwise.cli.error_handling import fail, handle_domain_error
from walletwise.cli.formatting import echo_limit_status
from walletwise.cli.refresh import refresh_ledger
from walletwise.domain.entities import LimitPeriod
from walletwise.domain.errors import DomainError, no_wallet
from walletwise.domain.spending_limit import SpendingLimitService
from walletwise.domain.wallet import WalletService
from walletwise.utils.date_parser import parse_datetime


@click.group("limit")
def limit_group():
    """Set and inspect the spending limit."""
    pass


@limit_group.command("set")
@click.option("--amount", required=True, help="Limit amount (e.g., 200)")
@click.option("--category", required=True, help="Expense category the limit applies to")
@click.option(
    "--period",
    type=click.Choice([p.value for p in LimitPeriod]),
    default=LimitPeriod.WEEKLY.value,
    show_default=True,
    help="Window the limit is measured over",
)
@click.option("--start-date", help="Start date for a custom period (defaults to now)")
@click.pass_context
def set_limit(ctx, amount: str, category: str, period: str, start_date: str | None):
    """Replace the spending limit.

    Only expenses recorded after the limit is set count towards it.

    Examples:
        walletwise limit set --amount 200 --category Food --period monthly
        walletwise limit set --amount 50 --category Transport --period custom --start-date 2024-06-01
    """
    store = ctx.obj["store"]
    start = None
    if start_date:
        if period != LimitPeriod.CUSTOM.value:
            fail(ctx, "--start-date can only be used with --period custom.")
        try:
            start = parse_datetime(start_date)
        except ValueError as e:
            fail(ctx, f"Invalid start date: {e}")

    try:
        WalletService(store).require_wallet()
        limit = SpendingLimitService(store).set_limit(
            amount=amount, category_name=category, period=period, start_date=start
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(
        f"Spending limit set: {limit.amount:,.2f} for '{limit.category.name}' ({limit.period.value})"
    )
    refresh_ledger(ctx)


@limit_group.command("show")
@click.pass_context
def show_limit(ctx):
    """Show spending against the limit."""
    state = refresh_ledger(ctx)
    if not state.has_wallet:
        click.echo(no_wallet())
        return
    if state.limit_status is None:
        click.echo("Spending Limit: Not Set")
        return

    currency = WalletService(ctx.obj["store"]).get_wallet().currency
    echo_limit_status(state.limit_status, currency)


def register_commands(cli):
    """Register limit commands with main CLI."""
    cli.add_command(limit_group)
