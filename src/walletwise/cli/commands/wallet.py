"""Wallet management commands."""

import click

from walletwise.cli.error_handling import handle_domain_error
from walletwise.cli.formatting import format_money
from walletwise.cli.refresh import refresh_ledger
from walletwise.domain.errors import DomainError, no_wallet
from walletwise.domain.wallet import DEFAULT_CURRENCY, WalletService


@click.group("wallet")
def wallet_group():
    """Manage the wallet."""
    pass


@wallet_group.command("create")
@click.argument("name", metavar="WALLET_NAME")
@click.option("--balance", required=True, help="Initial balance (e.g., 1500 or -20.50)")
@click.option(
    "--currency",
    default=DEFAULT_CURRENCY,
    show_default=True,
    envvar="WALLETWISE_CURRENCY",
    help="Currency code shown next to amounts",
)
@click.pass_context
def create_wallet(ctx, name: str, balance: str, currency: str):
    """Create the wallet.

    Examples:
        walletwise wallet create "Main" --balance 1500
        walletwise wallet create "Travel" --balance 200 --currency USD
    """
    service = WalletService(ctx.obj["store"])
    try:
        wallet_id = service.create_wallet(name=name, initial_balance=balance, currency=currency)
    except DomainError as e:
        handle_domain_error(ctx, e)
    wallet = service.get_wallet()
    click.echo(f"Created wallet '{wallet.name}' (ID: {wallet_id})")
    click.echo(f"  Initial balance: {format_money(wallet.initial_balance, wallet.currency)}")


@wallet_group.command("show")
@click.option("--chart", is_flag=True, help="Show the running balance after each transaction")
@click.pass_context
def show_wallet(ctx, chart: bool):
    """Show balance, income and expenses."""
    service = WalletService(ctx.obj["store"])
    state = refresh_ledger(ctx)
    if not state.has_wallet:
        click.echo(no_wallet())
        return

    wallet = service.get_wallet()
    currency = wallet.currency
    click.echo(f"\n{wallet.name}")
    click.echo("-" * 40)
    click.echo(f"{'Net Balance':<20} {format_money(state.balance, currency):>19}")
    click.echo(f"{'Income':<20} {format_money(state.total_income, currency):>19}")
    click.echo(f"{'Expenses':<20} {format_money(state.total_expense, currency):>19}")

    if chart:
        click.echo("\nBalance over time:")
        for point in state.balance_series:
            label = point.label or "?"
            click.echo(f"  {label:<10} {format_money(point.balance, currency):>19}")


@wallet_group.command("delete")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_wallet(ctx, yes: bool):
    """Delete the wallet and clear all data."""
    service = WalletService(ctx.obj["store"])
    if not yes:
        click.confirm(
            "Are you sure you want to delete your wallet? This will clear all data.",
            abort=True,
        )
    try:
        service.delete_wallet()
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo("Wallet deleted.")


def register_commands(cli):
    """Register wallet commands with main CLI."""
    cli.add_command(wallet_group)
