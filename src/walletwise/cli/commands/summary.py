"""Summary commands."""

import click

from walletwise.cli.error_handling import handle_domain_error
from walletwise.cli.formatting import format_money
from walletwise.cli.refresh import refresh_ledger
from walletwise.domain.aggregation import expense_series
from walletwise.domain.entities import TransactionType
from walletwise.domain.errors import DomainError, no_wallet
from walletwise.domain.transaction import TransactionService
from walletwise.domain.wallet import WalletService


@click.command("summary")
@click.option(
    "--type",
    "txn_type",
    type=click.Choice([t.value for t in TransactionType]),
    default=TransactionType.EXPENSE.value,
    show_default=True,
    help="Which transactions to break down by category",
)
@click.option("--trend", is_flag=True, help="Also list expenses in date order")
@click.pass_context
def summary(ctx, txn_type: str, trend: bool):
    """Show totals and shares per category."""
    state = refresh_ledger(ctx)
    if not state.has_wallet:
        click.echo(no_wallet())
        return

    store = ctx.obj["store"]
    currency = WalletService(store).get_wallet().currency
    breakdown = (
        state.expenses_by_category
        if txn_type == TransactionType.EXPENSE.value
        else state.income_by_category
    )

    if not breakdown.entries:
        click.echo("No transactions found.")
        return

    click.echo(f"\nCategory Summary ({txn_type}):")
    click.echo("-" * 60)
    click.echo(f"{'Category':<30} {'Total':>20} {'Share':>7}")
    click.echo("-" * 60)
    for entry in breakdown.entries:
        click.echo(
            f"{entry.category:<30} {format_money(entry.total, currency):>20} "
            f"{entry.percentage:>6.0f}%"
        )
    click.echo("-" * 60)
    click.echo(f"{'Total':<30} {format_money(breakdown.grand_total, currency):>20}")

    if trend:
        try:
            transactions = TransactionService(store).list_transactions(
                txn_type=TransactionType.EXPENSE
            )
        except DomainError as e:
            handle_domain_error(ctx, e)
        click.echo("\nExpenses over time:")
        for label, amount in expense_series(transactions):
            click.echo(f"  {label or '?':<10} {format_money(amount, currency):>20}")


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
