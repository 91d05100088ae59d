"""Transaction history command."""

import click

from walletwise.cli.error_handling import handle_domain_error
from walletwise.cli.formatting import echo_transaction
from walletwise.domain.aggregation import group_by_date, group_by_type, search_by_category
from walletwise.domain.errors import DomainError
from walletwise.domain.transaction import TransactionService
from walletwise.domain.wallet import WalletService


@click.command("history")
@click.option(
    "--by",
    "group_by",
    type=click.Choice(["date", "type"]),
    default="date",
    show_default=True,
    help="Group transactions by day or by income/expense",
)
@click.option("--search", default="", help="Only show categories containing this text")
@click.pass_context
def history(ctx, group_by: str, search: str):
    """Show transaction history, newest day first.

    Examples:
        walletwise history
        walletwise history --by type
        walletwise history --search food
    """
    store = ctx.obj["store"]
    try:
        wallet = WalletService(store).require_wallet()
        transactions = TransactionService(store).list_transactions()
    except DomainError as e:
        handle_domain_error(ctx, e)

    transactions = search_by_category(transactions, search)
    if not transactions:
        click.echo("No transactions found.")
        return

    if group_by == "date":
        for bucket in group_by_date(transactions, newest_first=True):
            click.echo(f"\n{bucket.label}")
            for txn in bucket.transactions:
                echo_transaction(txn, wallet.currency)
    else:
        for txn_type, group in group_by_type(transactions).items():
            if not group:
                continue
            click.echo(f"\n{txn_type.value.capitalize()}")
            for txn in group:
                echo_transaction(txn, wallet.currency)


def register_commands(cli):
    """Register history command with main CLI."""
    cli.add_command(history)
