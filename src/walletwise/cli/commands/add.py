"""Add transaction commands."""

import logging

import click

from walletwise.cli.error_handling import handle_domain_error
from walletwise.cli.formatting import format_money
from walletwise.cli.refresh import refresh_ledger
from walletwise.domain.entities import TransactionType
from walletwise.domain.errors import DomainError
from walletwise.domain.transaction import TransactionService
from walletwise.domain.wallet import WalletService
from walletwise.utils.date_parser import format_display_date, parse_datetime

logger = logging.getLogger(__name__)


@click.group("add")
def add_group():
    """Add income or an expense."""
    pass


def _add_transaction(
    ctx,
    txn_type: TransactionType,
    amount: str,
    category: str,
    description: str | None,
    date: str | None,
):
    store = ctx.obj["store"]
    try:
        wallet = WalletService(store).require_wallet()
    except DomainError as e:
        handle_domain_error(ctx, e)

    # Unreadable dates are kept as typed and recorded as invalid dates
    txn_date = date
    if date:
        try:
            txn_date = parse_datetime(date)
        except ValueError:
            logger.debug("Could not parse date %r; storing it as invalid", date)

    service = TransactionService(store)
    try:
        transaction_id = service.create_transaction(
            amount=amount,
            category=category,
            txn_type=txn_type,
            description=description,
            date=txn_date,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    txn = service.get_transaction(transaction_id)
    if txn.date is None:
        click.echo(f"Warning: could not read date '{date}'; saved as Invalid Date", err=True)
    click.echo(f"Added {txn_type.value} {transaction_id}")
    click.echo(f"  Date: {format_display_date(txn.date)}")
    click.echo(f"  Amount: {format_money(txn.amount, wallet.currency)}")
    click.echo(f"  Category: {txn.category}")
    if txn.description:
        click.echo(f"  Description: {txn.description}")

    state = refresh_ledger(ctx)
    click.echo(f"Balance: {format_money(state.balance, wallet.currency)}")


HELP_TEXT = {
    TransactionType.INCOME: "Record income.\n\nExample: walletwise add income --amount 1200 --category Salary",
    TransactionType.EXPENSE: "Record an expense.\n\nExample: walletwise add expense --amount 12.50 --category Food",
}


def _transaction_command(txn_type: TransactionType):
    @click.command(txn_type.value, help=HELP_TEXT[txn_type])
    @click.option("--amount", required=True, help="Positive amount (e.g., 12.50)")
    @click.option("--category", required=True, help="Category name (new names are remembered)")
    @click.option("--description", help="Optional description")
    @click.option(
        "--date",
        help="Date (YYYY-MM-DD, or relative like 'today', 'yesterday'); defaults to now",
    )
    @click.pass_context
    def command(ctx, amount: str, category: str, description: str | None, date: str | None):
        _add_transaction(ctx, txn_type, amount, category, description, date)

    return command


add_group.add_command(_transaction_command(TransactionType.INCOME))
add_group.add_command(_transaction_command(TransactionType.EXPENSE))


def register_commands(cli):
    """Register add commands with main CLI."""
    cli.add_command(add_group)
