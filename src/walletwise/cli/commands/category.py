"""Category management commands."""

import click

from walletwise.cli.error_handling import handle_domain_error
from walletwise.domain.category import CategoryService
from walletwise.domain.entities import TransactionType
from walletwise.domain.errors import DomainError

TYPE_OPTION = click.option(
    "--type",
    "txn_type",
    type=click.Choice([t.value for t in TransactionType]),
    default=TransactionType.EXPENSE.value,
    show_default=True,
    help="Transaction type the categories belong to",
)


@click.group("category")
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@TYPE_OPTION
@click.pass_context
def list_categories(ctx, txn_type: str):
    """List built-in and custom categories."""
    service = CategoryService(ctx.obj["store"])
    try:
        categories = service.list_categories(TransactionType(txn_type))
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"\n{txn_type.capitalize()} categories:")
    click.echo("-" * 40)
    for cat in categories:
        click.echo(f"{cat.name:<25} {cat.provenance.value}")


@category_group.command("add")
@click.argument("name", metavar="CATEGORY_NAME")
@TYPE_OPTION
@click.pass_context
def add_category(ctx, name: str, txn_type: str):
    """Add a custom category.

    Examples:
        walletwise category add "Pets"
        walletwise category add "Freelance" --type income
    """
    service = CategoryService(ctx.obj["store"])
    try:
        category = service.add_category(TransactionType(txn_type), name)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created {txn_type} category '{category.name}'")


@category_group.command("clear")
@TYPE_OPTION
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def clear_categories(ctx, txn_type: str, yes: bool):
    """Remove all custom categories of a type."""
    if not yes:
        click.confirm(f"Remove all custom {txn_type} categories?", abort=True)
    service = CategoryService(ctx.obj["store"])
    try:
        removed = service.clear_custom_categories(TransactionType(txn_type))
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Removed {removed} custom {txn_type} categor{'y' if removed == 1 else 'ies'}.")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group)
