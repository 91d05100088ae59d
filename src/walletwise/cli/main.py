"""Main CLI entry point."""

import logging

import click

from walletwise.cli.error_handling import handle_domain_error
from walletwise.database.factories import create_sqlite_store
from walletwise.domain.errors import StoreUnavailableError

# Import and register all commands at module level
from walletwise.cli.commands import (
    wallet,
    add,
    history,
    summary,
    limit,
    category,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides WALLETWISE_DB_PATH environment variable)",
    envvar="WALLETWISE_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity",
    envvar="WALLETWISE_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Walletwise - personal budgeting ledger.

    Track income and expenses against a wallet, see where the money goes,
    and get warned as spending approaches your limit.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Open the store only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        store = create_sqlite_store(database_path=db_path)
        try:
            store.connect()
            store.initialize_schema()
        except StoreUnavailableError as e:
            handle_domain_error(ctx, e)
        ctx.obj["store"] = store
        ctx.call_on_close(store.disconnect)


# Register all commands
wallet.register_commands(cli)
add.register_commands(cli)
history.register_commands(cli)
summary.register_commands(cli)
limit.register_commands(cli)
category.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
