"""CLI error handling helpers."""

import logging
from typing import NoReturn

import click

from walletwise.domain.errors import DomainError, StoreUnavailableError

logger = logging.getLogger(__name__)


def fail(ctx: click.Context, message: str) -> NoReturn:
    """Print an error message to stderr and exit with status 1."""
    click.echo(f"Error: {message}", err=True)
    ctx.exit(1)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> NoReturn:
    """Render a domain error and exit with failure."""
    if isinstance(error, StoreUnavailableError):
        logger.debug("Store failure behind CLI error", exc_info=error.__cause__)
    fail(ctx, str(error))
