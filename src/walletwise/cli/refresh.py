"""CLI helper for recomputing the ledger after a command."""

import click

from walletwise.cli.error_handling import handle_domain_error
from walletwise.cli.notifier import EchoNotifier
from walletwise.domain.engine import LedgerEngine
from walletwise.domain.entities import DerivedState
from walletwise.domain.errors import DomainError


def refresh_ledger(ctx: click.Context) -> DerivedState:
    """Recompute derived state, printing any newly crossed limit threshold."""
    engine = LedgerEngine(ctx.obj["store"], notifier=EchoNotifier())
    try:
        return engine.refresh()
    except DomainError as e:
        handle_domain_error(ctx, e)
