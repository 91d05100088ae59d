"""Terminal notifier."""

import click

from walletwise.domain.entities import Notification, NotificationKind
from walletwise.domain.notifier import Notifier

KIND_COLORS = {
    NotificationKind.INFO: "blue",
    NotificationKind.WARN: "yellow",
    NotificationKind.ERROR: "red",
}


class EchoNotifier(Notifier):
    """Prints notifications to the terminal."""

    def notify(self, notification: Notification) -> None:
        """Print the title in the kind's color followed by the detail."""
        click.secho(
            f"[{notification.kind.value}] {notification.title}",
            fg=KIND_COLORS[notification.kind],
            bold=True,
        )
        click.echo(f"  {notification.detail}")
