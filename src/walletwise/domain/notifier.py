"""Notifier interface."""

from abc import ABC, abstractmethod

from walletwise.domain.entities import Notification


class Notifier(ABC):
    """Receives threshold notifications. Delivery is fire-and-forget."""

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        """Deliver a notification."""
        pass
