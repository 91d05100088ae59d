"""Threshold notifications for the active spending limit.

Each limit moves through Below50 -> At50 -> At80 -> Exceeded as spending
grows. Every level is announced at most once per limit, and never after a
more severe level has been announced.
"""

import logging
import threading
from dataclasses import replace
from decimal import Decimal
from typing import Optional, Union

from walletwise.domain import errors
from walletwise.domain.entities import (
    Notification,
    NotificationKind,
    SpendingLimit,
    ThresholdLevel,
    ThresholdState,
)

logger = logging.getLogger(__name__)

HALF = Decimal("0.5")
EIGHTY = Decimal("0.8")
FULL = Decimal("1")

Ratio = Union[Decimal, float, int]


def _as_decimal(ratio: Ratio) -> Decimal:
    if isinstance(ratio, Decimal):
        return ratio
    return Decimal(str(ratio))


def level_for_ratio(ratio: Ratio) -> ThresholdLevel:
    """Band the ratio falls in, regardless of what has been notified."""
    ratio = _as_decimal(ratio)
    if ratio >= FULL:
        return ThresholdLevel.EXCEEDED
    if ratio >= EIGHTY:
        return ThresholdLevel.AT_80
    if ratio >= HALF:
        return ThresholdLevel.AT_50
    return ThresholdLevel.BELOW_50


def severity_for_ratio(ratio: Ratio) -> str:
    """Display severity: ok below 50%, warning below 80%, danger otherwise."""
    ratio = _as_decimal(ratio)
    if ratio < HALF:
        return "ok"
    if ratio < EIGHTY:
        return "warning"
    return "danger"


def advance_threshold(
    state: ThresholdState, ratio: Ratio
) -> tuple[ThresholdState, Optional[ThresholdLevel]]:
    """Decide which notification, if any, a new ratio triggers.

    Levels are checked from most to least severe and at most one fires.
    Firing a level also marks every lower level as notified.

    Args:
        state: Current threshold state of the limit
        ratio: spend / limit amount

    Returns:
        Tuple of (new state, fired level or None)
    """
    ratio = _as_decimal(ratio)
    if ratio >= FULL and not state.notified_exceeded:
        return (
            replace(state, notified_half=True, notified_80=True, notified_exceeded=True),
            ThresholdLevel.EXCEEDED,
        )
    if ratio >= EIGHTY and not state.notified_80 and not state.notified_exceeded:
        return replace(state, notified_half=True, notified_80=True), ThresholdLevel.AT_80
    if (
        ratio >= HALF
        and not state.notified_half
        and not state.notified_80
        and not state.notified_exceeded
    ):
        return replace(state, notified_half=True), ThresholdLevel.AT_50
    return state, None


def build_notification(
    level: ThresholdLevel, limit: SpendingLimit, spent: Decimal
) -> Notification:
    """Build the user-facing message for a fired level."""
    if level == ThresholdLevel.EXCEEDED:
        return Notification(
            kind=NotificationKind.ERROR,
            title="You've exceeded your spending limit.",
            detail=(
                f"You've spent {spent:.2f} which is over your limit of "
                f"{limit.amount:.2f}."
            ),
            level=level,
        )
    if level == ThresholdLevel.AT_80:
        return Notification(
            kind=NotificationKind.WARN,
            title="You're almost at your spending limit.",
            detail="Your spending is near the limit. Watch your spending!",
            level=level,
        )
    if level == ThresholdLevel.AT_50:
        return Notification(
            kind=NotificationKind.INFO,
            title="You've reached 50% of your spending limit!",
            detail="You've used half of your budget.",
            level=level,
        )
    raise ValueError(f"No notification for level '{level.value}'")


class ThresholdMonitor:
    """Holds the threshold state of the active limit between recomputes."""

    def __init__(self, state: Optional[ThresholdState] = None):
        """Initialize monitor.

        Args:
            state: Previously persisted state, if any
        """
        self._state = state
        self._lock = threading.Lock()

    @property
    def state(self) -> Optional[ThresholdState]:
        return self._state

    def restore(self, state: Optional[ThresholdState]) -> None:
        """Replace the held state, e.g. with one loaded from the store."""
        with self._lock:
            self._state = state

    def check(self, limit: SpendingLimit, spent: Decimal) -> Optional[Notification]:
        """Advance the state for a new spend total.

        A limit whose identity differs from the stored state's starts from a
        fresh all-false state.

        Raises:
            InvalidAmountError: If the limit amount is not positive
        """
        if limit.amount <= 0:
            raise errors.InvalidAmountError(errors.invalid_amount(limit.amount))

        with self._lock:
            state = self._state
            if state is None or state.limit_key != limit.key:
                state = ThresholdState.fresh(limit)
            self._state, level = advance_threshold(state, spent / limit.amount)

        if level is None:
            return None
        logger.info("Spending limit for '%s' reached %s", limit.category.name, level.value)
        return build_notification(level, limit, spent)
