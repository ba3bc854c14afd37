"""
Composite notification channel.

Fans one message out to several channels. Every channel is attempted; if any
fail, a single NotificationError naming them is raised afterwards.
"""

import logging
from collections.abc import Sequence

from src.application.interfaces.exceptions import NotificationError
from src.application.interfaces.notification import INotificationService

logger = logging.getLogger(__name__)


class CompositeNotificationService:
    """Sends each notification through all wrapped channels."""

    def __init__(self, channels: Sequence[INotificationService]) -> None:
        if not channels:
            raise ValueError("CompositeNotificationService requires at least one channel")
        self.channels = list(channels)

    def send_notification(self, message: str) -> None:
        failures: list[NotificationError] = []
        for channel in self.channels:
            try:
                channel.send_notification(message)
            except NotificationError as e:
                logger.warning(f"Channel {e.channel} failed: {e}")
                failures.append(e)

        if failures:
            names = ", ".join(failure.channel for failure in failures)
            raise NotificationError("composite", f"delivery failed for {names}", cause=failures[0])
