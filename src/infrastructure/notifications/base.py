"""
Base notification channel.

Channels keep delivered messages in an in-memory outbox. There is no real
transport; the outbox is what callers inspect to confirm delivery.
"""

import logging
from datetime import UTC, datetime
from dataclasses import dataclass, field

from src.application.interfaces.exceptions import NotificationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeliveredMessage:
    """A message accepted by a channel."""

    channel: str
    recipient: str
    body: str
    delivered_at: datetime = field(default_factory=lambda: datetime.now(UTC))


class OutboxNotificationChannel:
    """Common delivery bookkeeping for the concrete channels."""

    channel_name = "base"

    def __init__(self, recipient: str = "orders@example.com", enabled: bool = True) -> None:
        self.recipient = recipient
        self.enabled = enabled
        self.outbox: list[DeliveredMessage] = []

    def send_notification(self, message: str) -> None:
        """
        Deliver a message through this channel.

        Raises:
            NotificationError: If the channel is disabled or the message is empty
        """
        if not self.enabled:
            raise NotificationError(self.channel_name, "channel is disabled")
        if not message:
            raise NotificationError(self.channel_name, "message cannot be empty")

        delivered = DeliveredMessage(channel=self.channel_name, recipient=self.recipient, body=message)
        self.outbox.append(delivered)
        logger.info(
            f"Sent {self.channel_name} notification",
            extra={"channel": self.channel_name, "recipient": self.recipient},
        )

    @property
    def sent_messages(self) -> list[str]:
        return [delivered.body for delivered in self.outbox]

    def clear(self) -> None:
        self.outbox.clear()
