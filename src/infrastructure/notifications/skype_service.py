"""Skype notification channel."""

from .base import OutboxNotificationChannel

DEFAULT_SKYPE_BODY = "Order confirmation message"


class SkypeNotificationService(OutboxNotificationChannel):
    """Delivers notifications as Skype chat messages."""

    channel_name = "skype"

    def __init__(self, recipient: str = "orders-channel", enabled: bool = True) -> None:
        super().__init__(recipient=recipient, enabled=enabled)

    def send_skype(self, body: str = DEFAULT_SKYPE_BODY) -> None:
        """Channel-specific call used by code that depends on Skype directly."""
        self.send_notification(body)
