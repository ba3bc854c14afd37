"""Email notification channel."""

from .base import OutboxNotificationChannel

DEFAULT_EMAIL_BODY = "Order confirmation email"


class EmailNotificationService(OutboxNotificationChannel):
    """Delivers notifications by email."""

    channel_name = "email"

    def send_email(self, body: str = DEFAULT_EMAIL_BODY) -> None:
        """Channel-specific call used by code that depends on email directly."""
        self.send_notification(body)
