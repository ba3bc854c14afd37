"""Notification channel implementations."""

from .base import DeliveredMessage, OutboxNotificationChannel
from .composite import CompositeNotificationService
from .email_service import EmailNotificationService
from .factory import NotificationFactory
from .skype_service import SkypeNotificationService

__all__ = [
    "DeliveredMessage",
    "OutboxNotificationChannel",
    "EmailNotificationService",
    "SkypeNotificationService",
    "CompositeNotificationService",
    "NotificationFactory",
]
