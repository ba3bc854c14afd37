"""
Notification Factory - Creates notification channels from configuration.
"""

import logging

from src.application.config import NotificationConfig
from src.application.interfaces.notification import INotificationService

from .base import OutboxNotificationChannel
from .composite import CompositeNotificationService
from .email_service import EmailNotificationService
from .skype_service import SkypeNotificationService

logger = logging.getLogger(__name__)


class NotificationFactory:
    """Factory for creating notification channels."""

    _channels: dict[str, type[OutboxNotificationChannel]] = {
        "email": EmailNotificationService,
        "skype": SkypeNotificationService,
    }

    @classmethod
    def supported_channels(cls) -> list[str]:
        return sorted(cls._channels)

    @classmethod
    def create_channel(cls, name: str, enabled: bool = True) -> OutboxNotificationChannel:
        """
        Create a single channel by name.

        Raises:
            ValueError: If the channel name is unknown
        """
        channel_class = cls._channels.get(name.lower())
        if channel_class is None:
            raise ValueError(
                f"Unsupported notification channel: {name}. "
                f"Supported channels: {', '.join(cls.supported_channels())}"
            )
        return channel_class(enabled=enabled)

    @classmethod
    def create(cls, config: NotificationConfig) -> INotificationService:
        """
        Create the notification service described by the configuration.

        A single configured channel is returned as-is; several are wrapped in
        a CompositeNotificationService.
        """
        channels = [cls.create_channel(name, enabled=config.enabled) for name in config.channels]
        logger.info(f"Created notification channels: {', '.join(config.channels)}")
        if len(channels) == 1:
            return channels[0]
        return CompositeNotificationService(channels)
