"""
Notification Interface - Defines the contract for notification channels

Services that need to tell someone something depend on this protocol, not on
email or chat clients. The infrastructure layer provides the channels.
"""

# Standard library imports
from abc import abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class INotificationService(Protocol):
    """
    Notification channel interface.

    Implementations deliver a single text message to their audience.
    """

    @abstractmethod
    def send_notification(self, message: str) -> None:
        """
        Deliver a message.

        Args:
            message: Text to deliver

        Raises:
            NotificationError: If the message cannot be delivered
        """
        ...
