"""
Order Service - Application layer orchestration for placing orders.

``OrderService`` receives its notification channel through the constructor
and only knows the ``INotificationService`` protocol, so any channel (or a
test double) can be swapped in without touching the service.

``TightlyCoupledOrderService`` is the counter-example: it instantiates the
email and Skype channels itself, so changing or testing the delivery means
editing the service.
"""

import logging

from src.application.interfaces.notification import INotificationService
from src.infrastructure.notifications.email_service import EmailNotificationService
from src.infrastructure.notifications.skype_service import SkypeNotificationService

logger = logging.getLogger(__name__)

ORDER_PLACED_MESSAGE = "Order placed!"


class OrderService:
    """Places orders and reports them through an injected channel."""

    def __init__(self, notification_service: INotificationService) -> None:
        """
        Initialize the order service.

        Args:
            notification_service: Channel used to announce placed orders
        """
        self.notification_service = notification_service

    def place_order(self) -> None:
        """
        Place an order and send exactly one notification.

        Raises:
            NotificationError: If the channel cannot deliver the message
        """
        logger.info("Placing order...")
        self.notification_service.send_notification(ORDER_PLACED_MESSAGE)


class TightlyCoupledOrderService:
    """Places orders using channels it creates for itself."""

    def __init__(self) -> None:
        self.email_service = EmailNotificationService()
        self.skype_service = SkypeNotificationService()

    def place_order(self) -> None:
        logger.info("Placing order...")
        self.email_service.send_email()
        self.skype_service.send_skype()
