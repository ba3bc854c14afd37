"""
Order Use Cases

Places an order through the injected OrderService.
"""

from dataclasses import dataclass

from src.application.interfaces.exceptions import NotificationError
from src.application.services.order_service import OrderService

from .base import UseCase, UseCaseRequest, UseCaseResponse


@dataclass(kw_only=True)
class PlaceOrderRequest(UseCaseRequest):
    """Request to place an order."""


@dataclass(kw_only=True)
class PlaceOrderResponse(UseCaseResponse):
    """Response telling whether the order was placed and announced."""

    notified: bool = False


class PlaceOrderUseCase(UseCase[PlaceOrderRequest, PlaceOrderResponse]):
    """Places an order; a failed notification is reported, not raised."""

    response_type = PlaceOrderResponse

    def __init__(self, order_service: OrderService) -> None:
        super().__init__("PlaceOrderUseCase")
        self.order_service = order_service

    def validate(self, request: PlaceOrderRequest) -> str | None:
        return None

    def process(self, request: PlaceOrderRequest) -> PlaceOrderResponse:
        try:
            self.order_service.place_order()
        except NotificationError as e:
            return PlaceOrderResponse.error_response(str(e), request.request_id, notified=False)
        return PlaceOrderResponse.success_response(None, request.request_id, notified=True)
