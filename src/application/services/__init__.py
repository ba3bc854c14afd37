"""
Application Services - Business logic orchestration

This module contains application services that orchestrate business logic
across domain entities and the ports the infrastructure layer implements.
"""

from .order_service import OrderService, TightlyCoupledOrderService

__all__ = [
    "OrderService",
    "TightlyCoupledOrderService",
]
