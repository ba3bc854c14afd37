"""
Application Use Cases Layer

Use cases coordinate between domain services and ports to implement the
workflows of each lesson while maintaining clean architecture boundaries.
"""

from .base import UseCase, UseCaseRequest, UseCaseResponse
from .catalog import CreateProductRequest, CreateProductResponse, CreateProductUseCase
from .orders import PlaceOrderRequest, PlaceOrderResponse, PlaceOrderUseCase
from .payroll import RunPayrollRequest, RunPayrollResponse, RunPayrollUseCase
from .reporting import (
    GeneratePerformanceReportRequest,
    GeneratePerformanceReportResponse,
    GeneratePerformanceReportUseCase,
)

__all__ = [
    "UseCase",
    "UseCaseRequest",
    "UseCaseResponse",
    # Catalog
    "CreateProductUseCase",
    "CreateProductRequest",
    "CreateProductResponse",
    # Orders
    "PlaceOrderUseCase",
    "PlaceOrderRequest",
    "PlaceOrderResponse",
    # Payroll
    "RunPayrollUseCase",
    "RunPayrollRequest",
    "RunPayrollResponse",
    # Reporting
    "GeneratePerformanceReportUseCase",
    "GeneratePerformanceReportRequest",
    "GeneratePerformanceReportResponse",
]
