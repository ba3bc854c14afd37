"""
Domain-level exceptions for the lessons.

This module defines exceptions that are specific to domain logic and business rules.
These exceptions are raised within domain entities and builders.
"""

from typing import Any


class DomainException(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


class InvalidPriceError(DomainException, ValueError):
    """
    Raised by a builder setter when a price is negative.

    Also a ValueError so callers treating it as a bad argument keep working.
    """

    def __init__(self, price: Any, message: str = "Price must be positive") -> None:
        super().__init__(message, details={"field": "price", "value": price})
        self.price = price


class IncompleteProductError(DomainException):
    """
    Raised at build time when required product fields are missing.

    A product needs a name and a strictly positive price.
    """

    def __init__(
        self,
        missing_fields: list[str],
        message: str = "Name and valid price are required",
    ) -> None:
        super().__init__(message, details={"missing_fields": missing_fields})
        self.missing_fields = missing_fields
