"""
Base Use Case

Provides the foundation for all use cases in the application layer.
Implements common patterns like logging, validation, and error handling.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Generic, Self, TypeVar
from uuid import UUID, uuid4

from src.infrastructure.monitoring.logging import correlation_context

logger = logging.getLogger(__name__)

# Type variables for request and response
TRequest = TypeVar("TRequest", bound="UseCaseRequest")
TResponse = TypeVar("TResponse", bound="UseCaseResponse")


@dataclass(kw_only=True)
class UseCaseRequest:
    """Base class for use case requests."""

    request_id: UUID = field(default_factory=uuid4)
    correlation_id: UUID | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(kw_only=True)
class UseCaseResponse:
    """Base class for use case responses."""

    success: bool
    data: Any | None = None
    error: str | None = None
    request_id: UUID | None = None

    @classmethod
    def success_response(cls, data: Any, request_id: UUID, **fields: Any) -> Self:
        """Create a successful response; ``fields`` fill subclass attributes."""
        return cls(success=True, data=data, request_id=request_id, **fields)

    @classmethod
    def error_response(cls, error: str, request_id: UUID, **fields: Any) -> Self:
        """Create an error response; ``fields`` fill subclass attributes."""
        return cls(success=False, error=error, request_id=request_id, **fields)


class UseCase(ABC, Generic[TRequest, TResponse]):
    """
    Abstract base class for all use cases.

    Provides a consistent interface and common functionality for
    business logic orchestration. Subclasses set ``response_type`` so that
    error responses come back as the same type as successful ones.
    """

    response_type: type[UseCaseResponse] = UseCaseResponse

    def __init__(self, name: str | None = None) -> None:
        """
        Initialize use case.

        Args:
            name: Optional name for the use case (defaults to class name)
        """
        self.name = name or self.__class__.__name__
        self.logger = logging.getLogger(f"{__name__}.{self.name}")

    def execute(self, request: TRequest) -> TResponse:
        """
        Execute the use case.

        This method provides the template for use case execution with
        logging, validation, and error handling. Exceptions raised by
        ``process`` are logged and turned into error responses.

        Args:
            request: The use case request

        Returns:
            The use case response
        """
        request_id = request.request_id
        correlation_id = str(request.correlation_id or request_id)

        with correlation_context(correlation_id):
            self.logger.info(
                f"Executing {self.name}",
                extra={
                    "request_id": str(request_id),
                    "use_case": self.name,
                },
            )

            try:
                # Validate the request
                validation_error = self.validate(request)
                if validation_error:
                    self.logger.warning(
                        f"Validation failed for {self.name}: {validation_error}",
                        extra={"request_id": str(request_id)},
                    )
                    return self._create_error_response(validation_error, request_id)

                # Execute the business logic
                response = self.process(request)

                self.logger.info(
                    f"Successfully executed {self.name}",
                    extra={
                        "request_id": str(request_id),
                        "success": response.success,
                    },
                )

                return response

            except Exception as e:
                self.logger.error(
                    f"Error executing {self.name}: {e}",
                    extra={"request_id": str(request_id), "error_type": type(e).__name__},
                    exc_info=True,
                )
                return self._create_error_response(str(e), request_id)

    @abstractmethod
    def validate(self, request: TRequest) -> str | None:
        """
        Validate the request.

        Args:
            request: The request to validate

        Returns:
            Error message if validation fails, None otherwise
        """
        pass

    @abstractmethod
    def process(self, request: TRequest) -> TResponse:
        """
        Process the request and execute business logic.

        Args:
            request: The validated request

        Returns:
            The response
        """
        pass

    def _create_error_response(self, error: str, request_id: UUID) -> TResponse:
        return self.response_type.error_response(error, request_id)  # type: ignore[return-value]
