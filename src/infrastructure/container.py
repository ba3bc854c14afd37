"""
Dependency Injection Container - Central container for application dependencies.

This module wires repositories, notification channels, domain services and
use cases from an ApplicationConfig. Services receive their collaborators
here instead of constructing them.
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar, cast

from src.application.config import ApplicationConfig, get_config
from src.application.interfaces.notification import INotificationService
from src.application.interfaces.repositories import IEmployeeRepository
from src.application.services.order_service import OrderService
from src.application.use_cases import (
    CreateProductUseCase,
    GeneratePerformanceReportUseCase,
    PlaceOrderUseCase,
    RunPayrollUseCase,
)
from src.domain.services import PayrollCalculator, PerformanceReportService
from src.infrastructure.monitoring.logging import setup_structured_logging
from src.infrastructure.notifications import NotificationFactory
from src.infrastructure.repositories import InMemoryEmployeeRepository, default_roster

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DIContainer:
    """
    Dependency Injection Container for the lessons.

    Singletons are created on first ``get`` and reused; factories build a
    new instance on every ``get``.
    """

    def __init__(self, config: ApplicationConfig | None = None) -> None:
        """
        Initialize the container with configuration.

        Args:
            config: Application configuration; the global configuration
                (environment and .env driven) is used when omitted
        """
        self.config = config or get_config()
        self.config.validate()

        self._singletons: dict[type[Any], Any] = {}
        self._factories: dict[type[Any], Callable[[], Any]] = {}
        self._singleton_types: set[type[Any]] = set()

        # Register all components
        self._register_infrastructure()
        self._register_domain_services()
        self._register_application_services()
        self._register_use_cases()

        logger.info("Dependency injection container initialized")

    def _register_infrastructure(self) -> None:
        """Register infrastructure components."""
        currency = self.config.payroll.currency

        self._register_singleton(
            IEmployeeRepository,  # type: ignore[type-abstract]
            lambda: InMemoryEmployeeRepository(default_roster(currency)),
        )

        if self.config.features.enable_notifications:
            self._register_singleton(
                INotificationService,  # type: ignore[type-abstract]
                lambda: NotificationFactory.create(self.config.notifications),
            )

    def _register_domain_services(self) -> None:
        """Register domain services."""
        self._register_singleton(
            PayrollCalculator, lambda: PayrollCalculator(self.config.payroll.currency)
        )
        self._register_singleton(PerformanceReportService, PerformanceReportService)

    def _register_application_services(self) -> None:
        """Register application-level services."""
        if self.has(INotificationService):  # type: ignore[type-abstract]
            self._register_singleton(
                OrderService,
                lambda: OrderService(self.get(INotificationService)),  # type: ignore[type-abstract]
            )

    def _register_use_cases(self) -> None:
        """Register all use cases."""
        self._register_factory(
            CreateProductUseCase,
            lambda: CreateProductUseCase(strict_validation=self.config.catalog.strict_validation),
        )
        self._register_factory(
            RunPayrollUseCase,
            lambda: RunPayrollUseCase(
                employee_repository=self.get(IEmployeeRepository),  # type: ignore[type-abstract]
                calculator=self.get(PayrollCalculator),
            ),
        )
        self._register_factory(
            GeneratePerformanceReportUseCase,
            lambda: GeneratePerformanceReportUseCase(self.get(PerformanceReportService)),
        )
        if self.has(OrderService):
            self._register_factory(
                PlaceOrderUseCase,
                lambda: PlaceOrderUseCase(self.get(OrderService)),
            )

    def _register_singleton(self, cls: type[T], factory: Callable[[], Any]) -> None:
        """Register a singleton component."""
        self._factories[cls] = factory
        self._singleton_types.add(cls)

    def _register_factory(self, cls: type[T], factory: Callable[[], Any]) -> None:
        """Register a factory for creating instances."""
        self._factories[cls] = factory
        self._singleton_types.discard(cls)

    def get(self, cls: type[T]) -> T:
        """
        Get an instance of a registered component.

        Args:
            cls: The class type to retrieve

        Returns:
            Instance of the requested class

        Raises:
            KeyError: If the class is not registered
        """
        if cls in self._singletons:
            return cast(T, self._singletons[cls])

        if cls not in self._factories:
            raise KeyError(f"No registration found for {cls.__name__}")

        instance = self._factories[cls]()

        if cls in self._singleton_types:
            self._singletons[cls] = instance

        return cast(T, instance)

    def has(self, cls: type[T]) -> bool:
        """Check if a component is registered."""
        return cls in self._factories

    def register(self, cls: type[T], instance: T) -> None:
        """
        Register a pre-created instance, replacing any existing registration.

        Args:
            cls: The class type
            instance: The instance to register
        """
        self._singletons[cls] = instance
        self._factories[cls] = lambda: instance
        self._singleton_types.add(cls)

    def reset(self) -> None:
        """Drop created singletons; they are rebuilt on the next ``get``."""
        self._singletons.clear()
        logger.info("Container singletons cleared")


def create_container(
    config: ApplicationConfig | None = None, configure_logging: bool = False
) -> DIContainer:
    """
    Create a container, optionally configuring logging from the same config.

    Args:
        config: Application configuration; the global configuration is
            used when omitted
        configure_logging: Install root logging handlers as configured

    Returns:
        DIContainer: Ready to use container
    """
    config = config or get_config()
    if configure_logging:
        format_type = "json" if config.features.enable_structured_logging else config.logging.format_type
        setup_structured_logging(
            level=config.logging.level,
            format_type=format_type,
            log_file=config.logging.file,
        )
    return DIContainer(config)
