"""
Tests for the dependency injection container.
"""

# Standard library imports
import os
from decimal import Decimal
from unittest.mock import patch

# Third-party imports
import pytest

# Local imports
from src.application.config import (
    ApplicationConfig,
    FeatureFlags,
    NotificationConfig,
    PayrollConfig,
    get_config,
    set_config,
)
from src.application.interfaces import IEmployeeRepository, INotificationService
from src.application.services import OrderService
from src.application.use_cases import (
    CreateProductUseCase,
    PlaceOrderRequest,
    PlaceOrderUseCase,
    RunPayrollRequest,
    RunPayrollUseCase,
)
from src.domain.services import PayrollCalculator
from src.domain.value_objects import Money
from src.infrastructure.container import DIContainer, create_container
from src.infrastructure.notifications import (
    CompositeNotificationService,
    EmailNotificationService,
    SkypeNotificationService,
)


class TestDIContainer:
    """Test registrations and lifetimes"""

    def test_singletons_are_reused(self, app_config):
        container = DIContainer(app_config)

        assert container.get(IEmployeeRepository) is container.get(IEmployeeRepository)
        assert container.get(PayrollCalculator) is container.get(PayrollCalculator)

    def test_use_cases_are_created_per_get(self, app_config):
        container = DIContainer(app_config)

        assert container.get(RunPayrollUseCase) is not container.get(RunPayrollUseCase)

    def test_default_notifier_is_email(self, app_config):
        container = DIContainer(app_config)

        assert isinstance(container.get(INotificationService), EmailNotificationService)

    def test_several_channels_give_composite(self):
        config = ApplicationConfig(notifications=NotificationConfig(channels=["email", "skype"]))

        container = DIContainer(config)

        assert isinstance(container.get(INotificationService), CompositeNotificationService)

    def test_notifications_disabled(self):
        config = ApplicationConfig(features=FeatureFlags(enable_notifications=False))

        container = DIContainer(config)

        assert not container.has(INotificationService)
        assert not container.has(OrderService)
        assert not container.has(PlaceOrderUseCase)
        with pytest.raises(KeyError, match="No registration found for PlaceOrderUseCase"):
            container.get(PlaceOrderUseCase)

    def test_invalid_config_is_rejected(self):
        with pytest.raises(ValueError):
            DIContainer(ApplicationConfig(payroll=PayrollConfig(currency="XX")))

    def test_payroll_uses_configured_currency(self):
        container = DIContainer(ApplicationConfig(payroll=PayrollConfig(currency="EUR")))

        response = container.get(RunPayrollUseCase).execute(RunPayrollRequest())

        assert response.success is True
        assert response.total == Money(Decimal("5068000"), "EUR")

    def test_catalog_strictness_from_config(self, app_config):
        app_config.catalog.strict_validation = False

        use_case = DIContainer(app_config).get(CreateProductUseCase)

        assert use_case.strict_validation is False

    def test_register_replaces_notifier(self, app_config, recording_notifier):
        container = DIContainer(app_config)
        container.register(INotificationService, recording_notifier)

        container.get(PlaceOrderUseCase).execute(PlaceOrderRequest())

        assert recording_notifier.messages == ["Order placed!"]

    def test_reset_rebuilds_singletons(self, app_config):
        container = DIContainer(app_config)
        first = container.get(IEmployeeRepository)

        container.reset()

        assert container.get(IEmployeeRepository) is not first


class TestCreateContainer:
    """Test container creation from the global configuration"""

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        container = create_container()

        assert isinstance(container, DIContainer)
        assert container.config.payroll.currency == "USD"

    @patch.dict(os.environ, {"PAYROLL_CURRENCY": "EUR"}, clear=True)
    def test_uses_environment_configuration(self):
        container = create_container()

        assert container.config is get_config()
        assert container.get(PayrollCalculator).currency == "EUR"

    @patch.dict(
        os.environ,
        {"NOTIFICATION_CHANNELS": "skype", "CATALOG_STRICT_VALIDATION": "false"},
        clear=True,
    )
    def test_container_without_config_reads_environment(self):
        container = DIContainer()

        assert isinstance(container.get(INotificationService), SkypeNotificationService)
        assert container.get(CreateProductUseCase).strict_validation is False

    def test_set_config_reaches_wiring(self):
        set_config(ApplicationConfig(payroll=PayrollConfig(currency="GBP")))

        assert create_container().get(PayrollCalculator).currency == "GBP"

    def test_configures_logging(self, restore_root_logger):
        config = ApplicationConfig()
        config.features.enable_structured_logging = True

        create_container(config, configure_logging=True)

        assert restore_root_logger.handlers
