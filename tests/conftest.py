"""Global pytest configuration and fixtures."""

# Standard library imports
import logging
from decimal import Decimal
from pathlib import Path

# Load test environment variables
from dotenv import load_dotenv

test_env_path = Path(__file__).parent.parent / ".env.test"
if test_env_path.exists():
    load_dotenv(test_env_path, override=True)

# Third-party imports
import pytest

# Local imports
from src.application.config import ApplicationConfig, reset_config
from src.domain.entities import Employee, FullTimeEmployee, Intern, ProductBuilder, Vendor
from src.infrastructure.notifications import EmailNotificationService, SkypeNotificationService


class RecordingNotificationService:
    """Test double that records every message it is asked to send."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def send_notification(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def full_time_employee() -> FullTimeEmployee:
    return FullTimeEmployee("Alice", "F001", Decimal("50000"), Decimal("10000"))


@pytest.fixture
def intern() -> Intern:
    return Intern("Bob", "I101", Decimal("8000"))


@pytest.fixture
def vendor() -> Vendor:
    return Vendor("accenture", "A401", Decimal("5000000"))


@pytest.fixture
def report_subject() -> Employee:
    return Employee("John", "101")


@pytest.fixture
def iphone_builder() -> ProductBuilder:
    """Fully populated, valid product builder."""
    return (
        ProductBuilder()
        .set_name("iPhone 15 Pro")
        .set_desc("The latest iPhone with A17 chip")
        .set_price(1399)
        .set_brand("Apple")
        .set_category("Mobile")
        .set_discount(5)
        .set_created_at("2025-07-22")
        .set_updated_at("2025-07-22")
        .set_images(["front.jpg", "back.jpg"])
    )


@pytest.fixture
def recording_notifier() -> RecordingNotificationService:
    return RecordingNotificationService()


@pytest.fixture
def email_channel() -> EmailNotificationService:
    return EmailNotificationService()


@pytest.fixture
def skype_channel() -> SkypeNotificationService:
    return SkypeNotificationService()


@pytest.fixture
def app_config() -> ApplicationConfig:
    return ApplicationConfig()


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the configuration singleton between tests."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test reconfigures logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
