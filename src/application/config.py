"""
Application Configuration - Central configuration management.

This module provides configuration management for the application,
including environment variables, feature flags, and runtime settings.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from src.domain.constants import CURRENCY_CODE_LENGTH, DEFAULT_CURRENCY

SUPPORTED_NOTIFICATION_CHANNELS = ("email", "skype")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format_type: str = "text"
    file: str | None = None

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """Create configuration from environment variables."""
        file_path = os.getenv("LOG_FILE")
        return cls(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format_type=os.getenv("LOG_FORMAT_TYPE", "text"),
            file=file_path if file_path else None,
        )


@dataclass
class NotificationConfig:
    """Notification channel configuration."""

    channels: list[str] = field(default_factory=lambda: ["email"])
    enabled: bool = True

    @classmethod
    def from_env(cls) -> "NotificationConfig":
        """Create configuration from environment variables.

        NOTIFICATION_CHANNELS is a comma separated list, e.g. "email,skype".
        """
        raw = os.getenv("NOTIFICATION_CHANNELS", "email")
        channels = [name.strip().lower() for name in raw.split(",") if name.strip()]
        return cls(
            channels=channels,
            enabled=_env_bool("NOTIFICATION_ENABLED", "true"),
        )


@dataclass
class PayrollConfig:
    """Payroll configuration."""

    currency: str = DEFAULT_CURRENCY

    @classmethod
    def from_env(cls) -> "PayrollConfig":
        """Create configuration from environment variables."""
        return cls(currency=os.getenv("PAYROLL_CURRENCY", DEFAULT_CURRENCY).upper())


@dataclass
class CatalogConfig:
    """Product catalog configuration."""

    strict_validation: bool = True

    @classmethod
    def from_env(cls) -> "CatalogConfig":
        """Create configuration from environment variables."""
        return cls(strict_validation=_env_bool("CATALOG_STRICT_VALIDATION", "true"))


@dataclass
class FeatureFlags:
    """Feature flags for the application."""

    enable_notifications: bool = True
    enable_structured_logging: bool = False

    @classmethod
    def from_env(cls) -> "FeatureFlags":
        """Create configuration from environment variables."""
        return cls(
            enable_notifications=_env_bool("FEATURE_NOTIFICATIONS", "true"),
            enable_structured_logging=_env_bool("FEATURE_STRUCTURED_LOGGING", "false"),
        )


@dataclass
class ApplicationConfig:
    """Main application configuration."""

    environment: Environment = Environment.DEVELOPMENT
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    notifications: NotificationConfig = field(default_factory=NotificationConfig)
    payroll: PayrollConfig = field(default_factory=PayrollConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    features: FeatureFlags = field(default_factory=FeatureFlags)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "environment": self.environment.value,
            "logging": {
                "level": self.logging.level,
                "format_type": self.logging.format_type,
                "file": self.logging.file,
            },
            "notifications": {
                "channels": list(self.notifications.channels),
                "enabled": self.notifications.enabled,
            },
            "payroll": {
                "currency": self.payroll.currency,
            },
            "catalog": {
                "strict_validation": self.catalog.strict_validation,
            },
            "features": {
                "enable_notifications": self.features.enable_notifications,
                "enable_structured_logging": self.features.enable_structured_logging,
            },
        }

    def validate(self) -> bool:
        """
        Validate the configuration.

        Returns:
            True if valid, raises exception otherwise
        """
        if self.logging.level.upper() not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.logging.level}")
        if self.logging.format_type not in ("text", "json"):
            raise ValueError(f"Invalid log format type: {self.logging.format_type}")

        currency = self.payroll.currency
        if len(currency) != CURRENCY_CODE_LENGTH or not currency.isalpha():
            raise ValueError(f"Invalid payroll currency: {currency}")

        if self.features.enable_notifications:
            if not self.notifications.channels:
                raise ValueError("At least one notification channel is required")
            for channel in self.notifications.channels:
                if channel not in SUPPORTED_NOTIFICATION_CHANNELS:
                    raise ValueError(f"Unsupported notification channel: {channel}")

        # Lenient product building is for experimentation only
        if self.environment == Environment.PRODUCTION and not self.catalog.strict_validation:
            raise ValueError("Strict catalog validation is required in production")

        return True


# Global configuration singleton
_config: ApplicationConfig | None = None


def get_config() -> ApplicationConfig:
    """
    Get the application configuration singleton.

    Returns:
        ApplicationConfig: The application configuration
    """
    global _config
    if _config is None:
        from src.application import config_loader

        _config = config_loader.ConfigLoader.from_env()
    return _config


def set_config(config: ApplicationConfig) -> None:
    """
    Set the application configuration.

    Args:
        config: The new configuration
    """
    global _config
    _config = config


def reset_config() -> None:
    """Reset the configuration singleton."""
    global _config
    _config = None
