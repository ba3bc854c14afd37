"""
Configuration Loader - Handles IO operations for configuration management.

This module is responsible for loading and saving configuration from/to
various sources (YAML files, .env files, environment variables) while keeping
the ApplicationConfig class focused on data representation and validation.
"""

import logging
import os

import yaml
from dotenv import load_dotenv

from src.application.config import (
    ApplicationConfig,
    CatalogConfig,
    Environment,
    FeatureFlags,
    LoggingConfig,
    NotificationConfig,
    PayrollConfig,
)

logger = logging.getLogger(__name__)


def _parse_environment(value: str) -> Environment:
    try:
        return Environment(value)
    except ValueError:
        raise ValueError(f"Invalid environment: {value}") from None


class ConfigLoader:
    """Handles loading and saving of configuration from various sources."""

    @classmethod
    def from_env(cls, env_file: str | None = None) -> ApplicationConfig:
        """
        Create configuration from environment variables.

        Args:
            env_file: Optional .env file loaded first; variables already set
                in the process environment take precedence

        Returns:
            ApplicationConfig: Configuration loaded from environment
        """
        if env_file:
            loaded = load_dotenv(env_file, override=False)
            logger.debug(f"Loaded env file {env_file}: {loaded}")

        environment = _parse_environment(os.getenv("ENVIRONMENT", "development"))

        return ApplicationConfig(
            environment=environment,
            logging=LoggingConfig.from_env(),
            notifications=NotificationConfig.from_env(),
            payroll=PayrollConfig.from_env(),
            catalog=CatalogConfig.from_env(),
            features=FeatureFlags.from_env(),
        )

    @classmethod
    def from_yaml(cls, path: str) -> ApplicationConfig:
        """
        Load configuration from YAML file.

        Sections and keys that are absent keep their defaults.

        Args:
            path: Path to YAML configuration file

        Returns:
            ApplicationConfig: Configuration loaded from YAML file
        """
        with open(path) as f:
            data = yaml.safe_load(f)

        config = ApplicationConfig()

        # Handle empty or null YAML files
        if not data:
            return config

        if "environment" in data:
            config.environment = _parse_environment(data["environment"])

        if "logging" in data:
            log_data = data["logging"] or {}
            config.logging = LoggingConfig(
                level=log_data.get("level", config.logging.level),
                format_type=log_data.get("format_type", config.logging.format_type),
                file=log_data.get("file", config.logging.file),
            )

        if "notifications" in data:
            notif_data = data["notifications"] or {}
            channels = notif_data.get("channels", config.notifications.channels)
            if isinstance(channels, str):
                channels = [name.strip() for name in channels.split(",") if name.strip()]
            config.notifications = NotificationConfig(
                channels=[str(name).lower() for name in channels],
                enabled=notif_data.get("enabled", config.notifications.enabled),
            )

        if "payroll" in data:
            payroll_data = data["payroll"] or {}
            config.payroll = PayrollConfig(
                currency=str(payroll_data.get("currency", config.payroll.currency)).upper(),
            )

        if "catalog" in data:
            catalog_data = data["catalog"] or {}
            config.catalog = CatalogConfig(
                strict_validation=catalog_data.get(
                    "strict_validation", config.catalog.strict_validation
                ),
            )

        if "features" in data:
            feat_data = data["features"] or {}
            config.features = FeatureFlags(
                enable_notifications=feat_data.get(
                    "enable_notifications", config.features.enable_notifications
                ),
                enable_structured_logging=feat_data.get(
                    "enable_structured_logging", config.features.enable_structured_logging
                ),
            )

        return config

    @classmethod
    def to_yaml(cls, config: ApplicationConfig) -> str:
        """
        Convert configuration to YAML string.

        Args:
            config: ApplicationConfig instance to convert

        Returns:
            str: YAML representation of the configuration
        """
        return yaml.safe_dump(config.to_dict(), default_flow_style=False)

    @classmethod
    def save_to_yaml(cls, config: ApplicationConfig, path: str) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: ApplicationConfig instance to save
            path: Path where the YAML file will be written
        """
        with open(path, "w") as f:
            f.write(cls.to_yaml(config))
