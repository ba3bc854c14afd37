"""
Tests for ConfigLoader: environment, .env and YAML sources.
"""

# Standard library imports
import os
from unittest.mock import patch

# Third-party imports
import pytest
import yaml

# Local imports
from src.application.config import ApplicationConfig, Environment
from src.application.config_loader import ConfigLoader


class TestFromEnv:
    """Test loading from the process environment and .env files"""

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        config = ConfigLoader.from_env()

        assert config.environment == Environment.DEVELOPMENT
        assert config.notifications.channels == ["email"]

    @patch.dict(os.environ, {"ENVIRONMENT": "staging"}, clear=True)
    def test_invalid_environment(self):
        with pytest.raises(ValueError, match="Invalid environment: staging"):
            ConfigLoader.from_env()

    @patch.dict(os.environ, {}, clear=True)
    def test_env_file_is_loaded(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("ENVIRONMENT=testing\nPAYROLL_CURRENCY=eur\nNOTIFICATION_CHANNELS=skype\n")

        config = ConfigLoader.from_env(str(env_file))

        assert config.environment == Environment.TESTING
        assert config.payroll.currency == "EUR"
        assert config.notifications.channels == ["skype"]

    @patch.dict(os.environ, {"PAYROLL_CURRENCY": "GBP"}, clear=True)
    def test_process_environment_wins_over_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("PAYROLL_CURRENCY=EUR\n")

        config = ConfigLoader.from_env(str(env_file))

        assert config.payroll.currency == "GBP"


class TestYaml:
    """Test YAML loading and saving"""

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert ConfigLoader.from_yaml(str(path)) == ApplicationConfig()

    def test_partial_sections_keep_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "environment: testing\n"
            "notifications:\n"
            "  channels: Email, Skype\n"
            "payroll:\n"
            "  currency: eur\n"
        )

        config = ConfigLoader.from_yaml(str(path))

        assert config.environment == Environment.TESTING
        assert config.notifications.channels == ["email", "skype"]
        assert config.notifications.enabled is True
        assert config.payroll.currency == "EUR"
        assert config.logging.level == "INFO"
        assert config.catalog.strict_validation is True

    def test_invalid_environment_in_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("environment: qa\n")

        with pytest.raises(ValueError, match="Invalid environment: qa"):
            ConfigLoader.from_yaml(str(path))

    def test_to_yaml_is_parseable(self, app_config):
        data = yaml.safe_load(ConfigLoader.to_yaml(app_config))

        assert data == app_config.to_dict()

    def test_save_and_load(self, tmp_path):
        config = ApplicationConfig(environment=Environment.TESTING)
        config.features.enable_structured_logging = True
        config.notifications.channels = ["email", "skype"]
        path = tmp_path / "saved.yaml"

        ConfigLoader.save_to_yaml(config, str(path))

        assert ConfigLoader.from_yaml(str(path)) == config
