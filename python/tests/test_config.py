"""Unit tests for RegistryConfig."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from error_handler_registry.config import RegistryConfig
from error_handler_registry.exceptions import ConfigurationError


class TestRegistryConfig:
    """Test RegistryConfig defaults and environment loading."""

    def test_defaults(self):
        """Test defaults when no environment variables are set."""
        with patch.dict(os.environ, {}, clear=True):
            config = RegistryConfig.from_env()

        assert config.capture_warnings is True
        assert config.capture_thread_exceptions is False

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("true", True),
            ("TRUE", True),
            ("1", True),
            ("yes", True),
            ("on", True),
            ("false", False),
            ("False", False),
            ("0", False),
            ("no", False),
            ("off", False),
            (" true ", True),
        ],
    )
    def test_boolean_parsing(self, value, expected):
        """Test accepted boolean spellings."""
        with patch.dict(
            os.environ,
            {"ERROR_HANDLER_REGISTRY_CAPTURE_THREAD_EXCEPTIONS": value},
            clear=True,
        ):
            config = RegistryConfig.from_env()

        assert config.capture_thread_exceptions is expected

    def test_invalid_boolean_raises_configuration_error(self):
        """Test that unparseable values surface as ConfigurationError."""
        with patch.dict(
            os.environ,
            {"ERROR_HANDLER_REGISTRY_CAPTURE_WARNINGS": "sometimes"},
            clear=True,
        ):
            with pytest.raises(ConfigurationError):
                RegistryConfig.from_env()

    def test_explicit_values_take_precedence(self):
        """Test that constructor data overrides environment variables."""
        with patch.dict(
            os.environ,
            {"ERROR_HANDLER_REGISTRY_CAPTURE_WARNINGS": "false"},
            clear=True,
        ):
            config = RegistryConfig(capture_warnings=True)

        assert config.capture_warnings is True

    def test_direct_construction_raises_validation_error(self):
        """Test that direct construction reports pydantic validation errors."""
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValidationError):
                RegistryConfig(capture_warnings="sometimes")

    def test_unknown_prefixed_variables_ignored(self):
        """Test that other ERROR_HANDLER_REGISTRY_* variables are ignored."""
        with patch.dict(
            os.environ,
            {
                "ERROR_HANDLER_REGISTRY_LOG_LEVEL": "DEBUG",
                "ERROR_HANDLER_REGISTRY_SOMETHING_ELSE": "x",
            },
            clear=True,
        ):
            config = RegistryConfig.from_env()

        assert config.capture_warnings is True

    def test_unprefixed_variables_ignored(self):
        """Test that variables without the prefix are not read."""
        with patch.dict(os.environ, {"CAPTURE_WARNINGS": "false"}, clear=True):
            config = RegistryConfig.from_env()

        assert config.capture_warnings is True

    def test_config_is_immutable(self):
        """Test that loaded configuration cannot be changed."""
        with patch.dict(os.environ, {}, clear=True):
            config = RegistryConfig.from_env()

        with pytest.raises(ValidationError):
            config.capture_warnings = False
