"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Default values (no environment required)
- CHARCLASS_RULES_ prefix isolates settings from the host's env vars
- log_level validation and normalization
- Environment detection
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from charclass_rules.core.config import Environment, Settings, get_settings


@pytest.mark.unit
class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


@pytest.mark.unit
class TestSettingsDefaults:
    """Test Settings defaults."""

    def test_loads_without_environment(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == "INFO"
        assert settings.app_name == "charclass-rules"
        assert settings.is_development is True


@pytest.mark.unit
class TestSettingsEnvPrefix:
    """Host application env vars without the prefix are ignored."""

    def test_unprefixed_host_variables_are_ignored(self):
        host_env = {
            "ENVIRONMENT": "staging",
            "LOG_LEVEL": "warn",
            "APP_NAME": "host-app",
            "APP_VERSION": "9.9.9",
        }
        with patch.dict(os.environ, host_env, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == "INFO"
        assert settings.app_name == "charclass-rules"
        assert settings.app_version == "0.1.0"

    def test_prefixed_variables_are_read(self):
        env = {
            "CHARCLASS_RULES_ENVIRONMENT": "production",
            "CHARCLASS_RULES_LOG_LEVEL": "warning",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings()

        assert settings.environment == Environment.PRODUCTION
        assert settings.is_development is False
        assert settings.log_level == "WARNING"


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings field validation."""

    def test_log_level_is_upper_cased(self):
        with patch.dict(os.environ, {"CHARCLASS_RULES_LOG_LEVEL": "debug"}, clear=True):
            assert Settings().log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with patch.dict(
            os.environ, {"CHARCLASS_RULES_LOG_LEVEL": "verbose"}, clear=True
        ):
            with pytest.raises(ValidationError) as exc_info:
                Settings()

        assert "log_level" in str(exc_info.value)

    def test_invalid_environment_rejected(self):
        with patch.dict(
            os.environ, {"CHARCLASS_RULES_ENVIRONMENT": "staging"}, clear=True
        ):
            with pytest.raises(ValidationError):
                Settings()

    def test_prefix_is_case_insensitive(self):
        with patch.dict(os.environ, {"charclass_rules_environment": "ci"}, clear=True):
            assert Settings().environment == Environment.CI


@pytest.mark.unit
class TestGetSettings:
    """Test cached settings accessor."""

    def test_returns_same_instance(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
