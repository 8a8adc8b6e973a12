"""
Unit tests for DateMathConfig.

Tests defaults, environment overrides and validation errors.
"""

from datetime import UTC

import pytest

from datemath.config import DateMathConfig, get_config, load_config, reset_config
from datemath.exceptions import InvalidConfigError


class TestDefaults:
    """Tests for default settings."""

    def test_defaults(self):
        config = DateMathConfig()
        assert config.timezone == "UTC"
        assert config.tzinfo is UTC
        assert config.week_starts_on == "sun"
        assert config.week_start_ordinal == 0
        assert config.log_level == "WARNING"
        assert config.telemetry_enabled is False


class TestEnvironment:
    """Tests for DATEMATH_* overrides."""

    def test_week_start_override(self, monkeypatch):
        monkeypatch.setenv("DATEMATH_WEEK_STARTS_ON", "mon")
        assert load_config().week_start_ordinal == 1

    def test_timezone_override(self, monkeypatch):
        monkeypatch.setenv("DATEMATH_TIMEZONE", "Europe/Madrid")
        assert str(load_config().tzinfo) == "Europe/Madrid"

    def test_invalid_timezone(self, monkeypatch):
        monkeypatch.setenv("DATEMATH_TIMEZONE", "Mars/Olympus")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config()
        assert exc_info.value.field == "timezone"

    def test_invalid_week_start(self, monkeypatch):
        monkeypatch.setenv("DATEMATH_WEEK_STARTS_ON", "monday")
        with pytest.raises(InvalidConfigError):
            load_config()


class TestCaching:
    """Tests for get_config/reset_config."""

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_reset_config_reloads(self, monkeypatch):
        first = get_config()
        monkeypatch.setenv("DATEMATH_LOG_LEVEL", "DEBUG")
        assert get_config().log_level == "WARNING"
        reset_config()
        assert get_config() is not first
        assert get_config().log_level == "DEBUG"
