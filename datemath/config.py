"""
datemath Configuration

Configuration settings using pydantic-settings for environment variable support.
Only the public entry points (``TokenModel.to_date`` defaults and the CLI)
read it; the lexer, parser and AST take explicit parameters.
"""

from __future__ import annotations

from datetime import UTC, tzinfo
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from datemath.core.calendar import WEEKDAYS
from datemath.exceptions import InvalidConfigError


class DateMathConfig(BaseSettings):
    """
    Configuration for datemath.

    Reads from environment variables with DATEMATH_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="DATEMATH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    timezone: str = Field(
        default="UTC",
        description="IANA time zone used for the current instant when no reference is given",
    )
    week_starts_on: Literal["sun", "mon", "tue", "wed", "thu", "fri", "sat"] = Field(
        default="sun",
        description="First day of a calendar week for /w and @w",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Log level used by the CLI",
    )
    telemetry_enabled: bool = Field(
        default=False,
        description="Whether to emit OpenTelemetry spans",
    )

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        if value != "UTC":
            try:
                ZoneInfo(value)
            except (ZoneInfoNotFoundError, ValueError) as e:
                raise ValueError(f"unknown time zone: {value}") from e
        return value

    @property
    def tzinfo(self) -> tzinfo:
        """The configured time zone as a tzinfo."""
        if self.timezone == "UTC":
            return UTC
        return ZoneInfo(self.timezone)

    @property
    def week_start_ordinal(self) -> int:
        """The configured week start as a weekday ordinal (0=Sunday)."""
        return WEEKDAYS.index(self.week_starts_on)


def load_config() -> DateMathConfig:
    """
    Load configuration from environment.

    Raises:
        InvalidConfigError: If an environment value fails validation.
    """
    try:
        return DateMathConfig()
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "config"
        raise InvalidConfigError(field, str(error.get("input")), error["msg"]) from e


_config: DateMathConfig | None = None


def get_config() -> DateMathConfig:
    """Return the process-wide configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Forget the cached configuration (used by tests)."""
    global _config
    _config = None
