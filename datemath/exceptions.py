"""
datemath Exception Hierarchy

All datemath-specific exceptions inherit from DateMathError.

Usage:
    from datemath.exceptions import InvalidTokenError

    try:
        model = TokenModel.from_string(text)
    except InvalidTokenError as e:
        logger.warning(f"Rejected expression: {e}")
"""

from __future__ import annotations


class DateMathError(Exception):
    """
    Base exception for all datemath errors.

    Attributes:
        message: Human-readable error description
        code: Optional machine-readable error code for programmatic handling
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code
        super().__init__(message)

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


# =============================================================================
# Expression Errors
# =============================================================================


class InvalidTokenError(DateMathError):
    """
    An expression could not be turned into a model.

    ``message`` (and ``str()``) is the first parser error; ``errors`` holds
    all of them in encounter order.
    """

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message, code="INVALID_TOKEN")
        self.errors = list(errors) if errors else [message]

    def __str__(self) -> str:
        return self.message


class DateOutOfRangeError(DateMathError):
    """Evaluating an expression left the representable datetime range."""

    def __init__(self, expression: str, reason: str) -> None:
        super().__init__(
            f"Expression '{expression}' is out of the supported date range: {reason}",
            code="DATE_OUT_OF_RANGE",
        )
        self.expression = expression
        self.reason = reason


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(DateMathError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Configuration value is invalid or malformed."""

    def __init__(self, field: str, value: str, reason: str) -> None:
        super().__init__(
            f"Invalid configuration for '{field}': {value}. {reason}",
            code="CONFIG_INVALID",
        )
        self.field = field
        self.value = value
        self.reason = reason
