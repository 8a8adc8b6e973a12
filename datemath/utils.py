"""Convenience helpers."""

from __future__ import annotations

from datetime import datetime

from datemath.core.models import TokenModel


def token_to_date(token: str, at: datetime | None = None) -> datetime:
    """
    Resolve an expression in one call.

    Args:
        token: The expression, e.g. "now-1w/bw"
        at: Reference instant (defaults to the current time)

    Raises:
        InvalidTokenError: If the expression does not parse.
    """
    return TokenModel.from_string(token, at).to_date()
