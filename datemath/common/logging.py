"""
Logging Setup

Configures the root logger for command-line use. Library modules only ever
call ``logging.getLogger(__name__)``.
"""

from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: str | None = None,
) -> None:
    """
    Configure the root logger.

    Args:
        level: Logging level, as a number or a name such as "DEBUG"
        format_string: Log format string (uses default if not specified)
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    logging.basicConfig(level=level, format=format_string or DEFAULT_FORMAT, force=True)
    logging.getLogger("datemath").setLevel(level)
