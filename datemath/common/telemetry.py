"""
Tracing Utilities.

Thin OpenTelemetry helpers. Spans go to whatever tracer provider the host
application installed; without one the API hands out no-op spans.

Tracing is off unless ``DATEMATH_TELEMETRY_ENABLED`` is true.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from datemath.config import get_config

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def is_telemetry_enabled() -> bool:
    """Return True when spans should be emitted."""
    return get_config().telemetry_enabled


def get_tracer() -> trace.Tracer:
    """Get the datemath tracer from the global tracer provider."""
    from datemath import __version__

    return trace.get_tracer("datemath", __version__)


def trace_sync(
    name: str | None = None,
    attributes: dict[str, Any] | None = None,
) -> Callable[[F], F]:
    """
    Decorator for tracing sync functions.

    Args:
        name: Span name (defaults to function name)
        attributes: Static attributes to add to span

    Example:
        @trace_sync("datemath.from_string")
        def from_string(text: str) -> TokenModel:
            ...
    """

    def decorator(func: F) -> F:
        span_name = name or func.__name__

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            if not is_telemetry_enabled():
                return func(*args, **kwargs)

            with get_tracer().start_as_current_span(span_name) as span:
                if attributes:
                    span.set_attributes(attributes)

                try:
                    return func(*args, **kwargs)
                except Exception as e:
                    record_exception(e, span)
                    raise

        return wrapper  # type: ignore

    return decorator


def record_exception(exception: Exception, span: Any = None) -> None:
    """
    Record an exception on a span and mark it as failed.

    Args:
        exception: The exception to record
        span: Target span (defaults to the current span)
    """
    span = span or trace.get_current_span()
    if not span.is_recording():
        return

    try:
        span.record_exception(exception)
        span.set_status(Status(StatusCode.ERROR, str(exception)))
    except Exception as e:
        logger.debug(f"Failed to record exception on span: {e}")
