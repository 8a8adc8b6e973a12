"""
Token Model

The aggregate of a parsed expression: its ordered nodes, summary flags,
evaluation to a datetime and string/JSON serialization.

Example:
    >>> model = TokenModel.from_string("now-2d/d")
    >>> model.is_snapped, model.is_modified
    (True, True)
    >>> str(model)
    'now-2d/d'
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from datemath.common.telemetry import trace_sync
from datemath.config import get_config
from datemath.core.ast import (
    EXPRESSION_LIST_ADAPTER,
    Expression,
    ModifierExpression,
    SnapExpression,
)
from datemath.core.calendar import Calendar, DateutilCalendar
from datemath.core.lexer import Lexer
from datemath.core.parser import INVALID_TOKEN_MESSAGE, Parser
from datemath.exceptions import DateOutOfRangeError, InvalidTokenError

logger = logging.getLogger(__name__)


def _now() -> datetime:
    """Current instant in the configured time zone."""
    return datetime.now(get_config().tzinfo)


def _default_calendar() -> Calendar:
    return DateutilCalendar(week_starts_on=get_config().week_start_ordinal)


@dataclass(frozen=True)
class TokenModel:
    """
    An immutable, parsed date-math expression.

    Attributes:
        nodes: Expression nodes in evaluation order
        reference: Reference instant used by ``to_date()`` when none is passed
        is_snapped: True when at least one snap node is present
        is_modified: True when at least one modifier node is present
    """

    nodes: tuple[Expression, ...]
    reference: datetime | None = None
    is_snapped: bool = field(init=False)
    is_modified: bool = field(init=False)

    def __post_init__(self) -> None:
        nodes = tuple(self.nodes)
        object.__setattr__(self, "nodes", nodes)
        object.__setattr__(
            self, "is_snapped", any(isinstance(node, SnapExpression) for node in nodes)
        )
        object.__setattr__(
            self, "is_modified", any(isinstance(node, ModifierExpression) for node in nodes)
        )

    @classmethod
    @trace_sync("datemath.from_string")
    def from_string(cls, text: str | None, reference: datetime | None = None) -> TokenModel:
        """
        Parse an expression.

        Args:
            text: The expression, e.g. "now-1d/d"
            reference: Optional reference instant stored on the model

        Returns:
            The parsed model.

        Raises:
            InvalidTokenError: On empty input ("Invalid token") or with the
                first parser error. All parser errors are on ``errors``.
        """
        lexer = Lexer(text)
        if lexer.is_invalid():
            logger.info("Rejected empty date-math expression")
            raise InvalidTokenError(INVALID_TOKEN_MESSAGE)

        parser = Parser(lexer)
        nodes = parser.parse()
        errors = parser.get_errors()
        if errors:
            logger.info(f"Rejected date-math expression {text!r}: {errors[0]}")
            raise InvalidTokenError(errors[0], errors)

        return cls(tuple(nodes), reference)

    @classmethod
    def from_json(cls, items: Iterable[dict[str, Any]], reference: datetime | None = None) -> TokenModel:
        """
        Rebuild a model from the output of ``to_json()``.

        Raises:
            pydantic.ValidationError: If an item is not a valid node.
        """
        return cls(tuple(EXPRESSION_LIST_ADAPTER.validate_python(list(items))), reference)

    def to_date(
        self,
        reference: datetime | None = None,
        calendar: Calendar | None = None,
    ) -> datetime:
        """
        Evaluate the expression.

        Args:
            reference: Reference instant. Falls back to the model's stored
                reference, then to the current time (read once).
            calendar: Calendar arithmetic (defaults to the configured one)

        Returns:
            The folded instant.

        Raises:
            DateOutOfRangeError: If the result is not a representable datetime.
        """
        now = reference or self.reference or _now()
        calendar = calendar or _default_calendar()

        result = now
        try:
            for node in self.nodes:
                result = node.operate(result, calendar, now)
        except (OverflowError, ValueError) as e:
            raise DateOutOfRangeError(self.to_string(), str(e)) from e
        return result

    def to_string(self) -> str:
        return "".join(node.to_string() for node in self.nodes)

    def to_json(self) -> list[dict[str, Any]]:
        return [node.to_json() for node in self.nodes]

    def __str__(self) -> str:
        return self.to_string()

    def __len__(self) -> int:
        return len(self.nodes)
