"""
Date-Math AST

The three node kinds an expression is made of:

- NowExpression: start from the reference instant
- ModifierExpression: add or subtract N units (``+2h``, ``-M``)
- SnapExpression: round to the start (``/``) or end (``@``) of a unit or
  named boundary (``/d``, ``@bw``, ``/fri``)

Nodes are frozen pydantic models discriminated on ``type``, so a node list
can be dumped to JSON and validated back through ``EXPRESSION_LIST_ADAPTER``.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Final, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from datemath.core.calendar import FRIDAY, MONDAY, WEEKDAYS, Calendar, DateutilCalendar, Unit
from datemath.core.tokens import Token, TokenType

DEFAULT_CALENDAR: Final = DateutilCalendar()


class AmountOperator(str, Enum):
    """Operators of a modifier clause."""

    ADD = "+"
    SUB = "-"


class SnapOperator(str, Enum):
    """Operators of a snap clause."""

    START = "/"
    END = "@"


class ModifierSet:
    """A fixed set of modifier codes accepted by one kind of clause."""

    def __init__(self, *values: str):
        self.values: tuple[str, ...] = values
        self.values_string = "(" + ",".join(f'"{value}"' for value in values) + ")"

    def check_modifier(self, modifier: str) -> bool:
        return modifier in self.values

    def __contains__(self, modifier: object) -> bool:
        return modifier in self.values


AMOUNT_MODIFIERS: Final = ModifierSet("s", "m", "h", "d", "w", "M")
SNAP_MODIFIERS: Final = ModifierSet(
    "s", "m", "h", "d", "w", "bw", "M", "mon", "tue", "wed", "thu", "fri", "sat", "sun"
)


def weekday_delta(from_ordinal: int, to_ordinal: int) -> int:
    """
    Days to go back from ``from_ordinal`` to reach ``to_ordinal``.

    Always in [0, 7); Python's ``%`` takes the sign of the divisor.
    """
    return (from_ordinal - to_ordinal) % 7


class NowExpression(BaseModel):
    """The reference instant itself."""

    model_config = ConfigDict(frozen=True)

    type: Literal["now"] = "now"
    token: Token = Field(
        default_factory=lambda: Token(TokenType.NOW, "now"), exclude=True, repr=False
    )

    def operate(
        self,
        date: datetime,
        calendar: Calendar = DEFAULT_CALENDAR,
        now: datetime | None = None,
    ) -> datetime:
        return date

    def to_string(self) -> str:
        return self.token.literal

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def __str__(self) -> str:
        return self.to_string()


class ModifierExpression(BaseModel):
    """Add or subtract ``amount`` units of ``modifier``."""

    model_config = ConfigDict(frozen=True)

    type: Literal["amount"] = "amount"
    amount: int = Field(default=1, ge=1)
    modifier: str
    operator: AmountOperator
    token: Token | None = Field(default=None, exclude=True, repr=False)

    @field_validator("modifier")
    @classmethod
    def _check_modifier(cls, value: str) -> str:
        if not AMOUNT_MODIFIERS.check_modifier(value):
            raise ValueError(f"modifier must be one of {AMOUNT_MODIFIERS.values_string}")
        return value

    def operate(
        self,
        date: datetime,
        calendar: Calendar = DEFAULT_CALENDAR,
        now: datetime | None = None,
    ) -> datetime:
        unit = Unit(self.modifier)
        if self.operator == AmountOperator.ADD:
            return calendar.add(date, unit, self.amount)
        return calendar.subtract(date, unit, self.amount)

    def to_string(self) -> str:
        # The amount is always explicit, even when the input omitted it.
        return f"{self.operator.value}{self.amount}{self.modifier}"

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def __str__(self) -> str:
        return self.to_string()


class SnapExpression(BaseModel):
    """Snap to the start or the end of ``modifier``."""

    model_config = ConfigDict(frozen=True)

    type: Literal["snap"] = "snap"
    modifier: str
    operator: SnapOperator
    token: Token | None = Field(default=None, exclude=True, repr=False)

    @field_validator("modifier")
    @classmethod
    def _check_modifier(cls, value: str) -> str:
        if not SNAP_MODIFIERS.check_modifier(value):
            raise ValueError(f"modifier must be one of {SNAP_MODIFIERS.values_string}")
        return value

    def operate(
        self,
        date: datetime,
        calendar: Calendar = DEFAULT_CALENDAR,
        now: datetime | None = None,
    ) -> datetime:
        """
        Snap ``date``.

        Args:
            date: The running instant.
            calendar: Calendar arithmetic to delegate to.
            now: The reference instant of the evaluation, used to decide
                whether a business week is still in progress. Defaults to
                ``date``.
        """
        if self.modifier in WEEKDAYS:
            return self._snap_weekday(date, calendar)
        if self.modifier == "bw":
            return self._snap_business_week(date, calendar, date if now is None else now)

        unit = Unit(self.modifier)
        if self.operator == SnapOperator.START:
            return calendar.start_of(date, unit)
        return calendar.end_of(date, unit)

    def _snap_weekday(self, date: datetime, calendar: Calendar) -> datetime:
        target = WEEKDAYS.index(self.modifier)
        today = calendar.day_of_week(date)
        if self.operator == SnapOperator.START:
            return calendar.subtract(date, Unit.DAY, weekday_delta(today, target))
        return calendar.add(date, Unit.DAY, weekday_delta(target, today))

    def _snap_business_week(self, date: datetime, calendar: Calendar, now: datetime) -> datetime:
        # The business week is the Monday to Friday inside the calendar week.
        week_start = calendar.start_of(date, Unit.WEEK)
        offset = weekday_delta(MONDAY, calendar.day_of_week(week_start))
        monday = calendar.add(week_start, Unit.DAY, offset)
        if self.operator == SnapOperator.START:
            return monday

        # Business week to date: a weekday of the running week is "up to now".
        in_progress = calendar.is_in_current_week(date, now)
        if in_progress and not calendar.is_weekend(date):
            return date
        friday = calendar.add(monday, Unit.DAY, FRIDAY - MONDAY)
        return calendar.end_of(friday, Unit.DAY)

    def to_string(self) -> str:
        return f"{self.operator.value}{self.modifier}"

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def __str__(self) -> str:
        return self.to_string()


Expression = Annotated[
    NowExpression | ModifierExpression | SnapExpression,
    Field(discriminator="type"),
]

EXPRESSION_LIST_ADAPTER: Final = TypeAdapter(list[Expression])


def new_now_expression() -> NowExpression:
    """Build the NOW node the way the parser does."""
    return NowExpression(token=Token(TokenType.NOW, "now"))
