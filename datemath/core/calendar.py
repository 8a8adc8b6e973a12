"""
Calendar Arithmetic

The calendar capability the evaluator relies on, and a default
implementation built on ``dateutil.relativedelta``.

Weekday ordinals run 0=Sunday .. 6=Saturday everywhere in this package.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Final, Protocol, runtime_checkable

from dateutil.relativedelta import FR, MO, SA, SU, TH, TU, WE, relativedelta

SUNDAY: Final = 0
MONDAY: Final = 1
FRIDAY: Final = 5
SATURDAY: Final = 6

WEEKDAYS: Final = ("sun", "mon", "tue", "wed", "thu", "fri", "sat")

_RELATIVEDELTA_WEEKDAYS: Final = (SU, MO, TU, WE, TH, FR, SA)


class Unit(str, Enum):
    """Calendar units, valued by their expression code."""

    SECOND = "s"
    MINUTE = "m"
    HOUR = "h"
    DAY = "d"
    WEEK = "w"
    MONTH = "M"


_DELTA_FIELDS: Final = {
    Unit.SECOND: "seconds",
    Unit.MINUTE: "minutes",
    Unit.HOUR: "hours",
    Unit.DAY: "days",
    Unit.WEEK: "weeks",
    Unit.MONTH: "months",
}


@runtime_checkable
class Calendar(Protocol):
    """
    Protocol for calendar arithmetic.

    ``week_starts_on`` arguments take a weekday ordinal; None means the
    implementation's own default week start.
    """

    def add(self, date: datetime, unit: Unit, amount: int) -> datetime:
        """Move ``date`` forward by ``amount`` units."""
        ...

    def subtract(self, date: datetime, unit: Unit, amount: int) -> datetime:
        """Move ``date`` backward by ``amount`` units."""
        ...

    def start_of(self, date: datetime, unit: Unit, week_starts_on: int | None = None) -> datetime:
        """Return the first instant of the unit containing ``date``."""
        ...

    def end_of(self, date: datetime, unit: Unit, week_starts_on: int | None = None) -> datetime:
        """Return the last instant of the unit containing ``date``."""
        ...

    def day_of_week(self, date: datetime) -> int:
        """Return the weekday ordinal of ``date``."""
        ...

    def is_weekend(self, date: datetime) -> bool:
        """Return True for Saturdays and Sundays."""
        ...

    def is_in_current_week(
        self, date: datetime, now: datetime, week_starts_on: int | None = None
    ) -> bool:
        """Return True when ``date`` falls in the same week as ``now``."""
        ...


class DateutilCalendar:
    """
    Calendar backed by ``dateutil.relativedelta``.

    Month arithmetic is calendar-aware: Jan 31 + 1 month is the last day of
    February, not March 2/3. Start/end operations work on wall-clock fields,
    so aware datetimes keep their tzinfo.

    Example:
        >>> calendar = DateutilCalendar()
        >>> calendar.add(datetime(2018, 1, 31), Unit.MONTH, 1)
        datetime.datetime(2018, 2, 28, 0, 0)
    """

    def __init__(self, week_starts_on: int = SUNDAY):
        """
        Initialize the calendar.

        Args:
            week_starts_on: Weekday ordinal that starts a calendar week.
        """
        if not 0 <= week_starts_on <= 6:
            raise ValueError(f"week_starts_on must be a weekday ordinal 0-6, got {week_starts_on}")
        self.week_starts_on = week_starts_on

    def add(self, date: datetime, unit: Unit, amount: int) -> datetime:
        return date + relativedelta(**{_DELTA_FIELDS[unit]: amount})

    def subtract(self, date: datetime, unit: Unit, amount: int) -> datetime:
        return date - relativedelta(**{_DELTA_FIELDS[unit]: amount})

    def start_of(self, date: datetime, unit: Unit, week_starts_on: int | None = None) -> datetime:
        if unit == Unit.SECOND:
            return date.replace(microsecond=0)
        if unit == Unit.MINUTE:
            return date.replace(second=0, microsecond=0)
        if unit == Unit.HOUR:
            return date.replace(minute=0, second=0, microsecond=0)
        if unit == Unit.DAY:
            return date.replace(hour=0, minute=0, second=0, microsecond=0)
        if unit == Unit.WEEK:
            first_day = _RELATIVEDELTA_WEEKDAYS[self._week_start(week_starts_on)]
            # weekday(-1) lands on the same day when it already matches
            return self.start_of(date, Unit.DAY) + relativedelta(weekday=first_day(-1))
        return self.start_of(date, Unit.DAY).replace(day=1)

    def end_of(self, date: datetime, unit: Unit, week_starts_on: int | None = None) -> datetime:
        if unit == Unit.SECOND:
            return date.replace(microsecond=999999)
        if unit == Unit.MINUTE:
            return date.replace(second=59, microsecond=999999)
        if unit == Unit.HOUR:
            return date.replace(minute=59, second=59, microsecond=999999)
        if unit == Unit.DAY:
            return date.replace(hour=23, minute=59, second=59, microsecond=999999)
        if unit == Unit.WEEK:
            last_day = self.start_of(date, Unit.WEEK, week_starts_on) + relativedelta(days=6)
            return self.end_of(last_day, Unit.DAY)
        # day=31 is clamped to the month's last day
        return self.end_of(date + relativedelta(day=31), Unit.DAY)

    def day_of_week(self, date: datetime) -> int:
        return date.isoweekday() % 7

    def is_weekend(self, date: datetime) -> bool:
        return self.day_of_week(date) in (SATURDAY, SUNDAY)

    def is_in_current_week(
        self, date: datetime, now: datetime, week_starts_on: int | None = None
    ) -> bool:
        return self.start_of(date, Unit.WEEK, week_starts_on) == self.start_of(
            now, Unit.WEEK, week_starts_on
        )

    def _week_start(self, week_starts_on: int | None) -> int:
        return self.week_starts_on if week_starts_on is None else week_starts_on
