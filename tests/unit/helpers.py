"""Shared constants and helpers for the unit tests."""

from datetime import UTC, datetime

# 1529311147 => 2018-06-18T08:39:07+00:00, a Monday
REFERENCE = datetime(2018, 6, 18, 8, 39, 7, tzinfo=UTC)

# Saturday, 29 September 2018 09:40:25
SATURDAY_REFERENCE = datetime(2018, 9, 29, 9, 40, 25, tzinfo=UTC)

# Sunday, 17 June 2018 08:39:07, the first day of REFERENCE's calendar week
SUNDAY_REFERENCE = datetime(2018, 6, 17, 8, 39, 7, tzinfo=UTC)


def iso(value: datetime) -> str:
    """ISO 8601 at second precision."""
    return value.replace(microsecond=0).isoformat()
