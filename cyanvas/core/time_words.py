"""Time Words — approximate elapsed-time buckets ("about 3 hours", "2 days").

Invariants:
    - Pure: takes both instants explicitly, never reads the clock
    - Naive datetimes are treated as UTC (SQLite returns naive values)
    - Bucket boundaries follow the Rails distance_of_time_in_words table;
      halves round up, as Ruby does
"""

import math
from datetime import datetime, timezone
from typing import NamedTuple

MINUTES_IN_DAY = 1440
MINUTES_IN_MONTH = 43_200
MINUTES_IN_YEAR = 525_600
MINUTES_IN_QUARTER_YEAR = 131_400
MINUTES_IN_THREE_QUARTERS_YEAR = 394_200


class TimeDistance(NamedTuple):
    """A bucketed distance: unit key (looked up in language_strings) and count."""
    unit: str
    count: int


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_iso8601(value: datetime | None) -> str | None:
    """ISO-8601 in UTC with a Z suffix, None passes through."""
    if value is None:
        return None
    return as_utc(value).isoformat().replace("+00:00", "Z")


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def distance_of_time(start: datetime, end: datetime) -> TimeDistance:
    """Bucket the absolute distance between two instants."""
    seconds = abs((as_utc(end) - as_utc(start)).total_seconds())
    minutes = _round_half_up(seconds / 60)

    if minutes <= 1:
        if minutes == 0:
            return TimeDistance("less_than_x_minutes", 1)
        return TimeDistance("x_minutes", 1)
    if minutes < 45:
        return TimeDistance("x_minutes", minutes)
    if minutes < 90:
        return TimeDistance("about_x_hours", 1)
    if minutes < MINUTES_IN_DAY:
        return TimeDistance("about_x_hours", _round_half_up(minutes / 60))
    if minutes < 2520:
        return TimeDistance("x_days", 1)
    if minutes < MINUTES_IN_MONTH:
        return TimeDistance("x_days", _round_half_up(minutes / MINUTES_IN_DAY))
    if minutes < 2 * MINUTES_IN_MONTH:
        return TimeDistance("about_x_months", _round_half_up(minutes / MINUTES_IN_MONTH))
    if minutes < MINUTES_IN_YEAR:
        return TimeDistance("x_months", _round_half_up(minutes / MINUTES_IN_MONTH))

    years, remainder = divmod(minutes, MINUTES_IN_YEAR)
    if remainder < MINUTES_IN_QUARTER_YEAR:
        return TimeDistance("about_x_years", years)
    if remainder < MINUTES_IN_THREE_QUARTERS_YEAR:
        return TimeDistance("over_x_years", years)
    return TimeDistance("almost_x_years", years + 1)
