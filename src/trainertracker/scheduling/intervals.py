"""Time and interval helpers shared by slot generation and conflict checks.

All datetimes handled here are naive wall-clock values. Aware values coming in
from the API are normalized with `to_naive` before they reach the database.
"""

import re
from datetime import date, datetime, time, timedelta, timezone

DEFAULT_SESSION_MINUTES = 60

_HHMM = re.compile(r"^(\d{2}):(\d{2})$")


def overlaps(
    a_start: datetime, a_end: datetime, b_start: datetime, b_end: datetime
) -> bool:
    """Half-open interval overlap: [a_start, a_end) intersects [b_start, b_end).

    Back-to-back intervals (one ends exactly when the other starts) do not overlap.
    """
    return a_start < b_end and a_end > b_start


def parse_time_of_day(value: str) -> time:
    """Parse an "HH:MM" string into a `time`.

    Raises:
        ValueError: If the string is not exactly two-digit hours and minutes
            within 00:00-23:59.
    """
    if not isinstance(value, str):
        raise ValueError(f"Time of day must be an 'HH:MM' string, got {value!r}")
    match = _HHMM.match(value.strip())
    if match is None:
        raise ValueError(f"Invalid time of day {value!r}: expected 'HH:MM'")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise ValueError(f"Invalid time of day {value!r}: out of range")
    return time(hour, minute)


def at_time_of_day(day: date, value: str) -> datetime:
    """Combine a calendar date with an "HH:MM" string."""
    return datetime.combine(day, parse_time_of_day(value))


def effective_end(
    start: datetime, end: datetime | None, default_minutes: int = DEFAULT_SESSION_MINUTES
) -> datetime:
    """Return `end`, or `start + default_minutes` for open-ended sessions."""
    if end is not None:
        return end
    return start + timedelta(minutes=default_minutes)


def day_of_week(day: date) -> int:
    """0=Sunday .. 6=Saturday."""
    return (day.weekday() + 1) % 7


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """First and last instant (millisecond precision) of a calendar day."""
    start = datetime.combine(day, time.min)
    end = datetime.combine(day, time(23, 59, 59, 999000))
    return start, end


def to_naive(value: datetime) -> datetime:
    """Drop timezone info, converting aware values to UTC first."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
