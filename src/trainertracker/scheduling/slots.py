"""Availability resolver: turn weekly rules + date exceptions into bookable slots."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from trainertracker.models.availability import AvailabilityException, WeeklyAvailability
from trainertracker.models.session import TrainingSession
from trainertracker.scheduling.context import (
    get_exception_for_date,
    get_sessions_on_date,
    get_weekly_rule,
)
from trainertracker.scheduling.intervals import (
    at_time_of_day,
    day_of_week,
    effective_end,
    overlaps,
)

logger = logging.getLogger(__name__)

SLOT_STEP_MINUTES = 30


@dataclass(frozen=True)
class TimeSlot:
    """A bookable window. Derived on every query, never stored."""

    start_time: datetime
    end_time: datetime
    duration: int  # minutes


def effective_window(
    target_date: date,
    rule: WeeklyAvailability,
    exception: AvailabilityException | None = None,
) -> tuple[datetime, datetime]:
    """Return [start, end) of the working window for `target_date`.

    An available exception replaces each bound it supplies, independently.
    """
    window_start = at_time_of_day(target_date, rule.start_time)
    window_end = at_time_of_day(target_date, rule.end_time)
    if exception is not None and exception.is_available:
        if exception.start_time:
            window_start = at_time_of_day(target_date, exception.start_time)
        if exception.end_time:
            window_end = at_time_of_day(target_date, exception.end_time)
    return window_start, window_end


def resolve_slots(
    target_date: date,
    rule: WeeklyAvailability | None,
    exception: AvailabilityException | None,
    sessions: Sequence[TrainingSession],
    duration_minutes: int,
    step_minutes: int = SLOT_STEP_MINUTES,
) -> list[TimeSlot]:
    """Generate free slots of `duration_minutes` for one trainer on one date.

    Candidates start every `step_minutes` from the window start, so slots of
    a longer duration overlap each other. A candidate is dropped when it
    overlaps any existing session; sessions without an end time count as
    60 minutes.

    Args:
        target_date: Calendar date to resolve.
        rule: The trainer's available weekly rule for that weekday, if any.
        exception: The trainer's exception for that exact date, if any.
        sessions: Existing sessions for the trainer on that date.
        duration_minutes: Requested session length.
        step_minutes: Distance between candidate start times.

    Returns:
        Accepted slots in chronological order.

    Raises:
        ValueError: On non-positive durations or malformed "HH:MM" values.
    """
    if duration_minutes <= 0:
        raise ValueError("Session duration must be a positive number of minutes")
    if step_minutes <= 0:
        raise ValueError("Slot step must be a positive number of minutes")

    if rule is None or not rule.is_available:
        return []
    if exception is not None and not exception.is_available:
        return []

    window_start, window_end = effective_window(target_date, rule, exception)

    busy = [(s.start_time, effective_end(s.start_time, s.end_time)) for s in sessions]
    length = timedelta(minutes=duration_minutes)
    step = timedelta(minutes=step_minutes)

    slots: list[TimeSlot] = []
    cursor = window_start
    while cursor + length <= window_end:
        slot_end = cursor + length
        if not any(overlaps(cursor, slot_end, b_start, b_end) for b_start, b_end in busy):
            slots.append(
                TimeSlot(start_time=cursor, end_time=slot_end, duration=duration_minutes)
            )
        cursor += step

    return slots


async def get_available_slots(
    session: AsyncSession,
    trainer_id: int,
    target_date: date,
    session_duration_minutes: int,
    step_minutes: int = SLOT_STEP_MINUTES,
) -> list[TimeSlot]:
    """Fetch a trainer's rules, exception and bookings for a date and resolve slots.

    Nothing is cached; every call recomputes from the current database state.
    """
    rule = await get_weekly_rule(session, trainer_id, day_of_week(target_date))
    if rule is None:
        logger.debug("Trainer %d has no availability on %s", trainer_id, target_date)
        return []

    exception = await get_exception_for_date(session, trainer_id, target_date)
    if exception is not None and not exception.is_available:
        logger.debug("Trainer %d marked unavailable on %s", trainer_id, target_date)
        return []

    sessions = await get_sessions_on_date(session, trainer_id, target_date)
    slots = resolve_slots(
        target_date,
        rule,
        exception,
        sessions,
        session_duration_minutes,
        step_minutes=step_minutes,
    )
    logger.debug(
        "Resolved %d slots for trainer %d on %s (%d existing sessions)",
        len(slots),
        trainer_id,
        target_date,
        len(sessions),
    )
    return slots
