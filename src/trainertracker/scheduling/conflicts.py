"""Session conflict checker: optimistic double-booking guard at commit time.

There is no lock between showing a slot and booking it. Two callers can see
the same free slot; the second one to commit gets a `SessionConflictError`
listing what it collided with.
"""

import logging
from collections.abc import Sequence
from datetime import datetime, timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from trainertracker.models.session import TrainingSession
from trainertracker.scheduling.context import get_trainer_sessions
from trainertracker.scheduling.intervals import (
    DEFAULT_SESSION_MINUTES,
    effective_end,
    overlaps,
    to_naive,
)

logger = logging.getLogger(__name__)


class SessionConflictError(Exception):
    """Raised when a proposed booking overlaps existing sessions."""

    def __init__(self, conflicts: Sequence[TrainingSession]) -> None:
        self.conflicts = list(conflicts)
        super().__init__("Session conflicts with existing appointments")


def find_conflicts(
    proposed_start: datetime,
    proposed_end: datetime,
    sessions: Sequence[TrainingSession],
    exclude_id: int | None = None,
) -> list[TrainingSession]:
    """Return the sessions that overlap [proposed_start, proposed_end)."""
    return [
        s
        for s in sessions
        if (exclude_id is None or s.id != exclude_id)
        and overlaps(
            proposed_start,
            proposed_end,
            s.start_time,
            effective_end(s.start_time, s.end_time),
        )
    ]


async def get_conflicting_sessions(
    session: AsyncSession,
    trainer_id: int,
    proposed_start: datetime,
    proposed_end: datetime,
    exclude_id: int | None = None,
) -> list[TrainingSession]:
    """Load the trainer's sessions and return those overlapping the proposal."""
    existing = await get_trainer_sessions(session, trainer_id)
    return find_conflicts(proposed_start, proposed_end, existing, exclude_id=exclude_id)


async def has_conflict(
    session: AsyncSession,
    trainer_id: int,
    proposed_start: datetime,
    proposed_end: datetime,
) -> bool:
    conflicts = await get_conflicting_sessions(session, trainer_id, proposed_start, proposed_end)
    return bool(conflicts)


def _resolve_interval(start: datetime, end: datetime | None) -> tuple[datetime, datetime]:
    start = to_naive(start)
    end = to_naive(end) if end is not None else start + timedelta(minutes=DEFAULT_SESSION_MINUTES)
    if end <= start:
        raise ValueError("Session end time must be after its start time")
    return start, end


async def book_session(
    session: AsyncSession,
    trainer_id: int,
    client_id: int,
    start_time: datetime,
    end_time: datetime | None = None,
    *,
    type: str | None = None,
    location: str | None = None,
    notes: str | None = None,
) -> TrainingSession:
    """Create a session after re-checking for overlaps.

    A missing `end_time` defaults to one hour after `start_time`.

    Raises:
        ValueError: If the end is not after the start.
        SessionConflictError: If the interval overlaps an existing session.
    """
    start, end = _resolve_interval(start_time, end_time)

    conflicts = await get_conflicting_sessions(session, trainer_id, start, end)
    if conflicts:
        logger.info(
            "Booking rejected for trainer %d at %s-%s: %d conflict(s)",
            trainer_id,
            start.isoformat(),
            end.isoformat(),
            len(conflicts),
        )
        raise SessionConflictError(conflicts)

    row = TrainingSession(
        trainer_id=trainer_id,
        client_id=client_id,
        start_time=start,
        end_time=end,
        type=type,
        location=location,
        notes=notes,
    )
    session.add(row)
    await session.commit()
    await session.refresh(row)
    logger.info("Booked session %d for trainer %d at %s", row.id, trainer_id, start.isoformat())
    return row


async def reschedule_session(
    session: AsyncSession,
    row: TrainingSession,
    start_time: datetime | None = None,
    end_time: datetime | None = None,
) -> TrainingSession:
    """Move an existing session, re-running the conflict check against the others.

    Only the supplied bound changes. When only the start moves and the session
    had a stored end, its previous duration is preserved.

    Raises:
        ValueError: If the resulting end is not after the start.
        SessionConflictError: If the new interval overlaps another session.
    """
    current_end = effective_end(row.start_time, row.end_time)
    new_start = to_naive(start_time) if start_time is not None else row.start_time
    if end_time is not None:
        new_end = to_naive(end_time)
    else:
        new_end = new_start + (current_end - row.start_time)
    new_start, new_end = _resolve_interval(new_start, new_end)

    conflicts = await get_conflicting_sessions(
        session, row.trainer_id, new_start, new_end, exclude_id=row.id
    )
    if conflicts:
        logger.info(
            "Reschedule of session %d rejected: %d conflict(s)", row.id, len(conflicts)
        )
        raise SessionConflictError(conflicts)

    row.start_time = new_start
    row.end_time = new_end
    return row
