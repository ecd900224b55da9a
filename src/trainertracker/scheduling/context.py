"""Database queries that gather the inputs for slot resolution and conflict checks."""

from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trainertracker.models.availability import AvailabilityException, WeeklyAvailability
from trainertracker.models.session import TrainingSession
from trainertracker.scheduling.intervals import day_bounds


async def get_weekly_rule(
    session: AsyncSession, trainer_id: int, weekday: int
) -> WeeklyAvailability | None:
    """First available weekly rule for a weekday (0=Sunday), or None."""
    stmt = (
        select(WeeklyAvailability)
        .where(
            WeeklyAvailability.trainer_id == trainer_id,
            WeeklyAvailability.day_of_week == weekday,
            WeeklyAvailability.is_available.is_(True),
        )
        .order_by(WeeklyAvailability.start_time, WeeklyAvailability.id)
        .limit(1)
    )
    result = await session.execute(stmt)
    return result.scalars().first()


async def get_exception_for_date(
    session: AsyncSession, trainer_id: int, target_date: date
) -> AvailabilityException | None:
    """Exception for the exact date, or None. The earliest-created one wins."""
    stmt = (
        select(AvailabilityException)
        .where(
            AvailabilityException.trainer_id == trainer_id,
            AvailabilityException.date == target_date,
        )
        .order_by(AvailabilityException.id)
        .limit(1)
    )
    result = await session.execute(stmt)
    return result.scalars().first()


async def get_sessions_on_date(
    session: AsyncSession, trainer_id: int, target_date: date
) -> list[TrainingSession]:
    """Sessions for the trainer starting within the date's local day bounds."""
    day_start, day_end = day_bounds(target_date)
    stmt = (
        select(TrainingSession)
        .where(
            TrainingSession.trainer_id == trainer_id,
            TrainingSession.start_time >= day_start,
            TrainingSession.start_time < day_end,
        )
        .order_by(TrainingSession.start_time)
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_trainer_sessions(
    session: AsyncSession, trainer_id: int, client_id: int | None = None
) -> list[TrainingSession]:
    """All sessions for a trainer (optionally one client), oldest first."""
    stmt = select(TrainingSession).where(TrainingSession.trainer_id == trainer_id)
    if client_id is not None:
        stmt = stmt.where(TrainingSession.client_id == client_id)
    result = await session.execute(stmt.order_by(TrainingSession.start_time))
    return list(result.scalars().all())
