"""Availability API routes — weekly template, date exceptions and bookable slots."""

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from trainertracker.api.deps import get_trainer_id
from trainertracker.config import get_settings
from trainertracker.database import get_db
from trainertracker.models.availability import AvailabilityException, WeeklyAvailability
from trainertracker.schemas.availability import (
    AvailabilityExceptionRead,
    AvailabilityRead,
    AvailabilityUpdate,
    SlotsResponse,
    TimeSlotRead,
    WeeklyAvailabilityRead,
)
from trainertracker.scheduling.slots import get_available_slots

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/availability", tags=["availability"])


async def _load_availability(
    session: AsyncSession, trainer_id: int, include_exceptions: bool
) -> AvailabilityRead:
    rules_result = await session.execute(
        select(WeeklyAvailability)
        .where(WeeklyAvailability.trainer_id == trainer_id)
        .order_by(WeeklyAvailability.day_of_week, WeeklyAvailability.start_time)
    )
    exceptions: list[AvailabilityException] = []
    if include_exceptions:
        exc_result = await session.execute(
            select(AvailabilityException)
            .where(AvailabilityException.trainer_id == trainer_id)
            .order_by(AvailabilityException.date)
        )
        exceptions = list(exc_result.scalars().all())

    return AvailabilityRead(
        availabilities=[
            WeeklyAvailabilityRead.model_validate(r) for r in rules_result.scalars().all()
        ],
        exceptions=[AvailabilityExceptionRead.model_validate(e) for e in exceptions],
    )


@router.get("", response_model=AvailabilityRead)
async def get_availability(
    include_exceptions: bool = Query(default=False),
    trainer_id: int = Depends(get_trainer_id),
    session: AsyncSession = Depends(get_db),
) -> AvailabilityRead:
    """Get the trainer's weekly template, optionally with date exceptions."""
    return await _load_availability(session, trainer_id, include_exceptions)


@router.post("", response_model=AvailabilityRead, status_code=201)
async def set_availability(
    body: AvailabilityUpdate,
    trainer_id: int = Depends(get_trainer_id),
    session: AsyncSession = Depends(get_db),
) -> AvailabilityRead:
    """Replace the weekly template.

    Every existing weekly rule is deleted and the supplied ones inserted. When
    `exceptions` is present the exception list is replaced the same way;
    when it is omitted existing exceptions are left alone. At most one rule
    per weekday is accepted (422 otherwise).
    """
    await session.execute(
        delete(WeeklyAvailability).where(WeeklyAvailability.trainer_id == trainer_id)
    )
    for rule in body.availabilities:
        session.add(WeeklyAvailability(trainer_id=trainer_id, **rule.model_dump()))

    if body.exceptions is not None:
        await session.execute(
            delete(AvailabilityException).where(AvailabilityException.trainer_id == trainer_id)
        )
        for exc in body.exceptions:
            session.add(AvailabilityException(trainer_id=trainer_id, **exc.model_dump()))

    await session.commit()
    logger.info(
        "Replaced availability for trainer %d: %d rules, %s exceptions",
        trainer_id,
        len(body.availabilities),
        len(body.exceptions) if body.exceptions is not None else "unchanged",
    )
    return await _load_availability(session, trainer_id, include_exceptions=True)


@router.get("/slots", response_model=SlotsResponse)
async def get_slots(
    trainer_id: int = Query(),
    target_date: date = Query(alias="date"),
    duration: int | None = Query(default=None, gt=0, le=24 * 60),
    session: AsyncSession = Depends(get_db),
) -> SlotsResponse:
    """List bookable start times for a trainer on a date.

    Candidates start every 30 minutes (configurable), so with durations
    longer than the step the returned slots overlap each other.
    """
    settings = get_settings()
    duration = duration or settings.default_slot_duration_minutes
    try:
        slots = await get_available_slots(
            session,
            trainer_id,
            target_date,
            duration,
            step_minutes=settings.slot_step_minutes,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from None
    return SlotsResponse(slots=[TimeSlotRead.model_validate(s) for s in slots])
