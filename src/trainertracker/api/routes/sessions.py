"""Session API routes — list, book, reschedule and cancel training sessions."""

from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trainertracker.api.deps import get_trainer_id
from trainertracker.database import get_db
from trainertracker.models.client import Client
from trainertracker.models.session import TrainingSession
from trainertracker.schemas.session import (
    SessionConflictRead,
    TrainingSessionCreate,
    TrainingSessionRead,
    TrainingSessionUpdate,
)
from trainertracker.scheduling.conflicts import (
    SessionConflictError,
    book_session,
    reschedule_session,
)
from trainertracker.scheduling.context import get_trainer_sessions

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


def _raise_conflict(err: SessionConflictError) -> NoReturn:
    raise HTTPException(
        status_code=409,
        detail={
            "error": str(err),
            "conflicts": [
                SessionConflictRead.model_validate(c).model_dump(mode="json")
                for c in err.conflicts
            ],
        },
    ) from None


async def _book(
    session: AsyncSession, trainer_id: int, body: TrainingSessionCreate
) -> TrainingSession:
    try:
        return await book_session(
            session,
            trainer_id,
            body.client_id,
            body.start_time,
            body.end_time,
            type=body.type,
            location=body.location,
            notes=body.notes,
        )
    except SessionConflictError as e:
        _raise_conflict(e)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from None


@router.get("", response_model=list[TrainingSessionRead])
async def list_sessions(
    client_id: int | None = Query(default=None),
    trainer_id: int = Depends(get_trainer_id),
    session: AsyncSession = Depends(get_db),
) -> list[TrainingSession]:
    """List the trainer's sessions in chronological order."""
    return await get_trainer_sessions(session, trainer_id, client_id=client_id)


@router.post("", response_model=TrainingSessionRead, status_code=201)
async def create_session(
    body: TrainingSessionCreate,
    trainer_id: int = Depends(get_trainer_id),
    session: AsyncSession = Depends(get_db),
) -> TrainingSession:
    """Book a session for one of the trainer's clients.

    The end time defaults to one hour after the start. Returns 409 with the
    conflicting sessions if the interval overlaps an existing booking.
    """
    client = await session.get(Client, body.client_id)
    if client is None or client.trainer_id != trainer_id:
        raise HTTPException(status_code=404, detail="Client not found")
    return await _book(session, trainer_id, body)


@router.post("/book", response_model=TrainingSessionRead, status_code=201)
async def client_book_session(
    body: TrainingSessionCreate,
    session: AsyncSession = Depends(get_db),
) -> TrainingSession:
    """Client self-booking: the session is placed with the client's own trainer."""
    client = await session.get(Client, body.client_id)
    if client is None:
        raise HTTPException(status_code=404, detail="Client not found")
    return await _book(session, client.trainer_id, body)


@router.patch("/{session_id}", response_model=TrainingSessionRead)
async def update_session(
    session_id: int,
    body: TrainingSessionUpdate,
    trainer_id: int = Depends(get_trainer_id),
    session: AsyncSession = Depends(get_db),
) -> TrainingSession:
    """Update a session (partial update).

    Moving the start or end re-runs the conflict check against the trainer's
    other sessions.
    """
    stmt = select(TrainingSession).where(
        TrainingSession.id == session_id,
        TrainingSession.trainer_id == trainer_id,
    )
    result = await session.execute(stmt)
    row = result.scalar_one_or_none()
    if row is None:
        raise HTTPException(status_code=404, detail="Session not found")

    update_data = body.model_dump(exclude_unset=True)
    start_time = update_data.pop("start_time", None)
    end_time = update_data.pop("end_time", None)
    if start_time is not None or end_time is not None:
        try:
            await reschedule_session(session, row, start_time, end_time)
        except SessionConflictError as e:
            _raise_conflict(e)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e)) from None

    for field, value in update_data.items():
        setattr(row, field, value)

    await session.commit()
    await session.refresh(row)
    return row


@router.delete("/{session_id}", status_code=204)
async def delete_session(
    session_id: int,
    trainer_id: int = Depends(get_trainer_id),
    session: AsyncSession = Depends(get_db),
) -> None:
    """Delete one of the trainer's sessions."""
    stmt = select(TrainingSession).where(
        TrainingSession.id == session_id,
        TrainingSession.trainer_id == trainer_id,
    )
    result = await session.execute(stmt)
    row = result.scalar_one_or_none()
    if row is None:
        raise HTTPException(status_code=404, detail="Session not found")

    await session.delete(row)
    await session.commit()
