"""Trainer API routes — register and look up trainers."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trainertracker.database import get_db
from trainertracker.models.trainer import Trainer
from trainertracker.schemas.trainer import TrainerCreate, TrainerRead

router = APIRouter(prefix="/api/trainers", tags=["trainers"])


@router.post("", response_model=TrainerRead, status_code=201)
async def create_trainer(
    body: TrainerCreate,
    session: AsyncSession = Depends(get_db),
) -> Trainer:
    """Create a trainer. Returns 409 if the email is already registered."""
    existing = await session.execute(select(Trainer).where(Trainer.email == body.email))
    if existing.scalar_one_or_none() is not None:
        raise HTTPException(status_code=409, detail=f"Trainer '{body.email}' already exists")

    row = Trainer(name=body.name, email=body.email)
    session.add(row)
    await session.commit()
    await session.refresh(row)
    return row


@router.get("/{trainer_id}", response_model=TrainerRead)
async def get_trainer(
    trainer_id: int,
    session: AsyncSession = Depends(get_db),
) -> Trainer:
    row = await session.get(Trainer, trainer_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Trainer not found")
    return row
