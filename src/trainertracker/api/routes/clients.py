"""Client API routes — a trainer's client roster."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trainertracker.api.deps import get_trainer_id
from trainertracker.database import get_db
from trainertracker.models.client import Client
from trainertracker.schemas.client import ClientCreate, ClientRead

router = APIRouter(prefix="/api/clients", tags=["clients"])


@router.post("", response_model=ClientRead, status_code=201)
async def create_client(
    body: ClientCreate,
    trainer_id: int = Depends(get_trainer_id),
    session: AsyncSession = Depends(get_db),
) -> Client:
    row = Client(trainer_id=trainer_id, **body.model_dump())
    session.add(row)
    await session.commit()
    await session.refresh(row)
    return row


@router.get("", response_model=list[ClientRead])
async def list_clients(
    trainer_id: int = Depends(get_trainer_id),
    session: AsyncSession = Depends(get_db),
) -> list[Client]:
    """List the trainer's clients by last name."""
    stmt = (
        select(Client)
        .where(Client.trainer_id == trainer_id)
        .order_by(Client.last_name, Client.first_name)
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


@router.get("/{client_id}", response_model=ClientRead)
async def get_client(
    client_id: int,
    trainer_id: int = Depends(get_trainer_id),
    session: AsyncSession = Depends(get_db),
) -> Client:
    stmt = select(Client).where(Client.id == client_id, Client.trainer_id == trainer_id)
    result = await session.execute(stmt)
    row = result.scalar_one_or_none()
    if row is None:
        raise HTTPException(status_code=404, detail="Client not found")
    return row
