"""Program API routes — training programs, logged performances and progression."""

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from trainertracker.api.deps import get_now, get_trainer_id
from trainertracker.database import get_db
from trainertracker.models.client import Client
from trainertracker.models.program import ExercisePerformance, Program
from trainertracker.progression.context import (
    get_exercise_progress,
    get_historical_performance,
    get_program,
)
from trainertracker.progression.planner import (
    calculate_progressive_overload,
    generate_recommendations,
)
from trainertracker.schemas.program import (
    ExercisePerformanceCreate,
    ExercisePerformanceRead,
    ProgramCreate,
    ProgramRead,
)
from trainertracker.schemas.progression import (
    ExerciseProgressRead,
    HistoricalPerformanceRead,
    PhaseGuidelinesRead,
    ProgressionPlanRead,
    ProgressiveOverloadPlanResponse,
    ProgressiveOverloadRead,
    ProgressiveOverloadRequest,
)

router = APIRouter(prefix="/api/programs", tags=["programs"])


@router.post("/progressive-overload", response_model=ProgressiveOverloadPlanResponse)
async def plan_progressive_overload(
    body: ProgressiveOverloadRequest,
    trainer_id: int = Depends(get_trainer_id),
    session: AsyncSession = Depends(get_db),
) -> ProgressiveOverloadPlanResponse:
    """Four-week look-ahead for one exercise.

    Includes a trend summary of the exercise's logged history when
    `program_id` is given.
    """
    try:
        plan = calculate_progressive_overload(
            current_weight=body.current_weight,
            current_reps=body.current_reps,
            current_sets=body.current_sets,
            target_reps=body.target_reps,
            progression_type=body.progression_type,
            experience_level=body.experience_level,
            week_number=body.week_number,
            exercise_difficulty=body.exercise_difficulty,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from None

    historical = None
    if body.program_id is not None:
        program = await get_program(session, trainer_id, body.program_id)
        if program is None:
            raise HTTPException(status_code=404, detail="Program not found")
        historical = await get_historical_performance(session, program.id, body.exercise_id)

    return ProgressiveOverloadPlanResponse(
        progression=ProgressionPlanRead.model_validate(plan),
        historical_data=(
            HistoricalPerformanceRead.model_validate(historical) if historical else None
        ),
        recommendations=generate_recommendations(
            plan,
            body.experience_level,
            body.current_weight,
            exercise_difficulty=body.exercise_difficulty,
            muscle_groups=body.muscle_groups,
        ),
    )


@router.post("", response_model=ProgramRead, status_code=201)
async def create_program(
    body: ProgramCreate,
    trainer_id: int = Depends(get_trainer_id),
    session: AsyncSession = Depends(get_db),
) -> Program:
    client = await session.get(Client, body.client_id)
    if client is None or client.trainer_id != trainer_id:
        raise HTTPException(status_code=404, detail="Client not found")

    row = Program(trainer_id=trainer_id, **body.model_dump())
    session.add(row)
    await session.commit()
    await session.refresh(row)
    return row


@router.get("/{program_id}", response_model=ProgramRead)
async def get_program_detail(
    program_id: int,
    trainer_id: int = Depends(get_trainer_id),
    session: AsyncSession = Depends(get_db),
) -> Program:
    program = await get_program(session, trainer_id, program_id)
    if program is None:
        raise HTTPException(status_code=404, detail="Program not found")
    return program


@router.post(
    "/{program_id}/performances", response_model=ExercisePerformanceRead, status_code=201
)
async def log_performance(
    program_id: int,
    body: ExercisePerformanceCreate,
    trainer_id: int = Depends(get_trainer_id),
    session: AsyncSession = Depends(get_db),
) -> ExercisePerformance:
    """Append one completed exercise to the program's history."""
    program = await get_program(session, trainer_id, program_id)
    if program is None:
        raise HTTPException(status_code=404, detail="Program not found")

    row = ExercisePerformance(program_id=program.id, **body.model_dump())
    session.add(row)
    await session.commit()
    await session.refresh(row)
    return row


@router.get("/{program_id}/progressive-overload", response_model=ProgressiveOverloadRead)
async def get_progressive_overload(
    program_id: int,
    client_id: int = Query(),
    trainer_id: int = Depends(get_trainer_id),
    now: datetime = Depends(get_now),
    session: AsyncSession = Depends(get_db),
) -> ProgressiveOverloadRead:
    """Per-exercise progress and next-session recommendations for a program."""
    progress = await get_exercise_progress(session, trainer_id, program_id, today=now.date())
    if progress is None or progress.program.client_id != client_id:
        raise HTTPException(status_code=404, detail="Program not found")

    return ProgressiveOverloadRead(
        program_id=progress.program.id,
        client_id=progress.program.client_id,
        current_phase=progress.program.opt_phase,
        exercise_progress=[
            ExerciseProgressRead.model_validate(p) for p in progress.exercise_progress
        ],
        phase_guidelines=PhaseGuidelinesRead.model_validate(progress.phase_guidelines),
    )
