"""Database queries that turn stored performances into progression inputs."""

import logging
from dataclasses import dataclass, field
from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trainertracker.models.program import ExercisePerformance, Program
from trainertracker.progression.calculator import (
    PerformanceEntry,
    ProgressionRecommendation,
    recommend_progression,
)
from trainertracker.progression.guidelines import PhaseGuidelines, get_phase_guidelines
from trainertracker.progression.trends import (
    PerformanceTrend,
    consistency_score,
    improvement_rate,
)

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 5


@dataclass(frozen=True)
class ExerciseProgress:
    exercise_id: str
    exercise_name: str
    current_weight: float
    current_reps: int
    current_sets: int
    last_session_date: date
    progression_history: list[PerformanceEntry]
    recommended_progression: ProgressionRecommendation


@dataclass
class ProgramProgress:
    program: Program
    exercise_progress: list[ExerciseProgress] = field(default_factory=list)
    phase_guidelines: PhaseGuidelines | None = None


@dataclass(frozen=True)
class HistoricalPerformance:
    recent_performances: list[PerformanceTrend]
    improvement_rate: float
    consistency_score: float


def to_entry(row: ExercisePerformance) -> PerformanceEntry:
    return PerformanceEntry(
        date=row.performed_on,
        weight=row.weight,
        reps=row.reps,
        sets=row.sets,
        rpe=row.rpe,
    )


async def get_program(
    session: AsyncSession, trainer_id: int, program_id: int
) -> Program | None:
    stmt = select(Program).where(Program.id == program_id, Program.trainer_id == trainer_id)
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


async def get_program_performances(
    session: AsyncSession, program_id: int, exercise_id: str | None = None
) -> list[ExercisePerformance]:
    """Performances for a program, most recent first."""
    stmt = select(ExercisePerformance).where(ExercisePerformance.program_id == program_id)
    if exercise_id is not None:
        stmt = stmt.where(ExercisePerformance.exercise_id == exercise_id)
    stmt = stmt.order_by(ExercisePerformance.performed_on.desc(), ExercisePerformance.id.desc())
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_exercise_progress(
    session: AsyncSession,
    trainer_id: int,
    program_id: int,
    today: date | None = None,
) -> ProgramProgress | None:
    """Group a program's performances by exercise and recommend the next step.

    The most recent performance of each exercise is its current state; all of
    its performances form the history. Returns None if the program does not
    exist or belongs to another trainer.
    """
    program = await get_program(session, trainer_id, program_id)
    if program is None:
        return None

    rows = await get_program_performances(session, program_id)
    grouped: dict[str, list[ExercisePerformance]] = {}
    for row in rows:
        grouped.setdefault(row.exercise_id, []).append(row)

    progress = ProgramProgress(
        program=program,
        phase_guidelines=get_phase_guidelines(program.opt_phase),
    )
    for exercise_id, performances in grouped.items():
        history = [to_entry(row) for row in performances]
        current = history[0]
        progress.exercise_progress.append(
            ExerciseProgress(
                exercise_id=exercise_id,
                exercise_name=performances[0].exercise_name,
                current_weight=current.weight,
                current_reps=current.reps,
                current_sets=current.sets,
                last_session_date=current.date,
                progression_history=history,
                recommended_progression=recommend_progression(
                    current, program.opt_phase, history, today=today
                ),
            )
        )

    logger.debug(
        "Computed progression for %d exercises in program %d",
        len(progress.exercise_progress),
        program_id,
    )
    return progress


async def get_historical_performance(
    session: AsyncSession,
    program_id: int,
    exercise_id: str,
    limit: int = HISTORY_LIMIT,
) -> HistoricalPerformance | None:
    """Trend summary over the last `limit` performances of one exercise."""
    rows = (await get_program_performances(session, program_id, exercise_id))[:limit]
    if not rows:
        return None

    trends = [
        PerformanceTrend(
            date=row.performed_on,
            avg_weight=row.weight,
            avg_reps=float(row.reps),
            sets=row.sets,
            rpe=row.rpe,
        )
        for row in rows
    ]
    return HistoricalPerformance(
        recent_performances=trends,
        improvement_rate=improvement_rate(trends),
        consistency_score=consistency_score(trends),
    )
