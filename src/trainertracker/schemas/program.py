from datetime import date, datetime

from pydantic import BaseModel, Field

OPT_PHASE_PATTERN = (
    r"^(STABILIZATION_ENDURANCE|STRENGTH_ENDURANCE|MUSCULAR_DEVELOPMENT|MAXIMAL_STRENGTH|POWER)$"
)


class ProgramBase(BaseModel):
    client_id: int
    name: str = Field(max_length=200)
    opt_phase: str = Field(default="STABILIZATION_ENDURANCE", pattern=OPT_PHASE_PATTERN)
    start_date: date | None = None


class ProgramCreate(ProgramBase):
    pass


class ProgramRead(ProgramBase):
    id: int
    trainer_id: int
    status: str
    created_at: datetime

    model_config = {"from_attributes": True}


class ExercisePerformanceBase(BaseModel):
    exercise_id: str = Field(max_length=100)
    exercise_name: str = Field(max_length=200)
    performed_on: date
    weight: float = Field(default=0.0, ge=0)
    reps: int = Field(default=0, ge=0)
    sets: int = Field(default=0, ge=0)
    rpe: float = Field(default=7.0, ge=0, le=10)
    session_id: int | None = None


class ExercisePerformanceCreate(ExercisePerformanceBase):
    pass


class ExercisePerformanceRead(ExercisePerformanceBase):
    id: int
    program_id: int

    model_config = {"from_attributes": True}
