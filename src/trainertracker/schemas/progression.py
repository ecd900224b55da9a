from datetime import date

from pydantic import BaseModel, Field


class RangeRead(BaseModel):
    min: float
    max: float

    model_config = {"from_attributes": True}


class ProgressionRulesRead(BaseModel):
    weight_increase: float
    rep_increase: int
    volume_increase: float
    frequency: str

    model_config = {"from_attributes": True}


class PhaseGuidelinesRead(BaseModel):
    sets: RangeRead
    reps: RangeRead
    intensity: RangeRead
    tempo: str
    rest_time: RangeRead
    rpe: RangeRead
    progression_rules: ProgressionRulesRead

    model_config = {"from_attributes": True}


class PerformanceEntryRead(BaseModel):
    date: date
    weight: float
    reps: int
    sets: int
    rpe: float

    model_config = {"from_attributes": True}


class ProgressionRecommendationRead(BaseModel):
    type: str
    current_value: float
    recommended_value: float
    increase: float
    percentage: float
    reason: str
    confidence: str
    next_session_date: date

    model_config = {"from_attributes": True}


class ExerciseProgressRead(BaseModel):
    exercise_id: str
    exercise_name: str
    current_weight: float
    current_reps: int
    current_sets: int
    last_session_date: date
    progression_history: list[PerformanceEntryRead]
    recommended_progression: ProgressionRecommendationRead

    model_config = {"from_attributes": True}


class ProgressiveOverloadRead(BaseModel):
    program_id: int
    client_id: int
    current_phase: str
    exercise_progress: list[ExerciseProgressRead]
    phase_guidelines: PhaseGuidelinesRead


class ProgressiveOverloadRequest(BaseModel):
    program_id: int | None = None
    exercise_id: str
    current_weight: float = Field(gt=0)
    current_reps: int = Field(gt=0)
    current_sets: int = Field(gt=0)
    target_reps: int | None = Field(default=None, gt=0)
    progression_type: str = Field(
        default="LINEAR",
        pattern=r"^(LINEAR|DOUBLE_PROGRESSION|PERCENTAGE_BASED|RPE_BASED)$",
    )
    experience_level: str = Field(
        default="BEGINNER", pattern=r"^(BEGINNER|INTERMEDIATE|ADVANCED)$"
    )
    week_number: int = Field(default=1, ge=1)
    exercise_difficulty: str = Field(
        default="INTERMEDIATE", pattern=r"^(BEGINNER|INTERMEDIATE|ADVANCED)$"
    )
    muscle_groups: list[str] = Field(default_factory=list)


class WeekPrescriptionRead(BaseModel):
    weight: float
    reps: int
    sets: int
    rpe: int

    model_config = {"from_attributes": True}


class PlannedWeekRead(WeekPrescriptionRead):
    week: int
    notes: str


class ProgressionPlanRead(BaseModel):
    next_week: WeekPrescriptionRead
    four_week_plan: list[PlannedWeekRead]
    deload_week: WeekPrescriptionRead | None = None

    model_config = {"from_attributes": True}


class PerformanceTrendRead(BaseModel):
    date: date
    avg_weight: float
    avg_reps: float
    sets: int
    rpe: float

    model_config = {"from_attributes": True}


class HistoricalPerformanceRead(BaseModel):
    recent_performances: list[PerformanceTrendRead]
    improvement_rate: float
    consistency_score: float

    model_config = {"from_attributes": True}


class ProgressiveOverloadPlanResponse(BaseModel):
    progression: ProgressionPlanRead
    historical_data: HistoricalPerformanceRead | None = None
    recommendations: list[str]
