from trainertracker.schemas.availability import (
    AvailabilityExceptionCreate,
    AvailabilityExceptionRead,
    AvailabilityRead,
    AvailabilityUpdate,
    SlotsResponse,
    TimeSlotRead,
    WeeklyAvailabilityCreate,
    WeeklyAvailabilityRead,
)
from trainertracker.schemas.client import ClientCreate, ClientRead
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
    ProgressionRecommendationRead,
    ProgressiveOverloadPlanResponse,
    ProgressiveOverloadRead,
    ProgressiveOverloadRequest,
)
from trainertracker.schemas.session import (
    SessionConflictRead,
    TrainingSessionCreate,
    TrainingSessionRead,
    TrainingSessionUpdate,
)
from trainertracker.schemas.system import StatusResponse
from trainertracker.schemas.trainer import TrainerCreate, TrainerRead

__all__ = [
    "AvailabilityExceptionCreate",
    "AvailabilityExceptionRead",
    "AvailabilityRead",
    "AvailabilityUpdate",
    "ClientCreate",
    "ClientRead",
    "ExercisePerformanceCreate",
    "ExercisePerformanceRead",
    "ExerciseProgressRead",
    "HistoricalPerformanceRead",
    "PhaseGuidelinesRead",
    "ProgramCreate",
    "ProgramRead",
    "ProgressionPlanRead",
    "ProgressionRecommendationRead",
    "ProgressiveOverloadPlanResponse",
    "ProgressiveOverloadRead",
    "ProgressiveOverloadRequest",
    "SessionConflictRead",
    "SlotsResponse",
    "StatusResponse",
    "TimeSlotRead",
    "TrainerCreate",
    "TrainerRead",
    "TrainingSessionCreate",
    "TrainingSessionRead",
    "TrainingSessionUpdate",
    "WeeklyAvailabilityCreate",
    "WeeklyAvailabilityRead",
]
