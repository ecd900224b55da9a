"""Static training guidelines for the five OPT (Optimum Performance Training) phases."""

from dataclasses import dataclass
from typing import Literal

OptPhase = Literal[
    "STABILIZATION_ENDURANCE",
    "STRENGTH_ENDURANCE",
    "MUSCULAR_DEVELOPMENT",
    "MAXIMAL_STRENGTH",
    "POWER",
]

OPT_PHASES: tuple[str, ...] = (
    "STABILIZATION_ENDURANCE",
    "STRENGTH_ENDURANCE",
    "MUSCULAR_DEVELOPMENT",
    "MAXIMAL_STRENGTH",
    "POWER",
)

DEFAULT_PHASE = "STABILIZATION_ENDURANCE"


@dataclass(frozen=True)
class Range:
    min: float
    max: float


@dataclass(frozen=True)
class ProgressionRules:
    weight_increase: float  # load units added per progression step
    rep_increase: int
    volume_increase: float  # percent
    frequency: str  # weekly, bi-weekly (descriptive only)


@dataclass(frozen=True)
class PhaseGuidelines:
    sets: Range
    reps: Range
    intensity: Range  # percent of 1RM
    tempo: str
    rest_time: Range  # seconds
    rpe: Range
    progression_rules: ProgressionRules


OPT_PHASE_GUIDELINES: dict[str, PhaseGuidelines] = {
    "STABILIZATION_ENDURANCE": PhaseGuidelines(
        sets=Range(1, 3),
        reps=Range(12, 20),
        intensity=Range(50, 70),
        tempo="4-2-2",
        rest_time=Range(0, 90),
        rpe=Range(4, 6),
        progression_rules=ProgressionRules(
            weight_increase=0, rep_increase=2, volume_increase=10, frequency="weekly"
        ),
    ),
    "STRENGTH_ENDURANCE": PhaseGuidelines(
        sets=Range(2, 4),
        reps=Range(8, 12),
        intensity=Range(70, 80),
        tempo="3-1-2",
        rest_time=Range(60, 120),
        rpe=Range(6, 8),
        progression_rules=ProgressionRules(
            weight_increase=5, rep_increase=1, volume_increase=5, frequency="weekly"
        ),
    ),
    "MUSCULAR_DEVELOPMENT": PhaseGuidelines(
        sets=Range(3, 5),
        reps=Range(6, 12),
        intensity=Range(75, 85),
        tempo="2-1-2",
        rest_time=Range(90, 180),
        rpe=Range(7, 9),
        progression_rules=ProgressionRules(
            weight_increase=2.5, rep_increase=0, volume_increase=5, frequency="bi-weekly"
        ),
    ),
    "MAXIMAL_STRENGTH": PhaseGuidelines(
        sets=Range(2, 6),
        reps=Range(1, 5),
        intensity=Range(85, 100),
        tempo="2-1-1",
        rest_time=Range(180, 300),
        rpe=Range(8, 10),
        progression_rules=ProgressionRules(
            weight_increase=2.5, rep_increase=0, volume_increase=0, frequency="bi-weekly"
        ),
    ),
    "POWER": PhaseGuidelines(
        sets=Range(2, 4),
        reps=Range(1, 5),
        intensity=Range(30, 45),
        tempo="1-0-1",
        rest_time=Range(180, 300),
        rpe=Range(7, 9),
        progression_rules=ProgressionRules(
            weight_increase=2.5, rep_increase=0, volume_increase=3, frequency="weekly"
        ),
    ),
}


def normalize_phase(phase: str | None) -> str:
    """Map unknown or missing phase names to the default phase."""
    if phase in OPT_PHASE_GUIDELINES:
        return phase  # type: ignore[return-value]
    return DEFAULT_PHASE


def get_phase_guidelines(phase: str | None) -> PhaseGuidelines:
    return OPT_PHASE_GUIDELINES[normalize_phase(phase)]
