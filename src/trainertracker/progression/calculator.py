"""Progressive overload calculator: next-session prescription from recent history.

Each call is stateless: the recommendation depends only on the current
performance, the training phase and the supplied history.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Literal

from trainertracker.progression.guidelines import get_phase_guidelines

RecommendationType = Literal["WEIGHT", "REPS", "SETS", "VOLUME", "INTENSITY"]
Confidence = Literal["LOW", "MEDIUM", "HIGH"]

NEXT_SESSION_INTERVAL = timedelta(days=7)
RECENT_WINDOW = 3
MIN_HISTORY = 2

MAX_RPE = 10.0


@dataclass(frozen=True)
class PerformanceEntry:
    """One completed exercise within a session."""

    date: date
    weight: float
    reps: int
    sets: int
    rpe: float

    def __post_init__(self) -> None:
        for name in ("weight", "reps", "sets"):
            value = getattr(self, name)
            if value is None or value < 0:
                raise ValueError(f"Performance {name} must be non-negative, got {value!r}")
        if self.rpe is None or not 0 <= self.rpe <= MAX_RPE:
            raise ValueError(f"Performance rpe must be between 0 and 10, got {self.rpe!r}")


@dataclass(frozen=True)
class ProgressionRecommendation:
    type: RecommendationType
    current_value: float
    recommended_value: float
    increase: float
    percentage: float
    reason: str
    confidence: Confidence
    next_session_date: date


def _recommendation(
    type_: RecommendationType,
    current_value: float,
    recommended_value: float,
    reason: str,
    confidence: Confidence,
    today: date,
) -> ProgressionRecommendation:
    increase = recommended_value - current_value
    percentage = increase / (current_value or 1) * 100
    return ProgressionRecommendation(
        type=type_,
        current_value=current_value,
        recommended_value=recommended_value,
        increase=increase,
        percentage=percentage,
        reason=reason,
        confidence=confidence,
        next_session_date=today + NEXT_SESSION_INTERVAL,
    )


def recent_window(
    history: Sequence[PerformanceEntry], size: int = RECENT_WINDOW
) -> list[PerformanceEntry]:
    """The `size` most recent entries, oldest first.

    `history` is expected newest first; entries sharing a date keep that
    order, so the earlier-listed one counts as more recent.
    """
    newest_first = sorted(history, key=lambda entry: entry.date, reverse=True)
    return newest_first[:size][::-1]


def recommend_progression(
    current: PerformanceEntry,
    phase: str | None,
    history: Sequence[PerformanceEntry],
    today: date | None = None,
) -> ProgressionRecommendation:
    """Recommend the next prescription for one exercise.

    Rules, in order:
    - Fewer than two history entries: keep the current weight, LOW confidence.
    - Stabilization endurance with average RPE <= 5 and stable reps: add reps,
      capped at the phase's rep ceiling.
    - Strength endurance or muscular development with average RPE >= 7 and
      stable weight and reps: add the phase's weight increment.
    - Otherwise add one set, capped at the phase's set ceiling.

    "Stable" means every entry in the recent window matches the current value.

    Raises:
        ValueError: If any performance value is non-physical (checked when the
            `PerformanceEntry` records are built).
    """
    today = today or date.today()
    guidelines = get_phase_guidelines(phase)
    rules = guidelines.progression_rules

    if len(history) < MIN_HISTORY:
        return _recommendation(
            "WEIGHT",
            current.weight,
            current.weight,
            "Insufficient data for progression recommendation",
            "LOW",
            today,
        )

    recent = recent_window(history)
    avg_rpe = sum(entry.rpe for entry in recent) / len(recent)
    weight_stable = all(entry.weight == current.weight for entry in recent)
    rep_stable = all(entry.reps == current.reps for entry in recent)

    if phase == "STABILIZATION_ENDURANCE":
        if avg_rpe <= 5 and rep_stable:
            return _recommendation(
                "REPS",
                current.reps,
                min(current.reps + rules.rep_increase, guidelines.reps.max),
                "Low RPE indicates capacity for increased reps",
                "HIGH",
                today,
            )
    elif phase in ("STRENGTH_ENDURANCE", "MUSCULAR_DEVELOPMENT"):
        if avg_rpe >= 7 and weight_stable and rep_stable:
            return _recommendation(
                "WEIGHT",
                current.weight,
                current.weight + rules.weight_increase,
                "High RPE and consistent performance indicate readiness for weight increase",
                "HIGH",
                today,
            )

    return _recommendation(
        "VOLUME",
        current.sets,
        min(current.sets + 1, guidelines.sets.max),
        "Maintain current weight/reps, increase volume",
        "MEDIUM",
        today,
    )
