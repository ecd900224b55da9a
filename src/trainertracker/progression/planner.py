"""Four-week progressive overload look-ahead with experience-based deload weeks."""

import math
from dataclasses import dataclass, field

PROGRESSION_TYPES = ("LINEAR", "DOUBLE_PROGRESSION", "PERCENTAGE_BASED", "RPE_BASED")
EXPERIENCE_LEVELS = ("BEGINNER", "INTERMEDIATE", "ADVANCED")

LOOKAHEAD_WEEKS = 4
WEIGHT_INCREMENT = 2.5
MIN_RESET_REPS = 6
MIN_DELOAD_SETS = 2
DELOAD_WEIGHT_FACTOR = 0.9
DELOAD_EXTRA_REPS = 2
TRAINING_RPE = 8
DELOAD_RPE = 6


@dataclass(frozen=True)
class ProgressionRates:
    weight_increase: float  # fraction per progression step
    rep_increase: float
    deload_frequency: int  # weeks


PROGRESSION_RATES: dict[str, ProgressionRates] = {
    "BEGINNER": ProgressionRates(weight_increase=0.05, rep_increase=1, deload_frequency=4),
    "INTERMEDIATE": ProgressionRates(weight_increase=0.025, rep_increase=0.5, deload_frequency=6),
    "ADVANCED": ProgressionRates(weight_increase=0.01, rep_increase=0.25, deload_frequency=8),
}

DIFFICULTY_MULTIPLIERS: dict[str, float] = {
    "BEGINNER": 1.2,
    "INTERMEDIATE": 1.0,
    "ADVANCED": 0.8,
}


@dataclass(frozen=True)
class WeekPrescription:
    weight: float
    reps: int
    sets: int
    rpe: int


@dataclass(frozen=True)
class PlannedWeek:
    week: int
    weight: float
    reps: int
    sets: int
    rpe: int
    notes: str


@dataclass(frozen=True)
class ProgressionPlan:
    next_week: WeekPrescription
    four_week_plan: list[PlannedWeek] = field(default_factory=list)
    deload_week: WeekPrescription | None = None


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def round_weight(value: float) -> float:
    """Round to the nearest plate increment (2.5)."""
    return round_half_up(value / WEIGHT_INCREMENT) * WEIGHT_INCREMENT


def get_rates(experience_level: str) -> ProgressionRates:
    return PROGRESSION_RATES.get(experience_level.upper(), PROGRESSION_RATES["INTERMEDIATE"])


def is_deload_week(week: int, experience_level: str) -> bool:
    """Deload cadence is driven by experience level alone (every 4/6/8 weeks)."""
    return week % get_rates(experience_level).deload_frequency == 0


def _next_step(
    weight: float,
    reps: float,
    target_reps: int,
    progression_type: str,
    rates: ProgressionRates,
    multiplier: float,
) -> tuple[float, float]:
    step = rates.weight_increase * multiplier
    if progression_type == "RPE_BASED":
        return weight, reps
    if progression_type == "PERCENTAGE_BASED":
        if reps >= target_reps:
            reps = max(target_reps - 2, MIN_RESET_REPS)
        return weight * (1 + step), reps

    reset_offset = 3 if progression_type == "DOUBLE_PROGRESSION" else 2
    if reps >= target_reps:
        return weight * (1 + step), max(target_reps - reset_offset, MIN_RESET_REPS)
    return weight, min(reps + rates.rep_increase, target_reps)


def calculate_progressive_overload(
    current_weight: float,
    current_reps: int,
    current_sets: int,
    target_reps: int | None = None,
    progression_type: str = "LINEAR",
    experience_level: str = "BEGINNER",
    week_number: int = 1,
    exercise_difficulty: str = "INTERMEDIATE",
) -> ProgressionPlan:
    """Build next week's prescription and a four-week look-ahead.

    Progression types:
    - LINEAR: add weight once reps reach the target (reps reset to target-2),
      otherwise add reps.
    - DOUBLE_PROGRESSION: as LINEAR but reps reset to target-3.
    - PERCENTAGE_BASED: always add weight; reps reset when at target.
    - RPE_BASED: hold weight and reps.
    Unknown types behave like LINEAR.

    Weeks where `week_number + n` is a multiple of the experience level's
    deload frequency drop weight by 10%, add two reps (capped at target+2),
    remove one set (floor of two) and prescribe RPE 6.

    Raises:
        ValueError: On negative inputs or a non-positive week number.
    """
    if current_weight < 0 or current_reps < 0 or current_sets < 0:
        raise ValueError("Current weight, reps and sets must be non-negative")
    if week_number < 1:
        raise ValueError("Week number must be at least 1")

    target = target_reps if target_reps is not None else current_reps
    progression_type = progression_type.upper()
    if progression_type not in PROGRESSION_TYPES:
        progression_type = "LINEAR"
    rates = get_rates(experience_level)
    multiplier = DIFFICULTY_MULTIPLIERS.get(exercise_difficulty.upper(), 1.0)

    next_weight, next_reps = _next_step(
        current_weight, current_reps, target, progression_type, rates, multiplier
    )
    next_weight = round_weight(next_weight)
    next_sets = current_sets

    plan: list[PlannedWeek] = []
    week_weight, week_reps, week_sets = next_weight, float(next_reps), float(next_sets)
    for offset in range(1, LOOKAHEAD_WEEKS + 1):
        week = week_number + offset
        deload = is_deload_week(week, experience_level)
        if deload:
            week_weight *= DELOAD_WEIGHT_FACTOR
            week_reps = min(week_reps + DELOAD_EXTRA_REPS, target + DELOAD_EXTRA_REPS)
            week_sets = max(week_sets - 1, MIN_DELOAD_SETS)
        elif week_reps >= target:
            week_weight *= 1 + rates.weight_increase * multiplier
            week_reps = max(target - 2, MIN_RESET_REPS)
        else:
            week_reps = min(week_reps + rates.rep_increase, target)
        week_weight = round_weight(week_weight)

        plan.append(
            PlannedWeek(
                week=week,
                weight=week_weight,
                reps=round_half_up(week_reps),
                sets=round_half_up(week_sets),
                rpe=DELOAD_RPE if deload else TRAINING_RPE,
                notes=(
                    "Deload week - focus on form and recovery"
                    if deload
                    else "Progressive overload week"
                ),
            )
        )

    deload_week = None
    if is_deload_week(week_number + 1, experience_level):
        deload_week = WeekPrescription(
            weight=round_weight(next_weight * DELOAD_WEIGHT_FACTOR),
            reps=round_half_up(min(next_reps + DELOAD_EXTRA_REPS, target + DELOAD_EXTRA_REPS)),
            sets=max(next_sets - 1, MIN_DELOAD_SETS),
            rpe=DELOAD_RPE,
        )

    return ProgressionPlan(
        next_week=WeekPrescription(
            weight=next_weight,
            reps=round_half_up(next_reps),
            sets=next_sets,
            rpe=TRAINING_RPE,
        ),
        four_week_plan=plan,
        deload_week=deload_week,
    )


def generate_recommendations(
    plan: ProgressionPlan,
    experience_level: str,
    current_weight: float,
    exercise_difficulty: str = "INTERMEDIATE",
    muscle_groups: list[str] | None = None,
) -> list[str]:
    """Advisory notes to show next to a look-ahead plan."""
    level = experience_level.upper()
    recommendations: list[str] = []

    if exercise_difficulty.upper() == "ADVANCED" and level == "BEGINNER":
        recommendations.append("Consider starting with a simpler variation of this exercise")

    groups = muscle_groups or []
    if "Lower Back" in groups or "Core" in groups:
        recommendations.append("Focus on proper form and core engagement")

    if current_weight > 0 and plan.next_week.weight > current_weight * 1.1:
        recommendations.append(
            "Large weight increase detected - consider smaller increments for better adaptation"
        )

    if plan.deload_week is not None:
        recommendations.append("Deload week approaching - plan for active recovery and form work")

    if level == "BEGINNER":
        recommendations.append("Focus on mastering form before increasing weight")
        recommendations.append("Aim for 2-3 sessions per week for optimal adaptation")
    elif level == "INTERMEDIATE":
        recommendations.append("Consider implementing periodization for continued progress")
        recommendations.append("Monitor recovery and adjust volume as needed")
    else:
        recommendations.append("Fine-tune technique and consider advanced training methods")
        recommendations.append("Implement strategic deloads to prevent overtraining")

    return recommendations
