"""Summary statistics over an exercise's recent performances."""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class PerformanceTrend:
    date: date
    avg_weight: float
    avg_reps: float
    sets: int
    rpe: float


def _relative_change(new: float, old: float) -> float:
    if old == 0:
        return 0.0
    return (new - old) / old


def improvement_rate(trends: Sequence[PerformanceTrend]) -> float:
    """Mean relative change in weight and reps between newest and oldest entry.

    `trends` is ordered newest first. Fewer than two entries yield 0.
    """
    if len(trends) < 2:
        return 0.0
    recent, previous = trends[0], trends[-1]
    weight_change = _relative_change(recent.avg_weight, previous.avg_weight)
    rep_change = _relative_change(recent.avg_reps, previous.avg_reps)
    return (weight_change + rep_change) / 2


def consistency_score(trends: Sequence[PerformanceTrend]) -> float:
    """0-100 score; 100 means identical weights across all entries.

    Computed as 100 minus the coefficient of variation of weight (in percent),
    floored at 0. Fewer than three entries yield 0.
    """
    if len(trends) < 3:
        return 0.0
    weights = [t.avg_weight for t in trends]
    mean = sum(weights) / len(weights)
    if mean == 0:
        return 0.0
    variance = sum((w - mean) ** 2 for w in weights) / len(weights)
    coefficient_of_variation = math.sqrt(variance) / mean
    return max(0.0, 100 - coefficient_of_variation * 100)
