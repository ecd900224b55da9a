from datetime import date

import pytest

from trainertracker.progression.trends import (
    PerformanceTrend,
    consistency_score,
    improvement_rate,
)


def _trend(day: int, weight: float, reps: float = 10) -> PerformanceTrend:
    return PerformanceTrend(date=date(2024, 6, day), avg_weight=weight, avg_reps=reps, sets=3, rpe=7)


class TestImprovementRate:
    def test_newest_versus_oldest(self) -> None:
        trends = [_trend(17, 110, 12), _trend(10, 105, 10), _trend(3, 100, 10)]
        # (10% weight + 20% reps) / 2
        assert improvement_rate(trends) == pytest.approx(0.15)

    def test_needs_two_entries(self) -> None:
        assert improvement_rate([]) == 0
        assert improvement_rate([_trend(3, 100)]) == 0

    def test_zero_baseline(self) -> None:
        trends = [_trend(10, 20, 10), _trend(3, 0, 10)]
        assert improvement_rate(trends) == 0


class TestConsistencyScore:
    def test_identical_weights(self) -> None:
        trends = [_trend(17, 50), _trend(10, 50), _trend(3, 50)]
        assert consistency_score(trends) == 100

    def test_variable_weights(self) -> None:
        trends = [_trend(17, 25), _trend(10, 22.5), _trend(3, 20)]
        assert consistency_score(trends) == pytest.approx(90.93, abs=0.01)

    def test_needs_three_entries(self) -> None:
        assert consistency_score([_trend(10, 50), _trend(3, 50)]) == 0

    def test_zero_mean(self) -> None:
        assert consistency_score([_trend(17, 0), _trend(10, 0), _trend(3, 0)]) == 0
