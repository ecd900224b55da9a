from trainertracker.progression.guidelines import (
    DEFAULT_PHASE,
    OPT_PHASE_GUIDELINES,
    OPT_PHASES,
    get_phase_guidelines,
    normalize_phase,
)


class TestPhaseGuidelines:
    def test_every_phase_has_guidelines(self) -> None:
        assert set(OPT_PHASES) == set(OPT_PHASE_GUIDELINES)

    def test_ranges_are_ordered(self) -> None:
        for guidelines in OPT_PHASE_GUIDELINES.values():
            for r in (guidelines.sets, guidelines.reps, guidelines.intensity, guidelines.rpe):
                assert r.min <= r.max

    def test_stabilization_endurance(self) -> None:
        g = get_phase_guidelines("STABILIZATION_ENDURANCE")
        assert (g.reps.min, g.reps.max) == (12, 20)
        assert g.tempo == "4-2-2"
        assert g.progression_rules.rep_increase == 2

    def test_maximal_strength(self) -> None:
        g = get_phase_guidelines("MAXIMAL_STRENGTH")
        assert g.sets.max == 6
        assert g.progression_rules.frequency == "bi-weekly"

    def test_unknown_phase_uses_default(self) -> None:
        assert normalize_phase("BULKING") == DEFAULT_PHASE
        assert normalize_phase(None) == DEFAULT_PHASE
        assert get_phase_guidelines("BULKING") is OPT_PHASE_GUIDELINES[DEFAULT_PHASE]
