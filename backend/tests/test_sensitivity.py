"""Tests for the -20% / base / +20% cost sensitivity."""
import pytest

from fetp_aid.choice.resolver import resolve_config
from fetp_aid.models.simulation import SimulationAssumptions
from fetp_aid.services.evaluation_service import evaluate
from fetp_aid.services.sensitivity_service import sensitivity, sensitivity_points


def _make_config(**overrides):
    defaults = dict(program="intermediate", mentorship="medium", cost_per_trainee=200_000)
    defaults.update(overrides)
    return resolve_config(defaults)


def test_three_points_in_fixed_order():
    points = sensitivity_points(_make_config())
    assert [p.label for p in points] == ["-20%", "base", "+20%"]
    assert [p.multiplier for p in points] == [0.8, 1.0, 1.2]
    assert [p.cost_per_trainee for p in points] == pytest.approx([160_000, 200_000, 240_000])


def test_base_point_matches_evaluation():
    config = _make_config()
    assert sensitivity(config)[1] == evaluate(config)


def test_uptake_non_increasing_with_cost():
    uptakes = [r.uptake_prob for r in sensitivity(_make_config())]
    assert uptakes[0] >= uptakes[1] >= uptakes[2]


@pytest.mark.parametrize("overrides", [
    dict(program="frontline", delivery="online"),
    dict(program="advanced", mentorship="high", response="7"),
    dict(preference_model="supporters", career="govpath"),
])
def test_uptake_ordering_for_any_configuration(overrides):
    uptakes = [r.uptake_prob for r in sensitivity(_make_config(**overrides))]
    assert uptakes[0] >= uptakes[1] >= uptakes[2]


def test_perturbed_cost_reclamped_at_ceiling():
    points = sensitivity_points(_make_config(cost_per_trainee=400_000))
    assert points[2].cost_per_trainee == 400_000
    assert points[2].result == points[1].result


def test_perturbed_cost_reclamped_at_floor():
    points = sensitivity_points(_make_config(cost_per_trainee=80_000))
    assert points[0].cost_per_trainee == 75_000


def test_other_attributes_held_fixed():
    config = _make_config(cohort_size=33, include_opportunity_cost=True)
    results = sensitivity(config)
    # Cost scales linearly with cost per trainee when nothing else moves
    assert results[0].total_cost == pytest.approx(results[1].total_cost * 0.8)
    assert results[2].total_cost == pytest.approx(results[1].total_cost * 1.2)


# --- Endorsement override and combined BCR ---


def test_endorsement_override_replaces_uptake_in_benefit():
    config = _make_config()
    modelled = sensitivity_points(config)
    overridden = sensitivity_points(config, endorsement_override=0.5)
    for base, point in zip(modelled, overridden):
        assert point.result.uptake_prob == 0.5
        assert point.result.total_cost == base.result.total_cost
        assert point.result.total_benefit == pytest.approx(
            base.result.total_benefit * 0.5 / base.result.uptake_prob
        )


@pytest.mark.parametrize("value, expected", [(1.4, 1.0), (-1, 0.0), ("0.25", 0.25)])
def test_endorsement_override_clamped(value, expected):
    points = sensitivity_points(_make_config(), endorsement_override=value)
    assert all(p.result.uptake_prob == expected for p in points)


@pytest.mark.parametrize("value", [None, float("nan"), "high"])
def test_invalid_endorsement_override_ignored(value):
    config = _make_config()
    assert [p.result for p in sensitivity_points(config, endorsement_override=value)] == sensitivity(config)


def test_combined_bcr_only_with_assumptions():
    config = _make_config()
    assert all(p.epi_benefit is None and p.combined_bcr is None for p in sensitivity_points(config))

    assumptions = SimulationAssumptions(value_per_graduate=500_000, outbreaks_per_100_graduates=5,
                                        value_per_outbreak=30_000_000)
    points = sensitivity_points(config, assumptions=assumptions)
    for point, dce_only in zip(points, sensitivity(config)):
        assert point.result == dce_only
        assert point.epi_benefit == pytest.approx(
            20 * dce_only.uptake_prob * (500_000 + 0.05 * 30_000_000)
        )
        assert point.combined_bcr == pytest.approx(
            (dce_only.total_benefit + point.epi_benefit) / dce_only.total_cost
        )
        assert point.combined_bcr > point.result.bcr
