"""Tests for the binary logit choice model."""
import math

import pytest

from fetp_aid.choice.choice_model import compute_choice, logistic
from fetp_aid.choice.resolver import resolve_config
from fetp_aid.coefficients.tables import default_tables
from fetp_aid.models.configuration import PreferenceModel


def _make_config(**overrides):
    defaults = dict(
        program="intermediate",
        preference_model="average",
        career="certificate",
        mentorship="high",
        delivery="blended",
        response="30",
        cohort_size=20,
        cost_per_trainee=250_000,
        include_opportunity_cost=False,
    )
    defaults.update(overrides)
    return resolve_config(defaults)


# --- Worked example ---


def test_reference_scenario_utilities():
    choice = compute_choice(_make_config())
    # 0.168 + 0.220 + 0.640 - 0.005 * 250
    assert choice.utility_enroll == pytest.approx(-0.222)
    assert choice.utility_opt_out == pytest.approx(-0.601)


def test_reference_scenario_uptake():
    choice = compute_choice(_make_config())
    expected = math.exp(-0.222) / (math.exp(-0.222) + math.exp(-0.601))
    assert choice.uptake_prob == pytest.approx(expected, rel=1e-12)
    assert choice.uptake_prob == pytest.approx(0.5938, abs=1e-3)


def test_opt_out_is_complement():
    choice = compute_choice(_make_config())
    assert choice.uptake_prob + choice.opt_out_prob == pytest.approx(1.0)


# --- Logistic ---


def test_logistic_midpoint():
    assert logistic(0.0) == 0.5


def test_logistic_no_overflow_for_extremes():
    assert logistic(1000.0) == 1.0
    assert logistic(-1000.0) == 0.0


def test_logistic_nan_propagates():
    assert math.isnan(logistic(float("nan")))


def test_uptake_strictly_inside_unit_interval_for_extreme_utilities():
    tables = default_tables()[PreferenceModel.average]
    huge = tables.coefficients.model_copy(update={"asc_enroll": 5_000.0})
    tiny = tables.coefficients.model_copy(update={"asc_enroll": -5_000.0})
    config = _make_config()
    assert 0.0 < compute_choice(config, huge).uptake_prob < 1.0
    assert 0.0 < compute_choice(config, tiny).uptake_prob < 1.0


def test_infinite_utility_is_not_clamped():
    tables = default_tables()[PreferenceModel.average]
    corrupt = tables.coefficients.model_copy(update={"asc_enroll": float("inf")})
    choice = compute_choice(_make_config(), corrupt)
    assert choice.uptake_prob == 1.0
    assert choice.opt_out_prob == 0.0


def test_nan_utility_propagates_to_uptake():
    tables = default_tables()[PreferenceModel.average]
    corrupt = tables.coefficients.model_copy(update={"asc_opt_out": float("nan")})
    choice = compute_choice(_make_config(), corrupt)
    assert math.isnan(choice.uptake_prob)
    assert math.isnan(choice.opt_out_prob)


# --- Attribute effects ---


def test_higher_cost_lowers_uptake():
    cheap = compute_choice(_make_config(cost_per_trainee=100_000))
    dear = compute_choice(_make_config(cost_per_trainee=300_000))
    assert dear.uptake_prob < cheap.uptake_prob


def test_online_delivery_lowers_uptake():
    blended = compute_choice(_make_config(delivery="blended"))
    online = compute_choice(_make_config(delivery="online"))
    assert online.uptake_prob < blended.uptake_prob


def test_supporters_model_uses_its_own_coefficients():
    avg = compute_choice(_make_config(preference_model="average"))
    sup = compute_choice(_make_config(preference_model="supporters"))
    assert sup.utility_opt_out != avg.utility_opt_out
    assert sup.uptake_prob != avg.uptake_prob


def test_reference_levels_contribute_nothing():
    config = _make_config(program="frontline", career="certificate", mentorship="low",
                          delivery="blended", response="30", cost_per_trainee=200_000)
    coefs = default_tables()[PreferenceModel.average].coefficients
    choice = compute_choice(config)
    assert choice.utility_enroll == pytest.approx(coefs.asc_enroll + coefs.cost_per_thousand * 200)


def test_missing_level_fails_loudly():
    coefs = default_tables()[PreferenceModel.average].coefficients
    broken = coefs.model_copy(update={"delivery": {}})
    with pytest.raises(KeyError):
        compute_choice(_make_config(), broken)
