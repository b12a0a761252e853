"""Tests for CoefficientRegistry and the built-in tables."""
import json

import pytest

from fetp_aid.choice.choice_model import compute_choice
from fetp_aid.choice.resolver import resolve_config
from fetp_aid.coefficients.registry import BUILT_IN_VERSION, CoefficientRegistry
from fetp_aid.coefficients.tables import default_tables
from fetp_aid.models.coefficients import ATTRIBUTE_LEVELS, PreferenceTables, WTPSet
from fetp_aid.models.configuration import PreferenceModel

_REFERENCE_LEVELS = {
    "program": "frontline",
    "career": "certificate",
    "mentorship": "low",
    "delivery": "blended",
    "response": "30",
}


def _supporter_override(**coef_overrides) -> dict:
    tables = default_tables()[PreferenceModel.supporters]
    data = tables.model_dump(mode="json")
    data["coefficients"].update(coef_overrides)
    data["provisional"] = False
    return data


# --- Built-in tables ---


@pytest.mark.parametrize("model", list(PreferenceModel))
def test_reference_levels_are_zero(model):
    tables = default_tables()[model]
    for attribute, level in _REFERENCE_LEVELS.items():
        enum_cls = ATTRIBUTE_LEVELS[attribute]
        assert getattr(tables.coefficients, attribute)[enum_cls(level)] == 0.0
        assert getattr(tables.wtp, attribute)[enum_cls(level)] == 0.0


@pytest.mark.parametrize("model", list(PreferenceModel))
def test_cost_coefficient_negative(model):
    assert default_tables()[model].coefficients.cost_per_thousand < 0


def test_supporter_tables_marked_provisional():
    tables = default_tables()
    assert tables[PreferenceModel.supporters].provisional is True
    assert tables[PreferenceModel.average].provisional is False


def test_average_wtp_is_coefficient_ratio():
    tables = default_tables()[PreferenceModel.average]
    scale = abs(tables.coefficients.cost_per_thousand)
    for attribute in ATTRIBUTE_LEVELS:
        coefs = getattr(tables.coefficients, attribute)
        wtp = getattr(tables.wtp, attribute)
        for level, coef in coefs.items():
            assert wtp[level] == pytest.approx(coef / scale)


def test_table_missing_level_rejected():
    data = default_tables()[PreferenceModel.average].wtp.model_dump(mode="json")
    del data["delivery"]["online"]
    with pytest.raises(ValueError):
        WTPSet(**data)


# --- Registry loading ---


def test_registry_defaults_without_file():
    reg = CoefficientRegistry.get()
    reg.load("")
    assert reg.is_loaded
    assert reg.version == BUILT_IN_VERSION
    assert reg.source == "built-in"
    assert reg.get_status()["tables"]["supporters"]["provisional"] is True


def test_registry_not_loaded_status():
    assert CoefficientRegistry.get().get_status() == {"status": "not_loaded"}


def test_registry_handles_missing_file(tmp_path):
    reg = CoefficientRegistry.get()
    reg.load(tmp_path / "nonexistent.json")
    assert reg.is_loaded
    assert reg.source == "built-in"


def test_registry_loads_override(tmp_path):
    path = tmp_path / "coefficients.json"
    path.write_text(json.dumps({"version": "2025.1", "supporters": _supporter_override(asc_opt_out=-2.0)}))
    reg = CoefficientRegistry.get()
    reg.load(path)

    assert reg.version == "2025.1"
    sup = reg.tables_for(PreferenceModel.supporters)
    assert sup.coefficients.asc_opt_out == -2.0
    assert sup.provisional is False
    assert sup.source == str(path.resolve())
    # Average tables untouched
    assert reg.tables_for(PreferenceModel.average) == default_tables()[PreferenceModel.average]


def test_override_flows_into_choice_model(tmp_path):
    path = tmp_path / "coefficients.json"
    path.write_text(json.dumps({"supporters": _supporter_override(asc_opt_out=-2.0)}))
    CoefficientRegistry.get().load(path)
    choice = compute_choice(resolve_config({"preference_model": "supporters"}))
    assert choice.utility_opt_out == -2.0


def test_registry_keeps_builtins_on_invalid_json(tmp_path):
    path = tmp_path / "coefficients.json"
    path.write_text("{not json")
    reg = CoefficientRegistry.get()
    reg.load(path)
    assert reg.is_loaded
    assert reg.tables_for(PreferenceModel.supporters) == default_tables()[PreferenceModel.supporters]


def test_registry_keeps_builtins_on_incomplete_table(tmp_path):
    data = _supporter_override()
    del data["coefficients"]["mentorship"]["high"]
    path = tmp_path / "coefficients.json"
    path.write_text(json.dumps({"supporters": data}))
    reg = CoefficientRegistry.get()
    reg.load(path)
    assert reg.source == "built-in"
    assert reg.tables_for(PreferenceModel.supporters).provisional is True


def test_set_tables_swaps_one_model():
    reg = CoefficientRegistry.get()
    replacement = PreferenceTables(**_supporter_override(asc_enroll=1.0))
    reg.set_tables(PreferenceModel.supporters, replacement)
    assert reg.tables_for(PreferenceModel.supporters).coefficients.asc_enroll == 1.0


def test_reset_restores_builtins():
    reg = CoefficientRegistry.get()
    reg.set_tables(PreferenceModel.supporters, PreferenceTables(**_supporter_override(asc_enroll=1.0)))
    CoefficientRegistry.reset()
    assert CoefficientRegistry.get().tables_for(PreferenceModel.supporters).coefficients.asc_enroll == 0.512
