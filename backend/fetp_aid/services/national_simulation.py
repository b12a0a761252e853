"""National scale-up simulation.

Extrapolates a per-cohort result linearly across many cohorts and estimates
downstream epidemiological benefits (graduates, district coverage,
outbreaks averted). The epidemiological benefit is a separate channel:
it is reported next to, never added into, the WTP-based benefit.

    graduates  = cohorts x cohort_size x completion_rate x uptake
    outbreaks  = graduates / 100 x outbreaks_per_100 x response_multiplier
    epi value  = graduates x value_per_graduate
                 + outbreaks x value_per_outbreak x PV(rate, horizon)
"""
from __future__ import annotations

import logging
from typing import Any

from fetp_aid.choice.resolver import as_bool, as_finite_float, clamp
from fetp_aid.models.configuration import Configuration, ResponseTime
from fetp_aid.models.evaluation import EvaluationResult
from fetp_aid.models.simulation import SimulationAssumptions, SimulationResult
from fetp_aid.services.evaluation_service import benefit_cost_ratio

logger = logging.getLogger(__name__)

DEFAULT_NUM_COHORTS = 50

# Faster outbreak response scales the outbreaks each graduate helps avert
RESPONSE_TIME_MULTIPLIERS: dict[ResponseTime, float] = {
    ResponseTime.days_30: 1.0,
    ResponseTime.days_15: 1.2,
    ResponseTime.days_7: 1.5,
}

_ASSUMPTION_DEFAULTS: dict[str, float] = {
    "fellows_per_district": 1.0,
    "value_per_graduate": 0.0,
    "outbreaks_per_100_graduates": 0.0,
    "value_per_outbreak": 0.0,
    "completion_rate": 1.0,
    "planning_horizon_years": 1.0,
    "epi_discount_rate": 0.0,
}


def resolve_num_cohorts(value: Any) -> int:
    n = as_finite_float(value)
    if n is None or int(n) <= 0:
        return DEFAULT_NUM_COHORTS
    return int(n)


def resolve_assumptions(assumptions: SimulationAssumptions | None) -> dict[str, Any]:
    """Finite assumption values, falling back to the neutral defaults."""
    raw = assumptions.model_dump() if assumptions is not None else {}
    resolved: dict[str, Any] = {}
    for name, default in _ASSUMPTION_DEFAULTS.items():
        value = as_finite_float(raw.get(name))
        resolved[name] = default if value is None else value
    resolved["completion_rate"] = clamp(resolved["completion_rate"], 0.0, 1.0)
    resolved["apply_response_multiplier"] = as_bool(raw.get("apply_response_multiplier"))
    return resolved


def present_value_factor(rate: float, years: float) -> float:
    """Annuity factor for a constant annual amount over `years`.

    0 for a non-positive horizon; `years` when the rate is not positive.
    """
    if years <= 0:
        return 0.0
    if rate <= 0:
        return years
    return (1.0 - (1.0 + rate) ** -years) / rate


def simulate(
    config: Configuration,
    result: EvaluationResult,
    num_cohorts: Any = None,
    assumptions: SimulationAssumptions | None = None,
) -> SimulationResult:
    """Scale a per-cohort evaluation to num_cohorts and add epi outcomes."""
    n = resolve_num_cohorts(num_cohorts)
    a = resolve_assumptions(assumptions)

    effective_graduates = n * config.cohort_size * a["completion_rate"] * result.uptake_prob
    fellows = a["fellows_per_district"]
    district_coverage = effective_graduates / fellows if fellows > 0 else 0.0

    response_multiplier = (
        RESPONSE_TIME_MULTIPLIERS[config.response] if a["apply_response_multiplier"] else 1.0
    )
    outbreaks_averted = (
        (effective_graduates / 100.0) * a["outbreaks_per_100_graduates"] * response_multiplier
    )
    pv_factor = present_value_factor(a["epi_discount_rate"], a["planning_horizon_years"])

    graduate_benefit_total = effective_graduates * a["value_per_graduate"]
    outbreak_benefit_pv = outbreaks_averted * a["value_per_outbreak"] * pv_factor
    epi_benefit_total = graduate_benefit_total + outbreak_benefit_pv

    total_cost = result.total_cost * n
    total_benefit = result.total_benefit * n
    combined_benefit = total_benefit + epi_benefit_total

    logger.debug(
        "Simulated %d cohorts: graduates=%.1f epi=%.0f", n, effective_graduates, epi_benefit_total,
    )

    return SimulationResult(
        config=config,
        per_cohort=result,
        num_cohorts=n,
        total_cost=total_cost,
        total_benefit=total_benefit,
        total_net=result.net_benefit * n,
        effective_graduates=effective_graduates,
        district_coverage=district_coverage,
        outbreaks_averted=outbreaks_averted,
        response_multiplier=response_multiplier,
        present_value_factor=pv_factor,
        graduate_benefit_total=graduate_benefit_total,
        outbreak_benefit_pv=outbreak_benefit_pv,
        epi_benefit_total=epi_benefit_total,
        epi_bcr=benefit_cost_ratio(epi_benefit_total, total_cost),
        combined_benefit=combined_benefit,
        combined_net=combined_benefit - total_cost,
        combined_bcr=benefit_cost_ratio(combined_benefit, total_cost),
        **a,
    )
