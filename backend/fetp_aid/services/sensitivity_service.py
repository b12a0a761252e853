"""Cost sensitivity — re-evaluate at -20%, base and +20% cost per trainee."""
from __future__ import annotations

from typing import Any

from fetp_aid.choice.resolver import COST_MAX, COST_MIN, as_finite_float, clamp
from fetp_aid.models.configuration import Configuration
from fetp_aid.models.evaluation import EvaluationResult, SensitivityPoint
from fetp_aid.models.simulation import SimulationAssumptions
from fetp_aid.services.evaluation_service import benefit_cost_ratio, evaluate
from fetp_aid.services.national_simulation import simulate

COST_MULTIPLIERS: list[tuple[str, float]] = [
    ("-20%", 0.8),
    ("base", 1.0),
    ("+20%", 1.2),
]


def resolve_endorsement_override(value: Any) -> float | None:
    """Endorsement probability clamped to [0, 1]; None when not finite."""
    p = as_finite_float(value)
    return None if p is None else clamp(p, 0.0, 1.0)


def sensitivity_points(
    config: Configuration,
    endorsement_override: Any = None,
    assumptions: SimulationAssumptions | None = None,
) -> list[SensitivityPoint]:
    """Evaluate the configuration at each cost multiplier, in fixed order.

    Perturbed costs are re-clamped to the allowed cost range; all other
    attributes are held fixed. An endorsement override replaces the
    modelled uptake in the benefit. With assumptions, each point also
    carries the per-cohort epidemiological benefit and the combined
    (WTP + epi) BCR; the DCE-only result is left as is.
    """
    override = resolve_endorsement_override(endorsement_override)
    points = []
    for label, multiplier in COST_MULTIPLIERS:
        cost = clamp(config.cost_per_trainee * multiplier, COST_MIN, COST_MAX)
        perturbed = config.model_copy(update={"cost_per_trainee": cost})
        result = evaluate(perturbed, override)
        epi = combined = None
        if assumptions is not None:
            epi = simulate(perturbed, result, 1, assumptions).epi_benefit_total
            combined = benefit_cost_ratio(result.total_benefit + epi, result.total_cost)
        points.append(SensitivityPoint(
            label=label,
            multiplier=multiplier,
            cost_per_trainee=cost,
            result=result,
            epi_benefit=epi,
            combined_bcr=combined,
        ))
    return points


def sensitivity(config: Configuration) -> list[EvaluationResult]:
    """Three aligned results: -20%, base, +20%."""
    return [p.result for p in sensitivity_points(config)]
