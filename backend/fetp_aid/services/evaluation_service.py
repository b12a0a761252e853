"""Scenario evaluation service.

Runs choice model -> benefits -> costs for one resolved configuration and
assembles the per-cohort EvaluationResult, recommendation and report.
"""
from __future__ import annotations

import logging

from fetp_aid.choice.benefits import compute_benefits
from fetp_aid.choice.choice_model import compute_choice
from fetp_aid.choice.costs import compute_cost, cost_breakdown
from fetp_aid.choice.recommendation import recommend
from fetp_aid.coefficients.registry import CoefficientRegistry
from fetp_aid.models.configuration import Configuration
from fetp_aid.models.evaluation import (
    BenefitResult,
    ChoiceResult,
    EvaluationReport,
    EvaluationResult,
)

logger = logging.getLogger(__name__)


def benefit_cost_ratio(total_benefit: float, total_cost: float) -> float:
    """BCR, or 0.0 when cost is not positive."""
    return total_benefit / total_cost if total_cost > 0 else 0.0


def _run(
    config: Configuration, uptake_override: float | None = None,
) -> tuple[ChoiceResult, BenefitResult, EvaluationResult]:
    choice = compute_choice(config)
    uptake = choice.uptake_prob if uptake_override is None else uptake_override
    benefits = compute_benefits(config, uptake)
    total_cost = compute_cost(config)
    total_benefit = benefits.total_benefit

    result = EvaluationResult(
        uptake_prob=uptake,
        total_benefit=total_benefit,
        total_cost=total_cost,
        net_benefit=total_benefit - total_cost,
        bcr=benefit_cost_ratio(total_benefit, total_cost),
    )
    logger.debug(
        "Evaluated %s/%s: uptake=%.4f bcr=%.4f",
        config.program.value, config.preference_model.value, result.uptake_prob, result.bcr,
    )
    return choice, benefits, result


def evaluate(config: Configuration, uptake_override: float | None = None) -> EvaluationResult:
    """Evaluate one cohort of a configuration.

    uptake_override replaces the modelled uptake in the benefit calculation
    (an assumed endorsement rate); cost is unaffected.
    """
    return _run(config, uptake_override)[2]


def build_report(config: Configuration) -> EvaluationReport:
    """Full evaluation report — choice detail, benefits, result, recommendation."""
    choice, benefits, result = _run(config)
    tables = CoefficientRegistry.get().tables_for(config.preference_model)

    return EvaluationReport(
        config=config,
        choice=choice,
        benefits=benefits,
        result=result,
        recommendation=recommend(result.uptake_prob, result.bcr),
        cost_breakdown=cost_breakdown(config),
        provisional_tables=tables.provisional,
    )
