"""WTP-based benefit aggregation for one cohort.

Benefit is expected value: only the share of trainees predicted to enroll
(uptake_prob) generates benefit.
"""
from __future__ import annotations

from fetp_aid.choice.choice_model import attribute_sum
from fetp_aid.coefficients.registry import CoefficientRegistry
from fetp_aid.models.coefficients import WTPSet
from fetp_aid.models.configuration import Configuration
from fetp_aid.models.evaluation import BenefitResult


def compute_benefits(
    config: Configuration,
    uptake_prob: float,
    wtp: WTPSet | None = None,
) -> BenefitResult:
    """Monetise the configuration's WTP over one cohort.

    per_trainee_benefit_per_month = sum(WTP thousands) * 1000
    total_benefit = per_trainee_benefit_per_month * cohort_size * months * uptake
    """
    if wtp is None:
        wtp = CoefficientRegistry.get().tables_for(config.preference_model).wtp

    wtp_total_thousands = attribute_sum(wtp, config)
    per_trainee_per_month = wtp_total_thousands * 1000.0
    total_benefit = per_trainee_per_month * config.cohort_size * config.duration_months * uptake_prob

    return BenefitResult(
        wtp_total_thousands=wtp_total_thousands,
        per_trainee_benefit_per_month=per_trainee_per_month,
        total_benefit=total_benefit,
    )
