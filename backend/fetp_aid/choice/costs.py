"""Programme cost for one cohort.

Costs are incurred for the planned cohort regardless of predicted uptake.
"""
from __future__ import annotations

from fetp_aid.coefficients.cost_templates import get_cost_template
from fetp_aid.models.configuration import Configuration
from fetp_aid.models.evaluation import CostBreakdown, CostLine

OPPORTUNITY_COST_MULTIPLIER = 1.2  # flat 20% loading for foregone productivity


def programme_cost(config: Configuration) -> float:
    """Direct cost: cost_per_trainee * cohort_size * duration_months."""
    return config.cost_per_trainee * config.cohort_size * config.duration_months


def compute_cost(config: Configuration) -> float:
    cost = programme_cost(config)
    if config.include_opportunity_cost:
        cost *= OPPORTUNITY_COST_MULTIPLIER
    return cost


def cost_breakdown(config: Configuration) -> CostBreakdown:
    """Split the direct cost of one cohort across the tier's cost template."""
    template = get_cost_template(config.program)
    direct = programme_cost(config)

    lines = [
        CostLine(
            id=c.id,
            label=c.label,
            direct_share=c.direct_share,
            amount=direct * c.direct_share,
        )
        for c in template.components
    ]
    allocated = sum(line.amount for line in lines)

    return CostBreakdown(
        template_id=template.id,
        template_label=template.label,
        programme_cost=direct,
        template_opp_rate=template.opp_rate,
        components=lines,
        unallocated=direct - allocated,
    )
