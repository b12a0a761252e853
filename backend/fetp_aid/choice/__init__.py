"""Choice model core — config resolution, logit uptake, benefits, costs."""
from fetp_aid.choice.resolver import resolve_config
from fetp_aid.choice.choice_model import compute_choice
from fetp_aid.choice.benefits import compute_benefits
from fetp_aid.choice.costs import compute_cost, cost_breakdown
from fetp_aid.choice.recommendation import recommend

__all__ = [
    "resolve_config",
    "compute_choice",
    "compute_benefits",
    "compute_cost",
    "cost_breakdown",
    "recommend",
]
