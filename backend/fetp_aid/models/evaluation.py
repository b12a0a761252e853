from typing import Optional

from pydantic import BaseModel

from fetp_aid.models.configuration import Configuration


class ChoiceResult(BaseModel):
    """Binary logit outcome for enroll vs opt out."""
    utility_enroll: float
    utility_opt_out: float
    uptake_prob: float
    opt_out_prob: float


class BenefitResult(BaseModel):
    """WTP-based benefit for one cohort."""
    wtp_total_thousands: float
    per_trainee_benefit_per_month: float
    total_benefit: float


class EvaluationResult(BaseModel):
    """Per-cohort evaluation of a configuration."""
    uptake_prob: float
    total_benefit: float
    total_cost: float
    net_benefit: float
    bcr: float


class CostLine(BaseModel):
    id: str
    label: str
    direct_share: float
    amount: float


class CostBreakdown(BaseModel):
    """Programme cost of one cohort split across the tier's cost template."""
    template_id: str
    template_label: str
    programme_cost: float
    template_opp_rate: float
    components: list[CostLine]
    unallocated: float


class SensitivityPoint(BaseModel):
    label: str
    multiplier: float
    cost_per_trainee: float
    result: EvaluationResult
    # Set only when epidemiological assumptions are supplied
    epi_benefit: Optional[float] = None
    combined_bcr: Optional[float] = None


class EvaluationReport(BaseModel):
    """Everything computed for one configuration, for display collaborators."""
    config: Configuration
    choice: ChoiceResult
    benefits: BenefitResult
    result: EvaluationResult
    recommendation: str
    cost_breakdown: Optional[CostBreakdown] = None
    provisional_tables: bool = False
