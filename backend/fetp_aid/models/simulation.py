from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from fetp_aid.models.configuration import Configuration, RawConfigInput
from fetp_aid.models.evaluation import EvaluationResult


class SimulationAssumptions(BaseModel):
    """Per-unit epidemiological value assumptions for national scale-up.

    Fields are loosely typed; non-finite values fall back to the defaults
    when the simulation runs. The defaults leave the basic scale-up
    unchanged: every enrolled trainee completes, response speed does not
    scale outbreaks, and outbreak value is counted over one undiscounted year.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    fellows_per_district: Optional[Any] = 1.0
    value_per_graduate: Optional[Any] = 0.0
    outbreaks_per_100_graduates: Optional[Any] = 0.0
    value_per_outbreak: Optional[Any] = 0.0
    completion_rate: Optional[Any] = 1.0
    apply_response_multiplier: Optional[Any] = False
    planning_horizon_years: Optional[Any] = 1.0
    epi_discount_rate: Optional[Any] = 0.0


class SimulationRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    config: RawConfigInput = Field(default_factory=RawConfigInput)
    num_cohorts: Optional[Any] = None
    assumptions: SimulationAssumptions = Field(default_factory=SimulationAssumptions)


class SimulationResult(BaseModel):
    """National scale-up of a per-cohort result.

    epi_benefit_total is a separate valuation channel and is never folded
    into total_benefit or total_net. The combined_* fields add the two
    channels for display next to the DCE-only figures.
    """
    config: Configuration
    per_cohort: EvaluationResult
    num_cohorts: int
    total_cost: float
    total_benefit: float
    total_net: float
    effective_graduates: float
    district_coverage: float
    outbreaks_averted: float
    response_multiplier: float
    present_value_factor: float
    graduate_benefit_total: float
    outbreak_benefit_pv: float
    epi_benefit_total: float
    epi_bcr: float
    combined_benefit: float
    combined_net: float
    combined_bcr: float
    fellows_per_district: float
    value_per_graduate: float
    outbreaks_per_100_graduates: float
    value_per_outbreak: float
    completion_rate: float
    apply_response_multiplier: bool
    planning_horizon_years: float
    epi_discount_rate: float


class SensitivityRequest(BaseModel):
    """Cost sensitivity with an optional endorsement override and epi channel."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    config: RawConfigInput = Field(default_factory=RawConfigInput)
    endorsement_override: Optional[Any] = None
    assumptions: Optional[SimulationAssumptions] = None
