from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ProgramTier(str, Enum):
    """FETP tier; determines programme duration."""
    frontline = "frontline"
    intermediate = "intermediate"
    advanced = "advanced"


class PreferenceModel(str, Enum):
    """Which coefficient/WTP set drives the evaluation."""
    average = "average"        # Mixed logit, full sample
    supporters = "supporters"  # Supportive latent class (provisional tables)


class CareerIncentive(str, Enum):
    certificate = "certificate"
    uni = "uni"
    govpath = "govpath"


class MentorshipLevel(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class DeliveryMode(str, Enum):
    blended = "blended"
    inperson = "inperson"
    online = "online"


class ResponseTime(str, Enum):
    """Outbreak response speed in days."""
    days_30 = "30"
    days_15 = "15"
    days_7 = "7"


class RawConfigInput(BaseModel):
    """Unvalidated configuration fields as supplied by a form, CLI or API caller.

    Every field is optional and loosely typed; resolve_config() maps any
    combination of values onto a valid Configuration. Keys may be given in
    snake_case or camelCase (costPerTrainee, cohortSize, ...).
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    program: Optional[Any] = None
    preference_model: Optional[Any] = None
    career: Optional[Any] = None
    mentorship: Optional[Any] = None
    delivery: Optional[Any] = None
    response: Optional[Any] = None
    cohort_size: Optional[Any] = None
    cost_per_trainee: Optional[Any] = None
    include_opportunity_cost: Optional[Any] = None


class Configuration(BaseModel):
    """Resolved programme configuration. Immutable."""
    program: ProgramTier
    preference_model: PreferenceModel
    career: CareerIncentive
    mentorship: MentorshipLevel
    delivery: DeliveryMode
    response: ResponseTime
    cohort_size: int
    cost_per_trainee: float
    include_opportunity_cost: bool
    duration_months: int

    model_config = {"frozen": True}
