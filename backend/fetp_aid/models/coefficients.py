"""Pydantic models for choice-model coefficient and WTP tables."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, model_validator

from fetp_aid.models.configuration import (
    CareerIncentive,
    DeliveryMode,
    MentorshipLevel,
    ProgramTier,
    ResponseTime,
)

ATTRIBUTE_LEVELS: dict[str, type[Enum]] = {
    "program": ProgramTier,
    "career": CareerIncentive,
    "mentorship": MentorshipLevel,
    "delivery": DeliveryMode,
    "response": ResponseTime,
}


def _check_levels(table: BaseModel) -> None:
    """Every attribute map must cover every level of its enum."""
    for attribute, levels in ATTRIBUTE_LEVELS.items():
        mapping = getattr(table, attribute)
        missing = [level.value for level in levels if level not in mapping]
        if missing:
            raise ValueError(f"{attribute} table missing levels: {missing}")


class AttributeTable(BaseModel):
    """Per-attribute values keyed by level. Reference levels carry 0.0."""
    program: dict[ProgramTier, float]
    career: dict[CareerIncentive, float]
    mentorship: dict[MentorshipLevel, float]
    delivery: dict[DeliveryMode, float]
    response: dict[ResponseTime, float]

    @model_validator(mode="after")
    def check_all_levels(self):
        _check_levels(self)
        return self


class CoefficientSet(AttributeTable):
    """Utility coefficients for the 'enroll' alternative."""
    asc_enroll: float
    asc_opt_out: float
    cost_per_thousand: float  # utility per 1,000 currency units per trainee per month


class WTPSet(AttributeTable):
    """Willingness to pay, thousands per trainee per month."""


class PreferenceTables(BaseModel):
    """Coefficients and WTP for one preference model."""
    coefficients: CoefficientSet
    wtp: WTPSet
    provisional: bool = False
    source: str = "built-in"


class CostComponent(BaseModel):
    id: str
    label: str
    direct_share: float


class CostTemplate(BaseModel):
    """Combined cost structure for one programme tier."""
    id: str
    label: str
    description: Optional[str] = None
    opp_rate: float
    components: list[CostComponent]
