from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from fetp_aid.models.configuration import Configuration, RawConfigInput
from fetp_aid.models.evaluation import EvaluationResult


class SaveScenarioRequest(BaseModel):
    """Request body for saving a scenario. Blank names get 'Scenario N'."""
    name: Optional[str] = None
    config: RawConfigInput = Field(default_factory=RawConfigInput)


class SavedScenario(BaseModel):
    index: int
    name: str
    config: Configuration
    result: EvaluationResult
    recommendation: str
    saved_at: datetime


class ScenarioDelta(BaseModel):
    """right minus left, per result field."""
    uptake_prob: float
    total_benefit: float
    total_cost: float
    net_benefit: float
    bcr: float


class ScenarioComparison(BaseModel):
    left: SavedScenario
    right: SavedScenario
    delta: ScenarioDelta
    changed_fields: list[str]
