"""In-memory scenario store.

Append-only, ordered list of saved scenarios for one session. Each saved
scenario owns copies of its configuration and result, so later edits to
live inputs never reach it.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone

import pandas as pd

from fetp_aid.choice.recommendation import recommend
from fetp_aid.models.configuration import Configuration
from fetp_aid.models.evaluation import EvaluationResult
from fetp_aid.models.scenario import SavedScenario, ScenarioComparison, ScenarioDelta

logger = logging.getLogger(__name__)

_RESULT_FIELDS = ("uptake_prob", "total_benefit", "total_cost", "net_benefit", "bcr")


class ScenarioNotFoundError(LookupError):
    """Raised when a scenario index is outside the store."""


class ScenarioStore:
    """Append-only scenario log with indexed access."""

    def __init__(self) -> None:
        self._scenarios: list[SavedScenario] = []

    def __len__(self) -> int:
        return len(self._scenarios)

    def save(
        self,
        config: Configuration,
        result: EvaluationResult,
        name: str | None = None,
    ) -> SavedScenario:
        """Store deep copies of config and result under a name.

        Blank names become 'Scenario N' where N is the new scenario's position.
        """
        index = len(self._scenarios)
        label = name.strip() if name and name.strip() else f"Scenario {index + 1}"
        scenario = SavedScenario(
            index=index,
            name=label,
            config=config.model_copy(deep=True),
            result=result.model_copy(deep=True),
            recommendation=recommend(result.uptake_prob, result.bcr),
            saved_at=datetime.now(timezone.utc),
        )
        self._scenarios.append(scenario)
        logger.info("Saved scenario %d %r", index, label)
        return scenario.model_copy(deep=True)

    def get(self, index: int) -> SavedScenario:
        if not 0 <= index < len(self._scenarios):
            raise ScenarioNotFoundError(f"Scenario {index} not found")
        return self._scenarios[index].model_copy(deep=True)

    def list_scenarios(self) -> list[SavedScenario]:
        return [s.model_copy(deep=True) for s in self._scenarios]

    def compare(self, left: int, right: int) -> ScenarioComparison:
        """Pairwise comparison; deltas are right minus left."""
        a = self.get(left)
        b = self.get(right)
        delta = ScenarioDelta(**{
            f: getattr(b.result, f) - getattr(a.result, f) for f in _RESULT_FIELDS
        })
        a_cfg = a.config.model_dump()
        b_cfg = b.config.model_dump()
        changed = [k for k in a_cfg if a_cfg[k] != b_cfg[k]]
        return ScenarioComparison(left=a, right=b, delta=delta, changed_fields=changed)

    def to_frame(self) -> pd.DataFrame:
        """One row per scenario: name, flattened config and result columns."""
        rows = []
        for s in self._scenarios:
            row = {"index": s.index, "name": s.name}
            row.update(s.config.model_dump(mode="json"))
            row.update(s.result.model_dump())
            row["recommendation"] = s.recommendation
            rows.append(row)
        columns = (
            ["index", "name"]
            + list(Configuration.model_fields)
            + list(_RESULT_FIELDS)
            + ["recommendation"]
        )
        return pd.DataFrame(rows, columns=columns)
