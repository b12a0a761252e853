import json

from fastapi import APIRouter, Depends, HTTPException, Query

from fetp_aid.api.deps import get_scenario_store
from fetp_aid.choice.resolver import resolve_config
from fetp_aid.models.scenario import SavedScenario, SaveScenarioRequest, ScenarioComparison
from fetp_aid.services.evaluation_service import evaluate
from fetp_aid.services.scenario_store import ScenarioNotFoundError, ScenarioStore

router = APIRouter(tags=["scenarios"])


@router.get("/scenarios", response_model=list[SavedScenario])
def list_scenarios(store: ScenarioStore = Depends(get_scenario_store)):
    return store.list_scenarios()


@router.get("/scenarios/table")
def scenarios_table(store: ScenarioStore = Depends(get_scenario_store)):
    """Flat tabular listing of saved scenarios."""
    df = store.to_frame()
    return {
        "columns": list(df.columns),
        "rows": json.loads(df.to_json(orient="records")),
        "count": len(df),
    }


@router.post("/scenarios", response_model=SavedScenario)
def save_scenario(request: SaveScenarioRequest, store: ScenarioStore = Depends(get_scenario_store)):
    """Evaluate the given inputs and save a snapshot of config and result."""
    config = resolve_config(request.config)
    return store.save(config, evaluate(config), request.name)


@router.get("/scenarios/compare", response_model=ScenarioComparison)
def compare_scenarios(
    left: int = Query(..., ge=0),
    right: int = Query(..., ge=0),
    store: ScenarioStore = Depends(get_scenario_store),
):
    try:
        return store.compare(left, right)
    except ScenarioNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/scenarios/{index}", response_model=SavedScenario)
def get_scenario(index: int, store: ScenarioStore = Depends(get_scenario_store)):
    try:
        return store.get(index)
    except ScenarioNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
