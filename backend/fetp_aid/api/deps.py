from fastapi import Request

from fetp_aid.services.scenario_store import ScenarioStore


def get_scenario_store(request: Request) -> ScenarioStore:
    """FastAPI dependency returning the application's scenario store."""
    return request.app.state.scenario_store
