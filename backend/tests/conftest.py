import pytest
from fastapi.testclient import TestClient

from fetp_aid.coefficients.registry import CoefficientRegistry
from fetp_aid.main import app
from fetp_aid.services.scenario_store import ScenarioStore


@pytest.fixture(autouse=True)
def _reset_registry():
    """Each test starts from the built-in coefficient tables."""
    CoefficientRegistry.reset()
    yield
    CoefficientRegistry.reset()


@pytest.fixture
def client():
    """TestClient with startup run and an empty scenario store."""
    app.state.scenario_store = ScenarioStore()
    with TestClient(app) as c:
        yield c
