import importlib
import logging

import fetp_aid.main


def test_health_returns_200(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["coefficients"]["status"] == "loaded"


def test_coefficient_status_returns_200(client):
    response = client.get("/api/coefficients/status")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "loaded"
    for name in ("average", "supporters"):
        assert name in data["tables"]


def test_evaluate_no_body_returns_422(client):
    response = client.post("/api/evaluate")
    assert response.status_code == 422


def test_importing_app_leaves_logging_config_to_server(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda *a, **kw: calls.append(kw))
    importlib.reload(fetp_aid.main)
    assert calls == []
