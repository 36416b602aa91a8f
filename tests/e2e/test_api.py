from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.main import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


def test_healthz(client):
    assert client.get("/healthz").json() == {"status": "ok"}


def test_chat_returns_single_execution(client, no_delay):
    response = client.post("/api/chat", json={"question": "보험료 통계 알려줘"})
    assert response.status_code == 200
    body = response.json()
    assert body["question"] == "보험료 통계 알려줘"
    assert body["parallelExecution"] is False
    assert "executions" not in body
    execution = body["execution"]
    assert execution["functionSelection"]["selectedFunction"] == "getProductPremiumStatistics"
    assert execution["executionPath"] == {
        "functionUsed": "getProductPremiumStatistics",
        "category": "precomputed_statistics",
        "resultCount": 2,
    }
    assert "32,500원" in execution["response"]
    assert body["timestamp"]


def test_chat_parallel_mode(client, no_delay):
    response = client.post("/api/chat", json={"question": "리스크 지표", "executeInParallel": True})
    body = response.json()
    assert body["parallelExecution"] is True
    assert len(body["executions"]) == 2
    assert "execution" not in body


@pytest.mark.parametrize("payload", [{}, {"question": None}, {"question": ""}, {"question": "   "}])
def test_chat_requires_question(client, payload):
    response = client.post("/api/chat", json=payload)
    assert response.status_code == 400
    assert response.json()["detail"] == "Question is required"


def test_chat_failure_maps_to_500(client, monkeypatch):
    def boom(*_args, **_kwargs):
        raise RuntimeError("registry drift")

    monkeypatch.setattr("app.routes.chat.chat", boom)
    response = client.post("/api/chat", json={"question": "보험료 통계"})
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to process chat request"


def test_functions_listing(client):
    functions = client.get("/api/functions").json()["functions"]
    assert len(functions) == 10
    assert functions[0]["name"] == "findProductsByAssumption"
    assert functions[0]["category"] == "explicit_memory"
    assert functions[0]["description"]


def test_retrieve_executes_named_function(client):
    response = client.post(
        "/api/retrieve",
        json={"function": "getYearlyStatistics", "parameters": {"year": "2023"}},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["functionUsed"] == "getYearlyStatistics"
    assert body["results"][0]["statistics"]["totalNewContracts"] == 18510


def test_retrieve_unknown_function_is_404(client):
    response = client.post("/api/retrieve", json={"function": "getWeather"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Function getWeather not found"


def test_test_scenarios(client):
    scenarios = client.get("/api/test-scenarios").json()["scenarios"]
    assert [s["id"] for s in scenarios] == ["A", "B"]
    assert scenarios[1]["expectedCategory"] == "precomputed_statistics"
