"""Tests for the FastAPI application."""

from __future__ import annotations

import json
from typing import Any

import pytest
from fastapi.testclient import TestClient

from billmatch.api.app import create_app
from billmatch.core.config import AppSettings, MatchingConfig
from billmatch.core.exceptions import DeploymentNotFoundError, ModelAuthenticationError
from tests.fakes import MockModelProvider

CREATORS_CSV = "user_id,name,Approved\n101,alice,Yes\n102,bob,No\n103,carol,Yes\n"


class FailingModelProvider:
    def __init__(self, exc: Exception) -> None:
        self._exc = exc

    def chat(self, messages: list[dict[str, str]], **kwargs: Any) -> str:
        raise self._exc

    def structured_output(self, messages, response_model, **kwargs):
        raise self._exc


@pytest.fixture
def model() -> MockModelProvider:
    return MockModelProvider()


@pytest.fixture
def client(model):
    with TestClient(create_app(settings=AppSettings(), model=model)) as test_client:
        yield test_client


@pytest.fixture
def tables_payload(creators_table) -> list[dict[str, Any]]:
    return [creators_table.model_dump(mode="json")]


class TestHealth:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_ready_reports_services(self, client):
        body = client.get("/ready").json()
        assert body["status"] == "ready"
        assert body["services"][0]["model_provider"] == "MockModelProvider"

    def test_default_app_uses_mock_provider(self):
        with TestClient(create_app()) as test_client:
            body = test_client.get("/ready").json()
        assert body["services"][0]["model_provider"] == "MockModelProvider"


class TestTablesAndFingerprints:
    def test_parse_table(self, client):
        resp = client.post("/tables", json={"filename": "creators.csv", "content": CREATORS_CSV})
        assert resp.status_code == 200
        body = resp.json()
        assert body["totalRows"] == 3
        assert body["columnFingerprints"][2]["dataType"] == "boolean"

    def test_parse_table_preview_uses_settings(self, model):
        settings = AppSettings(matching=MatchingConfig(preview_rows=2))
        with TestClient(create_app(settings=settings, model=model)) as test_client:
            body = test_client.post(
                "/tables", json={"filename": "creators.csv", "content": CREATORS_CSV}
            ).json()
        assert body["sampleRows"] == [["101", "alice", "Yes"], ["102", "bob", "No"]]
        assert body["totalRows"] == 3

    def test_parse_empty_table(self, client):
        resp = client.post("/tables", json={"filename": "empty.csv", "content": "a,b\n"})
        assert resp.status_code == 400
        assert "empty" in resp.json()["detail"]["details"]

    def test_create_fingerprint(self, client):
        resp = client.post("/fingerprints", json={
            "name": "notes", "position": 0, "values": ["a", "", "  ", None, "b"],
        })
        assert resp.status_code == 200
        body = resp.json()
        assert body["nullCount"] == 3
        assert body["uniqueValues"] == 2
        assert len(body["id"]) == 16

    def test_verify_fingerprint(self, client):
        fingerprint = client.post("/fingerprints", json={
            "name": "Approved", "position": 2, "values": ["Yes", "No"],
        }).json()
        assert client.post("/fingerprints/verify", json=fingerprint).json() == {"valid": True}
        fingerprint["position"] = 3
        assert client.post("/fingerprints/verify", json=fingerprint).json() == {"valid": False}

    def test_match(self, client, tables_payload):
        target = {
            "id": "0000000000000000", "name": "approved", "position": 2,
            "dataType": "boolean", "sampleValues": ["yes", "no"],
            "uniqueValues": 2, "nullCount": 0,
        }
        resp = client.post("/match", json={"target": target, "tables": tables_payload})
        assert resp.status_code == 200
        body = resp.json()
        assert body["match"]["filename"] == "creators.csv"
        assert body["match"]["column"] == "Approved"
        assert body["match"]["matchScore"] >= 0.7
        assert len(body["ranking"]) == 3

    def test_match_without_tables(self, client):
        target = {"id": "x", "name": "approved", "position": 0}
        body = client.post("/match", json={"target": target}).json()
        assert body == {"match": None, "ranking": []}


class TestAnalyze:
    def test_analyze_returns_top_candidate(self, client, model, tables_payload):
        model.set_response("billing approved", json.dumps({"candidates": [
            {"filename": "creators.csv", "column": "Approved", "confidence": 0.92, "reasoning": "yes/no"},
        ]}))
        resp = client.post("/analyze", json={"tables": tables_payload})
        assert resp.status_code == 200
        body = resp.json()
        assert body["hasHighConfidenceCandidates"] is True
        assert body["topCandidate"]["column"] == "Approved"
        assert body["topCandidate"]["columnId"] == body["topCandidate"]["fingerprint"]["id"]

    def test_analyze_without_tables(self, client):
        resp = client.post("/analyze", json={"tables": []})
        assert resp.status_code == 400
        assert resp.json()["detail"]["details"] == "No CSV data provided"

    @pytest.mark.parametrize("exc,status", [
        (DeploymentNotFoundError("missing"), 400),
        (ModelAuthenticationError("bad key"), 401),
    ])
    def test_provider_errors(self, exc, status, tables_payload):
        app = create_app(settings=AppSettings(), model=FailingModelProvider(exc))
        with TestClient(app) as test_client:
            resp = test_client.post("/analyze", json={"tables": tables_payload})
        assert resp.status_code == status
        assert "error" in resp.json()["detail"]


class TestMappings:
    def test_confirm(self, client, tables_payload):
        resp = client.post("/mappings/confirm", json={
            "candidate": {"filename": "creators.csv", "column": "Approved", "confidence": 0.9},
            "tables": tables_payload,
        })
        assert resp.status_code == 200
        body = resp.json()
        assert body["fingerprint"]["position"] == 2
        assert "timestamp" in body

    def test_manual_selection(self, client, tables_payload):
        resp = client.post("/mappings/manual", json={
            "filename": "creators.csv", "column": "name", "tables": tables_payload,
        })
        assert resp.status_code == 200
        assert resp.json()["confidence"] == 1.0

    def test_manual_selection_unknown_column(self, client, tables_payload):
        resp = client.post("/mappings/manual", json={
            "filename": "creators.csv", "column": "ghost", "tables": tables_payload,
        })
        assert resp.status_code == 404

    def test_relocate(self, client, tables_payload):
        mapping = client.post("/mappings/manual", json={
            "filename": "creators.csv", "column": "Approved", "tables": tables_payload,
        }).json()
        resp = client.post("/mappings/relocate", json={"mapping": mapping, "tables": tables_payload})
        assert resp.status_code == 200
        assert resp.json()["match"]["column"] == "Approved"
