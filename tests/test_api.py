"""
HTTP adapter tests. Uses TestClient against the FastAPI app with the default
placeholder producers.
"""

import json

import pytest
from fastapi.testclient import TestClient

from app.main import app


@pytest.fixture(scope="module")
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_enrich_returns_200_with_envelope(client, event):
    response = client.post("/enrich", json=event)

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Data enrichment complete"
    assert len(data["enriched_data"]["trends"]) == 3
    assert data["followUpParse"]["goals"]["split"] == {"inStore": 60, "online": 40}


def test_enrich_with_empty_context_still_succeeds(client):
    response = client.post("/enrich", json={"body": json.dumps({"context": {}})})

    assert response.status_code == 200
    data = response.json()
    assert data["initialParse"]["data"] == {"confirmed": {}, "missing": [], "questions": []}
    assert data["followUpParse"]["historical"]["peakDates"] == {"full": "", "start": "", "end": ""}


def test_enrich_without_body_treats_payload_as_empty(client):
    response = client.post("/enrich", json={})

    assert response.status_code == 200


def test_enrich_with_malformed_body_returns_500(client):
    response = client.post("/enrich", json={"body": "{not json"})

    assert response.status_code == 500
    data = response.json()
    assert data["parsed_input"] == {}
    assert data["enriched_data"] == {}
    assert data["error"]


def test_openapi_documents_success_and_error_bodies(client):
    schema = client.get("/openapi.json").json()

    responses = schema["paths"]["/enrich"]["post"]["responses"]
    assert responses["200"]["content"]["application/json"]["schema"]["$ref"].endswith("/EnrichResponse")
    assert responses["500"]["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorResponse")
