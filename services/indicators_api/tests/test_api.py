"""
API integration tests for ingest and query endpoints.
"""

import pytest

from services.indicators_api.api import get_store
from services.indicators_api.main import app
from fastapi.testclient import TestClient


INDICATORS_URL = "/api/v1/indicadores"
INGEST_URL = "/dados/sgs"


class TestIngest:
    def test_ingest_ok(self, client, store, sample_payload):
        resp = client.post(INGEST_URL, json=sample_payload)
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "series_updated": 2, "observations": 5}
        assert store.series_count == 2

    def test_ingest_replaces_series(self, client, store, sample_payload):
        client.post(INGEST_URL, json=sample_payload)
        resp = client.post(INGEST_URL, json={"433": [{"data": "01/07/2024", "valor": "4.00"}]})
        assert resp.status_code == 200
        assert [o.value for o in store.get_series("433")] == ["4.00"]
        assert len(store.get_series("1178")) == 2

    def test_empty_series_accepted(self, client, store):
        resp = client.post(INGEST_URL, json={"433": []})
        assert resp.status_code == 200
        assert store.series_count == 1

    def test_null_series_stored_empty(self, client, store, sample_payload):
        client.post(INGEST_URL, json=sample_payload)
        resp = client.post(INGEST_URL, content=b'{"433": null}', headers={"Content-Type": "application/json"})
        assert resp.status_code == 200
        assert store.get_series("433") == []
        assert len(store.get_series("1178")) == 2

    def test_null_body_is_noop(self, client, store, sample_payload):
        client.post(INGEST_URL, json=sample_payload)
        resp = client.post(INGEST_URL, content=b"null", headers={"Content-Type": "application/json"})
        assert resp.status_code == 200
        assert resp.json()["series_updated"] == 0
        assert store.series_count == 2

    def test_missing_valor_stored_as_empty(self, client, store):
        resp = client.post(INGEST_URL, json={"433": [{"data": "01/01/2024"}]})
        assert resp.status_code == 200
        assert store.get_series("433")[0].value == ""

    @pytest.mark.parametrize("body", [
        b"not json",
        b"[1, 2, 3]",
        b'{"433": [{"data": "01/01/2024", "valor": 5.25}]}',
        b'{"433": "01/01/2024"}',
    ])
    def test_malformed_payload_rejected(self, client, store, body):
        resp = client.post(INGEST_URL, content=body, headers={"Content-Type": "application/json"})
        assert resp.status_code == 400
        assert store.is_empty()

    def test_malformed_payload_applies_nothing(self, client, store):
        body = {
            "1": [{"data": "01/01/2024", "valor": "5.00"}],
            "433": [{"data": "01/01/2024", "valor": 1}],
        }
        resp = client.post(INGEST_URL, json=body)
        assert resp.status_code == 400
        assert store.is_empty()

    def test_get_not_allowed(self, client):
        assert client.get(INGEST_URL).status_code == 405


class TestQuery:
    def test_empty_store_404(self, client):
        resp = client.get(INDICATORS_URL)
        assert resp.status_code == 404

    def test_invalid_start(self, client, sample_payload):
        client.post(INGEST_URL, json=sample_payload)
        resp = client.get(INDICATORS_URL, params={"dataInicial": "2024-01-01"})
        assert resp.status_code == 400
        assert "dataInicial" in resp.json()["detail"]

    def test_invalid_end_checked_before_empty_store(self, client):
        resp = client.get(INDICATORS_URL, params={"dataFinal": "31-12-2024"})
        assert resp.status_code == 400

    def test_range_example(self, client, sample_payload):
        client.post(INGEST_URL, json=sample_payload)
        resp = client.get(INDICATORS_URL, params={"dataInicial": "01/01/2024", "dataFinal": "31/12/2024"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["433"] == [
            {"data": "01/01/2024", "valor": "5.25"},
            {"data": "15/06/2024", "valor": "5.50"},
        ]

    def test_no_match_is_empty_object(self, client):
        client.post(INGEST_URL, json={"433": [
            {"data": "01/01/2024", "valor": "5.25"},
            {"data": "15/06/2024", "valor": "5.50"},
        ]})
        resp = client.get(INDICATORS_URL, params={"dataInicial": "16/06/2024", "dataFinal": "31/12/2024"})
        assert resp.status_code == 200
        assert resp.json() == {}

    def test_open_bounds_return_everything_parseable(self, client, sample_payload):
        sample_payload["broken"] = [{"data": "??", "valor": "1"}]
        client.post(INGEST_URL, json=sample_payload)
        resp = client.get(INDICATORS_URL)
        assert resp.status_code == 200
        assert set(resp.json()) == {"433", "1178"}

    def test_blank_params_are_open(self, client, sample_payload):
        client.post(INGEST_URL, json=sample_payload)
        resp = client.get(INDICATORS_URL, params={"dataInicial": "", "dataFinal": ""})
        assert resp.status_code == 200
        assert len(resp.json()["1178"]) == 2

    def test_ingest_replay_is_idempotent(self, client, sample_payload):
        client.post(INGEST_URL, json=sample_payload)
        first = client.get(INDICATORS_URL).json()
        client.post(INGEST_URL, json=sample_payload)
        assert client.get(INDICATORS_URL).json() == first

    def test_cors_header(self, client, sample_payload):
        client.post(INGEST_URL, json=sample_payload)
        resp = client.get(INDICATORS_URL, headers={"Origin": "http://localhost:3000"})
        assert "access-control-allow-origin" in resp.headers


class TestServiceEndpoints:
    def test_health(self, client, sample_payload):
        client.post(INGEST_URL, json=sample_payload)
        resp = client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "healthy"
        assert data["stats"] == {"series_count": 2, "observation_count": 5}

    def test_health_reads_one_snapshot(self, client, store, sample_payload, monkeypatch):
        client.post(INGEST_URL, json=sample_payload)
        calls = []

        def frozen_stats():
            calls.append(1)
            return {"series_count": 7, "observation_count": 70, "series": {}}

        monkeypatch.setattr(store, "stats", frozen_stats)
        data = client.get("/health").json()
        assert len(calls) == 1
        assert data["stats"] == {"series_count": 7, "observation_count": 70}

    def test_series_catalog(self, client, sample_payload):
        client.post(INGEST_URL, json=sample_payload)
        resp = client.get("/api/v1/series")
        assert resp.status_code == 200
        data = resp.json()
        assert data["series_count"] == 2
        assert data["series"]["433"]["observations"] == 3

    def test_store_not_initialized(self):
        app.dependency_overrides.pop(get_store, None)
        resp = TestClient(app).get(INDICATORS_URL)
        assert resp.status_code == 503

    def test_lifespan_creates_store(self):
        with TestClient(app) as client:
            assert client.get(INDICATORS_URL).status_code == 404
            assert client.post(INGEST_URL, json={"1": []}).status_code == 200
            assert client.get(INDICATORS_URL).json() == {}
