"""
Cleanse KB HTTP API - Tests
Exercises every router through the FastAPI app.
"""

import pytest
from fastapi.testclient import TestClient

from api_server import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


class TestCoreEndpoints:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self, client):
        data = client.get("/").json()
        assert data["status"] == "operational"
        assert data["catalog_version"] == "parasite_cleanse_v1"

    def test_catalog_health(self, client):
        data = client.get("/api/v1/health/catalog").json()
        assert data["status"] == "healthy"
        assert data["protocol_count"] >= 20
        assert data["catalog_hash"].startswith("sha256:")
        assert data["summary"]["total"] == data["protocol_count"]


class TestProtocolEndpoints:

    def test_list_all(self, client):
        data = client.get("/api/v1/protocols").json()
        assert data["success"] is True
        assert data["count"] == len(data["protocols"]) >= 20
        assert data["disclaimer"]["content"].startswith("These protocols")
        assert data["disclaimer"]["severity"] == "high"
        assert data["disclaimer"]["acknowledgment_required"] is True

    def test_list_with_filters(self, client):
        data = client.get("/api/v1/protocols", params={"intensity": "gentle", "region": "north_america"}).json()
        assert data["count"] > 0
        for protocol in data["protocols"]:
            assert protocol["intensity"] == "gentle"
        assert data["disclaimer"]["severity"] == "standard"

    def test_list_with_unknown_filter_is_empty(self, client):
        response = client.get("/api/v1/protocols", params={"evidence": "rumor"})
        assert response.status_code == 200
        assert response.json()["count"] == 0

    def test_get_protocol(self, client):
        response = client.get("/api/v1/protocols/traditional-triple")
        assert response.status_code == 200
        data = response.json()
        assert "Triple Herb" in data["protocol"]["name"]
        assert len(data["protocol"]["primary_herbs"]) == 3
        assert data["total_phase_days"] == 30
        assert data["disclaimer"]["content"].startswith("This protocol")

    def test_get_intensive_protocol_has_high_severity(self, client):
        data = client.get("/api/v1/protocols/tansy-protocol").json()
        assert data["disclaimer"]["severity"] == "high"

    def test_unknown_protocol_is_404(self, client):
        response = client.get("/api/v1/protocols/no-such-id")
        assert response.status_code == 404

    def test_ailment_tags(self, client):
        data = client.get("/api/v1/protocols/ailments").json()
        assert "digestive_issues" in data["tags"]
        assert data["count"] == len(data["tags"])

    def test_region_tags(self, client):
        data = client.get("/api/v1/protocols/regions").json()
        assert "worldwide" in data["tags"]


class TestFilterEndpoints:

    def test_by_ailment(self, client):
        data = client.get("/api/v1/protocols/by-ailment/IBS").json()
        assert [p["id"] for p in data["protocols"]] == ["modern-berberine"]
        assert data["disclaimer"]["content"].startswith("This protocol")

    def test_by_intensity(self, client):
        data = client.get("/api/v1/protocols/by-intensity/intensive").json()
        assert data["count"] == 4
        for protocol in data["protocols"]:
            assert "pregnancy" in protocol["contraindications"]

    def test_by_intensity_unknown_is_empty(self, client):
        response = client.get("/api/v1/protocols/by-intensity/extreme")
        assert response.status_code == 200
        assert response.json()["protocols"] == []

    def test_by_evidence(self, client):
        data = client.get("/api/v1/protocols/by-evidence/who_approved").json()
        assert [p["id"] for p in data["protocols"]] == ["artemisinin-clinical"]

    def test_by_region(self, client):
        data = client.get("/api/v1/protocols/by-region/africa").json()
        assert data["count"] > 5
        for protocol in data["protocols"]:
            assert "worldwide" in protocol["regional_availability"]


class TestRecommendationEndpoints:

    def test_recommend(self, client):
        response = client.post(
            "/api/v1/recommendations",
            json={"conditions": ["digestive_issues", "fatigue"], "region": "north_america"},
        )
        assert response.status_code == 200
        data = response.json()
        recs = data["result"]["recommendations"]
        assert recs[0]["protocol"]["id"] == "traditional-triple"
        assert recs[0]["match_score"] == 2
        assert recs[0]["reasoning"] == "Targets digestive_issues, fatigue"
        assert data["result"]["audit"]["excluded_by_region"] == 1
        assert data["result"]["recommendation_hash"].startswith("sha256:")
        assert data["disclaimer"]["content"].startswith("These protocols")

    def test_recommend_with_exclude_flags(self, client):
        data = client.post(
            "/api/v1/recommendations",
            json={"conditions": ["digestive_issues"], "exclude_flags": ["pregnancy"]},
        ).json()
        assert [r["protocol"]["id"] for r in data["result"]["recommendations"]] == ["diatomaceous-earth"]

    def test_recommend_empty_conditions(self, client):
        response = client.post("/api/v1/recommendations", json={"conditions": []})
        assert response.status_code == 200
        assert response.json()["result"]["recommendations"] == []

    def test_recommend_rejects_unknown_fields(self, client):
        response = client.post(
            "/api/v1/recommendations",
            json={"conditions": ["fatigue"], "email": "client@example.com"},
        )
        assert response.status_code == 422

    def test_recommend_rejects_malformed_conditions(self, client):
        response = client.post("/api/v1/recommendations", json={"conditions": "fatigue"})
        assert response.status_code == 422

    def test_recommender_health(self, client):
        data = client.get("/api/v1/recommendations/health").json()
        assert data["status"] == "ok"
        assert data["module"] == "protocol_recommender"
        assert data["protocol_count"] >= 20
