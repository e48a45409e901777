"""
Test REST API endpoints.
"""

from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from mcpolice.errors import StoreError
from mcpolice.api.app import create_app
from mcpolice.services.violations import ViolationService
from mcpolice.store import ViolationStore

from .conftest import ROME_7

REPORT = {
    "statute": ROME_7,
    "responsible_organization": "TestAI",
    "offending_content": "x",
}


def _report(client, **overrides):
    return client.post("/api/violations/report", json={**REPORT, **overrides})


class TestReportAPI:
    def test_report_success(self, client):
        response = _report(client)

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["severity"] == "CRITICAL"
        assert data["organization"] == "ICC"
        assert data["message"] == "Violation report received and processed"
        assert data["violationId"]

    def test_missing_field_returns_400(self, client):
        response = client.post(
            "/api/violations/report",
            json={"statute": ROME_7, "responsible_organization": "TestAI"},
        )

        assert response.status_code == 400
        assert "Missing required fields" in response.json()["detail"]
        assert client.get("/api/violations").json()["total"] == 0

    def test_empty_field_returns_400(self, client):
        response = _report(client, offending_content="")

        assert response.status_code == 400

    def test_unknown_statute_returns_400(self, client):
        response = _report(client, statute="Nonexistent Statute")

        assert response.status_code == 400
        assert "Nonexistent Statute" in response.json()["detail"]
        assert client.get("/api/violations").json()["total"] == 0

    def test_malformed_body_returns_400(self, client):
        response = client.post(
            "/api/violations/report",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid request format"

    def test_wrong_field_type_returns_400(self, client):
        response = _report(client, statute=42)

        assert response.status_code == 400


class TestViolationsAPI:
    def test_list_most_recent_first(self, client):
        ids = [_report(client).json()["violationId"] for _ in range(3)]

        response = client.get("/api/violations")

        assert response.status_code == 200
        data = response.json()
        assert [v["id"] for v in data["violations"]] == list(reversed(ids))
        assert data["total"] == 3
        assert data["hasMore"] is False

    def test_list_uses_camel_case(self, client):
        _report(client)

        violation = client.get("/api/violations").json()["violations"][0]

        assert violation["responsibleOrganization"] == "TestAI"
        assert violation["offendingContent"] == "x"
        assert violation["violation"]["jurisdiction"] == ["INTERNATIONAL", "ICC"]
        assert violation["metadata"]["detectedBy"] == "TestAI Safety System"
        assert set(violation["metadata"]) == {"reportedAt", "protocolVersion", "detectedBy"}

    def test_pagination_and_filters(self, client):
        for _ in range(3):
            _report(client)
        _report(client, statute="INFCIRC/540")

        page = client.get("/api/violations?limit=2&offset=0&severity=CRITICAL").json()
        assert len(page["violations"]) == 2
        assert page["total"] == 3
        assert page["hasMore"] is True

        page = client.get("/api/violations?jurisdiction=IAEA").json()
        assert page["total"] == 1
        assert page["violations"][0]["statute"] == "INFCIRC/540"

    def test_invalid_query_returns_400(self, client):
        assert client.get("/api/violations?limit=abc").status_code == 400
        assert client.get("/api/violations?offset=-1").status_code == 400
        assert client.get("/api/violations?severity=SEVERE").status_code == 400

    def test_get_single_violation(self, client):
        violation_id = _report(client).json()["violationId"]

        response = client.get(f"/api/violations/{violation_id}")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == violation_id
        assert data["statute"] == ROME_7

    def test_get_unknown_violation_returns_404(self, client):
        response = client.get("/api/violations/does-not-exist")

        assert response.status_code == 404
        assert response.json()["detail"] == "Violation not found"


class TestStatsAPI:
    def test_stats(self, client):
        _report(client, statute="INFCIRC/540")
        _report(client, statute="Fourth Geneva Convention Article 33")
        _report(client, statute="1970 Convention Article 3", responsible_organization="Other")

        data = client.get("/api/stats").json()

        assert data["total"] == 3
        assert data["bySeverity"] == {"HIGH": 2, "MEDIUM": 1}
        assert data["byJurisdiction"] == {
            "INTERNATIONAL": 3, "IAEA": 1, "WFO": 1, "UNESCO": 1,
        }
        assert data["byOrganization"] == {"TestAI": 2, "Other": 1}
        assert data["recent24h"] == 3


class TestStatutesAPI:
    def test_list_statutes(self, client):
        data = client.get("/api/statutes").json()

        assert len(data["statutes"]) == 15
        first = data["statutes"][0]
        assert first["article"] == "Rome Statute Article 6"
        assert first["organization"] == "ICC"
        assert first["severity"] == "CRITICAL"


class TestAdminAPI:
    def test_clear_data(self, client):
        for _ in range(2):
            _report(client)

        response = client.delete("/api/admin/clear-data")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Cleared 2 violations from database",
        }
        page = client.get("/api/violations").json()
        assert page["total"] == 0
        assert page["violations"] == []

    def test_clear_data_backend_failure_returns_500(self):
        backend = MagicMock()
        backend.get.side_effect = StoreError("Storage backend unavailable")
        client = TestClient(create_app(ViolationService(ViolationStore(backend))))

        response = client.delete("/api/admin/clear-data")

        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to clear data"


class TestStoreFailures:
    def test_store_error_is_redacted(self):
        backend = MagicMock()
        backend.get.side_effect = StoreError("Storage backend unavailable")
        client = TestClient(create_app(ViolationService(ViolationStore(backend))))

        response = client.get("/api/stats")

        assert response.status_code == 500
        assert response.json() == {"detail": "Storage backend unavailable"}


class TestHealth:
    def test_health(self, client):
        data = client.get("/health").json()

        assert data["status"] == "ok"
        assert data["store"]["backend_type"] == "MemoryBackend"

    def test_cors_preflight(self, client):
        response = client.options(
            "/api/violations/report",
            headers={
                "Origin": "http://dashboard.example",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
