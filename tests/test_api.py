# tests/test_api.py
"""
API Endpoint Tests - SOC Efficacy Calculator
Every endpoint is stateless, so no database or cache mocking is required.
"""

import pytest


# =============================================================================
# ROOT & HEALTH
# =============================================================================

class TestRootAndHealth:
    """Tests for / and /health."""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["service"] == "SOC Efficacy Calculator"
        assert data["status"] == "running"

    def test_health_reports_consistent_tables(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert set(data["checks"]) == {"technology_catalogue", "domain_weights", "manpower_levels"}


# =============================================================================
# REFERENCE DATA
# =============================================================================

class TestReferenceDataEndpoints:
    """Tests for GET /api/v1/soc/technologies and /weights."""

    def test_get_weights(self, client):
        response = client.get("/api/v1/soc/weights")
        assert response.status_code == 200
        assert response.json() == {
            "coverage": 25,
            "operations": 25,
            "manpower": 20,
            "governance": 15,
            "enrichment": 15,
        }

    def test_get_technologies(self, client):
        response = client.get("/api/v1/soc/technologies")
        assert response.status_code == 200
        data = response.json()
        assert len(data) == 10
        siem = next(t for t in data if t["id"] == "siem")
        assert siem["applicable_systems"] == ["S1", "S2", "S4", "S5", "S6"]
        dlp = next(t for t in data if t["id"] == "dlp")
        assert dlp["applicable_systems"] == []


# =============================================================================
# DOMAIN ENDPOINTS
# =============================================================================

class TestDomainScoringEndpoints:

    def test_coverage(self, client):
        response = client.post("/api/v1/soc/coverage", json={
            "assets": {"S1": 10},
            "integrations": {"pam": 10, "siem": 10},
        })
        assert response.status_code == 200
        data = response.json()
        assert data["score"] == pytest.approx(20.0)
        assert data["max_achievable"] == 20
        assert len(data["technologies"]) == 10

    def test_coverage_negative_counts_sanitised(self, client):
        response = client.post("/api/v1/soc/coverage", json={
            "assets": {"S1": -10},
            "integrations": {"pam": 5},
        })
        assert response.status_code == 200
        assert response.json()["score"] == 0

    def test_operations(self, client, operations_inputs):
        response = client.post("/api/v1/soc/operations", json=operations_inputs.model_dump())
        assert response.status_code == 200
        data = response.json()
        assert data["raw"] == pytest.approx(52.25)
        assert data["normalised"] == pytest.approx(69.6667, abs=1e-4)
        assert data["hygiene_checks_passed"] == 3

    def test_manpower(self, client):
        response = client.post("/api/v1/soc/manpower", json={"l1_bands": [0, 0, 0, 1]})
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == pytest.approx(35.0)
        assert [lvl["level"] for lvl in data["levels"]] == ["L1", "L2", "L3"]
        assert data["levels"][1]["band_labels"] == ["6–7 years", "7–8 years", "8+ years"]

    def test_governance(self, client, governance_inputs):
        response = client.post("/api/v1/soc/governance", json=governance_inputs.model_dump())
        assert response.status_code == 200
        data = response.json()
        assert data["raw"] == pytest.approx(55.0)
        assert data["normalised"] == pytest.approx(84.615, abs=1e-3)
        assert data["components"]["budget_score"] == pytest.approx(45.0)

    def test_enrichment(self, client):
        response = client.post("/api/v1/soc/enrichment", json={"has_decoy": True, "has_ips": True})
        assert response.status_code == 200
        data = response.json()
        assert data["components"]["technologies_score"] == pytest.approx(6.0)
        assert data["normalised"] == pytest.approx(8.0)

    def test_final_score(self, client):
        response = client.post("/api/v1/soc/final-score", json={
            "coverage": 80, "operations": 60, "manpower": 40, "governance": 100,
        })
        assert response.status_code == 200
        data = response.json()
        assert data["final_score"] == pytest.approx(58.0)
        assert data["contributions"]["enrichment"] == 0

    def test_final_score_unknown_domain(self, client):
        response = client.post("/api/v1/soc/final-score", json={"coverage": 80, "finance": 50})
        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "UNKNOWN_DOMAIN"
        assert data["details"] == {"domain": "finance"}
        assert "timestamp" in data

    def test_coverage_accepts_very_large_counts(self, client):
        response = client.post("/api/v1/soc/coverage", json={
            "assets": {"S1": 10**400},
            "integrations": {"pam": 5},
        })
        assert response.status_code == 200
        assert response.json()["score"] >= 0

    def test_final_score_rejects_non_numeric(self, client):
        response = client.post("/api/v1/soc/final-score", json={"coverage": "high"})
        assert response.status_code == 422


# =============================================================================
# FULL ASSESSMENT
# =============================================================================

class TestAssessmentEndpoint:
    """Tests for POST /api/v1/soc/assessment."""

    def test_assessment_success(self, client, assessment_payload):
        response = client.post("/api/v1/soc/assessment", json=assessment_payload)
        assert response.status_code == 200
        data = response.json()

        summary = data["summary"]
        assert [row["short_code"] for row in summary["rows"]] == ["C", "Y", "P", "H", "E"]
        assert summary["org_info"]["name"] == assessment_payload["org_info"]["name"]
        assert data["coverage"]["score"] == pytest.approx(20.0)

        contributions = sum(row["contribution"] for row in summary["rows"])
        assert contributions == pytest.approx(summary["final_score"], abs=0.02)

    def test_assessment_without_assets_rejected(self, client, assessment_payload):
        assessment_payload["coverage"] = {"assets": {}, "integrations": {}}
        response = client.post("/api/v1/soc/assessment", json=assessment_payload)
        assert response.status_code == 422
        data = response.json()
        assert data["error_code"] == "ASSESSMENT_INPUT_INVALID"
        assert any("at least one asset" in e for e in data["details"]["errors"])

    def test_assessment_integrations_above_applicable_rejected(self, client, assessment_payload):
        assessment_payload["coverage"]["integrations"]["pam"] = 11
        response = client.post("/api/v1/soc/assessment", json=assessment_payload)
        assert response.status_code == 422
        assert "PAM" in response.json()["details"]["errors"][0]

    def test_assessment_missing_org_name_rejected(self, client, assessment_payload):
        assessment_payload["org_info"]["name"] = ""
        response = client.post("/api/v1/soc/assessment", json=assessment_payload)
        assert response.status_code == 422
        assert "Please enter organisation name." in response.json()["details"]["errors"]

    def test_assessment_without_operations_totals_rejected(self, client, assessment_payload):
        assessment_payload["operations"] = {}
        response = client.post("/api/v1/soc/assessment", json=assessment_payload)
        assert response.status_code == 422
        errors = response.json()["details"]["errors"]
        assert errors == [
            "Please specify the total number of log sources configured for SOC.",
            "Please specify total number of security technologies in scope for operations.",
            "Please specify total number of SIEM / detection use-cases.",
        ]
