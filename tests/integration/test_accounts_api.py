"""
Integration tests for accounts API endpoints.

Tests size classification, validation, preview and the submission package.
"""
import io
import zipfile

from fastapi.testclient import TestClient


class TestEntitySizeEndpoint:
    """Tests for /accounts/entity-size endpoint."""

    def test_classify_micro(self, client: TestClient):
        """Test two of three micro criteria classify as micro."""
        response = client.post(
            "/api/v1/accounts/entity-size",
            json={"current": {"turnover": 500000, "balance_sheet_total": 300000, "employees": 60}},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["size"] == "micro"
        assert data["qualifies_as"] == ["micro", "small", "medium"]
        assert data["criteria"] == {"turnover": True, "balance_sheet": True, "employees": False}
        assert data["can_use_micro_entity"] is True
        assert data["requires_audit"] is False
        assert data["framework"]["taxonomy"] == "uk-gaap-frs-105-2025-01-01"
        assert data["recommendations"]["recommended_format"].startswith("Micro-entity")

    def test_classify_two_years(self, client: TestClient):
        """Test a large previous year keeps the company large."""
        response = client.post(
            "/api/v1/accounts/entity-size",
            json={
                "current": {"turnover": "5000000", "balance_sheet_total": "2000000", "employees": 30},
                "previous": {"turnover": "50000000", "balance_sheet_total": "25000000", "employees": 500},
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["size"] == "large"
        assert data["qualifies_as"] == []
        assert data["requires_audit"] is True

    def test_missing_metrics(self, client: TestClient):
        """Test request body validation."""
        response = client.post("/api/v1/accounts/entity-size", json={})

        assert response.status_code == 422


class TestValidateEndpoint:
    """Tests for /accounts/validate endpoint."""

    def test_valid_package(self, client: TestClient, package_payload):
        """Test a complete package validates."""
        response = client.post("/api/v1/accounts/validate", json=package_payload)

        assert response.status_code == 200
        assert response.json() == {"valid": True, "errors": [], "entity_size": "small"}

    def test_unbalanced_package(self, client: TestClient, package_payload):
        """Test balance sheet errors are listed."""
        package_payload["balance_sheet"]["current_year"]["profit_and_loss_account"] = "100000"

        response = client.post("/api/v1/accounts/validate", json=package_payload)

        data = response.json()
        assert response.status_code == 200
        assert data["valid"] is False
        assert data["errors"] == [
            "Balance sheet does not balance: Net Assets 110,000 != Total Capital 101,000"
        ]

    def test_size_from_metrics(self, client: TestClient, package_payload):
        """Test the tier is classified when no explicit size is given."""
        del package_payload["entity_size"]
        package_payload["metrics"] = {
            "current": {"turnover": 500000, "balance_sheet_total": 170000, "employees": 8},
        }

        response = client.post("/api/v1/accounts/validate", json=package_payload)

        assert response.json()["entity_size"] == "micro"

    def test_missing_size_and_metrics(self, client: TestClient, package_payload):
        """Test a package without size information is rejected."""
        del package_payload["entity_size"]

        response = client.post("/api/v1/accounts/validate", json=package_payload)

        assert response.status_code == 400
        assert response.json()["error_code"] == "IXA-400"


class TestPreviewEndpoint:
    """Tests for /accounts/preview endpoint."""

    def test_preview(self, client: TestClient, package_payload):
        """Test preview is untagged HTML with a banner."""
        response = client.post("/api/v1/accounts/preview", json=package_payload)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "PREVIEW ONLY" in response.text
        assert "<ix:" not in response.text
        assert "Acme Widgets Limited" in response.text

    def test_preview_of_invalid_package(self, client: TestClient, package_payload):
        """Test preview still renders when validation would fail."""
        package_payload["directors_report"]["directors"] = []
        package_payload["directors_report"]["director_signature"] = ""

        response = client.post("/api/v1/accounts/preview", json=package_payload)

        assert response.status_code == 200
        assert "Not provided" in response.text


class TestPackageEndpoint:
    """Tests for /accounts/package endpoint."""

    def test_package(self, client: TestClient, package_payload):
        """Test the archive download."""
        response = client.post("/api/v1/accounts/package", json=package_payload)

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/zip"
        assert response.headers["content-disposition"] == (
            'attachment; filename="12345678-20241231-accounts.zip"'
        )
        assert response.headers["x-document-filename"] == "12345678-20241231-accounts.html"

        with zipfile.ZipFile(io.BytesIO(response.content)) as zf:
            assert zf.namelist() == ["12345678-20241231-accounts.html"]
            document = zf.read("12345678-20241231-accounts.html").decode("utf-8")
        assert 'unitRef="GBP"' in document
        assert "<ix:header>" in document

    def test_package_deterministic(self, client: TestClient, package_payload):
        """Test identical requests give identical archives."""
        first = client.post("/api/v1/accounts/package", json=package_payload)
        second = client.post("/api/v1/accounts/package", json=package_payload)

        assert first.content == second.content

    def test_package_currency(self, client: TestClient, package_payload):
        """Test the reporting currency is used as the unit."""
        package_payload["context"]["currency"] = "EUR"

        response = client.post("/api/v1/accounts/package", json=package_payload)

        with zipfile.ZipFile(io.BytesIO(response.content)) as zf:
            document = zf.read(zf.namelist()[0]).decode("utf-8")
        assert 'unitRef="EUR"' in document
        assert 'unitRef="GBP"' not in document

    def test_package_validation_failure(self, client: TestClient, package_payload):
        """Test an invalid package returns the validation errors."""
        package_payload["directors_report"]["director_signature"] = ""

        response = client.post("/api/v1/accounts/package", json=package_payload)

        assert response.status_code == 422
        data = response.json()
        assert data["error"] is True
        assert data["error_code"] == "IXA-700"
        assert data["details"]["errors"] == ["Missing director signature"]
        assert data["details"]["company_number"] == "12345678"

    def test_malformed_body(self, client: TestClient, package_payload):
        """Test schema errors are reported by request validation."""
        del package_payload["balance_sheet"]

        response = client.post("/api/v1/accounts/package", json=package_payload)

        assert response.status_code == 422
        assert "detail" in response.json()
