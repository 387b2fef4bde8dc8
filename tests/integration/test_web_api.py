"""Integration tests for the REST API."""

import json
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from booths.domain.services.parameter_file import parse_parameter_file
from booths.web import create_app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


def _fixture(name: str) -> dict[str, Any]:
    return json.loads((FIXTURES_PATH / name).read_text(encoding="utf-8"))


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


class TestCatalogEndpoints:
    """Tests for the health, template, and material endpoints."""

    def test_health(self, client: TestClient) -> None:
        """Test the health check."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_list_templates(self, client: TestClient) -> None:
        """Test listing templates in catalog order."""
        response = client.get("/api/v1/templates")

        assert response.status_code == 200
        templates = response.json()["templates"]
        assert [t["id"] for t in templates] == [
            "straight-full-upholstered",
            "straight-wood-back",
            "curved-full-upholstered",
        ]
        assert templates[0]["base_price_rate"] == 145

    def test_get_template(self, client: TestClient) -> None:
        """Test fetching one template."""
        response = client.get("/api/v1/templates/straight-wood-back")

        assert response.status_code == 200
        data = response.json()
        assert data["template"]["name"] == "Straight - Wood Back"
        assert data["starter_config"]["template"] == "straight-wood-back"

    def test_get_unknown_template(self, client: TestClient) -> None:
        """Test that an unknown template is a 404."""
        response = client.get("/api/v1/templates/l-shaped")

        assert response.status_code == 404
        assert response.json()["error_type"] == "not_found"

    def test_materials(self, client: TestClient) -> None:
        """Test the material options grouped by category."""
        response = client.get("/api/v1/materials")

        assert response.status_code == 200
        materials = response.json()["materials"]
        assert set(materials) == {"wood", "fabric", "finish"}
        walnut = next(m for m in materials["wood"] if m["value"] == "walnut")
        assert walnut["multiplier"] == 1.4


class TestQuoteEndpoint:
    """Tests for POST /quote."""

    def test_quote(self, client: TestClient) -> None:
        """Test quoting a full order."""
        response = client.post("/api/v1/quote", json={"config": _fixture("valid_full.json")})

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is True
        assert data["rounded_price"] == 1742
        assert data["estimated_price"] == pytest.approx(1741.74)
        assert data["breakdown"]["height_multiplier"] == 1.1

    def test_invalid_configuration_quoted_with_errors(self, client: TestClient) -> None:
        """Test that an invalid order is priced and lists its errors."""
        response = client.post(
            "/api/v1/quote", json={"config": _fixture("invalid_dimensions.json")}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert len(data["errors"]) == 3

    def test_schema_error(self, client: TestClient) -> None:
        """Test that a schema violation is a 422 with field details."""
        response = client.post("/api/v1/quote", json={"config": _fixture("unknown_field.json")})

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "validation"
        assert data["details"][0]["path"] == "booth.armrest_style"

    def test_unknown_template(self, client: TestClient) -> None:
        """Test that an unknown template is a 404."""
        response = client.post(
            "/api/v1/quote", json={"config": _fixture("unknown_template.json")}
        )
        assert response.status_code == 404


class TestValidateEndpoint:
    """Tests for POST /validate."""

    def test_valid(self, client: TestClient) -> None:
        """Test a valid order with no findings."""
        response = client.post(
            "/api/v1/validate", json={"config": _fixture("valid_minimal.json")}
        )

        assert response.status_code == 200
        assert response.json() == {"is_valid": True, "errors": [], "warnings": []}

    def test_warnings(self, client: TestClient) -> None:
        """Test that an unknown material is a warning on its field."""
        response = client.post(
            "/api/v1/validate", json={"config": _fixture("unknown_material.json")}
        )

        data = response.json()
        assert data["is_valid"] is True
        assert data["warnings"][0]["path"] == "booth.wood_type"
        assert data["warnings"][0]["field"] == "wood_type"
        assert data["warnings"][0]["suggestion"].startswith("Choose one of:")

    def test_errors(self, client: TestClient) -> None:
        """Test that every dimension error is listed with its field."""
        response = client.post(
            "/api/v1/validate", json={"config": _fixture("invalid_dimensions.json")}
        )

        data = response.json()
        assert data["is_valid"] is False
        assert [e["path"] for e in data["errors"]] == [
            "booth.overall_length",
            "booth.seat_height",
            "booth.seat_depth",
        ]
        assert data["errors"][0]["field"] == "overall_length"


class TestExportEndpoint:
    """Tests for POST /export and the format listing."""

    def test_export(self, client: TestClient) -> None:
        """Test downloading the parameter file for a full order."""
        response = client.post(
            "/api/v1/export",
            json={
                "config": _fixture("valid_full.json"),
                "timestamp": "2025-03-05T09:07:02.123Z",
            },
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert (
            response.headers["content-disposition"]
            == "attachment; filename=booth_config_1741165622123.txt"
        )
        values = parse_parameter_file(response.text)
        assert values["order_date"] == "2025-03-05"
        assert values["estimated_price"] == "1742"
        assert response.text.split("\n")[1] == "# Generated: 3/5/2025, 9:07:02 AM"

    def test_invalid_configuration_blocked(self, client: TestClient) -> None:
        """Test that an invalid order cannot be exported."""
        response = client.post(
            "/api/v1/export", json={"config": _fixture("invalid_dimensions.json")}
        )

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "submission_blocked"
        assert len(data["details"]) == 3

    def test_formats(self, client: TestClient) -> None:
        """Test listing the export formats."""
        response = client.get("/api/v1/export/formats")
        assert response.json() == {"formats": ["params"]}
