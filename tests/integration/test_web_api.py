"""Integration tests for the REST API."""

import xml.etree.ElementTree as ET

import pytest
from fastapi.testclient import TestClient

from stepnrepeat.web import create_app

CARDS = {
    "document_width": 330,
    "document_height": 488,
    "item_width": 90,
    "item_height": 50,
}


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


class TestHealth:
    def test_health_check(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestOptimizeEndpoint:
    """Tests for POST /api/v1/layout/optimize."""

    def test_single_orientation(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/layout/optimize", json={**CARDS, "document_margin": 12.7}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["max_columns"] == 3
        assert data["max_rows"] == 9
        assert data["item_count"] == 27
        assert data["document_width"] == pytest.approx(304.6)
        assert data["document_width_real"] == 330

    def test_default_margin(self, client: TestClient) -> None:
        response = client.post("/api/v1/layout/optimize", json=CARDS)

        assert response.status_code == 200
        assert response.json()["document_margin"] == 12.7

    def test_missing_field(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/layout/optimize",
            json={"document_width": 330, "document_height": 488, "item_height": 50},
        )

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "missing_field"
        assert data["error"] == 'Property "item_width" is missing'
        assert data["details"] == {"field": "item_width"}

    def test_invalid_item_size(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/layout/optimize", json={**CARDS, "item_width": 0}
        )

        assert response.status_code == 422
        assert response.json()["error_type"] == "invalid_item_size"

    def test_margin_exceeds_dimension(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/layout/optimize",
            json={
                "document_width": 100,
                "document_height": 100,
                "document_margin": 60,
                "item_width": 10,
                "item_height": 10,
            },
        )

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "margin_exceeds_dimension"
        assert data["details"] == {"axis": "width"}

    def test_malformed_body(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/layout/optimize", json={**CARDS, "document_width": "wide"}
        )

        assert response.status_code == 422


class TestOrientationEndpoint:
    """Tests for POST /api/v1/layout/orientation."""

    def test_rectangular_document(self, client: TestClient) -> None:
        response = client.post("/api/v1/layout/orientation", json=CARDS)

        assert response.status_code == 200
        data = response.json()
        assert data["is_square"] is False
        assert data["preferred"] == "landscape"
        assert data["unit"] == "mm"
        assert data["input"]["document_margin"] is None
        assert data["candidates"]["landscape"]["item_count"] == 30
        assert data["candidates"]["portrait"]["item_count"] == 27
        assert data["candidates"]["landscape"]["preview"]["canvas_width"] == 122

    def test_square_document(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/layout/orientation",
            json={
                "document_width": 100,
                "document_height": 100,
                "document_margin": 0,
                "item_width": 30,
                "item_height": 30,
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["is_square"] is True
        assert list(data["candidates"]) == ["square"]

    def test_unit(self, client: TestClient) -> None:
        response = client.post("/api/v1/layout/orientation", json={**CARDS, "unit": "cm"})

        assert response.status_code == 200
        assert response.json()["unit"] == "cm"

    def test_unknown_unit(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/layout/orientation", json={**CARDS, "unit": "inch"}
        )

        assert response.status_code == 422

    def test_missing_height(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/layout/orientation",
            json={"document_width": 330, "item_width": 90, "item_height": 50},
        )

        assert response.status_code == 422
        assert response.json()["details"] == {"field": "document_height"}


class TestPreviewEndpoints:
    """Tests for the preview endpoints."""

    def test_svg(self, client: TestClient) -> None:
        response = client.post("/api/v1/preview/svg", json=CARDS)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("image/svg+xml")
        root = ET.fromstring(response.text)
        items = [
            r
            for r in root.iter("{http://www.w3.org/2000/svg}rect")
            if r.get("class") == "item"
        ]
        assert len(items) == 27 + 30

    def test_svg_preferred_only(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/preview/svg", json={**CARDS, "preferred_only": True}
        )

        assert response.status_code == 200
        assert response.text.count('class="item"') == 30

    def test_svg_scale(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/preview/svg", json={**CARDS, "scale": 1.0, "preferred_only": True}
        )

        assert response.status_code == 200
        assert 'width="488" height="330"' in response.text

    def test_svg_invalid_scale(self, client: TestClient) -> None:
        response = client.post("/api/v1/preview/svg", json={**CARDS, "scale": 0})

        assert response.status_code == 422

    def test_svg_layout_error(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/preview/svg", json={**CARDS, "document_margin": 200}
        )

        assert response.status_code == 422
        assert response.json()["error_type"] == "margin_exceeds_dimension"

    def test_ascii(self, client: TestClient) -> None:
        response = client.post("/api/v1/preview/ascii", json=CARDS)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "landscape (preferred): 5 x 6 = 30 items" in response.text

    def test_svg_dense_layout_is_bounded(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/preview/svg",
            json={
                "document_width": 1000,
                "document_height": 1000,
                "document_margin": 0,
                "item_width": 1,
                "item_height": 1,
            },
        )

        assert response.status_code == 200
        assert len(response.content) < 5_000_000
        assert "not drawn" in response.text

    def test_ascii_tall_document_is_bounded(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/preview/ascii",
            json={
                "document_width": 1,
                "document_height": 100000,
                "document_margin": 0,
                "item_width": 1,
                "item_height": 1,
            },
        )

        assert response.status_code == 200
        assert len(response.text.splitlines()) < 200
