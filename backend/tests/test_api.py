"""
Tests for FastAPI application setup and the tax routes.
"""

import pytest
from fastapi.testclient import TestClient

from naijatax.main import app


@pytest.fixture
def client():
    return TestClient(app)


class TestHealthCheck:
    def test_health_endpoint(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data

    def test_openapi_docs(self, client):
        response = client.get("/openapi.json")
        assert response.status_code == 200
        schema = response.json()
        assert schema["info"]["title"] == "NaijaTax API"

    def test_cors_headers(self, client):
        response = client.options(
            "/health",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "GET",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"


class TestRouteRegistration:
    def test_tax_routes_registered(self, client):
        paths = client.get("/openapi.json").json()["paths"]
        assert "/api/v1/tax/pit/calculate" in paths
        assert "/api/v1/tax/paye/estimate" in paths
        assert "/api/v1/tax/bands" in paths


class TestPITEndpoint:
    def test_monthly_salary(self, client):
        response = client.post(
            "/api/v1/tax/pit/calculate",
            json={"gross_income": 500_000, "annual_rent": 0, "is_monthly": True, "has_pension": True},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["gross_annual_income"] == 6_000_000
        assert data["chargeable_income"] == pytest.approx(5_520_000)
        assert data["total_annual_tax"] == pytest.approx(783_600)
        assert data["monthly_tax"] == pytest.approx(65_300)
        assert data["effective_tax_rate"] == pytest.approx(13.06)
        assert len(data["tax_band_breakdown"]) == 3
        assert data["tax_band_breakdown"][2]["taxable_amount"] == pytest.approx(2_520_000)
        assert "effective tax rate of 13.06%" in data["explanation"]

    def test_defaults_are_monthly_with_pension(self, client):
        response = client.post("/api/v1/tax/pit/calculate", json={"gross_income": 500_000})
        assert response.status_code == 200
        assert response.json()["pension_deduction"] == pytest.approx(480_000)

    def test_accepts_typed_amounts(self, client):
        response = client.post(
            "/api/v1/tax/pit/calculate",
            json={"gross_income": "₦600,000", "annual_rent": "", "is_monthly": False, "has_pension": False},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["chargeable_income"] == 600_000
        assert data["total_annual_tax"] == 0
        assert data["tax_band_breakdown"] == [
            {"band": "First ₦800,000", "rate": 0.0, "taxable_amount": 600_000, "tax_amount": 0.0}
        ]

    def test_zero_income(self, client):
        response = client.post("/api/v1/tax/pit/calculate", json={"gross_income": 0})
        assert response.status_code == 200
        data = response.json()
        assert data["total_annual_tax"] == 0
        assert data["effective_tax_rate"] == 0
        assert data["tax_band_breakdown"] == []

    def test_negative_income_rejected(self, client):
        response = client.post("/api/v1/tax/pit/calculate", json={"gross_income": -1})
        assert response.status_code == 422

    def test_oversized_typed_amount_rejected(self, client):
        response = client.post("/api/v1/tax/pit/calculate", json={"gross_income": "9" * 400})
        assert response.status_code == 422

    def test_missing_income_rejected(self, client):
        response = client.post("/api/v1/tax/pit/calculate", json={"annual_rent": 100})
        assert response.status_code == 422


class TestPAYEEndpoint:
    def test_estimate(self, client):
        response = client.get("/api/v1/tax/paye/estimate", params={"monthly_gross": 500_000})
        assert response.status_code == 200
        data = response.json()
        assert data["annual_gross"] == 6_000_000
        assert data["monthly_paye"] == 65_300
        assert data["effective_rate"] == 13.06

    def test_negative_rejected(self, client):
        response = client.get("/api/v1/tax/paye/estimate", params={"monthly_gross": -10})
        assert response.status_code == 422


class TestBandsEndpoint:
    def test_lists_bands_in_order(self, client):
        response = client.get("/api/v1/tax/bands")
        assert response.status_code == 200
        bands = response.json()
        assert [b["rate"] for b in bands] == [0, 15, 18, 21, 23, 25]
        assert bands[0] == {"label": "First ₦800,000", "width": 800_000, "rate": 0}
        assert bands[-1]["width"] is None
