"""Integration tests for ``/api/products``."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Product

pytestmark = pytest.mark.integration

VIDEO = "https://cdn.example.com/tour.mp4"


@pytest.fixture()
def product():
    return Product.objects.create(
        title="Loft on Queen",
        location="Toronto",
        type="condo",
        price=Decimal("649000.00"),
        baths=Decimal("1.5"),
        image=["https://cdn.example.com/loft.jpg"],
        amenities=["gym"],
    )


class TestCatalogue:
    def test_list(self, api_client, product):
        response = api_client.get("/api/products")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        listing = body["products"][0]
        assert listing["title"] == "Loft on Queen"
        assert listing["price"] == 649000.0
        assert listing["baths"] == 1.5
        assert listing["videoUrl"] == ""

    def test_list_filters(self, api_client, product):
        Product.objects.create(title="Cottage", location="Muskoka", type="house")

        response = api_client.get("/api/products", {"type": "HOUSE"})

        assert [p["title"] for p in response.json()["products"]] == ["Cottage"]

    def test_retrieve(self, api_client, product):
        response = api_client.get(f"/api/products/{product.id}")

        assert response.status_code == 200
        assert response.json()["property"]["id"] == str(product.id)

    def test_retrieve_unknown(self, api_client):
        response = api_client.get("/api/products/not-a-uuid")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Property not found"}


class TestAttachVideo:
    def test_attach(self, api_client, product):
        response = api_client.post(
            "/api/products/attach-video",
            {"propertyId": str(product.id), "videoUrl": VIDEO},
            format="json",
        )

        assert response.status_code == 200
        assert response.json()["property"]["videoUrl"] == VIDEO
        product.refresh_from_db()
        assert product.video_url == VIDEO

    @pytest.mark.parametrize(
        "payload",
        [{}, {"propertyId": "abc"}, {"videoUrl": VIDEO}, {"propertyId": "", "videoUrl": VIDEO}],
    )
    def test_missing_fields(self, api_client, payload):
        response = api_client.post(
            "/api/products/attach-video", payload, format="json"
        )

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "propertyId and videoUrl required",
        }

    def test_unknown_property(self, api_client):
        response = api_client.post(
            "/api/products/attach-video",
            {"propertyId": "0190a4f2-0000-7000-8000-000000000000", "videoUrl": VIDEO},
            format="json",
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Property not found"
