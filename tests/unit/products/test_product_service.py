"""Unit tests for ProductService and AttachVideoDTO."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.products.dtos import AttachVideoDTO
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

pytestmark = pytest.mark.unit

VIDEO = "https://cdn.example.com/tour.mp4"


@pytest.fixture()
def service():
    return ProductService(repository=ProductDjangoRepository())


@pytest.fixture()
def product():
    return Product.objects.create(
        title="Loft on Queen",
        location="Toronto",
        type="condo",
        price=Decimal("649000.00"),
        beds=2,
    )


class TestAttachVideoDTO:
    @pytest.mark.parametrize(
        "product_id,video_url", [("", VIDEO), ("abc", ""), ("abc", "   ")]
    )
    def test_blank_fields_rejected(self, product_id, video_url):
        with pytest.raises(ValidationError):
            AttachVideoDTO(product_id=product_id, video_url=video_url)

    def test_strips_whitespace(self):
        dto = AttachVideoDTO(product_id=" abc ", video_url=f" {VIDEO} ")

        assert dto.product_id == "abc"
        assert dto.video_url == VIDEO


class TestAttachVideo:
    def test_attaches_url(self, service, product):
        updated = service.attach_video(
            AttachVideoDTO(product_id=str(product.id), video_url=VIDEO)
        )

        assert updated.video_url == VIDEO
        product.refresh_from_db()
        assert product.video_url == VIDEO

    def test_replaces_previous_url(self, service, product):
        product.video_url = "https://cdn.example.com/old.mp4"
        product.save()

        service.attach_video(AttachVideoDTO(product_id=str(product.id), video_url=VIDEO))

        product.refresh_from_db()
        assert product.video_url == VIDEO

    @pytest.mark.parametrize(
        "product_id", ["0190a4f2-0000-7000-8000-000000000000", "not-a-uuid"]
    )
    def test_unknown_product(self, service, product_id):
        with pytest.raises(ProductNotFound):
            service.attach_video(AttachVideoDTO(product_id=product_id, video_url=VIDEO))


class TestQueries:
    def test_get_product(self, service, product):
        assert service.get_product(str(product.id)).title == "Loft on Queen"

    def test_get_unknown_product(self, service):
        with pytest.raises(ProductNotFound):
            service.get_product("nope")

    def test_list_with_filters(self, service, product):
        Product.objects.create(title="Cottage", type="house")

        assert [p.title for p in service.list_products({"type": "house"})] == [
            "Cottage"
        ]
        assert len(service.list_products()) == 2
