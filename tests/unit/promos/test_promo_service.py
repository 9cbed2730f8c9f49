"""Unit tests for PromoService.

Covers:
- Unique codes on creation.
- Application outcomes: unknown, inactive, expired (even when inactive).
- Discount arithmetic: ``discount_amount + final_amount == total``.
"""

from __future__ import annotations

from datetime import timedelta

import pytest
from django.utils import timezone
from freezegun import freeze_time

from modules.promos.dtos import CreatePromoDTO
from modules.promos.exceptions import PromoCodeAlreadyExists
from modules.promos.models import PromoCode
from modules.promos.repositories.django_repository import PromoCodeDjangoRepository
from modules.promos.services import PromoService

pytestmark = pytest.mark.unit


@pytest.fixture()
def service():
    return PromoService(promo_repository=PromoCodeDjangoRepository())


class TestCreatePromo:
    def test_creates_active_code(self, service):
        promo = service.create_promo(CreatePromoDTO(code="SAVE10", discount=10))

        assert promo.is_active is True
        assert promo.expiry_date is None

    def test_duplicate_code(self, service):
        service.create_promo(CreatePromoDTO(code="SAVE10", discount=10))

        with pytest.raises(PromoCodeAlreadyExists):
            service.create_promo(CreatePromoDTO(code="SAVE10", discount=25))

        assert PromoCode.objects.get().discount == 10

    def test_list_newest_first(self, service):
        for code in ("A", "B", "C"):
            service.create_promo(CreatePromoDTO(code=code, discount=5))

        assert [p.code for p in service.list_promos()] == ["C", "B", "A"]


class TestApplyPromo:
    def test_unknown_code(self, service):
        result = service.apply_promo("NOPE", 100)

        assert result.success is False
        assert result.message == "Invalid promo code"

    def test_empty_code(self, service):
        assert service.apply_promo("", 100).message == "Invalid promo code"

    def test_lookup_is_case_sensitive(self, service):
        PromoCode.objects.create(code="SAVE10", discount=10)

        assert service.apply_promo("save10", 100).success is False

    def test_inactive_code(self, service):
        PromoCode.objects.create(code="OLD", discount=10, is_active=False)

        result = service.apply_promo("OLD", 100)

        assert result.success is False
        assert result.message == "Invalid promo code"

    def test_expired_code(self, service):
        PromoCode.objects.create(
            code="GONE", discount=10, expiry_date=timezone.now() - timedelta(days=1)
        )

        result = service.apply_promo("GONE", 100)

        assert result.success is False
        assert result.message == "Promo code expired"

    def test_expired_wins_over_inactive(self, service):
        PromoCode.objects.create(
            code="GONE",
            discount=10,
            is_active=False,
            expiry_date=timezone.now() - timedelta(days=1),
        )

        assert service.apply_promo("GONE", 100).message == "Promo code expired"

    def test_expiry_is_checked_at_apply_time(self, service):
        PromoCode.objects.create(
            code="SOON",
            discount=10,
            expiry_date=timezone.now() + timedelta(hours=1),
        )

        assert service.apply_promo("SOON", 100).success is True
        with freeze_time(timezone.now() + timedelta(hours=2)):
            assert service.apply_promo("SOON", 100).message == "Promo code expired"

    def test_discount_computed_without_rounding(self, service):
        PromoCode.objects.create(code="SAVE15", discount=15)

        result = service.apply_promo("SAVE15", 33.33)

        assert result.success is True
        assert result.code == "SAVE15"
        assert result.discount == 15
        assert result.discount_amount == 33.33 * 15 / 100
        assert result.final_amount == 33.33 - 33.33 * 15 / 100

    @pytest.mark.parametrize(
        ("total", "discount"),
        [(0, 10), (100, 0), (100, 100), (110, 10), (59.99, 12.5), (1234.56, 33)],
    )
    def test_parts_add_up_to_total(self, service, total, discount):
        PromoCode.objects.create(code="PCT", discount=discount)

        result = service.apply_promo("PCT", total)

        assert result.discount_amount + result.final_amount == pytest.approx(total)

    def test_rejection_serialises_without_amounts(self, service):
        assert service.apply_promo("NOPE", 10).as_response() == {
            "success": False,
            "message": "Invalid promo code",
        }
