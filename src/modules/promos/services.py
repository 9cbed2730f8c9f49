"""Promo service layer (Use Cases).

Rules enforced here:
- ``code`` is unique; creating an existing code is a conflict.
- Applying looks the code up exactly.  An expired code is reported as
  expired even when it is also inactive; an unknown or inactive code is
  reported as invalid.  Neither case raises.
- ``discount_amount = total * discount / 100`` with no rounding, so
  ``discount_amount + final_amount == total``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import IntegrityError, transaction
from django.utils import timezone

from modules.promos.dtos import (
    EXPIRED_PROMO_MESSAGE,
    INVALID_PROMO_MESSAGE,
    PromoApplicationDTO,
)
from modules.promos.exceptions import PromoCodeAlreadyExists
from modules.promos.models import PromoCode

if TYPE_CHECKING:
    from modules.promos.dtos import CreatePromoDTO
    from modules.promos.repositories.interfaces import IPromoCodeRepository

logger = structlog.get_logger(__name__)


class PromoService:
    """Application service for promo codes.

    Receives an ``IPromoCodeRepository`` via constructor injection (DIP).
    """

    def __init__(self, promo_repository: IPromoCodeRepository) -> None:
        self._repo = promo_repository

    @transaction.atomic
    def create_promo(self, dto: CreatePromoDTO) -> PromoCode:
        """Raises ``PromoCodeAlreadyExists`` if *dto.code* is taken."""
        log = logger.bind(code=dto.code)

        if self._repo.get_by_code(dto.code):
            log.warning("promo.duplicate_code")
            raise PromoCodeAlreadyExists("Promo code already exists")

        promo = PromoCode(
            code=dto.code,
            discount=dto.discount,
            expiry_date=dto.expiry_date,
        )
        try:
            with transaction.atomic():
                promo = self._repo.save(promo)
        except IntegrityError as exc:
            log.warning("promo.duplicate_code", error=str(exc))
            raise PromoCodeAlreadyExists("Promo code already exists") from exc

        log.info("promo.created", promo_id=str(promo.id), discount=promo.discount)
        return promo

    def apply_promo(self, code: str, total_amount: float) -> PromoApplicationDTO:
        log = logger.bind(code=code)
        promo = self._repo.get_by_code(code) if code else None

        if promo is None:
            log.info("promo.rejected", reason="unknown")
            return PromoApplicationDTO.rejected(INVALID_PROMO_MESSAGE)

        if promo.is_expired(timezone.now()):
            log.info("promo.rejected", reason="expired")
            return PromoApplicationDTO.rejected(EXPIRED_PROMO_MESSAGE)

        if not promo.is_active:
            log.info("promo.rejected", reason="inactive")
            return PromoApplicationDTO.rejected(INVALID_PROMO_MESSAGE)

        discount_amount = total_amount * promo.discount / 100
        final_amount = total_amount - discount_amount

        log.info("promo.applied", discount=promo.discount, total=total_amount)
        return PromoApplicationDTO(
            success=True,
            code=promo.code,
            discount=promo.discount,
            discount_amount=discount_amount,
            final_amount=final_amount,
        )

    def list_promos(self) -> List[PromoCode]:
        """All promo codes, newest first."""
        return self._repo.list()
