"""Django ORM implementation of the promo code repository."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.promos.models import PromoCode
from modules.promos.repositories.interfaces import IPromoCodeRepository

logger = structlog.get_logger(__name__)


class PromoCodeDjangoRepository(IPromoCodeRepository):
    def get_by_id(self, id: str) -> Optional[PromoCode]:
        try:
            return PromoCode.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_code(self, code: str) -> Optional[PromoCode]:
        return PromoCode.objects.filter(code=code).first()

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[PromoCode]:
        queryset = PromoCode.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    @transaction.atomic
    def save(self, entity: PromoCode) -> PromoCode:
        entity.save()
        logger.info("promo.saved", promo_id=str(entity.id), code=entity.code)
        return entity
