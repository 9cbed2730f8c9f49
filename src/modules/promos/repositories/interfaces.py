"""Promo code repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.promos.models import PromoCode


class IPromoCodeRepository(IRepository["PromoCode"]):
    """Repository contract for promo codes."""

    @abstractmethod
    def get_by_code(self, code: str) -> Optional["PromoCode"]:
        """Exact, case-sensitive look-up regardless of ``is_active``."""
