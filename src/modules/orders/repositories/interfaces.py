"""Order repository interface.

Extends ``IRepository[Order]`` with the look-ups the Order aggregate
needs: atomic creation with items, reference uniqueness, contact-history
appends and the aggregates behind the admin dashboard.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from django.db import models

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.dtos import CreateOrderDTO
    from modules.orders.models import ContactHistoryEntry, Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root.

    The aggregate includes ``OrderItem`` children and the append-only
    ``ContactHistoryEntry`` log.
    """

    @abstractmethod
    def create(self, dto: CreateOrderDTO) -> Order:
        """Create an order with its items atomically."""

    @abstractmethod
    def get_by_reference(self, reference: str) -> Optional[Order]:
        """Retrieve an order by its unique ``order_reference``."""

    @abstractmethod
    def get_for_update(self, id: str) -> Optional[Order]:
        """Retrieve an order with a row-level lock (SELECT FOR UPDATE)."""

    @abstractmethod
    def queryset(self) -> "models.QuerySet[Order]":
        """All orders newest first, with relations prefetched (for pagination)."""

    @abstractmethod
    def add_contact(
        self,
        order: Order,
        method: str,
        notes: str,
        admin_user: str,
    ) -> ContactHistoryEntry:
        """Append an entry to the order's contact history."""

    @abstractmethod
    def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        """Count orders matching the optional filters."""

    @abstractmethod
    def total_revenue(self) -> float:
        """Sum of ``total_amount`` across all orders."""
