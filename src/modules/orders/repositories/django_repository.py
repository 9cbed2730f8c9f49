"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.
Writes are wrapped in ``transaction.atomic()`` so an order and its items
land together or not at all; the unique index on ``order_reference``
is the final guard against duplicates.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import models, transaction
from django.db.models import Sum

from modules.orders.dtos import CreateOrderDTO
from modules.orders.models import ContactHistoryEntry, Order, OrderItem
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Create (aggregate root + children)
    # ------------------------------------------------------------------

    @transaction.atomic
    def create(self, dto: CreateOrderDTO) -> Order:
        """Create an order with its items atomically.

        Raises ``IntegrityError`` when ``order_reference`` is taken.
        """
        order = Order(
            order_reference=dto.order_reference,
            status=dto.status,
            order_type=dto.order_type,
            **dto.customer.model_dump(),
            **dto.summary.model_dump(),
        )
        order.save()

        OrderItem.objects.bulk_create(
            [
                OrderItem(order=order, position=position, **item.model_dump())
                for position, item in enumerate(dto.items)
            ]
        )

        logger.info(
            "order.persisted",
            order_id=str(order.id),
            reference=order.order_reference,
            item_count=len(dto.items),
        )
        return order

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def _with_relations(self) -> "models.QuerySet[Order]":
        return Order.objects.prefetch_related("items", "contact_history")

    def get_by_id(self, id: str) -> Optional[Order]:
        """Retrieve an order with prefetched items and contact history.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return self._with_relations().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_reference(self, reference: str) -> Optional[Order]:
        return self._with_relations().filter(order_reference=reference).first()

    def get_for_update(self, id: str) -> Optional[Order]:
        """Retrieve an order with a row-level lock (SELECT FOR UPDATE).

        Must run inside a transaction.  Returns ``None`` for non-existent
        or invalid IDs.
        """
        try:
            return Order.objects.select_for_update().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Order]:
        """List orders newest first.

        Examples of valid filters::

            {"status": "shipped"}
            {"email__iexact": "jane@example.com"}
        """
        queryset = self._with_relations()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    def queryset(self) -> "models.QuerySet[Order]":
        return self._with_relations().all()

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    @transaction.atomic
    def save(self, entity: Order) -> Order:
        """Persist (create or update) an order."""
        entity.save()
        logger.info("order.saved", order_id=str(entity.id), status=entity.status)
        return entity

    @transaction.atomic
    def add_contact(
        self,
        order: Order,
        method: str,
        notes: str,
        admin_user: str,
    ) -> ContactHistoryEntry:
        entry = ContactHistoryEntry.objects.create(
            order=order,
            method=method,
            notes=notes,
            admin_user=admin_user,
        )
        logger.info(
            "order.contact_logged",
            order_id=str(order.id),
            method=method,
            admin_user=admin_user,
        )
        return entry

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        queryset = Order.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return queryset.count()

    def total_revenue(self) -> float:
        result = Order.objects.aggregate(total=Sum("total_amount"))
        return result["total"] or 0.0
