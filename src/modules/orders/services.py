"""Order service layer (Use Cases).

Orchestrates order creation, status management, contact logging and
the admin dashboard.  Write operations are atomic: the service defines
the unit-of-work boundary.

Rules enforced here:
- ``order_reference`` is unique; a duplicate create writes nothing.
- Status values must be one of ``OrderStatus``; any status may follow
  any other, including ``delivered`` and ``cancelled``.
- Moving to ``contacted`` always appends a contact-history entry, even
  when the order was already contacted.
- Logging a contact on a ``pending_contact`` order advances it to
  ``contacted``.
- ``order_summary`` figures are stored as submitted.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import IntegrityError, transaction

from modules.orders.constants import (
    CONTACT_ADMIN_USER,
    INITIAL_CONTACT_NOTE,
    RECENT_ORDERS_LIMIT,
    ContactMethod,
    OrderStatus,
)
from modules.orders.dtos import DashboardStatsDTO
from modules.orders.exceptions import (
    DuplicateOrderReference,
    InvalidOrderStatus,
    OrderNotFound,
)

if TYPE_CHECKING:
    from django.db import models

    from modules.orders.dtos import CreateOrderDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


def ensure_known_status(status: str) -> str:
    """Return *status* unchanged, or raise ``InvalidOrderStatus``."""
    if status not in OrderStatus.values:
        raise InvalidOrderStatus(f"Invalid order status '{status}'.")
    return status


class OrderService:
    """Application service for Order use-cases.

    Receives an ``IOrderRepository`` via constructor injection (DIP).
    """

    def __init__(self, order_repository: IOrderRepository) -> None:
        self._order_repo = order_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_order(self, dto: CreateOrderDTO) -> Order:
        """Persist a new order submitted by the storefront.

        Raises:
            DuplicateOrderReference: ``order_reference`` already used.
        """
        log = logger.bind(reference=dto.order_reference, email=dto.customer.email)
        log.info("order.creation_started")

        if self._order_repo.get_by_reference(dto.order_reference):
            log.warning("order.duplicate_reference")
            raise DuplicateOrderReference("Order reference already exists")

        try:
            order = self._order_repo.create(dto)
        except IntegrityError as exc:
            # Lost a race with a concurrent create of the same reference.
            log.warning("order.duplicate_reference", error=str(exc))
            raise DuplicateOrderReference("Order reference already exists") from exc

        log.info("order.created", order_id=str(order.id))
        return self._order_repo.get_by_id(str(order.id)) or order

    @transaction.atomic
    def update_status(
        self,
        order_id: str,
        new_status: Optional[str] = None,
        admin_notes: Optional[str] = None,
    ) -> Order:
        """Move an order to *new_status* and/or replace its admin notes.

        An empty *new_status* leaves the status untouched.

        Raises:
            OrderNotFound: order does not exist.
            InvalidOrderStatus: *new_status* is not a known status.
        """
        order = self._order_repo.get_for_update(order_id)
        if not order:
            raise OrderNotFound(f"Order {order_id} not found.")

        log = logger.bind(
            order_id=str(order_id),
            current_status=order.status,
            new_status=new_status,
        )

        if new_status:
            order.status = ensure_known_status(new_status)

        if admin_notes:
            order.admin_notes = admin_notes

        self._order_repo.save(order)

        if new_status == OrderStatus.CONTACTED:
            self._order_repo.add_contact(
                order,
                method=ContactMethod.PHONE,
                notes=INITIAL_CONTACT_NOTE,
                admin_user=CONTACT_ADMIN_USER,
            )

        log.info("order.status_updated")
        return self._order_repo.get_by_id(str(order.id)) or order

    @transaction.atomic
    def add_contact(
        self,
        order_id: str,
        notes: str = "",
        method: Optional[str] = None,
    ) -> Order:
        """Log a contact attempt; first contact advances ``pending_contact``.

        Raises:
            OrderNotFound: order does not exist.
        """
        order = self._order_repo.get_for_update(order_id)
        if not order:
            raise OrderNotFound(f"Order {order_id} not found.")

        self._order_repo.add_contact(
            order,
            method=method or ContactMethod.PHONE,
            notes=notes,
            admin_user=CONTACT_ADMIN_USER,
        )

        if order.status == OrderStatus.PENDING_CONTACT:
            order.status = OrderStatus.CONTACTED
            self._order_repo.save(order)
            logger.info("order.auto_contacted", order_id=str(order.id))

        return self._order_repo.get_by_id(str(order.id)) or order

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: str) -> Order:
        """Retrieve a single order by ID.

        Raises:
            OrderNotFound: if the order does not exist.
        """
        order = self._order_repo.get_by_id(order_id)
        if not order:
            raise OrderNotFound(f"Order {order_id} not found.")
        return order

    def list_orders(self) -> "models.QuerySet[Order]":
        """All orders newest first; the view paginates."""
        return self._order_repo.queryset()

    def list_by_status(self, status: str) -> List[Order]:
        """Orders in *status*, newest first.

        Raises:
            InvalidOrderStatus: *status* is not a known status.
        """
        ensure_known_status(status)
        return self._order_repo.list({"status": status})

    def dashboard_stats(self) -> DashboardStatsDTO:
        revenue = Decimal(str(self._order_repo.total_revenue())).quantize(
            Decimal("0.01"), rounding=ROUND_HALF_UP
        )
        return DashboardStatsDTO(
            total_orders=self._order_repo.count(),
            pending_contact_orders=self._order_repo.count(
                {"status": OrderStatus.PENDING_CONTACT}
            ),
            confirmed_orders=self._order_repo.count({"status": OrderStatus.CONFIRMED}),
            shipped_orders=self._order_repo.count({"status": OrderStatus.SHIPPED}),
            total_revenue=float(revenue),
            recent_orders=list(self._order_repo.queryset()[:RECENT_ORDERS_LIMIT]),
        )
