"""Order API views.

Exposes the ``OrderService`` via HTTP using a DRF ViewSet whose actions
are wired to explicit paths in ``urls.py``.  Domain exceptions are
caught and translated into the JSON envelope; anything else falls
through to the project exception handler.

Checkout is anonymous and the admin panel has no accounts yet, so the
order endpoints are public.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.throttling import BaseThrottle
from rest_framework.viewsets import GenericViewSet

from modules.core.exceptions import pydantic_errors
from modules.core.pagination import StandardResultsSetPagination
from modules.core.responses import failure, success
from modules.orders.dtos import CreateOrderDTO
from modules.orders.exceptions import (
    DuplicateOrderReference,
    InvalidOrderStatus,
    OrderNotFound,
)
from modules.orders.filters import OrderFilter
from modules.orders.models import Order
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import (
    AddContactSerializer,
    CreateOrderSerializer,
    OrderSerializer,
    UpdateStatusSerializer,
)
from modules.orders.services import OrderService


class OrderViewSet(GenericViewSet):
    """ViewSet for Order operations.

    Uses ``OrderService`` with an injected repository (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.
    """

    queryset = Order.objects.all()
    serializer_class = OrderSerializer
    permission_classes = [AllowAny]
    filterset_class = OrderFilter

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(order_repository=OrderDjangoRepository())

    def get_throttles(self) -> list[BaseThrottle]:
        self.throttle_scope = "order_creation" if self.action == "create" else None
        return super().get_throttles()

    def get_queryset(self):
        return self._service.list_orders()

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/orders/create"""
        serializer = CreateOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            dto = CreateOrderDTO.from_validated(serializer.validated_data)
        except PydanticValidationError as exc:
            return failure("Validation error", errors=pydantic_errors(exc))

        try:
            order = self._service.create_order(dto)
        except DuplicateOrderReference as exc:
            return failure(str(exc))

        return success(
            status.HTTP_201_CREATED,
            message="Order created successfully. Our team will contact you soon.",
            order=OrderSerializer(order).data,
        )

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/orders?page=1&limit=10

        Optional filters (``email``, ``reference``, ``orderType``,
        ``created_after``, ``created_before``) are handled by ``OrderFilter``.
        """
        queryset = self.filter_queryset(self.get_queryset())
        paginator = StandardResultsSetPagination(results_key="orders")
        page = paginator.paginate_queryset(queryset, request, view=self)
        return paginator.get_paginated_response(OrderSerializer(page, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/orders/{pk}"""
        try:
            order = self._service.get_order(pk or "")
        except OrderNotFound:
            return failure("Order not found", status.HTTP_404_NOT_FOUND)
        return success(order=OrderSerializer(order).data)

    def by_status(self, request: Request, order_status: str) -> Response:
        """GET /api/orders/status/{status}"""
        try:
            orders = self._service.list_by_status(order_status)
        except InvalidOrderStatus:
            return failure("Invalid order status")
        return success(
            orders=OrderSerializer(orders, many=True).data,
            count=len(orders),
        )

    def dashboard(self, request: Request) -> Response:
        """GET /api/orders/stats/dashboard"""
        stats = self._service.dashboard_stats()
        return success(
            stats={
                "totalOrders": stats.total_orders,
                "pendingContactOrders": stats.pending_contact_orders,
                "confirmedOrders": stats.confirmed_orders,
                "shippedOrders": stats.shipped_orders,
                "totalRevenue": stats.total_revenue,
            },
            recentOrders=OrderSerializer(stats.recent_orders, many=True).data,
        )

    # ------------------------------------------------------------------
    # Status / Contact
    # ------------------------------------------------------------------

    def update_status(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/orders/{pk}/status"""
        serializer = UpdateStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            order = self._service.update_status(
                order_id=pk or "",
                new_status=data.get("status"),
                admin_notes=data.get("admin_notes"),
            )
        except OrderNotFound:
            return failure("Order not found", status.HTTP_404_NOT_FOUND)
        except InvalidOrderStatus:
            return failure("Invalid order status")

        return success(
            message="Order status updated successfully",
            order=OrderSerializer(order).data,
        )

    def add_contact(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/orders/{pk}/contact"""
        serializer = AddContactSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            order = self._service.add_contact(
                order_id=pk or "",
                notes=data.get("notes", ""),
                method=data.get("method"),
            )
        except OrderNotFound:
            return failure("Order not found", status.HTTP_404_NOT_FOUND)

        return success(
            message="Contact history added successfully",
            order=OrderSerializer(order).data,
        )
