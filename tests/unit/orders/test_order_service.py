"""Unit tests for OrderService.

Covers:
- Creation with defaults and duplicate-reference rejection.
- Any-to-any status moves, including out of delivered and cancelled.
- Contact history appends (status update and explicit contact logging).
- Status listing and dashboard aggregates.
"""

from __future__ import annotations

import pytest

from modules.orders.constants import (
    CONTACT_ADMIN_USER,
    INITIAL_CONTACT_NOTE,
    ContactMethod,
    OrderStatus,
    OrderType,
)
from modules.orders.dtos import (
    CreateOrderDTO,
    CustomerInfoDTO,
    OrderItemDTO,
    OrderSummaryDTO,
)
from modules.orders.exceptions import (
    DuplicateOrderReference,
    InvalidOrderStatus,
    OrderNotFound,
)
from modules.orders.models import Order, OrderItem
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.services import OrderService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def service():
    return OrderService(order_repository=OrderDjangoRepository())


def make_dto(reference: str = "ORD_1", total: str = "110.00", **extra) -> CreateOrderDTO:
    return CreateOrderDTO(
        order_reference=reference,
        customer=CustomerInfoDTO(
            first_name="Jane",
            last_name="Doe",
            email="jane@example.com",
            phone="4165550100",
            address="1 King St W",
            city="Toronto",
            province="ON",
            postal_code="M5H 1A1",
        ),
        items=[
            OrderItemDTO(product_id="p-1", name="Shirt", quantity=1, price=60),
            OrderItemDTO(product_id="p-2", name="Scarf", quantity=2, price=20),
        ],
        summary=OrderSummaryDTO(
            subtotal=100,
            shipping_fee=10,
            total_amount=float(total),
            items_count=3,
        ),
        **extra,
    )


@pytest.fixture()
def order(service):
    return service.create_order(make_dto())


# ---------------------------------------------------------------------------
# Create
# ---------------------------------------------------------------------------


class TestCreateOrder:
    def test_defaults_applied(self, service):
        order = service.create_order(make_dto())

        assert order.status == OrderStatus.PENDING_CONTACT
        assert order.order_type == OrderType.MANUAL_PAYMENT
        assert order.country == "Canada"
        assert order.preferred_contact == ContactMethod.EMAIL
        assert order.contact_history.count() == 0

    def test_items_keep_submission_order(self, service):
        order = service.create_order(make_dto())

        assert [item.name for item in order.items.all()] == ["Shirt", "Scarf"]
        assert order.items.first().size == "Not specified"

    def test_summary_stored_as_sent(self, service):
        order = service.create_order(make_dto(total="999.99"))

        order.refresh_from_db()
        assert order.total_amount == 999.99
        assert order.subtotal == 100.0

    def test_fractional_cents_are_not_rounded(self, service):
        order = service.create_order(make_dto(total="99.995"))

        order.refresh_from_db()
        assert order.total_amount == 99.995

    def test_explicit_status_and_type(self, service):
        order = service.create_order(
            make_dto(status="confirmed", order_type="online_payment")
        )

        assert order.status == OrderStatus.CONFIRMED
        assert order.order_type == OrderType.ONLINE_PAYMENT

    def test_duplicate_reference_rejected_without_writes(self, service):
        service.create_order(make_dto())

        with pytest.raises(DuplicateOrderReference):
            service.create_order(make_dto(total="50.00"))

        assert Order.objects.count() == 1
        assert OrderItem.objects.count() == 2
        assert Order.objects.get().total_amount == 110.0


# ---------------------------------------------------------------------------
# Status updates
# ---------------------------------------------------------------------------


class TestUpdateStatus:
    def test_unknown_order(self, service):
        with pytest.raises(OrderNotFound):
            service.update_status("0190a4f2-0000-7000-8000-000000000000", "contacted")

    def test_malformed_id_is_not_found(self, service):
        with pytest.raises(OrderNotFound):
            service.update_status("not-a-uuid", "contacted")

    def test_unknown_status(self, service, order):
        with pytest.raises(InvalidOrderStatus):
            service.update_status(str(order.id), "lost_in_mail")

    def test_any_status_can_follow_any_other(self, service, order):
        updated = service.update_status(str(order.id), OrderStatus.SHIPPED)
        assert updated.status == OrderStatus.SHIPPED

        updated = service.update_status(str(order.id), OrderStatus.PENDING_CONTACT)
        assert updated.status == OrderStatus.PENDING_CONTACT

    @pytest.mark.parametrize("final", [OrderStatus.DELIVERED, OrderStatus.CANCELLED])
    def test_delivered_and_cancelled_can_be_reopened(self, service, order, final):
        service.update_status(str(order.id), final)

        updated = service.update_status(str(order.id), OrderStatus.CONFIRMED)

        assert updated.status == OrderStatus.CONFIRMED

    def test_full_happy_path(self, service, order):
        for status in (
            OrderStatus.CONTACTED,
            OrderStatus.CONFIRMED,
            OrderStatus.PREPARING,
            OrderStatus.READY_FOR_SHIPPING,
            OrderStatus.SHIPPED,
            OrderStatus.DELIVERED,
        ):
            order = service.update_status(str(order.id), status)

        assert order.status == OrderStatus.DELIVERED

    def test_contacted_appends_history_entry(self, service, order):
        updated = service.update_status(str(order.id), OrderStatus.CONTACTED)

        entries = list(updated.contact_history.all())
        assert len(entries) == 1
        assert entries[0].method == ContactMethod.PHONE
        assert entries[0].notes == INITIAL_CONTACT_NOTE
        assert entries[0].admin_user == CONTACT_ADMIN_USER

    def test_contacted_twice_appends_twice(self, service, order):
        service.update_status(str(order.id), OrderStatus.CONTACTED)
        updated = service.update_status(str(order.id), OrderStatus.CONTACTED)

        assert updated.status == OrderStatus.CONTACTED
        assert updated.contact_history.count() == 2

    def test_other_statuses_do_not_touch_history(self, service, order):
        updated = service.update_status(str(order.id), OrderStatus.CONFIRMED)

        assert updated.contact_history.count() == 0

    def test_admin_notes_only(self, service, order):
        updated = service.update_status(str(order.id), None, admin_notes="Call after 5pm")

        assert updated.status == OrderStatus.PENDING_CONTACT
        assert updated.admin_notes == "Call after 5pm"


# ---------------------------------------------------------------------------
# Contact logging
# ---------------------------------------------------------------------------


class TestAddContact:
    def test_first_contact_advances_pending_order(self, service, order):
        updated = service.add_contact(str(order.id), notes="Left a voicemail")

        assert updated.status == OrderStatus.CONTACTED
        entry = updated.contact_history.get()
        assert entry.method == ContactMethod.PHONE
        assert entry.notes == "Left a voicemail"

    def test_later_contact_keeps_status(self, service, order):
        service.update_status(str(order.id), OrderStatus.CONFIRMED)

        updated = service.add_contact(
            str(order.id), notes="Sent invoice", method=ContactMethod.EMAIL
        )

        assert updated.status == OrderStatus.CONFIRMED
        assert updated.contact_history.get().method == ContactMethod.EMAIL

    def test_history_is_chronological(self, service, order):
        service.add_contact(str(order.id), notes="first")
        updated = service.add_contact(str(order.id), notes="second")

        assert [e.notes for e in updated.contact_history.all()] == ["first", "second"]

    def test_unknown_order(self, service):
        with pytest.raises(OrderNotFound):
            service.add_contact("0190a4f2-0000-7000-8000-000000000000", notes="x")


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


class TestQueries:
    def test_list_by_status(self, service):
        first = service.create_order(make_dto("ORD_A"))
        service.create_order(make_dto("ORD_B"))
        service.update_status(str(first.id), OrderStatus.CONFIRMED)

        pending = service.list_by_status(OrderStatus.PENDING_CONTACT)

        assert [o.order_reference for o in pending] == ["ORD_B"]

    def test_list_by_unknown_status(self, service):
        with pytest.raises(InvalidOrderStatus):
            service.list_by_status("archived")

    def test_orders_newest_first(self, service):
        for reference in ("ORD_A", "ORD_B", "ORD_C"):
            service.create_order(make_dto(reference))

        assert [o.order_reference for o in service.list_orders()] == [
            "ORD_C",
            "ORD_B",
            "ORD_A",
        ]

    def test_dashboard_stats(self, service):
        service.create_order(make_dto("ORD_A", total="10.106"))
        confirmed = service.create_order(make_dto("ORD_B", total="20.20"))
        service.update_status(str(confirmed.id), OrderStatus.CONFIRMED)

        stats = service.dashboard_stats()

        assert stats.total_orders == 2
        assert stats.pending_contact_orders == 1
        assert stats.confirmed_orders == 1
        assert stats.shipped_orders == 0
        assert stats.total_revenue == pytest.approx(30.31)
        assert [o.order_reference for o in stats.recent_orders] == ["ORD_B", "ORD_A"]

    def test_dashboard_recent_orders_capped_at_five(self, service):
        for index in range(7):
            service.create_order(make_dto(f"ORD_{index}"))

        assert len(service.dashboard_stats().recent_orders) == 5

    def test_dashboard_on_empty_store(self, service):
        stats = service.dashboard_stats()

        assert stats.total_orders == 0
        assert stats.total_revenue == 0.0
