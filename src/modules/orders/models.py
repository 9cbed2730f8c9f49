"""Order, OrderItem and ContactHistoryEntry models.

Checkout here is a manual-contact workflow: the storefront submits the
cart with the customer's contact and shipping details, and staff call the
customer back before confirming.

- ``order_reference`` is generated by the storefront and is unique.
- Customer details and the order summary are stored exactly as submitted;
  totals are **not** recomputed server-side.
- Line items keep their submission order (``position``).
- Contact history is append-only; entries are never edited or removed.
- Orders are never deleted through the API.
"""

from __future__ import annotations

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from modules.core.models import BaseModel
from modules.orders.constants import (
    DEFAULT_COUNTRY,
    NOT_SPECIFIED,
    ContactMethod,
    OrderStatus,
    OrderType,
)


class Order(BaseModel):
    """Order aggregate root.

    ``id`` (UUIDv7) is used in URLs; ``order_reference`` is the identifier
    the customer sees and quotes when staff get in touch.
    """

    order_reference: models.CharField = models.CharField(max_length=100, unique=True)
    user: models.ForeignKey = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="orders",
    )

    # Customer info
    first_name: models.CharField = models.CharField(max_length=100)
    last_name: models.CharField = models.CharField(max_length=100)
    email: models.EmailField = models.EmailField(max_length=254)
    phone: models.CharField = models.CharField(max_length=40)
    address: models.CharField = models.CharField(max_length=255)
    city: models.CharField = models.CharField(max_length=100)
    province: models.CharField = models.CharField(max_length=100)
    postal_code: models.CharField = models.CharField(max_length=20)
    country: models.CharField = models.CharField(max_length=100, default=DEFAULT_COUNTRY)
    special_instructions: models.TextField = models.TextField(blank=True, default="")
    preferred_contact: models.CharField = models.CharField(
        max_length=20,
        choices=ContactMethod.choices,
        default=ContactMethod.EMAIL,
    )

    # Order summary (as computed by the storefront, stored unrounded)
    subtotal: models.FloatField = models.FloatField()
    discount_amount: models.FloatField = models.FloatField(default=0)
    shipping_fee: models.FloatField = models.FloatField()
    total_amount: models.FloatField = models.FloatField()
    promo_code: models.CharField = models.CharField(max_length=50, blank=True, default="")
    items_count: models.PositiveIntegerField = models.PositiveIntegerField()

    status: models.CharField = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING_CONTACT,
    )
    order_type: models.CharField = models.CharField(
        max_length=20,
        choices=OrderType.choices,
        default=OrderType.MANUAL_PAYMENT,
    )
    admin_notes: models.TextField = models.TextField(blank=True, default="")

    class Meta:
        db_table = "orders"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["email"], name="orders_email_idx"),
            models.Index(fields=["status"], name="orders_status_idx"),
            models.Index(fields=["-created_at"], name="orders_created_idx"),
        ]

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.order_reference} ({self.status})"


class OrderItem(BaseModel):
    """Cart line as submitted by the storefront.

    ``product_id`` is the storefront's identifier and is not a foreign key:
    there is no stock or catalogue check at checkout.
    """

    order: models.ForeignKey = models.ForeignKey(
        "orders.Order",
        on_delete=models.CASCADE,
        related_name="items",
    )
    position: models.PositiveIntegerField = models.PositiveIntegerField(default=0)
    product_id: models.CharField = models.CharField(max_length=100)
    name: models.CharField = models.CharField(max_length=255)
    quantity: models.PositiveIntegerField = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
    )
    price: models.FloatField = models.FloatField()
    original_price: models.FloatField = models.FloatField(null=True, blank=True)
    discount_percentage: models.FloatField = models.FloatField(null=True, blank=True)
    size: models.CharField = models.CharField(max_length=50, default=NOT_SPECIFIED)
    color: models.CharField = models.CharField(max_length=50, default=NOT_SPECIFIED)
    image: models.CharField = models.CharField(max_length=500, blank=True, default="")

    class Meta:
        db_table = "order_items"
        ordering = ["position"]

    def __str__(self) -> str:
        return f"{self.name} x{self.quantity}"


class ContactHistoryEntry(BaseModel):
    """Append-only log of staff contact attempts with the customer."""

    order: models.ForeignKey = models.ForeignKey(
        "orders.Order",
        on_delete=models.CASCADE,
        related_name="contact_history",
    )
    contact_date: models.DateTimeField = models.DateTimeField(default=timezone.now)
    method: models.CharField = models.CharField(max_length=20, blank=True, default="")
    notes: models.TextField = models.TextField(blank=True, default="")
    admin_user: models.CharField = models.CharField(max_length=100, blank=True, default="")

    class Meta:
        db_table = "order_contact_history"
        ordering = ["contact_date", "created_at"]
        indexes = [
            models.Index(
                fields=["order", "contact_date"],
                name="och_order_date_idx",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.order} : {self.method} by {self.admin_user}"
