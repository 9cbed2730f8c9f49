"""Order DRF serializers for API input/output.

The storefront and admin panel speak camelCase and see the order as
nested ``customerInfo`` / ``orderItems`` / ``orderSummary`` documents,
while the model is flat.  ``source="*"`` maps the nested sections onto
the flat model on output and flattens them into ``validated_data`` on
input, so the same section serializers serve both directions.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.constants import (
    DEFAULT_COUNTRY,
    NOT_SPECIFIED,
    ContactMethod,
    OrderStatus,
    OrderType,
)
from modules.orders.models import Order

# ---------------------------------------------------------------------------
# Sections (input + output)
# ---------------------------------------------------------------------------


class CustomerInfoSerializer(serializers.Serializer):
    firstName = serializers.CharField(source="first_name", max_length=100)
    lastName = serializers.CharField(source="last_name", max_length=100)
    email = serializers.EmailField()
    phone = serializers.CharField(max_length=40)
    address = serializers.CharField(max_length=255)
    city = serializers.CharField(max_length=100)
    province = serializers.CharField(max_length=100)
    postalCode = serializers.CharField(source="postal_code", max_length=20)
    country = serializers.CharField(required=False, default=DEFAULT_COUNTRY)
    specialInstructions = serializers.CharField(
        source="special_instructions", required=False, default="", allow_blank=True
    )
    preferredContact = serializers.ChoiceField(
        source="preferred_contact",
        choices=ContactMethod.choices,
        required=False,
        default=ContactMethod.EMAIL,
    )


class OrderItemSerializer(serializers.Serializer):
    productId = serializers.CharField(source="product_id", max_length=100)
    name = serializers.CharField(max_length=255)
    quantity = serializers.IntegerField(min_value=1)
    price = serializers.FloatField()
    originalPrice = serializers.FloatField(
        source="original_price", required=False, allow_null=True
    )
    discountPercentage = serializers.FloatField(
        source="discount_percentage", required=False, allow_null=True
    )
    size = serializers.CharField(required=False, default=NOT_SPECIFIED)
    color = serializers.CharField(required=False, default=NOT_SPECIFIED)
    image = serializers.CharField(required=False, default="", allow_blank=True)


class OrderSummarySerializer(serializers.Serializer):
    subtotal = serializers.FloatField()
    discountAmount = serializers.FloatField(
        source="discount_amount", required=False, default=0
    )
    shippingFee = serializers.FloatField(source="shipping_fee")
    totalAmount = serializers.FloatField(source="total_amount")
    promoCode = serializers.CharField(
        source="promo_code", required=False, default="", allow_blank=True
    )
    itemsCount = serializers.IntegerField(source="items_count", min_value=0)


# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class CreateOrderSerializer(serializers.Serializer):
    """Validates the checkout payload sent by the storefront."""

    orderReference = serializers.CharField(source="order_reference", max_length=100)
    customerInfo = CustomerInfoSerializer(source="*")
    orderItems = OrderItemSerializer(source="items", many=True, allow_empty=False)
    orderSummary = OrderSummarySerializer(source="*")
    orderStatus = serializers.ChoiceField(
        source="status", choices=OrderStatus.choices, required=False
    )
    orderType = serializers.ChoiceField(
        source="order_type", choices=OrderType.choices, required=False
    )


class UpdateStatusSerializer(serializers.Serializer):
    # Not a ChoiceField: unknown statuses are rejected by the service.
    orderStatus = serializers.CharField(
        source="status", required=False, allow_blank=True, allow_null=True
    )
    adminNotes = serializers.CharField(
        source="admin_notes", required=False, allow_blank=True, allow_null=True
    )


class AddContactSerializer(serializers.Serializer):
    method = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, max_length=20
    )
    notes = serializers.CharField(required=False, default="", allow_blank=True)


# ---------------------------------------------------------------------------
# Output Serializers (Read)
# ---------------------------------------------------------------------------


class ContactHistorySerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    contactDate = serializers.DateTimeField(source="contact_date", read_only=True)
    method = serializers.CharField(read_only=True)
    notes = serializers.CharField(read_only=True)
    adminUser = serializers.CharField(source="admin_user", read_only=True)


class OrderSerializer(serializers.ModelSerializer):
    """Read serializer rendering the order as the nested storefront document."""

    orderReference = serializers.CharField(source="order_reference", read_only=True)
    customerInfo = CustomerInfoSerializer(source="*", read_only=True)
    orderItems = OrderItemSerializer(source="items", many=True, read_only=True)
    orderSummary = OrderSummarySerializer(source="*", read_only=True)
    orderStatus = serializers.CharField(source="status", read_only=True)
    orderType = serializers.CharField(source="order_type", read_only=True)
    adminNotes = serializers.CharField(source="admin_notes", read_only=True)
    contactHistory = ContactHistorySerializer(
        source="contact_history", many=True, read_only=True
    )
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "orderReference",
            "customerInfo",
            "orderItems",
            "orderSummary",
            "orderStatus",
            "orderType",
            "adminNotes",
            "contactHistory",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields
