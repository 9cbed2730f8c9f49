"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``CustomerInfoDTO``: contact and shipping details.
- ``OrderItemDTO``: one cart line.
- ``OrderSummaryDTO``: totals as computed by the storefront, kept unrounded.
- ``CreateOrderDTO``: input for order creation (nested parts).
- ``DashboardStatsDTO``: output of the admin dashboard query.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from modules.orders.constants import (
    DEFAULT_COUNTRY,
    NOT_SPECIFIED,
    ContactMethod,
    OrderStatus,
    OrderType,
)

# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CustomerInfoDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: str
    email: str
    phone: str
    address: str
    city: str
    province: str
    postal_code: str
    country: str = DEFAULT_COUNTRY
    special_instructions: str = ""
    preferred_contact: str = ContactMethod.EMAIL

    @field_validator("preferred_contact")
    @classmethod
    def contact_method_must_be_known(cls, v: str) -> str:
        if v not in ContactMethod.values:
            raise ValueError(f"Unknown contact method '{v}'.")
        return v


class OrderItemDTO(BaseModel):
    """Immutable DTO for a single cart line.

    ``product_id`` is the storefront's identifier; nothing is looked up.
    """

    model_config = ConfigDict(frozen=True)

    product_id: str
    name: str
    quantity: int
    price: float
    original_price: Optional[float] = None
    discount_percentage: Optional[float] = None
    size: str = NOT_SPECIFIED
    color: str = NOT_SPECIFIED
    image: str = ""

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantity must be at least 1.")
        return v


class OrderSummaryDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    subtotal: float
    discount_amount: float = 0
    shipping_fee: float
    total_amount: float
    promo_code: str = ""
    items_count: int


class CreateOrderDTO(BaseModel):
    """Immutable DTO for order creation requests.

    Validates:
    - ``order_reference`` is not blank.
    - ``items`` contains at least one line.
    - ``status`` / ``order_type`` are known values.
    """

    model_config = ConfigDict(frozen=True)

    order_reference: str
    customer: CustomerInfoDTO
    items: List[OrderItemDTO]
    summary: OrderSummaryDTO
    status: str = OrderStatus.PENDING_CONTACT
    order_type: str = OrderType.MANUAL_PAYMENT

    @field_validator("order_reference")
    @classmethod
    def reference_must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Order reference must not be empty.")
        return v.strip()

    @field_validator("items")
    @classmethod
    def items_must_not_be_empty(cls, v: List[OrderItemDTO]) -> List[OrderItemDTO]:
        if not v:
            raise ValueError("Order must have at least one item.")
        return v

    @field_validator("status")
    @classmethod
    def status_must_be_known(cls, v: str) -> str:
        if v not in OrderStatus.values:
            raise ValueError(f"Unknown order status '{v}'.")
        return v

    @field_validator("order_type")
    @classmethod
    def order_type_must_be_known(cls, v: str) -> str:
        if v not in OrderType.values:
            raise ValueError(f"Unknown order type '{v}'.")
        return v

    @classmethod
    def from_validated(cls, data: Dict[str, Any]) -> CreateOrderDTO:
        """Build from ``CreateOrderSerializer.validated_data`` (flat customer/summary keys)."""
        customer_fields = CustomerInfoDTO.model_fields.keys()
        summary_fields = OrderSummaryDTO.model_fields.keys()
        optional = {
            key: data[key] for key in ("status", "order_type") if data.get(key)
        }
        return cls(
            order_reference=data["order_reference"],
            customer=CustomerInfoDTO(
                **{k: v for k, v in data.items() if k in customer_fields and v is not None}
            ),
            items=[
                OrderItemDTO(**{k: v for k, v in item.items() if v is not None})
                for item in data["items"]
            ],
            summary=OrderSummaryDTO(
                **{k: v for k, v in data.items() if k in summary_fields and v is not None}
            ),
            **optional,
        )


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class DashboardStatsDTO(BaseModel):
    """Aggregates shown on the admin dashboard."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    total_orders: int
    pending_contact_orders: int
    confirmed_orders: int
    shipped_orders: int
    total_revenue: float
    recent_orders: List[Any]
