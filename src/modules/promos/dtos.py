"""Promo DTOs for the Service Layer (Pydantic v2, immutable)."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

INVALID_PROMO_MESSAGE = "Invalid promo code"
EXPIRED_PROMO_MESSAGE = "Promo code expired"


class CreatePromoDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    discount: float
    expiry_date: Optional[datetime] = None

    @field_validator("code")
    @classmethod
    def code_must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Promo code must not be empty.")
        return v.strip()


class PromoApplicationDTO(BaseModel):
    """Outcome of applying a code to a cart total.

    A rejected code is a normal outcome (``success=False`` with a
    ``message``), not an error.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    message: Optional[str] = None
    code: Optional[str] = None
    discount: Optional[float] = None
    discount_amount: Optional[float] = None
    final_amount: Optional[float] = None

    @classmethod
    def rejected(cls, message: str) -> "PromoApplicationDTO":
        return cls(success=False, message=message)

    def as_response(self) -> dict:
        if not self.success:
            return {"success": False, "message": self.message}
        return {
            "success": True,
            "code": self.code,
            "discount": self.discount,
            "discountAmount": self.discount_amount,
            "finalAmount": self.final_amount,
        }
