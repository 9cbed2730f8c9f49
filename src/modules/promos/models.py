"""Percentage promo codes applied at checkout."""

from __future__ import annotations

from django.db import models
from django.utils import timezone

from modules.core.models import BaseModel


class PromoCode(BaseModel):
    """A promo code such as ``SAVE10``.

    ``code`` is matched exactly (case-sensitive).  ``discount`` is a
    percentage: ``10`` means 10% off.
    """

    code = models.CharField(max_length=64, unique=True)
    discount = models.FloatField()
    is_active = models.BooleanField(default=True)
    expiry_date = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "promo_codes"
        ordering = ["-created_at", "-id"]

    def is_expired(self, now=None) -> bool:
        if self.expiry_date is None:
            return False
        return (now or timezone.now()) > self.expiry_date

    def __str__(self) -> str:
        return f"{self.code} ({self.discount:g}%)"
