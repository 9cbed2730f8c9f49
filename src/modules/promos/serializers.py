"""Promo DRF serializers (camelCase wire format)."""

from __future__ import annotations

from rest_framework import serializers

from modules.promos.models import PromoCode


class CreatePromoSerializer(serializers.Serializer):
    code = serializers.CharField(max_length=64)
    discount = serializers.FloatField()
    expiryDate = serializers.DateTimeField(
        source="expiry_date", required=False, allow_null=True
    )


class ApplyPromoSerializer(serializers.Serializer):
    # A missing code is answered with "Invalid promo code", not a 400.
    code = serializers.CharField(required=False, allow_blank=True, default="")
    totalAmount = serializers.FloatField(source="total_amount")


class PromoCodeSerializer(serializers.ModelSerializer):
    isActive = serializers.BooleanField(source="is_active")
    expiryDate = serializers.DateTimeField(source="expiry_date")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")

    class Meta:
        model = PromoCode
        fields = [
            "id",
            "code",
            "discount",
            "isActive",
            "expiryDate",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields
