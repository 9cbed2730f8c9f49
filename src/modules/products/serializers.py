"""Product DRF serializers (camelCase, as the storefront expects)."""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class AttachVideoSerializer(serializers.Serializer):
    # Presence is checked by the DTO so the error message stays uniform.
    propertyId = serializers.CharField(
        source="product_id", required=False, allow_blank=True, default=""
    )
    videoUrl = serializers.CharField(
        source="video_url", required=False, allow_blank=True, default=""
    )


class ProductSerializer(serializers.ModelSerializer):
    price = serializers.FloatField(allow_null=True)
    baths = serializers.FloatField(allow_null=True)
    videoUrl = serializers.CharField(source="video_url")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")

    class Meta:
        model = Product
        fields = [
            "id",
            "title",
            "location",
            "type",
            "availability",
            "price",
            "image",
            "beds",
            "baths",
            "sqft",
            "amenities",
            "videoUrl",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields
