"""Media DRF serializers.

Input serializers accept multipart forms (files travel separately in
``request.FILES``).  Output uses the camelCase cover shape
``{"url": ..., "publicId": ...}``.
"""

from __future__ import annotations

from rest_framework import serializers
from rest_framework.fields import empty

from modules.media.models import LongVideo, Media


class RawFormField(serializers.Field):
    """Pass a form value through untouched; repeated fields become a list.

    Parsing (JSON string vs list vs single value) happens in the DTOs.
    """

    def get_value(self, dictionary):
        if self.field_name not in dictionary:
            return empty
        if hasattr(dictionary, "getlist"):
            values = dictionary.getlist(self.field_name)
            return values if len(values) > 1 else values[0]
        return dictionary[self.field_name]

    def to_internal_value(self, data):
        return data

    def to_representation(self, value):
        return value


# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class CreateMediaSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    cover = serializers.FileField(required=False)


class UpdateMediaSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255, required=False, allow_blank=True)
    cover = serializers.FileField(required=False)


class CreateLongVideoSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True)
    category = serializers.CharField(max_length=100, required=False, allow_blank=True)
    price = serializers.FloatField(required=False)
    discount = serializers.FloatField(required=False)
    sizes = RawFormField(required=False)


class UpdateLongVideoSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    category = serializers.CharField(max_length=100, required=False, allow_blank=True)
    price = serializers.FloatField(required=False)
    discount = serializers.FloatField(required=False)
    sizes = RawFormField(required=False)
    existingCovers = RawFormField(source="existing_covers", required=False)


# ---------------------------------------------------------------------------
# Output Serializers (Read)
# ---------------------------------------------------------------------------


class CoverSerializer(serializers.Serializer):
    url = serializers.CharField(source="cover_url", read_only=True)
    publicId = serializers.CharField(source="cover_public_id", read_only=True)


class MediaSerializer(serializers.ModelSerializer):
    coverUrl = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Media
        fields = ["id", "title", "coverUrl", "createdAt", "updatedAt"]
        read_only_fields = fields

    def get_coverUrl(self, obj: Media):
        if not obj.cover_public_id:
            return None
        return CoverSerializer(obj).data


class LongVideoSerializer(serializers.ModelSerializer):
    coverUrls = serializers.JSONField(source="cover_urls", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = LongVideo
        fields = [
            "id",
            "title",
            "description",
            "category",
            "price",
            "discount",
            "sizes",
            "coverUrls",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields
