"""Metadata for cover images hosted on Cloudinary.

Only references are stored here (secure URL + Cloudinary ``public_id``);
the binaries live on the media host.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Media(BaseModel):
    """A titled record with at most one cover image."""

    title = models.CharField(max_length=255)
    cover_url = models.URLField(max_length=500, blank=True, default="")
    cover_public_id = models.CharField(max_length=255, blank=True, default="")

    class Meta:
        db_table = "media"
        ordering = ["-created_at", "-id"]

    def public_ids(self) -> list[str]:
        return [self.cover_public_id] if self.cover_public_id else []

    def __str__(self) -> str:
        return self.title


class LongVideo(BaseModel):
    """A long-form product video with several cover images.

    ``cover_urls`` keeps the wire shape ``[{"url": ..., "publicId": ...}]``
    in upload order.
    """

    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    category = models.CharField(max_length=100, blank=True, default="")
    price = models.FloatField(default=0)
    discount = models.FloatField(default=0)
    sizes = models.JSONField(default=list, blank=True)
    cover_urls = models.JSONField(default=list, blank=True)

    class Meta:
        db_table = "long_videos"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["category"], name="long_videos_category_idx"),
        ]

    def public_ids(self) -> list[str]:
        return [cover["publicId"] for cover in self.cover_urls if cover.get("publicId")]

    def __str__(self) -> str:
        return self.title
