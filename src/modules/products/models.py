"""Property listing shown in the storefront catalogue.

Listings are managed outside this service; the API only reads them and
attaches a video URL to an existing listing.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Product(BaseModel):
    title = models.CharField(max_length=255, blank=True, default="")
    location = models.CharField(max_length=255, blank=True, default="")
    type = models.CharField(max_length=100, blank=True, default="")
    availability = models.CharField(max_length=100, blank=True, default="")
    price = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    image = models.JSONField(default=list, blank=True)
    beds = models.PositiveSmallIntegerField(null=True, blank=True)
    baths = models.DecimalField(max_digits=4, decimal_places=1, null=True, blank=True)
    sqft = models.PositiveIntegerField(null=True, blank=True)
    amenities = models.JSONField(default=list, blank=True)
    video_url = models.URLField(max_length=500, blank=True, default="")

    class Meta:
        db_table = "products"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["type"], name="products_type_idx"),
        ]

    def __str__(self) -> str:
        return self.title or str(self.id)
