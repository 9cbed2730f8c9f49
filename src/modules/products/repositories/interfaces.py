"""Product repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from django.db import models

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for catalogue listings."""

    @abstractmethod
    def queryset(self) -> "models.QuerySet[Product]":
        """All listings newest first, for filtering in the view."""
