"""Product service layer (Use Cases).

Read access to the catalogue plus the one write the storefront admin
performs: attaching a video URL to a listing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog
from django.db import transaction

from modules.products.exceptions import ProductNotFound

if TYPE_CHECKING:
    from django.db import models

    from modules.products.dtos import AttachVideoDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for catalogue use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    @transaction.atomic
    def attach_video(self, dto: AttachVideoDTO) -> Product:
        """Store *dto.video_url* on the listing, replacing any previous URL.

        Raises:
            ProductNotFound: if the listing does not exist.
        """
        product = self._repo.get_by_id(dto.product_id)
        if not product:
            raise ProductNotFound(f"Product {dto.product_id} not found.")

        product.video_url = dto.video_url
        product = self._repo.save(product)
        logger.info("product.video_attached", product_id=str(product.id))
        return product

    def list_products(self, filters: Optional[Dict[str, Any]] = None) -> List[Product]:
        return self._repo.list(filters)

    def products_queryset(self) -> "models.QuerySet[Product]":
        return self._repo.queryset()

    def get_product(self, id: str) -> Product:
        """Raises ``ProductNotFound`` if the listing does not exist."""
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        return product
