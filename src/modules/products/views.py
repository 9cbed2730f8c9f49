"""Product API views.

The catalogue is public.  Domain exceptions are caught and translated
into the JSON envelope; the view never swallows generic exceptions.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.responses import failure, success
from modules.products.dtos import AttachVideoDTO
from modules.products.exceptions import ProductNotFound
from modules.products.filters import ProductFilter
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import AttachVideoSerializer, ProductSerializer
from modules.products.services import ProductService


class ProductViewSet(GenericViewSet):
    """Catalogue listings backed by ``ProductService`` (DIP)."""

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    permission_classes = [AllowAny]
    filterset_class = ProductFilter
    pagination_class = None

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    def get_queryset(self):
        return self._service.products_queryset()

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self.filter_queryset(self.get_queryset())
        return success(products=ProductSerializer(products, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/products/{pk}"""
        try:
            product = self._service.get_product(pk or "")
        except ProductNotFound:
            return failure("Property not found", status.HTTP_404_NOT_FOUND)
        return success(property=ProductSerializer(product).data)

    def attach_video(self, request: Request) -> Response:
        """POST /api/products/attach-video with ``{propertyId, videoUrl}``."""
        serializer = AttachVideoSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            dto = AttachVideoDTO(**serializer.validated_data)
        except PydanticValidationError:
            return failure("propertyId and videoUrl required")

        try:
            product = self._service.attach_video(dto)
        except ProductNotFound:
            return failure("Property not found", status.HTTP_404_NOT_FOUND)

        return success(property=ProductSerializer(product).data)
