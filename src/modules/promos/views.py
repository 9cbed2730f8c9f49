"""Promo code API views.

Creation and listing are admin-panel calls, application is made by the
anonymous storefront checkout; all three are public.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.exceptions import pydantic_errors
from modules.core.responses import failure, success
from modules.promos.dtos import CreatePromoDTO
from modules.promos.exceptions import PromoCodeAlreadyExists
from modules.promos.repositories.django_repository import PromoCodeDjangoRepository
from modules.promos.serializers import (
    ApplyPromoSerializer,
    CreatePromoSerializer,
    PromoCodeSerializer,
)
from modules.promos.services import PromoService


class PromoCodeViewSet(ViewSet):
    """Uses ``PromoService`` with an injected repository (DIP)."""

    permission_classes = [AllowAny]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = PromoService(promo_repository=PromoCodeDjangoRepository())

    def create(self, request: Request) -> Response:
        """POST /api/promo/create"""
        serializer = CreatePromoSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            dto = CreatePromoDTO(**serializer.validated_data)
        except PydanticValidationError as exc:
            return failure("Validation error", errors=pydantic_errors(exc))

        try:
            promo = self._service.create_promo(dto)
        except PromoCodeAlreadyExists as exc:
            return failure(str(exc))

        return success(status.HTTP_201_CREATED, promo=PromoCodeSerializer(promo).data)

    def apply(self, request: Request) -> Response:
        """POST /api/promo/apply

        A rejected code still answers 200 with ``success: false``.
        """
        serializer = ApplyPromoSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        result = self._service.apply_promo(data["code"], data["total_amount"])
        return Response(result.as_response())

    def list(self, request: Request) -> Response:
        """GET /api/promo/list"""
        promos = self._service.list_promos()
        return success(promos=PromoCodeSerializer(promos, many=True).data)
