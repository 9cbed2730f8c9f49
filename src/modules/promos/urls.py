"""Promo URL configuration (mounted at ``/api/promo/``)."""

from __future__ import annotations

from django.urls import path

from modules.promos.views import PromoCodeViewSet

urlpatterns = [
    path("create", PromoCodeViewSet.as_view({"post": "create"}), name="promo-create"),
    path("apply", PromoCodeViewSet.as_view({"post": "apply"}), name="promo-apply"),
    path("list", PromoCodeViewSet.as_view({"get": "list"}), name="promo-list"),
]
