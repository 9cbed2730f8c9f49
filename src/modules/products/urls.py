"""Product URL configuration (mounted at ``/api/products``)."""

from __future__ import annotations

from django.urls import path

from modules.products.views import ProductViewSet

urlpatterns = [
    path("", ProductViewSet.as_view({"get": "list"}), name="product-list"),
    path(
        "/attach-video",
        ProductViewSet.as_view({"post": "attach_video"}),
        name="product-attach-video",
    ),
    path("/<str:pk>", ProductViewSet.as_view({"get": "retrieve"}), name="product-detail"),
]
