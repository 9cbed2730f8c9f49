"""Order URL configuration (mounted at ``/api/orders``)."""

from __future__ import annotations

from django.urls import path

from modules.orders.views import OrderViewSet

urlpatterns = [
    path("", OrderViewSet.as_view({"get": "list"}), name="order-list"),
    path("/create", OrderViewSet.as_view({"post": "create"}), name="order-create"),
    path(
        "/stats/dashboard",
        OrderViewSet.as_view({"get": "dashboard"}),
        name="order-dashboard",
    ),
    path(
        "/status/<str:order_status>",
        OrderViewSet.as_view({"get": "by_status"}),
        name="order-by-status",
    ),
    path(
        "/<str:pk>/status",
        OrderViewSet.as_view({"put": "update_status"}),
        name="order-update-status",
    ),
    path(
        "/<str:pk>/contact",
        OrderViewSet.as_view({"post": "add_contact"}),
        name="order-add-contact",
    ),
    path("/<str:pk>", OrderViewSet.as_view({"get": "retrieve"}), name="order-detail"),
]
