"""Media URL configuration (mounted at ``/api/videos/``)."""

from __future__ import annotations

from django.urls import path

from modules.media.views import LongVideoViewSet, MediaViewSet

media_detail = MediaViewSet.as_view({"put": "update", "delete": "destroy"})
long_detail = LongVideoViewSet.as_view({"put": "update", "delete": "destroy"})

urlpatterns = [
    path("media", MediaViewSet.as_view({"post": "create"}), name="media-create"),
    path("media-list", MediaViewSet.as_view({"get": "list"}), name="media-list"),
    path("media/<str:pk>", media_detail, name="media-detail"),
    path(
        "upload-long",
        LongVideoViewSet.as_view({"post": "create"}),
        name="long-video-create",
    ),
    path("list-long", LongVideoViewSet.as_view({"get": "list"}), name="long-video-list"),
    path("longs/<str:pk>", long_detail, name="long-video-detail"),
]
