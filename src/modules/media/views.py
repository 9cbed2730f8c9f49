"""Media and long-video API views (mounted at ``/api/videos/``).

Uploads arrive as multipart forms.  ``assetCleanupErrors`` lists every
hosted asset that could not be destroyed; the request itself still
succeeds.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.exceptions import pydantic_errors
from modules.core.responses import failure, success
from modules.media.dtos import CreateLongVideoDTO, UpdateLongVideoDTO
from modules.media.exceptions import (
    ForeignCoverReference,
    LongVideoNotFound,
    MediaNotFound,
    UploadFailed,
)
from modules.media.repositories.django_repository import (
    LongVideoDjangoRepository,
    MediaDjangoRepository,
)
from modules.media.serializers import (
    CreateLongVideoSerializer,
    CreateMediaSerializer,
    LongVideoSerializer,
    MediaSerializer,
    UpdateLongVideoSerializer,
    UpdateMediaSerializer,
)
from modules.media.services import LongVideoService, MediaService
from modules.media.storage import get_asset_storage


def cleanup_payload(errors) -> list[dict]:
    return [error.as_response() for error in errors]


class MediaViewSet(ViewSet):
    permission_classes = [AllowAny]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = MediaService(
            media_repository=MediaDjangoRepository(), storage=get_asset_storage()
        )

    def create(self, request: Request) -> Response:
        """POST /api/videos/media (``title`` + optional file ``cover``)"""
        serializer = CreateMediaSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            media = self._service.register_upload(data["title"], data.get("cover"))
        except UploadFailed:
            return failure("Upload failed", status.HTTP_500_INTERNAL_SERVER_ERROR)

        return success(status.HTTP_201_CREATED, media=MediaSerializer(media).data)

    def list(self, request: Request) -> Response:
        """GET /api/videos/media-list"""
        media = self._service.list_media()
        return success(mediaList=MediaSerializer(media, many=True).data)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/videos/media/{pk}"""
        serializer = UpdateMediaSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            media, errors = self._service.replace_asset(
                pk or "", title=data.get("title"), cover=data.get("cover")
            )
        except MediaNotFound:
            return failure("Media not found", status.HTTP_404_NOT_FOUND)
        except UploadFailed:
            return failure("Update failed", status.HTTP_500_INTERNAL_SERVER_ERROR)

        return success(
            media=MediaSerializer(media).data,
            assetCleanupErrors=cleanup_payload(errors),
        )

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/videos/media/{pk}"""
        try:
            errors = self._service.delete_record(pk or "")
        except MediaNotFound:
            return failure("Media not found", status.HTTP_404_NOT_FOUND)

        return success(
            message="Media deleted successfully",
            assetCleanupErrors=cleanup_payload(errors),
        )


class LongVideoViewSet(ViewSet):
    permission_classes = [AllowAny]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = LongVideoService(
            video_repository=LongVideoDjangoRepository(), storage=get_asset_storage()
        )

    def create(self, request: Request) -> Response:
        """POST /api/videos/upload-long (files ``cover``)"""
        serializer = CreateLongVideoSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            dto = CreateLongVideoDTO(**serializer.validated_data)
        except PydanticValidationError as exc:
            return failure("Validation error", errors=pydantic_errors(exc))

        try:
            video = self._service.upload_long(dto, request.FILES.getlist("cover"))
        except UploadFailed:
            return failure("Upload failed", status.HTTP_500_INTERNAL_SERVER_ERROR)

        return success(status.HTTP_201_CREATED, video=LongVideoSerializer(video).data)

    def list(self, request: Request) -> Response:
        """GET /api/videos/list-long"""
        videos = self._service.list_long()
        return success(videos=LongVideoSerializer(videos, many=True).data)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/videos/longs/{pk} (files ``covers``)"""
        serializer = UpdateLongVideoSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            dto = UpdateLongVideoDTO(**serializer.validated_data)
        except PydanticValidationError as exc:
            return failure("Validation error", errors=pydantic_errors(exc))

        try:
            video, errors = self._service.update_long(
                pk or "", dto, request.FILES.getlist("covers")
            )
        except LongVideoNotFound:
            return failure("Video not found", status.HTTP_404_NOT_FOUND)
        except ForeignCoverReference as exc:
            return failure(str(exc), publicIds=exc.public_ids)
        except UploadFailed:
            return failure("Update failed", status.HTTP_500_INTERNAL_SERVER_ERROR)

        return success(
            video=LongVideoSerializer(video).data,
            assetCleanupErrors=cleanup_payload(errors),
        )

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/videos/longs/{pk}"""
        try:
            errors = self._service.delete_long(pk or "")
        except LongVideoNotFound:
            return failure("Video not found", status.HTTP_404_NOT_FOUND)

        return success(
            message="Video deleted",
            assetCleanupErrors=cleanup_payload(errors),
        )
