"""Django ORM implementations of the media repositories."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.media.models import LongVideo, Media
from modules.media.repositories.interfaces import (
    ILongVideoRepository,
    IMediaRepository,
)

logger = structlog.get_logger(__name__)


class MediaDjangoRepository(IMediaRepository):
    def get_by_id(self, id: str) -> Optional[Media]:
        """Returns ``None`` for non-existent or invalid IDs."""
        try:
            return Media.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Media]:
        queryset = Media.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    @transaction.atomic
    def save(self, entity: Media) -> Media:
        entity.save()
        logger.info("media.saved", media_id=str(entity.id))
        return entity

    @transaction.atomic
    def delete(self, entity: Media) -> None:
        media_id = str(entity.id)
        entity.delete()
        logger.info("media.deleted", media_id=media_id)


class LongVideoDjangoRepository(ILongVideoRepository):
    def get_by_id(self, id: str) -> Optional[LongVideo]:
        """Returns ``None`` for non-existent or invalid IDs."""
        try:
            return LongVideo.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[LongVideo]:
        queryset = LongVideo.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    @transaction.atomic
    def save(self, entity: LongVideo) -> LongVideo:
        entity.save()
        logger.info(
            "long_video.saved",
            video_id=str(entity.id),
            cover_count=len(entity.cover_urls),
        )
        return entity

    @transaction.atomic
    def delete(self, entity: LongVideo) -> None:
        video_id = str(entity.id)
        entity.delete()
        logger.info("long_video.deleted", video_id=video_id)
