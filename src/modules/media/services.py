"""Media service layer (Use Cases).

Ordering rules shared by both record kinds:
- Uploads happen before any metadata is written; if a later step fails,
  the assets uploaded by this call are destroyed again.
- Replaced or removed assets are destroyed only after the metadata
  change is saved.  Destroy failures never abort the operation; they are
  logged and returned as ``AssetCleanupErrorDTO`` entries.
- Retained covers on a long-video update must be covers the video
  already owns (``ForeignCoverReference`` otherwise).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, List, Optional, Sequence, Tuple

import structlog
from django.db import DatabaseError

from modules.media.dtos import AssetCleanupErrorDTO, StoredAssetDTO
from modules.media.exceptions import (
    ForeignCoverReference,
    LongVideoNotFound,
    MediaNotFound,
)
from modules.media.models import LongVideo, Media

if TYPE_CHECKING:
    from modules.media.dtos import CreateLongVideoDTO, UpdateLongVideoDTO
    from modules.media.repositories.interfaces import (
        ILongVideoRepository,
        IMediaRepository,
    )
    from modules.media.storage import IAssetStorage

logger = structlog.get_logger(__name__)

CleanupErrors = List[AssetCleanupErrorDTO]


def destroy_assets(
    storage: IAssetStorage, public_ids: Iterable[str]
) -> CleanupErrors:
    """Best-effort delete of every asset; failures are collected, not raised.

    Every exception is recorded, including ones the gateway does not wrap
    in ``AssetDestroyFailed``.
    """
    errors: CleanupErrors = []
    for public_id in public_ids:
        try:
            storage.destroy(public_id)
        except Exception as exc:
            logger.warning(
                "media.asset_cleanup_failed", public_id=public_id, error=str(exc)
            )
            errors.append(AssetCleanupErrorDTO(public_id=public_id, error=str(exc)))
    return errors


def upload_all(storage: IAssetStorage, files: Sequence[Any]) -> List[StoredAssetDTO]:
    """Upload *files* in order; on failure, destroy what was already uploaded."""
    uploaded: List[StoredAssetDTO] = []
    try:
        for file in files:
            uploaded.append(storage.upload(file))
    except Exception:
        destroy_assets(storage, [asset.public_id for asset in uploaded])
        raise
    return uploaded


class MediaService:
    """Single-cover media records.

    Receives the repository and the asset storage via constructor
    injection (DIP).
    """

    def __init__(self, media_repository: IMediaRepository, storage: IAssetStorage):
        self._repo = media_repository
        self._storage = storage

    def register_upload(self, title: str, cover: Any = None) -> Media:
        """Upload *cover* when given, then record it under *title*.

        Raises:
            UploadFailed: the media host rejected the upload.
        """
        media = Media(title=title)
        if cover is not None:
            asset = self._storage.upload(cover)
            media.cover_url = asset.url
            media.cover_public_id = asset.public_id
        try:
            media = self._repo.save(media)
        except DatabaseError:
            destroy_assets(self._storage, media.public_ids())
            raise

        logger.info(
            "media.registered",
            media_id=str(media.id),
            public_id=media.cover_public_id or None,
        )
        return media

    def list_media(self) -> List[Media]:
        return self._repo.list()

    def replace_asset(
        self,
        media_id: str,
        title: Optional[str] = None,
        cover: Any = None,
    ) -> Tuple[Media, CleanupErrors]:
        """Rename and/or swap the cover of a media record.

        Raises:
            MediaNotFound: the record does not exist.
            UploadFailed: the new cover could not be uploaded.
        """
        media = self._repo.get_by_id(media_id)
        if not media:
            raise MediaNotFound(f"Media {media_id} not found.")

        replaced: List[str] = []
        new_asset: Optional[StoredAssetDTO] = None
        if cover is not None:
            new_asset = self._storage.upload(cover)
            replaced = media.public_ids()
            media.cover_url = new_asset.url
            media.cover_public_id = new_asset.public_id
        if title:
            media.title = title

        try:
            media = self._repo.save(media)
        except DatabaseError:
            if new_asset:
                destroy_assets(self._storage, [new_asset.public_id])
            raise

        errors = destroy_assets(self._storage, replaced)
        logger.info(
            "media.updated",
            media_id=str(media.id),
            cover_replaced=new_asset is not None,
            cleanup_errors=len(errors),
        )
        return media, errors

    def delete_record(self, media_id: str) -> CleanupErrors:
        """Delete the record, then its hosted cover.

        Raises:
            MediaNotFound: the record does not exist.
        """
        media = self._repo.get_by_id(media_id)
        if not media:
            raise MediaNotFound(f"Media {media_id} not found.")

        public_ids = media.public_ids()
        self._repo.delete(media)
        return destroy_assets(self._storage, public_ids)


class LongVideoService:
    """Multi-cover long videos."""

    def __init__(
        self, video_repository: ILongVideoRepository, storage: IAssetStorage
    ) -> None:
        self._repo = video_repository
        self._storage = storage

    def upload_long(self, dto: CreateLongVideoDTO, covers: Sequence[Any]) -> LongVideo:
        """Raises ``UploadFailed`` if any cover upload fails."""
        uploaded = upload_all(self._storage, covers)
        video = LongVideo(
            **dto.model_dump(),
            cover_urls=[asset.as_cover() for asset in uploaded],
        )
        try:
            video = self._repo.save(video)
        except DatabaseError:
            destroy_assets(self._storage, [asset.public_id for asset in uploaded])
            raise

        logger.info(
            "long_video.created", video_id=str(video.id), cover_count=len(uploaded)
        )
        return video

    def list_long(self) -> List[LongVideo]:
        return self._repo.list()

    def update_long(
        self,
        video_id: str,
        dto: UpdateLongVideoDTO,
        covers: Sequence[Any] = (),
    ) -> Tuple[LongVideo, CleanupErrors]:
        """Apply field changes, keep the retained covers and append uploads.

        Raises:
            LongVideoNotFound: the video does not exist.
            ForeignCoverReference: ``existing_covers`` names unknown covers.
            UploadFailed: a new cover could not be uploaded.
        """
        video = self._repo.get_by_id(video_id)
        if not video:
            raise LongVideoNotFound(f"Long video {video_id} not found.")

        stored = {cover["publicId"]: cover for cover in video.cover_urls}
        if dto.existing_covers is None:
            retained = list(video.cover_urls)
        else:
            foreign = [pid for pid in dto.existing_covers if pid not in stored]
            if foreign:
                logger.warning(
                    "long_video.foreign_cover_rejected",
                    video_id=str(video.id),
                    public_ids=foreign,
                )
                raise ForeignCoverReference(foreign)
            retained = [stored[pid] for pid in dict.fromkeys(dto.existing_covers)]

        kept_ids = {cover["publicId"] for cover in retained}
        dropped = [pid for pid in stored if pid not in kept_ids]

        uploaded = upload_all(self._storage, covers)

        for field, value in dto.field_changes().items():
            setattr(video, field, value)
        video.cover_urls = retained + [asset.as_cover() for asset in uploaded]

        try:
            video = self._repo.save(video)
        except DatabaseError:
            destroy_assets(self._storage, [asset.public_id for asset in uploaded])
            raise

        errors = destroy_assets(self._storage, dropped)
        logger.info(
            "long_video.updated",
            video_id=str(video.id),
            added=len(uploaded),
            dropped=len(dropped),
            cleanup_errors=len(errors),
        )
        return video, errors

    def delete_long(self, video_id: str) -> CleanupErrors:
        """Raises ``LongVideoNotFound`` if the video does not exist."""
        video = self._repo.get_by_id(video_id)
        if not video:
            raise LongVideoNotFound(f"Long video {video_id} not found.")

        public_ids = video.public_ids()
        self._repo.delete(video)
        return destroy_assets(self._storage, public_ids)
