"""Gateway to the media host (Cloudinary).

Services depend on ``IAssetStorage`` so tests can inject an in-memory
fake; ``CloudinaryAssetStorage`` is the production implementation.
Credentials are applied once in ``MediaConfig.ready``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import cloudinary.exceptions
import cloudinary.uploader
import structlog
from django.conf import settings

from modules.media.dtos import StoredAssetDTO
from modules.media.exceptions import AssetDestroyFailed, UploadFailed

logger = structlog.get_logger(__name__)

# Cloudinary answers "not found" for assets that are already gone.
_DESTROY_OK = {"ok", "not found"}


class IAssetStorage(ABC):
    @abstractmethod
    def upload(self, file: Any) -> StoredAssetDTO:
        """Store an image; raises ``UploadFailed``."""

    @abstractmethod
    def destroy(self, public_id: str) -> None:
        """Delete an image; raises ``AssetDestroyFailed``."""


class CloudinaryAssetStorage(IAssetStorage):
    def __init__(self, folder: str) -> None:
        self._folder = folder

    def upload(self, file: Any) -> StoredAssetDTO:
        log = logger.bind(folder=self._folder, filename=getattr(file, "name", None))
        try:
            result = cloudinary.uploader.upload(
                file, folder=self._folder, resource_type="image"
            )
        except cloudinary.exceptions.Error as exc:
            log.error("media.upload_failed", error=str(exc))
            raise UploadFailed(str(exc)) from exc

        asset = StoredAssetDTO(url=result["secure_url"], public_id=result["public_id"])
        log.info("media.uploaded", public_id=asset.public_id)
        return asset

    def destroy(self, public_id: str) -> None:
        try:
            result = cloudinary.uploader.destroy(public_id, resource_type="image")
        except cloudinary.exceptions.Error as exc:
            raise AssetDestroyFailed(str(exc)) from exc

        outcome = result.get("result")
        if outcome not in _DESTROY_OK:
            raise AssetDestroyFailed(f"Unexpected destroy result: {outcome}")
        logger.info("media.asset_destroyed", public_id=public_id, result=outcome)


def get_asset_storage() -> IAssetStorage:
    return CloudinaryAssetStorage(folder=settings.MEDIA_COVER_FOLDER)
