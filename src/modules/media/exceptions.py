"""Media domain exceptions.

Raised by the storage gateway and the Service Layer; the views translate
them into the JSON envelope.
"""

from __future__ import annotations


class MediaNotFound(Exception):
    """The requested media record does not exist."""


class LongVideoNotFound(Exception):
    """The requested long video does not exist."""


class UploadFailed(Exception):
    """The media host rejected or failed an upload."""


class AssetDestroyFailed(Exception):
    """The media host could not delete an asset."""


class ForeignCoverReference(Exception):
    """``existingCovers`` names a ``publicId`` the video does not own."""

    def __init__(self, public_ids: list[str]) -> None:
        self.public_ids = public_ids
        super().__init__(f"Unknown cover reference(s): {', '.join(public_ids)}")
