"""Media repository interfaces.

Both records are deleted outright (no soft delete): once the metadata is
gone the service destroys the hosted assets.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.media.models import LongVideo, Media


class IMediaRepository(IRepository["Media"]):
    @abstractmethod
    def delete(self, entity: "Media") -> None:
        """Remove the record."""


class ILongVideoRepository(IRepository["LongVideo"]):
    @abstractmethod
    def delete(self, entity: "LongVideo") -> None:
        """Remove the record."""
