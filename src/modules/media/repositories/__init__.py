from modules.media.repositories.django_repository import (
    LongVideoDjangoRepository,
    MediaDjangoRepository,
)
from modules.media.repositories.interfaces import (
    ILongVideoRepository,
    IMediaRepository,
)

__all__ = [
    "ILongVideoRepository",
    "IMediaRepository",
    "LongVideoDjangoRepository",
    "MediaDjangoRepository",
]
