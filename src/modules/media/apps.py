import cloudinary
from django.apps import AppConfig
from django.conf import settings


class MediaConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.media"
    label = "media"
    verbose_name = "Media"

    def ready(self) -> None:
        cloudinary.config(**settings.CLOUDINARY)
