from modules.promos.repositories.django_repository import PromoCodeDjangoRepository
from modules.promos.repositories.interfaces import IPromoCodeRepository

__all__ = ["IPromoCodeRepository", "PromoCodeDjangoRepository"]
