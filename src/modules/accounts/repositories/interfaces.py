"""User repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.accounts.models import User


class IUserRepository(IRepository["User"]):
    @abstractmethod
    def get_by_email(self, email: str) -> Optional["User"]:
        """Case-insensitive look-up by email."""

    @abstractmethod
    def upsert_verified(self, email: str, name: str, password_hash: str) -> "User":
        """Create the verified account, or verify and refresh an existing row."""
