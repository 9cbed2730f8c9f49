"""Session tokens (SimpleJWT access tokens with profile claims)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rest_framework_simplejwt.tokens import AccessToken

if TYPE_CHECKING:
    from modules.accounts.models import User


def issue_session_token(user: User) -> str:
    """Signed token carrying user id, email and name.

    Lifetime comes from ``SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"]`` (7 days).
    """
    token = AccessToken.for_user(user)
    token["email"] = user.email
    token["name"] = user.name
    return str(token)
