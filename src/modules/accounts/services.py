"""Authentication service layer (Use Cases).

Registration is two-step: ``register`` parks the hashed password next
to a ``register`` OTP, and the account row is only written by
``verify_otp``.  Password reset uses ``reset`` OTPs from the same store.

The OTP store, mailer and token issuer are injected so tests can swap
any of them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Tuple

import structlog
from django.contrib.auth.hashers import make_password
from django.db import transaction

from modules.accounts.dtos import normalize_email
from modules.accounts.exceptions import (
    EmailDeliveryFailed,
    InvalidCredentials,
    UserAlreadyExists,
    UserNotFound,
)
from modules.accounts.mailers import send_otp_email
from modules.accounts.otp import PURPOSE_REGISTER, PURPOSE_RESET, OtpStore
from modules.accounts.tokens import issue_session_token

if TYPE_CHECKING:
    from modules.accounts.dtos import RegisterDTO
    from modules.accounts.models import User
    from modules.accounts.repositories.interfaces import IUserRepository

logger = structlog.get_logger(__name__)

Mailer = Callable[[str, str, str], None]
TokenIssuer = Callable[["User"], str]


class AuthService:
    def __init__(
        self,
        user_repository: IUserRepository,
        otp_store: OtpStore,
        mailer: Mailer = send_otp_email,
        token_issuer: TokenIssuer = issue_session_token,
    ) -> None:
        self._users = user_repository
        self._otps = otp_store
        self._mailer = mailer
        self._issue_token = token_issuer

    def _send_code(self, purpose: str, email: str, code: str) -> None:
        try:
            self._mailer(email, code, purpose)
        except EmailDeliveryFailed:
            self._otps.discard(purpose, email)
            raise

    def _verified_user(self, email: str) -> User:
        user = self._users.get_by_email(email)
        if not user or not user.is_verified:
            raise UserNotFound("User not found")
        return user

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, dto: RegisterDTO) -> None:
        """Issue a ``register`` OTP for a new account.

        Raises:
            UserAlreadyExists: a verified account owns the email.
            EmailDeliveryFailed: the code could not be sent.
        """
        existing = self._users.get_by_email(dto.email)
        if existing and existing.is_verified:
            logger.warning("auth.register_conflict", email=dto.email)
            raise UserAlreadyExists("User already exists")

        code = self._otps.issue(
            PURPOSE_REGISTER,
            dto.email,
            payload={"name": dto.name, "password_hash": make_password(dto.password)},
        )
        self._send_code(PURPOSE_REGISTER, dto.email, code)
        logger.info("auth.registration_started", email=dto.email)

    @transaction.atomic
    def verify_otp(self, email: str, otp: str) -> Tuple[User, str]:
        """Complete registration and sign the user in.

        Raises:
            InvalidOtp: see ``OtpStore.consume``.
        """
        email = normalize_email(email)
        payload = self._otps.consume(PURPOSE_REGISTER, email, otp)
        user = self._users.upsert_verified(
            email=email,
            name=payload["name"],
            password_hash=payload["password_hash"],
        )
        logger.info("auth.registration_completed", user_id=str(user.id))
        return user, self._issue_token(user)

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------

    def login(self, email: str, password: str) -> Tuple[User, str]:
        """Raises ``InvalidCredentials`` for any unknown, unverified or bad login."""
        email = normalize_email(email)
        user = self._users.get_by_email(email)
        if not user or not user.is_verified or not user.check_password(password):
            logger.info("auth.login_failed", email=email)
            raise InvalidCredentials("Invalid email or password")

        logger.info("auth.login_succeeded", user_id=str(user.id))
        return user, self._issue_token(user)

    # ------------------------------------------------------------------
    # Password reset
    # ------------------------------------------------------------------

    def forgot_password(self, email: str) -> None:
        """Issue a ``reset`` OTP.

        Raises:
            UserNotFound: no verified account owns the email.
            EmailDeliveryFailed: the code could not be sent.
        """
        email = normalize_email(email)
        self._verified_user(email)
        code = self._otps.issue(PURPOSE_RESET, email)
        self._send_code(PURPOSE_RESET, email, code)

    @transaction.atomic
    def reset_password(self, email: str, otp: str, new_password: str) -> User:
        """Raises ``UserNotFound`` or ``InvalidOtp``."""
        email = normalize_email(email)
        user = self._verified_user(email)
        self._otps.consume(PURPOSE_RESET, email, otp)
        user.set_password(new_password)
        user = self._users.save(user)
        logger.info("auth.password_reset", user_id=str(user.id))
        return user
