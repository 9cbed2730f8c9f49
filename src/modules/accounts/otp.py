"""One-time codes kept in the shared Django cache.

Entries are keyed by ``(purpose, email)`` so registration and password
reset codes never validate each other.  Each entry carries its own
``expires_at``, checked on read, and the cache timeout matches it so
stale entries also disappear on their own.  Issuing a new code replaces
the previous one; a code can be consumed once.
"""

from __future__ import annotations

import secrets
from datetime import timedelta
from typing import Any, Dict, Optional

import structlog
from django.conf import settings
from django.core.cache import cache as default_cache
from django.utils import timezone

from modules.accounts.dtos import OtpEntryDTO
from modules.accounts.exceptions import InvalidOtp

logger = structlog.get_logger(__name__)

OTP_LENGTH = 6
PURPOSE_REGISTER = "register"
PURPOSE_RESET = "reset"


def generate_otp(length: int = OTP_LENGTH) -> str:
    return f"{secrets.randbelow(10**length):0{length}d}"


class OtpStore:
    def __init__(
        self,
        cache=None,
        ttl: Optional[timedelta] = None,
        max_attempts: Optional[int] = None,
    ) -> None:
        self._cache = cache or default_cache
        self._ttl = ttl or timedelta(minutes=settings.OTP_TTL_MINUTES)
        self._max_attempts = max_attempts or settings.OTP_MAX_ATTEMPTS

    @staticmethod
    def _key(purpose: str, email: str) -> str:
        return f"otp:{purpose}:{email}"

    def issue(
        self, purpose: str, email: str, payload: Optional[Dict[str, Any]] = None
    ) -> str:
        """Store a fresh code for *email*, replacing any earlier one."""
        code = generate_otp()
        entry = OtpEntryDTO(
            code=code,
            expires_at=timezone.now() + self._ttl,
            payload=payload or {},
        )
        self._cache.set(
            self._key(purpose, email),
            entry.model_dump(),
            timeout=int(self._ttl.total_seconds()),
        )
        logger.info("auth.otp_issued", purpose=purpose, email=email)
        return code

    def consume(self, purpose: str, email: str, code: str) -> Dict[str, Any]:
        """Check *code* and delete the entry; returns the stored payload.

        Raises:
            InvalidOtp: no entry, expired, too many attempts or mismatch.
        """
        key = self._key(purpose, email)
        raw = self._cache.get(key)
        log = logger.bind(purpose=purpose, email=email)

        if raw is None:
            log.info("auth.otp_rejected", reason="missing")
            raise InvalidOtp("Invalid or expired OTP")

        entry = OtpEntryDTO(**raw)
        if timezone.now() >= entry.expires_at:
            self._cache.delete(key)
            log.info("auth.otp_rejected", reason="expired")
            raise InvalidOtp("Invalid or expired OTP")

        if not secrets.compare_digest(entry.code, str(code)):
            attempts = entry.attempts + 1
            if attempts >= self._max_attempts:
                self._cache.delete(key)
                log.warning("auth.otp_exhausted", attempts=attempts)
            else:
                remaining = (entry.expires_at - timezone.now()).total_seconds()
                self._cache.set(
                    key,
                    entry.model_copy(update={"attempts": attempts}).model_dump(),
                    timeout=max(int(remaining), 1),
                )
                log.info("auth.otp_rejected", reason="mismatch", attempts=attempts)
            raise InvalidOtp("Invalid or expired OTP")

        self._cache.delete(key)
        log.info("auth.otp_consumed")
        return entry.payload

    def discard(self, purpose: str, email: str) -> None:
        self._cache.delete(self._key(purpose, email))
