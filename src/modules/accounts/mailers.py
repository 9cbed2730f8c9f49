"""OTP emails sent through Django's mail framework (SMTP relay)."""

from __future__ import annotations

import smtplib

import structlog
from django.conf import settings
from django.core.mail import send_mail

from modules.accounts.exceptions import EmailDeliveryFailed
from modules.accounts.otp import PURPOSE_REGISTER, PURPOSE_RESET

logger = structlog.get_logger(__name__)

_SUBJECTS = {
    PURPOSE_REGISTER: "Verify your email",
    PURPOSE_RESET: "Reset your password",
}


def send_otp_email(email: str, code: str, purpose: str) -> None:
    """Email *code* to *email*; raises ``EmailDeliveryFailed``."""
    subject = _SUBJECTS[purpose]
    message = (
        f"Your verification code is {code}.\n\n"
        f"It expires in {settings.OTP_TTL_MINUTES} minutes. "
        "If you did not request it, you can ignore this email."
    )
    try:
        send_mail(
            subject,
            message,
            settings.DEFAULT_FROM_EMAIL,
            [email],
            fail_silently=False,
        )
    except (smtplib.SMTPException, OSError) as exc:
        logger.error("auth.otp_email_failed", email=email, purpose=purpose, error=str(exc))
        raise EmailDeliveryFailed("Failed to send OTP email") from exc

    logger.info("auth.otp_email_sent", email=email, purpose=purpose)
