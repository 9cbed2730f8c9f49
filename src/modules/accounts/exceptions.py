"""Account and OTP domain exceptions."""

from __future__ import annotations


class UserAlreadyExists(Exception):
    """A verified account already owns the email."""


class UserNotFound(Exception):
    """No verified account owns the email."""


class InvalidOtp(Exception):
    """The code is missing, expired, exhausted or does not match."""


class InvalidCredentials(Exception):
    """Unknown email, unverified account or wrong password."""


class EmailDeliveryFailed(Exception):
    """The mail relay did not accept the OTP email."""
