"""Unit tests for AuthService with a recording mailer."""

from __future__ import annotations

import pytest
from rest_framework_simplejwt.tokens import AccessToken

from modules.accounts.dtos import RegisterDTO
from modules.accounts.exceptions import (
    EmailDeliveryFailed,
    InvalidCredentials,
    InvalidOtp,
    UserAlreadyExists,
    UserNotFound,
)
from modules.accounts.models import User
from modules.accounts.otp import PURPOSE_REGISTER, OtpStore
from modules.accounts.repositories.django_repository import UserDjangoRepository
from modules.accounts.services import AuthService

pytestmark = pytest.mark.unit


class RecordingMailer:
    def __init__(self) -> None:
        self.sent: list[tuple[str, str, str]] = []

    def __call__(self, email: str, code: str, purpose: str) -> None:
        self.sent.append((email, code, purpose))

    @property
    def last_code(self) -> str:
        return self.sent[-1][1]


def failing_mailer(email: str, code: str, purpose: str) -> None:
    raise EmailDeliveryFailed("Failed to send OTP email")


@pytest.fixture()
def otp_store():
    return OtpStore()


@pytest.fixture()
def mailer():
    return RecordingMailer()


@pytest.fixture()
def service(otp_store, mailer):
    return AuthService(
        user_repository=UserDjangoRepository(), otp_store=otp_store, mailer=mailer
    )


def register(service, email="Jane@Example.com", password="s3cret-pass"):
    service.register(RegisterDTO(name="Jane", email=email, password=password))


@pytest.fixture()
def verified_user(service, mailer):
    register(service)
    user, _ = service.verify_otp("jane@example.com", mailer.last_code)
    return user


class TestRegistration:
    def test_register_sends_code_without_creating_user(self, service, mailer):
        register(service)

        assert User.objects.count() == 0
        assert mailer.sent[0][0] == "jane@example.com"
        assert mailer.sent[0][2] == PURPOSE_REGISTER

    def test_verify_creates_verified_user_and_token(self, service, mailer):
        register(service)

        user, token = service.verify_otp("JANE@example.com", mailer.last_code)

        assert user.is_verified is True
        assert user.name == "Jane"
        assert user.check_password("s3cret-pass")
        claims = AccessToken(token)
        assert claims["email"] == "jane@example.com"
        assert claims["name"] == "Jane"
        assert claims["user_id"] == str(user.id)

    def test_verify_with_wrong_code(self, service, mailer):
        register(service)
        code = mailer.last_code
        bad = "000000" if code != "000000" else "999999"

        with pytest.raises(InvalidOtp):
            service.verify_otp("jane@example.com", bad)
        assert User.objects.count() == 0

    def test_register_existing_verified_email(self, service, verified_user):
        with pytest.raises(UserAlreadyExists):
            register(service, email="JANE@example.com")

    def test_register_over_unverified_row(self, service, mailer):
        User.objects.create_user(
            email="jane@example.com", password="old-pass-123", name="Old"
        )

        register(service, password="n3w-pass-word")
        user, _ = service.verify_otp("jane@example.com", mailer.last_code)

        assert User.objects.count() == 1
        assert user.is_verified is True
        assert user.name == "Jane"
        assert user.check_password("n3w-pass-word")

    def test_failed_delivery_discards_code(self, otp_store):
        service = AuthService(
            user_repository=UserDjangoRepository(),
            otp_store=otp_store,
            mailer=failing_mailer,
        )

        with pytest.raises(EmailDeliveryFailed):
            register(service)

        with pytest.raises(InvalidOtp):
            otp_store.consume(PURPOSE_REGISTER, "jane@example.com", "123456")


class TestLogin:
    def test_login(self, service, verified_user):
        user, token = service.login(" Jane@Example.com ", "s3cret-pass")

        assert user.id == verified_user.id
        assert AccessToken(token)["user_id"] == str(user.id)

    @pytest.mark.parametrize(
        "email,password",
        [
            ("jane@example.com", "wrong-password"),
            ("nobody@example.com", "s3cret-pass"),
        ],
    )
    def test_bad_credentials(self, service, verified_user, email, password):
        with pytest.raises(InvalidCredentials, match="Invalid email or password"):
            service.login(email, password)

    def test_unverified_user_cannot_login(self, service):
        User.objects.create_user(
            email="jane@example.com", password="s3cret-pass", name="Jane"
        )

        with pytest.raises(InvalidCredentials):
            service.login("jane@example.com", "s3cret-pass")


class TestPasswordReset:
    def test_reset_flow(self, service, mailer, verified_user):
        service.forgot_password("jane@example.com")
        code = mailer.last_code

        service.reset_password("jane@example.com", code, "brand-new-pass")

        verified_user.refresh_from_db()
        assert verified_user.check_password("brand-new-pass")
        with pytest.raises(InvalidCredentials):
            service.login("jane@example.com", "s3cret-pass")

    def test_forgot_unknown_email(self, service):
        with pytest.raises(UserNotFound):
            service.forgot_password("nobody@example.com")

    def test_register_code_cannot_reset(self, service, mailer, verified_user):
        register(service, email="other@example.com")

        with pytest.raises(UserNotFound):
            service.reset_password("other@example.com", mailer.last_code, "x" * 10)

    def test_reset_with_wrong_code(self, service, mailer, verified_user):
        service.forgot_password("jane@example.com")
        code = mailer.last_code
        bad = "000000" if code != "000000" else "999999"

        with pytest.raises(InvalidOtp):
            service.reset_password("jane@example.com", bad, "brand-new-pass")

        verified_user.refresh_from_db()
        assert verified_user.check_password("s3cret-pass")
