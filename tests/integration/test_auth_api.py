"""Integration tests for ``/api/auth/*`` (emails land in ``mail.outbox``)."""

from __future__ import annotations

import re
from unittest.mock import patch

import pytest
from django.core import mail

from modules.accounts.models import User

pytestmark = pytest.mark.integration

PASSWORD = "s3cret-pass"


def last_code() -> str:
    return re.search(r"\b(\d{6})\b", mail.outbox[-1].body).group(1)


def register(api_client, email="jane@example.com", password=PASSWORD):
    return api_client.post(
        "/api/auth/register",
        {"name": "Jane", "email": email, "password": password},
        format="json",
    )


@pytest.fixture()
def verified(api_client):
    register(api_client)
    response = api_client.post(
        "/api/auth/verify-otp",
        {"email": "jane@example.com", "otp": last_code()},
        format="json",
    )
    return response.json()


class TestRegister:
    def test_register_sends_otp(self, api_client):
        response = register(api_client)

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "OTP sent to email"}
        assert mail.outbox[0].to == ["jane@example.com"]
        assert mail.outbox[0].subject == "Verify your email"
        assert User.objects.count() == 0

    def test_short_password(self, api_client):
        response = register(api_client, password="short")

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Validation error"
        assert body["errors"][0].startswith("password:")
        assert mail.outbox == []

    def test_missing_fields(self, api_client):
        response = api_client.post("/api/auth/register", {}, format="json")

        assert response.status_code == 400
        assert len(response.json()["errors"]) == 3

    def test_existing_user(self, api_client, verified):
        response = register(api_client)

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "User already exists"}

    def test_mail_failure(self, api_client):
        with patch(
            "modules.accounts.mailers.send_mail", side_effect=OSError("relay down")
        ):
            response = register(api_client)

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "message": "Failed to send OTP email",
        }


class TestVerifyOtp:
    def test_verify(self, verified):
        assert verified["success"] is True
        assert verified["message"] == "Email verified successfully"
        assert verified["token"]
        assert verified["user"]["email"] == "jane@example.com"
        assert verified["user"]["isVerified"] is True
        assert User.objects.get().is_verified is True

    def test_wrong_code(self, api_client):
        register(api_client)
        code = last_code()
        bad = "000000" if code != "000000" else "999999"

        response = api_client.post(
            "/api/auth/verify-otp",
            {"email": "jane@example.com", "otp": bad},
            format="json",
        )

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Invalid or expired OTP",
        }

    def test_code_cannot_be_reused(self, api_client, verified):
        code = last_code()

        response = api_client.post(
            "/api/auth/verify-otp",
            {"email": "jane@example.com", "otp": code},
            format="json",
        )

        assert response.status_code == 400


class TestLoginAndMe:
    def test_login_and_me(self, api_client, verified):
        response = api_client.post(
            "/api/auth/login",
            {"email": "jane@example.com", "password": PASSWORD},
            format="json",
        )

        assert response.status_code == 200
        token = response.json()["token"]

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        me = api_client.get("/api/auth/me")

        assert me.status_code == 200
        assert me.json()["user"]["id"] == verified["user"]["id"]
        assert me.json()["user"]["name"] == "Jane"

    def test_login_wrong_password(self, api_client, verified):
        response = api_client.post(
            "/api/auth/login",
            {"email": "jane@example.com", "password": "wrong-password"},
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid email or password"

    def test_me_requires_token(self, api_client):
        response = api_client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json()["success"] is False

    def test_me_rejects_garbage_token(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION="Bearer not-a-token")

        response = api_client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json()["success"] is False


class TestPasswordReset:
    def test_forgot_and_reset(self, api_client, verified):
        response = api_client.post(
            "/api/auth/forgot-password", {"email": "jane@example.com"}, format="json"
        )
        assert response.status_code == 200
        assert response.json()["message"] == "Password reset OTP sent to email"
        assert mail.outbox[-1].subject == "Reset your password"

        response = api_client.post(
            "/api/auth/reset-password",
            {
                "email": "jane@example.com",
                "otp": last_code(),
                "newPassword": "brand-new-pass",
            },
            format="json",
        )
        assert response.status_code == 200
        assert response.json()["message"] == "Password reset successfully"

        login = api_client.post(
            "/api/auth/login",
            {"email": "jane@example.com", "password": "brand-new-pass"},
            format="json",
        )
        assert login.status_code == 200

    def test_forgot_unknown_email(self, api_client):
        response = api_client.post(
            "/api/auth/forgot-password", {"email": "nobody@example.com"}, format="json"
        )

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "User not found"}

    def test_reset_without_code(self, api_client, verified):
        response = api_client.post(
            "/api/auth/reset-password",
            {
                "email": "jane@example.com",
                "otp": "123456",
                "newPassword": "brand-new-pass",
            },
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid or expired OTP"
