"""Authentication API views (mounted at ``/api/auth/``).

Everything is public except ``me``, which requires the Bearer token
returned by ``verify-otp`` or ``login``.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.throttling import BaseThrottle
from rest_framework.viewsets import ViewSet

from modules.accounts.dtos import RegisterDTO
from modules.accounts.exceptions import (
    EmailDeliveryFailed,
    InvalidCredentials,
    InvalidOtp,
    UserAlreadyExists,
    UserNotFound,
)
from modules.accounts.otp import OtpStore
from modules.accounts.repositories.django_repository import UserDjangoRepository
from modules.accounts.serializers import (
    ForgotPasswordSerializer,
    LoginSerializer,
    RegisterSerializer,
    ResetPasswordSerializer,
    UserSerializer,
    VerifyOtpSerializer,
)
from modules.accounts.services import AuthService
from modules.core.exceptions import pydantic_errors
from modules.core.responses import failure, success

_THROTTLE_SCOPES = {
    "register": "otp_request",
    "verify_otp": "otp_request",
    "forgot_password": "otp_request",
    "reset_password": "otp_request",
    "login": "login",
}


class AuthViewSet(ViewSet):
    permission_classes = [AllowAny]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = AuthService(
            user_repository=UserDjangoRepository(), otp_store=OtpStore()
        )

    def get_permissions(self):
        if self.action == "me":
            return [IsAuthenticated()]
        return super().get_permissions()

    def get_throttles(self) -> list[BaseThrottle]:
        self.throttle_scope = _THROTTLE_SCOPES.get(self.action)
        return super().get_throttles()

    def register(self, request: Request) -> Response:
        """POST /api/auth/register"""
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            dto = RegisterDTO(**serializer.validated_data)
        except PydanticValidationError as exc:
            return failure("Validation error", errors=pydantic_errors(exc))

        try:
            self._service.register(dto)
        except UserAlreadyExists as exc:
            return failure(str(exc))
        except EmailDeliveryFailed as exc:
            return failure(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

        return success(message="OTP sent to email")

    def verify_otp(self, request: Request) -> Response:
        """POST /api/auth/verify-otp"""
        serializer = VerifyOtpSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            user, token = self._service.verify_otp(data["email"], data["otp"])
        except InvalidOtp as exc:
            return failure(str(exc))

        return success(
            message="Email verified successfully",
            token=token,
            user=UserSerializer(user).data,
        )

    def login(self, request: Request) -> Response:
        """POST /api/auth/login"""
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            user, token = self._service.login(data["email"], data["password"])
        except InvalidCredentials as exc:
            return failure(str(exc))

        return success(token=token, user=UserSerializer(user).data)

    def forgot_password(self, request: Request) -> Response:
        """POST /api/auth/forgot-password"""
        serializer = ForgotPasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            self._service.forgot_password(serializer.validated_data["email"])
        except UserNotFound as exc:
            return failure(str(exc), status.HTTP_404_NOT_FOUND)
        except EmailDeliveryFailed as exc:
            return failure(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

        return success(message="Password reset OTP sent to email")

    def reset_password(self, request: Request) -> Response:
        """POST /api/auth/reset-password"""
        serializer = ResetPasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            self._service.reset_password(
                data["email"], data["otp"], data["new_password"]
            )
        except UserNotFound as exc:
            return failure(str(exc), status.HTTP_404_NOT_FOUND)
        except InvalidOtp as exc:
            return failure(str(exc))

        return success(message="Password reset successfully")

    def me(self, request: Request) -> Response:
        """GET /api/auth/me"""
        return success(user=UserSerializer(request.user).data)
