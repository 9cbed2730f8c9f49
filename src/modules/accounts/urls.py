"""Auth URL configuration (mounted at ``/api/auth/``)."""

from __future__ import annotations

from django.urls import path

from modules.accounts.views import AuthViewSet

urlpatterns = [
    path("register", AuthViewSet.as_view({"post": "register"}), name="auth-register"),
    path(
        "verify-otp",
        AuthViewSet.as_view({"post": "verify_otp"}),
        name="auth-verify-otp",
    ),
    path("login", AuthViewSet.as_view({"post": "login"}), name="auth-login"),
    path(
        "forgot-password",
        AuthViewSet.as_view({"post": "forgot_password"}),
        name="auth-forgot-password",
    ),
    path(
        "reset-password",
        AuthViewSet.as_view({"post": "reset_password"}),
        name="auth-reset-password",
    ),
    path("me", AuthViewSet.as_view({"get": "me"}), name="auth-me"),
]
