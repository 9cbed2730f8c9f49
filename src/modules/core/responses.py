"""Helpers for the ``{success, ...}`` JSON envelope every endpoint returns."""

from __future__ import annotations

from typing import Any

from rest_framework import status
from rest_framework.response import Response


def success(status_code: int = status.HTTP_200_OK, **payload: Any) -> Response:
    return Response({"success": True, **payload}, status=status_code)


def failure(
    message: str,
    status_code: int = status.HTTP_400_BAD_REQUEST,
    **extra: Any,
) -> Response:
    return Response({"success": False, "message": message, **extra}, status=status_code)
