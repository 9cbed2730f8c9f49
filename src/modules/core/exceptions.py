"""DRF exception handler that renders every error in the response envelope.

Views translate domain exceptions themselves; this handler covers what the
framework raises on its own (parse errors, authentication, throttling,
serializer validation) and turns anything unexpected into a logged 500 so
no exception crosses the request boundary.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from pydantic import ValidationError as PydanticValidationError
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)


def flatten_errors(detail: Any, prefix: str = "") -> List[str]:
    """Turn nested serializer errors into ``"field.sub: message"`` strings."""
    if isinstance(detail, dict):
        messages: List[str] = []
        for key, value in detail.items():
            path = f"{prefix}.{key}" if prefix else str(key)
            if key == "non_field_errors":
                path = prefix
            messages.extend(flatten_errors(value, path))
        return messages
    if isinstance(detail, list):
        messages = []
        for index, value in enumerate(detail):
            if isinstance(value, (dict, list)):
                messages.extend(flatten_errors(value, f"{prefix}[{index}]"))
            else:
                messages.extend(flatten_errors(value, prefix))
        return messages
    return [f"{prefix}: {detail}" if prefix else str(detail)]


def pydantic_errors(exc: PydanticValidationError) -> List[str]:
    """Render pydantic errors the same way as serializer errors."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        text = error["msg"].removeprefix("Value error, ")
        messages.append(f"{location}: {text}" if location else text)
    return messages


def envelope_exception_handler(
    exc: Exception, context: Dict[str, Any]
) -> Optional[Response]:
    response = exception_handler(exc, context)
    view = context.get("view")
    view_name = view.__class__.__name__ if view else None

    if response is None:
        logger.exception("request.unhandled_exception", view=view_name)
        return Response(
            {"success": False, "message": "Internal server error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError):
        body = {
            "success": False,
            "message": "Validation error",
            "errors": flatten_errors(exc.detail),
        }
    else:
        detail = getattr(exc, "detail", None)
        if isinstance(detail, dict):
            detail = detail.get("detail", detail)
        body = {"success": False, "message": str(detail) if detail else str(exc)}

    logger.info(
        "request.rejected",
        view=view_name,
        status_code=response.status_code,
        error=exc.__class__.__name__,
    )
    response.data = body
    return response
