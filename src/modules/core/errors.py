"""Standard JSON error envelope.

Framework-raised errors (bad JSON, failed field constraints, unsupported
methods, unrouted paths, unhandled exceptions) are rendered as::

    {"timestamp": ..., "status": 400, "error": "Bad Request",
     "message": "itemName: This field is required.", "path": "/api/catalog"}

Id-addressed 404s and 422 validation messages are produced by the views
and do not pass through here.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Dict

import structlog
from django.http import HttpRequest, JsonResponse
from django.utils import timezone
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)


def error_body(status_code: int, message: str, path: str) -> Dict[str, Any]:
    return {
        "timestamp": timezone.now().isoformat(),
        "status": status_code,
        "error": HTTPStatus(status_code).phrase,
        "message": message,
        "path": path,
    }


def describe(detail: Any) -> str:
    """Flatten DRF error detail into a single readable message."""
    if isinstance(detail, dict):
        if set(detail) == {"detail"}:
            return describe(detail["detail"])
        return "; ".join(f"{field}: {describe(value)}" for field, value in detail.items())
    if isinstance(detail, (list, tuple)):
        return " ".join(describe(item) for item in detail)
    return str(detail)


def api_exception_handler(exc: Exception, context: Dict[str, Any]):
    """DRF ``EXCEPTION_HANDLER`` that wraps errors in the standard envelope."""
    response = exception_handler(exc, context)
    if response is None:
        return None

    request = context["request"]
    message = describe(response.data)
    logger.warning(
        "request.rejected",
        status_code=response.status_code,
        path=request.path,
        message=message,
    )
    response.data = error_body(response.status_code, message, request.path)
    return response


def page_not_found(request: HttpRequest, exception: Exception) -> JsonResponse:
    """``handler404`` for paths that match no route."""
    return JsonResponse(
        error_body(404, "No route matches the requested path.", request.path),
        status=404,
    )


def server_error(request: HttpRequest) -> JsonResponse:
    """``handler500`` for exceptions no view handled."""
    logger.error("request.unhandled_error", path=request.path)
    return JsonResponse(
        error_body(500, "Internal server error.", request.path),
        status=500,
    )
