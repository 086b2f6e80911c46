"""Custom exception handling to enforce the API error body `{"error": ...}`."""

import logging
from typing import Any

from django.conf import settings
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed, NotAuthenticated, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


def _first_message(payload: Any) -> str:
    """Dig the first human-readable message out of DRF's error payload."""

    if isinstance(payload, dict):
        if not payload:
            return "Invalid request"
        if "detail" in payload:
            return _first_message(payload["detail"])
        field, value = next(iter(payload.items()))
        message = _first_message(value)
        return message if field == "non_field_errors" else f"{field}: {message}"
    if isinstance(payload, list):
        return _first_message(payload[0]) if payload else "Invalid request"
    return str(payload)


def custom_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    """Wrap DRF errors in the `{ "error": "..." }` shape.

    - Uses DRF's default handler to produce the base response.
    - Forces 401 for authentication failures regardless of DRF's mapping.
    - Turns anything DRF does not know about (database errors included) into
      a logged 500 with a generic message.
    """

    response = drf_exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.error(
            "Unhandled error in %s", type(view).__name__ if view else "request", exc_info=exc
        )
        body: dict[str, Any] = {"error": "Server error"}
        # Underlying detail is only exposed when explicitly enabled.
        if getattr(settings, "DEBUG_ERROR_DETAILS", False):
            body["details"] = str(exc)
        return Response(body, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, (AuthenticationFailed, NotAuthenticated)):
        response.status_code = status.HTTP_401_UNAUTHORIZED

    if response.status_code >= 400:
        base_errors = response.data
        if isinstance(exc, NotAuthenticated):
            body = {"error": "Missing token"}
        else:
            body = {"error": _first_message(base_errors)}
        if isinstance(exc, ValidationError) and isinstance(base_errors, dict):
            body["details"] = base_errors
        response.data = body

    return response


__all__ = ["custom_exception_handler"]
