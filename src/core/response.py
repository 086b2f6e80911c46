"""Response helpers shared by the auth and article views."""

from typing import Any

from rest_framework import status as http_status
from rest_framework.response import Response


def message_response(message: str, status: int = http_status.HTTP_200_OK, **payload: Any) -> Response:
    """Return ``{"message": ..., **payload}`` with the given status code."""

    return Response({"message": message, **payload}, status=status)


__all__ = ["message_response"]
