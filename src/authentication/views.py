"""Authentication endpoints: register and login."""

import logging
from typing import Any

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.response import message_response
from core.throttling import AuthRateThrottle
from .serializers import LoginSerializer, RegisterSerializer
from .services import TokenService

logger = logging.getLogger(__name__)


class AuthAPIView(APIView):
    """Public auth endpoint: no credentials needed, throttled per client IP."""

    authentication_classes: list[Any] = []
    permission_classes: list[Any] = []
    throttle_classes = [AuthRateThrottle]


class RegisterView(AuthAPIView):

    # noinspection PyMethodMayBeStatic
    def post(self, request):
        """Register a new editor account."""
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(
            {"ok": True, "message": "User registered successfully"},
            status=status.HTTP_201_CREATED,
        )


class LoginView(AuthAPIView):

    # noinspection PyMethodMayBeStatic
    def post(self, request):
        """Authenticate and issue an 8-hour bearer token."""
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]
        token = TokenService.issue_token(user)
        logger.info("User %s logged in", user.username)
        return message_response("Login successful", token=token, role=user.role)
