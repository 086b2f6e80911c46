"""Shared helpers for tests (user creation, token clients, fake Redis)."""

from __future__ import annotations

from typing import Dict
from unittest import mock

from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from access_control.roles import Role
from authentication.managers import UserManager
from authentication.services import TokenService

User = get_user_model()


class FakeRedis:
    """Minimal Redis stub supporting the commands used by the auth throttle."""

    def __init__(self):
        self._store: Dict[str, int] = {}

    def incr(self, key: str) -> int:
        """Mimic Redis INCR on an in-memory counter."""
        self._store[key] = self._store.get(key, 0) + 1
        return self._store[key]

    def expire(self, key: str, ttl_seconds: int) -> bool:
        """TTL is ignored in tests."""
        return key in self._store


class FakeRedisMixin:
    """Give every test its own empty rate-limit store."""

    def setUp(self):
        super().setUp()
        self.fake_redis = FakeRedis()
        patcher = mock.patch("core.throttling.get_redis_client", return_value=self.fake_redis)
        patcher.start()
        self.addCleanup(patcher.stop)


def create_user(username: str, password: str = "secret123", role: str = Role.EDITOR, **extra):
    """Create a user with a bcrypt-hashed password for tests."""

    return User.objects.create(
        username=username,
        password_hash=UserManager.hash_password(password),
        role=role,
        **extra,
    )


def auth_client(user) -> APIClient:
    """Return an APIClient carrying a fresh bearer token for ``user``."""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {TokenService.issue_token(user)}")
    return client
