"""Token service for JWT issuance and stateless verification."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from django.conf import settings
from rest_framework.exceptions import AuthenticationFailed

from access_control.roles import Role


@dataclass(frozen=True)
class Identity:
    """Caller identity carried by a verified bearer token.

    Stands in for ``request.user`` on authenticated requests; nothing is read
    back from the database to build it.
    """

    user_id: str
    role: str

    @property
    def is_authenticated(self) -> bool:
        return True

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


class TokenService:
    """Handle JWT issuance and decoding."""

    ACCESS_TTL = timedelta(hours=8)
    ALGORITHM = "HS256"
    REQUIRED_CLAIMS = ["id", "role", "exp", "iat"]

    @classmethod
    def issue_token(cls, user, issued_at: datetime | None = None) -> str:
        """Sign a token carrying the user's id and role, valid for ACCESS_TTL."""

        now = issued_at or datetime.now(timezone.utc)
        return jwt.encode(cls._build_payload(user, now), settings.JWT_SECRET, algorithm=cls.ALGORITHM)

    @classmethod
    def _build_payload(cls, user, issued_at: datetime) -> dict[str, Any]:
        exp = issued_at + cls.ACCESS_TTL
        return {
            "id": str(user.id),
            "role": user.role,
            "exp": int(exp.timestamp()),
            "iat": int(issued_at.timestamp()),
        }

    @classmethod
    def decode_token(cls, token: str) -> dict[str, Any]:
        """Decode and validate a JWT, mapping library errors to 401s."""

        try:
            return jwt.decode(
                token,
                settings.JWT_SECRET,
                algorithms=[cls.ALGORITHM],
                options={"require": cls.REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as exc:
            raise AuthenticationFailed("Token has expired") from exc
        except jwt.InvalidTokenError as exc:
            raise AuthenticationFailed("Invalid token") from exc

    @classmethod
    def verify_token(cls, token: str) -> Identity:
        """Turn a bearer token into an Identity or raise AuthenticationFailed."""

        if not token:
            raise AuthenticationFailed("Missing token")
        payload = cls.decode_token(token)
        user_id, role = payload.get("id"), payload.get("role")
        if not user_id or not isinstance(role, str):
            raise AuthenticationFailed("Invalid token")
        return Identity(user_id=str(user_id), role=role)


__all__ = ["Identity", "TokenService"]
