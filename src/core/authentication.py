"""Bearer-token authentication for DRF views.

Every protected view gets its caller identity from ``TokenService.verify_token``
through this one authenticator, so token parsing lives in a single place.
"""

from typing import Optional, Tuple

from rest_framework.authentication import BaseAuthentication

from authentication.services import Identity, TokenService


class BearerTokenAuthentication(BaseAuthentication):
    """Resolve ``Authorization: Bearer <jwt>`` into an ``Identity``.

    Requests without a bearer header stay anonymous so public read routes work;
    a header carrying a bad or expired token fails with 401.
    """

    keyword = "Bearer"

    def authenticate(self, request) -> Optional[Tuple[Identity, str]]:
        token = get_bearer_token(request)
        if token is None:
            return None
        return TokenService.verify_token(token), token

    def authenticate_header(self, request) -> str:
        # A non-empty value makes DRF answer NotAuthenticated with 401, not 403.
        return self.keyword


def get_bearer_token(request) -> str | None:
    """Extract the Bearer token from the Authorization header if present."""
    auth_header = request.META.get("HTTP_AUTHORIZATION", "")
    if auth_header.startswith("Bearer "):
        return auth_header.split(" ", 1)[1].strip()
    return None


__all__ = ["BearerTokenAuthentication", "get_bearer_token"]
