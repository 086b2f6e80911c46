"""Permission classes gating article writes on the caller's token identity."""

from rest_framework import permissions

from .roles import Role


class IsAuthenticatedIdentity(permissions.BasePermission):
    """Require a verified bearer token; anonymous callers get 401."""

    def has_permission(self, request, view) -> bool:
        user = getattr(request, "user", None)
        return bool(user is not None and getattr(user, "is_authenticated", False))


class IsAdminRole(IsAuthenticatedIdentity):
    """Require a verified token whose role is ``admin``; others get 403."""

    message = "Access denied. Admins only."

    def has_permission(self, request, view) -> bool:
        if not super().has_permission(request, view):
            return False
        return getattr(request.user, "role", None) == Role.ADMIN


__all__ = ["IsAuthenticatedIdentity", "IsAdminRole"]
