"""App configuration for authentication components."""

from django.apps import AppConfig


class AuthenticationConfig(AppConfig):
    """Authentication app holds the User model, token service, and auth routes."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "authentication"
