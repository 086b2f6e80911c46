"""App configuration for shared project plumbing."""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Core app holds settings, URLs, authentication, and error handling."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"
