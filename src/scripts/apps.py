"""App configuration for operational management commands."""

from django.apps import AppConfig


class ScriptsConfig(AppConfig):
    """Hosts seed and role-administration management commands."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "scripts"
