"""App configuration for the article resource."""

from django.apps import AppConfig


class ArticlesConfig(AppConfig):
    """Articles app holds the model, write policy, and CRUD endpoints."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "articles"
