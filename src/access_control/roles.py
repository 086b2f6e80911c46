"""Role names recognised by the article write policy."""

from django.db import models


class Role(models.TextChoices):
    """Access level stored on each user and carried in every bearer token."""

    ADMIN = "admin", "Admin"
    EDITOR = "editor", "Editor"


__all__ = ["Role"]
