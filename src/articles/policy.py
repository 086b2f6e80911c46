"""Article write policy: slug derivation, status gating, and tag parsing.

Pure functions; the caller supplies store lookups (``is_taken``) and the
caller's role, so none of this touches the database directly.
"""

import time
from typing import Callable, Optional

from django.utils.text import slugify
from rest_framework.exceptions import PermissionDenied, ValidationError

from access_control.roles import Role

from .models import SLUG_MAX_LENGTH, ArticleStatus

FALLBACK_SLUG = "article"
# Room for a "-<epoch ms>" conflict suffix.
SUFFIX_RESERVE = 20
BASE_SLUG_MAX_LENGTH = SLUG_MAX_LENGTH - SUFFIX_RESERVE


def _timestamp_ms() -> int:
    return time.time_ns() // 1_000_000


def normalize_slug(title: str) -> str:
    """Lowercase, URL-safe token for ``title``; Unicode letters are kept.

    Normalization can lengthen the text (``"ﬃ"`` becomes ``"ffi"``), so the
    result is cut after slugifying to leave space for a conflict suffix.
    """
    slug = slugify(title or "", allow_unicode=True)[:BASE_SLUG_MAX_LENGTH].strip("-_")
    return slug or FALLBACK_SLUG


def derive_slug(title: str, is_taken: Callable[[str], bool]) -> str:
    """Return a slug for ``title`` that ``is_taken`` reports as free.

    A conflicting base slug gets a millisecond timestamp suffix; the suffix is
    bumped until the probe stops reporting a conflict. The probe is
    check-then-act, so the unique index on ``Article.slug`` remains the final
    guard against concurrent writers.
    """
    base = normalize_slug(title)
    if not is_taken(base):
        return base

    stamp = _timestamp_ms()
    candidate = f"{base}-{stamp}"
    while is_taken(candidate):
        stamp += 1
        candidate = f"{base}-{stamp}"
    return candidate


def gate_create_status(requested: Optional[str], role: str) -> str:
    """Only an admin asking for ``published`` gets it; every other create is a draft."""
    if role == Role.ADMIN and requested == ArticleStatus.PUBLISHED:
        return ArticleStatus.PUBLISHED
    return ArticleStatus.DRAFT


def gate_update_status(requested: Optional[str], role: str) -> Optional[str]:
    """Status to write on a general update, or None to leave it unchanged.

    Non-admin callers cannot touch status at all, so their value is dropped.
    """
    if not requested or role != Role.ADMIN:
        return None
    if requested not in ArticleStatus.values:
        raise ValidationError({"status": ["Invalid status value"]})
    return requested


def gate_publish_status(requested: Optional[str], role: str) -> str:
    """Validate a publish/unpublish request: admin only, draft or published."""
    if role != Role.ADMIN:
        raise PermissionDenied("Access denied. Admins only.")
    if requested not in ArticleStatus.values:
        raise ValidationError("Invalid status value")
    return requested


def parse_tags(raw: Optional[str]) -> list[str]:
    """Split a comma-separated tag string into trimmed, ordered tags."""
    if not raw:
        return []
    return [tag.strip() for tag in raw.split(",") if tag.strip()]


__all__ = [
    "BASE_SLUG_MAX_LENGTH",
    "FALLBACK_SLUG",
    "derive_slug",
    "gate_create_status",
    "gate_publish_status",
    "gate_update_status",
    "normalize_slug",
    "parse_tags",
]
