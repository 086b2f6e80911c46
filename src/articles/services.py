"""Article write orchestration: create, update, delete, publish, and lookups.

Views hand over validated input plus the caller's ``Identity``; this module
applies the write policy and performs the store reads/writes.
"""

import logging
from dataclasses import dataclass
from functools import partial
from typing import Optional

from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import UploadedFile
from django.db import IntegrityError, transaction
from django.db.models import QuerySet
from rest_framework.exceptions import NotFound, ValidationError

from authentication.services import Identity
from .models import Article
from .policy import derive_slug, gate_create_status, gate_publish_status, gate_update_status, parse_tags
from .uploads import remove_upload, store_upload

logger = logging.getLogger(__name__)

User = get_user_model()


@dataclass
class ArticleUpdate:
    """Partial update: ``None`` means the field was not sent."""

    title: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[str] = None
    status: Optional[str] = None
    image: Optional[UploadedFile] = None


def _slug_taken(candidate: str, exclude_pk: Optional[int] = None) -> bool:
    qs = Article.objects.filter(slug=candidate)
    if exclude_pk is not None:
        qs = qs.exclude(pk=exclude_pk)
    return qs.exists()


def _save_with_unique_slug(article: Article) -> None:
    """Derive ``article.slug`` from its title and save.

    If a concurrent writer claimed the slug between the probe and the insert,
    the unique index rejects the row and the slug is derived once more.
    """
    is_taken = partial(_slug_taken, exclude_pk=article.pk)
    article.slug = derive_slug(article.title, is_taken)
    try:
        with transaction.atomic():
            article.save()
    except IntegrityError:
        if not is_taken(article.slug):
            raise
        logger.warning("Slug %s was claimed concurrently; deriving a new one", article.slug)
        article.slug = derive_slug(article.title, is_taken)
        with transaction.atomic():
            article.save()


def _resolve_author(identity: Optional[Identity]):
    if identity is None:
        return None
    try:
        user_id = int(identity.user_id)
    except (TypeError, ValueError):
        return None
    return User.objects.filter(pk=user_id).first()


def _articles() -> QuerySet:
    return Article.objects.select_related("author")


def get_article(article_id) -> Article:
    article = _articles().filter(pk=article_id).first()
    if article is None:
        raise NotFound("Article not found")
    return article


def get_article_by_slug(slug: str) -> Article:
    article = _articles().filter(slug=slug).first()
    if article is None:
        raise NotFound("Article not found")
    return article


def list_articles(status: Optional[str] = None) -> QuerySet:
    """All articles, newest first, optionally restricted to one exact status."""
    qs = _articles()
    if status:
        qs = qs.filter(status=status)
    return qs.order_by("-created_at", "-id")


def create_article(
    identity: Optional[Identity],
    *,
    title: str,
    content: str,
    tags: Optional[str] = None,
    status: Optional[str] = None,
    image: Optional[UploadedFile] = None,
) -> Article:
    """Create an article authored by ``identity``.

    Editors always create drafts; only an admin can create straight into
    ``published``.
    """
    if not title or not content:
        raise ValidationError("Title and content are required")

    role = identity.role if identity else ""
    article = Article(
        title=title,
        content=content,
        tags=parse_tags(tags),
        status=gate_create_status(status, role),
        author=_resolve_author(identity),
    )
    if image is not None:
        article.image_url = store_upload(image)

    try:
        _save_with_unique_slug(article)
    except Exception:
        remove_upload(article.image_url)
        raise

    logger.info(
        "Article %s created as %s by user %s",
        article.slug,
        article.status,
        identity.user_id if identity else None,
    )
    return article


def update_article(article_id, identity: Identity, changes: ArticleUpdate) -> Article:
    """Apply the provided fields of ``changes`` to an existing article."""
    article = get_article(article_id)

    status = gate_update_status(changes.status, identity.role)
    if status is not None:
        article.status = status
    if changes.content is not None:
        article.content = changes.content
    if changes.tags is not None:
        article.tags = parse_tags(changes.tags)

    previous_image = None
    if changes.image is not None:
        previous_image = article.image_url
        article.image_url = store_upload(changes.image)

    try:
        if changes.title is not None:
            article.title = changes.title
            _save_with_unique_slug(article)
        else:
            article.save()
    except Exception:
        if changes.image is not None:
            remove_upload(article.image_url)
        raise

    if previous_image and previous_image != article.image_url:
        remove_upload(previous_image)

    logger.info("Article %s updated by user %s", article.pk, identity.user_id)
    return article


def delete_article(article_id) -> None:
    """Delete an article and the image file it references."""
    article = get_article(article_id)
    image_url = article.image_url
    article.delete()
    remove_upload(image_url)
    logger.info("Article %s deleted", article_id)


def set_publication_status(article_id, identity: Identity, status: Optional[str]) -> Article:
    """Publish or unpublish; role and value are checked before the lookup."""
    new_status = gate_publish_status(status, identity.role)
    article = get_article(article_id)
    article.status = new_status
    article.save(update_fields=["status", "updated_at"])
    logger.info("Article %s set to %s by user %s", article.pk, new_status, identity.user_id)
    return article


__all__ = [
    "ArticleUpdate",
    "create_article",
    "delete_article",
    "get_article",
    "get_article_by_slug",
    "list_articles",
    "set_publication_status",
    "update_article",
]
