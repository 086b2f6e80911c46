"""Storage of article images under MEDIA_ROOT, addressed as /uploads/<name>."""

import logging
import os
import secrets
import time

from django.conf import settings
from django.core.files.storage import default_storage
from django.core.files.uploadedfile import UploadedFile

logger = logging.getLogger(__name__)


def generate_filename(original_name: str) -> str:
    """``<epoch ms>-<random 9 digits><original extension>``."""
    _, ext = os.path.splitext(original_name or "")
    return f"{time.time_ns() // 1_000_000}-{secrets.randbelow(10**9)}{ext.lower()}"


def store_upload(upload: UploadedFile) -> str:
    """Persist ``upload`` and return the public URL path it is served from."""
    name = default_storage.save(generate_filename(upload.name), upload)
    logger.debug("Stored upload %s (%s bytes)", name, upload.size)
    return f"{settings.MEDIA_URL}{name}"


def remove_upload(image_url: str | None) -> None:
    """Delete the stored file behind ``image_url``; missing files are ignored."""
    if not image_url:
        return
    name = os.path.basename(image_url)
    if name and default_storage.exists(name):
        default_storage.delete(name)
        logger.debug("Removed upload %s", name)


__all__ = ["generate_filename", "remove_upload", "store_upload"]
