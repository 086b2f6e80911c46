"""Settings used by the test suite: in-memory SQLite and a throwaway upload dir."""
import tempfile
from pathlib import Path

from .settings import *  # noqa: F401,F403

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

MEDIA_ROOT = Path(tempfile.mkdtemp(prefix="article-cms-uploads-"))
JWT_SECRET = "test-jwt-secret-with-enough-bytes-for-hs256"
AUTH_RATE_LIMIT = "20/900"
DEBUG_ERROR_DETAILS = False
BCRYPT_ROUNDS = 4
