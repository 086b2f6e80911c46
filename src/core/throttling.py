"""Redis-backed fixed-window throttle for the public auth endpoints."""

import logging
import time

from django.conf import settings
from redis.exceptions import RedisError
from rest_framework.throttling import BaseThrottle

from core.redis_client import get_redis_client

logger = logging.getLogger(__name__)


def parse_rate(rate: str | None) -> tuple[int, int] | None:
    """Parse ``"<count>/<seconds>"``; empty or malformed values disable limiting."""

    if not rate:
        return None
    try:
        count, seconds = (int(part) for part in rate.split("/", 1))
    except ValueError:
        logger.warning("Ignoring malformed rate limit %r", rate)
        return None
    if count <= 0 or seconds <= 0:
        return None
    return count, seconds


class AuthRateThrottle(BaseThrottle):
    """Allow AUTH_RATE_LIMIT requests per client IP per window.

    Counters live in Redis so every worker shares the same budget. When Redis
    cannot be reached the request is let through.
    """

    KEY_PREFIX = "ratelimit:auth:"

    def __init__(self):
        self._wait: float | None = None

    def allow_request(self, request, view) -> bool:
        rate = parse_rate(getattr(settings, "AUTH_RATE_LIMIT", None))
        if rate is None:
            return True
        limit, window = rate

        now = int(time.time())
        key = f"{self.KEY_PREFIX}{self.get_ident(request)}:{now // window}"
        try:
            client = get_redis_client()
            hits = client.incr(key)
            if hits == 1:
                client.expire(key, window)
        except RedisError:
            logger.warning("Rate limiter unavailable; allowing auth request", exc_info=True)
            return True

        if hits > limit:
            self._wait = window - (now % window)
            logger.info("Auth rate limit exceeded for %s", self.get_ident(request))
            return False
        return True

    def wait(self) -> float | None:
        return self._wait


__all__ = ["AuthRateThrottle", "parse_rate"]
