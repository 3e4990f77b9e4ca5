"""Redis cache layer for URL shortener."""

import json
import logging
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from ..common.logging_config import get_logger
from .models import ShortLink


class RedisCache:
    """Read-through Redis cache of short links, keyed by code.

    Only the link itself is cached, never its click history. Every Redis
    failure is logged and treated as a miss so resolution keeps working
    from the store.
    """

    def __init__(
        self,
        redis_url: Optional[str] = None,
        ttl_seconds: int = 3600,
        logger: Optional[logging.Logger] = None,
        client: Optional[redis.Redis] = None,
    ):
        """Initialize Redis cache.

        Args:
            redis_url: Redis connection URL (e.g., redis://localhost:6379/0)
            ttl_seconds: Default TTL for cached items
            logger: Optional logger instance
            client: Pre-built client, skips connecting from ``redis_url``
        """
        self.redis_url = redis_url
        self.ttl_seconds = ttl_seconds
        self.logger = logger or get_logger(__name__)
        self.client: Optional[redis.Redis] = client
        self.enabled = client is not None or redis_url is not None

        if self.enabled:
            self.logger.info(f"Redis cache enabled with TTL={ttl_seconds}s")

    async def connect(self) -> None:
        """Connect to Redis."""
        if not self.enabled or self.client is not None:
            return

        try:
            self.client = redis.from_url(
                self.redis_url,
                encoding="utf-8",
                decode_responses=True,
            )
            await self.client.ping()
            self.logger.info("Connected to Redis")
        except (RedisError, OSError) as e:
            self.logger.error(f"Failed to connect to Redis: {e}")
            self.enabled = False

    async def get_link(self, code: str) -> Optional[ShortLink]:
        """Get a cached link.

        Args:
            code: Short code

        Returns:
            Cached link (without clicks) or None
        """
        if not self.enabled or not self.client:
            return None

        try:
            raw = await self.client.get(self.get_cache_key(code))
        except RedisError as e:
            self.logger.error(f"Cache get error: {e}")
            return None

        if raw is None:
            return None
        try:
            return ShortLink.from_dict(json.loads(raw))
        except (ValueError, KeyError) as e:
            self.logger.warning(f"Discarding unreadable cache entry for {code}: {e}")
            return None

    async def set_link(self, link: ShortLink, ttl: Optional[int] = None) -> bool:
        """Cache a link.

        Args:
            link: Persisted link
            ttl: Optional TTL override (seconds)

        Returns:
            True if successful
        """
        if not self.enabled or not self.client:
            return False

        payload = json.dumps(link.to_dict(include_clicks=False))
        try:
            await self.client.setex(self.get_cache_key(link.code), ttl or self.ttl_seconds, payload)
            return True
        except RedisError as e:
            self.logger.error(f"Cache set error: {e}")
            return False

    async def ping(self) -> bool:
        """Check the Redis connection."""
        if not self.enabled or not self.client:
            return False
        try:
            return bool(await self.client.ping())
        except RedisError as e:
            self.logger.error(f"Cache ping error: {e}")
            return False

    async def close(self) -> None:
        """Close Redis connection."""
        if self.client:
            await self.client.aclose()
            self.logger.info("Redis connection closed")

    def get_cache_key(self, code: str) -> str:
        """Generate cache key for short code."""
        return f"url:shortener:link:{code}"
