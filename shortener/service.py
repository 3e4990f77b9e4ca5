"""Business logic service for URL shortener."""

import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional

from .shortcode import ShortCodeGenerator
from .database.base import LinkStoreBase
from .database.cache import RedisCache
from .database.models import ClickEvent, ClientMeta, ShortLink
from .common.logging_config import get_logger
from .exceptions import CodeGenerationError, DuplicateCodeError, StorageError


class LinkService:
    """Service layer for link creation, resolution and click analytics."""

    def __init__(
        self,
        store: LinkStoreBase,
        cache: Optional[RedisCache] = None,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
        max_collision_retries: int = 10,
        fallback_code_length: int = 8,
    ):
        """Initialize link service.

        Args:
            store: Link store instance
            cache: Optional cache instance
            short_code_generator: Optional short code generator
            logger: Optional logger
            max_collision_retries: Attempts per code length before giving up
            fallback_code_length: Wider code length tried once the default
                length has used up its attempts
        """
        if max_collision_retries < 1:
            raise ValueError("max_collision_retries must be positive")

        self.store = store
        self.cache = cache
        self.generator = short_code_generator or ShortCodeGenerator()
        self.logger = logger or get_logger(__name__)
        self.max_collision_retries = max_collision_retries
        self.fallback_code_length = fallback_code_length

    async def create(self, original_url: str) -> ShortLink:
        """Create a new short link.

        The URL is stored exactly as given. A code is only committed once the
        store accepts it, so a conflict reported by the store (two creations
        racing for the same code) is retried like any other collision.

        Args:
            original_url: The original long URL

        Returns:
            The persisted link with its assigned id

        Raises:
            CodeGenerationError: If every attempt hit a taken code
            StorageError: If the store fails
        """
        lengths = [self.generator.default_length]
        if self.fallback_code_length > self.generator.default_length:
            lengths.append(self.fallback_code_length)

        for length in lengths:
            for attempt in range(1, self.max_collision_retries + 1):
                code = self.generator.generate(length=length)

                if await self.store.find_by_code(code) is not None:
                    self.logger.debug(f"Collision on {code} (attempt {attempt}, length {length})")
                    continue

                link = ShortLink(
                    code=code,
                    original_url=original_url,
                    created_at=datetime.now(timezone.utc),
                )
                try:
                    saved = await self.store.save(link)
                except DuplicateCodeError:
                    self.logger.warning(f"Store rejected {code} as taken, retrying")
                    continue

                self.logger.info(f"Created short URL: {saved.code} -> {original_url}")
                return saved

            self.logger.warning(
                f"No free code of length {length} after {self.max_collision_retries} attempts"
            )

        raise CodeGenerationError("Unable to generate unique short code after multiple attempts")

    async def resolve(self, code: str, client: Optional[ClientMeta] = None) -> Optional[ShortLink]:
        """Resolve a short code and record a click for it.

        Args:
            code: The short code to lookup (case-sensitive)
            client: Metadata of the visiting client

        Returns:
            The link or None if not found. Its ``clicks`` may not include
            the click recorded by this call.
        """
        link = await self._lookup(code)

        if link is None:
            self.logger.warning(f"Short code not found: {code}")
            return None

        await self._record_click(link, client or ClientMeta())
        self.logger.debug(f"Resolved {code} -> {link.original_url}")
        return link

    async def get_all(self) -> List[ShortLink]:
        """List all links with their click history."""
        return await self.store.find_all()

    async def get_stats(self, code: str) -> Optional[ShortLink]:
        """Get a link with its click history, without recording a click.

        Args:
            code: The short code to lookup

        Returns:
            The link or None if not found
        """
        return await self.store.find_by_code(code)

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        db_healthy = await self.store.health_check()

        cache_healthy = True
        if self.cache and self.cache.enabled:
            cache_healthy = await self.cache.ping()

        return {
            "database": db_healthy,
            "cache": cache_healthy,
            "overall": db_healthy and cache_healthy,
        }

    async def _lookup(self, code: str) -> Optional[ShortLink]:
        if self.cache:
            cached = await self.cache.get_link(code)
            if cached:
                self.logger.debug(f"Cache hit for {code}")
                return cached

        link = await self.store.find_by_code(code)
        if link and self.cache:
            await self.cache.set_link(link)
        return link

    async def _record_click(self, link: ShortLink, client: ClientMeta) -> None:
        # Analytics must never change the redirect outcome.
        click = ClickEvent(
            link_id=link.id,
            clicked_at=datetime.now(timezone.utc),
            client_address=client.address,
            referrer=client.referrer,
            user_agent=client.user_agent,
        )
        try:
            await self.store.save_click(click)
        except StorageError as e:
            self.logger.warning(f"Failed to record click for {link.code}: {e}")

    async def close(self) -> None:
        """Close service connections."""
        await self.store.close()
        if self.cache:
            await self.cache.close()
