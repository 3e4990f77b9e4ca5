"""In-process link store, used for ``memory://`` URLs and tests."""

import asyncio
import dataclasses
import itertools
import logging
from typing import Dict, List, Optional

from ..common.logging_config import get_logger
from ..exceptions import DuplicateCodeError, StorageError
from .base import LinkStoreBase
from .models import ClickEvent, ShortLink


class InMemoryLinkStore(LinkStoreBase):
    """Dictionary-backed store with the same contract as the SQL backend.

    Returned links are snapshots: mutating them, or recording further
    clicks, does not change an object already handed out.
    """

    def __init__(
        self,
        db_config: str = "memory://",
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(db_config)
        self.logger = logger or get_logger(__name__)

        self._links: Dict[int, ShortLink] = {}
        self._ids_by_code: Dict[str, int] = {}
        self._clicks: Dict[int, List[ClickEvent]] = {}
        self._link_ids = itertools.count(1)
        self._click_ids = itertools.count(1)
        self._lock = asyncio.Lock()

    def _snapshot(self, link_id: int) -> ShortLink:
        link = self._links[link_id]
        clicks = [dataclasses.replace(c) for c in self._clicks[link_id]]
        return dataclasses.replace(link, clicks=clicks)

    async def find_by_code(self, code: str) -> Optional[ShortLink]:
        link_id = self._ids_by_code.get(code)
        if link_id is None:
            return None
        return self._snapshot(link_id)

    async def find_by_id(self, link_id: int) -> Optional[ShortLink]:
        if link_id not in self._links:
            return None
        return self._snapshot(link_id)

    async def save(self, link: ShortLink) -> ShortLink:
        async with self._lock:
            if link.code in self._ids_by_code:
                raise DuplicateCodeError(f"Short code '{link.code}' already exists")

            link_id = next(self._link_ids)
            self._links[link_id] = dataclasses.replace(link, id=link_id, clicks=[])
            self._ids_by_code[link.code] = link_id
            self._clicks[link_id] = []

        self.logger.debug(f"Stored link {link_id}: {link.code}")
        return self._snapshot(link_id)

    async def find_all(self) -> List[ShortLink]:
        return [self._snapshot(link_id) for link_id in sorted(self._links)]

    async def save_click(self, click: ClickEvent) -> ClickEvent:
        async with self._lock:
            if click.link_id not in self._links:
                raise StorageError(f"Link {click.link_id} does not exist")

            stored = dataclasses.replace(click, id=next(self._click_ids))
            self._clicks[click.link_id].append(stored)

        return dataclasses.replace(stored)

    async def delete(self, link_id: int) -> bool:
        """Delete a link together with its click history."""
        async with self._lock:
            link = self._links.pop(link_id, None)
            if link is None:
                return False
            del self._ids_by_code[link.code]
            del self._clicks[link_id]
        return True

    async def close(self) -> None:
        pass

    async def health_check(self) -> bool:
        return True
