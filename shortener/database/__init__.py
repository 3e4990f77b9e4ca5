"""Storage layer for URL shortener."""

import logging
from typing import Optional

from .base import LinkStoreBase
from .memory import InMemoryLinkStore
from .postgres import PostgresLinkStore
from .models import ClickEvent, ClientMeta, ShortLink

__all__ = [
    "LinkStoreBase",
    "InMemoryLinkStore",
    "PostgresLinkStore",
    "ClickEvent",
    "ClientMeta",
    "ShortLink",
    "create_store",
]


def create_store(
    database_url: str,
    pool_max_size: int = 10,
    connection_timeout_seconds: int = 30,
    create_tables: bool = False,
    logger: Optional[logging.Logger] = None,
) -> LinkStoreBase:
    """Create the link store matching the URL scheme.

    ``memory://`` selects the in-process store, ``postgres://`` and
    ``postgresql://`` the asyncpg backend.
    """
    scheme = database_url.split("://", 1)[0].lower()

    if scheme == "memory":
        return InMemoryLinkStore(db_config=database_url, logger=logger)
    if scheme in ("postgres", "postgresql"):
        return PostgresLinkStore(
            db_config=database_url,
            pool_max_size=pool_max_size,
            connection_timeout_seconds=connection_timeout_seconds,
            create_tables=create_tables,
            logger=logger,
        )
    raise ValueError(f"Unsupported database URL scheme: {scheme!r}")
