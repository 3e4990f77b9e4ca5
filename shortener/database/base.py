"""Abstract base class for link store implementations."""

from abc import ABC, abstractmethod
from typing import List, Optional

from .models import ClickEvent, ShortLink


class LinkStoreBase(ABC):
    """Abstract base class for short link persistence.

    Implementations must enforce short code uniqueness atomically: ``save``
    raises ``DuplicateCodeError`` instead of storing a second link with the
    same code. Any other persistence failure surfaces as ``StorageError``.
    """

    def __init__(self, db_config: str):
        """Initialize store.

        Args:
            db_config: Database connection string
        """
        self.db_config = db_config

    @abstractmethod
    async def find_by_code(self, code: str) -> Optional[ShortLink]:
        """Find a link by its short code (case-sensitive).

        Args:
            code: The short code to lookup

        Returns:
            The link with its clicks loaded, or None if not found
        """
        pass

    @abstractmethod
    async def find_by_id(self, link_id: int) -> Optional[ShortLink]:
        """Find a link by its store-assigned identifier.

        Args:
            link_id: The link identifier

        Returns:
            The link with its clicks loaded, or None if not found
        """
        pass

    @abstractmethod
    async def save(self, link: ShortLink) -> ShortLink:
        """Persist a new link.

        Args:
            link: Link without an id

        Returns:
            The persisted link carrying its assigned id

        Raises:
            DuplicateCodeError: If the code is already taken
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[ShortLink]:
        """List every link, in creation order, with clicks loaded."""
        pass

    @abstractmethod
    async def save_click(self, click: ClickEvent) -> ClickEvent:
        """Append a click event to an existing link.

        Args:
            click: Click without an id

        Returns:
            The persisted click carrying its assigned id

        Raises:
            StorageError: If the referenced link does not exist
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close store connections."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is healthy.

        Returns:
            True if healthy, False otherwise
        """
        pass
