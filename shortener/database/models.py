"""Data models for URL shortener."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


def _parse_datetime(value) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


@dataclass
class ClientMeta:
    """Request-derived metadata captured when a short code is resolved."""

    address: Optional[str] = None
    referrer: Optional[str] = None
    user_agent: Optional[str] = None


@dataclass
class ClickEvent:
    """One recorded visit to a short link."""

    link_id: int
    clicked_at: datetime
    client_address: Optional[str] = None
    referrer: Optional[str] = None
    user_agent: Optional[str] = None
    id: Optional[int] = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "link_id": self.link_id,
            "clicked_at": self.clicked_at.isoformat(),
            "client_address": self.client_address,
            "referrer": self.referrer,
            "user_agent": self.user_agent,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ClickEvent":
        """Create from dictionary."""
        return cls(
            id=data.get("id"),
            link_id=data["link_id"],
            clicked_at=_parse_datetime(data["clicked_at"]),
            client_address=data.get("client_address"),
            referrer=data.get("referrer"),
            user_agent=data.get("user_agent"),
        )


@dataclass
class ShortLink:
    """A short code bound to its original URL and click history."""

    code: str
    original_url: str
    created_at: datetime
    clicks: List[ClickEvent] = field(default_factory=list)
    id: Optional[int] = None

    def to_dict(self, include_clicks: bool = True) -> dict:
        """Convert to dictionary."""
        data = {
            "id": self.id,
            "code": self.code,
            "original_url": self.original_url,
            "created_at": self.created_at.isoformat(),
        }
        if include_clicks:
            data["clicks"] = [click.to_dict() for click in self.clicks]
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ShortLink":
        """Create from dictionary."""
        return cls(
            id=data.get("id"),
            code=data["code"],
            original_url=data["original_url"],
            created_at=_parse_datetime(data["created_at"]),
            clicks=[ClickEvent.from_dict(c) for c in data.get("clicks", [])],
        )
