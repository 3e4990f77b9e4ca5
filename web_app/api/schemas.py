"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from shortener.database.models import ClickEvent, ShortLink


class ShortenRequest(BaseModel):
    """Request to shorten a URL.

    The URL is not validated; any string is stored as submitted.
    """

    original_url: str = Field(..., alias="originalUrl", description="The URL to shorten")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"originalUrl": "https://example.com/very/long/path/to/resource"},
                {"originalUrl": "example.com"},
            ]
        },
    }


class ClickStatsResponse(BaseModel):
    """One recorded click."""

    id: Optional[int] = None
    clicked_at: datetime = Field(..., alias="clickedAt")
    ip_address: Optional[str] = Field(None, alias="ipAddress")
    referrer: Optional[str] = None
    user_agent: Optional[str] = Field(None, alias="userAgent")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_click(cls, click: ClickEvent) -> "ClickStatsResponse":
        return cls(
            id=click.id,
            clicked_at=click.clicked_at,
            ip_address=click.client_address,
            referrer=click.referrer,
            user_agent=click.user_agent,
        )


class ShortLinkResponse(BaseModel):
    """A short link with its click history."""

    id: Optional[int] = None
    short_code: str = Field(..., alias="shortCode")
    original_url: str = Field(..., alias="originalUrl")
    created_at: datetime = Field(..., alias="createdAt")
    click_stats: List[ClickStatsResponse] = Field(default_factory=list, alias="clickStats")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": 1,
                    "shortCode": "aZ3k9Q",
                    "originalUrl": "https://example.com",
                    "createdAt": "2024-01-01T12:00:00Z",
                    "clickStats": [
                        {
                            "id": 1,
                            "clickedAt": "2024-01-01T12:05:00Z",
                            "ipAddress": "203.0.113.7",
                            "referrer": "https://google.com",
                            "userAgent": "Mozilla/5.0",
                        }
                    ],
                }
            ]
        },
    }

    @classmethod
    def from_link(cls, link: ShortLink) -> "ShortLinkResponse":
        return cls(
            id=link.id,
            short_code=link.code,
            original_url=link.original_url,
            created_at=link.created_at,
            click_stats=[ClickStatsResponse.from_click(c) for c in link.clicks],
        )


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    database: str = Field(..., description="Database status")
    cache: str = Field(..., description="Cache status")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Detailed error information")
