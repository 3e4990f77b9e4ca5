"""API routes implementation."""

from typing import List

from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse

from .schemas import ShortenRequest, ShortLinkResponse, ErrorResponse
from shortener.common.urls import normalize_redirect_url
from shortener.database.models import ClientMeta
from shortener.exceptions import NotFoundError

router = APIRouter()


def _client_meta(request: Request) -> ClientMeta:
    """Collect client metadata for click analytics."""
    return ClientMeta(
        address=getattr(request.state, "client_address", None),
        referrer=request.headers.get("referer"),
        user_agent=request.headers.get("user-agent"),
    )


@router.post(
    "/shorten",
    response_model=ShortLinkResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or malformed body"},
        503: {"model": ErrorResponse, "description": "Link store unavailable"},
    },
    summary="Create short URL",
    description="Create a shortened URL. The URL is stored exactly as submitted.",
)
async def shorten_url(request: Request, body: ShortenRequest):
    """Create a shortened URL."""
    service = request.app.state.service

    link = await service.create(body.original_url)

    return ShortLinkResponse.from_link(link)


@router.get(
    "/urls",
    response_model=List[ShortLinkResponse],
    summary="List short URLs",
    description="List every shortened URL with its click history.",
)
async def list_urls(request: Request):
    """List all shortened URLs."""
    service = request.app.state.service

    links = await service.get_all()

    return [ShortLinkResponse.from_link(link) for link in links]


@router.get(
    "/stats/{code}",
    response_model=ShortLinkResponse,
    responses={404: {"description": "Short code not found"}},
    summary="Get click statistics",
    description="Get a shortened URL with its click history. Does not count as a click.",
)
async def get_stats(request: Request, code: str):
    """Get click statistics for a short code."""
    service = request.app.state.service

    link = await service.get_stats(code)

    if link is None:
        raise NotFoundError(f"Short code '{code}' not found")

    return ShortLinkResponse.from_link(link)


@router.get(
    "/{code}",
    status_code=status.HTTP_302_FOUND,
    responses={404: {"description": "Short code not found"}},
    summary="Redirect to original URL",
    description="Redirect to the original URL and record a click.",
)
async def redirect_to_url(request: Request, code: str):
    """Redirect to the original URL."""
    service = request.app.state.service

    link = await service.resolve(code, _client_meta(request))

    if link is None:
        raise NotFoundError(f"Short code '{code}' not found")

    # 302 (temporary) so every visit reaches us and is counted
    return RedirectResponse(
        url=normalize_redirect_url(link.original_url),
        status_code=status.HTTP_302_FOUND,
    )
