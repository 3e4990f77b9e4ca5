"""Forwarded headers middleware."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable

from shortener.common.headers import resolve_client_address


class ForwardedHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to resolve the visiting client's address."""

    async def dispatch(self, request: Request, call_next: Callable):
        """Store the client address (X-Forwarded-For first hop, else peer) in request state."""
        peer = request.client.host if request.client else None
        request.state.client_address = resolve_client_address(request.headers, peer)

        return await call_next(request)
