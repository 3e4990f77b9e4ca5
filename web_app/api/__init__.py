"""HTTP API for creating, resolving and inspecting short links."""

from .routes import router as api_router

__all__ = ["api_router"]
