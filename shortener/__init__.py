"""Core business logic for URL shortener."""

from .shortcode import ShortCodeGenerator
from .service import LinkService

__all__ = ["ShortCodeGenerator", "LinkService"]
