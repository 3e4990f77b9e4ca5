"""Common utilities for URL shortener."""

from .headers import extract_forwarded_headers, resolve_client_address
from .urls import normalize_redirect_url
from .logging_config import setup_logging

__all__ = [
    "extract_forwarded_headers",
    "resolve_client_address",
    "normalize_redirect_url",
    "setup_logging",
]
