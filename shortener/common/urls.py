"""Redirect target utilities for URL shortener."""


def normalize_redirect_url(original_url: str) -> str:
    """Build the redirect target for a stored URL.

    URLs are stored verbatim, so a scheme-less target such as
    ``example.com`` gets ``http://`` prepended. Anything already starting
    with ``http://`` or ``https://`` is returned unchanged.

    Args:
        original_url: The stored original URL

    Returns:
        Absolute redirect URL
    """
    if original_url.startswith(("http://", "https://")):
        return original_url
    return f"http://{original_url}"
