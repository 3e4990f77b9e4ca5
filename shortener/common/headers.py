"""Header parsing utilities for URL shortener."""

from typing import Dict, Mapping, Optional


def extract_forwarded_headers(headers: Mapping[str, str]) -> Dict[str, Optional[str]]:
    """Extract X-Forwarded-* headers from request.

    Args:
        headers: Request headers mapping

    Returns:
        Dictionary with forwarded_proto, forwarded_host, forwarded_for
    """
    # Convert headers to lowercase for case-insensitive lookup
    headers_lower = {k.lower(): v for k, v in headers.items()}

    return {
        "forwarded_proto": headers_lower.get("x-forwarded-proto"),
        "forwarded_host": headers_lower.get("x-forwarded-host"),
        "forwarded_for": headers_lower.get("x-forwarded-for"),
    }


def resolve_client_address(
    headers: Mapping[str, str],
    peer_address: Optional[str] = None,
) -> Optional[str]:
    """Determine the visiting client's address.

    Priority:
    1. First hop of X-Forwarded-For (set by the proxy)
    2. Socket peer address

    Args:
        headers: Request headers
        peer_address: Address of the directly connected peer

    Returns:
        Client address or None if unknown
    """
    forwarded_for = extract_forwarded_headers(headers)["forwarded_for"]
    if forwarded_for:
        first_hop = forwarded_for.split(",")[0].strip()
        if first_hop:
            return first_hop
    return peer_address
