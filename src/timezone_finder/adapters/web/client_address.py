"""Extraction of the client network address from trusted proxy headers.

Priority, first match wins:

1. ``CF-Connecting-IP``, the address of the directly connecting client as seen
   by the edge proxy.
2. The first entry of ``X-Forwarded-For`` (``client, proxy1, proxy2``).

No address syntax validation is performed; any non-empty value is returned.

Known limitation: ``X-Forwarded-For`` is trusted without checking that the
immediate peer is an authorized proxy, so clients can spoof it when the
service is reachable without a proxy in front.
"""

from collections.abc import Mapping
from typing import Any

CONNECTING_IP_HEADER = "cf-connecting-ip"
FORWARDED_FOR_HEADER = "x-forwarded-for"


def _get_header(headers: Mapping[str, str], name: str) -> str | None:
    """Case-insensitive header lookup."""
    value = headers.get(name)
    if value is not None:
        return value
    for key, candidate in headers.items():
        if key.lower() == name:
            return candidate
    return None


def extract_client_address(headers: Mapping[str, str]) -> str | None:
    """Return the best-guess client address from request headers, or None."""
    connecting_ip = _get_header(headers, CONNECTING_IP_HEADER)
    if connecting_ip:
        return connecting_ip

    forwarded_for = _get_header(headers, FORWARDED_FOR_HEADER)
    if forwarded_for:
        first = forwarded_for.split(",")[0].strip()
        if first:
            return first

    return None


def extract_client_address_from_request(request: Any) -> str | None:
    """Convenience wrapper reading the ``headers`` attribute of a request.

    Returns None when there is no request or it carries no headers.
    """
    headers = getattr(request, "headers", None)
    if headers is None:
        return None
    return extract_client_address(headers)
