"""Web adapter: HTTP dispatcher and request helpers."""

from timezone_finder.adapters.web.app import create_app
from timezone_finder.adapters.web.client_address import (
    extract_client_address,
    extract_client_address_from_request,
)

__all__ = [
    "create_app",
    "extract_client_address",
    "extract_client_address_from_request",
]
