"""Opt-in logging of outbound API requests, enabled with TZF_LOG_REQUESTS=true."""

import logging
import os
from typing import Any

logger = logging.getLogger(__name__)


def should_log_requests() -> bool:
    """Check if request logging is enabled via TZF_LOG_REQUESTS environment variable."""
    return os.getenv("TZF_LOG_REQUESTS", "").lower() == "true"


def log_api_request(method: str, url: str, params: dict[str, Any] | None = None) -> None:
    """Log the method and full URL of an outbound request when request logging is enabled.

    Query parameters are rendered in sorted order after the URL.
    """
    if not should_log_requests():
        return

    if params:
        query = "&".join(f"{key}={value}" for key, value in sorted(params.items()))
        url = f"{url}{'&' if '?' in url else '?'}{query}"
    logger.info(f"API Request: {method} {url}")
