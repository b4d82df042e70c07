"""Timezone repository backed by the ip-api.com geolocation API.

API Documentation: https://ip-api.com/docs/api:json
"""

import asyncio
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import aiohttp

from timezone_finder.adapters.api_request_logger import log_api_request
from timezone_finder.domain.models import TimezoneLookup

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

# Only the fields needed to decide the outcome
IP_API_FIELDS = "status,message,timezone"


class IpApiTimezoneRepository:
    """Resolves client addresses to timezones using a single ip-api.com request.

    Best effort: failures are logged and reported as an absent timezone,
    never raised. No retries, no caching.
    """

    def __init__(
        self,
        session: "ClientSession",
        base_url: str,
        timeout: float | None = None,
    ) -> None:
        """Initialize with an aiohttp session, the API base URL and optional request timeout."""
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout) if timeout is not None else None

    def _build_url(self, ip: str) -> str:
        return f"{self._base_url}/{quote(ip, safe='')}"

    @staticmethod
    def _parse_lookup(data: Any, ip: str) -> TimezoneLookup:
        """Map an ip-api.com response body to a lookup outcome."""
        if not isinstance(data, dict):
            logger.warning(f"Unexpected geolocation response for {ip}: {str(data)[:200]}")
            return TimezoneLookup.absent()

        if data.get("status") != "success":
            logger.warning(
                f"Geolocation lookup for {ip} failed: {data.get('message', 'no message')}"
            )
            return TimezoneLookup.absent()

        timezone = data.get("timezone")
        if not isinstance(timezone, str):
            logger.warning(f"Geolocation response for {ip} has no textual timezone")
            return TimezoneLookup.absent()

        return TimezoneLookup.of(timezone)

    async def _handle_response(self, response: "ClientResponse", ip: str) -> TimezoneLookup:
        # ip-api.com reports failures in the body, so the status code is only logged
        if response.status != 200:
            logger.debug(f"Geolocation API returned status {response.status} for {ip}")
        data = await response.json(content_type=None)
        return self._parse_lookup(data, ip)

    async def lookup_timezone(self, ip: str) -> TimezoneLookup:
        """Look up the timezone for an address.

        Args:
            ip: Client network address, forwarded as-is.

        Returns:
            The timezone when the API reports success with a textual timezone,
            otherwise an absent lookup.
        """
        url = self._build_url(ip)
        params = {"fields": IP_API_FIELDS}
        log_api_request("GET", url, params)

        request_kwargs: dict[str, Any] = {"params": params}
        if self._timeout is not None:
            request_kwargs["timeout"] = self._timeout

        try:
            async with self._session.get(url, **request_kwargs) as response:
                return await self._handle_response(response, ip)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.warning(f"GeoIP lookup failed for {ip}: {e!r}")
            return TimezoneLookup.absent()
