"""Application services (use cases) for timezone lookups."""

import logging
from typing import TYPE_CHECKING

from timezone_finder.domain.models import TimezoneLookup, TimezoneReport

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from timezone_finder.domain.ports import TimezoneRepository

UNKNOWN_ADDRESS_TEXT = (
    "Cannot determine IP (only available in HTTP/SSE remote calls), timezone: unknown"
)
UNKNOWN_TIMEZONE_TEXT = "Could not determine timezone for your IP address."


class TimezoneService:
    """Service resolving a client address to a timezone answer."""

    def __init__(self, timezone_repository: "TimezoneRepository") -> None:
        """Initialize with a timezone repository."""
        self._timezone_repository = timezone_repository

    async def resolve(self, ip: str | None) -> TimezoneLookup:
        """Resolve the timezone for an address, or absence when there is no address.

        No outbound lookup is made without an address.
        """
        if not ip:
            logger.debug("No client address available, skipping timezone lookup")
            return TimezoneLookup.absent()
        return await self._timezone_repository.lookup_timezone(ip)

    async def describe(self, ip: str | None) -> str:
        """Describe the caller's timezone as text for MCP clients."""
        if not ip:
            return UNKNOWN_ADDRESS_TEXT

        lookup = await self.resolve(ip)
        if lookup.found:
            return f"Your timezone is: {lookup.timezone}"
        return UNKNOWN_TIMEZONE_TEXT

    async def report(self, ip: str | None) -> TimezoneReport:
        """Build the structured diagnostic report for an address.

        Without an address no lookup is made and both values are None. Querying
        the geolocation API with an empty address would report the location of
        this server instead of the client.
        """
        lookup = await self.resolve(ip)
        return TimezoneReport(timezone=lookup.timezone, ip=ip)
