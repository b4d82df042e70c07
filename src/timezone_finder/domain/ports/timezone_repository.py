"""Timezone repository port."""

from typing import Protocol

from timezone_finder.domain.models.timezone_lookup import TimezoneLookup


class TimezoneRepository(Protocol):
    """Port for resolving a client network address to a timezone."""

    async def lookup_timezone(self, ip: str) -> TimezoneLookup:
        """Resolve the timezone for an address.

        Implementations never raise for lookup failures; they return
        ``TimezoneLookup.absent()`` instead.
        """
        ...
