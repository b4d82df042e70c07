"""IP geolocation API adapter."""

from timezone_finder.adapters.geoip_api.ip_api_timezone_repository import (
    IpApiTimezoneRepository,
)

__all__ = ["IpApiTimezoneRepository"]
