"""Domain models for timezone lookups."""

from timezone_finder.domain.models.timezone_lookup import TimezoneLookup
from timezone_finder.domain.models.timezone_report import TimezoneReport

__all__ = [
    "TimezoneLookup",
    "TimezoneReport",
]
