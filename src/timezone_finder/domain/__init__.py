"""Domain layer - core models and ports."""

from timezone_finder.domain.models import TimezoneLookup, TimezoneReport
from timezone_finder.domain.ports import TimezoneRepository

__all__ = [
    "TimezoneLookup",
    "TimezoneReport",
    "TimezoneRepository",
]
