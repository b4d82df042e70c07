"""Ports (interfaces) for the ports-and-adapters architecture."""

from timezone_finder.domain.ports.timezone_repository import TimezoneRepository

__all__ = [
    "TimezoneRepository",
]
