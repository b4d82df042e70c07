"""Application layer - use cases composing domain ports."""

from timezone_finder.application.services import TimezoneService

__all__ = ["TimezoneService"]
