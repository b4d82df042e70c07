"""Timezone lookup result domain model."""

from pydantic import BaseModel, ConfigDict


class TimezoneLookup(BaseModel):
    """Outcome of resolving a client address to a timezone.

    There are exactly two outcomes: a timezone identifier (e.g. an IANA zone
    name) or absence. A failed lookup and a lookup that returned no data are
    both reported as absence.
    """

    model_config = ConfigDict(frozen=True)

    timezone: str | None = None

    @property
    def found(self) -> bool:
        """Whether a timezone identifier is available."""
        return self.timezone is not None

    @classmethod
    def of(cls, timezone: str) -> "TimezoneLookup":
        return cls(timezone=timezone)

    @classmethod
    def absent(cls) -> "TimezoneLookup":
        return cls(timezone=None)
