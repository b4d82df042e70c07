"""Diagnostic timezone report domain model."""

from pydantic import BaseModel, ConfigDict


class TimezoneReport(BaseModel):
    """Client address and the timezone resolved for it, either possibly unknown."""

    model_config = ConfigDict(frozen=True)

    timezone: str | None
    ip: str | None
