"""Tests for the timezone application service."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from timezone_finder.application.services import (
    UNKNOWN_ADDRESS_TEXT,
    UNKNOWN_TIMEZONE_TEXT,
    TimezoneService,
)
from timezone_finder.domain.models import TimezoneLookup, TimezoneReport


def _make_repository(lookup: TimezoneLookup) -> MagicMock:
    repository = MagicMock()
    repository.lookup_timezone = AsyncMock(return_value=lookup)
    return repository


@pytest.mark.asyncio
async def test_describe_with_timezone_names_it() -> None:
    """Given a resolvable address, when describing, then the timezone is named."""
    repository = _make_repository(TimezoneLookup.of("Europe/Berlin"))
    service = TimezoneService(repository)

    text = await service.describe("203.0.113.5")

    assert text == "Your timezone is: Europe/Berlin"
    repository.lookup_timezone.assert_awaited_once_with("203.0.113.5")


@pytest.mark.asyncio
async def test_describe_without_timezone_reports_unknown() -> None:
    """Given a lookup without result, when describing, then timezone is reported unknown."""
    service = TimezoneService(_make_repository(TimezoneLookup.absent()))

    text = await service.describe("203.0.113.5")

    assert text == UNKNOWN_TIMEZONE_TEXT


@pytest.mark.asyncio
async def test_describe_without_address_skips_lookup() -> None:
    """Given no address, when describing, then no lookup is made and IP is undeterminable."""
    repository = _make_repository(TimezoneLookup.of("Europe/Berlin"))
    service = TimezoneService(repository)

    text = await service.describe(None)

    assert text == UNKNOWN_ADDRESS_TEXT
    assert "timezone: unknown" in text
    repository.lookup_timezone.assert_not_awaited()


@pytest.mark.asyncio
async def test_report_contains_address_and_timezone() -> None:
    """Given a resolvable address, when reporting, then both values are included."""
    service = TimezoneService(_make_repository(TimezoneLookup.of("America/Chicago")))

    report = await service.report("8.8.8.8")

    assert report == TimezoneReport(timezone="America/Chicago", ip="8.8.8.8")


@pytest.mark.asyncio
async def test_report_without_address_has_both_values_absent() -> None:
    """Given no address, when reporting, then both values are None and no lookup is made."""
    repository = _make_repository(TimezoneLookup.of("America/Chicago"))
    service = TimezoneService(repository)

    report = await service.report(None)

    assert report == TimezoneReport(timezone=None, ip=None)
    repository.lookup_timezone.assert_not_awaited()


@pytest.mark.asyncio
async def test_resolve_with_empty_address_is_absent() -> None:
    """Given an empty address, when resolving, then absence is returned."""
    repository = _make_repository(TimezoneLookup.of("America/Chicago"))
    service = TimezoneService(repository)

    result = await service.resolve("")

    assert result.found is False
    repository.lookup_timezone.assert_not_awaited()
