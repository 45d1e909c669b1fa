"""Shared test fixtures for pyZmanimFormat tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, date, datetime, timedelta, timezone, tzinfo
from typing import Any
from zoneinfo import ZoneInfo

import pytest

from src.zmanimformat.catalog import (
    Capability,
    CapabilityKind,
    CapabilityRegistry,
    SourceKind,
    SourceMetadata,
)
from src.zmanimformat.format import UNAVAILABLE_MILLIS

EST = timezone(timedelta(hours=-5), "EST")

SUNRISE = datetime(2007, 2, 18, 11, 45, 27, tzinfo=UTC)  # 06:45:27 EST
SUNSET = datetime(2007, 2, 18, 22, 42, 10, tzinfo=UTC)  # 17:42:10 EST
MOLAD = datetime(2007, 2, 17, 16, 34, 0, tzinfo=UTC)
TEMPORAL_HOUR = 3_257_529  # PT54M17.529S
SHAAH_ZMANIS_MGA = 3_977_529  # PT1H6M17.529S


class StubCalendar:
    """Calendar stand-in with a fixed set of "get" capabilities."""

    def __init__(self, kind: Any, metadata: SourceMetadata, **values: Any) -> None:
        self._kind = kind
        self._metadata = metadata
        self.values = {
            "sunrise": SUNRISE,
            "sunset": SUNSET,
            "sea_level_sunrise": None,
            "temporal_hour": TEMPORAL_HOUR,
            "shaah_zmanis_mga": SHAAH_ZMANIS_MGA,
            "midday_length": UNAVAILABLE_MILLIS,
            "molad": MOLAD,
            **values,
        }

    @property
    def kind(self) -> Any:
        return self._kind

    @property
    def metadata(self) -> SourceMetadata:
        return self._metadata

    def get_sunrise(self) -> datetime | None:
        return self.values["sunrise"]

    def get_sunset(self) -> datetime | None:
        return self.values["sunset"]

    def get_sea_level_sunrise(self) -> datetime | None:
        return self.values["sea_level_sunrise"]

    def get_temporal_hour(self) -> int:
        return self.values["temporal_hour"]

    def get_shaah_zmanis_mga(self) -> int:
        return self.values["shaah_zmanis_mga"]

    def get_midday_length(self) -> int:
        return self.values["midday_length"]

    def get_tzais(self) -> datetime:
        raise ArithmeticError("Sun does not reach the required depression")

    def get_molad(self) -> datetime:
        return self.values["molad"]


@pytest.fixture
def metadata() -> SourceMetadata:
    """Lakewood, NJ metadata in a fixed EST zone."""
    return SourceMetadata(
        date=date(2007, 2, 18),
        calculator_name="US Naval Almanac Algorithm",
        location_name="Lakewood, NJ",
        latitude=40.095965,
        longitude=-74.22213,
        elevation=31.0,
        time_zone=EST,
        time_zone_name="Eastern Standard Time",
        time_zone_id="America/New_York",
        time_zone_offset=timedelta(hours=-5),
    )


@pytest.fixture
def registry() -> CapabilityRegistry:
    """Registry declared out of chronological order, with failing and ignored capabilities."""
    return CapabilityRegistry(
        Capability.method("get_sunset", CapabilityKind.INSTANT),
        Capability.method("get_shaah_zmanis_mga", CapabilityKind.DURATION),
        Capability.method("get_sea_level_sunrise", CapabilityKind.INSTANT),
        Capability.method("get_tzais", CapabilityKind.INSTANT),
        Capability.method("get_sunrise", CapabilityKind.INSTANT),
        Capability.method("get_midday_length", CapabilityKind.DURATION),
        Capability.method("get_temporal_hour", CapabilityKind.DURATION),
        Capability.method("get_molad", CapabilityKind.IGNORED),
    )


@pytest.fixture
def make_calendar(metadata: SourceMetadata) -> Callable[..., StubCalendar]:
    """Factory for stub calendars; keyword arguments override capability values."""

    def make(kind: Any = SourceKind.BASIC, **values: Any) -> StubCalendar:
        return StubCalendar(kind, metadata, **values)

    return make


@pytest.fixture
def calendar(make_calendar: Callable[..., StubCalendar]) -> StubCalendar:
    return make_calendar()


@pytest.fixture
def new_york() -> tzinfo:
    """America/New_York, from the system database or the tzdata package."""
    return ZoneInfo("America/New_York")
