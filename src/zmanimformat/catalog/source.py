"""Time source contract and capability registry.

A time source (an astronomical or zmanim calendar) is consumed, not owned:
it exposes descriptive metadata and a fixed set of zero-argument "get"
capabilities, each returning an instant, a millisecond duration or None.

Instead of discovering capabilities at runtime, a CapabilityRegistry lists
them explicitly, each with its kind tag:

    REGISTRY = CapabilityRegistry(
        Capability.method("get_sunrise", CapabilityKind.INSTANT),
        Capability.method("get_temporal_hour", CapabilityKind.DURATION),
    )

Labels derive from the accessor name with its "get" prefix removed:
    getSunrise            -> Sunrise
    get_sea_level_sunrise -> SeaLevelSunrise
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, tzinfo
from enum import Enum, StrEnum, auto
from operator import methodcaller
from typing import Any, Protocol, Self, runtime_checkable

from ..exceptions import CatalogError

_ACCESSOR_PREFIX = "get"

# Restricted XML element name: ASCII letter or underscore, then letters, digits, _ . -
_LABEL_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_.\-]*")

# =============================================================================
# Source Description
# =============================================================================


class SourceKind(StrEnum):
    """Kind of calendar a time source is, selecting the document root element."""

    ASTRONOMICAL = "astronomical"
    COMPLEX = "complex"
    BASIC = "basic"


@dataclass(frozen=True, kw_only=True)
class SourceMetadata:
    """Descriptive metadata written as document attributes.

    Attributes:
        date: Reference date of the calendar
        calculator_name: Name of the astronomical calculator
        location_name: Name of the location
        latitude: Latitude in degrees
        longitude: Longitude in degrees
        elevation: Elevation in meters
        time_zone: Zone used to render instants
        time_zone_name: Display name of the zone
        time_zone_id: Zone identifier (e.g. America/New_York)
        time_zone_offset: Offset from UTC at the reference date
    """

    date: date
    calculator_name: str
    location_name: str
    latitude: float
    longitude: float
    elevation: float
    time_zone: tzinfo
    time_zone_name: str
    time_zone_id: str
    time_zone_offset: timedelta

    @classmethod
    def for_zone(
        cls,
        *,
        date: date,
        calculator_name: str,
        location_name: str,
        latitude: float,
        longitude: float,
        elevation: float,
        time_zone: tzinfo,
    ) -> Self:
        """Build metadata filling the zone name, id and offset from time_zone.

        Name and offset are taken at local midnight of the reference date, so
        they include daylight saving when it is in effect on that date.
        """
        midnight = datetime.combine(date, time(0), tzinfo=time_zone)
        return cls(
            date=date,
            calculator_name=calculator_name,
            location_name=location_name,
            latitude=latitude,
            longitude=longitude,
            elevation=elevation,
            time_zone=time_zone,
            time_zone_name=midnight.tzname() or "",
            time_zone_id=getattr(time_zone, "key", None) or str(time_zone),
            time_zone_offset=midnight.utcoffset() or timedelta(0),
        )


@runtime_checkable
class TimeSource(Protocol):
    """A calendar whose capabilities are listed in a CapabilityRegistry."""

    @property
    def kind(self) -> SourceKind: ...

    @property
    def metadata(self) -> SourceMetadata: ...


# =============================================================================
# Capabilities
# =============================================================================


class CapabilityKind(Enum):
    """Declared kind of value a capability produces.

    - INSTANT: absolute point in time (datetime)
    - DURATION: elapsed time in milliseconds (int)
    - IGNORED: registered but not catalogued unless explicitly included
    """

    INSTANT = auto()
    DURATION = auto()
    IGNORED = auto()


def label_from_accessor(accessor: str) -> str:
    """Derive the element label from a "get" accessor name.

    Raises:
        CatalogError: If the name lacks the "get" prefix or the label is not
            a valid element name
    """
    if not accessor.startswith(_ACCESSOR_PREFIX):
        raise CatalogError(f"Accessor {accessor!r} does not start with {_ACCESSOR_PREFIX!r}")

    rest = accessor[len(_ACCESSOR_PREFIX):]
    if rest.startswith("_"):
        label = "".join(part[:1].upper() + part[1:] for part in rest.split("_") if part)
    else:
        label = rest

    if not label or not _LABEL_PATTERN.fullmatch(label):
        raise CatalogError(f"Accessor {accessor!r} does not yield a valid label (got {label!r})")

    return label


@dataclass(frozen=True, kw_only=True)
class Capability:
    """A named zero-argument capability of a time source.

    Attributes:
        accessor: Accessor name following the "get" convention
        kind: Declared kind of the produced value
        fetch: Callable invoking the capability on a source
        label: Element label derived from accessor
    """

    accessor: str
    kind: CapabilityKind
    fetch: Callable[[Any], object] = field(compare=False, repr=False)
    label: str = field(init=False)

    def __post_init__(self) -> None:
        # Frozen dataclass, bypass __setattr__ for the derived field
        object.__setattr__(self, "label", label_from_accessor(self.accessor))

    @classmethod
    def method(cls, accessor: str, kind: CapabilityKind) -> Self:
        """Capability calling the zero-argument method named accessor."""
        return cls(accessor=accessor, kind=kind, fetch=methodcaller(accessor))

    def __call__(self, source: object) -> object:
        return self.fetch(source)


class CapabilityRegistry:
    """Ordered, immutable set of capabilities with unique labels.

    Iteration follows declaration order, which is the discovery order of
    catalog entries.
    """

    _capabilities: tuple[Capability, ...]
    _by_label: dict[str, Capability]

    def __init__(self, *capabilities: Capability) -> None:
        by_label: dict[str, Capability] = {}
        for capability in capabilities:
            if capability.label in by_label:
                raise CatalogError(
                    f"Duplicate label {capability.label!r} "
                    f"({by_label[capability.label].accessor!r} and {capability.accessor!r})"
                )
            by_label[capability.label] = capability

        self._capabilities = tuple(capabilities)
        self._by_label = by_label

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(capability.label for capability in self._capabilities)

    def extended(self, *capabilities: Capability) -> CapabilityRegistry:
        """Return a new registry with capabilities appended."""
        return CapabilityRegistry(*self._capabilities, *capabilities)

    def __iter__(self) -> Iterator[Capability]:
        return iter(self._capabilities)

    def __len__(self) -> int:
        return len(self._capabilities)

    def __contains__(self, label: object) -> bool:
        return label in self._by_label

    def __getitem__(self, label: str) -> Capability:
        return self._by_label[label]

    def __repr__(self) -> str:
        return f"CapabilityRegistry({', '.join(self.labels)})"
