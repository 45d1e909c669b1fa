"""Catalog extraction from a time source.

The extractor invokes every catalogued capability of a source and classifies
the returned value:

    raises                   -> skipped (logged, recorded in diagnostics)
    None                     -> OTHER "N/A"
    datetime                 -> INSTANT (naive values taken as UTC)
    int == UNAVAILABLE_MILLIS -> OTHER "N/A"
    int                      -> DURATION (milliseconds)
    timedelta                -> DURATION (whole milliseconds)
    anything else            -> OTHER str(value)

A failing capability never fails the whole extraction.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from enum import Enum, auto
from typing import Self

from ..format.common import UNAVAILABLE_MILLIS
from ..format.duration import Duration
from .source import CapabilityKind, CapabilityRegistry, TimeSource

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"


class EntryKind(Enum):
    INSTANT = auto()
    DURATION = auto()
    OTHER = auto()


@dataclass(frozen=True, kw_only=True)
class CatalogEntry:
    """One labeled time value of a source.

    value is an aware datetime for INSTANT, signed milliseconds (int) for
    DURATION and the rendered text for OTHER.
    """

    label: str
    kind: EntryKind
    value: datetime | int | str

    @classmethod
    def instant(cls, label: str, value: datetime) -> Self:
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return cls(label=label, kind=EntryKind.INSTANT, value=value)

    @classmethod
    def duration(cls, label: str, millis: int) -> Self:
        # Range check only, the entry keeps the signed count
        Duration.from_millis(millis)
        return cls(label=label, kind=EntryKind.DURATION, value=millis)

    @classmethod
    def other(cls, label: str, text: str) -> Self:
        return cls(label=label, kind=EntryKind.OTHER, value=text)


@dataclass(frozen=True, kw_only=True)
class SkippedCapability:
    label: str
    error: Exception


@dataclass(frozen=True, kw_only=True)
class ExtractionResult:
    """Entries in discovery order plus the capabilities that were dropped."""

    entries: tuple[CatalogEntry, ...] = ()
    skipped: tuple[SkippedCapability, ...] = ()

    def _of_kind(self, kind: EntryKind) -> tuple[CatalogEntry, ...]:
        return tuple(entry for entry in self.entries if entry.kind is kind)

    @property
    def instants(self) -> tuple[CatalogEntry, ...]:
        return self._of_kind(EntryKind.INSTANT)

    @property
    def durations(self) -> tuple[CatalogEntry, ...]:
        return self._of_kind(EntryKind.DURATION)

    @property
    def others(self) -> tuple[CatalogEntry, ...]:
        return self._of_kind(EntryKind.OTHER)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)


def classify(label: str, value: object) -> CatalogEntry:
    """Classify a capability result into a catalog entry.

    Raises:
        FormatterRangeError: If an integer duration is outside the 64-bit range
    """
    if value is None:
        return CatalogEntry.other(label, NOT_AVAILABLE)

    if isinstance(value, datetime):
        return CatalogEntry.instant(label, value)

    # bool is an int subclass but not a duration
    if isinstance(value, int) and not isinstance(value, bool):
        if value == UNAVAILABLE_MILLIS:
            return CatalogEntry.other(label, NOT_AVAILABLE)
        return CatalogEntry.duration(label, value)

    if isinstance(value, timedelta):
        return CatalogEntry.duration(label, Duration.from_timedelta(value).to_millis())

    return CatalogEntry.other(label, str(value))


class CatalogExtractor:
    """Extracts catalog entries from a time source.

    Args:
        registry: Capabilities of the source
        include: Labels extracted even when tagged IGNORED
        exclude: Labels never extracted unless also listed in include
    """

    registry: CapabilityRegistry
    include: frozenset[str]
    exclude: frozenset[str]

    def __init__(
        self,
        registry: CapabilityRegistry,
        include: Iterable[str] = (),
        exclude: Iterable[str] = (),
    ) -> None:
        self.registry = registry
        self.include = frozenset(include)
        self.exclude = frozenset(exclude)

    def is_catalogued(self, label: str) -> bool:
        """True if the capability with this label is extracted."""
        if label in self.include:
            return True
        if label in self.exclude:
            return False
        return self.registry[label].kind is not CapabilityKind.IGNORED

    def extract(self, source: TimeSource) -> ExtractionResult:
        """Invoke and classify every catalogued capability of source."""
        entries: list[CatalogEntry] = []
        skipped: list[SkippedCapability] = []

        for capability in self.registry:
            if not self.is_catalogued(capability.label):
                continue

            try:
                entry = classify(capability.label, capability(source))
            except Exception as e:
                logger.warning(
                    "Skipping %s: %s failed (%s)",
                    capability.label,
                    capability.accessor,
                    type(e).__name__,
                    exc_info=True,
                )
                skipped.append(SkippedCapability(label=capability.label, error=e))
                continue

            logger.debug("Classified %s as %s", entry.label, entry.kind.name)
            entries.append(entry)

        return ExtractionResult(entries=tuple(entries), skipped=tuple(skipped))
