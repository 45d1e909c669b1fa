"""Unit tests for catalog extraction and value classification."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta, timezone
from typing import Any

import pytest

from src.zmanimformat.catalog.extractor import (
    NOT_AVAILABLE,
    CatalogEntry,
    CatalogExtractor,
    EntryKind,
    classify,
)
from src.zmanimformat.catalog.source import CapabilityRegistry, TimeSource
from src.zmanimformat.exceptions import FormatterRangeError
from src.zmanimformat.format.common import LONG_MAX, UNAVAILABLE_MILLIS

# =============================================================================
# Classification Tests
# =============================================================================


class TestClassify:
    @pytest.mark.parametrize(
        ("value", "kind", "expected"),
        [
            (None, EntryKind.OTHER, NOT_AVAILABLE),
            (
                datetime(2007, 2, 18, 11, 45, 27, tzinfo=UTC),
                EntryKind.INSTANT,
                datetime(2007, 2, 18, 11, 45, 27, tzinfo=UTC),
            ),
            (3_257_529, EntryKind.DURATION, 3_257_529),
            (-90_000, EntryKind.DURATION, -90_000),
            (0, EntryKind.DURATION, 0),
            (UNAVAILABLE_MILLIS, EntryKind.OTHER, NOT_AVAILABLE),
            (timedelta(minutes=54, seconds=17.529), EntryKind.DURATION, 3_257_529),
            (True, EntryKind.OTHER, "True"),
            (3.5, EntryKind.OTHER, "3.5"),
            ("Rosh Chodesh", EntryKind.OTHER, "Rosh Chodesh"),
        ],
        ids=[
            "none_not_available",
            "instant",
            "duration",
            "negative_duration",
            "zero_duration",
            "unavailable_sentinel",
            "timedelta_duration",
            "bool_is_not_duration",
            "float_fallback",
            "text_fallback",
        ],
    )
    def test_classify(self, value: object, kind: EntryKind, expected: object) -> None:
        entry = classify("Label", value)
        assert entry == CatalogEntry(label="Label", kind=kind, value=expected)

    def test_naive_instant_taken_as_utc(self) -> None:
        entry = classify("Sunrise", datetime(2007, 2, 18, 11, 45, 27))
        assert entry.value == datetime(2007, 2, 18, 11, 45, 27, tzinfo=UTC)

    def test_aware_instant_keeps_zone(self) -> None:
        est = timezone(timedelta(hours=-5))
        entry = classify("Sunrise", datetime(2007, 2, 18, 6, 45, 27, tzinfo=est))
        assert entry.value.tzinfo is est  # type: ignore[union-attr]

    def test_duration_beyond_64_bit_raises(self) -> None:
        with pytest.raises(FormatterRangeError):
            classify("Forever", LONG_MAX + 1)


# =============================================================================
# Extraction Tests
# =============================================================================


class TestCatalogExtractor:
    def test_entries_in_discovery_order(self, registry: CapabilityRegistry, calendar: TimeSource) -> None:
        result = CatalogExtractor(registry).extract(calendar)
        assert [entry.label for entry in result.entries] == [
            "Sunset",
            "ShaahZmanisMga",
            "SeaLevelSunrise",
            "Sunrise",
            "MiddayLength",
            "TemporalHour",
        ]

    def test_entries_split_by_kind(self, registry: CapabilityRegistry, calendar: TimeSource) -> None:
        result = CatalogExtractor(registry).extract(calendar)
        assert [entry.label for entry in result.instants] == ["Sunset", "Sunrise"]
        assert [entry.label for entry in result.durations] == ["ShaahZmanisMga", "TemporalHour"]
        assert [(entry.label, entry.value) for entry in result.others] == [
            ("SeaLevelSunrise", NOT_AVAILABLE),
            ("MiddayLength", NOT_AVAILABLE),
        ]

    def test_failing_capability_is_skipped(
        self, registry: CapabilityRegistry, calendar: TimeSource, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that a raising accessor is dropped, logged and reported."""
        with caplog.at_level(logging.WARNING):
            result = CatalogExtractor(registry).extract(calendar)

        assert "Tzais" not in [entry.label for entry in result.entries]
        assert result.skipped_count == 1
        assert result.skipped[0].label == "Tzais"
        assert isinstance(result.skipped[0].error, ArithmeticError)
        assert "Skipping Tzais: get_tzais failed (ArithmeticError)" in caplog.text

    def test_out_of_range_value_is_skipped(
        self, registry: CapabilityRegistry, make_calendar: Callable[..., TimeSource]
    ) -> None:
        result = CatalogExtractor(registry).extract(make_calendar(temporal_hour=LONG_MAX + 1))
        assert [skipped.label for skipped in result.skipped] == ["Tzais", "TemporalHour"]
        assert isinstance(result.skipped[1].error, FormatterRangeError)

    def test_ignored_capability_not_extracted(self, registry: CapabilityRegistry, calendar: TimeSource) -> None:
        result = CatalogExtractor(registry).extract(calendar)
        assert "Molad" not in [entry.label for entry in result.entries]

    def test_include_extracts_ignored_capability(self, registry: CapabilityRegistry, calendar: TimeSource) -> None:
        result = CatalogExtractor(registry, include=["Molad"]).extract(calendar)
        assert result.entries[-1].label == "Molad"
        assert result.entries[-1].kind is EntryKind.INSTANT

    def test_include_wins_over_exclude(self, registry: CapabilityRegistry, calendar: TimeSource) -> None:
        extractor = CatalogExtractor(registry, include=["Sunrise", "Molad"], exclude=["Sunrise", "Tzais"])
        result = extractor.extract(calendar)
        labels = [entry.label for entry in result.entries]
        assert "Sunrise" in labels
        assert "Molad" in labels
        assert result.skipped_count == 0

    @pytest.mark.parametrize(
        ("label", "include", "exclude", "expected"),
        [
            ("Sunrise", (), (), True),
            ("Molad", (), (), False),
            ("Molad", ("Molad",), (), True),
            ("Sunrise", (), ("Sunrise",), False),
            ("Sunrise", ("Sunrise",), ("Sunrise",), True),
        ],
        ids=["instant", "ignored", "ignored_included", "excluded", "included_and_excluded"],
    )
    def test_is_catalogued(
        self,
        registry: CapabilityRegistry,
        label: str,
        include: tuple[str, ...],
        exclude: tuple[str, ...],
        expected: bool,
    ) -> None:
        assert CatalogExtractor(registry, include, exclude).is_catalogued(label) is expected

    def test_extraction_is_repeatable(self, registry: CapabilityRegistry, calendar: Any) -> None:
        extractor = CatalogExtractor(registry)
        assert extractor.extract(calendar).entries == extractor.extract(calendar).entries
