"""Formatting layer for durations and instants.

This package contains the duration value type, the immutable rendering
configuration and the duration/instant formatters.

Reference: XML Schema 1.1 Part 2, sections 3.3.6 and 3.3.8
"""

from .common import (
    HOUR_MILLIS,
    MINUTE_MILLIS,
    SECOND_MILLIS,
    UNAVAILABLE_MILLIS,
    XSD_DATE_PATTERN,
    XSD_DATE_TIME_PATTERN,
    FormatMode,
)
from .config import DEFAULT_CONFIG, XSD_CONFIG, FormatterConfig
from .duration import Duration
from .formatter import DurationFormatter, InstantFormatter, format_utc_offset

__all__ = [
    # Common types
    "FormatMode",
    "HOUR_MILLIS",
    "MINUTE_MILLIS",
    "SECOND_MILLIS",
    "UNAVAILABLE_MILLIS",
    "XSD_DATE_PATTERN",
    "XSD_DATE_TIME_PATTERN",
    # Values and configuration
    "DEFAULT_CONFIG",
    "Duration",
    "FormatterConfig",
    "XSD_CONFIG",
    # Formatters
    "DurationFormatter",
    "InstantFormatter",
    "format_utc_offset",
]
