"""
pyZmanimFormat: Formatting and XML cataloguing of computed zmanim.

This library renders instants and millisecond durations produced by a
zmanim/astronomical calendar as sexagesimal, xsd:duration and xsd:dateTime
text, and assembles every time-valued capability of a calendar into a
single XML document.
"""

from __future__ import annotations

from .catalog import (
    Capability,
    CapabilityKind,
    CapabilityRegistry,
    CatalogExtractor,
    CatalogSerializer,
    SourceKind,
    SourceMetadata,
    TimeSource,
    to_xml,
)
from .exceptions import CatalogError, FormatterRangeError, ZmanimFormatError
from .format import (
    Duration,
    DurationFormatter,
    FormatMode,
    FormatterConfig,
    InstantFormatter,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Formatting
    "Duration",
    "DurationFormatter",
    "FormatMode",
    "FormatterConfig",
    "InstantFormatter",
    # Catalog
    "Capability",
    "CapabilityKind",
    "CapabilityRegistry",
    "CatalogExtractor",
    "CatalogSerializer",
    "SourceKind",
    "SourceMetadata",
    "TimeSource",
    "to_xml",
    # Exceptions
    "CatalogError",
    "FormatterRangeError",
    "ZmanimFormatError",
]
