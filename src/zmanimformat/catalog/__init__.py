"""Catalog layer: capability registry, extraction and XML serialization.

This package turns the time-valued capabilities of a calendar into a
sorted, tagged XML document.
"""

from .extractor import (
    NOT_AVAILABLE,
    CatalogEntry,
    CatalogExtractor,
    EntryKind,
    ExtractionResult,
    SkippedCapability,
)
from .serializer import CatalogSerializer, Document, to_xml
from .source import (
    Capability,
    CapabilityKind,
    CapabilityRegistry,
    SourceKind,
    SourceMetadata,
    TimeSource,
    label_from_accessor,
)

__all__ = [
    # Source contract
    "Capability",
    "CapabilityKind",
    "CapabilityRegistry",
    "SourceKind",
    "SourceMetadata",
    "TimeSource",
    "label_from_accessor",
    # Extraction
    "NOT_AVAILABLE",
    "CatalogEntry",
    "CatalogExtractor",
    "EntryKind",
    "ExtractionResult",
    "SkippedCapability",
    # Serialization
    "CatalogSerializer",
    "Document",
    "to_xml",
]
