"""Catalog serialization to an XML document.

The serializer extracts the catalog of a time source, sorts it and renders
it as:

    <AstronomicalTimes date="2007-02-18" type="astronomical" ... timeZoneOffset="-5.0">
    	<Sunrise>2007-02-18T06:45:27-05:00</Sunrise>
    	<TemporalHour>PT54M17.529S</TemporalHour>
    	<BeginCivilTwilight>N/A</BeginCivilTwilight>
    </AstronomicalTimes>

Instants come first (ascending, xsd:dateTime), then durations (ascending,
xsd:duration), then other entries in discovery order. Attribute values and
element text are XML-escaped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from xml.sax.saxutils import escape

from ..format.common import HOUR_MILLIS
from ..format.config import XSD_CONFIG, FormatterConfig
from ..format.formatter import DurationFormatter, InstantFormatter
from .extractor import CatalogEntry, CatalogExtractor, ExtractionResult
from .source import CapabilityRegistry, SourceKind, TimeSource

logger = logging.getLogger(__name__)

# Root element per source kind, closing tag always matches the opening tag
_ROOT_TAGS: dict[SourceKind, str] = {
    SourceKind.ASTRONOMICAL: "AstronomicalTimes",
    SourceKind.COMPLEX: "Zmanim",
    SourceKind.BASIC: "BasicZmanim",
}

_ATTRIBUTE_ENTITIES = {'"': "&quot;", "\n": "&#10;", "\r": "&#13;", "\t": "&#9;"}


def root_tag_for(kind: object) -> str | None:
    """Root element name for a source kind, None if the kind is unknown."""
    try:
        return _ROOT_TAGS[SourceKind(kind)]
    except ValueError:
        return None


@dataclass(frozen=True, kw_only=True)
class Document:
    """Assembled catalog document.

    Attributes:
        root_tag: Root element name, None to emit the children only
        attributes: Root element attributes in output order
        children: (label, rendered text) pairs in output order
    """

    root_tag: str | None
    attributes: tuple[tuple[str, str], ...] = ()
    children: tuple[tuple[str, str], ...] = ()

    def render(self) -> str:
        lines = "".join(f"\t<{label}>{escape(text)}</{label}>\n" for label, text in self.children)

        if self.root_tag is None:
            return lines

        attributes = "".join(
            f' {name}="{escape(value, _ATTRIBUTE_ENTITIES)}"' for name, value in self.attributes
        )
        return f"<{self.root_tag}{attributes}>\n{lines}</{self.root_tag}>"

    def __str__(self) -> str:
        return self.render()


class CatalogSerializer:
    """Builds catalog documents for time sources.

    Args:
        extractor: Extractor supplying the entries
        config: Formatting config; instants use its timestamp pattern and
            durations its mode (xsd:dateTime and xsd:duration by default)
    """

    extractor: CatalogExtractor
    config: FormatterConfig

    def __init__(self, extractor: CatalogExtractor, config: FormatterConfig = XSD_CONFIG) -> None:
        self.extractor = extractor
        self.config = config
        self._durations = DurationFormatter(config)
        self._instants = InstantFormatter(config)

    def _attributes(self, source: TimeSource) -> tuple[tuple[str, str], ...]:
        metadata = source.metadata
        offset_hours = metadata.time_zone_offset.total_seconds() * 1000 / HOUR_MILLIS
        return (
            ("date", self._instants.format_date(metadata.date)),
            ("type", str(source.kind)),
            ("algorithm", metadata.calculator_name),
            ("location", metadata.location_name),
            ("latitude", str(metadata.latitude)),
            ("longitude", str(metadata.longitude)),
            ("elevation", str(metadata.elevation)),
            ("timeZoneName", metadata.time_zone_name),
            ("timeZoneID", metadata.time_zone_id),
            ("timeZoneOffset", str(offset_hours)),
        )

    def _render_instant(self, entry: CatalogEntry, source: TimeSource) -> str:
        # Type narrowing: INSTANT entries always hold a datetime
        if not isinstance(entry.value, datetime):
            raise TypeError(f"Entry {entry.label} does not hold an instant")
        return self._instants.format(entry.value, source.metadata.time_zone)

    def _render_duration(self, entry: CatalogEntry) -> str:
        if not isinstance(entry.value, int):
            raise TypeError(f"Entry {entry.label} does not hold a duration")
        return self._durations.format(entry.value)

    def assemble(self, source: TimeSource, result: ExtractionResult) -> Document:
        """Sort extracted entries and assemble the document."""
        root_tag = root_tag_for(source.kind)
        if root_tag is None:
            logger.warning("Unknown source kind %r, emitting document without root element", source.kind)

        instants = sorted(result.instants, key=lambda entry: entry.value)
        durations = sorted(result.durations, key=lambda entry: entry.value)

        children = (
            *((entry.label, self._render_instant(entry, source)) for entry in instants),
            *((entry.label, self._render_duration(entry)) for entry in durations),
            *((entry.label, str(entry.value)) for entry in result.others),
        )

        logger.debug(
            "Assembled %s: %d instants, %d durations, %d others, %d skipped",
            root_tag,
            len(instants),
            len(durations),
            len(result.others),
            result.skipped_count,
        )

        return Document(
            root_tag=root_tag,
            attributes=self._attributes(source) if root_tag is not None else (),
            children=children,
        )

    def build_with_diagnostics(self, source: TimeSource) -> tuple[Document, ExtractionResult]:
        """Build the document and return the extraction result alongside it."""
        result = self.extractor.extract(source)
        return self.assemble(source, result), result

    def build(self, source: TimeSource) -> Document:
        return self.build_with_diagnostics(source)[0]

    def serialize(self, source: TimeSource) -> str:
        """Render the catalog document of source as text."""
        return self.build(source).render()


def to_xml(source: TimeSource, registry: CapabilityRegistry) -> str:
    """Serialize source with the default xsd:dateTime/xsd:duration formatting."""
    return CatalogSerializer(CatalogExtractor(registry)).serialize(source)
