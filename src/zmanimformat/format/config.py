"""Immutable rendering configuration.

A FormatterConfig is built once per desired mode and passed to the
formatters; switching mode returns a new config instead of mutating a
shared one, so a config can be reused from any number of threads.

Mode to flag mapping (pad_hours, include_seconds, include_millis):
    SEXAGESIMAL_XSD      -> (True,  True,  True)
    SEXAGESIMAL          -> (False, False, False)
    SEXAGESIMAL_SECONDS  -> (False, True,  False)
    SEXAGESIMAL_MILLIS   -> (False, True,  True)
    DECIMAL/XSD_DURATION -> flags left unchanged
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Self

from .common import DEFAULT_TIMESTAMP_PATTERN, XSD_DATE_TIME_PATTERN, FormatMode

# =============================================================================
# Mode Flag Table
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class _ModeFlags:
    pad_hours: bool
    include_seconds: bool
    include_millis: bool


_MODE_FLAGS: dict[FormatMode, _ModeFlags] = {
    FormatMode.SEXAGESIMAL_XSD: _ModeFlags(pad_hours=True, include_seconds=True, include_millis=True),
    FormatMode.SEXAGESIMAL: _ModeFlags(pad_hours=False, include_seconds=False, include_millis=False),
    FormatMode.SEXAGESIMAL_SECONDS: _ModeFlags(pad_hours=False, include_seconds=True, include_millis=False),
    FormatMode.SEXAGESIMAL_MILLIS: _ModeFlags(pad_hours=False, include_seconds=True, include_millis=True),
}


@dataclass(frozen=True, kw_only=True)
class FormatterConfig:
    """Rendering configuration for durations and instants.

    Attributes:
        mode: Duration rendering mode
        pad_hours: Zero-pad hours to two digits in sexagesimal modes
        include_seconds: Append :SS in sexagesimal modes
        include_millis: Append .mmm in sexagesimal modes
        timestamp_pattern: strftime pattern for instants; the canonical
            XSD_DATE_TIME_PATTERN selects xsd:dateTime output with UTC offset
    """

    mode: FormatMode = FormatMode.SEXAGESIMAL_XSD
    pad_hours: bool = True
    include_seconds: bool = True
    include_millis: bool = True
    timestamp_pattern: str = DEFAULT_TIMESTAMP_PATTERN

    def __post_init__(self) -> None:
        if not isinstance(self.mode, FormatMode):
            raise TypeError(f"mode must be a FormatMode, got {type(self.mode).__name__}")
        if not isinstance(self.timestamp_pattern, str) or not self.timestamp_pattern:
            raise ValueError("timestamp_pattern must be a non-empty string")

    @classmethod
    def for_mode(cls, mode: FormatMode, timestamp_pattern: str = DEFAULT_TIMESTAMP_PATTERN) -> Self:
        """Build a config whose flags follow the given mode."""
        return cls(timestamp_pattern=timestamp_pattern).with_mode(mode)

    def with_mode(self, mode: FormatMode) -> Self:
        """Return a copy switched to mode.

        DECIMAL and XSD_DURATION keep the current flags.
        """
        if not isinstance(mode, FormatMode):
            raise TypeError(f"mode must be a FormatMode, got {type(mode).__name__}")

        flags = _MODE_FLAGS.get(mode)
        if flags is None:
            return replace(self, mode=mode)

        return replace(
            self,
            mode=mode,
            pad_hours=flags.pad_hours,
            include_seconds=flags.include_seconds,
            include_millis=flags.include_millis,
        )

    def with_timestamp_pattern(self, timestamp_pattern: str) -> Self:
        return replace(self, timestamp_pattern=timestamp_pattern)

    @property
    def uses_xsd_date_time(self) -> bool:
        """True if instants are rendered as xsd:dateTime with a UTC offset."""
        return self.timestamp_pattern == XSD_DATE_TIME_PATTERN


DEFAULT_CONFIG = FormatterConfig()
XSD_CONFIG = FormatterConfig.for_mode(FormatMode.XSD_DURATION, XSD_DATE_TIME_PATTERN)
