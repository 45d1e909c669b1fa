"""Duration and instant formatters.

This module renders Duration values and absolute instants as text:

Classes:
    - DurationFormatter: sexagesimal (H:MM[:SS[.mmm]]) or xsd:duration text
    - InstantFormatter: strftime pattern or xsd:dateTime with UTC offset

Both formatters hold nothing but a frozen FormatterConfig; a per-call config
overrides the instance one.

Reference: XML Schema 1.1 Part 2
    - 3.3.6 duration (PnYnMnDTnHnMnS, restricted here to hours/minutes/seconds)
    - 3.3.8 dateTime (CCYY-MM-DDThh:mm:ss followed by Z or +/-hh:mm)
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, tzinfo

from .config import DEFAULT_CONFIG, FormatterConfig
from .duration import Duration

DurationLike = Duration | int | float | timedelta


def _as_duration(value: DurationLike) -> Duration:
    if isinstance(value, Duration):
        return value
    if isinstance(value, timedelta):
        return Duration.from_timedelta(value)
    return Duration.from_millis(value)


def format_utc_offset(offset_minutes: int) -> str:
    """Render a UTC offset suffix for xsd:dateTime.

    Args:
        offset_minutes: Total offset from UTC in minutes (zone + daylight)

    Returns:
        "Z" for zero, otherwise +hh:mm or -hh:mm

    Examples:
        >>> format_utc_offset(-300)
        '-05:00'
        >>> format_utc_offset(330)
        '+05:30'
    """
    if offset_minutes == 0:
        return "Z"

    sign = "-" if offset_minutes < 0 else "+"
    hours, minutes = divmod(abs(offset_minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


class DurationFormatter:
    """Formats millisecond durations.

    Usage:
        formatter = DurationFormatter(FormatterConfig.for_mode(FormatMode.SEXAGESIMAL_SECONDS))
        formatter.format(5_400_001)  # "1:30:00"
    """

    config: FormatterConfig

    def __init__(self, config: FormatterConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def format(self, value: DurationLike, config: FormatterConfig | None = None) -> str:
        """Render a duration according to the config mode.

        XSD_DURATION renders xsd:duration text, every other mode (including
        the reserved DECIMAL) renders sexagesimal text using the config flags.
        The sign is not rendered in sexagesimal modes.

        Args:
            value: Duration, milliseconds (int or float) or timedelta
            config: Overrides the formatter config for this call

        Returns:
            The formatted string
        """
        if config is None:
            config = self.config
        duration = _as_duration(value)

        if not config.mode.is_sexagesimal:
            return self.format_xsd_duration(duration)

        hours = f"{duration.hours:02d}" if config.pad_hours else str(duration.hours)
        text = f"{hours}:{duration.minutes:02d}"
        if config.include_seconds:
            text += f":{duration.seconds:02d}"
        if config.include_millis:
            text += f".{duration.milliseconds:03d}"
        return text

    def format_xsd_duration(self, value: DurationLike) -> str:
        """Render an xsd:duration.

        A zero duration gives an empty string. Each of the H, M and S segments
        is appended only when its component is nonzero, so one hour exactly is
        "PT1H" and two minutes exactly is "PT2M".

        Examples:
            5_428_869 -> "PT1H30M28.869S"
            -90_000   -> "-PT1M30.000S"
        """
        duration = _as_duration(value)
        if duration.is_zero:
            return ""

        parts = ["PT"]
        if duration.hours != 0:
            parts.append(f"{duration.hours}H")
        if duration.minutes != 0:
            parts.append(f"{duration.minutes}M")
        if duration.seconds != 0 or duration.milliseconds != 0:
            parts.append(f"{duration.seconds}.{duration.milliseconds:03d}S")

        text = "".join(parts)
        return f"-{text}" if duration.negative else text


class InstantFormatter:
    """Formats absolute instants in a time zone context."""

    config: FormatterConfig

    def __init__(self, config: FormatterConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    @staticmethod
    def _localize(instant: datetime, zone: tzinfo) -> datetime:
        # Naive instants are taken as UTC
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=UTC)
        return instant.astimezone(zone)

    def format(self, instant: datetime, zone: tzinfo, config: FormatterConfig | None = None) -> str:
        """Render an instant with the configured pattern.

        The canonical XSD_DATE_TIME_PATTERN selects xsd:dateTime output with
        a UTC offset suffix; any other pattern is rendered by strftime in the
        given zone without a suffix.
        """
        if config is None:
            config = self.config

        if config.uses_xsd_date_time:
            return self.format_xsd_date_time(instant, zone)

        return self._localize(instant, zone).strftime(config.timestamp_pattern)

    def format_xsd_date_time(self, instant: datetime, zone: tzinfo) -> str:
        """Render an xsd:dateTime with Z or +/-hh:mm suffix.

        The offset is the zone's total offset at the instant, daylight
        saving included. Fields are zero-padded, years below 1000 included.
        """
        local = self._localize(instant, zone)
        offset = local.utcoffset() or timedelta(0)
        offset_minutes = int(offset.total_seconds() / 60)
        text = (
            f"{local.year:04d}-{local.month:02d}-{local.day:02d}"
            f"T{local.hour:02d}:{local.minute:02d}:{local.second:02d}"
        )
        return text + format_utc_offset(offset_minutes)

    @staticmethod
    def format_date(value: date) -> str:
        """Render a calendar date (yyyy-MM-dd)."""
        return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
