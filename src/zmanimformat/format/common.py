"""Common constants and types shared across the formatting components.

This module contains the millisecond unit constants, the reserved
"unavailable" sentinel and the format mode enumeration.

Reference: XML Schema 1.1 Part 2, sections 3.3.6 (duration) and 3.3.8 (dateTime)
"""

from __future__ import annotations

from enum import Enum

# =============================================================================
# Unit Constants
# =============================================================================

SECOND_MILLIS = 1000  # Milliseconds in a second
MINUTE_MILLIS = 60 * SECOND_MILLIS  # Milliseconds in a minute (60,000)
HOUR_MILLIS = 60 * MINUTE_MILLIS  # Milliseconds in an hour (3,600,000)

LONG_MIN = -(1 << 63)  # Smallest signed 64-bit integer
LONG_MAX = (1 << 63) - 1  # Largest signed 64-bit integer

UNAVAILABLE_MILLIS = LONG_MIN  # Duration sentinel for "cannot be calculated"

# =============================================================================
# Pattern Constants (strftime spelling)
# =============================================================================

XSD_DATE_TIME_PATTERN = "%Y-%m-%dT%H:%M:%S"  # yyyy-MM-ddTHH:mm:ss, offset appended separately
XSD_DATE_PATTERN = "%Y-%m-%d"  # yyyy-MM-dd
DEFAULT_TIMESTAMP_PATTERN = "%I:%M:%S"  # h:mm:ss (12 hour clock)


class FormatMode(Enum):
    """Rendering modes for durations.

    - SEXAGESIMAL_XSD: hours, minutes, seconds and milliseconds (00:00:00.000)
    - DECIMAL: reserved, renders like the sexagesimal modes
    - SEXAGESIMAL: hours and minutes (1:30)
    - SEXAGESIMAL_SECONDS: hours, minutes and seconds (1:30:00)
    - SEXAGESIMAL_MILLIS: hours, minutes, seconds and milliseconds (1:30:00.001)
    - XSD_DURATION: xsd:duration lexical form (PT1H6M7.869S)
    """

    SEXAGESIMAL_XSD = 0
    DECIMAL = 1
    SEXAGESIMAL = 2
    SEXAGESIMAL_SECONDS = 3
    SEXAGESIMAL_MILLIS = 4
    XSD_DURATION = 5

    @property
    def is_sexagesimal(self) -> bool:
        """True if the mode renders in H:MM[:SS[.mmm]] notation."""
        return self is not FormatMode.XSD_DURATION
