"""Duration value decomposition.

This module contains the Duration class which splits a signed millisecond
count into its sign and hour/minute/second/millisecond components.

Hours are not wrapped at 24 since a Duration is elapsed time, not a clock
time. Decomposition is plain integer division without rounding:

    hours        = |ms| // 3,600,000
    minutes      = (|ms| // 60,000) % 60
    seconds      = (|ms| // 1,000) % 60
    milliseconds = |ms| % 1,000

The accepted range is the signed 64-bit range; values outside it raise
FormatterRangeError instead of being narrowed.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Self

from ..exceptions import FormatterRangeError
from .common import HOUR_MILLIS, LONG_MAX, LONG_MIN, MINUTE_MILLIS, SECOND_MILLIS


def _check_millis(value: int) -> int:
    if not LONG_MIN <= value <= LONG_MAX:
        raise FormatterRangeError(f"Millisecond value {value} outside signed 64-bit range")
    return value


@dataclass(frozen=True, kw_only=True)
class Duration:
    """Signed elapsed time decomposed for display.

    Attributes:
        negative: True if the original millisecond count was negative
        hours: Whole hours (unbounded)
        minutes: Minutes past the hour (0-59)
        seconds: Seconds past the minute (0-59)
        milliseconds: Milliseconds past the second (0-999)

    Usage:
        >>> Duration.from_millis(5_428_869)
        Duration(negative=False, hours=1, minutes=30, seconds=28, milliseconds=869)
    """

    negative: bool = False
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0

    def __post_init__(self) -> None:
        if self.hours < 0:
            raise ValueError(f"hours must be >= 0, got {self.hours}")
        if not 0 <= self.minutes <= 59:
            raise ValueError(f"minutes must be in 0..59, got {self.minutes}")
        if not 0 <= self.seconds <= 59:
            raise ValueError(f"seconds must be in 0..59, got {self.seconds}")
        if not 0 <= self.milliseconds <= 999:
            raise ValueError(f"milliseconds must be in 0..999, got {self.milliseconds}")
        _check_millis(self.to_millis())

    @classmethod
    def from_millis(cls, value: int | float) -> Self:
        """Decompose a signed millisecond count.

        Floats are truncated toward zero before decomposition.

        Args:
            value: Milliseconds (signed 64-bit range)

        Returns:
            Decomposed Duration (zero gives the all-zero, non-negative Duration)

        Raises:
            TypeError: If value is not an int or float (bool is rejected)
            FormatterRangeError: If value is outside the signed 64-bit range
        """
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise TypeError(f"Expected milliseconds as int or float, got {type(value).__name__}")

        if isinstance(value, float):
            if value != value or value in (float("inf"), float("-inf")):
                raise FormatterRangeError(f"Millisecond value {value} is not finite")
            value = int(value)

        millis = abs(_check_millis(value))

        return cls(
            negative=value < 0,
            hours=millis // HOUR_MILLIS,
            minutes=(millis // MINUTE_MILLIS) % 60,
            seconds=(millis // SECOND_MILLIS) % 60,
            milliseconds=millis % SECOND_MILLIS,
        )

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Self:
        """Decompose a timedelta, truncating sub-millisecond precision toward zero."""
        micros = (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds
        millis = abs(micros) // 1000
        return cls.from_millis(-millis if micros < 0 else millis)

    @property
    def total_millis(self) -> int:
        """Absolute length in milliseconds."""
        return (
            self.hours * HOUR_MILLIS
            + self.minutes * MINUTE_MILLIS
            + self.seconds * SECOND_MILLIS
            + self.milliseconds
        )

    @property
    def is_zero(self) -> bool:
        """True if every component is zero."""
        return self.total_millis == 0

    def to_millis(self) -> int:
        """Recompose the signed millisecond count."""
        return -self.total_millis if self.negative else self.total_millis

    def to_timedelta(self) -> timedelta:
        """Convert to Python timedelta."""
        return timedelta(milliseconds=self.to_millis())
