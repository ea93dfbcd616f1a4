"""TimeUnit enumeration for fixed-length elapsed time units.

This module provides the TimeUnit enum used to express elapsed time
between two instants. Every unit has a fixed length in milliseconds;
calendar units of variable length (months, years) are computed by
``months_between`` and ``years_between`` instead.
"""

from __future__ import annotations

from enum import Enum

from datekit._internal.constants import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    MILLIS_PER_WEEK,
)


class TimeUnit(Enum):
    """Fixed-length time units.

    The value of each member is its length in milliseconds.

    Examples:
        >>> TimeUnit.HOUR.millis
        3600000

        >>> TimeUnit.DAY.to_seconds()
        86400.0
    """

    MILLISECOND = 1
    SECOND = MILLIS_PER_SECOND
    MINUTE = MILLIS_PER_MINUTE
    HOUR = MILLIS_PER_HOUR
    DAY = MILLIS_PER_DAY
    WEEK = MILLIS_PER_WEEK

    @property
    def millis(self) -> int:
        """Return the length of one unit in milliseconds."""
        return self.value

    def to_seconds(self) -> float:
        """Return the length of one unit in seconds."""
        return self.value / MILLIS_PER_SECOND

    def count(self, millis: int) -> int:
        """Return how many whole units fit in ``millis``.

        Division truncates toward zero, so negative spans are symmetric
        with positive ones.

        Examples:
            >>> TimeUnit.SECOND.count(-1500)
            -1
        """
        quotient = abs(millis) // self.value
        return quotient if millis >= 0 else -quotient


__all__ = ["TimeUnit"]
