"""Conversions between temporal representations.

This module converts between the representations of one instant:
    - epoch milliseconds and seconds
    - wall-clock CalendarFields in a timezone
    - zoned and naive stdlib datetimes
    - year-month values
    - second counts and "HH:mm:ss" strings

Examples:
    >>> from datekit.convert import to_fields, from_fields
    >>> fields = to_fields(1_700_000_000_000, "UTC")
    >>> from_fields(fields, "UTC")
    1700000000000

    >>> from datekit.convert import seconds_to_time_string
    >>> seconds_to_time_string(3725)
    '01:02:05'
"""

from __future__ import annotations

from datekit.convert.epoch import (
    from_epoch_millis,
    from_epoch_seconds,
    from_fields,
    to_epoch_millis,
    to_epoch_seconds,
    to_fields,
)
from datekit.convert.seconds import seconds_to_time_string, time_string_to_seconds
from datekit.convert.zoned import to_datetime, to_naive, to_zoned
from datekit.core.yearmonth import YearMonth, to_year_month

__all__ = [
    # Epoch
    "to_fields",
    "from_fields",
    "from_epoch_millis",
    "from_epoch_seconds",
    "to_epoch_millis",
    "to_epoch_seconds",
    # Zoned
    "to_naive",
    "to_zoned",
    "to_datetime",
    # Year-month
    "YearMonth",
    "to_year_month",
    # Seconds
    "seconds_to_time_string",
    "time_string_to_seconds",
]
