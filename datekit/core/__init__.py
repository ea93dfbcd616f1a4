"""Core temporal types.

This module provides the fundamental temporal types:
    - CalendarFields: Wall-clock fields of an instant, without a zone
    - BaseDateTime: Read-only surface of the timestamp types
    - DateTime: Immutable timestamp bound to a timezone
    - MutableDateTime: Timestamp modified in place
    - Interval: Span between two timestamps with calendar-aware differences
    - YearMonth: Calendar month without a day
"""

from __future__ import annotations

from datekit.core.datetime import BaseDateTime, DateTime, MutableDateTime
from datekit.core.fields import CalendarFields
from datekit.core.interval import (
    Interval,
    days_between,
    elapsed,
    months_between,
    years_between,
)
from datekit.core.yearmonth import YearMonth, to_year_month

__all__: list[str] = [
    "BaseDateTime",
    "CalendarFields",
    "DateTime",
    "Interval",
    "MutableDateTime",
    "YearMonth",
    "days_between",
    "elapsed",
    "months_between",
    "to_year_month",
    "years_between",
]
