"""Datekit: calendar-correct date arithmetic and date text recognition.

Datekit stores instants as epoch milliseconds and reads their calendar
fields in an explicit timezone with an explicit week configuration.

Core Types:
    DateTime: Immutable timestamp bound to a timezone
    MutableDateTime: Timestamp modified in place
    CalendarFields: Wall-clock fields without a zone
    Interval: Span between two timestamps, with month and year differences
    YearMonth: Calendar month without a day

Units:
    DateField: Calendar fields for get/set/offset
    TimeUnit: Fixed-length units for elapsed time
    Week, Month, Quarter, Era: Calendar enumerations
    Timezone: IANA or fixed-offset timezone

Functions:
    parse: Parse date text of any recognized shape
    format_pattern / parse_pattern: Pattern-based formatting and parsing
    elapsed, months_between, years_between, days_between: Differences

Exceptions:
    DatekitError: Base exception
    ValidationError / InvalidFieldError: Invalid field values
    ParseError / UnrecognizedFormatError: Text that cannot be parsed
    NullOrBlankInputError: Missing required input
    ImmutableViolationError: Raw epoch change on an immutable value
    TimezoneError: Unknown zone or malformed offset

Example:
    >>> from datekit import DateTime, DateField, months_between
    >>> begin = DateTime.parse("2020-01-31", "UTC")
    >>> end = begin.offset_field(DateField.MONTH, 1)
    >>> end.to_date_string()
    '2020-02-29'
    >>> months_between(begin, DateTime.parse("2020-03-01", "UTC"))
    1
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
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

# Units
from datekit.units.era import Era
from datekit.units.field import DateField
from datekit.units.timeunit import TimeUnit
from datekit.units.timezone import Timezone
from datekit.units.week import Month, Quarter, Week

# Clock and configuration
from datekit.clock import CachedClock, Clock, FixedClock, SystemClock
from datekit.config import Settings, configure, get_settings, reset_settings

# Exceptions
from datekit.errors import (
    DatekitError,
    ImmutableViolationError,
    InvalidFieldError,
    NullOrBlankInputError,
    ParseError,
    TimezoneError,
    UnrecognizedFormatError,
    ValidationError,
)

# Text
from datekit.format import format_pattern, parse_pattern
from datekit.infer import FormatTag, normalize, parse, recognize

__all__: list[str] = [
    "__version__",
    # Core types
    "BaseDateTime",
    "CalendarFields",
    "DateTime",
    "Interval",
    "MutableDateTime",
    "YearMonth",
    # Intervals
    "days_between",
    "elapsed",
    "months_between",
    "years_between",
    "to_year_month",
    # Units
    "DateField",
    "Era",
    "Month",
    "Quarter",
    "TimeUnit",
    "Timezone",
    "Week",
    # Clock and configuration
    "CachedClock",
    "Clock",
    "FixedClock",
    "SystemClock",
    "Settings",
    "configure",
    "get_settings",
    "reset_settings",
    # Exceptions
    "DatekitError",
    "ImmutableViolationError",
    "InvalidFieldError",
    "NullOrBlankInputError",
    "ParseError",
    "TimezoneError",
    "UnrecognizedFormatError",
    "ValidationError",
    # Text
    "FormatTag",
    "format_pattern",
    "normalize",
    "parse",
    "parse_pattern",
    "recognize",
]
