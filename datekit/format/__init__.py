"""Date-pattern formatting and parsing.

Functions:
    format_pattern: Format a date-time value with a pattern such as "yyyy-MM-dd".
    parse_pattern: Parse a string that follows an explicit pattern.

The canonical pattern constants (NORM_DATETIME_PATTERN and friends) are
exported as well.

Examples:
    >>> from datekit import DateTime
    >>> from datekit.format import format_pattern, NORM_DATE_PATTERN

    >>> format_pattern(DateTime(0, "UTC"), NORM_DATE_PATTERN)
    '1970-01-01'
"""

from __future__ import annotations

from datekit.format.pattern import (
    HTTP_DATETIME_PATTERN,
    JDK_DATETIME_PATTERN,
    NORM_DATE_PATTERN,
    NORM_DATETIME_MINUTE_PATTERN,
    NORM_DATETIME_MS_PATTERN,
    NORM_DATETIME_PATTERN,
    NORM_TIME_PATTERN,
    PURE_DATE_PATTERN,
    PURE_DATETIME_MS_PATTERN,
    PURE_DATETIME_PATTERN,
    PURE_TIME_PATTERN,
    UTC_MS_PATTERN,
    UTC_PATTERN,
    format_pattern,
    parse_pattern,
)

__all__: list[str] = [
    "format_pattern",
    "parse_pattern",
    "NORM_DATE_PATTERN",
    "NORM_TIME_PATTERN",
    "NORM_DATETIME_MINUTE_PATTERN",
    "NORM_DATETIME_PATTERN",
    "NORM_DATETIME_MS_PATTERN",
    "PURE_DATE_PATTERN",
    "PURE_TIME_PATTERN",
    "PURE_DATETIME_PATTERN",
    "PURE_DATETIME_MS_PATTERN",
    "JDK_DATETIME_PATTERN",
    "HTTP_DATETIME_PATTERN",
    "UTC_PATTERN",
    "UTC_MS_PATTERN",
]
