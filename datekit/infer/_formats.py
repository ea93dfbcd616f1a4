"""Known date-text shapes and their parsers.

Each shape has a regular expression and a parser that turns matching
text into a DateTime. Parsers validate every field strictly: a shape
that matches with month 13 is an error, never a rolled-over date.

Internal module - use parse() and recognize() from datekit.infer instead.
"""

from __future__ import annotations

import re
from enum import Enum

from datekit.clock import Clock
from datekit.core.datetime import DateTime
from datekit.core.fields import CalendarFields
from datekit.errors import TimezoneError, UnrecognizedFormatError
from datekit.units.timezone import Timezone
from datekit.units.week import Month


class FormatTag(Enum):
    """The closed set of recognized text shapes."""

    PURE_NUMERIC = "pure_numeric"
    CLOCK_ONLY = "clock_only"
    JDK_TEXT = "jdk_text"
    ISO = "iso"
    NORMALIZED = "normalized"


# Markers for "day" and "second" in long-form CJK dates, removed up front
MARKERS_TO_STRIP = ("日", "秒")

# Weekday, month and zone tokens of JDK Date.toString() and HTTP dates
TEXT_TOKENS = (
    "sun", "mon", "tue", "wed", "thu", "fri", "sat",
    "jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec",
    "gmt", "ut", "utc", "est", "edt", "cst", "cdt", "mst", "mdt", "pst", "pdt",
)

PURE_NUMERIC_PATTERN = re.compile(r"^\d+$", re.ASCII)

# Digit count -> (field widths, includes date)
PURE_NUMERIC_LAYOUTS: dict[int, tuple[tuple[int, ...], bool]] = {
    8: ((4, 2, 2), True),  # yyyyMMdd
    14: ((4, 2, 2, 2, 2, 2), True),  # yyyyMMddHHmmss
    17: ((4, 2, 2, 2, 2, 2, 3), True),  # yyyyMMddHHmmssSSS
    6: ((2, 2, 2), False),  # HHmmss
}

CLOCK_ONLY_PATTERN = re.compile(
    r"^(?P<hour>\d{1,2}):(?P<minute>\d{1,2})(?::(?P<second>\d{1,2}))?$",
    re.ASCII,
)

_MONTH_ABBR = "jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec"
_WEEKDAY_ABBR = "sun|mon|tue|wed|thu|fri|sat"
_CLOCK = r"(?P<hour>\d{1,2}):(?P<minute>\d{1,2}):(?P<second>\d{1,2})"

# Tue Jun 04 16:25:15 CST 2019 / Thu Jan 09 17:51:10 GMT+08:00 2020
JDK_PATTERN = re.compile(
    rf"^(?:{_WEEKDAY_ABBR})\s+(?P<month>{_MONTH_ABBR})\s+(?P<day>\d{{1,2}})\s+"
    rf"{_CLOCK}\s+(?P<zone>\S+)\s+(?P<year>\d{{4}})$",
    re.ASCII | re.IGNORECASE,
)

# Tue, 04 Jun 2019 08:25:15 GMT
HTTP_PATTERN = re.compile(
    rf"^(?:{_WEEKDAY_ABBR}),\s*(?P<day>\d{{1,2}})\s+(?P<month>{_MONTH_ABBR})\s+"
    rf"(?P<year>\d{{4}})\s+{_CLOCK}\s+(?P<zone>\S+)$",
    re.ASCII | re.IGNORECASE,
)

# 2020-01-15T05:32:30Z, 2020-01-15T05:32:30.999+08:00, 2020-07-07T15:31:20
ISO_PATTERN = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})"
    r"T(?P<hour>\d{1,2}):(?P<minute>\d{1,2}):(?P<second>\d{1,2})"
    r"(?:\.(?P<fraction>\d{1,3}))?"
    r"(?P<zone>Z|[+-]\d{2}:?\d{2})?$",
    re.ASCII,
)

# yyyy-M-d, yyyy-M-d H:m, yyyy-M-d H:m:s, yyyy-M-d H:m:s.SSS
NORMALIZED_PATTERN = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})"
    r"(?:\s(?P<hour>\d{1,2}):(?P<minute>\d{1,2})"
    r"(?::(?P<second>\d{1,2})(?:\.(?P<fraction>\d{1,3}))?)?)?$",
    re.ASCII,
)

_DATE_SEPARATORS = re.compile(r"[/.年月]")
_TIME_SEPARATORS = re.compile(r"[时分秒]")


def strip_markers(text: str) -> str:
    """Trim whitespace and drop the CJK day and second markers."""
    text = text.strip()
    for marker in MARKERS_TO_STRIP:
        text = text.replace(marker, "")
    return text


def normalize(text: str) -> str:
    """Rewrite separator variants of a date-time into "yyyy-M-d H:m:s" form.

    The text is split on spaces into a date part and an optional time
    part. In the date part "/", "." and the CJK year and month markers
    become "-" and a trailing CJK day marker is dropped. In the time part
    the CJK hour, minute and second markers become ":", a trailing ":" is
    dropped and a decimal comma becomes a decimal point.

    Text with more than two space-separated segments is returned
    unchanged, so that it fails to match any normalized shape.

    Examples:
        >>> normalize("2019/6/4 16:25:15,123")
        '2019-6-4 16:25:15.123'
        >>> normalize("2019年06月04日 16时25分")
        '2019-06-04 16:25'
    """
    parts = text.split()
    if not parts or len(parts) > 2:
        return text

    date_part = _DATE_SEPARATORS.sub("-", parts[0])
    date_part = date_part.removesuffix("日")
    if len(parts) == 1:
        return date_part

    time_part = _TIME_SEPARATORS.sub(":", parts[1])
    time_part = time_part.removesuffix(":").replace(",", ".")
    return f"{date_part} {time_part}"


def _fraction_to_millis(fraction: str | None) -> int:
    # Decimal fraction of a second: ".5" is 500 ms
    if not fraction:
        return 0
    return int(fraction.ljust(3, "0"))


def _zone_of(text: str, tag: FormatTag, original: str) -> Timezone:
    try:
        return Timezone.from_string(text)
    except TimezoneError as err:
        raise UnrecognizedFormatError(
            f"unknown zone {text!r} in {tag.value} text {original!r}"
        ) from err


def _build(fields: CalendarFields, timezone: Timezone) -> DateTime:
    return DateTime.from_fields(fields, timezone)


def parse_pure_numeric(text: str, timezone: Timezone, clock: Clock) -> DateTime:
    """Parse yyyyMMdd, yyyyMMddHHmmss, yyyyMMddHHmmssSSS or HHmmss."""
    widths, has_date = PURE_NUMERIC_LAYOUTS[len(text)]
    values: list[int] = []
    pos = 0
    for width in widths:
        values.append(int(text[pos : pos + width]))
        pos += width
    if has_date:
        fields = CalendarFields(*values)
    else:
        fields = CalendarFields(1970, 1, 1, *values)
    return _build(fields, timezone)


def parse_clock_only(text: str, timezone: Timezone, clock: Clock) -> DateTime:
    """Parse H:m[:s] as a time of the current day in the target zone."""
    match = CLOCK_ONLY_PATTERN.match(text)
    if match is None:
        raise UnrecognizedFormatError(f"not a time of day: {text!r}")
    today = DateTime(clock.now_millis(), timezone).fields()
    fields = CalendarFields(
        today.year,
        today.month,
        today.day,
        int(match.group("hour")),
        int(match.group("minute")),
        int(match.group("second") or 0),
    )
    return _build(fields, timezone)


def parse_textual(text: str, timezone: Timezone, clock: Clock) -> DateTime:
    """Parse the JDK Date.toString() shape or the HTTP date shape.

    The zone in the text becomes the zone of the result.
    """
    match = JDK_PATTERN.match(text) or HTTP_PATTERN.match(text)
    if match is None:
        raise UnrecognizedFormatError(
            f"text {text!r} contains weekday, month or zone names "
            "but is neither a JDK nor an HTTP date"
        )
    zone = _zone_of(match.group("zone"), FormatTag.JDK_TEXT, text)
    fields = CalendarFields(
        int(match.group("year")),
        Month.of(match.group("month")).value,
        int(match.group("day")),
        int(match.group("hour")),
        int(match.group("minute")),
        int(match.group("second")),
    )
    return _build(fields, zone)


def parse_iso(text: str, timezone: Timezone, clock: Clock) -> DateTime:
    """Parse yyyy-MM-ddTHH:mm:ss[.SSS] with a Z or numeric offset.

    Without a zone designator the time is read as UTC.
    """
    match = ISO_PATTERN.match(text)
    if match is None:
        raise UnrecognizedFormatError(f"unsupported ISO date-time: {text!r}")
    zone_text = match.group("zone")
    zone = Timezone.utc() if zone_text is None else _zone_of(zone_text, FormatTag.ISO, text)
    fields = CalendarFields(
        int(match.group("year")),
        int(match.group("month")),
        int(match.group("day")),
        int(match.group("hour")),
        int(match.group("minute")),
        int(match.group("second")),
        _fraction_to_millis(match.group("fraction")),
    )
    return _build(fields, zone)


def parse_normalized(text: str, timezone: Timezone, clock: Clock) -> DateTime:
    """Parse normalized text: a date with minute, second or millisecond precision."""
    match = NORMALIZED_PATTERN.match(text)
    if match is None:
        raise UnrecognizedFormatError(f"not a normalized date-time: {text!r}")
    fields = CalendarFields(
        int(match.group("year")),
        int(match.group("month")),
        int(match.group("day")),
        int(match.group("hour") or 0),
        int(match.group("minute") or 0),
        int(match.group("second") or 0),
        _fraction_to_millis(match.group("fraction")),
    )
    return _build(fields, timezone)


__all__ = [
    "FormatTag",
    "normalize",
    "strip_markers",
    "parse_pure_numeric",
    "parse_clock_only",
    "parse_textual",
    "parse_iso",
    "parse_normalized",
]
