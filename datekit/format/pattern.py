"""Date-pattern formatting and parsing.

Patterns use runs of letters, each run standing for one field. Text in
single quotes is literal ('' is a quote), and any other character that is
not an ASCII letter is copied as is.

Supported Letters:
    yyyy  4-digit year (yy: 2 digits)
    M     month: M 1-12, MM 01-12, MMM "Jan", MMMM "January"
    d     day of month (d, dd)
    D     day of year
    H     hour of day 0-23 (H, HH)
    h     clock hour 1-12 (h, hh)
    m     minute (m, mm)
    s     second (s, ss)
    S     millisecond (SSS)
    a     AM/PM marker
    E     weekday: EEE "Tue", EEEE "Tuesday"
    Z     UTC offset, +0800
    X     ISO offset: X +08, XX +0800, XXX +08:00, "Z" for UTC
    z     zone abbreviation ("UTC", "EST"), or "GMT+08:00" when the
          abbreviation would not read back as the same offset

Names are English; there is no localization.

When adjacent fields are both numeric ("yyyyMMdd") the letter count
fixes each field's width while parsing; otherwise parsing accepts
1 to n digits.

Examples:
    >>> from datekit.core.datetime import DateTime
    >>> dt = DateTime.of("2024-01-05 14:30:45", "UTC")
    >>> format_pattern(dt, "yyyy/MM/dd HH:mm")
    '2024/01/05 14:30'
    >>> format_pattern(dt, "EEE, dd MMM yyyy hh:mm a")
    'Fri, 05 Jan 2024 02:30 PM'
    >>> parse_pattern("20240105", PURE_DATE_PATTERN, "UTC").day
    5
"""

from __future__ import annotations

import datetime as _datetime
import functools
import re
from typing import TYPE_CHECKING, NamedTuple

from datekit._internal.calendar import day_of_year, days_in_year
from datekit._internal.validation import require_not_blank, require_not_none
from datekit.core.fields import CalendarFields
from datekit.errors import InvalidFieldError, ParseError, TimezoneError, ValidationError
from datekit.units.timezone import Timezone, resolve_timezone
from datekit.units.week import Month

if TYPE_CHECKING:
    from datekit.clock import Clock
    from datekit.core.datetime import BaseDateTime, DateTime

# Canonical patterns
NORM_DATE_PATTERN = "yyyy-MM-dd"
NORM_TIME_PATTERN = "HH:mm:ss"
NORM_DATETIME_MINUTE_PATTERN = "yyyy-MM-dd HH:mm"
NORM_DATETIME_PATTERN = "yyyy-MM-dd HH:mm:ss"
NORM_DATETIME_MS_PATTERN = "yyyy-MM-dd HH:mm:ss.SSS"
PURE_DATE_PATTERN = "yyyyMMdd"
PURE_TIME_PATTERN = "HHmmss"
PURE_DATETIME_PATTERN = "yyyyMMddHHmmss"
PURE_DATETIME_MS_PATTERN = "yyyyMMddHHmmssSSS"
JDK_DATETIME_PATTERN = "EEE MMM dd HH:mm:ss zzz yyyy"
HTTP_DATETIME_PATTERN = "EEE, dd MMM yyyy HH:mm:ss z"
UTC_PATTERN = "yyyy-MM-dd'T'HH:mm:ssXXX"
UTC_MS_PATTERN = "yyyy-MM-dd'T'HH:mm:ss.SSSXXX"

_WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

_NUMERIC_LETTERS = frozenset("ydDHhmsS")

# Widest value accepted for a variable-width numeric field
_NATURAL_WIDTH = {"y": 4, "d": 2, "D": 3, "H": 2, "h": 2, "m": 2, "s": 2, "S": 3, "M": 2}

_SUPPORTED = "yMdDHhmsSaEZXz"


class _Token(NamedTuple):
    letter: str  # "" for literal text
    count: int
    text: str = ""

    @property
    def is_numeric(self) -> bool:
        return self.letter in _NUMERIC_LETTERS or (self.letter == "M" and self.count <= 2)


@functools.lru_cache(maxsize=64)
def _tokenize(pattern: str) -> tuple[_Token, ...]:
    """Split a pattern into letter runs and literal text.

    Raises:
        ValidationError: On an unsupported letter or an unterminated quote.
    """
    tokens: list[_Token] = []
    literal: list[str] = []
    i = 0
    n = len(pattern)

    def flush() -> None:
        if literal:
            tokens.append(_Token("", 0, "".join(literal)))
            literal.clear()

    while i < n:
        ch = pattern[i]
        if ch == "'":
            if i + 1 < n and pattern[i + 1] == "'":
                literal.append("'")
                i += 2
                continue
            end = i + 1
            while True:
                end = pattern.find("'", end)
                if end == -1:
                    raise ValidationError(f"unterminated quote in pattern {pattern!r}")
                if end + 1 < n and pattern[end + 1] == "'":
                    end += 2
                    continue
                break
            literal.append(pattern[i + 1 : end].replace("''", "'"))
            i = end + 1
        elif ("a" <= ch <= "z") or ("A" <= ch <= "Z"):
            if ch not in _SUPPORTED:
                raise ValidationError(
                    f"unsupported pattern letter {ch!r} in {pattern!r}. "
                    f"Supported: {', '.join(_SUPPORTED)}"
                )
            j = i
            while j < n and pattern[j] == ch:
                j += 1
            flush()
            tokens.append(_Token(ch, j - i))
            i = j
        else:
            literal.append(ch)
            i += 1

    flush()
    return tuple(tokens)


# Formatting


def _format_offset(offset_seconds: int, with_colon: bool, with_minutes: bool = True) -> str:
    sign = "+" if offset_seconds >= 0 else "-"
    minutes = abs(offset_seconds) // 60
    hh, mm = divmod(minutes, 60)
    if not with_minutes:
        return f"{sign}{hh:02d}" if mm == 0 else f"{sign}{hh:02d}{mm:02d}"
    return f"{sign}{hh:02d}:{mm:02d}" if with_colon else f"{sign}{hh:02d}{mm:02d}"


def _zone_name(value: BaseDateTime, offset_seconds: int) -> str:
    zone = value.timezone
    if zone.is_utc:
        return "UTC"
    fallback = "GMT" + _format_offset(offset_seconds, with_colon=True)
    try:
        name = value.to_datetime().tzname()
    except InvalidFieldError:
        return fallback
    if not name or not name.isalpha():
        return fallback
    # Only emit abbreviations that read back as the same offset ("CST" would not)
    try:
        readback = Timezone.from_string(name).offset_at(value.epoch_millis)
    except TimezoneError:
        return fallback
    return name if readback == offset_seconds else fallback


def _format_year(year: int, count: int) -> str:
    if count == 2:
        return f"{abs(year) % 100:02d}"
    if year < 0:
        return f"-{-year:0{max(count, 4)}d}"
    return f"{year:0{count}d}"


def format_pattern(value: BaseDateTime, pattern: str) -> str:
    """Format a date-time value with a date pattern.

    Fields are read in the value's own timezone.

    Args:
        value: A DateTime or MutableDateTime.
        pattern: Pattern built from the supported letters.

    Returns:
        The formatted string.

    Raises:
        ValidationError: If the pattern contains an unsupported letter.
    """
    require_not_none(value, "value")
    require_not_none(pattern, "pattern")

    f = value.fields()
    offset = value.offset_seconds()
    out: list[str] = []

    for token in _tokenize(pattern):
        letter, count = token.letter, token.count
        if not letter:
            out.append(token.text)
        elif letter == "y":
            out.append(_format_year(f.year, count))
        elif letter == "M":
            if count >= 4:
                out.append(Month(f.month).name.title())
            elif count == 3:
                out.append(Month(f.month).short_name)
            else:
                out.append(f"{f.month:0{count}d}")
        elif letter == "d":
            out.append(f"{f.day:0{count}d}")
        elif letter == "D":
            out.append(f"{day_of_year(f.year, f.month, f.day):0{count}d}")
        elif letter == "H":
            out.append(f"{f.hour:0{count}d}")
        elif letter == "h":
            out.append(f"{(f.hour % 12) or 12:0{count}d}")
        elif letter == "m":
            out.append(f"{f.minute:0{count}d}")
        elif letter == "s":
            out.append(f"{f.second:0{count}d}")
        elif letter == "S":
            out.append(f"{f.millisecond:0{count}d}")
        elif letter == "a":
            out.append("AM" if f.hour < 12 else "PM")
        elif letter == "E":
            name = _WEEKDAY_NAMES[f.day_of_week.value - 1]
            out.append(name if count >= 4 else name[:3])
        elif letter == "Z":
            out.append(_format_offset(offset, with_colon=False))
        elif letter == "X":
            if offset == 0:
                out.append("Z")
            else:
                out.append(
                    _format_offset(offset, with_colon=count >= 3, with_minutes=count >= 2)
                )
        else:
            out.append(_zone_name(value, offset))

    return "".join(out)


# Parsing

_MONTH_NAMES_REGEX = "|".join(
    sorted(
        {m.name.title() for m in Month} | {m.short_name for m in Month},
        key=len,
        reverse=True,
    )
)
_WEEKDAY_REGEX = "|".join(
    sorted(set(_WEEKDAY_NAMES) | {w[:3] for w in _WEEKDAY_NAMES}, key=len, reverse=True)
)
_OFFSET_REGEX = r"Z|[+-]\d{2}(?::?\d{2})?"
_ZONE_NAME_REGEX = r"[A-Za-z]+(?:/[A-Za-z_]+)*(?:[+-]\d{1,2}(?::?\d{2})?)?"


def _token_regex(token: _Token, next_numeric: bool, name: str) -> str:
    letter, count = token.letter, token.count
    if token.is_numeric:
        if next_numeric or (letter == "y" and count == 2):
            digits = rf"\d{{{count}}}"
        else:
            digits = rf"\d{{1,{max(count, _NATURAL_WIDTH[letter])}}}"
        if letter == "y" and count != 2:
            digits = "-?" + digits
        return f"(?P<{name}>{digits})"
    if letter == "M":
        return f"(?P<{name}>{_MONTH_NAMES_REGEX})"
    if letter == "a":
        return f"(?P<{name}>AM|PM)"
    if letter == "E":
        return f"(?P<{name}>{_WEEKDAY_REGEX})"
    if letter in ("Z", "X"):
        return f"(?P<{name}>{_OFFSET_REGEX})"
    return f"(?P<{name}>{_ZONE_NAME_REGEX})"


@functools.lru_cache(maxsize=64)
def _compile(pattern: str) -> tuple[re.Pattern[str], tuple[tuple[str, _Token], ...]]:
    tokens = _tokenize(pattern)
    parts: list[str] = []
    groups: list[tuple[str, _Token]] = []
    for index, token in enumerate(tokens):
        if not token.letter:
            parts.append(re.escape(token.text))
            continue
        name = f"g{index}"
        following = tokens[index + 1] if index + 1 < len(tokens) else None
        next_numeric = following is not None and following.is_numeric
        parts.append(_token_regex(token, next_numeric, name))
        groups.append((name, token))
    regex = re.compile("^" + "".join(parts) + "$", re.IGNORECASE)
    return regex, tuple(groups)


def _expand_two_digit_year(two_digits: int, current_year: int) -> int:
    # Window of 80 years back and 20 years ahead of the current year
    year = current_year - current_year % 100 + two_digits
    if year > current_year + 20:
        year -= 100
    elif year <= current_year - 80:
        year += 100
    return year


def parse_pattern(
    text: str,
    pattern: str,
    timezone: Timezone | str | _datetime.tzinfo | None = None,
    clock: Clock | None = None,
) -> DateTime:
    """Parse text that follows an explicit date pattern.

    Missing date fields default to 1970-01-01 and missing time fields to
    zero. A zone in the text (Z, X or z letters) takes precedence over
    ``timezone``.

    Args:
        text: The string to parse.
        pattern: Pattern built from the supported letters.
        timezone: Zone used when the text carries none.
        clock: Source of the current year for two-digit years; defaults
            to the system clock.

    Returns:
        An immutable DateTime.

    Raises:
        NullOrBlankInputError: If text is blank.
        ParseError: If the text does not follow the pattern.
        InvalidFieldError: If a parsed field is out of range.
    """
    from datekit.core.datetime import DateTime

    text = require_not_blank(text).strip()
    require_not_none(pattern, "pattern")
    regex, groups = _compile(pattern)
    match = regex.match(text)
    if not match:
        raise ParseError(f"text {text!r} does not match pattern {pattern!r}")

    year, month, day = 1970, 1, 1
    hour = minute = second = millisecond = 0
    clock_hour: int | None = None
    pm: bool | None = None
    day_in_year: int | None = None
    zone: Timezone | None = None

    for name, token in groups:
        raw = match.group(name)
        letter = token.letter
        if letter == "y":
            year = int(raw)
            if token.count == 2:
                current = DateTime.now("UTC", clock).year
                year = _expand_two_digit_year(year, current)
        elif letter == "M":
            month = int(raw) if token.is_numeric else Month.of(raw).value
        elif letter == "d":
            day = int(raw)
        elif letter == "D":
            day_in_year = int(raw)
        elif letter == "H":
            hour = int(raw)
        elif letter == "h":
            clock_hour = int(raw)
        elif letter == "m":
            minute = int(raw)
        elif letter == "s":
            second = int(raw)
        elif letter == "S":
            millisecond = int(raw)
        elif letter == "a":
            pm = raw.upper() == "PM"
        elif letter in ("Z", "X", "z"):
            zone = Timezone.from_string(raw)

    if clock_hour is not None:
        if not 1 <= clock_hour <= 12:
            raise InvalidFieldError(f"clock hour must be 1-12, got {clock_hour}")
        hour = clock_hour % 12
        if pm:
            hour += 12
    elif pm is not None and hour < 12 and pm:
        hour += 12

    if day_in_year is not None:
        if not 1 <= day_in_year <= days_in_year(year):
            raise InvalidFieldError(
                f"day of year must be 1-{days_in_year(year)}, got {day_in_year}"
            )
        fields = CalendarFields(year, 1, day_in_year).normalized()
        month, day = fields.month, fields.day

    fields = CalendarFields(year, month, day, hour, minute, second, millisecond)
    return DateTime.from_fields(fields, zone if zone is not None else resolve_timezone(timezone))


__all__ = [
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
