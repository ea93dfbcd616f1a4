"""Conversions between second counts and "HH:mm:ss" strings."""

from __future__ import annotations

from datekit._internal.constants import SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from datekit._internal.validation import require_not_none
from datekit.errors import ParseError, ValidationError


def seconds_to_time_string(seconds: int) -> str:
    """Format a non-negative number of seconds as "HH:mm:ss".

    Hours are not wrapped at 24.

    Raises:
        ValidationError: If seconds is negative.

    Examples:
        >>> seconds_to_time_string(3661)
        '01:01:01'
        >>> seconds_to_time_string(90000)
        '25:00:00'
    """
    require_not_none(seconds, "seconds")
    if seconds < 0:
        raise ValidationError(f"seconds must not be negative, got {seconds}")
    hours, rest = divmod(seconds, SECONDS_PER_HOUR)
    minutes, secs = divmod(rest, SECONDS_PER_MINUTE)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def time_string_to_seconds(text: str | None) -> int:
    """Return the number of seconds in "H:m:s", "m:s" or "s" text.

    Empty text is zero seconds. Parts are read right to left as seconds,
    minutes and hours.

    Raises:
        ParseError: If a part is not a number or there are more than three.

    Examples:
        >>> time_string_to_seconds("01:01:01")
        3661
        >>> time_string_to_seconds("2:30")
        150
    """
    if not text:
        return 0
    parts = [part.strip() for part in text.split(":")]
    if len(parts) > 3 or not all(part.isascii() and part.isdigit() for part in parts):
        raise ParseError(f"not a time of the form H:m:s: {text!r}")
    total = 0
    for part in parts:
        total = total * 60 + int(part)
    return total


__all__ = ["seconds_to_time_string", "time_string_to_seconds"]
