"""Validation utilities for Datekit.

This module provides checks for required arguments and for calendar
field ranges when strict validation is requested.

This module is not part of the public API.
"""

from __future__ import annotations

from typing import TypeVar

from datekit._internal.constants import MAX_YEAR, MIN_YEAR
from datekit.errors import InvalidFieldError, NullOrBlankInputError

T = TypeVar("T")


def require_not_none(value: T | None, name: str) -> T:
    """Return value, or raise NullOrBlankInputError if it is None.

    Args:
        value: The argument to check.
        name: Argument name used in the error message.

    Raises:
        NullOrBlankInputError: If value is None.
    """
    if value is None:
        raise NullOrBlankInputError(f"{name} must not be None")
    return value


def require_not_blank(text: str | None, name: str = "text") -> str:
    """Return text, or raise if it is None, not a string, or only whitespace.

    Raises:
        NullOrBlankInputError: If text is None or blank.
    """
    if text is None or not str(text).strip():
        raise NullOrBlankInputError(f"{name} must not be blank")
    return str(text)


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Raises:
        InvalidFieldError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise InvalidFieldError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        InvalidFieldError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise InvalidFieldError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Raises:
        InvalidFieldError: If day is invalid for the month.
    """
    from datekit._internal.calendar import days_in_month

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise InvalidFieldError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_time(hour: int, minute: int, second: int, millisecond: int) -> None:
    """Validate wall-clock time components.

    Raises:
        InvalidFieldError: If any component is out of range.
    """
    if not 0 <= hour <= 23:
        raise InvalidFieldError(f"hour must be between 0 and 23, got {hour}")
    if not 0 <= minute <= 59:
        raise InvalidFieldError(f"minute must be between 0 and 59, got {minute}")
    if not 0 <= second <= 59:
        raise InvalidFieldError(f"second must be between 0 and 59, got {second}")
    if not 0 <= millisecond <= 999:
        raise InvalidFieldError(
            f"millisecond must be between 0 and 999, got {millisecond}"
        )


__all__ = [
    "require_not_none",
    "require_not_blank",
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_time",
]
