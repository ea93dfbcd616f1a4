"""Calendar utilities for Datekit.

This module provides internal functions for calendar calculations,
including MJD (Modified Julian Day) conversions, leap year logic,
lenient field normalization and week numbering.

MJD 0 = 1858-11-17 00:00 UTC (November 17, 1858)

"Local millis" used below are milliseconds since 1970-01-01 00:00 on the
wall clock of some timezone, i.e. epoch millis plus the zone offset.

This module is not part of the public API.
"""

from __future__ import annotations

from datekit._internal.constants import (
    DAYS_IN_MONTH,
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    MJD_UNIX_EPOCH,
)

# Days in a full Gregorian cycle of 400 years
_DAYS_PER_400_YEARS = 146097


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative for BCE).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1.
    The ordinal for 0000-12-31 (last day of year 0 / 1 BCE) is 0.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number.
    """
    y = year - 1
    # Python's // floors toward negative infinity, which keeps this
    # formula valid for years <= 0
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (days since year 1) to year, month, day.

    Ordinals <= 0 are shifted forward by whole 400-year cycles, which
    have a fixed length, and the year is shifted back afterwards.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).
    """
    year_shift = 0
    if ordinal <= 0:
        cycles = -ordinal // _DAYS_PER_400_YEARS + 1
        ordinal += cycles * _DAYS_PER_400_YEARS
        year_shift = cycles * 400

    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1

    n400, n = divmod(n, _DAYS_PER_400_YEARS)
    n100, n = divmod(n, 36524)
    n4, n = divmod(n, 1461)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # December 31 at the end of a 4-year or 400-year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1 - year_shift, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year - year_shift, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert a 1-based day-of-year to (month, day)."""
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


# MJD 0 = November 17, 1858
_MJD_EPOCH_ORDINAL = ymd_to_ordinal(1858, 11, 17)


def ymd_to_mjd(year: int, month: int, day: int) -> int:
    """Convert year, month, day to Modified Julian Day number."""
    return ymd_to_ordinal(year, month, day) - _MJD_EPOCH_ORDINAL


def mjd_to_ymd(mjd: int) -> tuple[int, int, int]:
    """Convert Modified Julian Day number to year, month, day."""
    return ordinal_to_ymd(mjd + _MJD_EPOCH_ORDINAL)


def mjd_to_iso_weekday(mjd: int) -> int:
    """Convert MJD to ISO day of week (Monday=1, Sunday=7).

    MJD 0 (1858-11-17) was a Wednesday.
    """
    return (mjd + 2) % 7 + 1


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based day of the year."""
    return _days_before_month(year, month) + day


# Lenient composition / decomposition


def compose_local_millis(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> int:
    """Combine wall-clock fields into local millis, leniently.

    Every field may be out of its natural range: month 13 rolls into
    January of the next year, day 0 is the last day of the previous
    month, hour 24 is midnight of the next day, and so on.

    Examples:
        >>> compose_local_millis(1970, 1, 1)
        0
        >>> compose_local_millis(1969, 13, 1) == compose_local_millis(1970, 1, 1)
        True
    """
    year, month0 = divmod(year * 12 + (month - 1), 12)
    mjd = ymd_to_mjd(year, month0 + 1, 1) + (day - 1)
    time_millis = (
        hour * MILLIS_PER_HOUR
        + minute * MILLIS_PER_MINUTE
        + second * MILLIS_PER_SECOND
        + millisecond
    )
    return (mjd - MJD_UNIX_EPOCH) * MILLIS_PER_DAY + time_millis


def decompose_local_millis(
    local_millis: int,
) -> tuple[int, int, int, int, int, int, int]:
    """Split local millis into (year, month, day, hour, minute, second, millisecond)."""
    days, time_millis = divmod(local_millis, MILLIS_PER_DAY)
    year, month, day = mjd_to_ymd(days + MJD_UNIX_EPOCH)
    hour, rest = divmod(time_millis, MILLIS_PER_HOUR)
    minute, rest = divmod(rest, MILLIS_PER_MINUTE)
    second, millisecond = divmod(rest, MILLIS_PER_SECOND)
    return (year, month, day, hour, minute, second, millisecond)


def local_millis_to_mjd(local_millis: int) -> int:
    """Return the MJD of the local day containing local_millis."""
    return local_millis // MILLIS_PER_DAY + MJD_UNIX_EPOCH


# Week numbering
#
# first_day_of_week is an ISO weekday (Monday=1 ... Sunday=7).
# minimal_days is the number of days the first week of a period must
# contain; values below 1 are treated as 1.


def first_week_start(
    period_start_weekday: int,
    first_day_of_week: int,
    minimal_days: int,
) -> int:
    """Return the 1-based position of day 1 of week 1 within a period.

    The result is <= 1 when week 1 begins before the period (it then
    includes days of the previous period).

    Args:
        period_start_weekday: ISO weekday of the period's first day.
        first_day_of_week: ISO weekday that starts a week.
        minimal_days: Minimal number of days in the first week.
    """
    minimal_days = max(1, minimal_days)
    lead = (period_start_weekday - first_day_of_week) % 7
    days_in_first_week = 7 - lead
    if days_in_first_week >= minimal_days:
        return 1 - lead
    return 1 + days_in_first_week


def week_of_period(
    position: int,
    period_start_weekday: int,
    first_day_of_week: int,
    minimal_days: int,
) -> int:
    """Return the week number of a 1-based day position within a period.

    The result is 0 for days that precede week 1.
    """
    start = first_week_start(period_start_weekday, first_day_of_week, minimal_days)
    return (position - start) // 7 + 1


def week_of_year(
    year: int,
    month: int,
    day: int,
    first_day_of_week: int,
    minimal_days: int,
) -> int:
    """Return the week of year, wrapping into adjacent years.

    Days before week 1 belong to the last week of the previous year,
    and late December days may belong to week 1 of the next year.
    """
    jan1 = ymd_to_mjd(year, 1, 1)
    position = day_of_year(year, month, day)
    week = week_of_period(position, mjd_to_iso_weekday(jan1), first_day_of_week, minimal_days)

    if week == 0:
        prev_jan1 = ymd_to_mjd(year - 1, 1, 1)
        return week_of_period(
            days_in_year(year - 1),
            mjd_to_iso_weekday(prev_jan1),
            first_day_of_week,
            minimal_days,
        )

    if week >= 52:
        next_jan1 = jan1 + days_in_year(year)
        next_start = first_week_start(
            mjd_to_iso_weekday(next_jan1), first_day_of_week, minimal_days
        )
        # next_start <= 1 means week 1 of next year reaches back into December
        if jan1 + position - 1 >= next_jan1 + next_start - 1:
            return 1

    return week


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "day_of_year",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "ymd_to_mjd",
    "mjd_to_ymd",
    "mjd_to_iso_weekday",
    "compose_local_millis",
    "decompose_local_millis",
    "local_millis_to_mjd",
    "first_week_start",
    "week_of_period",
    "week_of_year",
]
