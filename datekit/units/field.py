"""DateField enumeration naming the calendar fields of a timestamp.

Each field is read with ``get_field`` and changed with ``set_field`` or
``offset_field`` on a DateTime. The value conventions are:

    ERA                   0 = BCE, 1 = CE
    YEAR                  astronomical year
    MONTH                 1-12
    WEEK_OF_YEAR          1-53, depends on the week configuration
    WEEK_OF_MONTH         0-6, depends on the week configuration
    DAY_OF_MONTH          1-31
    DAY_OF_YEAR           1-366
    DAY_OF_WEEK           ISO weekday, Monday = 1 ... Sunday = 7
    DAY_OF_WEEK_IN_MONTH  1-5, the n-th such weekday of the month
    AM_PM                 0 = AM, 1 = PM
    HOUR                  0-11
    HOUR_OF_DAY           0-23
    MINUTE                0-59
    SECOND                0-59
    MILLISECOND           0-999
"""

from __future__ import annotations

from enum import Enum


class DateField(Enum):
    """Calendar fields addressable by get/set/offset operations."""

    ERA = "era"
    YEAR = "year"
    MONTH = "month"
    WEEK_OF_YEAR = "week_of_year"
    WEEK_OF_MONTH = "week_of_month"
    DAY_OF_MONTH = "day_of_month"
    DAY_OF_YEAR = "day_of_year"
    DAY_OF_WEEK = "day_of_week"
    DAY_OF_WEEK_IN_MONTH = "day_of_week_in_month"
    AM_PM = "am_pm"
    HOUR = "hour"
    HOUR_OF_DAY = "hour_of_day"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"

    @property
    def is_date_based(self) -> bool:
        """Return True for fields whose offsets move along the wall-clock date.

        Offsets of time-based fields add elapsed milliseconds instead.
        """
        return self in _DATE_BASED

    @property
    def is_week_based(self) -> bool:
        """Return True for fields whose offsets move in whole weeks."""
        return self in _WEEK_BASED


_WEEK_BASED = frozenset(
    {
        DateField.WEEK_OF_YEAR,
        DateField.WEEK_OF_MONTH,
        DateField.DAY_OF_WEEK_IN_MONTH,
    }
)

_DATE_BASED = frozenset(
    {
        DateField.ERA,
        DateField.YEAR,
        DateField.MONTH,
        DateField.DAY_OF_MONTH,
        DateField.DAY_OF_YEAR,
        DateField.DAY_OF_WEEK,
    }
    | _WEEK_BASED
)


__all__ = ["DateField"]
