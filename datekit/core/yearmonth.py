"""YearMonth: a calendar month without a day."""

from __future__ import annotations

import datetime as _datetime
from functools import total_ordering
from typing import TYPE_CHECKING, Any

from datekit._internal.calendar import days_in_month, is_leap_year
from datekit._internal.validation import require_not_none, validate_month, validate_year
from datekit.core.fields import CalendarFields
from datekit.errors import InvalidFieldError
from datekit.units.week import Month

if TYPE_CHECKING:
    from datekit.core.datetime import DateTime
    from datekit.units.timezone import Timezone


@total_ordering
class YearMonth:
    """A year and month, e.g. 2024-02.

    Expanding to a full date needs an explicit day; day 1 and the last
    day of the month have shortcuts.

    Examples:
        >>> ym = YearMonth(2024, 2)
        >>> ym.length_of_month()
        29
        >>> ym.at_end_of_month()
        CalendarFields(year=2024, month=2, day=29, hour=0, minute=0, second=0, millisecond=0)
        >>> str(ym.plus_months(11))
        '2025-01'
    """

    __slots__ = ("_year", "_month")

    def __init__(self, year: int, month: int) -> None:
        validate_year(year)
        validate_month(month)
        self._year = year
        self._month = month

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    def month_enum(self) -> Month:
        return Month(self._month)

    def is_leap_year(self) -> bool:
        return is_leap_year(self._year)

    def length_of_month(self) -> int:
        return days_in_month(self._year, self._month)

    def at_day(self, day: int) -> CalendarFields:
        """Return midnight of the given day of this month.

        Raises:
            InvalidFieldError: If day is outside 1..length_of_month().
        """
        last = self.length_of_month()
        if day < 1 or day > last:
            raise InvalidFieldError(
                f"day must be 1-{last} for {self}, got {day}"
            )
        return CalendarFields(self._year, self._month, day)

    def at_start_of_month(self) -> CalendarFields:
        return CalendarFields(self._year, self._month, 1)

    def at_end_of_month(self) -> CalendarFields:
        return CalendarFields(self._year, self._month, self.length_of_month())

    def to_datetime(
        self,
        day: int,
        timezone: Timezone | str | _datetime.tzinfo | None = None,
    ) -> DateTime:
        """Return midnight of the given day as a DateTime in a timezone."""
        from datekit.core.datetime import DateTime

        return DateTime.from_fields(self.at_day(day), timezone)

    def plus_months(self, months: int) -> YearMonth:
        year, month0 = divmod(self._year * 12 + self._month - 1 + months, 12)
        return YearMonth(year, month0 + 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return (self._year, self._month) == (other._year, other._month)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return (self._year, self._month) < (other._year, other._month)

    def __hash__(self) -> int:
        return hash((self._year, self._month))

    def __repr__(self) -> str:
        return f"YearMonth({self._year}, {self._month})"

    def __str__(self) -> str:
        return f"{self._year:04d}-{self._month:02d}"


def to_year_month(value: Any) -> YearMonth:
    """Return the year and month of a date-like value.

    Accepts a DateTime or MutableDateTime (read in its own timezone),
    CalendarFields, a stdlib ``date`` or ``datetime`` (wall-clock fields)
    or a YearMonth.
    """
    from datekit.core.datetime import BaseDateTime

    require_not_none(value, "value")
    if isinstance(value, YearMonth):
        return value
    if isinstance(value, BaseDateTime):
        fields = value.fields()
        return YearMonth(fields.year, fields.month)
    if isinstance(value, (CalendarFields, _datetime.date)):
        return YearMonth(value.year, value.month)
    raise InvalidFieldError(f"cannot take a year-month from {type(value).__name__}")


__all__ = ["YearMonth", "to_year_month"]
