"""CalendarFields: a wall-clock snapshot of a timestamp.

A CalendarFields holds the calendar components of an instant as read in
some timezone. It carries no timezone itself; pairing it with one is the
job of DateTime and the conversion functions.

Months are 1-based (January = 1).
"""

from __future__ import annotations

import dataclasses
import datetime as _datetime
from dataclasses import dataclass

from datekit._internal.calendar import (
    compose_local_millis,
    decompose_local_millis,
    local_millis_to_mjd,
    mjd_to_iso_weekday,
)
from datekit._internal.validation import (
    validate_day,
    validate_month,
    validate_time,
    validate_year,
)
from datekit.errors import InvalidFieldError
from datekit.units.era import Era
from datekit.units.week import Week


@dataclass(frozen=True)
class CalendarFields:
    """Year, month, day and time-of-day components.

    Instances may hold out-of-range components (month 13, day 0). Such a
    snapshot is interpreted leniently by ``to_local_millis`` and
    ``normalized``, and rejected by ``validate``.

    Attributes:
        year: Astronomical year (0 = 1 BCE).
        month: Month, 1-12.
        day: Day of month, 1-31.
        hour: Hour of day, 0-23.
        minute: Minute, 0-59.
        second: Second, 0-59.
        millisecond: Millisecond, 0-999.
        fold: 0 or 1, in the sense of ``datetime.fold``. It picks the
            second pass of a wall-clock time repeated by a backward
            transition and is ignored elsewhere. Not part of equality.

    Examples:
        >>> CalendarFields(2020, 13, 1).normalized()
        CalendarFields(year=2021, month=1, day=1, hour=0, minute=0, second=0, millisecond=0, fold=0)

        >>> CalendarFields(2024, 1, 31).plus(days=30).month
        3
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0
    fold: int = dataclasses.field(default=0, compare=False)

    @classmethod
    def from_local_millis(cls, local_millis: int, fold: int = 0) -> CalendarFields:
        """Decompose wall-clock millis since 1970-01-01 00:00."""
        return cls(*decompose_local_millis(local_millis), fold=fold)

    @classmethod
    def from_datetime(cls, dt: _datetime.datetime) -> CalendarFields:
        """Read the wall-clock fields of a stdlib datetime.

        Any tzinfo is ignored; the fields are taken as displayed. The
        datetime's ``fold`` is kept.
        """
        return cls(
            dt.year,
            dt.month,
            dt.day,
            dt.hour,
            dt.minute,
            dt.second,
            dt.microsecond // 1000,
            fold=dt.fold,
        )

    @property
    def era(self) -> Era:
        return Era.of_year(self.year)

    @property
    def day_of_week(self) -> Week:
        return Week(mjd_to_iso_weekday(local_millis_to_mjd(self.to_local_millis())))

    def to_local_millis(self) -> int:
        """Return wall-clock millis since 1970-01-01 00:00, leniently."""
        return compose_local_millis(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.millisecond,
        )

    def normalized(self) -> CalendarFields:
        """Return the equivalent snapshot with every field in range."""
        return CalendarFields.from_local_millis(self.to_local_millis(), self.fold)

    def plus(
        self,
        *,
        years: int = 0,
        months: int = 0,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
    ) -> CalendarFields:
        """Add to individual fields and renormalize.

        Overflow rolls into the next larger field: adding one month to
        January 31 gives March 2 or 3, not the end of February.
        """
        return CalendarFields(
            self.year + years,
            self.month + months,
            self.day + days,
            self.hour + hours,
            self.minute + minutes,
            self.second + seconds,
            self.millisecond + milliseconds,
            fold=self.fold,
        ).normalized()

    def replace(self, **changes: int) -> CalendarFields:
        """Return a copy with fields replaced, without normalizing."""
        return dataclasses.replace(self, **changes)

    def validate(self) -> CalendarFields:
        """Check every field strictly and return self.

        Raises:
            InvalidFieldError: If any field is out of range.
        """
        validate_year(self.year)
        validate_month(self.month)
        validate_day(self.year, self.month, self.day)
        validate_time(self.hour, self.minute, self.second, self.millisecond)
        if self.fold not in (0, 1):
            raise InvalidFieldError(f"fold must be 0 or 1, got {self.fold!r}")
        return self

    def is_valid(self) -> bool:
        """Return True if ``validate`` would pass."""
        try:
            self.validate()
        except InvalidFieldError:
            return False
        return True

    def to_naive_datetime(self) -> _datetime.datetime:
        """Return a naive stdlib datetime with the same wall-clock fields.

        Raises:
            InvalidFieldError: If the fields are invalid or the year is
                outside the stdlib range 1-9999.
        """
        fields = self.validate()
        if fields.year < _datetime.MINYEAR:
            raise InvalidFieldError(
                f"year {fields.year} cannot be represented by datetime.datetime"
            )
        return _datetime.datetime(
            fields.year,
            fields.month,
            fields.day,
            fields.hour,
            fields.minute,
            fields.second,
            fields.millisecond * 1000,
            fold=fields.fold,
        )


__all__ = ["CalendarFields"]
