"""Week, Month and Quarter enumerations."""

from __future__ import annotations

from enum import Enum

from datekit._internal.calendar import days_in_month
from datekit.errors import InvalidFieldError


class Week(Enum):
    """Days of the week with ISO numbering (Monday = 1 ... Sunday = 7).

    Examples:
        >>> Week.of(7)
        <Week.SUNDAY: 7>
        >>> Week.SATURDAY.is_weekend
        True
    """

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def of(cls, value: int | str | Week) -> Week:
        """Resolve an ISO weekday number or a (case-insensitive) name.

        Raises:
            InvalidFieldError: If value names no weekday.
        """
        if isinstance(value, Week):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            for member in cls:
                if member.name == key or member.name[:3] == key:
                    return member
            raise InvalidFieldError(f"unknown weekday name: {value!r}")
        try:
            return cls(value)
        except ValueError:
            raise InvalidFieldError(f"weekday must be 1-7, got {value}") from None

    @property
    def short_name(self) -> str:
        """Return the three-letter English abbreviation, e.g. "Mon"."""
        return self.name[:3].title()

    @property
    def is_weekend(self) -> bool:
        return self in (Week.SATURDAY, Week.SUNDAY)


class Month(Enum):
    """Months of the year (January = 1)."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def of(cls, value: int | str) -> Month:
        """Resolve a month number or an English (abbreviated) name.

        Raises:
            InvalidFieldError: If value names no month.
        """
        if isinstance(value, str):
            key = value.strip().upper()
            for member in cls:
                if member.name == key or (len(key) >= 3 and member.name.startswith(key)):
                    return member
            raise InvalidFieldError(f"unknown month name: {value!r}")
        try:
            return cls(value)
        except ValueError:
            raise InvalidFieldError(f"month must be 1-12, got {value}") from None

    @property
    def short_name(self) -> str:
        """Return the three-letter English abbreviation, e.g. "Jan"."""
        return self.name[:3].title()

    def last_day(self, leap_year: bool) -> int:
        """Return the last day of this month for a leap or common year."""
        return days_in_month(2000 if leap_year else 2001, self.value)

    @property
    def quarter(self) -> Quarter:
        return Quarter((self.value - 1) // 3 + 1)


class Quarter(Enum):
    """Quarters of the year."""

    Q1 = 1
    Q2 = 2
    Q3 = 3
    Q4 = 4

    @property
    def first_month(self) -> Month:
        return Month((self.value - 1) * 3 + 1)


__all__ = ["Week", "Month", "Quarter"]
