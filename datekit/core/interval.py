"""Interval class and calendar-aware differences between two timestamps.

Elapsed time in fixed units (milliseconds up to weeks) is plain
millisecond arithmetic. Month and year differences are computed from
calendar fields: the coarse difference of the year/month fields is
corrected by one when the smaller fields show that the last period has
not been completed.
"""

from __future__ import annotations

from datekit._internal.validation import require_not_none
from datekit.core.datetime import BaseDateTime, DateTime
from datekit.errors import ValidationError
from datekit.units.timeunit import TimeUnit


def _as_value(value: BaseDateTime | None, name: str) -> DateTime:
    require_not_none(value, name)
    if not isinstance(value, BaseDateTime):
        raise ValidationError(
            f"{name} must be a DateTime or MutableDateTime, got {type(value).__name__}"
        )
    # Snapshot mutable endpoints so later mutation cannot change the interval
    return value.to_immutable()


def _is_end_of_february(value: DateTime) -> bool:
    return value.month == 2 and value.is_last_day_of_month


class Interval:
    """A span between two instants.

    With ``absolute`` (the default) the endpoints are ordered so that
    ``begin <= end``; otherwise they are kept as given and the interval
    may have a negative length.

    Attributes:
        begin: The first endpoint.
        end: The second endpoint.
        absolute: Whether the endpoints were ordered.

    Examples:
        >>> a = DateTime.of("2020-01-31 00:00:00", "UTC")
        >>> b = DateTime.of("2020-03-01 00:00:00", "UTC")
        >>> Interval(a, b).months()
        1
        >>> Interval(b, a).begin == a
        True
        >>> Interval(a, b).elapsed(TimeUnit.DAY)
        30
    """

    __slots__ = ("_begin", "_end", "_absolute")

    def __init__(
        self,
        begin: BaseDateTime,
        end: BaseDateTime,
        absolute: bool = True,
    ) -> None:
        """Create an interval.

        Raises:
            NullOrBlankInputError: If either endpoint is None.
            ValidationError: If an endpoint is not a date-time value.
        """
        first = _as_value(begin, "begin")
        second = _as_value(end, "end")
        if absolute and first.epoch_millis > second.epoch_millis:
            first, second = second, first
        self._begin: DateTime = first
        self._end: DateTime = second
        self._absolute: bool = absolute

    @property
    def begin(self) -> DateTime:
        return self._begin

    @property
    def end(self) -> DateTime:
        return self._end

    @property
    def absolute(self) -> bool:
        return self._absolute

    def elapsed(self, unit: TimeUnit = TimeUnit.MILLISECOND) -> int:
        """Return the length in whole units, truncated toward zero.

        No calendar rules apply: a DAY is always 86,400,000 ms.
        """
        return unit.count(self._end.epoch_millis - self._begin.epoch_millis)

    def months(self, reset_to_day_one: bool = False) -> int:
        """Return the number of months between the endpoints.

        The raw count is the difference of the (year, month) fields of
        each endpoint, read in its own timezone. Unless
        ``reset_to_day_one`` is set, one is subtracted when the end,
        moved into the begin's year and month, falls before the begin:
        the last month has not been completed.
        """
        begin, end = self._begin, self._end
        result = (end.year - begin.year) * 12 + (end.month - begin.month)
        if not reset_to_day_one:
            aligned = end.replace_fields(year=begin.year, month=begin.month)
            if aligned.epoch_millis < begin.epoch_millis:
                result -= 1
        return result

    def years(self, reset_to_day_one: bool = False) -> int:
        """Return the number of years between the endpoints.

        Unless ``reset_to_day_one`` is set, one is subtracted when the
        end, moved into the begin's year, falls before the begin. When
        both endpoints are the last day of February they are compared as
        the first of February, so that Feb 29 to Feb 28 of a later year
        counts as whole years.
        """
        begin, end = self._begin, self._end
        result = end.year - begin.year
        if not reset_to_day_one:
            if _is_end_of_february(begin) and _is_end_of_february(end):
                begin = begin.replace_fields(day=1)
                end = end.replace_fields(day=1)
            aligned = end.replace_fields(year=begin.year)
            if aligned.epoch_millis < begin.epoch_millis:
                result -= 1
        return result

    def contains(self, value: BaseDateTime) -> bool:
        """Return True if value lies within the interval, bounds included."""
        require_not_none(value, "value")
        return value.is_in(self._begin, self._end)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return (
            self._begin == other._begin
            and self._end == other._end
            and self._absolute == other._absolute
        )

    def __hash__(self) -> int:
        return hash((self._begin, self._end, self._absolute))

    def __repr__(self) -> str:
        return (
            f"Interval({self._begin.to_ms_string()!r}, "
            f"{self._end.to_ms_string()!r}, absolute={self._absolute})"
        )


def elapsed(
    begin: BaseDateTime,
    end: BaseDateTime,
    unit: TimeUnit = TimeUnit.MILLISECOND,
) -> int:
    """Return the absolute elapsed time between two values in whole units.

    Examples:
        >>> a, b = DateTime(0, "UTC"), DateTime(1500, "UTC")
        >>> elapsed(b, a, TimeUnit.SECOND)
        1
    """
    return Interval(begin, end).elapsed(unit)


def months_between(
    begin: BaseDateTime,
    end: BaseDateTime,
    reset_to_day_one: bool = False,
) -> int:
    """Return the number of whole months between two values."""
    return Interval(begin, end).months(reset_to_day_one)


def years_between(
    begin: BaseDateTime,
    end: BaseDateTime,
    reset_to_day_one: bool = False,
) -> int:
    """Return the number of whole years between two values.

    Examples:
        >>> a = DateTime.of("2020-02-29 00:00:00", "UTC")
        >>> years_between(a, DateTime.of("2021-02-28 00:00:00", "UTC"))
        1
    """
    return Interval(begin, end).years(reset_to_day_one)


def days_between(
    begin: BaseDateTime,
    end: BaseDateTime,
    reset_to_start_of_day: bool = False,
) -> int:
    """Return the number of whole days between two values.

    With ``reset_to_start_of_day`` both values are first moved to
    midnight, so that 23:00 and 01:00 of the next day are one day apart.
    """
    if reset_to_start_of_day:
        begin = _as_value(begin, "begin").replace_fields(
            hour=0, minute=0, second=0, millisecond=0
        )
        end = _as_value(end, "end").replace_fields(
            hour=0, minute=0, second=0, millisecond=0
        )
    return Interval(begin, end).elapsed(TimeUnit.DAY)


__all__ = [
    "Interval",
    "elapsed",
    "months_between",
    "years_between",
    "days_between",
]
