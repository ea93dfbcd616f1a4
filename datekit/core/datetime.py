"""Timestamp values bound to a timezone and a week configuration.

This module provides the two concrete temporal value types of the library
and the read-only surface they share:

    BaseDateTime      read-only interface (fields, comparisons, formatting)
    DateTime          immutable; every mutator returns a new DateTime
    MutableDateTime   mutates in place; every mutator returns self

A value stores an instant as milliseconds since the Unix epoch together
with the timezone and week-numbering rules used to decompose it into
calendar fields. The timezone never changes the instant; it only decides
which wall-clock fields the instant has. Field mutation works on those
wall-clock fields and then maps them back to an instant in the same zone.
"""

from __future__ import annotations

import datetime as _datetime
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from datekit._internal.calendar import (
    days_in_month,
    day_of_year,
    is_leap_year,
    mjd_to_iso_weekday,
    week_of_period,
    week_of_year,
    ymd_to_mjd,
)
from datekit._internal.constants import (
    MAX_YEAR,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    MIN_YEAR,
)
from datekit._internal.validation import require_not_none
from datekit.clock import Clock, default_clock
from datekit.config import get_settings
from datekit.core.fields import CalendarFields
from datekit.errors import (
    ImmutableViolationError,
    InvalidFieldError,
    ValidationError,
)
from datekit.units.era import Era
from datekit.units.field import DateField
from datekit.units.timeunit import TimeUnit
from datekit.units.timezone import Timezone, resolve_timezone
from datekit.units.week import Quarter, Week

if TYPE_CHECKING:
    from datekit.core.interval import Interval

_T = TypeVar("_T", bound="BaseDateTime")

_EPOCH_UTC = _datetime.datetime(1970, 1, 1, tzinfo=_datetime.timezone.utc)
_ONE_MILLI = _datetime.timedelta(milliseconds=1)

# Fields offset by absolute elapsed time rather than on the wall clock
_ABSOLUTE_OFFSETS: dict[DateField, int] = {
    DateField.AM_PM: 12 * MILLIS_PER_HOUR,
    DateField.HOUR: MILLIS_PER_HOUR,
    DateField.HOUR_OF_DAY: MILLIS_PER_HOUR,
    DateField.MINUTE: MILLIS_PER_MINUTE,
    DateField.SECOND: MILLIS_PER_SECOND,
    DateField.MILLISECOND: 1,
}

_SUB_DAY_FIELDS = frozenset(
    {
        DateField.AM_PM,
        DateField.HOUR,
        DateField.HOUR_OF_DAY,
        DateField.MINUTE,
        DateField.SECOND,
        DateField.MILLISECOND,
    }
)

_REPLACEABLE = frozenset(
    {"year", "month", "day", "hour", "minute", "second", "millisecond"}
)


def _check_field(field: object) -> DateField:
    if not isinstance(field, DateField):
        raise InvalidFieldError(f"expected a DateField, got {field!r}")
    if field is DateField.ERA:
        raise InvalidFieldError("the ERA field cannot be set or offset")
    return field


def _check_minimal_days(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 7:
        raise InvalidFieldError(
            f"minimal_days_in_first_week must be an integer 0-7, got {value!r}"
        )
    return value


def _millis_of_aware(dt: _datetime.datetime) -> int:
    return (dt - _EPOCH_UTC) // _ONE_MILLI


class BaseDateTime(ABC):
    """An instant with the rules needed to read its calendar fields.

    This is the read-only surface shared by DateTime and MutableDateTime.
    Mutators are declared here as well; whether they copy or modify in
    place is decided by the concrete class and advertised by ``mutable``.

    Attributes:
        epoch_millis: Milliseconds since 1970-01-01T00:00:00Z.
        timezone: Zone used to decompose the instant into fields.
        first_day_of_week: Weekday that starts a week.
        minimal_days_in_first_week: Days week 1 must contain (0 = unset,
            which behaves as 1).
        mutable: True when mutators modify the value in place.
    """

    __slots__ = ("_millis", "_zone", "_first_day_of_week", "_minimal_days")

    mutable: ClassVar[bool] = False

    def __init__(
        self,
        epoch_millis: int,
        timezone: Timezone | str | _datetime.tzinfo | None = None,
        *,
        first_day_of_week: Week | int | str | None = None,
        minimal_days_in_first_week: int | None = None,
    ) -> None:
        """Create a value from epoch milliseconds.

        Args:
            epoch_millis: Milliseconds since the Unix epoch.
            timezone: Zone for field decomposition; defaults to the
                configured default zone.
            first_day_of_week: Defaults to the configured value (Sunday).
            minimal_days_in_first_week: Defaults to the configured value.

        Raises:
            NullOrBlankInputError: If epoch_millis is None.
            ValidationError: If epoch_millis is not an integer.
            InvalidFieldError: If the week configuration is out of range.
        """
        require_not_none(epoch_millis, "epoch_millis")
        if isinstance(epoch_millis, bool) or not isinstance(epoch_millis, int):
            raise ValidationError(
                f"epoch_millis must be an integer, got {type(epoch_millis).__name__}"
            )
        settings = get_settings()
        self._millis: int = epoch_millis
        self._zone: Timezone = resolve_timezone(timezone)
        self._first_day_of_week: Week = (
            settings.first_day_of_week
            if first_day_of_week is None
            else Week.of(first_day_of_week)
        )
        self._minimal_days: int = _check_minimal_days(
            settings.minimal_days_in_first_week
            if minimal_days_in_first_week is None
            else minimal_days_in_first_week
        )

    @classmethod
    def _from_internal(
        cls: type[_T],
        millis: int,
        zone: Timezone,
        first_day_of_week: Week,
        minimal_days: int,
    ) -> _T:
        """Create a value from already validated parts, bypassing __init__."""
        result = object.__new__(cls)
        result._millis = millis
        result._zone = zone
        result._first_day_of_week = first_day_of_week
        result._minimal_days = minimal_days
        return result

    def _copy(self, cls: type[_T], millis: int | None = None) -> _T:
        return cls._from_internal(
            self._millis if millis is None else millis,
            self._zone,
            self._first_day_of_week,
            self._minimal_days,
        )

    # Construction

    @classmethod
    def now(
        cls: type[_T],
        timezone: Timezone | str | _datetime.tzinfo | None = None,
        clock: Clock | None = None,
    ) -> _T:
        """Return the current instant.

        Args:
            timezone: Zone of the result; defaults to the configured zone.
            clock: Source of the current time; defaults to the system clock.

        Examples:
            >>> from datekit.clock import FixedClock
            >>> DateTime.now("UTC", FixedClock(0)).year
            1970
        """
        source = clock if clock is not None else default_clock()
        return cls(source.now_millis(), timezone)

    @classmethod
    def of(
        cls: type[_T],
        value: Any,
        timezone: Timezone | str | _datetime.tzinfo | None = None,
    ) -> _T:
        """Build a value from any supported representation.

        Accepted inputs: epoch milliseconds, another BaseDateTime,
        CalendarFields, a stdlib ``datetime`` or ``date`` and date text.

        A zoned stdlib datetime keeps its own zone unless ``timezone`` is
        given; a naive one is read as wall-clock time in ``timezone`` (or
        the default zone). Text is handed to the recognizer.

        Raises:
            NullOrBlankInputError: If value is None or blank text.
            ValidationError: If the type of value is not supported.
            UnrecognizedFormatError: If text matches no known shape.

        Examples:
            >>> DateTime.of("2019-06-04 16:25:15", "UTC").hour
            16
            >>> DateTime.of(_datetime.date(2024, 2, 29), "UTC").day
            29
        """
        require_not_none(value, "value")

        if isinstance(value, BaseDateTime):
            zone = value._zone if timezone is None else resolve_timezone(timezone)
            return cls._from_internal(
                value._millis, zone, value._first_day_of_week, value._minimal_days
            )
        if isinstance(value, bool):
            raise ValidationError("cannot build a date-time from a bool")
        if isinstance(value, int):
            return cls(value, timezone)
        if isinstance(value, CalendarFields):
            return cls.from_fields(value, timezone)
        if isinstance(value, _datetime.datetime):
            if value.tzinfo is not None and value.utcoffset() is not None:
                zone = (
                    Timezone.from_tzinfo(value.tzinfo)
                    if timezone is None
                    else resolve_timezone(timezone)
                )
                return cls(_millis_of_aware(value), zone)
            return cls.from_fields(CalendarFields.from_datetime(value), timezone)
        if isinstance(value, _datetime.date):
            return cls.from_fields(
                CalendarFields(value.year, value.month, value.day), timezone
            )
        if isinstance(value, str):
            return cls.parse(value, timezone)
        raise ValidationError(
            f"cannot build a date-time from {type(value).__name__}"
        )

    @classmethod
    def from_fields(
        cls: type[_T],
        fields: CalendarFields,
        timezone: Timezone | str | _datetime.tzinfo | None = None,
    ) -> _T:
        """Build a value from wall-clock fields read in a timezone.

        The fields are validated strictly; use ``replace_fields`` for
        lenient rollover.

        Raises:
            InvalidFieldError: If any field is out of range.
        """
        require_not_none(fields, "fields")
        zone = resolve_timezone(timezone)
        fields.validate()
        return cls(zone.local_to_epoch(fields.to_local_millis(), fields.fold), zone)

    @classmethod
    def parse(
        cls: type[_T],
        text: str,
        timezone: Timezone | str | _datetime.tzinfo | None = None,
        clock: Clock | None = None,
    ) -> _T:
        """Parse date text of any recognized shape.

        See ``datekit.infer`` for the shapes and their precedence.
        """
        from datekit.infer import parse as _parse

        parsed = _parse(text, timezone=timezone, clock=clock)
        return parsed._copy(cls)

    @classmethod
    def parse_pattern(
        cls: type[_T],
        text: str,
        pattern: str,
        timezone: Timezone | str | _datetime.tzinfo | None = None,
        clock: Clock | None = None,
    ) -> _T:
        """Parse text with an explicit date pattern such as "yyyy/MM/dd"."""
        from datekit.format.pattern import parse_pattern as _parse_pattern

        return _parse_pattern(text, pattern, timezone, clock)._copy(cls)

    # Configuration

    @property
    def epoch_millis(self) -> int:
        return self._millis

    @property
    def epoch_seconds(self) -> int:
        """Whole seconds since the epoch, floored."""
        return self._millis // MILLIS_PER_SECOND

    @property
    def timezone(self) -> Timezone:
        return self._zone

    @property
    def first_day_of_week(self) -> Week:
        return self._first_day_of_week

    @property
    def minimal_days_in_first_week(self) -> int:
        return self._minimal_days

    # Field decomposition

    def _local_millis(self) -> int:
        return self._millis + self._zone.offset_at(self._millis) * MILLIS_PER_SECOND

    def _wall_fields(self) -> CalendarFields:
        return CalendarFields.from_local_millis(self._local_millis())

    def fields(self) -> CalendarFields:
        """Return the wall-clock fields of this instant in its timezone.

        ``fold`` is 1 when the instant is the second pass of a wall-clock
        time repeated by a backward transition, so that ``from_fields``
        gives back this instant.
        """
        return CalendarFields.from_local_millis(
            self._local_millis(), self._zone.fold_at(self._millis)
        )

    def offset_seconds(self) -> int:
        """Return the UTC offset of the timezone at this instant."""
        return self._zone.offset_at(self._millis)

    def get_field(self, field: DateField) -> int:
        """Return the value of one calendar field.

        Week-based fields depend on ``first_day_of_week`` and
        ``minimal_days_in_first_week``.

        Raises:
            InvalidFieldError: If field is not a DateField.

        Examples:
            >>> dt = DateTime.of("2024-03-10 15:00:00", "UTC")
            >>> dt.get_field(DateField.MONTH)
            3
            >>> dt.get_field(DateField.AM_PM)
            1
        """
        if not isinstance(field, DateField):
            raise InvalidFieldError(f"expected a DateField, got {field!r}")
        f = self._wall_fields()
        if field is DateField.ERA:
            return f.era.field_value
        if field is DateField.YEAR:
            return f.year
        if field is DateField.MONTH:
            return f.month
        if field is DateField.DAY_OF_MONTH:
            return f.day
        if field is DateField.DAY_OF_YEAR:
            return day_of_year(f.year, f.month, f.day)
        if field is DateField.DAY_OF_WEEK:
            return mjd_to_iso_weekday(ymd_to_mjd(f.year, f.month, f.day))
        if field is DateField.DAY_OF_WEEK_IN_MONTH:
            return (f.day - 1) // 7 + 1
        if field is DateField.WEEK_OF_YEAR:
            return week_of_year(
                f.year,
                f.month,
                f.day,
                self._first_day_of_week.value,
                self._minimal_days,
            )
        if field is DateField.WEEK_OF_MONTH:
            return self._week_of_month(f)
        if field is DateField.AM_PM:
            return 0 if f.hour < 12 else 1
        if field is DateField.HOUR:
            return f.hour % 12
        if field is DateField.HOUR_OF_DAY:
            return f.hour
        if field is DateField.MINUTE:
            return f.minute
        if field is DateField.SECOND:
            return f.second
        return f.millisecond

    def _week_of_month(self, f: CalendarFields) -> int:
        first_weekday = mjd_to_iso_weekday(ymd_to_mjd(f.year, f.month, 1))
        return week_of_period(
            f.day, first_weekday, self._first_day_of_week.value, self._minimal_days
        )

    def _week_in_year(self, f: CalendarFields) -> int:
        # Unwrapped: 0 before week 1, and no wrap into next year's week 1
        jan1_weekday = mjd_to_iso_weekday(ymd_to_mjd(f.year, 1, 1))
        return week_of_period(
            day_of_year(f.year, f.month, f.day),
            jan1_weekday,
            self._first_day_of_week.value,
            self._minimal_days,
        )

    @property
    def era(self) -> Era:
        return self._wall_fields().era

    @property
    def year(self) -> int:
        return self._wall_fields().year

    @property
    def month(self) -> int:
        """Month of year, 1-12."""
        return self._wall_fields().month

    @property
    def quarter(self) -> Quarter:
        return Quarter((self.month - 1) // 3 + 1)

    @property
    def day(self) -> int:
        return self._wall_fields().day

    @property
    def hour(self) -> int:
        """Hour of day, 0-23."""
        return self._wall_fields().hour

    @property
    def hour12(self) -> int:
        """Hour within the half day, 0-11."""
        return self._wall_fields().hour % 12

    @property
    def minute(self) -> int:
        return self._wall_fields().minute

    @property
    def second(self) -> int:
        return self._wall_fields().second

    @property
    def millisecond(self) -> int:
        return self._wall_fields().millisecond

    @property
    def day_of_week(self) -> Week:
        return self._wall_fields().day_of_week

    @property
    def day_of_year(self) -> int:
        return self.get_field(DateField.DAY_OF_YEAR)

    @property
    def week_of_year(self) -> int:
        return self.get_field(DateField.WEEK_OF_YEAR)

    @property
    def week_of_month(self) -> int:
        return self.get_field(DateField.WEEK_OF_MONTH)

    @property
    def day_of_week_in_month(self) -> int:
        return self.get_field(DateField.DAY_OF_WEEK_IN_MONTH)

    @property
    def is_am(self) -> bool:
        return self.hour < 12

    @property
    def is_pm(self) -> bool:
        return self.hour >= 12

    @property
    def is_weekend(self) -> bool:
        return self.day_of_week.is_weekend

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    @property
    def last_day_of_month(self) -> int:
        f = self._wall_fields()
        return days_in_month(f.year, f.month)

    @property
    def is_last_day_of_month(self) -> bool:
        f = self._wall_fields()
        return f.day == days_in_month(f.year, f.month)

    # Field arithmetic

    def _recompose(self, fields: CalendarFields) -> int:
        """Map possibly out-of-range wall-clock fields to an instant."""
        local = fields.to_local_millis()
        year = CalendarFields.from_local_millis(local).year
        if year < MIN_YEAR or year > MAX_YEAR:
            raise InvalidFieldError(
                f"result year {year} is outside {MIN_YEAR}..{MAX_YEAR}"
            )
        return self._zone.local_to_epoch(local, fields.fold)

    def _set_millis(self, field: DateField, value: int) -> int:
        f = self.fields()
        if field is DateField.YEAR:
            f = f.replace(year=value)
        elif field is DateField.MONTH:
            f = f.replace(month=value)
        elif field is DateField.DAY_OF_MONTH:
            f = f.replace(day=value)
        elif field is DateField.DAY_OF_YEAR:
            f = f.replace(month=1, day=value)
        elif field is DateField.DAY_OF_WEEK:
            fdow = self._first_day_of_week.value
            current = mjd_to_iso_weekday(ymd_to_mjd(f.year, f.month, f.day))
            target = Week.of(value).value
            f = f.replace(day=f.day + (target - fdow) % 7 - (current - fdow) % 7)
        elif field is DateField.DAY_OF_WEEK_IN_MONTH:
            f = f.replace(day=(value - 1) * 7 + (f.day - 1) % 7 + 1)
        elif field is DateField.WEEK_OF_YEAR:
            f = f.replace(day=f.day + (value - self._week_in_year(f)) * 7)
        elif field is DateField.WEEK_OF_MONTH:
            f = f.replace(day=f.day + (value - self._week_of_month(f)) * 7)
        elif field is DateField.AM_PM:
            f = f.replace(hour=value * 12 + f.hour % 12)
        elif field is DateField.HOUR:
            f = f.replace(hour=(f.hour // 12) * 12 + value)
        elif field is DateField.HOUR_OF_DAY:
            f = f.replace(hour=value)
        elif field is DateField.MINUTE:
            f = f.replace(minute=value)
        elif field is DateField.SECOND:
            f = f.replace(second=value)
        else:
            f = f.replace(millisecond=value)
        return self._recompose(f)

    def _offset_millis(self, field: DateField, amount: int) -> int:
        if field in _ABSOLUTE_OFFSETS:
            return self._millis + amount * _ABSOLUTE_OFFSETS[field]

        f = self.fields()
        if field is DateField.YEAR or field is DateField.MONTH:
            months = amount * 12 if field is DateField.YEAR else amount
            year, month0 = divmod(f.year * 12 + (f.month - 1) + months, 12)
            if year < MIN_YEAR or year > MAX_YEAR:
                raise InvalidFieldError(
                    f"result year {year} is outside {MIN_YEAR}..{MAX_YEAR}"
                )
            # Clamp to the end of the target month (Jan 31 + 1 month = Feb 28/29)
            day = min(f.day, days_in_month(year, month0 + 1))
            return self._recompose(f.replace(year=year, month=month0 + 1, day=day))
        if field.is_week_based:
            return self._recompose(f.replace(day=f.day + amount * 7))
        # DAY_OF_MONTH, DAY_OF_YEAR, DAY_OF_WEEK
        return self._recompose(f.replace(day=f.day + amount))

    @abstractmethod
    def _apply(self: _T, millis: int) -> _T:
        """Install a new instant, copying or in place."""

    def set_field(self: _T, field: DateField, value: int) -> _T:
        """Set one calendar field, rolling over out-of-range values.

        Month 13 becomes January of the next year, day 0 the last day of
        the previous month, hour 24 midnight of the next day. Setting
        DAY_OF_WEEK moves within the current week; WEEK_OF_YEAR and
        WEEK_OF_MONTH keep the weekday; HOUR is the 12-hour field within
        the current AM/PM half.

        Returns:
            A new DateTime, or this MutableDateTime after modification.

        Raises:
            InvalidFieldError: For ERA, or a DAY_OF_WEEK outside 1-7.

        Examples:
            >>> DateTime.of("2023-01-31 00:00:00", "UTC").set_field(DateField.MONTH, 2).day
            3
        """
        field = _check_field(field)
        return self._apply(self._set_millis(field, value))

    def offset_field(self: _T, field: DateField, amount: int) -> _T:
        """Add an amount to one calendar field.

        YEAR and MONTH keep the day of month where possible and clamp it
        to the length of the target month. Week fields move by whole
        weeks and day fields by whole days on the wall clock. Time fields
        add absolute elapsed time.

        Raises:
            InvalidFieldError: For ERA.

        Examples:
            >>> dt = DateTime.of("2024-01-31 00:00:00", "UTC")
            >>> dt.offset_field(DateField.MONTH, 1).day
            29
        """
        field = _check_field(field)
        return self._apply(self._offset_millis(field, amount))

    def offset_new(self, field: DateField, amount: int) -> DateTime:
        """Like ``offset_field`` but always returns a new DateTime."""
        field = _check_field(field)
        return self._copy(DateTime, self._offset_millis(field, amount))

    def replace_fields(self: _T, **changes: int) -> _T:
        """Replace several wall-clock fields with a single recomputation.

        Accepts ``year``, ``month``, ``day``, ``hour``, ``minute``,
        ``second`` and ``millisecond``. Values roll over like
        ``set_field``.

        Raises:
            InvalidFieldError: If an unknown field name is passed.
        """
        unknown = set(changes) - _REPLACEABLE
        if unknown:
            raise InvalidFieldError(f"unknown fields: {', '.join(sorted(unknown))}")
        return self._apply(self._recompose(self.fields().replace(**changes)))

    @abstractmethod
    def set_epoch(self: _T, epoch_millis: int) -> _T:
        """Replace the instant; only mutable values allow it."""

    # Period boundaries

    def _period(
        self, field: DateField, first_day_of_week: Week | None = None
    ) -> tuple[int, int]:
        """Return the first and last epoch millis of the period field names."""
        if not isinstance(field, DateField):
            raise InvalidFieldError(f"expected a DateField, got {field!r}")
        if field is DateField.ERA:
            raise InvalidFieldError("the ERA field has no period boundaries")

        f = self.fields()
        last = {"hour": 23, "minute": 59, "second": 59, "millisecond": 999}

        if field in _SUB_DAY_FIELDS:
            # Wall-clock units below a day keep the current pass of a repeated hour
            if field is DateField.AM_PM:
                start = f.hour - f.hour % 12
                begin = f.replace(hour=start, minute=0, second=0, millisecond=0)
                end = f.replace(hour=start + 11, minute=59, second=59, millisecond=999)
            elif field is DateField.HOUR or field is DateField.HOUR_OF_DAY:
                begin = f.replace(minute=0, second=0, millisecond=0)
                end = f.replace(minute=59, second=59, millisecond=999)
            elif field is DateField.MINUTE:
                begin = f.replace(second=0, millisecond=0)
                end = f.replace(second=59, millisecond=999)
            elif field is DateField.SECOND:
                begin = f.replace(millisecond=0)
                end = f.replace(millisecond=999)
            else:
                return self._millis, self._millis
            return self._recompose(begin), self._recompose(end)

        if field is DateField.YEAR:
            begin = CalendarFields(f.year, 1, 1)
            end = CalendarFields(f.year, 12, 31, **last, fold=1)
        elif field is DateField.MONTH:
            begin = CalendarFields(f.year, f.month, 1)
            end = CalendarFields(
                f.year, f.month, days_in_month(f.year, f.month), **last, fold=1
            )
        elif field is DateField.WEEK_OF_YEAR or field is DateField.WEEK_OF_MONTH:
            fdow = (first_day_of_week or self._first_day_of_week).value
            weekday = mjd_to_iso_weekday(ymd_to_mjd(f.year, f.month, f.day))
            start = f.day - (weekday - fdow) % 7
            begin = CalendarFields(f.year, f.month, start).normalized()
            end = CalendarFields(f.year, f.month, start + 6, **last, fold=1).normalized()
        else:
            begin = CalendarFields(f.year, f.month, f.day)
            end = CalendarFields(f.year, f.month, f.day, **last, fold=1)
        return self._recompose(begin), self._recompose(end)

    def truncate(self: _T, field: DateField) -> _T:
        """Move to the first millisecond of the period a field names.

        YEAR, MONTH and the week fields name the calendar year, month and
        week (delimited by ``first_day_of_week``); the day fields name the
        day; AM_PM names the half day; the time fields name their unit.

        Raises:
            InvalidFieldError: For ERA.

        Examples:
            >>> DateTime.of("2024-05-17 13:45:10", "UTC").truncate(DateField.MONTH).to_ms_string()
            '2024-05-01 00:00:00.000'
        """
        return self._apply(self._period(field)[0])

    def ceiling(self: _T, field: DateField) -> _T:
        """Move to the last millisecond of the period a field names.

        Examples:
            >>> DateTime.of("2024-02-10 08:00:00", "UTC").ceiling(DateField.MONTH).to_ms_string()
            '2024-02-29 23:59:59.999'
        """
        return self._apply(self._period(field)[1])

    def round(self: _T, field: DateField) -> _T:
        """Move to the nearer of ``truncate(field)`` and ``ceiling(field)``.

        The midpoint of the period goes to the ceiling.

        Examples:
            >>> DateTime.of("2024-05-17 12:00:00", "UTC").round(DateField.DAY_OF_MONTH).to_ms_string()
            '2024-05-17 23:59:59.999'
        """
        begin, end = self._period(field)
        if self._millis - begin < end - self._millis:
            return self._apply(begin)
        return self._apply(end)

    def begin_of_day(self: _T) -> _T:
        return self.truncate(DateField.DAY_OF_MONTH)

    def end_of_day(self: _T) -> _T:
        return self.ceiling(DateField.DAY_OF_MONTH)

    def begin_of_week(self: _T, first_day_of_week: Week | int | str | None = None) -> _T:
        """Move to the start of the week.

        Args:
            first_day_of_week: Weekday that starts the week; defaults to
                this value's own ``first_day_of_week``.
        """
        fdow = None if first_day_of_week is None else Week.of(first_day_of_week)
        return self._apply(self._period(DateField.WEEK_OF_YEAR, fdow)[0])

    def end_of_week(self: _T, first_day_of_week: Week | int | str | None = None) -> _T:
        """Move to the last millisecond of the week; see ``begin_of_week``."""
        fdow = None if first_day_of_week is None else Week.of(first_day_of_week)
        return self._apply(self._period(DateField.WEEK_OF_YEAR, fdow)[1])

    def begin_of_month(self: _T) -> _T:
        return self.truncate(DateField.MONTH)

    def end_of_month(self: _T) -> _T:
        return self.ceiling(DateField.MONTH)

    def begin_of_quarter(self: _T) -> _T:
        f = self.fields()
        first_month = self.quarter.first_month.value
        return self._apply(self._recompose(CalendarFields(f.year, first_month, 1)))

    def end_of_quarter(self: _T) -> _T:
        f = self.fields()
        last_month = self.quarter.first_month.value + 2
        end = CalendarFields(
            f.year, last_month, days_in_month(f.year, last_month), 23, 59, 59, 999, fold=1
        )
        return self._apply(self._recompose(end))

    def begin_of_year(self: _T) -> _T:
        return self.truncate(DateField.YEAR)

    def end_of_year(self: _T) -> _T:
        return self.ceiling(DateField.YEAR)

    # Copies with different parameters

    def with_timezone(
        self: _T, timezone: Timezone | str | _datetime.tzinfo | None
    ) -> _T:
        """Return a copy showing the same instant in another zone."""
        result = self._copy(type(self))
        result._zone = resolve_timezone(timezone)
        return result

    def with_first_day_of_week(self: _T, first_day_of_week: Week | int | str) -> _T:
        result = self._copy(type(self))
        result._first_day_of_week = Week.of(first_day_of_week)
        return result

    def with_minimal_days_in_first_week(self: _T, minimal_days: int) -> _T:
        result = self._copy(type(self))
        result._minimal_days = _check_minimal_days(minimal_days)
        return result

    def to_immutable(self) -> DateTime:
        return self._copy(DateTime)

    def to_mutable(self) -> MutableDateTime:
        return self._copy(MutableDateTime)

    # Comparison

    def _other_millis(self, other: BaseDateTime) -> int:
        require_not_none(other, "other")
        if not isinstance(other, BaseDateTime):
            raise ValidationError(
                f"cannot compare with {type(other).__name__}"
            )
        return other._millis

    def is_before(self, other: BaseDateTime) -> bool:
        return self._millis < self._other_millis(other)

    def is_after(self, other: BaseDateTime) -> bool:
        return self._millis > self._other_millis(other)

    def is_before_or_equal(self, other: BaseDateTime) -> bool:
        return self._millis <= self._other_millis(other)

    def is_after_or_equal(self, other: BaseDateTime) -> bool:
        return self._millis >= self._other_millis(other)

    def is_in(self, begin: BaseDateTime, end: BaseDateTime) -> bool:
        """Return True if this instant lies between begin and end, inclusive.

        The bounds may be given in either order.
        """
        low, high = sorted((self._other_millis(begin), self._other_millis(end)))
        return low <= self._millis <= high

    def is_same_instant(self, other: BaseDateTime) -> bool:
        return self._millis == self._other_millis(other)

    def is_same_day(self, other: BaseDateTime) -> bool:
        """Return True if both values fall on the same calendar day.

        Each value is read in its own timezone.

        Examples:
            >>> a = DateTime.of("2024-05-17 00:00:00", "UTC")
            >>> a.is_same_day(DateTime.of("2024-05-17 23:59:59", "UTC"))
            True
        """
        self._other_millis(other)
        mine, theirs = self._wall_fields(), other._wall_fields()
        return (mine.year, mine.month, mine.day) == (theirs.year, theirs.month, theirs.day)

    def is_same_month(self, other: BaseDateTime) -> bool:
        """Return True if both values fall in the same month of the same year.

        Each value is read in its own timezone.
        """
        self._other_millis(other)
        mine, theirs = self._wall_fields(), other._wall_fields()
        return (mine.year, mine.month) == (theirs.year, theirs.month)

    def between(
        self, other: BaseDateTime, unit: TimeUnit | None = None
    ) -> Interval | int:
        """Return the interval to another value, or its length in a unit.

        Examples:
            >>> a = DateTime(0, "UTC")
            >>> a.between(DateTime(90_000, "UTC"), TimeUnit.MINUTE)
            1
        """
        from datekit.core.interval import Interval

        interval = Interval(self, other)
        return interval if unit is None else interval.elapsed(unit)

    def __eq__(self, other: object) -> bool:
        """Two values are equal when they denote the same instant."""
        if not isinstance(other, BaseDateTime):
            return NotImplemented
        return self._millis == other._millis

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BaseDateTime):
            return NotImplemented
        return self._millis < other._millis

    def __le__(self, other: object) -> bool:
        if not isinstance(other, BaseDateTime):
            return NotImplemented
        return self._millis <= other._millis

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, BaseDateTime):
            return NotImplemented
        return self._millis > other._millis

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, BaseDateTime):
            return NotImplemented
        return self._millis >= other._millis

    # Formatting and conversion

    def format(self, pattern: str) -> str:
        """Format with a date pattern such as "yyyy-MM-dd HH:mm:ss".

        See ``datekit.format.pattern`` for the supported letters.
        """
        from datekit.format.pattern import format_pattern

        return format_pattern(self, pattern)

    def to_date_string(self) -> str:
        """Return "yyyy-MM-dd"."""
        from datekit.format.pattern import NORM_DATE_PATTERN

        return self.format(NORM_DATE_PATTERN)

    def to_time_string(self) -> str:
        """Return "HH:mm:ss"."""
        from datekit.format.pattern import NORM_TIME_PATTERN

        return self.format(NORM_TIME_PATTERN)

    def to_ms_string(self) -> str:
        """Return "yyyy-MM-dd HH:mm:ss.SSS"."""
        from datekit.format.pattern import NORM_DATETIME_MS_PATTERN

        return self.format(NORM_DATETIME_MS_PATTERN)

    def to_datetime(self) -> _datetime.datetime:
        """Return an aware stdlib datetime in this value's timezone.

        Raises:
            InvalidFieldError: If the instant is outside years 1-9999.
        """
        try:
            utc = _EPOCH_UTC + _datetime.timedelta(milliseconds=self._millis)
            return utc.astimezone(self._zone.tzinfo)
        except OverflowError as err:
            raise InvalidFieldError(
                f"{self} cannot be represented by datetime.datetime"
            ) from err

    def __str__(self) -> str:
        """Return "yyyy-MM-dd HH:mm:ss" in this value's timezone."""
        from datekit.format.pattern import NORM_DATETIME_PATTERN

        return self.format(NORM_DATETIME_PATTERN)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.to_ms_string()!r}, "
            f"timezone={self._zone.id!r})"
        )

    def __bool__(self) -> bool:
        return True


class DateTime(BaseDateTime):
    """An immutable timestamp.

    Every mutator returns a new DateTime; the receiver never changes.
    DateTime values are hashable and safe to share between threads.

    Examples:
        >>> dt = DateTime(0, "UTC")
        >>> later = dt.offset_field(DateField.DAY_OF_MONTH, 1)
        >>> later.epoch_millis - dt.epoch_millis
        86400000
        >>> dt.epoch_millis
        0
    """

    __slots__ = ()

    mutable: ClassVar[bool] = False

    def _apply(self, millis: int) -> DateTime:
        return self._copy(DateTime, millis)

    def set_epoch(self, epoch_millis: int) -> DateTime:
        """Always fails: the instant of a DateTime cannot be replaced.

        Raises:
            ImmutableViolationError: Always.
        """
        raise ImmutableViolationError(
            "cannot set the epoch of an immutable DateTime; "
            "use MutableDateTime or build a new value"
        )

    def to_immutable(self) -> DateTime:
        return self

    def __hash__(self) -> int:
        return hash(self._millis)


class MutableDateTime(BaseDateTime):
    """A timestamp that is modified in place.

    Every mutator changes the receiver and returns it, which allows
    chaining. Instances are not hashable and must not be mutated from
    several threads without external locking.

    Examples:
        >>> cell = MutableDateTime(0, "UTC")
        >>> cell.offset_field(DateField.HOUR_OF_DAY, 2) is cell
        True
        >>> cell.hour
        2
    """

    __slots__ = ()

    mutable: ClassVar[bool] = True

    # Equality is by instant, which changes under mutation
    __hash__ = None  # type: ignore[assignment]

    def _apply(self, millis: int) -> MutableDateTime:
        self._millis = millis
        return self

    def set_epoch(self, epoch_millis: int) -> MutableDateTime:
        """Replace the instant, keeping zone and week configuration."""
        require_not_none(epoch_millis, "epoch_millis")
        if isinstance(epoch_millis, bool) or not isinstance(epoch_millis, int):
            raise ValidationError(
                f"epoch_millis must be an integer, got {type(epoch_millis).__name__}"
            )
        self._millis = epoch_millis
        return self

    def set_timezone(
        self, timezone: Timezone | str | _datetime.tzinfo | None
    ) -> MutableDateTime:
        self._zone = resolve_timezone(timezone)
        return self

    def set_first_day_of_week(
        self, first_day_of_week: Week | int | str
    ) -> MutableDateTime:
        self._first_day_of_week = Week.of(first_day_of_week)
        return self

    def set_minimal_days_in_first_week(self, minimal_days: int) -> MutableDateTime:
        self._minimal_days = _check_minimal_days(minimal_days)
        return self


__all__ = ["BaseDateTime", "DateTime", "MutableDateTime"]
