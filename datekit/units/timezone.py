"""Timezone representation backed by the IANA database.

This module provides the Timezone class, a thin value wrapper around a
``tzinfo``. Named zones come from ``pytz``; fixed UTC offsets use
``pytz.FixedOffset``; when the system zone has no IANA name the local
zone is read through ``dateutil.tz.tzlocal``.

A Timezone only answers two questions for the rest of the library:
the UTC offset in effect at an instant (decomposition) and the instant
a wall-clock reading denotes (recomposition).
"""

from __future__ import annotations

import datetime as _datetime
import functools
import logging
import os
import re
from typing import ClassVar

import pytz
from dateutil import tz as dateutil_tz

from datekit._internal.constants import MAX_UTC_OFFSET_SECONDS
from datekit.errors import TimezoneError

logger = logging.getLogger(__name__)

_EPOCH_NAIVE = _datetime.datetime(1970, 1, 1)
_EPOCH_UTC = _EPOCH_NAIVE.replace(tzinfo=_datetime.timezone.utc)
_ONE_MILLI = _datetime.timedelta(milliseconds=1)

# Sampling window for zone rules, kept a day inside the stdlib datetime range
# so that shifting by any UTC offset cannot overflow.
_MIN_ZONE_MILLIS = (_datetime.datetime(1, 1, 2) - _EPOCH_NAIVE) // _ONE_MILLI
_MAX_ZONE_MILLIS = (_datetime.datetime(9999, 12, 30) - _EPOCH_NAIVE) // _ONE_MILLI

# Zone abbreviations found in JDK-style and HTTP date strings. They are
# resolved to fixed offsets; the names are ambiguous worldwide and these
# are the North American readings.
_ABBREVIATION_OFFSETS: dict[str, int] = {
    "EST": -5 * 3600,
    "EDT": -4 * 3600,
    "CST": -6 * 3600,
    "CDT": -5 * 3600,
    "MST": -7 * 3600,
    "MDT": -6 * 3600,
    "PST": -8 * 3600,
    "PDT": -7 * 3600,
}

_UTC_NAMES = frozenset({"Z", "UTC", "UT", "GMT"})

# +HH:MM, -HHMM, +H, optionally prefixed with GMT/UTC (e.g. "GMT+08:00")
_OFFSET_PATTERN = re.compile(
    r"^(?:GMT|UTC|UT)?([+-])(\d{1,2})(?::?(\d{2}))?$",
    re.ASCII | re.IGNORECASE,
)


def _clamp_millis(millis: int) -> int:
    return min(max(millis, _MIN_ZONE_MILLIS), _MAX_ZONE_MILLIS)


def _format_offset(offset_seconds: int) -> str:
    total_minutes = abs(offset_seconds) // 60
    sign = "+" if offset_seconds >= 0 else "-"
    return f"{sign}{total_minutes // 60:02d}:{total_minutes % 60:02d}"


class Timezone:
    """A timezone identified by an IANA name or a fixed UTC offset.

    Two Timezone instances are equal when they have the same identifier.

    Attributes:
        id: The zone identifier ("Asia/Shanghai", "UTC", "+05:30").
        tzinfo: The underlying ``tzinfo`` object.

    Examples:
        >>> tz = Timezone.of("Asia/Shanghai")
        >>> tz.offset_at(0)
        28800

        >>> Timezone.from_string("+05:30").id
        '+05:30'

        >>> Timezone.utc().is_utc
        True
    """

    __slots__ = ("_id", "_tzinfo")

    # UTC singleton instance (lazily initialized)
    _utc_instance: ClassVar[Timezone | None] = None

    def __init__(self, tzinfo: _datetime.tzinfo, zone_id: str | None = None) -> None:
        """Wrap a tzinfo.

        Args:
            tzinfo: Any tzinfo implementation (pytz, dateutil, stdlib).
            zone_id: Identifier for the zone. Defaults to the pytz zone
                name, or the tzinfo's repr if it has none.
        """
        if not isinstance(tzinfo, _datetime.tzinfo):
            raise TimezoneError(
                f"tzinfo must be a datetime.tzinfo, got {type(tzinfo).__name__}"
            )
        self._tzinfo: _datetime.tzinfo = tzinfo
        self._id: str = zone_id or getattr(tzinfo, "zone", None) or repr(tzinfo)

    @classmethod
    def utc(cls) -> Timezone:
        """Return the UTC timezone singleton."""
        if cls._utc_instance is None:
            cls._utc_instance = cls(pytz.utc, "UTC")
        return cls._utc_instance

    @classmethod
    def of(cls, zone_id: str) -> Timezone:
        """Look up a zone in the IANA database.

        Raises:
            TimezoneError: If the identifier is unknown.

        Examples:
            >>> Timezone.of("Europe/Paris").id
            'Europe/Paris'
        """
        if zone_id.upper() == "UTC":
            return cls.utc()
        try:
            return cls(pytz.timezone(zone_id), zone_id)
        except pytz.UnknownTimeZoneError as err:
            raise TimezoneError(f"unknown timezone: {zone_id!r}") from err

    @classmethod
    def from_offset(cls, offset_seconds: int) -> Timezone:
        """Create a fixed-offset zone.

        Args:
            offset_seconds: UTC offset in seconds, a whole number of minutes.

        Raises:
            TimezoneError: If the offset is out of range or not whole minutes.
        """
        if not isinstance(offset_seconds, int):
            raise TimezoneError(
                f"offset_seconds must be an integer, got {type(offset_seconds).__name__}"
            )
        if abs(offset_seconds) > MAX_UTC_OFFSET_SECONDS:
            raise TimezoneError(
                f"offset_seconds {offset_seconds} is outside valid range "
                f"[-{MAX_UTC_OFFSET_SECONDS}, {MAX_UTC_OFFSET_SECONDS}]"
            )
        if offset_seconds % 60:
            raise TimezoneError(
                f"offset_seconds must be a whole number of minutes, got {offset_seconds}"
            )
        if offset_seconds == 0:
            return cls.utc()
        return cls(pytz.FixedOffset(offset_seconds // 60), _format_offset(offset_seconds))

    @classmethod
    def from_hours(cls, hours: int, minutes: int = 0) -> Timezone:
        """Create a fixed-offset zone from hours and minutes.

        The sign of ``hours`` applies to ``minutes`` as well.

        Examples:
            >>> Timezone.from_hours(-3, 30).id
            '-03:30'
        """
        if minutes < 0 or minutes > 59:
            raise TimezoneError(f"minutes must be 0-59, got {minutes}")
        sign = -1 if hours < 0 else 1
        return cls.from_offset(sign * (abs(hours) * 3600 + minutes * 60))

    @classmethod
    def from_string(cls, s: str) -> Timezone:
        """Parse a timezone string.

        Supported forms:
            - "Z", "UTC", "UT", "GMT"
            - "+HH:MM", "-HHMM", "+HH", optionally prefixed by GMT/UTC
            - North American abbreviations: EST, EDT, CST, CDT, MST, MDT, PST, PDT
            - IANA identifiers such as "Asia/Shanghai"

        Raises:
            TimezoneError: If the string cannot be resolved.

        Examples:
            >>> Timezone.from_string("GMT+08:00").offset_at(0)
            28800
            >>> Timezone.from_string("-0500").id
            '-05:00'
        """
        if not isinstance(s, str):
            raise TimezoneError(f"Expected string, got {type(s).__name__}")

        s = s.strip()
        upper = s.upper()

        if upper in _UTC_NAMES:
            return cls.utc()

        if upper in _ABBREVIATION_OFFSETS:
            return cls.from_offset(_ABBREVIATION_OFFSETS[upper])

        match = _OFFSET_PATTERN.match(s)
        if match:
            sign_str, hours_str, minutes_str = match.groups()
            hours = int(hours_str)
            minutes = int(minutes_str) if minutes_str else 0
            if minutes > 59:
                raise TimezoneError(f"Offset minutes out of range: {s!r}")
            sign = 1 if sign_str == "+" else -1
            return cls.from_offset(sign * (hours * 3600 + minutes * 60))

        return cls.of(s)

    @classmethod
    def from_tzinfo(cls, tzinfo: _datetime.tzinfo) -> Timezone:
        """Wrap a tzinfo taken from a stdlib datetime.

        UTC and fixed-offset tzinfo objects are normalized so that they
        compare equal to the zones built by ``utc()`` and ``from_offset()``.
        """
        if tzinfo is pytz.utc or tzinfo is _datetime.timezone.utc:
            return cls.utc()
        zone_name = getattr(tzinfo, "zone", None) or getattr(tzinfo, "key", None)
        if zone_name:
            return cls.of(zone_name)
        # Fixed offsets report their offset without a reference datetime
        offset = tzinfo.utcoffset(None)
        if offset is not None:
            return cls.from_offset(int(offset.total_seconds()))
        return cls(tzinfo)

    @classmethod
    def system_default(cls) -> Timezone:
        """Return the operating system's zone.

        Resolution order: the ``TZ`` environment variable, the zone named
        by the ``/etc/localtime`` link, then ``dateutil.tz.tzlocal()``.
        """
        return _system_zone(os.environ.get("TZ"))

    @classmethod
    def default(cls) -> Timezone:
        """Return the configured default zone, or the system zone if unset."""
        from datekit.config import get_settings

        zone_id = get_settings().default_timezone
        if zone_id:
            return cls.from_string(zone_id)
        return cls.system_default()

    @property
    def id(self) -> str:
        return self._id

    @property
    def tzinfo(self) -> _datetime.tzinfo:
        return self._tzinfo

    @property
    def is_utc(self) -> bool:
        return self._id == "UTC"

    def offset_at(self, epoch_millis: int) -> int:
        """Return the UTC offset in seconds in effect at an instant.

        Instants outside years 1-9999 use the rules of the nearest
        representable instant.
        """
        if self._tzinfo is pytz.utc:
            return 0
        instant = _EPOCH_UTC + _datetime.timedelta(milliseconds=_clamp_millis(epoch_millis))
        offset = instant.astimezone(self._tzinfo).utcoffset()
        return int(offset.total_seconds()) if offset is not None else 0

    def local_to_epoch(self, local_millis: int, fold: int = 0) -> int:
        """Return the epoch millis denoted by a wall-clock reading in this zone.

        Wall-clock times skipped by a forward transition are moved forward
        by the length of the gap. Times repeated by a backward transition
        resolve to the earlier of the two instants when ``fold`` is 0 and
        to the later one when it is 1, as with ``datetime.fold``. Outside
        a repeated hour ``fold`` has no effect.
        """
        if self._tzinfo is pytz.utc:
            return local_millis

        clamped = _clamp_millis(local_millis)
        naive = _EPOCH_NAIVE + _datetime.timedelta(milliseconds=clamped)
        localize = getattr(self._tzinfo, "localize", None)

        if localize is not None:
            try:
                aware = localize(naive, is_dst=None)
            except pytz.AmbiguousTimeError:
                # A backward transition ends daylight time: the first pass is DST
                aware = localize(naive, is_dst=not fold)
            except pytz.NonExistentTimeError:
                # The pre-transition offset carries the reading past the gap
                aware = localize(naive, is_dst=False)
        else:
            aware = naive.replace(tzinfo=self._tzinfo, fold=1 if fold else 0)
            if not dateutil_tz.datetime_exists(aware):
                aware = dateutil_tz.resolve_imaginary(aware)
                return (aware - _EPOCH_UTC) // _ONE_MILLI + (local_millis - clamped)

        offset = aware.utcoffset()
        offset_millis = int(offset.total_seconds()) * 1000 if offset is not None else 0
        return local_millis - offset_millis

    def fold_at(self, epoch_millis: int) -> int:
        """Return 1 if an instant is the second pass of a repeated wall-clock time.

        The result is the ``fold`` that ``local_to_epoch`` needs to map the
        instant's wall-clock reading back to the same instant.

        Examples:
            >>> ny = Timezone.of("America/New_York")
            >>> ny.fold_at(1730611800000), ny.fold_at(1730615400000)
            (0, 1)
        """
        if self._tzinfo is pytz.utc:
            return 0
        local = epoch_millis + self.offset_at(epoch_millis) * 1000
        return 0 if self.local_to_epoch(local) == epoch_millis else 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timezone):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Timezone({self._id!r})"

    def __str__(self) -> str:
        return self._id


@functools.lru_cache(maxsize=8)
def _system_zone(tz_env: str | None) -> Timezone:
    if tz_env:
        name = tz_env.lstrip(":")
        try:
            return Timezone.of(name)
        except TimezoneError:
            logger.debug("TZ=%r is not an IANA zone name, ignoring", tz_env)

    link = os.path.realpath("/etc/localtime")
    if "zoneinfo/" in link:
        name = link.split("zoneinfo/", 1)[1]
        try:
            return Timezone.of(name)
        except TimezoneError:
            logger.debug("/etc/localtime points at unknown zone %r", name)

    logger.debug("falling back to dateutil tzlocal() for the system zone")
    return Timezone(dateutil_tz.tzlocal(), "localtime")


def resolve_timezone(value: Timezone | str | _datetime.tzinfo | None) -> Timezone:
    """Coerce a caller-supplied zone argument into a Timezone.

    None selects the configured default zone.
    """
    if value is None:
        return Timezone.default()
    if isinstance(value, Timezone):
        return value
    if isinstance(value, str):
        return Timezone.from_string(value)
    if isinstance(value, _datetime.tzinfo):
        return Timezone.from_tzinfo(value)
    raise TimezoneError(f"cannot interpret {value!r} as a timezone")


__all__ = ["Timezone", "resolve_timezone"]
