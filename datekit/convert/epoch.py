"""Epoch conversion utilities.

This module converts between epoch milliseconds, wall-clock fields and
date-time values.

Functions:
    to_fields: Decompose epoch millis into CalendarFields in a timezone.
    from_fields: Recompose CalendarFields in a timezone into epoch millis.
    from_epoch_millis: Create a DateTime from epoch milliseconds.
    to_epoch_millis: Read epoch milliseconds from any supported value.
    from_epoch_seconds: Create a DateTime from epoch seconds.
    to_epoch_seconds: Read whole epoch seconds from any supported value.

The Unix epoch is 1970-01-01 00:00:00 UTC (MJD 40587).

Examples:
    >>> from datekit.convert import to_fields, from_fields
    >>> fields = to_fields(0, "Asia/Shanghai")
    >>> fields.hour
    8
    >>> from_fields(fields, "Asia/Shanghai")
    0
"""

from __future__ import annotations

import datetime as _datetime
from typing import Any

from datekit._internal.constants import MILLIS_PER_SECOND
from datekit._internal.validation import require_not_none
from datekit.core.datetime import BaseDateTime, DateTime
from datekit.core.fields import CalendarFields
from datekit.errors import ValidationError
from datekit.units.timezone import Timezone, resolve_timezone

TimezoneLike = Timezone | str | _datetime.tzinfo


def to_fields(epoch_millis: int, timezone: TimezoneLike) -> CalendarFields:
    """Return the wall-clock fields of an instant in a timezone.

    Args:
        epoch_millis: Milliseconds since the Unix epoch.
        timezone: Zone to read the fields in; required.

    Raises:
        NullOrBlankInputError: If an argument is None.
    """
    require_not_none(epoch_millis, "epoch_millis")
    zone = resolve_timezone(require_not_none(timezone, "timezone"))
    return DateTime(epoch_millis, zone).fields()


def from_fields(fields: CalendarFields, timezone: TimezoneLike) -> int:
    """Return the instant that wall-clock fields denote in a timezone.

    This is the inverse of ``to_fields`` for every instant. Wall-clock
    times skipped by a DST transition move forward by the gap; repeated
    ones resolve to the earlier instant, or to the later one when
    ``fields.fold`` is 1.

    Raises:
        NullOrBlankInputError: If an argument is None.
        InvalidFieldError: If a field is out of range.
    """
    require_not_none(fields, "fields")
    zone = resolve_timezone(require_not_none(timezone, "timezone"))
    return DateTime.from_fields(fields, zone).epoch_millis


def from_epoch_millis(
    epoch_millis: int,
    timezone: TimezoneLike | None = None,
) -> DateTime:
    """Create a DateTime from epoch milliseconds.

    Examples:
        >>> from_epoch_millis(86_400_000, "UTC").to_date_string()
        '1970-01-02'
    """
    return DateTime(epoch_millis, timezone)


def from_epoch_seconds(
    epoch_seconds: int,
    timezone: TimezoneLike | None = None,
) -> DateTime:
    """Create a DateTime from whole epoch seconds."""
    require_not_none(epoch_seconds, "epoch_seconds")
    return DateTime(epoch_seconds * MILLIS_PER_SECOND, timezone)


def to_epoch_millis(value: Any) -> int:
    """Return the epoch milliseconds of a value.

    Accepted values:
        - int: returned unchanged
        - DateTime / MutableDateTime
        - aware ``datetime.datetime``: its instant
        - naive ``datetime.datetime`` or ``datetime.date``: wall-clock
          time in the default zone

    Raises:
        NullOrBlankInputError: If value is None.
        ValidationError: If the type is not supported.

    Examples:
        >>> import datetime
        >>> to_epoch_millis(datetime.datetime(1970, 1, 1, 0, 0, 1, tzinfo=datetime.timezone.utc))
        1000
    """
    require_not_none(value, "value")
    if isinstance(value, bool):
        raise ValidationError("cannot read epoch milliseconds from a bool")
    if isinstance(value, int):
        return value
    if isinstance(value, BaseDateTime):
        return value.epoch_millis
    if isinstance(value, (_datetime.datetime, _datetime.date)):
        return DateTime.of(value).epoch_millis
    raise ValidationError(
        f"cannot read epoch milliseconds from {type(value).__name__}"
    )


def to_epoch_seconds(value: Any) -> int:
    """Return whole epoch seconds of a value, floored."""
    return to_epoch_millis(value) // MILLIS_PER_SECOND


__all__ = [
    "to_fields",
    "from_fields",
    "from_epoch_millis",
    "from_epoch_seconds",
    "to_epoch_millis",
    "to_epoch_seconds",
]
