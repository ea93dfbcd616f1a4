"""Conversions between zoned and naive stdlib datetimes.

A naive datetime carries wall-clock fields only. Dropping the zone of a
zoned value keeps its local fields; attaching a zone to a naive value
uses the default zone unless one is given. The two directions are not
symmetric: naive values are assumed to be in the default zone.
"""

from __future__ import annotations

import datetime as _datetime
from typing import Any

from datekit._internal.validation import require_not_none
from datekit.core.datetime import BaseDateTime, DateTime
from datekit.core.fields import CalendarFields
from datekit.errors import ValidationError
from datekit.units.timezone import Timezone


def _is_aware(dt: _datetime.datetime) -> bool:
    return dt.tzinfo is not None and dt.utcoffset() is not None


def to_naive(zoned: BaseDateTime | _datetime.datetime) -> _datetime.datetime:
    """Drop the zone of a zoned value, keeping its local wall-clock fields.

    Examples:
        >>> to_naive(DateTime(0, "Asia/Shanghai"))
        datetime.datetime(1970, 1, 1, 8, 0)
    """
    require_not_none(zoned, "zoned")
    if isinstance(zoned, BaseDateTime):
        return zoned.fields().to_naive_datetime()
    if isinstance(zoned, _datetime.datetime):
        return zoned.replace(tzinfo=None)
    raise ValidationError(f"cannot drop the zone of {type(zoned).__name__}")


def to_zoned(
    naive: _datetime.datetime | CalendarFields,
    timezone: Timezone | str | _datetime.tzinfo | None = None,
) -> _datetime.datetime:
    """Attach a zone to naive wall-clock fields.

    Args:
        naive: A naive datetime or CalendarFields.
        timezone: Zone to attach; defaults to the default zone.

    Raises:
        ValidationError: If ``naive`` already carries a zone.

    Examples:
        >>> import datetime
        >>> to_zoned(datetime.datetime(2024, 1, 15, 8, 0), "UTC").isoformat()
        '2024-01-15T08:00:00+00:00'
    """
    require_not_none(naive, "naive")
    if isinstance(naive, _datetime.datetime):
        if _is_aware(naive):
            raise ValidationError("expected a naive datetime, got a zoned one")
        fields = CalendarFields.from_datetime(naive)
    elif isinstance(naive, CalendarFields):
        fields = naive
    else:
        raise ValidationError(f"cannot attach a zone to {type(naive).__name__}")
    return DateTime.from_fields(fields, timezone).to_datetime()


def to_datetime(value: Any) -> _datetime.datetime:
    """Return an aware stdlib datetime for any value DateTime.of accepts."""
    return DateTime.of(value).to_datetime()


__all__ = ["to_naive", "to_zoned", "to_datetime"]
