"""Tests for conversion utilities."""

from __future__ import annotations

import datetime

import pytest

from datekit.convert import (
    from_epoch_millis,
    from_epoch_seconds,
    from_fields,
    seconds_to_time_string,
    time_string_to_seconds,
    to_datetime,
    to_epoch_millis,
    to_epoch_seconds,
    to_fields,
    to_naive,
    to_zoned,
)
from datekit.core.datetime import DateTime, MutableDateTime
from datekit.core.fields import CalendarFields
from datekit.errors import (
    InvalidFieldError,
    NullOrBlankInputError,
    ParseError,
    ValidationError,
)


class TestEpochFields:
    """Tests for to_fields and from_fields."""

    def test_to_fields(self) -> None:
        """The epoch is 08:00 in Shanghai."""
        assert to_fields(0, "Asia/Shanghai") == CalendarFields(1970, 1, 1, 8)

    def test_round_trip(self) -> None:
        """from_fields inverts to_fields."""
        millis = 1_559_636_715_123
        for zone in ("UTC", "Asia/Shanghai", "America/New_York", "-03:30"):
            assert from_fields(to_fields(millis, zone), zone) == millis

    def test_round_trip_in_overlap(self) -> None:
        """Both instants of a repeated hour survive a round trip."""
        zone = "America/New_York"
        first = from_fields(CalendarFields(2024, 11, 3, 1, 30), zone)
        second = first + 3_600_000
        assert first == 1_730_611_800_000
        assert to_fields(second, zone) == CalendarFields(2024, 11, 3, 1, 30)
        assert to_fields(first, zone).fold == 0
        assert to_fields(second, zone).fold == 1
        assert from_fields(to_fields(first, zone), zone) == first
        assert from_fields(to_fields(second, zone), zone) == second

    def test_fold_picks_later_instant(self) -> None:
        """fold=1 selects the second pass of a repeated hour."""
        zone = "America/New_York"
        later = from_fields(CalendarFields(2024, 11, 3, 1, 30, fold=1), zone)
        assert later == 1_730_615_400_000

    def test_fold_ignored_outside_overlap(self) -> None:
        """fold has no effect on an unambiguous reading."""
        zone = "America/New_York"
        plain = from_fields(CalendarFields(2024, 11, 3, 3, 30), zone)
        assert from_fields(CalendarFields(2024, 11, 3, 3, 30, fold=1), zone) == plain

    def test_to_naive_keeps_fold(self) -> None:
        """The naive datetime of a second pass has fold=1."""
        value = DateTime(1_730_615_400_000, "America/New_York")
        naive = to_naive(value)
        assert naive == datetime.datetime(2024, 11, 3, 1, 30)
        assert naive.fold == 1

    def test_timezone_required(self) -> None:
        """The zone is required."""
        with pytest.raises(NullOrBlankInputError, match="timezone"):
            to_fields(0, None)  # type: ignore[arg-type]
        with pytest.raises(NullOrBlankInputError, match="timezone"):
            from_fields(CalendarFields(1970, 1, 1), None)  # type: ignore[arg-type]

    def test_invalid_fields(self) -> None:
        """Out-of-range fields are rejected."""
        with pytest.raises(InvalidFieldError):
            from_fields(CalendarFields(2024, 13, 1), "UTC")


class TestEpochValues:
    """Tests for epoch millisecond and second conversions."""

    def test_from_epoch_millis(self) -> None:
        """A day of millis is 1970-01-02."""
        assert from_epoch_millis(86_400_000, "UTC").to_date_string() == "1970-01-02"

    def test_from_epoch_seconds(self) -> None:
        """Seconds are scaled to millis."""
        assert from_epoch_seconds(60, "UTC").epoch_millis == 60_000

    def test_to_epoch_millis(self) -> None:
        """Every supported input yields its instant."""
        aware = datetime.datetime(1970, 1, 1, 0, 0, 1, tzinfo=datetime.timezone.utc)
        assert to_epoch_millis(aware) == 1000
        assert to_epoch_millis(42) == 42
        assert to_epoch_millis(MutableDateTime(7, "UTC")) == 7

    def test_to_epoch_millis_naive_uses_default_zone(self) -> None:
        """Naive values are read in the default zone."""
        from datekit.config import configure

        configure(default_timezone="Asia/Shanghai")
        assert to_epoch_millis(datetime.datetime(1970, 1, 1, 8)) == 0
        assert to_epoch_millis(datetime.date(1970, 1, 2)) == 16 * 3_600_000

    def test_to_epoch_seconds_floors(self) -> None:
        """Seconds are floored."""
        assert to_epoch_seconds(DateTime(-1, "UTC")) == -1
        assert to_epoch_seconds(1999) == 1

    def test_to_epoch_millis_rejects(self) -> None:
        """Unsupported inputs are rejected."""
        with pytest.raises(ValidationError, match="bool"):
            to_epoch_millis(False)
        with pytest.raises(ValidationError, match="str"):
            to_epoch_millis("0")
        with pytest.raises(NullOrBlankInputError):
            to_epoch_millis(None)


class TestZonedConversion:
    """Tests for naive and zoned stdlib datetimes."""

    def test_to_naive_from_value(self) -> None:
        """Naive results keep the local wall-clock fields."""
        assert to_naive(DateTime(0, "Asia/Shanghai")) == datetime.datetime(1970, 1, 1, 8)

    def test_to_naive_from_datetime(self) -> None:
        """Aware stdlib datetimes drop their zone."""
        aware = datetime.datetime(2024, 1, 1, 12, tzinfo=datetime.timezone.utc)
        assert to_naive(aware) == datetime.datetime(2024, 1, 1, 12)

    def test_to_naive_rejects_other(self) -> None:
        """Other types are rejected."""
        with pytest.raises(ValidationError, match="cannot drop"):
            to_naive("2024-01-01")  # type: ignore[arg-type]

    def test_to_zoned(self) -> None:
        """Naive wall-clock time gets a zone."""
        result = to_zoned(datetime.datetime(2024, 1, 15, 8, 0), "Asia/Shanghai")
        assert result.utcoffset() == datetime.timedelta(hours=8)
        assert result.hour == 8

    def test_to_zoned_from_fields(self) -> None:
        """CalendarFields are accepted."""
        result = to_zoned(CalendarFields(2024, 1, 15, 8), "UTC")
        assert result.isoformat() == "2024-01-15T08:00:00+00:00"

    def test_to_zoned_gap(self) -> None:
        """Skipped wall-clock times move forward."""
        result = to_zoned(datetime.datetime(2024, 3, 10, 2, 30), "America/New_York")
        assert (result.hour, result.minute) == (3, 30)

    def test_to_zoned_rejects_aware(self) -> None:
        """A zoned input is rejected."""
        aware = datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)
        with pytest.raises(ValidationError, match="naive"):
            to_zoned(aware, "UTC")

    def test_to_datetime(self) -> None:
        """Any accepted value converts to an aware datetime."""
        result = to_datetime(DateTime(0, "UTC"))
        assert result == datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)


class TestSecondsStrings:
    """Tests for second counts and HH:mm:ss strings."""

    def test_seconds_to_string(self) -> None:
        """Hours are not wrapped at 24."""
        assert seconds_to_time_string(0) == "00:00:00"
        assert seconds_to_time_string(3661) == "01:01:01"
        assert seconds_to_time_string(90_000) == "25:00:00"

    def test_negative_seconds(self) -> None:
        """Negative counts are rejected."""
        with pytest.raises(ValidationError, match="negative"):
            seconds_to_time_string(-1)

    def test_string_to_seconds(self) -> None:
        """Parts are read right to left."""
        assert time_string_to_seconds("01:01:01") == 3661
        assert time_string_to_seconds("2:30") == 150
        assert time_string_to_seconds("45") == 45
        assert time_string_to_seconds("25:00:00") == 90_000

    def test_empty_is_zero(self) -> None:
        """Empty input is zero seconds."""
        assert time_string_to_seconds("") == 0
        assert time_string_to_seconds(None) == 0

    def test_malformed(self) -> None:
        """Non-numeric parts and too many parts are rejected."""
        with pytest.raises(ParseError, match="H:m:s"):
            time_string_to_seconds("1:2:3:4")
        with pytest.raises(ParseError, match="H:m:s"):
            time_string_to_seconds("a:30")
        with pytest.raises(ParseError, match="H:m:s"):
            time_string_to_seconds("-1:30")
