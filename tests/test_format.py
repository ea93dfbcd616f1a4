"""Tests for pattern-based formatting and parsing."""

from __future__ import annotations

import pytest

from datekit.clock import FixedClock
from datekit.core.datetime import DateTime
from datekit.core.fields import CalendarFields
from datekit.errors import (
    InvalidFieldError,
    NullOrBlankInputError,
    ParseError,
    ValidationError,
)
from datekit.format import (
    HTTP_DATETIME_PATTERN,
    JDK_DATETIME_PATTERN,
    NORM_DATETIME_MS_PATTERN,
    PURE_DATE_PATTERN,
    PURE_DATETIME_MS_PATTERN,
    UTC_MS_PATTERN,
    UTC_PATTERN,
    format_pattern,
    parse_pattern,
)
from datekit.format.pattern import _expand_two_digit_year


def value_in(zone: str, *fields: int) -> DateTime:
    return DateTime.from_fields(CalendarFields(*fields), zone)


class TestFormatPattern:
    """Tests for format_pattern."""

    def test_numeric_fields(self) -> None:
        """Numeric letters pad to the letter count."""
        dt = value_in("UTC", 2024, 1, 5, 4, 3, 2, 7)
        assert format_pattern(dt, "yyyy/M/d H:m:s") == "2024/1/5 4:3:2"
        assert format_pattern(dt, NORM_DATETIME_MS_PATTERN) == "2024-01-05 04:03:02.007"
        assert format_pattern(dt, "yy") == "24"

    def test_day_of_year(self) -> None:
        """D is the day of year."""
        assert format_pattern(value_in("UTC", 2024, 2, 1), "DDD") == "032"

    def test_names(self) -> None:
        """Month and weekday names in short and long form."""
        dt = value_in("UTC", 2024, 1, 5)
        assert format_pattern(dt, "EEE MMM") == "Fri Jan"
        assert format_pattern(dt, "EEEE, MMMM d") == "Friday, January 5"

    def test_clock_hour(self) -> None:
        """Midnight is 12 AM on the 12-hour clock."""
        assert format_pattern(value_in("UTC", 2024, 1, 5, 0, 15), "hh:mm a") == "12:15 AM"
        assert format_pattern(value_in("UTC", 2024, 1, 5, 13, 15), "h a") == "1 PM"

    def test_jdk_and_http(self) -> None:
        """The JDK toString and HTTP shapes."""
        dt = value_in("UTC", 2024, 1, 5, 14, 30, 45)
        assert format_pattern(dt, JDK_DATETIME_PATTERN) == "Fri Jan 05 14:30:45 UTC 2024"
        assert format_pattern(dt, HTTP_DATETIME_PATTERN) == "Fri, 05 Jan 2024 14:30:45 UTC"

    def test_utc_patterns(self) -> None:
        """UTC values format with a Z designator."""
        dt = value_in("UTC", 2024, 1, 5, 14, 30, 45, 120)
        assert format_pattern(dt, UTC_PATTERN) == "2024-01-05T14:30:45Z"
        assert format_pattern(dt, UTC_MS_PATTERN) == "2024-01-05T14:30:45.120Z"

    def test_offsets(self) -> None:
        """Z, X and XXX render the offset."""
        dt = value_in("Asia/Shanghai", 2024, 1, 5, 14, 30, 45)
        assert format_pattern(dt, UTC_PATTERN) == "2024-01-05T14:30:45+08:00"
        assert format_pattern(dt, "Z") == "+0800"
        assert format_pattern(dt, "X") == "+08"
        assert format_pattern(value_in("-03:30", 2024, 1, 5), "XX") == "-0330"

    def test_zone_abbreviation(self) -> None:
        """Abbreviations are used only when they read back correctly."""
        assert format_pattern(value_in("America/New_York", 2024, 7, 4, 12), "z") == "EDT"
        # Shanghai reports "CST", which would read back as US Central time
        assert format_pattern(value_in("Asia/Shanghai", 2024, 7, 4), "z") == "GMT+08:00"

    def test_quoted_literals(self) -> None:
        """Quoted text is copied and '' is a single quote."""
        dt = value_in("UTC", 2024, 1, 5, 14)
        assert format_pattern(dt, "'at' HH 'o''clock'") == "at 14 o'clock"
        assert format_pattern(dt, "yyyy年MM月dd日") == "2024年01月05日"

    def test_negative_year(self) -> None:
        """Years before year 1 carry a sign."""
        assert format_pattern(value_in("UTC", -5, 1, 1), "yyyy") == "-0005"

    def test_unsupported_letter(self) -> None:
        """Unsupported letters are rejected."""
        with pytest.raises(ValidationError, match="unsupported pattern letter 'Q'"):
            format_pattern(DateTime(0, "UTC"), "yyyy-QQ")

    def test_unterminated_quote(self) -> None:
        """An open quote without its partner is rejected."""
        with pytest.raises(ValidationError, match="unterminated quote"):
            format_pattern(DateTime(0, "UTC"), "yyyy 'at")

    def test_method_on_value(self) -> None:
        """DateTime.format delegates to format_pattern."""
        assert DateTime(0, "UTC").format("yyyyMMdd") == "19700101"


class TestParsePattern:
    """Tests for parse_pattern."""

    def test_pure_date(self) -> None:
        """Adjacent numeric fields have fixed widths."""
        dt = parse_pattern("20240105", PURE_DATE_PATTERN, "UTC")
        assert (dt.year, dt.month, dt.day) == (2024, 1, 5)

    def test_pure_with_millis(self) -> None:
        """The 17-digit form carries milliseconds."""
        dt = parse_pattern("20240105143045123", PURE_DATETIME_MS_PATTERN, "UTC")
        assert (dt.hour, dt.minute, dt.second, dt.millisecond) == (14, 30, 45, 123)

    def test_variable_width(self) -> None:
        """Separated numeric fields accept fewer digits."""
        dt = parse_pattern("2024/1/5 7:05", "yyyy/M/d H:mm", "UTC")
        assert (dt.month, dt.day, dt.hour, dt.minute) == (1, 5, 7, 5)

    def test_defaults(self) -> None:
        """Missing date fields default to 1970-01-01."""
        dt = parse_pattern("10:20", "HH:mm", "UTC")
        assert dt.to_ms_string() == "1970-01-01 10:20:00.000"

    def test_clock_hour_and_marker(self) -> None:
        """h and a combine into the hour of day."""
        assert parse_pattern("05 Jan 2024 02:30 PM", "dd MMM yyyy hh:mm a", "UTC").hour == 14
        assert parse_pattern("12:00 am", "hh:mm a", "UTC").hour == 0

    def test_clock_hour_out_of_range(self) -> None:
        """Clock hours run from 1 to 12."""
        with pytest.raises(InvalidFieldError, match="clock hour"):
            parse_pattern("13:00 PM", "hh:mm a", "UTC")

    def test_zone_in_text_wins(self) -> None:
        """An offset in the text overrides the timezone argument."""
        dt = parse_pattern("2024-01-05T14:30:45+08:00", UTC_PATTERN, "America/New_York")
        assert dt.timezone.id == "+08:00"
        assert dt.with_timezone("UTC").hour == 6

    def test_http_gmt(self) -> None:
        """HTTP dates name GMT."""
        dt = parse_pattern("Fri, 05 Jan 2024 14:30:45 GMT", HTTP_DATETIME_PATTERN)
        assert dt.timezone.is_utc
        assert dt.hour == 14

    def test_jdk_abbreviation(self) -> None:
        """JDK dates carry a zone abbreviation."""
        dt = parse_pattern("Fri Jan 05 14:30:45 CST 2024", JDK_DATETIME_PATTERN)
        assert dt.with_timezone("UTC").hour == 20

    def test_day_of_year(self) -> None:
        """D selects a day of the year."""
        dt = parse_pattern("2024-060", "yyyy-DDD", "UTC")
        assert (dt.month, dt.day) == (2, 29)
        with pytest.raises(InvalidFieldError, match="day of year"):
            parse_pattern("2023-366", "yyyy-DDD", "UTC")

    def test_invalid_date(self) -> None:
        """Fields are validated strictly."""
        with pytest.raises(InvalidFieldError, match="day must be"):
            parse_pattern("2024-02-30", "yyyy-MM-dd", "UTC")

    def test_mismatch(self) -> None:
        """Text that does not follow the pattern raises ParseError."""
        with pytest.raises(ParseError, match="does not match"):
            parse_pattern("2024/01/05", "yyyy-MM-dd", "UTC")

    def test_blank(self) -> None:
        """Blank text raises NullOrBlankInputError."""
        with pytest.raises(NullOrBlankInputError):
            parse_pattern("   ", "yyyy", "UTC")

    def test_classmethod(self) -> None:
        """DateTime.parse_pattern returns the calling type."""
        dt = DateTime.parse_pattern("2024-01-05", "yyyy-MM-dd", "UTC")
        assert type(dt) is DateTime
        assert dt.day == 5


class TestTwoDigitYears:
    """Tests for the two-digit year window."""

    def test_window(self) -> None:
        """Years resolve within 80 years back and 20 years ahead."""
        assert _expand_two_digit_year(46, 2026) == 2046
        assert _expand_two_digit_year(47, 2026) == 1947
        assert _expand_two_digit_year(24, 2026) == 2024
        assert _expand_two_digit_year(99, 2026) == 1999

    def test_parse_uses_given_clock(self) -> None:
        """The window is centred on the year the clock reports."""
        in_1970 = parse_pattern("95-06-01", "yy-MM-dd", "UTC", clock=FixedClock(0))
        in_2019 = parse_pattern("95-06-01", "yy-MM-dd", "UTC", clock=FixedClock(1_559_636_715_000))
        assert in_1970.year == 1895
        assert in_2019.year == 1995

    def test_datetime_parse_pattern_clock(self) -> None:
        """DateTime.parse_pattern passes the clock through."""
        dt = DateTime.parse_pattern("69", "yy", "UTC", FixedClock(0))
        assert dt.year == 1969
