"""Tests for YearMonth."""

from __future__ import annotations

import datetime

import pytest

from datekit.core.datetime import DateTime
from datekit.core.fields import CalendarFields
from datekit.core.yearmonth import YearMonth, to_year_month
from datekit.errors import InvalidFieldError, NullOrBlankInputError
from datekit.units.week import Month


class TestYearMonth:
    """Tests for the YearMonth value."""

    def test_construction_validates(self) -> None:
        """Month and year are range checked."""
        with pytest.raises(InvalidFieldError, match="month"):
            YearMonth(2024, 13)
        with pytest.raises(InvalidFieldError, match="year"):
            YearMonth(10_000, 1)

    def test_month_facts(self) -> None:
        """Leap years give February 29 days."""
        ym = YearMonth(2024, 2)
        assert ym.is_leap_year()
        assert ym.length_of_month() == 29
        assert ym.month_enum() is Month.FEBRUARY
        assert YearMonth(2023, 2).length_of_month() == 28

    def test_at_day(self) -> None:
        """Expanding to a date needs a valid day."""
        ym = YearMonth(2023, 2)
        assert ym.at_day(28) == CalendarFields(2023, 2, 28)
        with pytest.raises(InvalidFieldError, match="1-28"):
            ym.at_day(29)

    def test_start_and_end(self) -> None:
        """Shortcuts for the first and last day."""
        ym = YearMonth(2024, 4)
        assert ym.at_start_of_month() == CalendarFields(2024, 4, 1)
        assert ym.at_end_of_month() == CalendarFields(2024, 4, 30)

    def test_to_datetime(self) -> None:
        """Midnight of a day in a zone."""
        dt = YearMonth(2024, 1).to_datetime(15, "Asia/Shanghai")
        assert dt.to_ms_string() == "2024-01-15 00:00:00.000"
        assert dt.offset_seconds() == 8 * 3600

    def test_plus_months(self) -> None:
        """Months carry into years in both directions."""
        assert YearMonth(2024, 2).plus_months(11) == YearMonth(2025, 1)
        assert YearMonth(2024, 1).plus_months(-1) == YearMonth(2023, 12)

    def test_ordering_and_str(self) -> None:
        """YearMonths order chronologically and print as yyyy-MM."""
        assert YearMonth(2023, 12) < YearMonth(2024, 1)
        assert str(YearMonth(2024, 3)) == "2024-03"
        assert repr(YearMonth(2024, 3)) == "YearMonth(2024, 3)"
        assert len({YearMonth(2024, 3), YearMonth(2024, 3)}) == 1


class TestToYearMonth:
    """Tests for to_year_month."""

    def test_from_value_in_zone(self) -> None:
        """The month is read in the value's own zone."""
        dt = DateTime.of("2024-01-31 20:00:00", "UTC")
        assert to_year_month(dt) == YearMonth(2024, 1)
        assert to_year_month(dt.with_timezone("Asia/Shanghai")) == YearMonth(2024, 2)

    def test_from_stdlib(self) -> None:
        """Dates, datetimes and fields are accepted."""
        assert to_year_month(datetime.date(2024, 5, 6)) == YearMonth(2024, 5)
        assert to_year_month(datetime.datetime(2024, 5, 6, 7)) == YearMonth(2024, 5)
        assert to_year_month(CalendarFields(2024, 5, 6)) == YearMonth(2024, 5)

    def test_rejects(self) -> None:
        """None and unsupported types are rejected."""
        with pytest.raises(NullOrBlankInputError):
            to_year_month(None)
        with pytest.raises(InvalidFieldError, match="str"):
            to_year_month("2024-05")
