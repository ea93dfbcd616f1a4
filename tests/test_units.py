"""Tests for the calendar enumerations."""

from __future__ import annotations

import pytest

from datekit.errors import InvalidFieldError
from datekit.units.era import Era
from datekit.units.field import DateField
from datekit.units.timeunit import TimeUnit
from datekit.units.week import Month, Quarter, Week


class TestWeek:
    """Tests for the Week enum."""

    def test_iso_numbering(self) -> None:
        """Monday is 1 and Sunday is 7."""
        assert Week.MONDAY.value == 1
        assert Week.SUNDAY.value == 7

    def test_of_names(self) -> None:
        """Full and abbreviated names in any case."""
        assert Week.of("friday") is Week.FRIDAY
        assert Week.of("Sun") is Week.SUNDAY
        assert Week.of(Week.TUESDAY) is Week.TUESDAY

    def test_of_rejects(self) -> None:
        """Unknown values are rejected."""
        with pytest.raises(InvalidFieldError, match="1-7"):
            Week.of(0)
        with pytest.raises(InvalidFieldError, match="weekday name"):
            Week.of("Someday")

    def test_weekend(self) -> None:
        """Saturday and Sunday are the weekend."""
        assert Week.SATURDAY.is_weekend
        assert not Week.FRIDAY.is_weekend
        assert Week.WEDNESDAY.short_name == "Wed"


class TestMonth:
    """Tests for the Month enum."""

    def test_of(self) -> None:
        """Numbers and English names resolve."""
        assert Month.of(2) is Month.FEBRUARY
        assert Month.of("sep") is Month.SEPTEMBER
        assert Month.of("September") is Month.SEPTEMBER

    def test_of_rejects(self) -> None:
        """Unknown values are rejected."""
        with pytest.raises(InvalidFieldError, match="1-12"):
            Month.of(13)
        with pytest.raises(InvalidFieldError, match="month name"):
            Month.of("ju")

    def test_last_day(self) -> None:
        """February depends on the leap year."""
        assert Month.FEBRUARY.last_day(leap_year=True) == 29
        assert Month.FEBRUARY.last_day(leap_year=False) == 28
        assert Month.APRIL.last_day(leap_year=False) == 30

    def test_quarter(self) -> None:
        """Months map to quarters and back."""
        assert Month.MAY.quarter is Quarter.Q2
        assert Quarter.Q4.first_month is Month.OCTOBER


class TestDateField:
    """Tests for DateField classification."""

    def test_week_based(self) -> None:
        """Week fields are flagged."""
        assert DateField.WEEK_OF_YEAR.is_week_based
        assert DateField.WEEK_OF_MONTH.is_week_based
        assert DateField.DAY_OF_WEEK_IN_MONTH.is_week_based
        assert not DateField.DAY_OF_MONTH.is_week_based

    def test_date_based(self) -> None:
        """Date fields are distinguished from time fields."""
        assert DateField.YEAR.is_date_based
        assert not DateField.HOUR_OF_DAY.is_date_based


class TestTimeUnit:
    """Tests for TimeUnit."""

    def test_lengths(self) -> None:
        """Units are fixed lengths in milliseconds."""
        assert TimeUnit.SECOND.millis == 1000
        assert TimeUnit.WEEK.millis == 7 * TimeUnit.DAY.millis
        assert TimeUnit.MINUTE.to_seconds() == 60.0

    def test_count_truncates(self) -> None:
        """count truncates toward zero."""
        assert TimeUnit.SECOND.count(1999) == 1
        assert TimeUnit.SECOND.count(-1999) == -1


class TestEra:
    """Tests for Era."""

    def test_of_year(self) -> None:
        """Year 0 and earlier are BCE."""
        assert Era.of_year(1) is Era.CE
        assert Era.of_year(0) is Era.BCE
        assert Era.BCE.is_before_common_era

    def test_field_value(self) -> None:
        """BCE is 0 and CE is 1."""
        assert Era.BCE.field_value == 0
        assert Era.CE.field_value == 1
