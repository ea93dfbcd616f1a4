"""Tests for the internal calendar arithmetic."""

from __future__ import annotations

import pytest

from datekit._internal.calendar import (
    compose_local_millis,
    days_in_month,
    decompose_local_millis,
    first_week_start,
    is_leap_year,
    mjd_to_iso_weekday,
    mjd_to_ymd,
    ordinal_to_ymd,
    week_of_year,
    ymd_to_mjd,
    ymd_to_ordinal,
)
from datekit._internal.constants import MILLIS_PER_DAY, MJD_UNIX_EPOCH

MONDAY, THURSDAY, SUNDAY = 1, 4, 7


class TestLeapYears:
    """Tests for Gregorian leap year rules."""

    def test_divisible_by_four(self) -> None:
        """Years divisible by 4 are leap years."""
        assert is_leap_year(2024)
        assert not is_leap_year(2023)

    def test_century_rules(self) -> None:
        """Centuries are leap years only when divisible by 400."""
        assert is_leap_year(2000)
        assert not is_leap_year(1900)
        assert not is_leap_year(2100)

    def test_year_zero_and_negative(self) -> None:
        """Proleptic years <= 0 follow the same rules."""
        assert is_leap_year(0)
        assert is_leap_year(-4)
        assert not is_leap_year(-1)

    def test_days_in_february(self) -> None:
        """February has 29 days in leap years."""
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28

    def test_days_in_month_rejects_month_13(self) -> None:
        """Month numbers outside 1-12 are rejected."""
        with pytest.raises(ValueError, match="month"):
            days_in_month(2024, 13)


class TestOrdinalsAndMjd:
    """Tests for day-number conversions."""

    def test_unix_epoch_mjd(self) -> None:
        """1970-01-01 is MJD 40587."""
        assert ymd_to_mjd(1970, 1, 1) == MJD_UNIX_EPOCH

    def test_mjd_round_trip_far_past(self) -> None:
        """Dates before year 1 survive a round trip."""
        mjd = ymd_to_mjd(-9999, 1, 1)
        assert mjd_to_ymd(mjd) == (-9999, 1, 1)

    def test_ordinal_of_year_zero_end(self) -> None:
        """Ordinal 0 is the last day of year 0."""
        assert ymd_to_ordinal(0, 12, 31) == 0
        assert ordinal_to_ymd(0) == (0, 12, 31)

    def test_end_of_400_year_cycle(self) -> None:
        """December 31 of a year divisible by 400 decodes correctly."""
        assert ordinal_to_ymd(ymd_to_ordinal(2000, 12, 31)) == (2000, 12, 31)
        assert ordinal_to_ymd(ymd_to_ordinal(-400, 12, 31)) == (-400, 12, 31)

    def test_iso_weekday(self) -> None:
        """1970-01-01 was a Thursday and 2024-01-01 a Monday."""
        assert mjd_to_iso_weekday(ymd_to_mjd(1970, 1, 1)) == THURSDAY
        assert mjd_to_iso_weekday(ymd_to_mjd(2024, 1, 1)) == MONDAY


class TestLenientComposition:
    """Tests for lenient composition of wall-clock fields."""

    def test_epoch(self) -> None:
        """The epoch composes to zero."""
        assert compose_local_millis(1970, 1, 1) == 0

    def test_month_thirteen_rolls_into_next_year(self) -> None:
        """Month 13 is January of the next year."""
        assert compose_local_millis(2019, 13, 1) == compose_local_millis(2020, 1, 1)

    def test_month_zero_is_previous_december(self) -> None:
        """Month 0 is December of the previous year."""
        assert compose_local_millis(2020, 0, 15) == compose_local_millis(2019, 12, 15)

    def test_day_zero_is_last_day_of_previous_month(self) -> None:
        """Day 0 is the last day of the previous month."""
        assert compose_local_millis(2024, 3, 0) == compose_local_millis(2024, 2, 29)

    def test_hour_24_is_next_midnight(self) -> None:
        """Hour 24 is midnight of the next day."""
        assert compose_local_millis(2024, 1, 1, 24) == compose_local_millis(2024, 1, 2)

    def test_decompose_negative_millis(self) -> None:
        """One millisecond before the epoch is 1969-12-31 23:59:59.999."""
        assert decompose_local_millis(-1) == (1969, 12, 31, 23, 59, 59, 999)

    def test_decompose_inverts_compose(self) -> None:
        """Decomposition returns the composed fields."""
        millis = compose_local_millis(2024, 2, 29, 13, 45, 30, 250)
        assert decompose_local_millis(millis) == (2024, 2, 29, 13, 45, 30, 250)

    def test_one_day_of_millis(self) -> None:
        """Consecutive days are one day of millis apart."""
        delta = compose_local_millis(2024, 3, 1) - compose_local_millis(2024, 2, 29)
        assert delta == MILLIS_PER_DAY


class TestWeekNumbering:
    """Tests for week-of-year numbering under different week rules."""

    def test_first_week_starts_before_period(self) -> None:
        """With Sunday-first weeks, week 1 of 2024 starts on Dec 31 2023."""
        assert first_week_start(MONDAY, SUNDAY, 1) == 0

    def test_first_week_too_short(self) -> None:
        """A 3-day first week does not satisfy a minimum of 4 days."""
        # 2021-01-01 was a Friday
        assert first_week_start(5, MONDAY, 4) == 4

    def test_sunday_first_new_year(self) -> None:
        """Sunday Dec 31 2023 belongs to week 1 of 2024 with Sunday-first weeks."""
        assert week_of_year(2023, 12, 31, SUNDAY, 1) == 1
        assert week_of_year(2024, 1, 6, SUNDAY, 1) == 1
        assert week_of_year(2024, 1, 7, SUNDAY, 1) == 2

    def test_iso_week_53(self) -> None:
        """ISO weeks: 2021-01-01 is in week 53 of 2020."""
        assert week_of_year(2021, 1, 1, MONDAY, 4) == 53
        assert week_of_year(2020, 12, 31, MONDAY, 4) == 53

    def test_iso_week_one_in_december(self) -> None:
        """ISO weeks: 2024-12-30 is in week 1 of 2025."""
        assert week_of_year(2024, 12, 30, MONDAY, 4) == 1
        assert week_of_year(2024, 12, 29, MONDAY, 4) == 52

    def test_minimal_days_zero_behaves_as_one(self) -> None:
        """A minimal-days value of 0 is treated as 1."""
        assert week_of_year(2021, 1, 1, MONDAY, 0) == week_of_year(2021, 1, 1, MONDAY, 1)
