"""Interfaces for traditional-calendar collaborators.

The library does not convert dates to the Chinese lunisolar calendar and
ships no festival data. It defines the shape of both so that a lunar
date provider and festival tables supplied by the caller can be combined
with DateTime values:

    LunarDate          a date in the lunisolar calendar with its labels
    LunarDateProvider  anything that maps a DateTime to a LunarDate
    FestivalRecord     one entry of a festival table
    FestivalTable      "month-day" keyed lookup of festival records

Examples:
    >>> table = FestivalTable({"1-15": [FestivalRecord("Lantern Festival")]})
    >>> [record.name for record in table.lookup(FestivalTable.key_of(1, 15))]
    ['Lantern Festival']
    >>> table.lookup("2-30")
    []
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Protocol, runtime_checkable

from datekit._internal.validation import require_not_blank, require_not_none
from datekit.core.datetime import BaseDateTime
from datekit.errors import InvalidFieldError


@dataclass(frozen=True)
class LunarDate:
    """A date in the lunisolar calendar.

    Attributes:
        year: Lunar year number.
        month: Lunar month, 1-12.
        day: Lunar day, 1-30.
        leap_month: True if the month is an intercalary month.
        year_gan_zhi: Stem-branch label of the year.
        month_gan_zhi: Stem-branch label of the month.
        day_gan_zhi: Stem-branch label of the day.
        solar_term: Name of the solar term on this day, or "" if none.
    """

    year: int
    month: int
    day: int
    leap_month: bool = False
    year_gan_zhi: str = ""
    month_gan_zhi: str = ""
    day_gan_zhi: str = ""
    solar_term: str = ""


@runtime_checkable
class LunarDateProvider(Protocol):
    """Converts a date-time value to its lunar date."""

    def lunar_of(self, value: BaseDateTime) -> LunarDate:
        ...


@dataclass(frozen=True)
class FestivalRecord:
    """One festival or observance on a lunar day.

    Attributes:
        name: Name of the day.
        result: Consequence text attached to the day.
        every_month: True if the observance repeats on this day every month.
        remark: Free-form note.
    """

    name: str
    result: str = ""
    every_month: bool = False
    remark: str = ""


class FestivalTable:
    """Read-only mapping from "month-day" keys to festival records.

    Keys use lunar month and day numbers without padding ("1-15").
    Records keep the order they were given in.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, Iterable[FestivalRecord]]) -> None:
        require_not_none(entries, "entries")
        self._entries: dict[str, tuple[FestivalRecord, ...]] = {
            key: tuple(records) for key, records in entries.items()
        }

    @staticmethod
    def key_of(month: int, day: int) -> str:
        """Build the lookup key for a lunar month and day.

        Raises:
            InvalidFieldError: If month is not 1-12 or day is not 1-30.
        """
        if not 1 <= month <= 12:
            raise InvalidFieldError(f"lunar month must be 1-12, got {month}")
        if not 1 <= day <= 30:
            raise InvalidFieldError(f"lunar day must be 1-30, got {day}")
        return f"{month}-{day}"

    def lookup(self, key: str) -> list[FestivalRecord]:
        """Return the records for a key, or an empty list."""
        return list(self._entries.get(require_not_blank(key, "key"), ()))

    def festivals_on(
        self,
        value: BaseDateTime,
        provider: LunarDateProvider,
    ) -> list[FestivalRecord]:
        """Return the festivals falling on the lunar day of a value."""
        require_not_none(value, "value")
        lunar = require_not_none(provider, "provider").lunar_of(value)
        return self.lookup(self.key_of(lunar.month, lunar.day))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        return f"FestivalTable({len(self._entries)} days)"


__all__ = [
    "LunarDate",
    "LunarDateProvider",
    "FestivalRecord",
    "FestivalTable",
]
