"""Era enumeration for BCE/CE designation.

This module provides the Era enum for distinguishing between
Before Common Era (BCE) and Common Era (CE) dates.
"""

from __future__ import annotations

from enum import Enum


class Era(Enum):
    """Historical era designation.

    Year 0 exists (astronomical convention) and is considered BCE.
    The field value follows the Gregorian calendar convention used by
    ``DateField.ERA``: 0 for BCE, 1 for CE.

    Examples:
        >>> Era.of_year(2024)
        <Era.CE: 'CE'>
        >>> Era.of_year(0).field_value
        0
    """

    BCE = "BCE"  # Before Common Era
    CE = "CE"  # Common Era

    @classmethod
    def of_year(cls, year: int) -> Era:
        """Return the era of an astronomical year."""
        return cls.CE if year > 0 else cls.BCE

    @property
    def is_before_common_era(self) -> bool:
        """Return True if this era is Before Common Era."""
        return self == Era.BCE

    @property
    def field_value(self) -> int:
        """Return the integer reported by ``get_field(DateField.ERA)``."""
        return 0 if self == Era.BCE else 1


__all__ = ["Era"]
