"""Temporal units and enumerations.

This module provides:
    - DateField: Calendar fields addressable by get/set/offset
    - Era: BCE/CE era designation enum
    - TimeUnit: Fixed-length elapsed time units
    - Week, Month, Quarter: Calendar enumerations
    - Timezone: IANA or fixed-offset timezone
"""

from __future__ import annotations

from datekit.units.era import Era
from datekit.units.field import DateField
from datekit.units.timeunit import TimeUnit
from datekit.units.timezone import Timezone
from datekit.units.week import Month, Quarter, Week

__all__: list[str] = [
    "DateField",
    "Era",
    "Month",
    "Quarter",
    "TimeUnit",
    "Timezone",
    "Week",
]
