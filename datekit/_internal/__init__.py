"""Internal utilities for Datekit.

This module contains private implementation details:
    - Validation helpers
    - Constants and magic numbers
    - Calendar arithmetic

Note: This module is not part of the public API.
"""

from __future__ import annotations

from datekit._internal.validation import (
    require_not_blank,
    require_not_none,
    validate_day,
    validate_month,
    validate_time,
    validate_year,
)

__all__: list[str] = [
    "require_not_blank",
    "require_not_none",
    "validate_day",
    "validate_month",
    "validate_time",
    "validate_year",
]
