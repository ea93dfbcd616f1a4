"""Process-wide defaults for constructing temporal values.

Settings only fill in arguments a caller leaves out when a value is
built. Once a DateTime exists it carries its own timezone and week
configuration, and every field computation uses those.

Environment variables read by ``Settings.from_env``:
    DATEKIT_TIMEZONE                     zone id or offset ("Asia/Shanghai", "+08:00")
    DATEKIT_FIRST_DAY_OF_WEEK            weekday name or ISO number ("MONDAY", "1")
    DATEKIT_MINIMAL_DAYS_IN_FIRST_WEEK   integer 0-7, 0 meaning unset

Examples:
    >>> from datekit.config import configure, get_settings
    >>> from datekit.units.week import Week
    >>> _ = configure(first_day_of_week=Week.MONDAY)
    >>> get_settings().first_day_of_week
    <Week.MONDAY: 1>
"""

from __future__ import annotations

import dataclasses
import os
import threading
from dataclasses import dataclass
from typing import Mapping

from datekit.errors import ValidationError
from datekit.units.week import Week

_ENV_TIMEZONE = "DATEKIT_TIMEZONE"
_ENV_FIRST_DAY = "DATEKIT_FIRST_DAY_OF_WEEK"
_ENV_MINIMAL_DAYS = "DATEKIT_MINIMAL_DAYS_IN_FIRST_WEEK"


@dataclass(frozen=True)
class Settings:
    """Defaults applied when a value is constructed without them.

    Attributes:
        default_timezone: Zone identifier, or None for the system zone.
        first_day_of_week: Weekday that starts a week.
        minimal_days_in_first_week: Minimal days of week 1; 0 means unset.
    """

    default_timezone: str | None = None
    first_day_of_week: Week = Week.SUNDAY
    minimal_days_in_first_week: int = 0

    def __post_init__(self) -> None:
        # Accept anything Week.of accepts ("MONDAY", 1) and store the enum
        object.__setattr__(self, "first_day_of_week", Week.of(self.first_day_of_week))
        if self.default_timezone is not None and not isinstance(self.default_timezone, str):
            raise ValidationError(
                "default_timezone must be a zone id string, "
                f"got {type(self.default_timezone).__name__}"
            )
        minimal_days = self.minimal_days_in_first_week
        if isinstance(minimal_days, bool) or not isinstance(minimal_days, int):
            raise ValidationError(
                "minimal_days_in_first_week must be an integer, "
                f"got {type(minimal_days).__name__}"
            )
        if not 0 <= minimal_days <= 7:
            raise ValidationError(
                "minimal_days_in_first_week must be between 0 and 7, "
                f"got {self.minimal_days_in_first_week}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Raises:
            ValidationError: If a variable holds an unusable value.
        """
        env = os.environ if environ is None else environ

        kwargs: dict[str, object] = {}
        zone = env.get(_ENV_TIMEZONE, "").strip()
        if zone:
            kwargs["default_timezone"] = zone

        first_day = env.get(_ENV_FIRST_DAY, "").strip()
        if first_day:
            kwargs["first_day_of_week"] = Week.of(
                int(first_day) if first_day.isdigit() else first_day
            )

        minimal_days = env.get(_ENV_MINIMAL_DAYS, "").strip()
        if minimal_days:
            try:
                kwargs["minimal_days_in_first_week"] = int(minimal_days)
            except ValueError:
                raise ValidationError(
                    f"{_ENV_MINIMAL_DAYS} must be an integer, got {minimal_days!r}"
                ) from None

        return cls(**kwargs)  # type: ignore[arg-type]


_lock = threading.Lock()
_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the active settings, reading the environment on first use."""
    global _settings
    with _lock:
        if _settings is None:
            _settings = Settings.from_env()
        return _settings


def configure(settings: Settings | None = None, **overrides: object) -> Settings:
    """Replace the active settings.

    Args:
        settings: A complete Settings object; defaults to the current ones.
        **overrides: Individual fields to change.

    Returns:
        The settings now in effect.
    """
    global _settings
    base = settings if settings is not None else get_settings()
    updated = dataclasses.replace(base, **overrides) if overrides else base
    with _lock:
        _settings = updated
    return updated


def reset_settings() -> None:
    """Forget configured settings so the environment is read again."""
    global _settings
    with _lock:
        _settings = None


__all__ = ["Settings", "get_settings", "configure", "reset_settings"]
