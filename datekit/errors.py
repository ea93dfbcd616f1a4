"""Datekit exception hierarchy.

All Datekit-specific exceptions inherit from DatekitError.
"""

from __future__ import annotations


class DatekitError(Exception):
    """Base exception for all Datekit errors."""

    pass


class ValidationError(DatekitError):
    """Invalid input values.

    Raised when a temporal value is out of range or invalid.

    Examples:
        - Month value outside 1-12
        - Year outside the supported range
    """

    pass


class InvalidFieldError(ValidationError):
    """A calendar field operation is not allowed or yields an invalid date.

    Examples:
        - Setting or offsetting the ERA field
        - Day 31 in a 30-day month when strict validation is requested
        - A recognized date string carrying month 13
    """

    pass


class ParseError(DatekitError):
    """Failed to parse string representation.

    Examples:
        - Text does not match the requested pattern
        - Unknown month or weekday name
    """

    pass


class UnrecognizedFormatError(ParseError):
    """No known textual shape matched the input.

    Raised by the recognizer after every shape rule was tried.

    Examples:
        - "164:25:15"
        - "2019 06 04 16:25:15"
    """

    pass


class NullOrBlankInputError(DatekitError):
    """A required argument is missing, None, or blank.

    Examples:
        - parse("   ")
        - Interval(None, end)
    """

    pass


class ImmutableViolationError(DatekitError):
    """A raw epoch set was requested on an immutable value."""

    pass


class TimezoneError(DatekitError):
    """Invalid or unknown timezone.

    Examples:
        - Unknown IANA identifier ("Mars/Olympus")
        - Offset outside valid range (-14h to +14h)
    """

    pass


__all__ = [
    "DatekitError",
    "ValidationError",
    "InvalidFieldError",
    "ParseError",
    "UnrecognizedFormatError",
    "NullOrBlankInputError",
    "ImmutableViolationError",
    "TimezoneError",
]
