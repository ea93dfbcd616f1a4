"""Date text recognition without a caller-supplied pattern.

This module classifies an arbitrary date/time string into one of a small
set of known shapes and parses it accordingly.

Public API:
    parse: Parse date text of any recognized shape into a DateTime.
    recognize: Classify date text without parsing it.
    normalize: Rewrite separator variants into "yyyy-M-d H:m:s" form.
    FormatTag: The recognized shapes.
    RecognizedFormat: Classification result (tag, text, parser).

Shapes, tried in this order (the first that claims the text wins):
    1. PURE_NUMERIC  yyyyMMdd, yyyyMMddHHmmss, yyyyMMddHHmmssSSS, HHmmss
    2. CLOCK_ONLY    H:m or H:m:s on the current day
    3. JDK_TEXT      "Tue Jun 04 16:25:15 CST 2019", "Tue, 04 Jun 2019 08:25:15 GMT"
    4. ISO           "2019-06-04T16:25:15Z", "...+08:00", zone-less read as UTC
    5. NORMALIZED    "2019-06-04 16:25:15", "2019/6/4", "2019年6月4日 16时25分"

Before classification the text is trimmed and the CJK day and second
markers are removed. Text that no shape claims raises
UnrecognizedFormatError; nothing is ever guessed.

Examples:
    >>> from datekit.infer import parse, recognize
    >>> parse("2019-06-04 16:25:15", "UTC").to_ms_string()
    '2019-06-04 16:25:15.000'
    >>> recognize("20190604162515").tag
    <FormatTag.PURE_NUMERIC: 'pure_numeric'>
    >>> parse("2019-06-04T16:25:15+08:00").timezone.id
    '+08:00'
"""

from __future__ import annotations

import datetime as _datetime
import logging

from datekit._internal.validation import require_not_blank
from datekit.clock import Clock, default_clock
from datekit.core.datetime import DateTime
from datekit.errors import UnrecognizedFormatError
from datekit.infer._formats import FormatTag, normalize, strip_markers
from datekit.infer._patterns import RecognizedFormat, classify
from datekit.units.timezone import Timezone, resolve_timezone

logger = logging.getLogger(__name__)


def recognize(text: str) -> RecognizedFormat:
    """Classify date text into one of the known shapes.

    Args:
        text: The date/time string.

    Returns:
        The RecognizedFormat of the first classifier that claims the text.

    Raises:
        NullOrBlankInputError: If text is None or blank.
        UnrecognizedFormatError: If no shape claims the text.
    """
    cleaned = strip_markers(require_not_blank(text))
    result = classify(cleaned)
    if result is None:
        logger.debug("no shape claims %r", text)
        raise UnrecognizedFormatError(f"no recognized date format for {text!r}")
    logger.debug("classified %r as %s (%r)", text, result.tag.name, result.text)
    return result


def parse(
    text: str,
    timezone: Timezone | str | _datetime.tzinfo | None = None,
    clock: Clock | None = None,
) -> DateTime:
    """Parse date text of any recognized shape.

    Args:
        text: The date/time string.
        timezone: Zone for shapes that carry none; defaults to the
            configured default zone. A zone written in the text (ISO
            offsets, "Z", JDK and HTTP zone names) takes precedence, and
            zone-less ISO text is read as UTC.
        clock: Supplies "today" for clock-only text; defaults to the
            system clock.

    Returns:
        An immutable DateTime.

    Raises:
        NullOrBlankInputError: If text is None or blank.
        UnrecognizedFormatError: If no shape matches.
        InvalidFieldError: If a matched shape has an out-of-range field
            (month 13, February 30).

    Examples:
        >>> from datekit.clock import FixedClock
        >>> parse("08:30", "UTC", FixedClock(0)).to_ms_string()
        '1970-01-01 08:30:00.000'
    """
    recognized = recognize(text)
    zone = resolve_timezone(timezone)
    source = clock if clock is not None else default_clock()
    return recognized.parse(zone, source)


__all__ = [
    "FormatTag",
    "RecognizedFormat",
    "normalize",
    "parse",
    "recognize",
]
