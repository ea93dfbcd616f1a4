"""Shape classification for date text.

This module holds the ordered chain of classifiers. Each classifier
looks at the text and either claims it, returning a RecognizedFormat
that knows how to parse it, or passes by returning None. The first
classifier that claims the text wins; the order matters because the
shapes overlap (an ISO string may contain "ut" of "UTC").

Internal module - use parse() and recognize() from datekit.infer instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from datekit.clock import Clock
from datekit.core.datetime import DateTime
from datekit.infer._formats import (
    CLOCK_ONLY_PATTERN,
    NORMALIZED_PATTERN,
    PURE_NUMERIC_LAYOUTS,
    PURE_NUMERIC_PATTERN,
    TEXT_TOKENS,
    FormatTag,
    normalize,
    parse_clock_only,
    parse_iso,
    parse_normalized,
    parse_pure_numeric,
    parse_textual,
)
from datekit.units.timezone import Timezone

Parser = Callable[[str, Timezone, Clock], DateTime]


@dataclass(frozen=True)
class RecognizedFormat:
    """A classified piece of date text.

    Attributes:
        tag: The shape the text was recognized as.
        text: The text handed to the parser (normalized for NORMALIZED).
        parser: Function turning the text into a DateTime, given the
            target zone and a clock.
    """

    tag: FormatTag
    text: str
    parser: Parser

    def parse(self, timezone: Timezone, clock: Clock) -> DateTime:
        return self.parser(self.text, timezone, clock)


Classifier = Callable[[str], Optional[RecognizedFormat]]


def _classify_pure_numeric(text: str) -> RecognizedFormat | None:
    if PURE_NUMERIC_PATTERN.match(text) and len(text) in PURE_NUMERIC_LAYOUTS:
        return RecognizedFormat(FormatTag.PURE_NUMERIC, text, parse_pure_numeric)
    return None


def _classify_clock_only(text: str) -> RecognizedFormat | None:
    if CLOCK_ONLY_PATTERN.match(text):
        return RecognizedFormat(FormatTag.CLOCK_ONLY, text, parse_clock_only)
    return None


def _classify_textual(text: str) -> RecognizedFormat | None:
    lowered = text.lower()
    if any(token in lowered for token in TEXT_TOKENS):
        return RecognizedFormat(FormatTag.JDK_TEXT, text, parse_textual)
    return None


def _classify_iso(text: str) -> RecognizedFormat | None:
    if "T" in text:
        return RecognizedFormat(FormatTag.ISO, text, parse_iso)
    return None


def _classify_normalized(text: str) -> RecognizedFormat | None:
    normalized = normalize(text)
    if NORMALIZED_PATTERN.match(normalized):
        return RecognizedFormat(FormatTag.NORMALIZED, normalized, parse_normalized)
    return None


CLASSIFIERS: tuple[Classifier, ...] = (
    _classify_pure_numeric,
    _classify_clock_only,
    _classify_textual,
    _classify_iso,
    _classify_normalized,
)


def classify(text: str) -> RecognizedFormat | None:
    """Run the classifier chain and return the first claim, if any."""
    for classifier in CLASSIFIERS:
        result = classifier(text)
        if result is not None:
            return result
    return None


__all__ = ["RecognizedFormat", "CLASSIFIERS", "classify"]
