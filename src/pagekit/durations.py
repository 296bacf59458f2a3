# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Duration formatting ("1:05:30", "1h 5m 30s", "1 hour 5 minutes") and parsing."""

from __future__ import annotations

import math
import re
from enum import StrEnum

from pagekit.errors import InvalidDurationError

_INT_PREFIX_RE = re.compile(r"\s*([+-]?\d+)")


class TimeFormat(StrEnum):
    DIGITAL = "digital"  # 5:30 / 1:05:30
    LONG = "long"  # 1 hour 5 minutes 30 seconds
    SHORT = "short"  # 1h 5m 30s
    COMPACT = "compact"  # always H:MM:SS


class RoundingMode(StrEnum):
    FLOOR = "floor"
    CEIL = "ceil"
    ROUND = "round"


def _round_seconds(seconds: float, mode: RoundingMode) -> int:
    if mode is RoundingMode.CEIL:
        return math.ceil(seconds)
    if mode is RoundingMode.ROUND:
        floor = math.floor(seconds)
        return floor + (seconds - floor >= 0.5)
    return math.floor(seconds)


def _pluralize(word: str, count: int) -> str:
    return word if count == 1 else f"{word}s"


def _format_digital(
    hours: int, minutes: int, seconds: int, show_hours: bool, pad_minutes: bool, separator: str
) -> str:
    if show_hours:
        parts = [str(hours), f"{minutes:02d}"]
    else:
        parts = [f"{minutes:02d}" if pad_minutes else str(minutes)]
    parts.append(f"{seconds:02d}")
    return separator.join(parts)


def _format_words(hours: int, minutes: int, seconds: int, show_hours: bool, *, long: bool) -> str:
    units = (("hour", "h", hours if show_hours else 0), ("minute", "m", minutes), ("second", "s", seconds))
    parts = []
    for word, abbrev, count in units:
        if count > 0 or (word == "second" and not parts):
            parts.append(f"{count} {_pluralize(word, count)}" if long else f"{count}{abbrev}")
    return " ".join(parts)


def format_time(
    seconds: float,
    *,
    format: TimeFormat | str = TimeFormat.DIGITAL,
    always_show_hours: bool = False,
    rounding_mode: RoundingMode | str = RoundingMode.FLOOR,
    pad_minutes: bool = True,
    separator: str = ":",
) -> str:
    """Format a non-negative number of seconds.

    >>> format_time(65)
    '01:05'
    >>> format_time(3665)
    '1:01:05'
    >>> format_time(65, format="short")
    '1m 5s'
    >>> format_time(65, format="long")
    '1 minute 5 seconds'
    """
    if not math.isfinite(seconds):
        raise InvalidDurationError("format_time: seconds must be a finite number")
    if seconds < 0:
        raise InvalidDurationError("format_time: seconds must be non-negative")

    total = _round_seconds(seconds, RoundingMode(rounding_mode))
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    show_hours = hours > 0 or always_show_hours

    style = TimeFormat(format)
    if style is TimeFormat.LONG:
        return _format_words(hours, minutes, secs, show_hours, long=True)
    if style is TimeFormat.SHORT:
        return _format_words(hours, minutes, secs, show_hours, long=False)
    if style is TimeFormat.COMPACT:
        return _format_digital(hours, minutes, secs, True, pad_minutes, separator)
    return _format_digital(hours, minutes, secs, show_hours, pad_minutes, separator)


def parse_time(text: str, separator: str = ":") -> int:
    """Parse "SS", "MM:SS" or "HH:MM:SS" back to seconds.

    Components are read like integers with an optional trailing remainder
    ("05s" reads as 5); negative or non-numeric components are rejected.
    """
    if not text or not isinstance(text, str):
        raise InvalidDurationError("parse_time: text must be a non-empty string")

    values = []
    for part in text.split(separator):
        match = _INT_PREFIX_RE.match(part)
        number = int(match.group(1)) if match else None
        if number is None or number < 0:
            raise InvalidDurationError(f'parse_time: invalid time component "{part}"')
        values.append(number)

    if len(values) > 3:
        raise InvalidDurationError("parse_time: text must have 1-3 components (SS, MM:SS, or HH:MM:SS)")

    total = 0
    for value in values:
        total = total * 60 + value
    return total
