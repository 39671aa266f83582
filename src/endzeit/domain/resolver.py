"""Resolve partial date and time strings into full values.

Accepted dates, tried in order (first match wins)::

    YYYY-MM-DD   full
    DD.MM.YYYY   full
    MM/YYYY      year + month  -> day 1
    YYYY         year          -> January 1

Accepted times (24-hour)::

    HH:MM        -> second 0
    HH:MM:SS

Precision comes from which pattern matched, never from string length.
Callers handle absent input; these functions only see non-empty strings.
"""

from __future__ import annotations

import re
from datetime import date, time

from endzeit.domain.errors import DateFormatError, TimeFormatError
from endzeit.domain.models import ResolvedDate, ResolvedTime
from endzeit.domain.types import DatePrecision, TimePrecision


def _pattern(regex: str) -> re.Pattern[str]:
    # ``\d`` must not match non-ASCII digits such as full-width ones.
    return re.compile(regex, re.ASCII)


DATE_PATTERNS: list[tuple[re.Pattern[str], DatePrecision]] = [
    (_pattern(r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})$"), DatePrecision.FULL),
    (_pattern(r"^(?P<day>\d{2})\.(?P<month>\d{2})\.(?P<year>\d{4})$"), DatePrecision.FULL),
    (_pattern(r"^(?P<month>\d{2})/(?P<year>\d{4})$"), DatePrecision.YEAR_MONTH),
    (_pattern(r"^(?P<year>\d{4})$"), DatePrecision.YEAR),
]

TIME_PATTERNS: list[tuple[re.Pattern[str], TimePrecision]] = [
    (
        _pattern(r"^(?P<hour>\d{1,2}):(?P<minute>\d{2}):(?P<second>\d{2})$"),
        TimePrecision.FULL,
    ),
    (_pattern(r"^(?P<hour>\d{1,2}):(?P<minute>\d{2})$"), TimePrecision.HOUR_MINUTE),
]

DATE_FORMATS_HINT = "YYYY-MM-DD, DD.MM.YYYY, MM/YYYY or YYYY"
TIME_FORMATS_HINT = "HH:MM or HH:MM:SS"


def resolve_date(text: str) -> ResolvedDate:
    """Parse *text* into a :class:`ResolvedDate`.

    Raises:
        DateFormatError: No pattern matched, or the match names a date
            that does not exist (``2025-02-30``).
    """
    raw = text.strip()
    for pattern, precision in DATE_PATTERNS:
        match = pattern.match(raw)
        if match is None:
            continue
        parts = match.groupdict()
        try:
            value = date(
                int(parts["year"]),
                int(parts.get("month") or 1),
                int(parts.get("day") or 1),
            )
        except ValueError as exc:
            msg = f"Invalid date '{text}': {exc}"
            raise DateFormatError(msg) from exc
        return ResolvedDate(value=value, precision=precision)

    msg = f"Invalid date format '{text}', use {DATE_FORMATS_HINT}"
    raise DateFormatError(msg)


def resolve_time(text: str) -> ResolvedTime:
    """Parse *text* into a :class:`ResolvedTime`.

    Raises:
        TimeFormatError: No pattern matched, or a field is out of range.
    """
    raw = text.strip()
    for pattern, precision in TIME_PATTERNS:
        match = pattern.match(raw)
        if match is None:
            continue
        parts = match.groupdict()
        try:
            value = time(
                int(parts["hour"]),
                int(parts["minute"]),
                int(parts.get("second") or 0),
            )
        except ValueError as exc:
            msg = f"Invalid time '{text}': {exc}"
            raise TimeFormatError(msg) from exc
        return ResolvedTime(value=value, precision=precision)

    msg = f"Invalid time format '{text}', use {TIME_FORMATS_HINT}"
    raise TimeFormatError(msg)
