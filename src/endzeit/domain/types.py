"""Precision tags for partially specified dates and times.

A precision tag records how much of a value the user actually typed,
which in turn decides which components get default-filled.
"""

from __future__ import annotations

from enum import StrEnum


class DatePrecision(StrEnum):
    """How much of a calendar date was given explicitly."""

    YEAR = "year"
    YEAR_MONTH = "year_month"
    FULL = "full"


class TimePrecision(StrEnum):
    """How much of a wall-clock time was given explicitly."""

    HOUR_MINUTE = "hour_minute"
    FULL = "full"
