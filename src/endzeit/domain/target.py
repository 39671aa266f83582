"""Combine resolved date, time and offset into one target instant."""

from __future__ import annotations

from datetime import datetime, time, timedelta

from endzeit.domain.errors import PastTargetError, TargetRangeError
from endzeit.domain.models import ResolvedDate, ResolvedTime, TargetTimestamp

MIDNIGHT = time(0, 0, 0)


def compute_target(
    now: datetime,
    date: ResolvedDate | None = None,
    time_of_day: ResolvedTime | None = None,
    seconds_offset: int | None = None,
) -> TargetTimestamp:
    """Build the target instant relative to *now*.

    - No date: today's date from *now*.
    - No time: midnight, except when *seconds_offset* is given, in which
      case *now*'s time of day is the base ("N seconds from now").
    - The offset is added last, after date and time are combined.

    Raises:
        PastTargetError: The result is not strictly after *now*.
        TargetRangeError: The offset moves the result past the calendar
            bounds ``datetime`` can represent.
    """
    day = date.value if date is not None else now.date()

    if time_of_day is not None:
        clock = time_of_day.value
    elif seconds_offset is not None:
        clock = now.time()
    else:
        clock = MIDNIGHT

    instant = datetime.combine(day, clock, tzinfo=now.tzinfo)
    if seconds_offset is not None:
        try:
            instant += timedelta(seconds=seconds_offset)
        except OverflowError as exc:
            msg = (
                f"Target {instant.isoformat(sep=' ')} + {seconds_offset}s is out of range, "
                f"the latest supported target is {datetime.max.isoformat(sep=' ')}"
            )
            raise TargetRangeError(msg) from exc

    if instant <= now:
        msg = f"Target {instant.isoformat(sep=' ')} must be in the future"
        raise PastTargetError(msg)

    return TargetTimestamp(
        instant=instant,
        date_precision=date.precision if date is not None else None,
        time_precision=time_of_day.precision if time_of_day is not None else None,
        offset_seconds=seconds_offset,
    )
