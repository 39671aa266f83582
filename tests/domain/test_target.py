"""Tests for target computation from resolved date, time and offset."""

from datetime import date, datetime, time, timedelta

import pytest

from endzeit.domain.errors import PastTargetError, TargetRangeError
from endzeit.domain.models import ResolvedDate, ResolvedTime
from endzeit.domain.target import compute_target
from endzeit.domain.types import DatePrecision, TimePrecision

NOW = datetime(2026, 3, 14, 15, 9, 26, 535000)


def _date(y: int, m: int, d: int, precision: DatePrecision = DatePrecision.FULL) -> ResolvedDate:
    return ResolvedDate(value=date(y, m, d), precision=precision)


def _time(h: int, m: int, s: int = 0) -> ResolvedTime:
    return ResolvedTime(value=time(h, m, s), precision=TimePrecision.FULL)


class TestComputeTarget:
    def test_date_and_time(self) -> None:
        target = compute_target(NOW, _date(2030, 1, 1), _time(0, 0, 0))
        assert target.instant == datetime(2030, 1, 1, 0, 0, 0)
        assert target.date_precision == DatePrecision.FULL
        assert target.time_precision == TimePrecision.FULL
        assert target.offset_seconds is None

    def test_time_only_uses_today(self) -> None:
        target = compute_target(NOW, time_of_day=_time(18, 30))
        assert target.instant == datetime(2026, 3, 14, 18, 30)
        assert target.date_precision is None

    def test_date_only_uses_midnight(self) -> None:
        target = compute_target(NOW, _date(2026, 3, 15))
        assert target.instant == datetime(2026, 3, 15, 0, 0, 0)

    def test_year_only_date(self) -> None:
        target = compute_target(
            datetime(2024, 6, 1), ResolvedDate(value=date(2025, 1, 1), precision=DatePrecision.YEAR)
        )
        assert target.instant == datetime(2025, 1, 1, 0, 0, 0)
        assert target.date_precision == DatePrecision.YEAR

    def test_seconds_only_counts_from_now(self) -> None:
        target = compute_target(NOW, seconds_offset=5)
        assert target.instant == NOW + timedelta(seconds=5)
        assert target.offset_seconds == 5

    def test_seconds_with_date_uses_current_time_of_day(self) -> None:
        target = compute_target(NOW, _date(2026, 3, 20), seconds_offset=60)
        assert target.instant == datetime(2026, 3, 20, 15, 10, 26, 535000)

    def test_seconds_added_after_explicit_time(self) -> None:
        target = compute_target(NOW, _date(2026, 3, 20), _time(12, 0), seconds_offset=90)
        assert target.instant == datetime(2026, 3, 20, 12, 1, 30)

    def test_offset_can_rescue_a_past_time(self) -> None:
        """The future check runs after the offset, not before."""
        target = compute_target(NOW, time_of_day=_time(15, 0), seconds_offset=3600)
        assert target.instant == datetime(2026, 3, 14, 16, 0)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"date": _date(2020, 1, 1)},
            {"time_of_day": _time(0, 0)},
            {"date": _date(2026, 3, 14), "time_of_day": _time(15, 9, 26)},
            {"seconds_offset": 0},
            {"seconds_offset": -10},
            {"date": _date(2030, 1, 1), "seconds_offset": -(10**9)},
        ],
    )
    def test_past_target_rejected(self, kwargs: dict) -> None:
        with pytest.raises(PastTargetError, match="must be in the future"):
            compute_target(NOW, **kwargs)

    def test_nothing_given_is_midnight_today(self) -> None:
        with pytest.raises(PastTargetError):
            compute_target(NOW)

    def test_error_code(self) -> None:
        with pytest.raises(PastTargetError) as exc_info:
            compute_target(NOW, _date(2020, 1, 1))
        assert exc_info.value.code == "PAST_TARGET"

    def test_target_is_frozen(self) -> None:
        target = compute_target(NOW, seconds_offset=5)
        with pytest.raises(Exception):
            target.instant = NOW  # type: ignore[misc]


class TestTargetRange:
    def test_offset_beyond_timedelta_range(self) -> None:
        with pytest.raises(TargetRangeError, match="out of range"):
            compute_target(NOW, seconds_offset=100_000_000_000_000)

    def test_offset_past_last_representable_day(self) -> None:
        with pytest.raises(TargetRangeError, match="9999-12-31 23:59:59"):
            compute_target(NOW, _date(9999, 12, 31), _time(23, 59, 59), seconds_offset=5)

    def test_large_negative_offset(self) -> None:
        with pytest.raises(TargetRangeError):
            compute_target(NOW, seconds_offset=-100_000_000_000_000)

    def test_last_representable_second_is_accepted(self) -> None:
        target = compute_target(NOW, _date(9999, 12, 31), _time(23, 59, 58), seconds_offset=1)
        assert target.instant == datetime(9999, 12, 31, 23, 59, 59)

    def test_error_code(self) -> None:
        with pytest.raises(TargetRangeError) as exc_info:
            compute_target(NOW, seconds_offset=100_000_000_000_000)
        assert exc_info.value.code == "TARGET_OUT_OF_RANGE"
