"""CountdownService: resolve the target, then wait for it.

Input errors (bad date, bad time, target in the past) are detected
before any waiting begins and come back as a failed ServiceResult.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

import structlog

from endzeit.domain.errors import EndzeitError
from endzeit.domain.models import CountdownRequest, TargetTimestamp
from endzeit.domain.resolver import resolve_date, resolve_time
from endzeit.domain.target import compute_target
from endzeit.services.base import BaseService
from endzeit.services.engine import CountdownEngine, TickCallback
from endzeit.services.result import ServiceError, ServiceResult
from endzeit.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from endzeit.config.settings import EndzeitSettings

log = structlog.get_logger(__name__)


def _ignore_tick(_state: object) -> None:
    """Tick callback used when nothing should be drawn."""


class CountdownService(BaseService):
    """Plans and runs a single countdown."""

    def __init__(
        self,
        settings: EndzeitSettings,
        *,
        engine: CountdownEngine | None = None,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        super().__init__(settings)
        self._engine = engine or CountdownEngine(
            tick_interval_ms=settings.countdown.tick_interval_ms
        )
        self._now = now

    @staticmethod
    def resolve_target(request: CountdownRequest, now: datetime) -> TargetTimestamp:
        """Resolve *request* against *now*. Raises on invalid input."""
        date = resolve_date(request.date) if request.date is not None else None
        time_of_day = resolve_time(request.time) if request.time is not None else None
        return compute_target(now, date, time_of_day, request.seconds)

    @traced
    def run(
        self,
        request: CountdownRequest,
        on_tick: TickCallback | None = None,
        *,
        cancel: threading.Event | None = None,
    ) -> ServiceResult:
        """Resolve the target and block until it is reached (or cancelled)."""
        op = "countdown"
        now = self._now()
        try:
            with trace_span("resolve_target"):
                target = self.resolve_target(request, now)
        except EndzeitError as exc:
            log.debug("countdown.rejected", code=exc.code, reason=str(exc))
            return self._failure(op, exc, **request.model_dump(exclude_none=True))

        data = _target_data(target, now)
        log.debug("countdown.start", **data)

        with trace_span("wait") as span:
            outcome = self._engine.run(
                target.instant, now, on_tick or _ignore_tick, cancel=cancel
            )
            if span is not None:
                span.annotate("ticks", outcome.ticks)

        data.update(elapsed_seconds=outcome.state.elapsed_seconds, ticks=outcome.ticks)
        if outcome.cancelled:
            return ServiceResult(
                ok=False,
                op=op,
                data=data,
                error=ServiceError(
                    code="CANCELLED",
                    message="Countdown cancelled before the target was reached",
                    detail={"elapsed_seconds": outcome.state.elapsed_seconds},
                ),
            )
        log.debug("countdown.complete", target=data["target"], ticks=outcome.ticks)
        return ServiceResult(ok=True, op=op, data=data)


def _target_data(target: TargetTimestamp, now: datetime) -> dict[str, object]:
    data: dict[str, object] = {
        "target": target.instant.isoformat(sep=" ", timespec="seconds"),
        "total_seconds": max(int((target.instant - now).total_seconds()), 0),
    }
    if target.date_precision is not None:
        data["date_precision"] = str(target.date_precision)
    if target.time_precision is not None:
        data["time_precision"] = str(target.time_precision)
    if target.offset_seconds is not None:
        data["offset_seconds"] = target.offset_seconds
    return data
