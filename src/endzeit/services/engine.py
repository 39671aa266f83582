"""CountdownEngine — the blocking wait loop.

Elapsed time is measured with a single monotonic stopwatch started when
the run begins, so wall-clock adjustments and sleep overshoot never
skew progress. The clock and the sleep function are injectable, which
lets tests drive a multi-day countdown in microseconds.

States: WAITING -> COMPLETE, or WAITING -> CANCELLED when the optional
cancel token is set. Errors raised by the tick callback propagate.
"""

from __future__ import annotations

import logging
import math
import threading
import time
from collections.abc import Callable
from datetime import datetime

from endzeit.domain.models import CountdownOutcome, CountdownState

logger = logging.getLogger(__name__)

TickCallback = Callable[[CountdownState], None]


class CountdownEngine:
    """Emit one progress callback per tick until the target is reached."""

    def __init__(
        self,
        *,
        tick_interval_ms: int = 1000,
        clock: Callable[[], float] | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        if tick_interval_ms <= 0:
            msg = f"tick_interval_ms must be positive, got {tick_interval_ms}"
            raise ValueError(msg)
        self._interval = tick_interval_ms / 1000
        self._clock = clock or time.monotonic
        self._sleep = sleep or time.sleep

    def run(
        self,
        target: datetime,
        now: datetime,
        on_tick: TickCallback,
        *,
        cancel: threading.Event | None = None,
    ) -> CountdownOutcome:
        """Block until *target*, calling *on_tick* once per tick.

        ``total_seconds`` is ``floor(target - now)``, fixed for the run.
        While waiting, each callback sees ``elapsed_seconds < total``.
        A completed run ends with exactly one callback where
        ``elapsed_seconds == total_seconds``. A cancelled run returns
        without that final callback.
        """
        total = max(math.floor((target - now).total_seconds()), 0)
        state = CountdownState(target=target, total_seconds=total)
        ticks = 0
        start = self._clock()
        logger.debug("Countdown started: total=%ss interval=%ss", total, self._interval)

        while True:
            if cancel is not None and cancel.is_set():
                logger.debug("Countdown cancelled at %s/%ss", state.elapsed_seconds, total)
                return CountdownOutcome(state=state, ticks=ticks, cancelled=True)

            state.advance(math.floor(self._clock() - start))
            if state.complete:
                break

            on_tick(state)
            ticks += 1

            remaining = total - (self._clock() - start)
            self._sleep(min(self._interval, max(remaining, 0.0)))

        state.advance(total)
        on_tick(state)
        ticks += 1
        logger.debug("Countdown complete after %s ticks", ticks)
        return CountdownOutcome(state=state, ticks=ticks)
