from __future__ import annotations

import math

from .clock import Clock, MonotonicClock


class IntervalTimer:
    """
    Periodic timer anchored at a fixed start instant.

    Tick k is due at start + k * period. The first tick (k = 0) is due
    at the start instant itself. When one or more ticks were missed
    because the caller did not call tick() in time, the pending tick is
    delivered immediately and the timer skips ahead to the first
    boundary strictly after the current time, so missed ticks are
    coalesced into a single delivery and the schedule stays aligned.
    """

    __slots__ = (
        "_clock",
        "_period",
        "_start",
        "_index",
        "_missed",
    )

    def __init__(
        self,
        period: float,
        clock: Clock | None = None,
        start: float | None = None,
    ) -> None:
        self._clock = clock or MonotonicClock()
        self._period = period
        self._start = self._clock.now() if start is None else start
        self._index = 0
        self._missed = 0

    @property
    def period(self) -> float:
        return self._period

    @property
    def start(self) -> float:
        return self._start

    @property
    def next_tick(self) -> float:
        return self._start + self._index * self._period

    @property
    def missed_ticks(self) -> int:
        """Total number of ticks coalesced away so far."""
        return self._missed

    async def tick(self) -> float:
        """Wait for the pending tick and return its scheduled instant."""
        scheduled = self.next_tick
        await self._clock.sleep_until(scheduled)

        self._advance(self._clock.now())

        return scheduled

    def _advance(self, now: float) -> int:
        index = self._index + 1

        if self._start + index * self._period <= now:
            # Behind schedule - jump to the first boundary after now.
            caught_up = math.floor((now - self._start) / self._period) + 1
            skipped = caught_up - index
            index = caught_up
            self._missed += skipped

        else:
            skipped = 0

        self._index = index

        return skipped
