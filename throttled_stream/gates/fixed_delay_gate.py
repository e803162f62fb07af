from __future__ import annotations

from throttled_stream.logging import Logger
from throttled_stream.logging.throttled_stream_logging_models import GateDebug
from throttled_stream.timers import (
    Clock,
    MonotonicClock,
    SleepTimer,
    missed_periods,
    next_deadline,
)

from .duration import Duration, to_seconds
from .gate import BaseGate, GateSignal


class FixedDelayGate(BaseGate):
    """
    Resolves once per duration, pacing items no faster than one per
    duration.

    The timer is armed for `duration` from construction. Each time it
    fires it is re-armed relative to the deadline it was *scheduled*
    for, not the moment the poll observed it, so overhead between
    firing and re-arming never accumulates into drift. A caller that
    falls behind by whole periods gets one immediate resolution, after
    which pacing resumes on the original grid.
    """

    def __init__(
        self,
        duration: Duration,
        clock: Clock | None = None,
        logger: Logger | None = None,
    ) -> None:
        super().__init__(logger=logger)
        self._duration = to_seconds(duration)
        self._clock = clock or MonotonicClock()
        self._timer = SleepTimer.after(
            self._duration,
            clock=self._clock,
        )

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def deadline(self) -> float:
        """The deadline the next poll() resolves at."""
        return self._timer.deadline

    async def poll(self) -> GateSignal:
        scheduled = await self._timer.wait()
        now = self._clock.now()

        self._timer.reset(
            next_deadline(scheduled, self._duration, now)
        )

        self._polls += 1

        if missed := missed_periods(scheduled, self._duration, now):
            await self._logger.log(
                GateDebug(
                    message=f"{self.name} skipped {missed} missed deadlines",
                    gate=self.name,
                    polls=self._polls,
                    missed=missed,
                )
            )

        await self._trace(GateSignal.PROCEED)

        return GateSignal.PROCEED
