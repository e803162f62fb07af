from __future__ import annotations

from throttled_stream.exceptions import InvalidGateConfigError
from throttled_stream.logging import Logger
from throttled_stream.logging.throttled_stream_logging_models import GateDebug
from throttled_stream.timers import (
    Clock,
    IntervalTimer,
    MonotonicClock,
)

from .duration import Duration, to_seconds
from .gate import BaseGate, GateSignal


class IntervalGate(BaseGate):
    """
    Resolves on the ticks of an absolute schedule, start + k * period,
    anchored when the gate is created. The first poll resolves at once.

    Ticks missed by a slow caller are coalesced: the next poll resolves
    immediately exactly once, and the schedule is not shifted, so the
    gate puts a ceiling on the rate without drifting by caller latency.
    """

    def __init__(
        self,
        period: Duration,
        clock: Clock | None = None,
        logger: Logger | None = None,
    ) -> None:
        super().__init__(logger=logger)

        self._period = to_seconds(period, name="period")
        if self._period <= 0:
            raise InvalidGateConfigError(
                f"Err. - period must be greater than zero, got {self._period}"
            )

        self._clock = clock or MonotonicClock()
        self._timer = IntervalTimer(
            self._period,
            clock=self._clock,
        )

    @property
    def period(self) -> float:
        return self._period

    @property
    def start(self) -> float:
        return self._timer.start

    @property
    def next_tick(self) -> float:
        return self._timer.next_tick

    @property
    def missed_ticks(self) -> int:
        return self._timer.missed_ticks

    async def poll(self) -> GateSignal:
        missed_before = self._timer.missed_ticks

        await self._timer.tick()

        self._polls += 1

        if missed := self._timer.missed_ticks - missed_before:
            await self._logger.log(
                GateDebug(
                    message=f"{self.name} coalesced {missed} missed ticks",
                    gate=self.name,
                    polls=self._polls,
                    missed=missed,
                )
            )

        await self._trace(GateSignal.PROCEED)

        return GateSignal.PROCEED
