from __future__ import annotations

from throttled_stream.exceptions import InvalidGateConfigError
from throttled_stream.logging import Logger
from throttled_stream.logging.throttled_stream_logging_models import GateDebug

from .gate import BaseGate, GateSignal


class CountGate(BaseGate):
    """
    Resolves immediately on every poll. Polls 1..max_count report
    PROCEED, every later poll reports STOP.
    """

    def __init__(
        self,
        max_count: int,
        logger: Logger | None = None,
    ) -> None:
        super().__init__(logger=logger)

        if isinstance(max_count, bool) or not isinstance(max_count, int):
            raise InvalidGateConfigError(
                f"Err. - max_count must be an int, got {type(max_count).__name__}"
            )

        if max_count < 0:
            raise InvalidGateConfigError(
                f"Err. - max_count must not be negative, got {max_count}"
            )

        self._max_count = max_count

    @property
    def max_count(self) -> int:
        return self._max_count

    @property
    def remaining(self) -> int:
        return max(0, self._max_count - self._polls)

    @property
    def exhausted(self) -> bool:
        return self._polls > self._max_count

    async def poll(self) -> GateSignal:
        self._polls += 1

        if self._polls <= self._max_count:
            await self._trace(GateSignal.PROCEED)
            return GateSignal.PROCEED

        if self._polls == self._max_count + 1:
            await self._logger.log(
                GateDebug(
                    message=f"{self.name} reached its limit of {self._max_count}",
                    gate=self.name,
                    polls=self._polls,
                )
            )

        await self._trace(GateSignal.STOP)

        return GateSignal.STOP
