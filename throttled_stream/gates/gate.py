from __future__ import annotations

from enum import Enum
from typing import Any, Generator

from throttled_stream.exceptions import GateAlreadyOwnedError
from throttled_stream.logging import Logger
from throttled_stream.logging.throttled_stream_logging_models import GateTrace


class GateSignal(Enum):
    PROCEED = "PROCEED"
    STOP = "STOP"


class BaseGate:
    """
    Shared wiring for gates.

    A gate is polled once per request cycle of the sequence that owns
    it and resolves to GateSignal.PROCEED or GateSignal.STOP. Only
    CountGate ever reports STOP. A gate belongs to at most one
    sequence for its whole lifetime.
    """

    def __init__(
        self,
        logger: Logger | None = None,
    ) -> None:
        self._logger = logger or Logger()
        self._polls: int = 0
        self._owner: Any | None = None

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def polls(self) -> int:
        """Number of times this gate has been resolved."""
        return self._polls

    @property
    def owner(self) -> Any | None:
        return self._owner

    def attach(self, owner: Any) -> None:
        if self._owner is not None and self._owner is not owner:
            raise GateAlreadyOwnedError(
                f"Err. - {self.name} is already attached to another sequence"
            )

        self._owner = owner

    async def poll(self) -> GateSignal:
        raise NotImplementedError("Gate subclasses must implement poll()")

    def __await__(self) -> Generator[Any, None, GateSignal]:
        return self.poll().__await__()

    async def _trace(self, signal: GateSignal):
        await self._logger.log(
            GateTrace(
                message=f"{self.name} resolved with {signal.value}",
                gate=self.name,
                polls=self._polls,
                signal=signal.value,
            ),
            stacklevel=2,
        )
