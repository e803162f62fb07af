from __future__ import annotations

from typing import (
    AsyncIterable,
    AsyncIterator,
    Generic,
    Iterable,
    TypeVar,
)

from throttled_stream.env import Env, load_env
from throttled_stream.gates import (
    BaseGate,
    CountGate,
    Duration,
    FixedDelayGate,
    Gate,
    GateSignal,
    IntervalGate,
)
from throttled_stream.logging import Logger, LoggingConfig
from throttled_stream.logging.throttled_stream_logging_models import (
    SequenceDebug,
    SequenceTrace,
)
from throttled_stream.timers import Clock

from .sequence_state import GatedSequenceState
from .sources import is_known_empty, to_async_iterator


T = TypeVar("T")


class ThrottledStream(Generic[T]):
    """
    Async iterator over any iterable or async iterable that can be
    chained with gates:

        async for item in throttled(items).tick(1.0).max(4):
            ...

    On its own a ThrottledStream relays the source unchanged. Each
    chaining method wraps the current stream in a GatedSequence, which
    supports the same methods, so gates compose outward.
    """

    def __init__(
        self,
        source: AsyncIterable[T] | Iterable[T],
        env: Env | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._source = source
        self._inner: AsyncIterator[T] | None = to_async_iterator(source)
        self._env = env
        self._logger = logger or Logger()

        if env is not None:
            _apply_logging_config(env)

    @property
    def is_exhausted(self) -> bool:
        return self._inner is None or is_known_empty(self._source)

    def __aiter__(self) -> AsyncIterator[T]:
        return self

    async def __anext__(self) -> T:
        if self._inner is None:
            raise StopAsyncIteration

        try:
            return await anext(self._inner)

        except StopAsyncIteration:
            self._inner = None
            raise

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self):
        inner = self._inner
        self._inner = None

        await _close_iterator(inner)

    async def collect(self) -> list[T]:
        return [item async for item in self]

    def gate(
        self,
        gate: Gate,
        name: str | None = None,
    ) -> GatedSequence[T]:
        return GatedSequence(
            self,
            gate,
            name=name,
            env=self._env,
            logger=self._logger,
        )

    def max(self, count: int) -> GatedSequence[T]:
        """Yield at most `count` items, then end even if the source has more."""
        return self.gate(
            CountGate(
                count,
                logger=self._logger,
            )
        )

    def sleep(
        self,
        duration: Duration | None = None,
        clock: Clock | None = None,
    ) -> GatedSequence[T]:
        """Wait a full `duration` before each item, without cumulative drift."""
        if duration is None:
            duration = self._get_env().default_delay_seconds()

        return self.gate(
            FixedDelayGate(
                duration,
                clock=clock,
                logger=self._logger,
            )
        )

    def tick(
        self,
        period: Duration | None = None,
        clock: Clock | None = None,
    ) -> GatedSequence[T]:
        """Release items no faster than one per `period`, on a fixed schedule."""
        if period is None:
            period = self._get_env().default_interval_seconds()

        return self.gate(
            IntervalGate(
                period,
                clock=clock,
                logger=self._logger,
            )
        )

    interval = tick

    def _get_env(self) -> Env:
        if self._env is None:
            self._env = load_env(Env)
            _apply_logging_config(self._env)

        return self._env


class GatedSequence(ThrottledStream[T]):
    """
    Interposes a gate between successive requests to an inner async
    iterator.

    Each request first drives the gate to resolution and only then asks
    the inner iterator for an item, so spacing is measured from gate
    resolution to gate resolution regardless of how long producing an
    item takes. The two are never awaited concurrently.

    A STOP signal ends the sequence without touching the inner iterator,
    and the end of the inner iterator ends the sequence whatever the
    gate would say next. Once terminated, every further request ends
    immediately without polling either one.
    """

    def __init__(
        self,
        source: AsyncIterable[T] | Iterable[T],
        gate: Gate,
        name: str | None = None,
        env: Env | None = None,
        logger: Logger | None = None,
    ) -> None:
        if not isinstance(gate, BaseGate):
            raise TypeError(
                f"Err. - expected a gate, got {type(gate).__name__}"
            )

        super().__init__(
            source,
            env=env,
            logger=logger,
        )

        gate.attach(self)

        self._gate: Gate | None = gate
        self._gate_name = gate.name
        self._name = name or f"{gate.name}Sequence"
        self._state = GatedSequenceState.AWAITING_GATE
        self._emitted: int = 0

        if is_known_empty(source) or (
            isinstance(source, ThrottledStream) and source.is_exhausted
        ):
            self._release()

    @property
    def name(self) -> str:
        return self._name

    @property
    def state(self) -> GatedSequenceState:
        return self._state

    @property
    def emitted(self) -> int:
        return self._emitted

    @property
    def gate_name(self) -> str:
        return self._gate_name

    @property
    def is_exhausted(self) -> bool:
        return self._state == GatedSequenceState.TERMINATED

    async def __anext__(self) -> T:
        if self._state == GatedSequenceState.TERMINATED:
            raise StopAsyncIteration

        self._state = GatedSequenceState.AWAITING_GATE
        signal = await self._gate.poll()

        if signal == GateSignal.STOP:
            await self._terminate("gate stopped", close_inner=True)
            raise StopAsyncIteration

        self._state = GatedSequenceState.AWAITING_INNER

        try:
            item = await anext(self._inner)

        except StopAsyncIteration:
            await self._terminate("inner sequence ended", close_inner=False)
            raise

        self._state = GatedSequenceState.AWAITING_GATE
        self._emitted += 1

        await self._logger.log(
            SequenceTrace(
                message=f"{self._name} emitted item {self._emitted}",
                sequence=self._name,
                gate=self._gate_name,
                emitted=self._emitted,
                state=self._state.value,
            )
        )

        return item

    async def aclose(self):
        if self._state == GatedSequenceState.TERMINATED:
            return

        await self._terminate("closed", close_inner=True)

    async def _terminate(
        self,
        reason: str,
        close_inner: bool,
    ):
        inner = self._inner
        self._release()

        if close_inner:
            await _close_iterator(inner)

        await self._logger.log(
            SequenceDebug(
                message=f"{self._name} terminated after {self._emitted} items - {reason}",
                sequence=self._name,
                gate=self._gate_name,
                emitted=self._emitted,
                reason=reason,
            )
        )

    def _release(self):
        self._state = GatedSequenceState.TERMINATED
        self._inner = None
        self._gate = None


def _apply_logging_config(env: Env):
    LoggingConfig().update(**env.get_logging_config())


async def _close_iterator(iterator: AsyncIterator | None):
    if iterator is None:
        return

    aclose = getattr(iterator, "aclose", None)
    if aclose is not None:
        await aclose()
