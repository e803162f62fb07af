from __future__ import annotations

from .clock import Clock, MonotonicClock


class SleepTimer:
    """
    Single-shot timer with an absolute deadline.

    The timer can be re-armed for a new deadline with reset() without
    allocating a new timer, mirroring a platform timer handle.
    """

    __slots__ = ("_clock", "_deadline")

    def __init__(
        self,
        deadline: float,
        clock: Clock | None = None,
    ) -> None:
        self._clock = clock or MonotonicClock()
        self._deadline = deadline

    @classmethod
    def after(
        cls,
        duration: float,
        clock: Clock | None = None,
    ) -> SleepTimer:
        clock = clock or MonotonicClock()
        return cls(clock.now() + duration, clock=clock)

    @property
    def deadline(self) -> float:
        return self._deadline

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def is_elapsed(self) -> bool:
        return self._clock.now() >= self._deadline

    def reset(self, deadline: float) -> None:
        self._deadline = deadline

    async def wait(self) -> float:
        """Wait for the deadline and return it (the scheduled fire instant)."""
        await self._clock.sleep_until(self._deadline)
        return self._deadline
