import asyncio
import time


class Clock:
    """
    Source of monotonic time plus the ability to suspend until an
    absolute deadline on that same timeline.

    Timers and gates only ever talk to a Clock, so tests can swap in
    a virtual clock and drive timing deterministically.
    """

    def now(self) -> float:
        raise NotImplementedError("Clock subclasses must implement now()")

    async def sleep_until(self, deadline: float) -> None:
        raise NotImplementedError("Clock subclasses must implement sleep_until()")


class MonotonicClock(Clock):
    __slots__ = ()

    def now(self) -> float:
        return time.monotonic()

    async def sleep_until(self, deadline: float) -> None:
        # The event loop may wake a handle up to one clock resolution early,
        # so keep sleeping until the deadline has really passed. A deadline
        # already in the past returns without suspending.
        remaining = deadline - time.monotonic()
        while remaining > 0:
            await asyncio.sleep(remaining)
            remaining = deadline - time.monotonic()
