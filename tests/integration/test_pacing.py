"""
Integration tests for pacing against the real monotonic clock.

Tests:
- FixedDelayGate spacing lower bound
- Drift does not accumulate with inner latency
- IntervalGate caps the rate after a stall
"""

import asyncio
import time

import pytest

from throttled_stream import throttled


DELAY = 0.05
SLACK = 0.04


class TestFixedDelayPacing:
    """Test sleep() pacing in real time."""

    @pytest.mark.asyncio
    async def test_spacing_lower_bound(self) -> None:
        emitted_at: list[float] = []

        started = time.monotonic()
        async for _ in throttled(range(5)).sleep(DELAY):
            emitted_at.append(time.monotonic())

        gaps = [later - earlier for earlier, later in zip(emitted_at, emitted_at[1:])]

        assert len(emitted_at) == 5
        assert all(gap >= DELAY / 2 for gap in gaps)
        assert emitted_at[0] - started >= DELAY
        assert emitted_at[-1] - started >= 5 * DELAY

    @pytest.mark.asyncio
    async def test_inner_latency_does_not_accumulate(self) -> None:
        count, latency = 8, DELAY / 2

        async def source():
            for item in range(count):
                await asyncio.sleep(latency)
                yield item

        started = time.monotonic()
        items = await throttled(source()).sleep(DELAY).max(count).collect()
        elapsed = time.monotonic() - started

        assert items == list(range(count))
        assert elapsed >= count * DELAY
        assert elapsed <= count * DELAY + count * latency + SLACK


class TestIntervalPacing:
    """Test tick() pacing in real time."""

    @pytest.mark.asyncio
    async def test_stall_releases_one_item_then_resumes_schedule(self) -> None:
        started = time.monotonic()
        stream = throttled(range(4)).tick(DELAY)

        assert await stream.__anext__() == 0

        await asyncio.sleep(DELAY * 3)

        released = time.monotonic()
        assert await stream.__anext__() == 1
        assert time.monotonic() - released < DELAY / 2

        # Next release waits for the 4 * period boundary of the original schedule
        assert await stream.__anext__() == 2
        assert time.monotonic() - started >= 4 * DELAY
